# backend/navigation/backup.py
"""
Snapshot, reset and restore of the navigation tree.

Backups are JSON arrays of menu objects (relations included) written to
``settings.NAVIGATION_BACKUP_DIR`` as
``navigation-backup-<timestamp>.json``.
"""
import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone as dt_timezone
from pathlib import Path

from django.conf import settings
from django.db import transaction

from media_library.models import MediaTag

from .models import MenuItem
from .seed import seed_navigation

logger = logging.getLogger(__name__)

BACKUP_PREFIX = "navigation-backup-"
RESET_LOG_PREFIX = "navigation-reset-"
RESET_LOG_SUFFIX = ".log.json"


class NavigationBackupError(Exception):
    pass


class BackupNotFound(NavigationBackupError):
    pass


class InvalidBackup(NavigationBackupError):
    pass


class NavigationResetError(NavigationBackupError):
    """
    A reset step after the backup failed.

    ``restored`` tells whether the compensating restore brought the menus
    back; when it is False the operator has to restore ``backup_path`` by hand.
    """

    def __init__(self, step, cause, restored, backup_path, restore_error=None):
        self.step = step
        self.cause = cause
        self.restored = restored
        self.backup_path = backup_path
        self.restore_error = restore_error
        state = "menus restored" if restored else f"restore failed: {restore_error}"
        super().__init__(f"Reset step '{step}' failed: {cause} ({state})")


def backup_timestamp(now: datetime | None = None) -> str:
    """ISO 8601 UTC with ':' and '.' replaced by '-', e.g. 2025-01-05T10-20-30-123Z."""
    now = (now or datetime.now(dt_timezone.utc)).astimezone(dt_timezone.utc)
    return now.strftime("%Y-%m-%dT%H-%M-%S-") + f"{now.microsecond // 1000:03d}Z"


def default_backup_dir() -> Path:
    return Path(getattr(settings, "NAVIGATION_BACKUP_DIR", Path.cwd() / "backups"))


def _unique_path(directory: Path, prefix: str, stamp: str, suffix: str = ".json") -> Path:
    path = directory / f"{prefix}{stamp}{suffix}"
    n = 1
    while path.exists():
        path = directory / f"{prefix}{stamp}-{n}{suffix}"
        n += 1
    return path


def serialize_menu(menu: MenuItem) -> dict:
    parent = menu.parent
    return {
        "id": menu.id,
        "slug": menu.slug,
        "name": menu.name,
        "type": menu.type,
        "icon": menu.icon,
        "link": menu.link,
        "inquiryLink": menu.inquiry_link,
        "order": menu.order,
        "visible": menu.visible,
        "isSystem": menu.is_system,
        "parentId": menu.parent_id,
        "parent": {"id": parent.id, "slug": parent.slug} if parent else None,
        "children": [{"id": c.id, "slug": c.slug} for c in menu.children.all()],
        "mediaTags": [{"id": t.id, "slug": t.slug} for t in menu.media_tags.all()],
    }


def backup_navigation(backup_dir=None) -> Path:
    """Write every menu to a new backup file and return its path. Deletes nothing."""
    directory = Path(backup_dir) if backup_dir else default_backup_dir()
    directory.mkdir(parents=True, exist_ok=True)

    menus = (
        MenuItem.objects.select_related("parent")
        .prefetch_related("children", "media_tags")
        .order_by("order", "id")
    )
    payload = [serialize_menu(menu) for menu in menus]

    path = _unique_path(directory, BACKUP_PREFIX, backup_timestamp())
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")

    logger.info("Backed up %s navigation menus to %s", len(payload), path)
    return path


def list_backups(backup_dir=None) -> list[Path]:
    directory = Path(backup_dir) if backup_dir else default_backup_dir()
    if not directory.exists():
        return []
    return sorted(directory.glob(f"{BACKUP_PREFIX}*.json"))


def load_backup(path) -> list[dict]:
    path = Path(path)
    if not path.exists():
        raise BackupNotFound(f"Backup file not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise InvalidBackup(f"Backup file is not valid JSON: {path}") from exc

    if not isinstance(data, list) or not all(isinstance(e, dict) for e in data):
        raise InvalidBackup(f"Backup file must contain a JSON array of menus: {path}")

    for i, entry in enumerate(data):
        if entry.get("id") is None or not entry.get("slug"):
            raise InvalidBackup(f"Menu #{i} in {path} has no id or slug")
    return data


def delete_all_menus() -> int:
    _, per_model = MenuItem.objects.all().delete()
    return per_model.get(MenuItem._meta.label, 0)


@dataclass
class RestoreReport:
    created: int = 0
    skipped: list = field(default_factory=list)
    id_mapping: dict = field(default_factory=dict)


def _create_from_entry(entry: dict, parent: MenuItem | None, tags_by_id: dict) -> MenuItem:
    menu = MenuItem.objects.create(
        slug=entry["slug"],
        name=entry.get("name") or {},
        type=entry.get("type") or MenuItem._meta.get_field("type").default,
        icon=entry.get("icon") or "",
        link=entry.get("link") or "",
        inquiry_link=entry.get("inquiryLink") or "",
        order=1 if entry.get("order") is None else entry["order"],
        visible=entry.get("visible") is not False,
        is_system=bool(entry.get("isSystem")),
        parent=parent,
    )
    tags = [tags_by_id[t["id"]] for t in entry.get("mediaTags") or [] if t.get("id") in tags_by_id]
    if tags:
        menu.media_tags.set(tags)
    return menu


@transaction.atomic
def restore_navigation(path) -> RestoreReport:
    """
    Replace the current menus with the contents of a backup file.

    Root menus are created first so that children can be re-linked to the
    new parent ids; a child whose parent cannot be resolved is skipped.
    """
    entries = load_backup(path)
    logger.info("Restoring %s navigation menus from %s", len(entries), path)

    deleted = delete_all_menus()
    logger.info("Deleted %s current menus", deleted)

    tags_by_id = {tag.id: tag for tag in MediaTag.objects.all()}
    report = RestoreReport()

    for entry in entries:
        if entry.get("parentId") is None:
            menu = _create_from_entry(entry, None, tags_by_id)
            report.id_mapping[entry["id"]] = menu.id
            report.created += 1

    pending = [e for e in entries if e.get("parentId") is not None]
    while pending:
        remaining = []
        for entry in pending:
            new_parent_id = report.id_mapping.get(entry["parentId"])
            if new_parent_id is None:
                remaining.append(entry)
                continue
            parent = MenuItem.objects.get(pk=new_parent_id)
            menu = _create_from_entry(entry, parent, tags_by_id)
            report.id_mapping[entry["id"]] = menu.id
            report.created += 1

        if len(remaining) == len(pending):
            break
        pending = remaining

    for entry in pending:
        logger.warning("Parent not found for %s, skipping", entry.get("slug"))
        report.skipped.append(entry.get("slug"))

    return report


@dataclass
class ResetStep:
    name: str
    status: str = "pending"
    detail: str = ""
    started_at: str = ""
    finished_at: str = ""


@dataclass
class ResetResult:
    backup_path: Path | None = None
    log_path: Path | None = None
    deleted: int = 0
    created: int = 0
    steps: list = field(default_factory=list)


def _now() -> str:
    return datetime.now(dt_timezone.utc).isoformat()


class _StepLog:
    def __init__(self, result: ResetResult):
        self.result = result

    def start(self, name) -> ResetStep:
        step = ResetStep(name=name, status="running", started_at=_now())
        self.result.steps.append(step)
        logger.info("Reset step %s started", name)
        return step

    def finish(self, step, status, detail=""):
        step.status = status
        step.detail = detail
        step.finished_at = _now()
        log = logger.info if status == "done" else logger.error
        log("Reset step %s %s %s", step.name, status, detail)

    def write(self, directory: Path):
        path = _unique_path(directory, RESET_LOG_PREFIX, backup_timestamp(), RESET_LOG_SUFFIX)
        payload = {
            "backupPath": str(self.result.backup_path) if self.result.backup_path else None,
            "steps": [asdict(s) for s in self.result.steps],
        }
        try:
            directory.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError:
            logger.exception("Could not write reset step log to %s", path)
            return None
        self.result.log_path = path
        return path


def reset_navigation(backup_dir=None, seed=seed_navigation) -> ResetResult:
    """
    backup -> delete all -> seed, recorded step by step.

    Nothing is deleted unless the backup succeeded. If delete or seed
    fails, the menus are restored from the fresh backup and
    NavigationResetError is raised with the failed step, its cause and
    whether the restore worked.
    """
    directory = Path(backup_dir) if backup_dir else default_backup_dir()
    result = ResetResult()
    steps = _StepLog(result)

    step = steps.start("backup")
    try:
        result.backup_path = backup_navigation(directory)
    except Exception as exc:
        steps.finish(step, "failed", str(exc))
        steps.write(directory)
        raise NavigationBackupError("Backup failed; navigation was not modified") from exc
    steps.finish(step, "done", str(result.backup_path))

    try:
        step = steps.start("delete")
        result.deleted = delete_all_menus()
        steps.finish(step, "done", f"{result.deleted} rows")

        step = steps.start("seed")
        result.created = seed()
        steps.finish(step, "done", f"{result.created} menus")
    except Exception as exc:
        steps.finish(step, "failed", str(exc))
        compensate = steps.start("restore")
        try:
            report = restore_navigation(result.backup_path)
        except Exception as restore_exc:
            logger.exception("Compensating restore from %s failed", result.backup_path)
            steps.finish(compensate, "failed", str(restore_exc))
            steps.write(directory)
            raise NavigationResetError(
                step.name, exc, False, result.backup_path, restore_error=restore_exc
            ) from exc
        steps.finish(compensate, "done", f"{report.created} menus restored")
        steps.write(directory)
        raise NavigationResetError(step.name, exc, True, result.backup_path) from exc

    steps.write(directory)
    return result
