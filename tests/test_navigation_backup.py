"""
Feature: Back up, reset and restore the navigation
  As a site maintainer
  I want to snapshot the menus before destructive changes
  So that any reset can be undone

Scenario: Backup then restore
  Given a menu tree with parents, children and media tags
  When it is backed up, wiped and restored
  Then the restored tree has the same structure under new ids

Scenario: Reset fails closed
  Given the backup step fails
  When a reset is requested
  Then no menu is deleted

Scenario: Reseed fails mid-reset
  Given backup and delete succeed but seeding raises
  When a reset is requested
  Then the menus are restored from the fresh backup
  And the step log records the failure and the restore

Scenario: Reseed and restore both fail
  Given seeding raises and the compensating restore raises too
  When a reset is requested
  Then the error says the restore failed and names the backup to restore by hand
"""

import json
import logging
from datetime import datetime, timezone

import pytest

from media_library.models import MediaTag
from navigation import backup as navigation_backup
from navigation.backup import (
    BackupNotFound,
    InvalidBackup,
    NavigationBackupError,
    NavigationResetError,
    backup_navigation,
    backup_timestamp,
    list_backups,
    reset_navigation,
    restore_navigation,
)
from navigation.models import MenuItem
from navigation.seed import seed_navigation


@pytest.fixture
def tree(make_menu, menu_snapshot):
    tag = MediaTag.objects.create(slug="glass-hinge", type=MediaTag.TYPE_PRODUCT_SERIES)
    product = make_menu("product", order=2, type="PRODUCT_CARDS")
    hinge = make_menu("product-glass-hinge", parent=product, order=1)
    hinge.media_tags.add(tag)
    make_menu("product-door-handle", parent=product, order=2, visible=False)
    about = make_menu("about-us", order=5, type="SUBMENU")
    blog = make_menu("blog", parent=about, order=1, icon="FileText")
    make_menu("blog-archive", parent=blog, order=1)
    make_menu("home", order=1, link="/")
    return menu_snapshot()


def test_backup_timestamp_format():
    now = datetime(2025, 1, 5, 10, 20, 30, 123456, tzinfo=timezone.utc)
    assert backup_timestamp(now) == "2025-01-05T10-20-30-123Z"


@pytest.mark.django_db
def test_backup_writes_all_menus_and_deletes_nothing(tree, backup_dir):
    path = backup_navigation(backup_dir)

    assert path.parent == backup_dir
    assert path.name.startswith("navigation-backup-")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert len(data) == MenuItem.objects.count() == 7

    product = next(e for e in data if e["slug"] == "product")
    assert product["parentId"] is None
    assert {c["slug"] for c in product["children"]} == {"product-glass-hinge", "product-door-handle"}

    hinge = next(e for e in data if e["slug"] == "product-glass-hinge")
    assert hinge["parent"] == {"id": product["id"], "slug": "product"}
    assert [t["slug"] for t in hinge["mediaTags"]] == ["glass-hinge"]


@pytest.mark.django_db
def test_backups_get_unique_paths(tree, backup_dir):
    first = backup_navigation(backup_dir)
    second = backup_navigation(backup_dir)

    assert first != second
    assert list_backups(backup_dir) == sorted([first, second])


@pytest.mark.django_db
def test_restore_recreates_same_structure(menu_snapshot, tree, backup_dir):
    old_ids = set(MenuItem.objects.values_list("id", flat=True))
    path = backup_navigation(backup_dir)
    MenuItem.objects.all().delete()
    MenuItem.objects.create(slug="stray")

    report = restore_navigation(path)

    assert report.created == 7
    assert report.skipped == []
    assert menu_snapshot() == tree
    assert set(report.id_mapping) == old_ids
    assert set(report.id_mapping.values()) == set(MenuItem.objects.values_list("id", flat=True))


@pytest.mark.django_db
def test_restore_skips_children_without_parent(tmp_path, caplog):
    path = tmp_path / "navigation-backup-manual.json"
    path.write_text(json.dumps([
        {"id": 10, "slug": "home", "name": {"en": "Home"}, "parentId": None, "order": 1},
        {"id": 11, "slug": "orphan", "name": {"en": "Orphan"}, "parentId": 99, "order": 1},
        {"id": 12, "slug": "blog", "name": {"en": "Blog"}, "parentId": 10, "order": 1},
    ]), encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="navigation.backup"):
        report = restore_navigation(path)

    assert report.created == 2
    assert report.skipped == ["orphan"]
    assert MenuItem.objects.get(slug="blog").parent.slug == "home"
    assert "Parent not found for orphan" in caplog.text


@pytest.mark.django_db
def test_restore_missing_file(tmp_path):
    with pytest.raises(BackupNotFound):
        restore_navigation(tmp_path / "nope.json")


@pytest.mark.django_db
def test_restore_invalid_file_leaves_menus_alone(menu_snapshot, tree, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(InvalidBackup):
        restore_navigation(path)

    assert menu_snapshot() == tree


@pytest.mark.django_db
def test_reset_backs_up_then_reseeds(tree, backup_dir):
    result = reset_navigation(backup_dir)

    assert result.deleted == 7
    assert result.created == 36
    assert MenuItem.objects.count() == 36
    assert not MenuItem.objects.filter(slug="blog-archive").exists()

    backed_up = json.loads(result.backup_path.read_text(encoding="utf-8"))
    assert {e["slug"] for e in backed_up} == set(tree)

    assert result.log_path.name.endswith(".log.json")
    log = json.loads(result.log_path.read_text(encoding="utf-8"))
    assert [(s["name"], s["status"]) for s in log["steps"]] == [
        ("backup", "done"),
        ("delete", "done"),
        ("seed", "done"),
    ]


@pytest.mark.django_db
def test_reset_fails_closed_when_backup_fails(menu_snapshot, tree, backup_dir, monkeypatch):
    def broken_backup(directory):
        raise OSError("disk full")

    monkeypatch.setattr(navigation_backup, "backup_navigation", broken_backup)

    with pytest.raises(NavigationBackupError):
        reset_navigation(backup_dir)

    assert menu_snapshot() == tree


@pytest.mark.django_db
def test_reset_restores_when_seed_fails(menu_snapshot, tree, backup_dir):
    def broken_seed():
        raise RuntimeError("seed exploded")

    with pytest.raises(NavigationResetError) as excinfo:
        reset_navigation(backup_dir, seed=broken_seed)

    assert excinfo.value.step == "seed"
    assert str(excinfo.value.cause) == "seed exploded"
    assert excinfo.value.restored is True
    assert excinfo.value.backup_path.exists()

    assert menu_snapshot() == tree

    logs = sorted(backup_dir.glob("navigation-reset-*.json"))
    assert len(logs) == 1
    steps = json.loads(logs[0].read_text(encoding="utf-8"))["steps"]
    assert [(s["name"], s["status"]) for s in steps] == [
        ("backup", "done"),
        ("delete", "done"),
        ("seed", "failed"),
        ("restore", "done"),
    ]
    assert steps[2]["detail"] == "seed exploded"


@pytest.mark.django_db
def test_seed_is_skipped_when_menus_exist(make_menu):
    make_menu("home")
    assert seed_navigation() == 0
    assert MenuItem.objects.count() == 1


@pytest.mark.django_db
def test_seed_links_product_children_to_series_tags():
    MediaTag.objects.create(slug="glass-hinge", type=MediaTag.TYPE_PRODUCT_SERIES)

    assert seed_navigation() == 36

    product = MenuItem.objects.get(slug="product")
    assert product.children.count() == 10
    hinge = MenuItem.objects.get(slug="product-glass-hinge")
    assert hinge.link == "/products/glass-hinge"
    assert [t.slug for t in hinge.media_tags.all()] == ["glass-hinge"]
    assert MenuItem.objects.get(slug="shop-glass-hinge").link == "/shop/glass-hinge"


@pytest.mark.django_db
def test_reset_reports_failed_restore(tree, backup_dir, monkeypatch):
    def broken_seed():
        raise RuntimeError("seed exploded")

    def broken_restore(path):
        raise RuntimeError("restore exploded")

    monkeypatch.setattr(navigation_backup, "restore_navigation", broken_restore)

    with pytest.raises(NavigationResetError) as excinfo:
        reset_navigation(backup_dir, seed=broken_seed)

    error = excinfo.value
    assert error.step == "seed"
    assert str(error.cause) == "seed exploded"
    assert error.restored is False
    assert str(error.restore_error) == "restore exploded"
    assert error.backup_path.parent == backup_dir

    [log] = backup_dir.glob("navigation-reset-*.log.json")
    steps = json.loads(log.read_text(encoding="utf-8"))["steps"]
    assert [(s["name"], s["status"]) for s in steps][-2:] == [("seed", "failed"), ("restore", "failed")]


@pytest.mark.django_db
def test_restore_keeps_zero_order_and_hidden_flag(make_menu, menu_snapshot, backup_dir):
    make_menu("zero", order=0)
    make_menu("two", order=2, visible=False)
    before = menu_snapshot()
    path = backup_navigation(backup_dir)

    restore_navigation(path)

    assert menu_snapshot() == before
    assert MenuItem.objects.get(slug="zero").order == 0


@pytest.mark.django_db
@pytest.mark.parametrize(
    "entry",
    [{"slug": "no-id", "parentId": None}, {"id": 3, "parentId": None}, {"id": 4, "slug": ""}],
)
def test_restore_rejects_entries_without_id_or_slug(entry, tree, tmp_path, menu_snapshot):
    path = tmp_path / "navigation-backup-bad.json"
    path.write_text(json.dumps([{"id": 1, "slug": "home", "parentId": None}, entry]), encoding="utf-8")

    with pytest.raises(InvalidBackup, match="no id or slug"):
        restore_navigation(path)

    assert menu_snapshot() == tree
