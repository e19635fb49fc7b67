import json
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from navigation.models import MenuItem
from navigation.ordering import (
    DEFAULT_CHILD_ORDER,
    DEFAULT_TOP_LEVEL_ORDER,
    reorder_siblings,
)


class Command(BaseCommand):
    help = "Re-rank menu siblings from explicit slug lists (default: the site's standard order)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--file",
            help='JSON file: {"top": [slugs...], "children": {"parent-slug": [slugs...]}}',
        )

    def handle(self, *args, **options):
        top, children = DEFAULT_TOP_LEVEL_ORDER, DEFAULT_CHILD_ORDER
        if options.get("file"):
            top, children = self._read_ranks(Path(options["file"]))

        report = reorder_siblings(top, children)

        for parent_slug, slug, order in report.updated:
            prefix = f"{parent_slug} / " if parent_slug else ""
            self.stdout.write(f"  + {prefix}{slug}: order = {order}")
        for parent_slug in report.missing_parents:
            self.stdout.write(self.style.WARNING(f"  ! Parent \"{parent_slug}\" not found, skipped"))
        for parent_slug, slug in report.missing:
            self.stdout.write(self.style.WARNING(f"  ! {slug}: not found under {parent_slug or 'top level'}"))
        for parent_slug, slug, error in report.failed:
            self.stdout.write(self.style.ERROR(f"  x {slug}: {error}"))

        self._print_tree()

        if not report.ok:
            raise CommandError(f"{len(report.failed)} update(s) failed")
        self.stdout.write(self.style.SUCCESS("Navigation menu order reset"))

    def _read_ranks(self, path):
        if not path.exists():
            raise CommandError(f"File not found: {path}")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except ValueError as exc:
            raise CommandError(f"Invalid JSON in {path}: {exc}") from exc

        if not isinstance(data, dict):
            raise CommandError(f"{path} must hold a JSON object with \"top\" and \"children\"")
        top = data.get("top", [])
        children = data.get("children", {})
        if not isinstance(top, list) or not all(isinstance(s, str) for s in top):
            raise CommandError(f"\"top\" in {path} must be a list of slugs")
        if not isinstance(children, dict) or not all(
            isinstance(slugs, list) and all(isinstance(s, str) for s in slugs)
            for slugs in children.values()
        ):
            raise CommandError(f"\"children\" in {path} must map parent slugs to lists of slugs")
        return top, children

    def _print_tree(self):
        self.stdout.write("\nFinal order:")
        roots = MenuItem.objects.filter(parent__isnull=True).prefetch_related("children")
        for root in roots.order_by("order", "id"):
            self.stdout.write(f"  {root.order}. {root.slug}")
            for child in sorted(root.children.all(), key=lambda c: (c.order, c.id)):
                self.stdout.write(f"      {child.order}. {child.slug}")
