import json
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from content.models import Page, PageContentTranslation, PublishStatus

CONTENT_DIR = Path("content_json/pages")


class Command(BaseCommand):
    help = "Load/Update pages + content translations from JSON files in content_json/pages"

    def add_arguments(self, parser):
        parser.add_argument(
            "--slug",
            help="Only load the JSON file matching this slug",
        )
        parser.add_argument(
            "--file",
            help="Path to a single JSON file to load (overrides --slug filter)",
        )

    def handle(self, *args, **options):
        target_slug = options.get("slug")
        target_file = options.get("file")

        if target_file:
            files = [Path(target_file)]
        else:
            if not CONTENT_DIR.exists():
                raise CommandError(f"Folder not found: {CONTENT_DIR}")
            files = sorted(CONTENT_DIR.glob("*.json"))
            if target_slug:
                files = [f for f in files if f.stem == target_slug]

        if not files:
            self.stdout.write(self.style.WARNING(f"No JSON files found in {CONTENT_DIR}"))
            return

        loaded = 0
        for f in files:
            if not f.exists():
                self.stdout.write(self.style.WARNING(f"File not found: {f}"))
                continue

            try:
                data = json.loads(f.read_text(encoding="utf-8"))
            except ValueError as exc:
                self.stdout.write(self.style.WARNING(f"Skipping {f}: invalid JSON ({exc})"))
                continue

            if target_slug and data.get("slug") != target_slug:
                continue

            if not data.get("slug") or not data.get("path"):
                self.stdout.write(self.style.WARNING(f"Skipping {f}: 'slug' and 'path' are required"))
                continue

            self._load_page(data)
            loaded += 1
            self.stdout.write(self.style.SUCCESS(f"Loaded page: {data['slug']}"))

        self.stdout.write(self.style.SUCCESS(f"{loaded} page(s) loaded"))

    @transaction.atomic
    def _load_page(self, data):
        slug = data["slug"]
        page, _ = Page.objects.update_or_create(
            slug=slug,
            defaults={
                "path": data["path"],
                "page_type": data.get("pageType", Page.PAGE_TYPE_FREEFORM),
                "template": data.get("template", ""),
                "title": data.get("title", {}),
                "status": data.get("status", PublishStatus.DRAFT),
            },
        )

        translations = data.get("contentTranslations", [])
        if not isinstance(translations, list):
            self.stdout.write(self.style.WARNING(
                f"Skipping translations for {slug}: 'contentTranslations' is not a list"
            ))
            return

        for i, t in enumerate(translations):
            if not isinstance(t, dict) or not t.get("locale"):
                self.stdout.write(self.style.WARNING(
                    f"Skipping translation #{i} for {slug}: missing 'locale'"
                ))
                continue

            PageContentTranslation.objects.update_or_create(
                page=page,
                locale=t["locale"],
                defaults={"content": t.get("content")},
            )
