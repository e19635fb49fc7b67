import logging

from django.core.management.base import BaseCommand, CommandError

from navigation.backup import NavigationBackupError, list_backups, restore_navigation

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Replace the navigation menus with the contents of a backup file."

    def add_arguments(self, parser):
        parser.add_argument("path", nargs="?", help="Path to a navigation-backup-*.json file")

    def handle(self, *args, **options):
        path = options.get("path")
        if not path:
            self.stderr.write("Please provide a backup file path. Available backups:")
            backups = list_backups()
            for backup in backups:
                self.stderr.write(f"  - {backup}")
            if not backups:
                self.stderr.write("  (no backups found)")
            raise CommandError("Missing backup file path")

        self.stdout.write(f"Reading backup: {path}")
        try:
            report = restore_navigation(path)
        except NavigationBackupError as exc:
            raise CommandError(str(exc)) from exc
        except Exception as exc:
            logger.exception("Navigation restore failed")
            raise CommandError(f"Restore failed: {exc}") from exc

        for slug in report.skipped:
            self.stdout.write(self.style.WARNING(f"  Parent not found for {slug}, skipped"))
        self.stdout.write(self.style.SUCCESS(f"Restored {report.created} navigation menus"))
