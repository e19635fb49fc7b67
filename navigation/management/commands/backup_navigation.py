import logging

from django.core.management.base import BaseCommand, CommandError

from navigation.backup import backup_navigation

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Write a JSON backup of the whole navigation tree to the backups directory."

    def handle(self, *args, **options):
        self.stdout.write("Creating backup of current navigation data...")
        try:
            path = backup_navigation()
        except Exception as exc:
            logger.exception("Navigation backup failed")
            raise CommandError(f"Backup failed: {exc}") from exc

        self.stdout.write(self.style.SUCCESS(f"Backup saved to: {path}"))
