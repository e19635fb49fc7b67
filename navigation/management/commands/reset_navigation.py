import logging

from django.core.management.base import BaseCommand, CommandError

from navigation.backup import NavigationBackupError, NavigationResetError, reset_navigation

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Back up the navigation, delete every menu and re-create the initial menus."

    def handle(self, *args, **options):
        self.stdout.write("Resetting navigation to initial state...")
        try:
            result = reset_navigation()
        except NavigationResetError as exc:
            logger.error("Navigation reset failed at step %s: %s", exc.step, exc.cause)
            if exc.restored:
                raise CommandError(
                    f"Reset failed at step '{exc.step}': {exc.cause}. "
                    f"Menus were restored from {exc.backup_path}."
                ) from exc
            raise CommandError(
                f"Reset failed at step '{exc.step}': {exc.cause}. "
                f"Automatic restore also failed: {exc.restore_error}. "
                f"Run: manage.py restore_navigation {exc.backup_path}"
            ) from exc
        except NavigationBackupError as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(f"  Backup file: {result.backup_path}")
        self.stdout.write(f"  Deleted {result.deleted} menus, created {result.created}")
        if result.log_path:
            self.stdout.write(f"  Step log: {result.log_path}")
        self.stdout.write(self.style.SUCCESS("Navigation reset to initial state"))
        self.stdout.write(f"To undo, run: manage.py restore_navigation {result.backup_path}")
