from django.core.management.base import BaseCommand

from navigation.seed import seed_navigation


class Command(BaseCommand):
    help = "Create the initial navigation menus (skipped when menus already exist)."

    def handle(self, *args, **options):
        created = seed_navigation()
        if created:
            self.stdout.write(self.style.SUCCESS(f"Created {created} navigation menus"))
        else:
            self.stdout.write(self.style.WARNING("Navigation menus already exist, nothing to do"))
