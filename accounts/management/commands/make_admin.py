import logging

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from accounts.models import UserStatus

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Grant admin access (staff + superuser) to an existing user by email."

    def add_arguments(self, parser):
        parser.add_argument("email", type=str, help="Email of the user to promote")

    def handle(self, *args, **options):
        User = get_user_model()
        email = options["email"].strip()

        user = User.objects.filter(email__iexact=email).first()
        if user is None:
            self.stdout.write(self.style.ERROR(f"User not found: {email}"))
            self.stdout.write("Available users:")
            for u in User.objects.order_by("email"):
                role = "admin" if u.is_staff and u.is_superuser else "user"
                self.stdout.write(f"  - {u.email} ({role}, {u.status})")
            raise CommandError(f"No user with email {email}")

        if user.is_staff and user.is_superuser:
            self.stdout.write(self.style.SUCCESS(f"{user.email} is already an admin"))
            return

        user.is_staff = True
        user.is_superuser = True
        user.status = UserStatus.ACTIVE
        user.save(update_fields=["is_staff", "is_superuser", "status"])

        logger.info("Promoted %s to admin", user.email)
        self.stdout.write(self.style.SUCCESS(f"{user.email} is now an admin"))
