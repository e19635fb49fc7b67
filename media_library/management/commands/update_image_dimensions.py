import logging

from django.core.management.base import BaseCommand
from django.db.models import Q
from PIL import Image

from media_library.models import Media

logger = logging.getLogger(__name__)


def read_dimensions(field_file) -> tuple[int, int]:
    """Open the stored image through its storage backend and return (width, height)."""
    with field_file.open("rb") as fh:
        with Image.open(fh) as img:
            return img.size


class Command(BaseCommand):
    help = "Backfill width/height for media images by reading them from storage."

    def add_arguments(self, parser):
        parser.add_argument(
            "--force",
            action="store_true",
            help="Re-read dimensions even for media that already have them",
        )

    def handle(self, *args, **options):
        qs = Media.objects.exclude(file="")
        if not options["force"]:
            qs = qs.filter(Q(width__isnull=True) | Q(height__isnull=True))

        total = qs.count()
        self.stdout.write(f"Processing {total} media records...")

        updated = failed = 0
        for media in qs.iterator():
            try:
                width, height = read_dimensions(media.file)
            except Exception as exc:
                logger.warning("Could not read %s: %s", media.file.name, exc)
                self.stdout.write(self.style.WARNING(f"  ! {media.filename}: {exc}"))
                failed += 1
                continue

            media.width, media.height = width, height
            media.save(update_fields=["width", "height", "updated_at"])
            self.stdout.write(f"  + {media.filename}: {width}x{height}")
            updated += 1

        self.stdout.write(self.style.SUCCESS(f"Updated {updated} media, {failed} failed"))
