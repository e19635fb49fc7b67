import logging

from django.core.management.base import BaseCommand

from media_library.models import Media

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Copy every media item's tags into its tags_filter field."

    def handle(self, *args, **options):
        medias = Media.objects.prefetch_related("tags").all()
        self.stdout.write(f"Found {len(medias)} media records")

        synced = skipped = 0
        for media in medias:
            tags = list(media.tags.all())
            if not tags:
                self.stdout.write(f"  - Skipping {media.filename} (no tags)")
                skipped += 1
                continue

            media.tags_filter.set(tags)
            self.stdout.write(f"  + Syncing {media.filename} ({len(tags)} tags)")
            synced += 1

        logger.info("Tag sync finished: %s synced, %s skipped", synced, skipped)
        self.stdout.write(self.style.SUCCESS(
            f"Synchronization completed. Synced: {synced}, skipped (no tags): {skipped}"
        ))
