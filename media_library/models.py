# backend/media_library/models.py
import random

from django.db import models


class MediaTag(models.Model):
    TYPE_PRODUCT_SERIES = "PRODUCT_SERIES"
    TYPE_FUNCTION_TYPE = "FUNCTION_TYPE"
    TYPE_SCENE_TYPE = "SCENE_TYPE"
    TYPE_SPEC = "SPEC"
    TYPE_COLOR = "COLOR"
    TYPE_CUSTOM = "CUSTOM"

    TYPE_CHOICES = [
        (TYPE_PRODUCT_SERIES, "Product Series"),
        (TYPE_FUNCTION_TYPE, "Function Type"),
        (TYPE_SCENE_TYPE, "Scene Type"),
        (TYPE_SPEC, "Spec"),
        (TYPE_COLOR, "Color"),
        (TYPE_CUSTOM, "Custom"),
    ]

    name = models.JSONField(default=dict, blank=True, help_text="Localized tag name.")
    slug = models.SlugField(max_length=140, unique=True)
    type = models.CharField(max_length=32, choices=TYPE_CHOICES, default=TYPE_CUSTOM)
    order = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["type", "order", "slug"]

    def __str__(self) -> str:
        return self.slug


class Media(models.Model):
    STATUS_ACTIVE = "ACTIVE"
    STATUS_ARCHIVED = "ARCHIVED"

    STATUS_CHOICES = [
        (STATUS_ACTIVE, "Active"),
        (STATUS_ARCHIVED, "Archived"),
    ]

    file = models.ImageField(upload_to="media/")
    filename = models.CharField(max_length=255)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_ACTIVE)
    alt_text = models.JSONField(default=dict, blank=True)

    tags = models.ManyToManyField(MediaTag, related_name="media", blank=True)
    # Mirror of ``tags`` used by admin filtering; kept in sync by sync_media_tags
    tags_filter = models.ManyToManyField(MediaTag, related_name="filtered_media", blank=True)

    width = models.PositiveIntegerField(null=True, blank=True)
    height = models.PositiveIntegerField(null=True, blank=True)
    file_size = models.PositiveIntegerField(null=True, blank=True)
    mime_type = models.CharField(max_length=100, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        verbose_name_plural = "Media"

    def __str__(self) -> str:
        return self.filename

    @property
    def url(self) -> str | None:
        return self.file.url if self.file else None


def random_media_with_all_tags(tag_ids):
    """
    Pick a random active Media row carrying every tag in ``tag_ids``.
    Returns None when no tags are given or nothing matches.
    """
    tag_ids = list(tag_ids)
    if not tag_ids:
        return None

    qs = Media.objects.filter(status=Media.STATUS_ACTIVE)
    for tag_id in tag_ids:
        qs = qs.filter(tags__id=tag_id)

    candidates = list(qs.distinct())
    if not candidates:
        return None
    return random.choice(candidates)
