# backend/content/models.py
from django.db import models
from django.utils import timezone


class PublishStatus(models.TextChoices):
    DRAFT = "DRAFT", "Draft"
    PUBLISHED = "PUBLISHED", "Published"
    ARCHIVED = "ARCHIVED", "Archived"


class Page(models.Model):
    PAGE_TYPE_TEMPLATE = "TEMPLATE"
    PAGE_TYPE_FREEFORM = "FREEFORM"

    PAGE_TYPE_CHOICES = [
        (PAGE_TYPE_TEMPLATE, "Template Page"),
        (PAGE_TYPE_FREEFORM, "Freeform Page"),
    ]

    slug = models.SlugField(unique=True, max_length=255)
    path = models.CharField(
        max_length=512,
        unique=True,
        help_text="Full URL path used by the frontend router, e.g. '/service/one-stop'.",
    )
    page_type = models.CharField(
        max_length=20,
        choices=PAGE_TYPE_CHOICES,
        default=PAGE_TYPE_FREEFORM,
    )
    template = models.CharField(
        max_length=100,
        blank=True,
        help_text="Template pages only, e.g. SERVICE_OVERVIEW, FAQ, OEM_ODM.",
    )
    title = models.JSONField(
        default=dict,
        blank=True,
        help_text="Localized title: {'en': '...', 'zh': '...'}",
    )
    is_system = models.BooleanField(default=False)
    status = models.CharField(
        max_length=20,
        choices=PublishStatus.choices,
        default=PublishStatus.DRAFT,
    )
    published_at = models.DateTimeField(null=True, blank=True)
    order = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["order", "slug"]
        verbose_name = "Page"
        verbose_name_plural = "Pages"

    def __str__(self) -> str:
        return self.slug

    def save(self, *args, **kwargs):
        if self.status == PublishStatus.PUBLISHED and not self.published_at:
            self.published_at = timezone.now()
        super().save(*args, **kwargs)


class PageContentTranslation(models.Model):
    """
    Document body of a page in one locale.
    ``content`` holds the structured document, e.g. {'document': [...]}.
    """

    page = models.ForeignKey(
        Page,
        on_delete=models.CASCADE,
        related_name="content_translations",
    )
    locale = models.CharField(
        max_length=10,
        default="en",
        help_text="Language code, e.g. 'en', 'zh'.",
    )
    content = models.JSONField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        unique_together = ("page", "locale")
        ordering = ["page", "locale"]
        verbose_name = "Page Content Translation"
        verbose_name_plural = "Page Content Translations"

    def __str__(self) -> str:
        return f"{self.page.slug} ({self.locale})"


def pick_translation(translations, locale: str, default_locale: str = "en"):
    """
    Return the translation for ``locale``, else the default locale's, else None.
    ``translations`` is any iterable of objects with a ``locale`` attribute.
    """
    by_locale = {t.locale: t for t in translations}
    return by_locale.get(locale) or by_locale.get(default_locale)
