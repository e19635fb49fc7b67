from django.db import models

from content.models import PublishStatus


class ProductSeries(models.Model):
    """
    A product line (Glass Hinge, Door Handle, ...) with a localized name,
    description and one document body per locale.
    """

    slug = models.SlugField(max_length=140, unique=True)
    name = models.JSONField(default=dict, blank=True, help_text="Localized name.")
    description = models.JSONField(default=dict, blank=True, help_text="Localized description.")
    featured_image = models.JSONField(
        null=True,
        blank=True,
        help_text="Featured image reference, e.g. {'url': '...', 'filename': '...'}.",
    )
    order = models.PositiveIntegerField(default=0)
    status = models.CharField(
        max_length=20,
        choices=PublishStatus.choices,
        default=PublishStatus.DRAFT,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["order", "id"]
        verbose_name = "Product Series"
        verbose_name_plural = "Product Series"

    def __str__(self) -> str:
        return self.slug


class ProductSeriesContentTranslation(models.Model):
    product_series = models.ForeignKey(
        ProductSeries,
        on_delete=models.CASCADE,
        related_name="content_translations",
    )
    locale = models.CharField(max_length=10, default="en")
    content = models.JSONField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        unique_together = ("product_series", "locale")
        ordering = ["product_series", "locale"]

    def __str__(self) -> str:
        return f"{self.product_series.slug} ({self.locale})"


class Product(models.Model):
    sku = models.CharField(max_length=100, unique=True)
    slug = models.SlugField(max_length=160, unique=True)
    name = models.JSONField(default=dict, blank=True, help_text="Localized name.")
    short_description = models.JSONField(default=dict, blank=True)
    description = models.JSONField(default=dict, blank=True)
    series = models.ForeignKey(
        ProductSeries,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="products",
    )
    show_image = models.ForeignKey(
        "media_library.Media",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="+",
    )
    is_featured = models.BooleanField(default=False)
    order = models.PositiveIntegerField(default=0)
    status = models.CharField(
        max_length=20,
        choices=PublishStatus.choices,
        default=PublishStatus.DRAFT,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["order", "id"]

    def __str__(self) -> str:
        return self.sku


class ProductContentTranslation(models.Model):
    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name="content_translations",
    )
    locale = models.CharField(max_length=10, default="en")
    content = models.JSONField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        unique_together = ("product", "locale")
        ordering = ["product", "locale"]

    def __str__(self) -> str:
        return f"{self.product.sku} ({self.locale})"
