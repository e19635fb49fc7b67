# backend/navigation/models.py
from django.db import models

from media_library.models import MediaTag


class MenuType(models.TextChoices):
    STANDARD = "STANDARD", "Standard"
    PRODUCT_CARDS = "PRODUCT_CARDS", "Product Cards"
    SUBMENU = "SUBMENU", "Submenu (icon + text)"


class MenuItem(models.Model):
    slug = models.SlugField(
        max_length=255,
        unique=True,
        help_text="Unique identifier, e.g. 'product', 'service', 'about-us'.",
    )
    name = models.JSONField(
        default=dict,
        blank=True,
        help_text="Localized label: {'en': 'Home', 'zh': '首页'}",
    )
    type = models.CharField(
        max_length=20,
        choices=MenuType.choices,
        default=MenuType.STANDARD,
    )
    icon = models.CharField(
        max_length=100,
        blank=True,
        help_text="Lucide icon name (e.g. Home, Package). Used by SUBMENU children.",
    )
    link = models.CharField(
        max_length=512,
        blank=True,
        help_text="Route or external URL, e.g. '/products' or 'https://...'.",
    )
    inquiry_link = models.CharField(
        max_length=512,
        blank=True,
        help_text="Target of the 'Inquiry' button on PRODUCT_CARDS children.",
    )

    # Removing a parent leaves its children in place; they surface at the top level.
    parent = models.ForeignKey(
        "self",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="children",
    )
    media_tags = models.ManyToManyField(
        MediaTag,
        blank=True,
        related_name="menu_items",
        help_text="A random active image carrying ALL of these tags is shown on the card.",
    )

    order = models.PositiveIntegerField(default=1)
    visible = models.BooleanField(default=True)
    is_system = models.BooleanField(default=False)

    class Meta:
        ordering = ["order", "id"]
        verbose_name = "Menu Item"
        verbose_name_plural = "Menu Items"

    def __str__(self) -> str:
        return self.slug
