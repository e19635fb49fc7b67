from django.contrib import admin

from .models import (
    Product,
    ProductContentTranslation,
    ProductSeries,
    ProductSeriesContentTranslation,
)


class ProductSeriesContentTranslationInline(admin.StackedInline):
    model = ProductSeriesContentTranslation
    extra = 0


@admin.register(ProductSeries)
class ProductSeriesAdmin(admin.ModelAdmin):
    list_display = ("slug", "order", "status")
    list_filter = ("status",)
    list_editable = ("order", "status")
    search_fields = ("slug",)
    inlines = [ProductSeriesContentTranslationInline]


class ProductContentTranslationInline(admin.StackedInline):
    model = ProductContentTranslation
    extra = 0


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("sku", "slug", "series", "is_featured", "order", "status")
    list_filter = ("status", "is_featured", "series")
    list_editable = ("order", "status")
    search_fields = ("sku", "slug")
    raw_id_fields = ("show_image",)
    inlines = [ProductContentTranslationInline]
