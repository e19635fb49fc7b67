# backend/content/admin.py
from django.contrib import admin

from .models import Page, PageContentTranslation


class PageContentTranslationInline(admin.StackedInline):
    model = PageContentTranslation
    extra = 0
    fields = ("locale", "content")


@admin.register(Page)
class PageAdmin(admin.ModelAdmin):
    list_display = ("id", "slug", "path", "page_type", "template", "status", "order")
    list_filter = ("status", "page_type")
    search_fields = ("slug", "path")
    ordering = ("order", "slug")
    readonly_fields = ("published_at", "created_at", "updated_at")
    inlines = [PageContentTranslationInline]


@admin.register(PageContentTranslation)
class PageContentTranslationAdmin(admin.ModelAdmin):
    list_display = ("id", "page", "locale", "updated_at")
    list_filter = ("locale",)
    search_fields = ("page__slug",)
    ordering = ("page", "locale")
