from django.contrib import admin

from .models import Media, MediaTag


@admin.register(MediaTag)
class MediaTagAdmin(admin.ModelAdmin):
    list_display = ("slug", "type", "order")
    list_filter = ("type",)
    list_editable = ("order",)
    search_fields = ("slug",)


@admin.register(Media)
class MediaAdmin(admin.ModelAdmin):
    list_display = ("filename", "status", "width", "height", "created_at")
    list_filter = ("status", "tags_filter")
    search_fields = ("filename",)
    filter_horizontal = ("tags",)
    readonly_fields = ("width", "height", "created_at", "updated_at")
