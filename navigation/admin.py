from django.contrib import admin

from .models import MenuItem


class ChildMenuInline(admin.TabularInline):
    model = MenuItem
    fk_name = "parent"
    extra = 0
    fields = ("slug", "name", "type", "link", "order", "visible")
    ordering = ("order",)


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    list_display = ("id", "slug", "type", "parent", "order", "visible", "is_system")
    list_filter = ("type", "visible", "is_system")
    list_editable = ("order", "visible")
    search_fields = ("slug", "link")
    ordering = ("parent__id", "order")
    filter_horizontal = ("media_tags",)
    readonly_fields = ("is_system",)
    inlines = [ChildMenuInline]

    def has_delete_permission(self, request, obj=None):
        # System menus cannot be deleted
        if obj is not None and obj.is_system:
            return False
        return super().has_delete_permission(request, obj)
