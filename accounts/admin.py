# backend/accounts/admin.py
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    """
    Admin for the email-login User model.
    Adds status to the standard Django user admin.
    """

    fieldsets = DjangoUserAdmin.fieldsets + (
        ("Account", {"fields": ("status",)}),
    )

    add_fieldsets = (
        (None, {
            "classes": ("wide",),
            "fields": ("email", "username", "password1", "password2", "status"),
        }),
    )

    list_display = ("email", "username", "status", "is_staff", "is_superuser")
    list_filter = ("status", "is_staff", "is_superuser")
    search_fields = ("email", "username")
    ordering = ("email",)
