from django.contrib import admin

from .models import FormConfig, FormSubmission


@admin.register(FormConfig)
class FormConfigAdmin(admin.ModelAdmin):
    list_display = ("name", "location", "status", "enable_captcha", "updated_at")
    list_filter = ("status", "location")
    search_fields = ("name",)


@admin.register(FormSubmission)
class FormSubmissionAdmin(admin.ModelAdmin):
    list_display = ("id", "form_name", "status", "auto_submitted", "locale", "submitted_at")
    list_filter = ("status", "auto_submitted", "locale")
    search_fields = ("form_name", "ip_address")
    readonly_fields = (
        "form_config", "form_name", "data", "attachments", "total_attachment_size",
        "locale", "source_page", "ip_address", "user_agent", "submitted_at",
    )
