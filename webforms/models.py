from django.db import models


class FormConfig(models.Model):
    LOCATION_HOME_MAIN = "HOME_MAIN"
    LOCATION_FOOTER = "FOOTER"
    LOCATION_CONTACT_US = "CONTACT_US"
    LOCATION_QUICK_INQUIRY = "QUICK_INQUIRY"
    LOCATION_CUSTOM = "CUSTOM"

    LOCATION_CHOICES = [
        (LOCATION_HOME_MAIN, "Home - Main Form"),
        (LOCATION_FOOTER, "Footer Form"),
        (LOCATION_CONTACT_US, "Contact Us Page"),
        (LOCATION_QUICK_INQUIRY, "Quick Inquiry"),
        (LOCATION_CUSTOM, "Custom"),
    ]

    STATUS_DRAFT = "DRAFT"
    STATUS_PUBLISHED = "PUBLISHED"
    STATUS_DISABLED = "DISABLED"

    STATUS_CHOICES = [
        (STATUS_DRAFT, "Draft"),
        (STATUS_PUBLISHED, "Published"),
        (STATUS_DISABLED, "Disabled"),
    ]

    name = models.SlugField(max_length=120, unique=True, help_text="Lookup key, e.g. 'contact-form'.")
    display_name = models.JSONField(default=dict, blank=True)
    description = models.JSONField(default=dict, blank=True)
    location = models.CharField(max_length=20, choices=LOCATION_CHOICES, default=LOCATION_CUSTOM)
    form_fields = models.JSONField(
        default=dict,
        blank=True,
        help_text=(
            "Field definitions per locale: {'en': [{'fieldName': 'name', 'fieldType': 'text', "
            "'label': 'Your Name', 'required': true, 'order': 1}, ...], 'zh': [...]}"
        ),
    )
    submit_button_text = models.JSONField(default=dict, blank=True)
    success_message = models.JSONField(default=dict, blank=True)
    error_message = models.JSONField(default=dict, blank=True)
    notification_email = models.EmailField(blank=True)
    enable_captcha = models.BooleanField(default=False)
    max_submissions_per_day = models.PositiveIntegerField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_DRAFT)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class FormSubmission(models.Model):
    STATUS_UNREAD = "UNREAD"
    STATUS_READ = "READ"
    STATUS_ARCHIVED = "ARCHIVED"

    STATUS_CHOICES = [
        (STATUS_UNREAD, "Unread"),
        (STATUS_READ, "Read"),
        (STATUS_ARCHIVED, "Archived"),
    ]

    SUBMITTED_MANUAL = "MANUAL"
    SUBMITTED_AUTO = "AUTO"

    AUTO_SUBMITTED_CHOICES = [
        (SUBMITTED_MANUAL, "Manual"),
        (SUBMITTED_AUTO, "Auto"),
    ]

    form_config = models.ForeignKey(
        FormConfig,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="submissions",
    )
    form_name = models.CharField(max_length=255, default="Unknown Form")
    data = models.JSONField(default=dict)
    attachments = models.JSONField(default=list, blank=True)
    total_attachment_size = models.PositiveBigIntegerField(default=0)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_UNREAD)
    auto_submitted = models.CharField(
        max_length=16,
        choices=AUTO_SUBMITTED_CHOICES,
        default=SUBMITTED_MANUAL,
    )
    locale = models.CharField(max_length=10, default="en")
    source_page = models.CharField(max_length=1024, blank=True)
    ip_address = models.CharField(max_length=255, blank=True)
    user_agent = models.CharField(max_length=1024, blank=True)
    admin_notes = models.TextField(blank=True)
    submitted_at = models.DateTimeField(auto_now_add=True)
    read_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-submitted_at"]

    def __str__(self) -> str:
        return f"{self.form_name} #{self.pk}"
