import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="FormConfig",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.SlugField(help_text="Lookup key, e.g. 'contact-form'.", max_length=120, unique=True)),
                ("display_name", models.JSONField(blank=True, default=dict)),
                ("description", models.JSONField(blank=True, default=dict)),
                ("location", models.CharField(choices=[("HOME_MAIN", "Home - Main Form"), ("FOOTER", "Footer Form"), ("CONTACT_US", "Contact Us Page"), ("QUICK_INQUIRY", "Quick Inquiry"), ("CUSTOM", "Custom")], default="CUSTOM", max_length=20)),
                ("form_fields", models.JSONField(blank=True, default=dict, help_text="Field definitions per locale: {'en': [{'fieldName': 'name', 'fieldType': 'text', 'label': 'Your Name', 'required': true, 'order': 1}, ...], 'zh': [...]}")),
                ("submit_button_text", models.JSONField(blank=True, default=dict)),
                ("success_message", models.JSONField(blank=True, default=dict)),
                ("error_message", models.JSONField(blank=True, default=dict)),
                ("notification_email", models.EmailField(blank=True, max_length=254)),
                ("enable_captcha", models.BooleanField(default=False)),
                ("max_submissions_per_day", models.PositiveIntegerField(blank=True, null=True)),
                ("status", models.CharField(choices=[("DRAFT", "Draft"), ("PUBLISHED", "Published"), ("DISABLED", "Disabled")], default="DRAFT", max_length=20)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="FormSubmission",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("form_name", models.CharField(default="Unknown Form", max_length=255)),
                ("data", models.JSONField(default=dict)),
                ("attachments", models.JSONField(blank=True, default=list)),
                ("total_attachment_size", models.PositiveBigIntegerField(default=0)),
                ("status", models.CharField(choices=[("UNREAD", "Unread"), ("READ", "Read"), ("ARCHIVED", "Archived")], default="UNREAD", max_length=16)),
                ("auto_submitted", models.CharField(choices=[("MANUAL", "Manual"), ("AUTO", "Auto")], default="MANUAL", max_length=16)),
                ("locale", models.CharField(default="en", max_length=10)),
                ("source_page", models.CharField(blank=True, max_length=1024)),
                ("ip_address", models.CharField(blank=True, max_length=255)),
                ("user_agent", models.CharField(blank=True, max_length=1024)),
                ("admin_notes", models.TextField(blank=True)),
                ("submitted_at", models.DateTimeField(auto_now_add=True)),
                ("read_at", models.DateTimeField(blank=True, null=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("form_config", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="submissions", to="webforms.formconfig")),
            ],
            options={
                "ordering": ["-submitted_at"],
            },
        ),
    ]
