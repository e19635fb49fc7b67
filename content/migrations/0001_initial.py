import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Page",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("slug", models.SlugField(max_length=255, unique=True)),
                ("path", models.CharField(help_text="Full URL path used by the frontend router, e.g. '/service/one-stop'.", max_length=512, unique=True)),
                ("page_type", models.CharField(choices=[("TEMPLATE", "Template Page"), ("FREEFORM", "Freeform Page")], default="FREEFORM", max_length=20)),
                ("template", models.CharField(blank=True, help_text="Template pages only, e.g. SERVICE_OVERVIEW, FAQ, OEM_ODM.", max_length=100)),
                ("title", models.JSONField(blank=True, default=dict, help_text="Localized title: {'en': '...', 'zh': '...'}")),
                ("is_system", models.BooleanField(default=False)),
                ("status", models.CharField(choices=[("DRAFT", "Draft"), ("PUBLISHED", "Published"), ("ARCHIVED", "Archived")], default="DRAFT", max_length=20)),
                ("published_at", models.DateTimeField(blank=True, null=True)),
                ("order", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Page",
                "verbose_name_plural": "Pages",
                "ordering": ["order", "slug"],
            },
        ),
        migrations.CreateModel(
            name="PageContentTranslation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("locale", models.CharField(default="en", help_text="Language code, e.g. 'en', 'zh'.", max_length=10)),
                ("content", models.JSONField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("page", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="content_translations", to="content.page")),
            ],
            options={
                "verbose_name": "Page Content Translation",
                "verbose_name_plural": "Page Content Translations",
                "ordering": ["page", "locale"],
                "unique_together": {("page", "locale")},
            },
        ),
    ]
