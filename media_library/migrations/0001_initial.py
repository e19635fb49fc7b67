from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="MediaTag",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.JSONField(blank=True, default=dict, help_text="Localized tag name.")),
                ("slug", models.SlugField(max_length=140, unique=True)),
                ("type", models.CharField(choices=[("PRODUCT_SERIES", "Product Series"), ("FUNCTION_TYPE", "Function Type"), ("SCENE_TYPE", "Scene Type"), ("SPEC", "Spec"), ("COLOR", "Color"), ("CUSTOM", "Custom")], default="CUSTOM", max_length=32)),
                ("order", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["type", "order", "slug"],
            },
        ),
        migrations.CreateModel(
            name="Media",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("file", models.ImageField(upload_to="media/")),
                ("filename", models.CharField(max_length=255)),
                ("status", models.CharField(choices=[("ACTIVE", "Active"), ("ARCHIVED", "Archived")], default="ACTIVE", max_length=16)),
                ("alt_text", models.JSONField(blank=True, default=dict)),
                ("width", models.PositiveIntegerField(blank=True, null=True)),
                ("height", models.PositiveIntegerField(blank=True, null=True)),
                ("file_size", models.PositiveIntegerField(blank=True, null=True)),
                ("mime_type", models.CharField(blank=True, max_length=100)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("tags", models.ManyToManyField(blank=True, related_name="media", to="media_library.mediatag")),
                ("tags_filter", models.ManyToManyField(blank=True, related_name="filtered_media", to="media_library.mediatag")),
            ],
            options={
                "verbose_name_plural": "Media",
                "ordering": ["-created_at"],
            },
        ),
    ]
