import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ProductSeries",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("slug", models.SlugField(max_length=140, unique=True)),
                ("name", models.JSONField(blank=True, default=dict, help_text="Localized name.")),
                ("description", models.JSONField(blank=True, default=dict, help_text="Localized description.")),
                ("featured_image", models.JSONField(blank=True, help_text="Featured image reference, e.g. {'url': '...', 'filename': '...'}.", null=True)),
                ("order", models.PositiveIntegerField(default=0)),
                ("status", models.CharField(choices=[("DRAFT", "Draft"), ("PUBLISHED", "Published"), ("ARCHIVED", "Archived")], default="DRAFT", max_length=20)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Product Series",
                "verbose_name_plural": "Product Series",
                "ordering": ["order", "id"],
            },
        ),
        migrations.CreateModel(
            name="ProductSeriesContentTranslation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("locale", models.CharField(default="en", max_length=10)),
                ("content", models.JSONField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("product_series", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="content_translations", to="catalog.productseries")),
            ],
            options={
                "ordering": ["product_series", "locale"],
                "unique_together": {("product_series", "locale")},
            },
        ),
    ]
