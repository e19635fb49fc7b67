import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("media_library", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="MenuItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("slug", models.SlugField(help_text="Unique identifier, e.g. 'product', 'service', 'about-us'.", max_length=255, unique=True)),
                ("name", models.JSONField(blank=True, default=dict, help_text="Localized label: {'en': 'Home', 'zh': '首页'}")),
                ("type", models.CharField(choices=[("STANDARD", "Standard"), ("PRODUCT_CARDS", "Product Cards"), ("SUBMENU", "Submenu (icon + text)")], default="STANDARD", max_length=20)),
                ("icon", models.CharField(blank=True, help_text="Lucide icon name (e.g. Home, Package). Used by SUBMENU children.", max_length=100)),
                ("link", models.CharField(blank=True, help_text="Route or external URL, e.g. '/products' or 'https://...'.", max_length=512)),
                ("inquiry_link", models.CharField(blank=True, help_text="Target of the 'Inquiry' button on PRODUCT_CARDS children.", max_length=512)),
                ("order", models.PositiveIntegerField(default=1)),
                ("visible", models.BooleanField(default=True)),
                ("is_system", models.BooleanField(default=False)),
                ("parent", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="children", to="navigation.menuitem")),
                ("media_tags", models.ManyToManyField(blank=True, help_text="A random active image carrying ALL of these tags is shown on the card.", related_name="menu_items", to="media_library.mediatag")),
            ],
            options={
                "verbose_name": "Menu Item",
                "verbose_name_plural": "Menu Items",
                "ordering": ["order", "id"],
            },
        ),
    ]
