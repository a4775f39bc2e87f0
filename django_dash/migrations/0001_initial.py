from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="BlockInstance",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(blank=True, max_length=255)),
                (
                    "data_source",
                    models.CharField(blank=True, help_text="Code of a registered data source.", max_length=255),
                ),
                (
                    "preferences",
                    models.JSONField(
                        blank=True, default=dict, help_text="Layout, field visibility/order and filter toggles."
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ("title", "pk"),
            },
        ),
    ]
