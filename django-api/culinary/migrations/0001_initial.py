import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CulinaryEvent",
            fields=[
                ("id", models.CharField(max_length=64, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("cuisine", models.CharField(max_length=100)),
                ("chef", models.CharField(max_length=255)),
                ("country", models.CharField(max_length=100)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("Workshop", "Workshop"),
                            ("Tasting", "Tasting"),
                            ("Festival", "Festival"),
                            ("Masterclass", "Masterclass"),
                        ],
                        max_length=20,
                    ),
                ),
                ("location", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("long_description", models.TextField(blank=True, default="")),
                ("duration", models.CharField(blank=True, default="", max_length=50)),
                ("image_url", models.URLField(blank=True, max_length=500, null=True)),
                ("highlights", models.JSONField(blank=True, default=list)),
                ("date", models.DateTimeField()),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                ("max_participants", models.PositiveIntegerField()),
                ("current_participants", models.PositiveIntegerField(default=0)),
                ("position", models.PositiveIntegerField(default=0)),
            ],
            options={
                "ordering": ["position", "id"],
                "indexes": [
                    models.Index(fields=["position"], name="culinary_event_position_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            ("current_participants__lte", models.F("max_participants"))
                        ),
                        name="culinary_event_participants_within_capacity",
                    ),
                ],
            },
        ),
    ]
