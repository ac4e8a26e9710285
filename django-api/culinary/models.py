"""Django ORM models (persistence layer).

These models hold the seed catalog. Domain logic lives in domain/.
"""

from django.core.validators import MinValueValidator
from django.db import models


class CulinaryEvent(models.Model):
    """Persistence model for culinary events."""

    class Category(models.TextChoices):
        WORKSHOP = "Workshop"
        TASTING = "Tasting"
        FESTIVAL = "Festival"
        MASTERCLASS = "Masterclass"

    id = models.CharField(primary_key=True, max_length=64)
    title = models.CharField(max_length=255)
    cuisine = models.CharField(max_length=100)
    chef = models.CharField(max_length=255)
    country = models.CharField(max_length=100)
    category = models.CharField(max_length=20, choices=Category.choices)
    location = models.CharField(max_length=255)
    description = models.TextField()
    long_description = models.TextField(blank=True, default="")
    duration = models.CharField(max_length=50, blank=True, default="")
    image_url = models.URLField(max_length=500, blank=True, null=True)
    highlights = models.JSONField(default=list, blank=True)
    date = models.DateTimeField()
    price = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(0)]
    )
    max_participants = models.PositiveIntegerField()
    current_participants = models.PositiveIntegerField(default=0)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["position", "id"]
        indexes = [
            models.Index(fields=["position"], name="culinary_event_position_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(
                    current_participants__lte=models.F("max_participants")
                ),
                name="culinary_event_participants_within_capacity",
            ),
        ]

    def __str__(self) -> str:
        return self.title
