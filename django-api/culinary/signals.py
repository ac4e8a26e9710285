"""Django signals for cache invalidation."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from culinary.caching import invalidate_catalog
from culinary.models import CulinaryEvent


@receiver([post_save, post_delete], sender=CulinaryEvent)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate catalog caches when an event is saved or deleted."""
    invalidate_catalog(instance.pk)
