from django.apps import AppConfig


class CulinaryConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "culinary"
    verbose_name = "Culinary events"

    def ready(self) -> None:
        from culinary import signals  # noqa: F401
