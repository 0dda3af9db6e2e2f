"""Fleet app configuration."""

from django.apps import AppConfig


class FleetConfig(AppConfig):
    """Configuration for fleet app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.fleet"
