"""Checklists app configuration."""

from django.apps import AppConfig


class ChecklistsConfig(AppConfig):
    """Configuration for checklists app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.checklists"
