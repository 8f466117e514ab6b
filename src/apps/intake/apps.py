"""Intake app configuration."""

from django.apps import AppConfig


class IntakeConfig(AppConfig):
    """Public multi-step inquiry form."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.intake"
    verbose_name = "intake form"
