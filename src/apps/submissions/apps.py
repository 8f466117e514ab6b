"""Submissions app configuration."""

from django.apps import AppConfig


class SubmissionsConfig(AppConfig):
    """Storage, notification and API for contact submissions."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.submissions"
    verbose_name = "contact submissions"
