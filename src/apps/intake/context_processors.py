"""Context processors for the intake app."""

from django.conf import settings
from django.http import HttpRequest


def site_context(request: HttpRequest) -> dict:
    """Add site-wide context variables to all templates."""
    return {
        "SITE_NAME": getattr(settings, "SITE_NAME", "Project Intake"),
        "SITE_TAGLINE": "Tell us about your project",
    }
