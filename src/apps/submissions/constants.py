"""Enumerated values for contact submissions."""

from django.db import models


class Status(models.TextChoices):
    """Triage state of a submission. Any state may move to any other."""

    NEW = "new", "New"
    REVIEWED = "reviewed", "Reviewed"
    RESPONDED = "responded", "Responded"


class ProjectType(models.TextChoices):
    """Kinds of engagement a submitter can ask for."""

    SYSTEM_ARCHITECTURE = "System Architecture", "System Architecture"
    DATA_INFRASTRUCTURE = "Data Infrastructure", "Data Infrastructure"
    MLOPS = "Machine Learning Operations", "Machine Learning Operations"
    PERFORMANCE_ANALYSIS = "Performance Analysis", "Performance Analysis"
    CLOUD_MIGRATION = "Cloud Migration", "Cloud Migration"
    SECURITY_ASSESSMENT = "Security Assessment", "Security Assessment"
    CUSTOM_SOLUTION = "Custom Solution", "Custom Solution"


class Timeline(models.TextChoices):
    """Expected engagement length."""

    ONE_TO_TWO_MONTHS = "1-2 months", "1-2 months"
    THREE_TO_SIX_MONTHS = "3-6 months", "3-6 months"
    SIX_TO_TWELVE_MONTHS = "6-12 months", "6-12 months"
    OVER_TWELVE_MONTHS = "12+ months", "12+ months"
    ONGOING = "Ongoing engagement", "Ongoing engagement"


# Offered in the form; the API accepts any budget string.
BUDGET_RANGES = [
    "Under $50k",
    "$50k - $100k",
    "$100k - $250k",
    "$250k - $500k",
    "$500k+",
    "Discuss with team",
]

DEFAULT_NAMESPACE = "contact-submissions"
