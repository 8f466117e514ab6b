"""Explicit configuration for the submission service and its collaborators."""

from dataclasses import dataclass

from django.conf import settings

from .constants import DEFAULT_NAMESPACE

DEFAULT_STORE_BACKEND = "apps.submissions.store.DatabaseSubmissionStore"


@dataclass(frozen=True)
class IntakeConfig:
    """Recognized options, read once from ``settings.CONTACT_INTAKE``."""

    notification_recipients: tuple[str, ...] = ()
    notification_provider: str = "default"
    admin_secret: str = ""
    store_backend: str = DEFAULT_STORE_BACKEND
    store_namespace: str = DEFAULT_NAMESPACE
    from_email: str = ""
    site_url: str = ""

    @classmethod
    def from_settings(cls) -> "IntakeConfig":
        options: dict = getattr(settings, "CONTACT_INTAKE", {})
        recipients = options.get("NOTIFICATION_RECIPIENTS") or ()
        if isinstance(recipients, str):
            recipients = [r.strip() for r in recipients.split(",")]
        return cls(
            notification_recipients=tuple(r for r in recipients if r),
            notification_provider=options.get("NOTIFICATION_PROVIDER") or "default",
            admin_secret=options.get("ADMIN_SECRET") or "",
            store_backend=options.get("STORE_BACKEND") or DEFAULT_STORE_BACKEND,
            store_namespace=options.get("STORE_NAMESPACE") or DEFAULT_NAMESPACE,
            from_email=options.get("FROM_EMAIL") or settings.DEFAULT_FROM_EMAIL,
            site_url=(options.get("SITE_URL") or getattr(settings, "SITE_URL", "")).rstrip("/"),
        )
