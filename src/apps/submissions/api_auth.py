"""Shared-secret admin access for listing and triaging submissions."""

import hmac
import logging

from django.http import HttpRequest

from .config import IntakeConfig

logger = logging.getLogger(__name__)

ADMIN_SECRET_PARAM = "key"
ADMIN_SECRET_HEADER = "X-Admin-Secret"


def get_client_ip(request: HttpRequest) -> str:
    """Extract client IP, respecting X-Forwarded-For behind a proxy."""
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR", "unknown")


def get_presented_secret(request: HttpRequest) -> str:
    """The secret from ``?key=`` or, failing that, the X-Admin-Secret header."""
    return request.GET.get(ADMIN_SECRET_PARAM) or request.headers.get(ADMIN_SECRET_HEADER, "")


def check_admin_secret(request: HttpRequest, config: IntakeConfig) -> tuple[int, str] | None:
    """
    Verify the admin credential on ``request``.

    Returns:
        None when access is granted, otherwise ``(status_code, message)``:
        403 when no secret is configured at all, 401 for a missing or wrong one.

    """
    if not config.admin_secret:
        logger.warning("Admin access attempted but no ADMIN_SECRET is configured")
        return 403, "Admin access is not configured"

    presented = get_presented_secret(request)
    if not presented:
        return 401, "Missing admin secret"

    if not hmac.compare_digest(presented.encode(), config.admin_secret.encode()):
        logger.warning("Invalid admin secret from %s", get_client_ip(request))
        return 401, "Invalid admin secret"

    return None


class AdminSecretMixin:
    """
    Mixin for class-based views that require the admin secret.

    ``exempt_methods`` skip the check (CORS preflight by default).
    Subclasses decide how a denial is rendered via ``deny()``.
    """

    exempt_methods: tuple[str, ...] = ("options",)

    def get_intake_config(self) -> IntakeConfig:
        if not hasattr(self, "_intake_config"):
            self._intake_config = IntakeConfig.from_settings()
        return self._intake_config

    def dispatch(self, request, *args, **kwargs):
        """Validate the admin secret before dispatching to the handler."""
        if request.method.lower() not in self.exempt_methods:
            denial = check_admin_secret(request, self.get_intake_config())
            if denial is not None:
                return self.deny(request, *denial)
        return super().dispatch(request, *args, **kwargs)

    def deny(self, request, status: int, message: str):
        raise NotImplementedError
