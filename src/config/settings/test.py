"""
Django test settings for the project intake application.
"""

from .base import *  # noqa: F403
from .base import CONTACT_INTAKE, env

DEBUG = False

SECRET_KEY = "django-insecure-test-key-only"  # noqa: S105

ALLOWED_HOSTS = ["*"]

# Use fast password hasher for tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

# Use in-memory email backend
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"

# Use DATABASE_URL if set (Docker), otherwise fall back to in-memory SQLite
DATABASES = {
    "default": env.db("DATABASE_URL", default="sqlite://:memory:"),
}

# Use simple static files storage in tests
STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}

CONTACT_INTAKE = {
    **CONTACT_INTAKE,
    "NOTIFICATION_RECIPIENTS": ["team@example.com"],
    "NOTIFICATION_PROVIDER": "default",
    "ADMIN_SECRET": "test-admin-secret",
    "STORE_BACKEND": "apps.submissions.store.DatabaseSubmissionStore",
    "SITE_URL": "http://testserver",
}
