"""Pytest configuration and shared fixtures for intake tests."""

import pytest
from django.test import Client

from apps.submissions import store as store_module
from apps.submissions.config import IntakeConfig
from apps.submissions.notifications import NotificationSender
from apps.submissions.services import SubmissionService
from apps.submissions.store import LocMemSubmissionStore

ADMIN_SECRET = "test-admin-secret"  # noqa: S105


class RecordingSender(NotificationSender):
    """Sender double that remembers what it was asked to send."""

    def __init__(self, config: IntakeConfig, *, result: bool = True) -> None:
        super().__init__(config)
        self.result = result
        self.sent = []

    def notify(self, submission) -> bool:
        self.sent.append(submission)
        return self.result


@pytest.fixture
def contact_info() -> dict:
    """A complete, valid contact payload."""
    return {
        "name": "John Smith",
        "email": "john@example.com",
        "company": "TechCorp",
        "phone": "+1-555-0123",
    }


@pytest.fixture
def project_details() -> dict:
    """A complete, valid project payload."""
    return {
        "projectType": "System Architecture",
        "description": "Need help with scalable infrastructure",
        "timeline": "3-6 months",
        "budget": "$100k - $250k",
        "requirements": "AWS, Kubernetes",
    }


@pytest.fixture
def intake_config() -> IntakeConfig:
    """Config for services built directly in tests."""
    return IntakeConfig(
        notification_recipients=("team@example.com",),
        notification_provider="locmem",
        admin_secret=ADMIN_SECRET,
        store_backend="apps.submissions.store.LocMemSubmissionStore",
        store_namespace="test-submissions",
        from_email="noreply@example.com",
        site_url="http://testserver",
    )


@pytest.fixture
def locmem_store(intake_config: IntakeConfig):
    """A fresh in-memory store, emptied after the test."""
    store = LocMemSubmissionStore(namespace=intake_config.store_namespace)
    store.clear()
    yield store
    store.clear()
    store_module._locmem_blobs.pop(intake_config.store_namespace, None)


@pytest.fixture
def sender(intake_config: IntakeConfig) -> RecordingSender:
    return RecordingSender(intake_config)


@pytest.fixture
def service(locmem_store, sender, intake_config: IntakeConfig) -> SubmissionService:
    """A service over the in-memory store and a recording sender."""
    return SubmissionService(store=locmem_store, sender=sender, config=intake_config)


@pytest.fixture
def admin_key() -> str:
    return ADMIN_SECRET


@pytest.fixture
def api_client() -> Client:
    """Client that enforces CSRF checks, like a real cross-origin caller."""
    return Client(enforce_csrf_checks=True)
