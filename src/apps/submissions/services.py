"""Submission service: create, list and triage contact submissions."""

import logging
import time
from datetime import UTC

from django.core.exceptions import ValidationError
from django.utils import timezone
from django.utils.crypto import get_random_string

from .config import IntakeConfig
from .constants import Status
from .exceptions import SubmissionNotFound
from .notifications import NotificationSender, build_notification_sender
from .records import Submission
from .store import SubmissionStore, build_store
from .validation import validate_submission

logger = logging.getLogger(__name__)

ID_RANDOM_CHARS = "abcdefghijklmnopqrstuvwxyz0123456789"


def generate_submission_id() -> str:
    """Millisecond clock plus nine random base36 characters, e.g. ``sub_1718000000000_k3j9x0a2q``."""
    return f"sub_{time.time_ns() // 1_000_000}_{get_random_string(9, allowed_chars=ID_RANDOM_CHARS)}"


def current_timestamp() -> str:
    """Server-side creation instant as an ISO-8601 UTC string."""
    return timezone.now().astimezone(UTC).isoformat(timespec="microseconds")


def _sort_key(submission: Submission):
    created = submission.created_at
    return created.timestamp() if created else float("-inf")


class SubmissionService:
    """
    API boundary for submissions.

    Validates input, assigns ids and timestamps, persists to the store and
    fires the notification. Storage failures propagate as
    ``StoreUnavailable``; notification failures never do.
    """

    def __init__(
        self,
        *,
        store: SubmissionStore,
        sender: NotificationSender,
        config: IntakeConfig,
    ) -> None:
        self.store = store
        self.sender = sender
        self.config = config

    def create(self, contact_info, project_details) -> Submission:
        """
        Validate and persist a new submission.

        Args:
            contact_info: Raw contact payload (name, email, company, phone).
            project_details: Raw project payload (projectType, description,
                timeline, budget, requirements).

        Returns:
            The stored ``Submission`` with status ``new``.

        Raises:
            ValidationError: A required field is missing or malformed.
            StoreUnavailable: The record could not be written.

        """
        contact, project = validate_submission(contact_info, project_details)

        submission = Submission(
            id=generate_submission_id(),
            timestamp=current_timestamp(),
            contact_info=contact,
            project_details=project,
            status=Status.NEW,
        )
        self.store.put(submission.id, submission.to_dict())
        logger.info("Stored submission %s from %s", submission.id, contact.company)

        self.sender.notify(submission)
        return submission

    def list(self) -> list[Submission]:
        """All stored submissions, newest first."""
        submissions = [Submission.from_dict(record) for record in self.store.get_all()]
        submissions.sort(key=_sort_key, reverse=True)
        return submissions

    def get(self, submission_id: str) -> Submission:
        record = self.store.get(submission_id)
        if record is None:
            raise SubmissionNotFound(submission_id)
        return Submission.from_dict(record)

    def update(self, submission_id: str, *, status=None, notes=None) -> Submission:
        """
        Apply a staff triage change and persist it.

        Any status may move to any other. Only ``status`` and ``notes``
        change; id, timestamp and the submitted data are kept as stored.

        Raises:
            ValidationError: Unknown status or non-text notes.
            SubmissionNotFound: No submission under ``submission_id``.
            StoreUnavailable: The record could not be read or written.

        """
        errors: dict[str, list[str]] = {}
        if status is not None and status not in Status.values:
            errors["status"] = [f"Must be one of: {', '.join(Status.values)}"]
        if notes is not None and not isinstance(notes, str):
            errors["notes"] = ["Must be a string"]
        if errors:
            raise ValidationError(errors)

        submission = self.get(submission_id)
        updated = submission.with_triage(
            status=Status(status) if status is not None else None,
            notes=notes.strip() if notes is not None else None,
        )
        self.store.put(updated.id, updated.to_dict())
        logger.info("Updated submission %s (status=%s)", updated.id, updated.status)
        return updated


def build_submission_service(config: IntakeConfig | None = None) -> SubmissionService:
    """Wire the configured store and sender into a service."""
    config = config or IntakeConfig.from_settings()
    return SubmissionService(
        store=build_store(config),
        sender=build_notification_sender(config),
        config=config,
    )
