"""Exceptions raised by the submission store, sender and service.

Input problems use Django's own ``ValidationError``; everything here is
about the collaborators behind the service.
"""


class IntakeError(Exception):
    """Base class for submission errors."""


class StoreUnavailable(IntakeError):
    """The backing store could not be reached or failed mid-operation."""


class NotificationFailure(IntakeError):
    """A notification could not be delivered. Never leaves the sender."""


class SubmissionNotFound(IntakeError):
    """No submission is stored under the requested id."""

    def __init__(self, submission_id: str) -> None:
        super().__init__(f"Submission {submission_id!r} not found")
        self.submission_id = submission_id
