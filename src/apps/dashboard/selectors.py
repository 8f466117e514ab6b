"""Filtering and counting over an already-fetched submission list."""

from apps.submissions.constants import Status
from apps.submissions.records import Submission

ALL = "all"
STATUS_FILTERS: list[str] = [ALL, *Status.values]


def normalize_status_filter(value: str | None) -> str:
    """Unknown or empty filters mean "all"."""
    return value if value in STATUS_FILTERS else ALL


def filter_by_status(submissions: list[Submission], status: str | None) -> list[Submission]:
    status = normalize_status_filter(status)
    if status == ALL:
        return list(submissions)
    return [submission for submission in submissions if submission.status == status]


def count_by_status(submissions: list[Submission]) -> dict[str, int]:
    counts = dict.fromkeys(Status.values, 0)
    for submission in submissions:
        if submission.status in counts:
            counts[submission.status] += 1
    return counts


def find_submission(submissions: list[Submission], submission_id: str | None) -> Submission | None:
    if not submission_id:
        return None
    return next((s for s in submissions if s.id == submission_id), None)
