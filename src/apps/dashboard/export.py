"""CSV export of submissions.

Column order is fixed. Description and requirements are always wrapped in
double quotes with inner quotes doubled; every other column is written as is.
"""

from datetime import date

from apps.submissions.records import Submission

CSV_HEADER = "ID,Timestamp,Name,Email,Company,Phone,Project Type,Timeline,Budget,Status,Description,Requirements"


def quote(value: str) -> str:
    return '"' + (value or "").replace('"', '""') + '"'


def submission_to_row(submission: Submission) -> str:
    contact = submission.contact_info
    project = submission.project_details
    return ",".join(
        [
            submission.id,
            submission.timestamp,
            contact.name,
            contact.email,
            contact.company,
            contact.phone or "",
            project.project_type,
            project.timeline,
            project.budget or "",
            str(submission.status),
            quote(project.description),
            quote(project.requirements),
        ]
    )


def submissions_to_csv(submissions: list[Submission]) -> str:
    return "\n".join([CSV_HEADER, *(submission_to_row(s) for s in submissions)])


def export_filename(today: date) -> str:
    return f"contact-submissions-{today:%Y-%m-%d}.csv"
