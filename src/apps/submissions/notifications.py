"""Out-of-band alerts for new submissions.

``notify`` never raises: delivery problems are logged and reported as
``False`` so that a mail outage cannot undo a stored submission.
"""

import logging

from django.core.mail import EmailMultiAlternatives, get_connection
from django.template.loader import render_to_string

from .config import IntakeConfig
from .exceptions import NotificationFailure
from .records import Submission

logger = logging.getLogger(__name__)

# Provider name -> Django email backend. "default" uses settings.EMAIL_BACKEND.
EMAIL_PROVIDER_BACKENDS: dict[str, str | None] = {
    "default": None,
    "console": "django.core.mail.backends.console.EmailBackend",
    "locmem": "django.core.mail.backends.locmem.EmailBackend",
    "smtp": "django.core.mail.backends.smtp.EmailBackend",
    "mailgun": "anymail.backends.mailgun.EmailBackend",
    "sendgrid": "anymail.backends.sendgrid.EmailBackend",
    "amazon_ses": "anymail.backends.amazon_ses.EmailBackend",
    "resend": "anymail.backends.resend.EmailBackend",
}


def format_subject(submission: Submission) -> str:
    return f"New Project Inquiry from {submission.contact_info.company}"


def format_text_body(submission: Submission, dashboard_url: str = "") -> str:
    """Plain-text rendering: contact, project, optional requirements, id, timestamp."""
    contact = submission.contact_info
    project = submission.project_details
    body = (
        f"New project inquiry received:\n\n"
        f"Contact Information\n"
        f"Name: {contact.name}\n"
        f"Email: {contact.email}\n"
        f"Company: {contact.company}\n"
        f"Phone: {contact.phone or 'Not provided'}\n\n"
        f"Project Details\n"
        f"Project Type: {project.project_type}\n"
        f"Timeline: {project.timeline}\n"
        f"Budget: {project.budget or 'Not specified'}\n\n"
        f"Description:\n{project.description}\n\n"
    )
    if project.requirements:
        body += f"Specific Requirements:\n{project.requirements}\n\n"
    body += f"Submission ID: {submission.id}\nTimestamp: {submission.timestamp}\n"
    if dashboard_url:
        body += f"\nView in dashboard (add your admin key to the link): {dashboard_url}\n"
    return body


class NotificationSender:
    """Provider-agnostic notification capability."""

    def __init__(self, config: IntakeConfig) -> None:
        self.config = config

    def notify(self, submission: Submission) -> bool:
        """Send a notification for ``submission``. Returns True on delivery."""
        raise NotImplementedError

    def dashboard_url(self, submission: Submission) -> str:
        if not self.config.site_url:
            return ""
        # The admin secret is never mailed; the reader appends it after "key=".
        return f"{self.config.site_url}/dashboard/?selected={submission.id}&key="


class LogNotificationSender(NotificationSender):
    """Writes the formatted message to the log instead of delivering it."""

    def notify(self, submission: Submission) -> bool:
        logger.info(
            "Notification for %s to %s:\n%s\n%s",
            submission.id,
            ", ".join(self.config.notification_recipients) or "(no recipients)",
            format_subject(submission),
            format_text_body(submission, self.dashboard_url(submission)),
        )
        return True


class EmailNotificationSender(NotificationSender):
    """Delivers through a Django email backend chosen by provider name."""

    def notify(self, submission: Submission) -> bool:
        recipients = list(self.config.notification_recipients)
        if not recipients:
            logger.warning("No notification recipients configured, skipping notification.")
            return False

        try:
            self._deliver(submission, recipients)
        except Exception:
            logger.exception("Failed to send notification for submission %s", submission.id)
            return False

        logger.info("Notification sent to %s for submission %s", recipients, submission.id)
        return True

    def _deliver(self, submission: Submission, recipients: list[str]) -> None:
        dashboard_url = self.dashboard_url(submission)
        html_body = render_to_string(
            "emails/submission_notification.html",
            {"submission": submission, "dashboard_url": dashboard_url},
        )
        contact = submission.contact_info
        msg = EmailMultiAlternatives(
            subject=format_subject(submission),
            body=format_text_body(submission, dashboard_url),
            from_email=self.config.from_email or None,
            to=recipients,
            reply_to=[f"{contact.name} <{contact.email}>"],
            connection=self._connection(),
        )
        msg.attach_alternative(html_body, "text/html")
        if not msg.send(fail_silently=False):
            raise NotificationFailure(f"No message was sent for submission {submission.id}")

    def _connection(self):
        provider = self.config.notification_provider
        if provider not in EMAIL_PROVIDER_BACKENDS:
            raise NotificationFailure(f"Unknown notification provider {provider!r}")
        return get_connection(backend=EMAIL_PROVIDER_BACKENDS[provider])


def build_notification_sender(config: IntakeConfig) -> NotificationSender:
    """Pick the sender implementation for ``config.notification_provider``."""
    if config.notification_provider == "log":
        return LogNotificationSender(config)
    return EmailNotificationSender(config)
