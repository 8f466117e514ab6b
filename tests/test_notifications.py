"""Tests for notification senders."""

import dataclasses
import logging
from unittest.mock import patch

import pytest
from anymail.backends.base import AnymailBaseBackend
from django.core import mail
from django.core.mail import get_connection

from apps.submissions.config import IntakeConfig
from apps.submissions.constants import Status
from apps.submissions.notifications import (
    EMAIL_PROVIDER_BACKENDS,
    EmailNotificationSender,
    LogNotificationSender,
    build_notification_sender,
    format_subject,
    format_text_body,
)
from apps.submissions.records import ContactInfo, ProjectDetails, Submission


@pytest.fixture
def submission() -> Submission:
    return Submission(
        id="sub_1718000000000_abc123xyz",
        timestamp="2024-06-10T06:13:20+00:00",
        contact_info=ContactInfo(name="Jane Doe", email="jane@example.com", company="Acme", phone=""),
        project_details=ProjectDetails(
            project_type="Cloud Migration",
            description="Move everything to the cloud",
            timeline="6-12 months",
            budget="",
            requirements="",
        ),
        status=Status.NEW,
    )


class TestFormatting:
    """Fixed message template."""

    def test_subject_names_company(self, submission: Submission) -> None:
        assert format_subject(submission) == "New Project Inquiry from Acme"

    def test_body_contains_blocks_id_and_timestamp(self, submission: Submission) -> None:
        body = format_text_body(submission)
        assert "Name: Jane Doe" in body
        assert "Project Type: Cloud Migration" in body
        assert "Phone: Not provided" in body
        assert "Submission ID: sub_1718000000000_abc123xyz" in body
        assert "Timestamp: 2024-06-10T06:13:20+00:00" in body

    def test_requirements_block_only_when_present(self, submission: Submission) -> None:
        assert "Specific Requirements" not in format_text_body(submission)
        with_reqs = dataclasses.replace(
            submission,
            project_details=dataclasses.replace(submission.project_details, requirements="SOC 2"),
        )
        assert "Specific Requirements:\nSOC 2" in format_text_body(with_reqs)


class TestEmailNotificationSender:
    """Delivery through Django email backends."""

    def test_sends_html_and_text(self, intake_config: IntakeConfig, submission: Submission) -> None:
        mail.outbox.clear()
        assert EmailNotificationSender(intake_config).notify(submission) is True

        assert len(mail.outbox) == 1
        msg = mail.outbox[0]
        assert msg.subject == "New Project Inquiry from Acme"
        assert msg.to == ["team@example.com"]
        assert msg.reply_to == ["Jane Doe <jane@example.com>"]
        assert "http://testserver/dashboard/?selected=sub_1718000000000_abc123xyz" in msg.body
        html, mimetype = msg.alternatives[0]
        assert mimetype == "text/html"
        assert "<h2>New Project Inquiry</h2>" in html

    def test_dashboard_link_leaves_key_blank(self, intake_config: IntakeConfig, submission: Submission) -> None:
        mail.outbox.clear()
        EmailNotificationSender(intake_config).notify(submission)

        msg = mail.outbox[0]
        html, _ = msg.alternatives[0]
        assert "/dashboard/?selected=sub_1718000000000_abc123xyz&key=\n" in msg.body
        assert "add your admin key" in msg.body
        assert "add your admin key" in html
        assert intake_config.admin_secret not in msg.body
        assert intake_config.admin_secret not in html

    def test_no_recipients_skips(self, intake_config: IntakeConfig, submission: Submission) -> None:
        mail.outbox.clear()
        config = dataclasses.replace(intake_config, notification_recipients=())
        assert EmailNotificationSender(config).notify(submission) is False
        assert mail.outbox == []

    def test_backend_failure_is_swallowed(
        self, intake_config: IntakeConfig, submission: Submission, caplog: pytest.LogCaptureFixture
    ) -> None:
        with patch(
            "django.core.mail.backends.locmem.EmailBackend.send_messages",
            side_effect=ConnectionError("relay down"),
        ), caplog.at_level(logging.ERROR, logger="apps.submissions.notifications"):
            assert EmailNotificationSender(intake_config).notify(submission) is False
        assert "Failed to send notification" in caplog.text

    def test_zero_sent_counts_as_failure(self, intake_config: IntakeConfig, submission: Submission) -> None:
        with patch("django.core.mail.backends.locmem.EmailBackend.send_messages", return_value=0):
            assert EmailNotificationSender(intake_config).notify(submission) is False

    def test_unknown_provider_is_a_failure_not_an_exception(
        self, intake_config: IntakeConfig, submission: Submission
    ) -> None:
        config = dataclasses.replace(intake_config, notification_provider="carrier-pigeon")
        assert EmailNotificationSender(config).notify(submission) is False


class TestLogNotificationSender:
    """Log-only delivery."""

    def test_logs_message(
        self, intake_config: IntakeConfig, submission: Submission, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="apps.submissions.notifications"):
            assert LogNotificationSender(intake_config).notify(submission) is True
        assert "New Project Inquiry from Acme" in caplog.text


class TestBuildNotificationSender:
    """Implementation picked by provider."""

    def test_log_provider(self, intake_config: IntakeConfig) -> None:
        config = dataclasses.replace(intake_config, notification_provider="log")
        assert isinstance(build_notification_sender(config), LogNotificationSender)

    @pytest.mark.parametrize("provider", ["default", "smtp", "mailgun", "sendgrid", "amazon_ses", "resend", "locmem"])
    def test_email_providers(self, intake_config: IntakeConfig, provider: str) -> None:
        config = dataclasses.replace(intake_config, notification_provider=provider)
        assert isinstance(build_notification_sender(config), EmailNotificationSender)

    @pytest.mark.parametrize("provider", ["mailgun", "sendgrid", "amazon_ses", "resend"])
    def test_anymail_backends_are_installed(self, provider: str) -> None:
        connection = get_connection(backend=EMAIL_PROVIDER_BACKENDS[provider])
        assert isinstance(connection, AnymailBaseBackend)
