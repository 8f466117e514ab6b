"""Tests for contact and project field rules."""

import pytest
from django.core.exceptions import ValidationError

from apps.submissions.validation import (
    CONTACT_SECTION_ERROR,
    PROJECT_SECTION_ERROR,
    ContactInfoForm,
    ProjectDetailsForm,
    summarize,
    validate_submission,
)


class TestEmailShape:
    """Email must have an "@" with a "." somewhere after it."""

    @pytest.mark.parametrize("email", ["a@b.c", "john@example.com", "first.last+tag@sub.domain.io", "x@y.notatld"])
    def test_accepted(self, email: str) -> None:
        form = ContactInfoForm.from_payload({"name": "A", "email": email, "company": "C"})
        assert form.is_valid(), form.errors

    @pytest.mark.parametrize("email", ["a@b", "ab.com", "a b@c.d", "@b.c", "a@.c"])
    def test_rejected(self, email: str) -> None:
        form = ContactInfoForm.from_payload({"name": "A", "email": email, "company": "C"})
        assert not form.is_valid()
        assert form.wire_errors()["email"] == ["Please enter a valid email address"]


class TestContactInfoForm:
    """Required contact fields."""

    @pytest.mark.parametrize(
        ("field", "message"),
        [
            ("name", "Name is required"),
            ("email", "Email is required"),
            ("company", "Company name is required"),
        ],
    )
    def test_required_fields(self, contact_info: dict, field: str, message: str) -> None:
        contact_info[field] = "   "
        form = ContactInfoForm.from_payload(contact_info)
        assert not form.is_valid()
        assert form.wire_errors() == {field: [message]}

    def test_phone_is_optional(self, contact_info: dict) -> None:
        del contact_info["phone"]
        form = ContactInfoForm.from_payload(contact_info)
        assert form.is_valid()
        assert form.to_payload()["phone"] == ""

    def test_values_are_stripped(self, contact_info: dict) -> None:
        contact_info["name"] = "  John Smith  "
        form = ContactInfoForm.from_payload(contact_info)
        assert form.is_valid()
        assert form.to_payload()["name"] == "John Smith"

    def test_non_dict_payload_reports_every_required_field(self) -> None:
        form = ContactInfoForm.from_payload("not a dict")
        assert not form.is_valid()
        assert set(form.wire_errors()) == {"name", "email", "company"}


class TestProjectDetailsForm:
    """Required and enumerated project fields."""

    @pytest.mark.parametrize("field", ["projectType", "description", "timeline"])
    def test_required_fields(self, project_details: dict, field: str) -> None:
        project_details[field] = ""
        form = ProjectDetailsForm.from_payload(project_details)
        assert not form.is_valid()
        assert field in form.wire_errors()

    def test_budget_and_requirements_are_optional(self, project_details: dict) -> None:
        project_details.pop("budget")
        project_details.pop("requirements")
        assert ProjectDetailsForm.from_payload(project_details).is_valid()

    def test_unknown_project_type_rejected(self, project_details: dict) -> None:
        project_details["projectType"] = "Website Redesign"
        form = ProjectDetailsForm.from_payload(project_details)
        assert not form.is_valid()
        assert form.wire_errors() == {"projectType": ["Please select a valid project type"]}

    def test_unknown_timeline_rejected(self, project_details: dict) -> None:
        project_details["timeline"] = "Tomorrow"
        form = ProjectDetailsForm.from_payload(project_details)
        assert not form.is_valid()
        assert "timeline" in form.wire_errors()

    def test_budget_accepts_any_string(self, project_details: dict) -> None:
        project_details["budget"] = "About a million"
        form = ProjectDetailsForm.from_payload(project_details)
        assert form.is_valid()
        assert form.to_payload()["budget"] == "About a million"


class TestValidateSubmission:
    """Combined validation used by the service."""

    def test_returns_cleaned_records(self, contact_info: dict, project_details: dict) -> None:
        contact, project = validate_submission(contact_info, project_details)
        assert contact.company == "TechCorp"
        assert project.project_type == "System Architecture"
        assert project.requirements == "AWS, Kubernetes"

    def test_errors_from_both_sections(self, contact_info: dict, project_details: dict) -> None:
        del contact_info["company"]
        del project_details["timeline"]
        with pytest.raises(ValidationError) as exc_info:
            validate_submission(contact_info, project_details)
        assert set(exc_info.value.message_dict) == {"company", "timeline"}

    def test_summary_names_contact_section_first(self, contact_info: dict, project_details: dict) -> None:
        del contact_info["email"]
        del project_details["description"]
        with pytest.raises(ValidationError) as exc_info:
            validate_submission(contact_info, project_details)
        assert summarize(exc_info.value) == CONTACT_SECTION_ERROR

    def test_summary_for_project_section(self, contact_info: dict, project_details: dict) -> None:
        del project_details["description"]
        with pytest.raises(ValidationError) as exc_info:
            validate_submission(contact_info, project_details)
        assert summarize(exc_info.value) == PROJECT_SECTION_ERROR
