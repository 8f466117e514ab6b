"""Field rules for contact and project data.

The same two forms back both the JSON API and the intake wizard, so the
browser-side checks and the server-side checks can never drift apart.
Errors are reported under the camelCase names used on the wire.
"""

from typing import ClassVar

from django import forms
from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator

from .constants import BUDGET_RANGES, ProjectType, Timeline
from .records import ContactInfo, ProjectDetails

# Something before an "@", and a "." somewhere after it. Deliberately lenient.
validate_email_shape = RegexValidator(
    regex=r"^[^\s@]+@[^\s@]+\.[^\s@]+$",
    message="Please enter a valid email address",
    code="invalid_email",
)

CONTACT_SECTION_ERROR = "Missing or invalid contact information"
PROJECT_SECTION_ERROR = "Missing or invalid project details"


class WireForm(forms.Form):
    """A form whose fields map one-to-one onto keys of a JSON payload."""

    wire_fields: ClassVar[dict[str, str]] = {}

    @classmethod
    def from_payload(cls, payload) -> "WireForm":
        if not isinstance(payload, dict):
            payload = {}
        return cls(data={name: payload.get(wire) for name, wire in cls.wire_fields.items()})

    def to_payload(self) -> dict:
        """Cleaned values keyed by wire name. Only valid after ``is_valid()``."""
        return {wire: self.cleaned_data.get(name, "") for name, wire in self.wire_fields.items()}

    def wire_errors(self) -> dict[str, list[str]]:
        return {self.wire_fields.get(name, name): list(messages) for name, messages in self.errors.items()}


class ContactInfoForm(WireForm):
    """Step one: who is asking."""

    wire_fields: ClassVar[dict[str, str]] = {
        "name": "name",
        "email": "email",
        "company": "company",
        "phone": "phone",
    }

    name = forms.CharField(error_messages={"required": "Name is required"})
    email = forms.CharField(
        validators=[validate_email_shape],
        error_messages={"required": "Email is required"},
    )
    company = forms.CharField(error_messages={"required": "Company name is required"})
    phone = forms.CharField(required=False)


class ProjectDetailsForm(WireForm):
    """Step two: what they need."""

    wire_fields: ClassVar[dict[str, str]] = {
        "project_type": "projectType",
        "description": "description",
        "timeline": "timeline",
        "budget": "budget",
        "requirements": "requirements",
    }

    project_type = forms.ChoiceField(
        choices=[("", "Select project type"), *ProjectType.choices],
        error_messages={
            "required": "Please select a project type",
            "invalid_choice": "Please select a valid project type",
        },
    )
    description = forms.CharField(
        widget=forms.Textarea(attrs={"rows": 4}),
        error_messages={"required": "Project description is required"},
    )
    timeline = forms.ChoiceField(
        choices=[("", "Select timeline"), *Timeline.choices],
        error_messages={
            "required": "Please select a timeline",
            "invalid_choice": "Please select a valid timeline",
        },
    )
    budget = forms.CharField(
        required=False,
        widget=forms.Select(choices=[("", "Select budget range"), *((b, b) for b in BUDGET_RANGES)]),
    )
    requirements = forms.CharField(required=False, widget=forms.Textarea(attrs={"rows": 3}))


def validate_submission(contact_info, project_details) -> tuple[ContactInfo, ProjectDetails]:
    """
    Validate raw contact and project payloads.

    Returns:
        The cleaned ``ContactInfo`` and ``ProjectDetails``.

    Raises:
        ValidationError: keyed by wire field name, covering both sections.

    """
    contact_form = ContactInfoForm.from_payload(contact_info)
    project_form = ProjectDetailsForm.from_payload(project_details)

    errors: dict[str, list[str]] = {}
    if not contact_form.is_valid():
        errors.update(contact_form.wire_errors())
    if not project_form.is_valid():
        errors.update(project_form.wire_errors())
    if errors:
        raise ValidationError(errors)

    return (
        ContactInfo.from_dict(contact_form.to_payload()),
        ProjectDetails.from_dict(project_form.to_payload()),
    )


def summarize(error: ValidationError) -> str:
    """One-line description of which section failed."""
    fields = set(getattr(error, "message_dict", {}))
    if fields & set(ContactInfoForm.wire_fields.values()):
        return CONTACT_SECTION_ERROR
    if fields & set(ProjectDetailsForm.wire_fields.values()):
        return PROJECT_SECTION_ERROR
    return "; ".join(error.messages)
