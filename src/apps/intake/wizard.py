"""Three-step intake wizard: contact -> project -> review.

The wizard re-runs the same form rules the API enforces so the visitor
gets feedback per step. It is a convenience only; the submission service
validates again on ``submit``.
"""

import logging

from django.core.exceptions import ValidationError
from django.db import models

from apps.submissions.services import SubmissionService, build_submission_service
from apps.submissions.validation import ContactInfoForm, ProjectDetailsForm, WireForm

logger = logging.getLogger(__name__)

SESSION_KEY = "intake_wizard"
SUBMIT_ERROR = "Failed to submit form. Please try again."


class Step(models.TextChoices):
    CONTACT = "contact", "Contact Information"
    PROJECT = "project", "Project Details"
    REVIEW = "review", "Review & Submit"


STEP_ORDER: list[str] = [Step.CONTACT, Step.PROJECT, Step.REVIEW]

STEP_FORMS: dict[str, type[WireForm]] = {
    Step.CONTACT: ContactInfoForm,
    Step.PROJECT: ProjectDetailsForm,
}


def _blank(form_class: type[WireForm]) -> dict:
    return dict.fromkeys(form_class.wire_fields.values(), "")


class IntakeWizard:
    """Session-backed wizard state and its step transitions."""

    def __init__(self, state: dict | None = None) -> None:
        state = state or {}
        step = state.get("step")
        self.step: str = step if step in STEP_ORDER else Step.CONTACT
        self.contact_info: dict = {**_blank(ContactInfoForm), **state.get("contact_info", {})}
        self.project_details: dict = {**_blank(ProjectDetailsForm), **state.get("project_details", {})}
        self.errors: dict[str, str] = dict(state.get("errors", {}))
        self.submitted_id: str | None = state.get("submitted_id")

    # ── Session persistence ──

    @classmethod
    def load(cls, session) -> "IntakeWizard":
        return cls(session.get(SESSION_KEY))

    def save(self, session) -> None:
        session[SESSION_KEY] = self.to_state()

    def to_state(self) -> dict:
        return {
            "step": str(self.step),
            "contact_info": self.contact_info,
            "project_details": self.project_details,
            "errors": self.errors,
            "submitted_id": self.submitted_id,
        }

    # ── Queries ──

    @property
    def step_index(self) -> int:
        return STEP_ORDER.index(self.step)

    @property
    def is_submitted(self) -> bool:
        return self.submitted_id is not None

    def payload_for(self, step: str) -> dict:
        return self.contact_info if step == Step.CONTACT else self.project_details

    def form_for(self, step: str) -> WireForm | None:
        """The form for ``step``: bound (showing errors) after a failed attempt, else pre-filled."""
        form_class = STEP_FORMS.get(step)
        if form_class is None:
            return None
        bound = form_class.from_payload(self.payload_for(step))
        if self.errors:
            return bound
        return form_class(initial=bound.data)

    def step_is_valid(self, step: str) -> bool:
        form_class = STEP_FORMS.get(step)
        if form_class is None:
            return True
        return form_class.from_payload(self.payload_for(step)).is_valid()

    # ── Transitions ──

    def record(self, data) -> bool:
        """Keep the values posted for the current step and report whether they validate."""
        form_class = STEP_FORMS.get(self.step)
        if form_class is None:
            return True

        raw = {wire: data.get(name, "") for name, wire in form_class.wire_fields.items()}
        form = form_class.from_payload(raw)
        if form.is_valid():
            self._store(self.step, form.to_payload())
            return True

        self._store(self.step, raw)
        self.errors = {field: messages[0] for field, messages in form.wire_errors().items()}
        return False

    def next(self, data) -> bool:
        """Advance one step if the current step's required fields validate."""
        self.errors = {}
        if self.step == Step.REVIEW:
            return False
        if not self.record(data):
            return False
        self.step = STEP_ORDER[self.step_index + 1]
        return True

    def back(self, data=None) -> None:
        """Go back one step. Anything typed on the current step is kept."""
        self.errors = {}
        if data is not None and self.step in STEP_FORMS:
            form_class = STEP_FORMS[self.step]
            self._store(self.step, {wire: data.get(name, "") for name, wire in form_class.wire_fields.items()})
        if self.step_index > 0:
            self.step = STEP_ORDER[self.step_index - 1]

    def goto(self, target: str) -> bool:
        """Jump to ``target``: always backward, forward only over steps that validate."""
        if target not in STEP_ORDER:
            return False
        self.errors = {}
        target_index = STEP_ORDER.index(target)
        if target_index > self.step_index:
            for step in STEP_ORDER[:target_index]:
                if not self.step_is_valid(step):
                    return False
        self.step = STEP_ORDER[target_index]
        return True

    def submit(self, service: SubmissionService | None = None) -> bool:
        """Create the submission. On failure the entered data is kept for another try."""
        if self.step != Step.REVIEW:
            return False
        self.errors = {}
        try:
            service = service or build_submission_service()
            submission = service.create(self.contact_info, self.project_details)
        except ValidationError as exc:
            self.errors = {field: messages[0] for field, messages in exc.message_dict.items() if messages}
            self.errors["submit"] = "Please correct the highlighted fields and submit again."
            for step in STEP_FORMS:
                if not self.step_is_valid(step):
                    self.step = step
                    break
            return False
        except Exception:
            logger.exception("Intake form submission failed")
            self.errors["submit"] = SUBMIT_ERROR
            return False

        self.submitted_id = submission.id
        return True

    def reset(self) -> None:
        """Back to a blank first step."""
        self.step = Step.CONTACT
        self.contact_info = _blank(ContactInfoForm)
        self.project_details = _blank(ProjectDetailsForm)
        self.errors = {}
        self.submitted_id = None

    def _store(self, step: str, payload: dict) -> None:
        if step == Step.CONTACT:
            self.contact_info = {**self.contact_info, **payload}
        else:
            self.project_details = {**self.project_details, **payload}
