"""Intake app views."""

import logging

from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views import View

from apps.submissions.constants import BUDGET_RANGES

from .wizard import STEP_ORDER, IntakeWizard, Step

logger = logging.getLogger(__name__)


class IntakeFormView(View):
    """Three-step project inquiry form, one POST per step transition."""

    template_name = "intake/wizard.html"
    done_template_name = "intake/thanks.html"

    def get(self, request: HttpRequest) -> HttpResponse:
        wizard = IntakeWizard.load(request.session)
        if wizard.is_submitted:
            return render(request, self.done_template_name, {"submission_id": wizard.submitted_id})

        return render(
            request,
            self.template_name,
            {
                "wizard": wizard,
                "step": wizard.step,
                "steps": [(step, Step(step).label) for step in STEP_ORDER],
                "step_index": wizard.step_index,
                "form": wizard.form_for(wizard.step),
                "contact_info": wizard.contact_info,
                "project_details": wizard.project_details,
                "submit_error": wizard.errors.get("submit", ""),
                "budget_ranges": BUDGET_RANGES,
            },
        )

    def post(self, request: HttpRequest) -> HttpResponse:
        """Apply one wizard action and redirect back to the form."""
        wizard = IntakeWizard.load(request.session)
        action = request.POST.get("action", "next")

        if action == "next":
            wizard.next(request.POST)
        elif action == "back":
            wizard.back(request.POST)
        elif action == "goto":
            wizard.goto(request.POST.get("step", ""))
        elif action == "submit":
            if wizard.submit():
                logger.info("Intake form submitted as %s", wizard.submitted_id)
        elif action == "reset":
            wizard.reset()

        wizard.save(request.session)
        return redirect("intake:form")
