"""Dashboard views: list, filter, triage and export submissions."""

import logging
from urllib.parse import urlencode

from django.contrib import messages
from django.core.exceptions import ValidationError
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils import timezone
from django.views import View
from django.views.generic import TemplateView

from apps.submissions.api_auth import ADMIN_SECRET_PARAM, AdminSecretMixin
from apps.submissions.constants import Status
from apps.submissions.exceptions import StoreUnavailable, SubmissionNotFound
from apps.submissions.services import SubmissionService, build_submission_service

from .export import export_filename, submissions_to_csv
from .selectors import STATUS_FILTERS, count_by_status, filter_by_status, find_submission, normalize_status_filter

logger = logging.getLogger(__name__)


class DashboardAccessMixin(AdminSecretMixin):
    """Gate every dashboard request on the ``?key=`` admin secret."""

    exempt_methods = ()

    def deny(self, request: HttpRequest, status: int, message: str) -> HttpResponse:
        return render(request, "dashboard/denied.html", {"message": message}, status=403)

    def get_service(self) -> SubmissionService:
        return build_submission_service(self.get_intake_config())

    def dashboard_url(self, **params) -> str:
        query = {ADMIN_SECRET_PARAM: self.request.GET.get(ADMIN_SECRET_PARAM, "")}
        query.update({k: v for k, v in params.items() if v})
        return f"{reverse('dashboard:index')}?{urlencode(query)}"


class SubmissionDashboardView(DashboardAccessMixin, TemplateView):
    """Submission list with status filter, counts and a detail panel."""

    template_name = "dashboard/submissions.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        current_status = normalize_status_filter(self.request.GET.get("status"))
        context["current_status"] = current_status
        context["status_filters"] = STATUS_FILTERS
        context["status_choices"] = Status.choices
        context["admin_key"] = self.request.GET.get(ADMIN_SECRET_PARAM, "")
        context["retry_url"] = self.dashboard_url(status=current_status)

        try:
            submissions = self.get_service().list()
        except StoreUnavailable:
            context["error"] = "Failed to fetch submissions."
            context["submissions"] = []
            context["status_counts"] = count_by_status([])
            return context

        filtered = filter_by_status(submissions, current_status)
        context["submissions"] = filtered
        context["total_count"] = len(submissions)
        context["status_counts"] = count_by_status(submissions)
        context["selected"] = find_submission(submissions, self.request.GET.get("selected"))
        context["export_url"] = (
            f"{reverse('dashboard:export')}?"
            f"{urlencode({ADMIN_SECRET_PARAM: context['admin_key'], 'status': current_status})}"
        )
        return context


class SubmissionUpdateView(DashboardAccessMixin, View):
    """Persist a status and notes change from the detail panel."""

    def post(self, request: HttpRequest, submission_id: str) -> HttpResponse:
        status = request.POST.get("status") or None
        notes = request.POST.get("notes")

        try:
            submission = self.get_service().update(submission_id, status=status, notes=notes)
        except ValidationError as exc:
            messages.error(request, "; ".join(exc.messages))
        except SubmissionNotFound:
            messages.error(request, "Submission not found.")
        except StoreUnavailable:
            messages.error(request, "Could not save changes. Please try again.")
        else:
            messages.success(request, f"Marked as {submission.status}.")

        return redirect(
            self.dashboard_url(
                status=request.POST.get("current_status", ""),
                selected=submission_id,
            )
        )


class SubmissionExportView(DashboardAccessMixin, View):
    """Export the filtered submissions as CSV."""

    def get(self, request: HttpRequest) -> HttpResponse:
        try:
            submissions = self.get_service().list()
        except StoreUnavailable:
            return HttpResponse("Failed to fetch submissions.", status=500, content_type="text/plain")

        filtered = filter_by_status(submissions, request.GET.get("status"))
        response = HttpResponse(submissions_to_csv(filtered), content_type="text/csv")
        response["Content-Disposition"] = f'attachment; filename="{export_filename(timezone.localdate())}"'
        logger.info("Exported %d submissions", len(filtered))
        return response
