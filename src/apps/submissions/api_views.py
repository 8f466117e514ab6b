"""JSON API for creating, listing and triaging contact submissions."""

import json
import logging

from django.core.exceptions import ValidationError
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from .api_auth import AdminSecretMixin, check_admin_secret
from .config import IntakeConfig
from .exceptions import SubmissionNotFound
from .services import SubmissionService, build_submission_service
from .validation import summarize

logger = logging.getLogger(__name__)


def _parse_json_object(request: HttpRequest) -> dict | None:
    """Decode the request body as a JSON object, or None if it isn't one."""
    try:
        data = json.loads(request.body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return data if isinstance(data, dict) else None


def _validation_details(exc: ValidationError) -> dict[str, str]:
    return {field: messages[0] for field, messages in exc.message_dict.items() if messages}


class CorsJSONView(View):
    """Base view: JSON responses with permissive CORS headers on every reply."""

    cors_allow_methods = "GET, POST, OPTIONS"

    def get_service(self) -> SubmissionService:
        return build_submission_service(IntakeConfig.from_settings())

    def with_cors(self, response: HttpResponse) -> HttpResponse:
        response["Access-Control-Allow-Origin"] = "*"
        response["Access-Control-Allow-Headers"] = "Content-Type"
        response["Access-Control-Allow-Methods"] = self.cors_allow_methods
        return response

    def json(self, data, status: int = 200) -> HttpResponse:
        return self.with_cors(JsonResponse(data, status=status, safe=False))

    def options(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        """CORS preflight."""
        return self.with_cors(HttpResponse("", status=200))

    def http_method_not_allowed(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        logger.warning("Method not allowed (%s): %s", request.method, request.path)
        return self.json({"error": "Method not allowed"}, status=405)


@method_decorator(csrf_exempt, name="dispatch")
class ContactAPIView(CorsJSONView):
    """API: submit an inquiry (public) or list all submissions (admin)."""

    http_method_names = ["get", "post", "options"]

    def get(self, request: HttpRequest) -> HttpResponse:
        """Return every submission, newest first."""
        config = IntakeConfig.from_settings()
        denial = check_admin_secret(request, config)
        if denial is not None:
            status, message = denial
            return self.json({"error": message}, status=status)

        try:
            submissions = build_submission_service(config).list()
        except Exception:
            logger.exception("Error fetching submissions")
            return self.json({"error": "Failed to fetch submissions"}, status=500)

        return self.json([submission.to_dict() for submission in submissions])

    def post(self, request: HttpRequest) -> HttpResponse:
        """Validate and store a new submission."""
        data = _parse_json_object(request)
        if data is None:
            return self.json({"error": "Invalid JSON body"}, status=400)

        try:
            submission = self.get_service().create(data.get("contactInfo"), data.get("projectDetails"))
        except ValidationError as exc:
            return self.json({"error": summarize(exc), "details": _validation_details(exc)}, status=400)
        except Exception:
            logger.exception("Error processing submission")
            return self.json({"error": "Failed to process submission"}, status=500)

        return self.json(
            {
                "success": True,
                "id": submission.id,
                "message": "Submission received successfully",
            }
        )


@method_decorator(csrf_exempt, name="dispatch")
class SubmissionDetailAPIView(AdminSecretMixin, CorsJSONView):
    """API: fetch or triage a single submission (admin)."""

    http_method_names = ["get", "patch", "options"]
    cors_allow_methods = "GET, PATCH, OPTIONS"

    def deny(self, request: HttpRequest, status: int, message: str) -> HttpResponse:
        return self.json({"error": message}, status=status)

    def get_service(self) -> SubmissionService:
        return build_submission_service(self.get_intake_config())

    def get(self, request: HttpRequest, submission_id: str) -> HttpResponse:
        try:
            submission = self.get_service().get(submission_id)
        except SubmissionNotFound:
            return self.json({"error": "Submission not found"}, status=404)
        except Exception:
            logger.exception("Error fetching submission %s", submission_id)
            return self.json({"error": "Failed to fetch submission"}, status=500)
        return self.json(submission.to_dict())

    def patch(self, request: HttpRequest, submission_id: str) -> HttpResponse:
        """Persist a status and/or notes change."""
        data = _parse_json_object(request)
        if data is None:
            return self.json({"error": "Invalid JSON body"}, status=400)

        try:
            submission = self.get_service().update(
                submission_id,
                status=data.get("status"),
                notes=data.get("notes"),
            )
        except ValidationError as exc:
            return self.json({"error": "Validation failed", "details": _validation_details(exc)}, status=400)
        except SubmissionNotFound:
            return self.json({"error": "Submission not found"}, status=404)
        except Exception:
            logger.exception("Error updating submission %s", submission_id)
            return self.json({"error": "Failed to update submission"}, status=500)

        return self.json(submission.to_dict())
