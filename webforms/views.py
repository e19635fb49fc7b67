import csv
import json
import logging

from django.http import HttpResponse
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from content.localization import locale_from_request

from .models import FormConfig, FormSubmission
from .serializers import (
    FormConfigSerializer,
    FormSubmissionCreateSerializer,
    FormSubmissionSerializer,
)

logger = logging.getLogger(__name__)


def request_meta(request) -> dict:
    headers = request.headers
    ip = (
        headers.get("X-Forwarded-For")
        or headers.get("X-Real-IP")
        or request.META.get("REMOTE_ADDR")
        or "unknown"
    )
    return {
        "ip_address": ip,
        "user_agent": headers.get("User-Agent", "unknown")[:1024],
        "source_page": headers.get("Referer", "unknown")[:1024],
    }


class FormConfigView(APIView):
    """GET /api/form-config/<name>?locale=en"""

    permission_classes = [permissions.AllowAny]

    def get(self, request, name: str):
        locale = locale_from_request(request)
        try:
            config = FormConfig.objects.filter(name=name, status=FormConfig.STATUS_PUBLISHED).first()
        except Exception:
            logger.exception("Failed to fetch form configuration %s", name)
            return Response(
                {"error": "Failed to fetch form configuration"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        if config is None:
            return Response(
                {"error": "Form configuration not found"},
                status=status.HTTP_404_NOT_FOUND,
            )

        return Response(FormConfigSerializer(config, context={"locale": locale}).data)


class FormSubmissionCreateView(APIView):
    """
    POST /api/form-submissions
    Body: {"formId"?, "formName"?, "data": {...}, "attachments"?, "locale"?, "autoSubmitted"?}
    """

    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = FormSubmissionCreateSerializer(
            data=request.data,
            context={"meta": request_meta(request)},
        )
        if not serializer.is_valid():
            errors = serializer.errors
            if "data" in errors:
                message = "Form data is required"
            elif "formId" in errors:
                message = "Form configuration not found"
            else:
                message = "Invalid form submission"
            return Response(
                {"error": message, "details": errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            submission = serializer.save()
        except Exception:
            logger.exception("Failed to store form submission")
            return Response(
                {"error": "Internal server error"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        logger.info("Stored form submission %s (%s)", submission.pk, submission.form_name)
        return Response(
            {"success": True, "submission": FormSubmissionSerializer(submission).data},
            status=status.HTTP_200_OK,
        )


class FormSubmissionExportView(APIView):
    """GET /api/form-submissions/export -> CSV of all submissions (admins only)."""

    permission_classes = [permissions.IsAdminUser]

    def get(self, request):
        qs = FormSubmission.objects.select_related("form_config").order_by("-submitted_at")
        form_name = request.query_params.get("formName")
        if form_name:
            qs = qs.filter(form_name=form_name)

        resp = HttpResponse(content_type="text/csv")
        resp["Content-Disposition"] = "attachment; filename=form_submissions.csv"
        writer = csv.writer(resp)
        writer.writerow([
            "id", "form_name", "form_config", "status", "auto_submitted", "locale",
            "submitted_at", "ip_address", "source_page", "data",
        ])
        for s in qs:
            writer.writerow([
                s.pk,
                s.form_name,
                s.form_config.name if s.form_config else "",
                s.status,
                s.auto_submitted,
                s.locale,
                s.submitted_at.isoformat(),
                s.ip_address,
                s.source_page,
                json.dumps(s.data, ensure_ascii=False),
            ])
        return resp
