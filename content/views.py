# backend/content/views.py
import logging

from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .localization import DEFAULT_LOCALE, locale_from_request
from .models import Page, PublishStatus, pick_translation
from .serializers import PageDetailSerializer

logger = logging.getLogger(__name__)


class PageDetailView(APIView):
    """
    GET /api/pages/<slug>?locale=en

    Only published pages are served. The content translation falls back
    to English when the requested locale has none.
    """

    permission_classes = [permissions.AllowAny]

    def get(self, request, slug: str):
        locale = locale_from_request(request)

        try:
            page = (
                Page.objects.filter(slug=slug, status=PublishStatus.PUBLISHED)
                .prefetch_related("content_translations")
                .first()
            )
        except Exception:
            logger.exception("Failed to fetch page %s", slug)
            return Response(
                {"error": "Failed to fetch page"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        if page is None:
            return Response({"error": "Page not found"}, status=status.HTTP_404_NOT_FOUND)

        translation = pick_translation(page.content_translations.all(), locale, DEFAULT_LOCALE)
        if translation is None:
            return Response(
                {"error": "No content translation found"},
                status=status.HTTP_404_NOT_FOUND,
            )

        serializer = PageDetailSerializer(
            page,
            context={"locale": locale, "translation": translation, "request": request},
        )
        return Response(serializer.data)
