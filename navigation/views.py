# backend/navigation/views.py
import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from content.localization import locale_from_request

from .serializers import ResolvedMenuItemSerializer
from .services import resolved_navigation

logger = logging.getLogger(__name__)


class NavigationView(APIView):
    """
    Returns the visible top-level menus with their children, labels
    resolved for the requested locale.

    Frontend usage:
      GET /api/navigation?locale=en
      GET /api/navigation?locale=zh
    """

    permission_classes = [AllowAny]

    def get(self, request):
        locale = locale_from_request(request)

        try:
            items = resolved_navigation(locale)
        except Exception:
            logger.exception("Failed to build navigation for locale %s", locale)
            return Response(
                {"error": "Internal server error"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        serializer = ResolvedMenuItemSerializer(items, many=True)
        return Response(serializer.data)
