import logging
import math

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from content.localization import DEFAULT_LOCALE, locale_from_request
from content.models import PublishStatus, pick_translation

from .models import Product, ProductSeries
from .serializers import (
    ProductDetailSerializer,
    ProductListQuerySerializer,
    ProductListSerializer,
    ProductSeriesDetailSerializer,
    ProductSeriesListSerializer,
)

logger = logging.getLogger(__name__)


class ProductSeriesListView(APIView):
    """GET /api/product-series?locale=en -> {"series": [...]}"""

    permission_classes = [AllowAny]

    def get(self, request):
        locale = locale_from_request(request)
        try:
            series = list(
                ProductSeries.objects.filter(status=PublishStatus.PUBLISHED).order_by("order", "id")
            )
        except Exception:
            logger.exception("Failed to fetch product series")
            return Response(
                {"error": "Failed to fetch product series"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        data = ProductSeriesListSerializer(series, many=True, context={"locale": locale}).data
        return Response({"series": data})


class ProductSeriesDetailView(APIView):
    """GET /api/product-series/<slug>?locale=en"""

    permission_classes = [AllowAny]

    def get(self, request, slug: str):
        locale = locale_from_request(request)
        try:
            series = (
                ProductSeries.objects.filter(slug=slug, status=PublishStatus.PUBLISHED)
                .prefetch_related("content_translations")
                .first()
            )
        except Exception:
            logger.exception("Failed to fetch product series %s", slug)
            return Response(
                {"error": "Failed to fetch product series"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        if series is None:
            return Response(
                {"error": "Product series not found"},
                status=status.HTTP_404_NOT_FOUND,
            )

        translation = pick_translation(series.content_translations.all(), locale, DEFAULT_LOCALE)
        if translation is None:
            return Response(
                {"error": "No content translation found"},
                status=status.HTTP_404_NOT_FOUND,
            )

        serializer = ProductSeriesDetailSerializer(
            series,
            context={"locale": locale, "translation": translation},
        )
        return Response(serializer.data)


class ProductListView(APIView):
    """
    GET /api/products?locale=en&series=<slug>&isFeatured=true
                     &page=1&pageSize=12&sortBy=order&sortDir=asc
    """

    permission_classes = [AllowAny]

    def get(self, request):
        locale = locale_from_request(request)
        query = ProductListQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(
                {"error": "Invalid query parameters", "details": query.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        params = query.validated_data

        qs = Product.objects.filter(status=PublishStatus.PUBLISHED)
        if params.get("series"):
            qs = qs.filter(series__slug=params["series"])
        if params["isFeatured"]:
            qs = qs.filter(is_featured=True)

        page, page_size = params["page"], params["pageSize"]
        offset = (page - 1) * page_size
        try:
            total = qs.count()
            products = list(
                qs.select_related("series", "show_image")
                .order_by(*query.ordering())[offset:offset + page_size]
            )
        except Exception:
            logger.exception("Failed to fetch products")
            return Response(
                {"error": "Failed to fetch products"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response({
            "products": ProductListSerializer(products, many=True, context={"locale": locale}).data,
            "total": total,
            "page": page,
            "pageSize": page_size,
            "totalPages": math.ceil(total / page_size),
        })


class ProductDetailView(APIView):
    """GET /api/products/<slug>?locale=en, with up to 4 related products of the same series."""

    permission_classes = [AllowAny]
    RELATED_LIMIT = 4

    def get(self, request, slug: str):
        locale = locale_from_request(request)
        try:
            product = (
                Product.objects.filter(slug=slug, status=PublishStatus.PUBLISHED)
                .select_related("series", "show_image")
                .prefetch_related("content_translations")
                .first()
            )
            related = []
            if product is not None and product.series_id:
                related = list(
                    Product.objects.filter(series_id=product.series_id, status=PublishStatus.PUBLISHED)
                    .exclude(pk=product.pk)
                    .select_related("show_image")
                    .order_by("order", "id")[: self.RELATED_LIMIT]
                )
        except Exception:
            logger.exception("Failed to fetch product %s", slug)
            return Response(
                {"error": "Failed to fetch product"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        if product is None:
            return Response({"error": "Product not found"}, status=status.HTTP_404_NOT_FOUND)

        serializer = ProductDetailSerializer(
            product,
            context={"locale": locale, "related": related},
        )
        return Response(serializer.data)
