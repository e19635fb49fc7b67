from rest_framework import serializers

from content.localization import DEFAULT_LOCALE, resolve_localized
from content.models import pick_translation

from .models import Product, ProductSeries


class ProductSeriesListSerializer(serializers.ModelSerializer):
    featuredImage = serializers.JSONField(source="featured_image")
    localizedName = serializers.SerializerMethodField()
    localizedDescription = serializers.SerializerMethodField()

    class Meta:
        model = ProductSeries
        fields = [
            "id",
            "slug",
            "name",
            "description",
            "featuredImage",
            "order",
            "status",
            "localizedName",
            "localizedDescription",
        ]

    def get_localizedName(self, obj):
        return resolve_localized(obj.name, self.context.get("locale", "en"), obj.slug)

    def get_localizedDescription(self, obj):
        return resolve_localized(obj.description, self.context.get("locale", "en")) or None


class ProductSeriesDetailSerializer(serializers.ModelSerializer):
    name = serializers.SerializerMethodField()
    description = serializers.SerializerMethodField()
    featuredImage = serializers.JSONField(source="featured_image")
    content = serializers.SerializerMethodField()
    locale = serializers.SerializerMethodField()

    class Meta:
        model = ProductSeries
        fields = [
            "id",
            "slug",
            "name",
            "description",
            "featuredImage",
            "order",
            "status",
            "content",
            "locale",
        ]

    def get_name(self, obj):
        return resolve_localized(obj.name, self.context.get("locale", "en"))

    def get_description(self, obj):
        return resolve_localized(obj.description, self.context.get("locale", "en"))

    def get_content(self, obj):
        return self.context["translation"].content

    def get_locale(self, obj):
        return self.context["translation"].locale


class ProductListQuerySerializer(serializers.Serializer):
    """Query string of GET /api/products."""

    SORT_FIELDS = {"order": "order", "createdAt": "created_at", "updatedAt": "updated_at"}

    series = serializers.SlugField(required=False)
    isFeatured = serializers.BooleanField(required=False, default=False)
    page = serializers.IntegerField(required=False, default=1, min_value=1)
    pageSize = serializers.IntegerField(required=False, default=12, min_value=1, max_value=100)
    sortBy = serializers.ChoiceField(choices=list(SORT_FIELDS), required=False, default="order")
    sortDir = serializers.ChoiceField(choices=["asc", "desc"], required=False, default="asc")

    def ordering(self) -> list[str]:
        field = self.SORT_FIELDS[self.validated_data["sortBy"]]
        prefix = "-" if self.validated_data["sortDir"] == "desc" else ""
        return [f"{prefix}{field}", "id"]


def _image(media):
    if media is None or not media.file:
        return None
    return {"id": media.id, "url": media.url, "filename": media.filename}


class ProductListSerializer(serializers.ModelSerializer):
    shortDescription = serializers.JSONField(source="short_description")
    showImage = serializers.SerializerMethodField()
    series = serializers.SerializerMethodField()
    isFeatured = serializers.BooleanField(source="is_featured")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")
    localizedName = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            "id",
            "sku",
            "slug",
            "name",
            "shortDescription",
            "showImage",
            "series",
            "isFeatured",
            "order",
            "status",
            "createdAt",
            "updatedAt",
            "localizedName",
        ]

    @property
    def locale(self):
        return self.context.get("locale", DEFAULT_LOCALE)

    def get_showImage(self, obj):
        return _image(obj.show_image)

    def get_series(self, obj):
        series = obj.series
        if series is None:
            return None
        return {
            "id": series.id,
            "slug": series.slug,
            "name": series.name,
            "localizedName": resolve_localized(series.name, self.locale, series.slug),
        }

    def get_localizedName(self, obj):
        return resolve_localized(obj.name, self.locale, obj.sku)


class RelatedProductSerializer(ProductListSerializer):
    class Meta(ProductListSerializer.Meta):
        fields = ["id", "sku", "slug", "name", "showImage", "isFeatured", "localizedName"]


class ProductDetailSerializer(ProductListSerializer):
    """
    One product for a locale. The content translation falls back to
    English and is null when neither exists.
    """

    localizedShortDescription = serializers.SerializerMethodField()
    localizedDescription = serializers.SerializerMethodField()
    contentTranslation = serializers.SerializerMethodField()
    relatedProducts = serializers.SerializerMethodField()

    class Meta(ProductListSerializer.Meta):
        fields = ProductListSerializer.Meta.fields + [
            "description",
            "localizedShortDescription",
            "localizedDescription",
            "contentTranslation",
            "relatedProducts",
        ]

    def get_series(self, obj):
        data = super().get_series(obj)
        if data is not None:
            data["localizedDescription"] = (
                resolve_localized(obj.series.description, self.locale) or None
            )
        return data

    def get_localizedShortDescription(self, obj):
        return resolve_localized(obj.short_description, self.locale) or None

    def get_localizedDescription(self, obj):
        return resolve_localized(obj.description, self.locale) or None

    def get_contentTranslation(self, obj):
        translation = pick_translation(obj.content_translations.all(), self.locale, DEFAULT_LOCALE)
        if translation is None:
            return None
        return {"locale": translation.locale, "content": translation.content}

    def get_relatedProducts(self, obj):
        related = self.context.get("related", [])
        return RelatedProductSerializer(related, many=True, context=self.context).data
