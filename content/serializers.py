# backend/content/serializers.py
from rest_framework import serializers

from .localization import resolve_localized
from .models import Page


class PageDetailSerializer(serializers.ModelSerializer):
    pageType = serializers.CharField(source="page_type")
    title = serializers.SerializerMethodField()
    content = serializers.SerializerMethodField()
    locale = serializers.SerializerMethodField()

    class Meta:
        model = Page
        fields = [
            "id",
            "slug",
            "path",
            "pageType",
            "template",
            "title",
            "status",
            "content",
            "locale",
        ]

    def get_title(self, obj):
        return resolve_localized(obj.title, self.context.get("locale", "en"))

    def get_content(self, obj):
        return self.context["translation"].content

    def get_locale(self, obj):
        return self.context["translation"].locale
