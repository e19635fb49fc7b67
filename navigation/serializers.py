# backend/navigation/serializers.py
from rest_framework import serializers

from .models import MenuType


class MenuImageSerializer(serializers.Serializer):
    url = serializers.CharField()
    filename = serializers.CharField()


class ResolvedMenuItemSerializer(serializers.Serializer):
    """Output shape of a resolved menu item; optional keys are omitted when empty."""

    id = serializers.IntegerField()
    label = serializers.CharField()
    url = serializers.CharField(allow_blank=True)
    type = serializers.ChoiceField(choices=MenuType.choices)
    icon = serializers.CharField(allow_null=True)
    openInNewTab = serializers.BooleanField()
    order = serializers.IntegerField()
    inquiryLink = serializers.CharField(required=False)
    image = MenuImageSerializer(required=False)
    childMenus = serializers.SerializerMethodField()

    OPTIONAL = ("inquiryLink", "image", "childMenus")

    def get_childMenus(self, obj):
        children = obj.get("childMenus") or []
        return ResolvedMenuItemSerializer(children, many=True).data

    def to_representation(self, instance):
        data = super().to_representation(instance)
        for key in self.OPTIONAL:
            if key not in instance:
                data.pop(key, None)
        return data
