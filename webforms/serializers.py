from rest_framework import serializers

from content.localization import resolve_localized, resolve_localized_list

from .models import FormConfig, FormSubmission


class FormConfigSerializer(serializers.ModelSerializer):
    """Single-locale view of a form configuration."""

    displayName = serializers.SerializerMethodField()
    description = serializers.SerializerMethodField()
    fields = serializers.SerializerMethodField(method_name="get_form_fields")
    submitButtonText = serializers.SerializerMethodField()
    successMessage = serializers.SerializerMethodField()
    errorMessage = serializers.SerializerMethodField()
    enableCaptcha = serializers.BooleanField(source="enable_captcha")
    maxSubmissionsPerDay = serializers.IntegerField(source="max_submissions_per_day", allow_null=True)

    class Meta:
        model = FormConfig
        fields = [
            "id",
            "name",
            "displayName",
            "description",
            "location",
            "fields",
            "submitButtonText",
            "successMessage",
            "errorMessage",
            "enableCaptcha",
            "maxSubmissionsPerDay",
        ]

    @property
    def locale(self):
        return self.context.get("locale", "en")

    def get_displayName(self, obj):
        return resolve_localized(obj.display_name, self.locale)

    def get_description(self, obj):
        return resolve_localized(obj.description, self.locale)

    def get_form_fields(self, obj):
        return resolve_localized_list(obj.form_fields, self.locale)

    def get_submitButtonText(self, obj):
        return resolve_localized(obj.submit_button_text, self.locale)

    def get_successMessage(self, obj):
        return resolve_localized(obj.success_message, self.locale)

    def get_errorMessage(self, obj):
        return resolve_localized(obj.error_message, self.locale)


class FormSubmissionCreateSerializer(serializers.Serializer):
    formId = serializers.IntegerField(required=False, allow_null=True)
    formName = serializers.CharField(required=False, allow_blank=True, max_length=255)
    data = serializers.JSONField(
        error_messages={"required": "Form data is required", "null": "Form data is required"},
    )
    attachments = serializers.ListField(child=serializers.DictField(), required=False, default=list)
    locale = serializers.CharField(required=False, allow_blank=True, max_length=10)
    autoSubmitted = serializers.BooleanField(required=False, default=False)

    def validate_data(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError("Form data is required")
        return value

    def validate_formId(self, value):
        if value is None:
            return None
        config = FormConfig.objects.filter(pk=value).first()
        if config is None:
            raise serializers.ValidationError("Form configuration not found")
        return config

    def create(self, validated_data):
        attachments = validated_data.get("attachments") or []
        total_size = 0
        for item in attachments:
            size = item.get("fileSize")
            if isinstance(size, (int, float)) and size > 0:
                total_size += int(size)

        meta = self.context.get("meta", {})
        return FormSubmission.objects.create(
            form_config=validated_data.get("formId"),
            form_name=validated_data.get("formName") or "Unknown Form",
            data=validated_data["data"],
            attachments=attachments,
            total_attachment_size=total_size,
            locale=validated_data.get("locale") or "en",
            auto_submitted=(
                FormSubmission.SUBMITTED_AUTO
                if validated_data.get("autoSubmitted")
                else FormSubmission.SUBMITTED_MANUAL
            ),
            status=FormSubmission.STATUS_UNREAD,
            source_page=meta.get("source_page", ""),
            ip_address=meta.get("ip_address", ""),
            user_agent=meta.get("user_agent", ""),
        )


class FormSubmissionSerializer(serializers.ModelSerializer):
    formName = serializers.CharField(source="form_name")
    submittedAt = serializers.DateTimeField(source="submitted_at")

    class Meta:
        model = FormSubmission
        fields = ["id", "formName", "status", "submittedAt"]
