from django.urls import path

from .views import FormConfigView, FormSubmissionCreateView, FormSubmissionExportView

app_name = "webforms"

urlpatterns = [
    path("form-config/<slug:name>", FormConfigView.as_view(), name="form_config"),
    path("form-submissions", FormSubmissionCreateView.as_view(), name="form_submission_create"),
    path("form-submissions/export", FormSubmissionExportView.as_view(), name="form_submission_export"),
]
