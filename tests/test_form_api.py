"""
Feature: Web forms
  As a website visitor
  I want to load a form's configuration and submit it
  So that the company receives my inquiry

Scenario: Submit an inquiry
  Given a published contact form
  When a visitor posts data and attachments
  Then the submission is stored as unread with request metadata

Scenario: Submit without data
  Given a payload with no "data"
  When it is posted
  Then a 400 with {"error": "Form data is required"} is returned
"""

import pytest
from django.contrib.auth import get_user_model

from webforms.models import FormConfig, FormSubmission

SUBMIT_URL = "/api/form-submissions"


@pytest.fixture
def contact_form(db):
    return FormConfig.objects.create(
        name="contact-form",
        display_name={"en": "Contact us", "zh": "联系我们"},
        location=FormConfig.LOCATION_CONTACT_US,
        form_fields={
            "en": [{"fieldName": "name", "fieldType": "text", "label": "Your Name", "required": True}],
            "zh": [{"fieldName": "name", "fieldType": "text", "label": "您的姓名", "required": True}],
        },
        submit_button_text={"en": "Send"},
        success_message={"en": "Thanks!"},
        enable_captcha=True,
        status=FormConfig.STATUS_PUBLISHED,
    )


def test_form_config_is_localized(api_client, contact_form):
    resp = api_client.get("/api/form-config/contact-form", {"locale": "zh"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["displayName"] == "联系我们"
    assert data["fields"][0]["label"] == "您的姓名"
    assert data["submitButtonText"] == "Send"
    assert data["errorMessage"] == ""
    assert data["enableCaptcha"] is True
    assert data["maxSubmissionsPerDay"] is None


@pytest.mark.django_db
def test_unpublished_form_config_is_not_found(api_client):
    FormConfig.objects.create(name="footer-form", status=FormConfig.STATUS_DRAFT)

    resp = api_client.get("/api/form-config/footer-form")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Form configuration not found"}


def test_submission_is_stored(api_client, contact_form):
    payload = {
        "formId": contact_form.id,
        "formName": "Contact us",
        "data": {"name": "Ada", "email": "ada@example.com"},
        "attachments": [
            {"filename": "a.pdf", "fileSize": 1200},
            {"filename": "b.png", "fileSize": 300},
        ],
        "locale": "zh",
    }

    resp = api_client.post(
        SUBMIT_URL,
        payload,
        format="json",
        HTTP_X_FORWARDED_FOR="203.0.113.9",
        HTTP_USER_AGENT="pytest-agent",
        HTTP_REFERER="https://example.com/contact",
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["submission"]["formName"] == "Contact us"
    assert body["submission"]["status"] == "UNREAD"

    submission = FormSubmission.objects.get(pk=body["submission"]["id"])
    assert submission.form_config == contact_form
    assert submission.data == {"name": "Ada", "email": "ada@example.com"}
    assert submission.total_attachment_size == 1500
    assert submission.locale == "zh"
    assert submission.auto_submitted == FormSubmission.SUBMITTED_MANUAL
    assert submission.ip_address == "203.0.113.9"
    assert submission.user_agent == "pytest-agent"
    assert submission.source_page == "https://example.com/contact"


@pytest.mark.django_db
def test_anonymous_auto_submission_defaults(api_client):
    resp = api_client.post(
        SUBMIT_URL,
        {"data": {"email": "x@example.com"}, "autoSubmitted": True},
        format="json",
        HTTP_X_REAL_IP="198.51.100.4",
    )

    assert resp.status_code == 200
    submission = FormSubmission.objects.get()
    assert submission.form_name == "Unknown Form"
    assert submission.form_config is None
    assert submission.auto_submitted == FormSubmission.SUBMITTED_AUTO
    assert submission.ip_address == "198.51.100.4"
    assert submission.locale == "en"


@pytest.mark.django_db
@pytest.mark.parametrize("payload", [{}, {"data": None}, {"data": ["not", "a", "dict"]}])
def test_submission_requires_data(api_client, payload):
    resp = api_client.post(SUBMIT_URL, payload, format="json")

    assert resp.status_code == 400
    assert resp.json()["error"] == "Form data is required"
    assert not FormSubmission.objects.exists()


@pytest.mark.django_db
def test_submission_with_unknown_form(api_client):
    resp = api_client.post(SUBMIT_URL, {"formId": 999, "data": {"a": 1}}, format="json")

    assert resp.status_code == 400
    assert resp.json()["error"] == "Form configuration not found"


def test_export_requires_admin(api_client, contact_form):
    resp = api_client.get("/api/form-submissions/export")

    assert resp.status_code == 403


def test_export_csv_for_admin(api_client, contact_form):
    FormSubmission.objects.create(form_config=contact_form, form_name="Contact us", data={"name": "Ada"})
    admin = get_user_model().objects.create_superuser("admin@example.com", "pw")
    api_client.force_authenticate(admin)

    resp = api_client.get("/api/form-submissions/export")

    assert resp.status_code == 200
    assert resp["Content-Type"].startswith("text/csv")
    text = resp.content.decode()
    assert text.splitlines()[0].startswith("id,form_name,form_config")
    assert "contact-form" in text
    assert '""name"": ""Ada""' in text
