# backend/content/localization.py
"""
Helpers for multilingual JSON fields.

Translations are stored as a mapping of locale code to text, e.g.
``{"en": "Glass Hinge", "zh": "浴室夹"}``. Some rows hold the mapping
serialized as a JSON string, so every helper accepts both forms.
"""
import json
import logging

from django.conf import settings

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"


def supported_locales() -> list[str]:
    return list(getattr(settings, "SUPPORTED_LOCALES", [DEFAULT_LOCALE]))


def _as_mapping(value) -> dict | None:
    """
    Return the translations mapping for ``value`` or None.
    JSON strings are decoded; anything that is not a mapping is rejected.
    """
    if value is None:
        return None

    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            logger.debug("Ignoring malformed localized value: %r", value[:80])
            return None

    if not isinstance(value, dict):
        return None

    return value


def resolve_localized(value, locale: str, fallback: str = "") -> str:
    """
    Pick the text for ``locale``, then the default locale, then ``fallback``.

    Never raises and never mutates ``value``.
    """
    mapping = _as_mapping(value)
    if not mapping:
        return fallback

    for code in (locale, DEFAULT_LOCALE):
        text = mapping.get(code)
        if text and isinstance(text, str):
            return text

    return fallback


def resolve_localized_list(value, locale: str) -> list:
    """Same fallback rules for a mapping of locale -> list (form fields)."""
    mapping = _as_mapping(value)
    if not mapping:
        return []

    for code in (locale, DEFAULT_LOCALE):
        items = mapping.get(code)
        if items and isinstance(items, list):
            return list(items)

    return []


def available_locales(value) -> list[str]:
    mapping = _as_mapping(value) or {}
    return [code for code, text in mapping.items() if text]


def missing_locales(value, required: list[str]) -> list[str]:
    mapping = _as_mapping(value) or {}
    return [code for code in required if not mapping.get(code)]


def normalize_locale(code: str | None) -> str:
    """
    'zh-CN' / 'zh_CN' -> 'zh'. Unsupported or empty codes map to the default.
    """
    if not code:
        return DEFAULT_LOCALE

    base = code.strip().lower().split("-")[0].split("_")[0]
    if base in supported_locales():
        return base
    return DEFAULT_LOCALE


def locale_from_request(request) -> str:
    return normalize_locale(request.query_params.get("locale"))
