"""
Feature: Resolve multilingual fields for one locale
  As an API consumer
  I want every multilingual field reduced to a single string
  So that the frontend never has to pick a language itself

Scenario: Requested locale present
  Given a mapping with "en" and "zh"
  When it is resolved for "zh"
  Then the "zh" text is returned

Scenario: Requested locale absent
  Given a mapping with only "en"
  When it is resolved for "de"
  Then the "en" text is returned

Scenario: Nothing usable
  Given an empty, malformed or non-mapping value
  When it is resolved
  Then the caller's fallback literal is returned
"""

import copy
import json

import pytest

from content.localization import (
    available_locales,
    missing_locales,
    normalize_locale,
    resolve_localized,
    resolve_localized_list,
)


def test_returns_requested_locale():
    assert resolve_localized({"en": "Home", "zh": "首页"}, "zh") == "首页"


def test_falls_back_to_english():
    assert resolve_localized({"en": "Home"}, "de") == "Home"


def test_empty_translation_falls_back_to_english():
    assert resolve_localized({"en": "Home", "zh": ""}, "zh") == "Home"


@pytest.mark.parametrize("value", [None, {}, {"fr": "Accueil"}, "not json", "[1, 2]", ["Home"], 42])
def test_returns_fallback_when_nothing_usable(value):
    assert resolve_localized(value, "zh", "Untitled") == "Untitled"


def test_default_fallback_is_empty_string():
    assert resolve_localized({}, "en") == ""


def test_accepts_json_encoded_mapping():
    value = json.dumps({"en": "Shop", "zh": "商城"})
    assert resolve_localized(value, "zh") == "商城"


def test_never_returns_a_nested_object():
    assert resolve_localized({"zh": {"text": "x"}, "en": "Plain"}, "zh") == "Plain"


def test_does_not_mutate_source():
    value = {"en": "Home", "zh": "首页"}
    before = copy.deepcopy(value)
    resolve_localized(value, "de")
    assert value == before


def test_resolve_list_uses_same_fallback_chain():
    fields = {"en": [{"fieldName": "name"}], "zh": []}
    assert resolve_localized_list(fields, "zh") == [{"fieldName": "name"}]
    assert resolve_localized_list("broken", "zh") == []


def test_available_and_missing_locales():
    value = {"en": "Home", "zh": "", "de": "Start"}
    assert available_locales(value) == ["en", "de"]
    assert missing_locales(value, ["en", "zh", "ja"]) == ["zh", "ja"]


@pytest.mark.parametrize(
    "code,expected",
    [("zh", "zh"), ("zh-CN", "zh"), ("ZH_cn", "zh"), ("fr", "fr"), ("xx", "en"), ("", "en"), (None, "en")],
)
def test_normalize_locale(code, expected):
    assert normalize_locale(code) == expected
