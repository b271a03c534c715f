import json

import pytest

import valirator.core.localization as localization
from valirator import config, format_message, validate


@pytest.fixture
def lang_dir(tmp_path):
    original_path = localization._LOCALE_PATH
    lang = tmp_path / "lang"
    lang.mkdir()
    (lang / "en.json").write_text(json.dumps({
        "validation": {"required": "must be filled in", "min": "at least %{expected}, got %{actual}"},
    }))
    (lang / "de.json").write_text(json.dumps({"validation": {"required": "ist erforderlich"}}))
    localization.set_locale_path(str(lang))
    yield lang
    localization.set_locale_path(original_path)
    localization.set_locale("en")


def test_translate(lang_dir):
    assert localization.translate("validation.required") == "must be filled in"
    assert localization.translate("validation.required", locale="de") == "ist erforderlich"
    # falls back to the fallback locale
    assert localization.translate("validation.min", locale="de") == "at least %{expected}, got %{actual}"
    assert localization.translate("validation.missing") == "validation.missing"
    assert localization.translate("validation.missing", default="fallback") == "fallback"
    # only leaves are translations
    assert localization.translate("validation") == "validation"


def test_set_locale(lang_dir):
    localization.set_locale("de")

    assert localization.get_locale() == "de"
    assert localization.translate("validation.required") == "ist erforderlich"


@pytest.mark.asyncio
async def test_message_keys_are_translated(lang_dir):
    assert await format_message("validation.min", 2, 6) == "at least 6, got 2"

    schema = {"messages": {"required": "validation.required"}, "properties": {"A": {"rules": {"required": True}}}}

    assert await validate(schema, {}) == {"A": {"required": "must be filled in"}}

    localization.set_locale("de")
    assert await validate(schema, {}) == {"A": {"required": "ist erforderlich"}}


@pytest.mark.asyncio
async def test_translation_can_be_disabled(lang_dir, monkeypatch):
    monkeypatch.setattr(config, "LOCALIZE_MESSAGES", False)

    assert await format_message("validation.required") == "validation.required"


def test_broken_catalogue_is_ignored(tmp_path):
    original_path = localization._LOCALE_PATH
    (tmp_path / "en.json").write_text("{not json")
    localization.set_locale_path(str(tmp_path))
    try:
        assert localization.translate("validation.required") == "validation.required"
    finally:
        localization.set_locale_path(original_path)
