"""Status classification table and language registry."""

import pytest

from core.domain.language import (
    GLOSSARY_LANGUAGES,
    LANGUAGE_MENUS,
    REWRITE_LANGUAGES,
    TARGET_LANGUAGES,
    get_language_name,
)
from core.errors import DeepLError, GlossaryValidationError, describe_status


@pytest.mark.parametrize(
    "status, message",
    [
        (400, "Bad request. Check your parameters."),
        (403, "Authorization failed. Check your API key."),
        (404, "Resource not found."),
        (413, "Request too large. Text exceeds size limit."),
        (429, "Too many requests. Please wait."),
        (456, "Quota exceeded. Check your DeepL plan."),
        (500, "Internal server error."),
        (503, "Service temporarily unavailable."),
        (529, "Too many requests. Please wait."),
    ],
)
def test_known_statuses(status, message):
    assert describe_status(status) == message
    assert DeepLError(status).message == message


@pytest.mark.parametrize("status", [401, 418, 502, 504, 599])
def test_unknown_status_fallback(status):
    assert describe_status(status) == f"DeepL API error: {status}"


def test_body_never_changes_the_message():
    plain = DeepLError(429)
    with_body = DeepLError(429, '{"message": "Internal server error."}')
    assert str(plain) == str(with_body) == "Too many requests. Please wait."
    assert with_body.body == '{"message": "Internal server error."}'


def test_validation_error_keeps_fields():
    exc = GlossaryValidationError({"name": "The item is required"})
    assert exc.errors == {"name": "The item is required"}
    assert "name" in str(exc)


class TestLanguageRegistry:

    def test_lookup_is_case_insensitive(self):
        assert get_language_name("de") == "German"
        assert get_language_name("En-gb") == "English (UK)"
        assert get_language_name("zh-hant") == "Chinese (Traditional)"

    def test_unknown_code_passes_through(self):
        assert get_language_name("xx-YY") == "xx-YY"
        assert get_language_name("") == ""

    def test_menus(self):
        assert ("EN-US", "English (US)") in TARGET_LANGUAGES
        assert all(code != "EN" for code, _ in TARGET_LANGUAGES)
        assert REWRITE_LANGUAGES[0] == ("en-US", "English (US)")
        assert ("de", "German") in GLOSSARY_LANGUAGES
        assert set(LANGUAGE_MENUS) == {"target", "source", "rewrite", "glossary"}
