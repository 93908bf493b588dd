"""Language utilities for deepl-launcher.

This module centralizes the language codes known to the application: the
display-name registry used when reporting detected languages, and the fixed
menus each command offers. Keeping it in the domain layer lets the CLI and
the services share a single source of truth. The tables are static and never
change during a process lifetime.
"""

from __future__ import annotations

LANG_NAMES: dict[str, str] = {
    "BG": "Bulgarian",
    "CS": "Czech",
    "DA": "Danish",
    "DE": "German",
    "EL": "Greek",
    "EN": "English",
    "EN-GB": "English (UK)",
    "EN-US": "English (US)",
    "ES": "Spanish",
    "ET": "Estonian",
    "FI": "Finnish",
    "FR": "French",
    "HU": "Hungarian",
    "ID": "Indonesian",
    "IT": "Italian",
    "JA": "Japanese",
    "KO": "Korean",
    "LT": "Lithuanian",
    "LV": "Latvian",
    "NB": "Norwegian",
    "NL": "Dutch",
    "PL": "Polish",
    "PT": "Portuguese",
    "PT-BR": "Portuguese (BR)",
    "PT-PT": "Portuguese (PT)",
    "RO": "Romanian",
    "RU": "Russian",
    "SK": "Slovak",
    "SL": "Slovenian",
    "SV": "Swedish",
    "TR": "Turkish",
    "UK": "Ukrainian",
    "ZH": "Chinese",
    "ZH-HANS": "Chinese (Simplified)",
    "ZH-HANT": "Chinese (Traditional)",
}


def get_language_name(code: str) -> str:
    """Display name for a language code; unknown codes are returned as-is."""

    return LANG_NAMES.get(code.upper(), code)


def _menu(codes: list[str]) -> tuple[tuple[str, str], ...]:
    return tuple((code, get_language_name(code)) for code in codes)


_SOURCE_CODES = [
    "BG", "CS", "DA", "DE", "EL", "EN", "ES", "ET", "FI", "FR", "HU", "ID",
    "IT", "JA", "KO", "LT", "LV", "NB", "NL", "PL", "PT", "RO", "RU", "SK",
    "SL", "SV", "TR", "UK", "ZH",
]

# Target menus use the regional variants instead of the bare EN/PT/ZH.
TARGET_LANGUAGES = _menu(
    [
        "BG", "CS", "DA", "DE", "EL", "EN-GB", "EN-US", "ES", "ET", "FI", "FR",
        "HU", "ID", "IT", "JA", "KO", "LT", "LV", "NB", "NL", "PL", "PT-BR",
        "PT-PT", "RO", "RU", "SK", "SL", "SV", "TR", "UK", "ZH-HANS", "ZH-HANT",
    ]
)

SOURCE_LANGUAGES = _menu(_SOURCE_CODES)

# DeepL Write only supports a handful of languages.
REWRITE_LANGUAGES: tuple[tuple[str, str], ...] = (
    ("en-US", "English (US)"),
    ("en-GB", "English (UK)"),
    ("de", "German"),
    ("es", "Spanish"),
    ("fr", "French"),
    ("it", "Italian"),
    ("pt-BR", "Portuguese (BR)"),
    ("pt-PT", "Portuguese (PT)"),
)

GLOSSARY_LANGUAGES = tuple((code.lower(), title) for code, title in SOURCE_LANGUAGES)

LANGUAGE_MENUS: dict[str, tuple[tuple[str, str], ...]] = {
    "target": TARGET_LANGUAGES,
    "source": SOURCE_LANGUAGES,
    "rewrite": REWRITE_LANGUAGES,
    "glossary": GLOSSARY_LANGUAGES,
}
