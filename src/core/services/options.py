"""Resolución de opciones: override explícito → preferencia → default.

Funciones puras: sin I/O, sin lookups globales (el snapshot de preferencias
se pasa como parámetro) y sin mutar sus entradas.
"""

from __future__ import annotations

from typing import TypeVar

from core.config import AppSettings
from core.domain.models import (
    RewriteOptions,
    RewriteOverrides,
    TranslateOptions,
    TranslateOverrides,
)
from core.domain.options import Tone, WritingStyle

T = TypeVar("T")


def _pick(override: T | None, preference: T) -> T:
    return override if override is not None else preference


def resolve_translate_options(
    overrides: TranslateOverrides | None,
    prefs: AppSettings,
) -> TranslateOptions:
    overrides = overrides or TranslateOverrides()
    # Fields without a stored preference pass straight through.
    passthrough = overrides.model_dump(
        exclude={"target_lang", "formality", "model_type", "preserve_formatting"},
    )
    return TranslateOptions(
        **passthrough,
        target_lang=_pick(overrides.target_lang, prefs.translate_target_lang),
        formality=_pick(overrides.formality, prefs.formality),
        model_type=_pick(overrides.model_type, prefs.default_model_type),
        preserve_formatting=_pick(overrides.preserve_formatting, prefs.preserve_formatting),
        show_billed_characters=prefs.show_billed_characters,
    )


def _strict_style(style: WritingStyle | None) -> WritingStyle | None:
    return style.strict() if style is not None else None


def _strict_tone(tone: Tone | None) -> Tone | None:
    return tone.strict() if tone is not None else None


def resolve_rewrite_options(
    overrides: RewriteOverrides | None,
    prefs: AppSettings,
) -> RewriteOptions:
    overrides = overrides or RewriteOverrides()
    style = _pick(overrides.writing_style, prefs.writing_style)
    tone = _pick(overrides.tone, prefs.tone)
    if overrides.strict:
        style = _strict_style(style)
        tone = _strict_tone(tone)
    return RewriteOptions(
        target_lang=_pick(overrides.target_lang, prefs.target_lang),
        writing_style=style,
        tone=tone,
    )


def split_tag_list(value: str | None) -> list[str] | None:
    """`"p, span"` → `["p", "span"]`; blank input → None."""

    if not value or not value.strip():
        return None
    tags = [tag.strip() for tag in value.split(",")]
    return [tag for tag in tags if tag] or None
