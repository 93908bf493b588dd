"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta de opciones (enums) en el borde, antes de construir
  el body HTTP.
- Las respuestas de DeepL se normalizan con `model_validate` ignorando
  campos desconocidos.

Nota:
- Todos son value objects inmutables (`frozen=True`); ningún estado mutable
  cruza invocaciones.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.options import (
    Formality,
    ModelType,
    SplitSentences,
    TagHandling,
    Tone,
    WritingStyle,
)


class TranslateOverrides(BaseModel):
    """Partial translation options given explicitly by the caller.

    Every field is optional; unset fields fall back to the preferences.
    """

    model_config = ConfigDict(frozen=True)

    source_lang: str | None = None
    target_lang: str | None = None
    formality: Formality | None = None
    model_type: ModelType | None = None
    split_sentences: SplitSentences | None = None
    preserve_formatting: bool | None = None
    context: str | None = None
    glossary_id: str | None = None
    tag_handling: TagHandling | None = None
    outline_detection: bool | None = None
    non_splitting_tags: list[str] | None = None
    splitting_tags: list[str] | None = None
    ignore_tags: list[str] | None = None


class TranslateOptions(BaseModel):
    """Fully resolved options for `POST /translate`."""

    model_config = ConfigDict(frozen=True)

    target_lang: str = Field(..., min_length=1, description="Target language code.")
    source_lang: str | None = Field(
        default=None,
        description="Source language; None lets DeepL detect it.",
    )
    formality: Formality | None = None
    model_type: ModelType | None = None
    split_sentences: SplitSentences | None = None
    preserve_formatting: bool | None = None
    context: str | None = Field(
        default=None,
        description="Extra context that influences the translation but is not translated.",
    )
    glossary_id: str | None = None
    tag_handling: TagHandling | None = None
    outline_detection: bool | None = Field(
        default=None,
        description="Only meaningful with XML tag handling; sent even when False.",
    )
    non_splitting_tags: list[str] | None = None
    splitting_tags: list[str] | None = None
    ignore_tags: list[str] | None = None
    show_billed_characters: bool | None = None


class TranslateResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    text: str
    detected_source_language: str
    billed_characters: int | None = None


class RewriteOverrides(BaseModel):
    model_config = ConfigDict(frozen=True)

    target_lang: str | None = None
    writing_style: WritingStyle | None = None
    tone: Tone | None = None
    strict: bool = Field(
        default=False,
        description="Map prefer_* styles/tones to their strict variant.",
    )


class RewriteOptions(BaseModel):
    """Fully resolved options for `POST /write/rephrase`."""

    model_config = ConfigDict(frozen=True)

    target_lang: str = Field(..., min_length=1)
    writing_style: WritingStyle | None = None
    tone: Tone | None = None


class Glossary(BaseModel):
    """Glosario de DeepL (tabla direccional source → target)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    glossary_id: str = Field(..., min_length=1)
    name: str
    ready: bool = False
    source_lang: str
    target_lang: str
    creation_time: datetime
    entry_count: int = Field(default=0, ge=0)


class GlossaryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: str
    target: str
