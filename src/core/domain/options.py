"""Option vocabularies accepted by the DeepL API.

Each enum mirrors the literal values the API expects. `DEFAULT` members are
sentinels meaning "let the service decide" and are never transmitted.
"""

from __future__ import annotations

from enum import Enum


class Formality(str, Enum):
    DEFAULT = "default"
    MORE = "more"
    LESS = "less"
    PREFER_MORE = "prefer_more"
    PREFER_LESS = "prefer_less"


class ModelType(str, Enum):
    LATENCY_OPTIMIZED = "latency_optimized"
    QUALITY_OPTIMIZED = "quality_optimized"
    PREFER_QUALITY_OPTIMIZED = "prefer_quality_optimized"


class SplitSentences(str, Enum):
    NONE = "0"
    PUNCTUATION = "1"
    NO_NEWLINES = "nonewlines"


class TagHandling(str, Enum):
    XML = "xml"
    HTML = "html"


class WritingStyle(str, Enum):
    DEFAULT = "default"
    ACADEMIC = "academic"
    BUSINESS = "business"
    CASUAL = "casual"
    SIMPLE = "simple"
    PREFER_ACADEMIC = "prefer_academic"
    PREFER_BUSINESS = "prefer_business"
    PREFER_CASUAL = "prefer_casual"
    PREFER_SIMPLE = "prefer_simple"

    def strict(self) -> "WritingStyle":
        """Strict counterpart of a `prefer_*` style (no fallback to similar styles)."""

        return WritingStyle(self.value.removeprefix("prefer_"))


class Tone(str, Enum):
    DEFAULT = "default"
    CONFIDENT = "confident"
    DIPLOMATIC = "diplomatic"
    ENTHUSIASTIC = "enthusiastic"
    FRIENDLY = "friendly"
    PREFER_CONFIDENT = "prefer_confident"
    PREFER_DIPLOMATIC = "prefer_diplomatic"
    PREFER_ENTHUSIASTIC = "prefer_enthusiastic"
    PREFER_FRIENDLY = "prefer_friendly"

    def strict(self) -> "Tone":
        return Tone(self.value.removeprefix("prefer_"))
