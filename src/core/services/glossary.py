"""Glossary entry parsing, creation-form validation and filtering."""

from __future__ import annotations

from typing import Iterable

from core.domain.models import Glossary, GlossaryEntry
from core.errors import GlossaryValidationError

_TAB = "\t"


def parse_glossary_entries(tsv: str) -> list[GlossaryEntry]:
    """Parse DeepL's TSV payload into ordered entries.

    One entry per non-empty line. No validation here: a line without a tab
    yields an entry with an empty target.
    """

    entries: list[GlossaryEntry] = []
    for line in tsv.splitlines():
        if not line:
            continue
        source, _, rest = line.partition(_TAB)
        target = rest.split(_TAB, 1)[0]
        entries.append(GlossaryEntry(source=source, target=target))
    return entries


def entries_to_tsv(entries: Iterable[GlossaryEntry]) -> str:
    return "\n".join(f"{e.source}{_TAB}{e.target}" for e in entries)


def validate_glossary_form(name: str | None, entries_tsv: str | None) -> dict[str, str]:
    """Return field → message for every invalid field (empty when valid)."""

    errors: dict[str, str] = {}
    if not (name or "").strip():
        errors["name"] = "The item is required"

    text = (entries_tsv or "").strip()
    if not text:
        errors["entries"] = "Entries required"
    else:
        lines = [line for line in text.split("\n") if line]
        if any(_TAB not in line for line in lines):
            errors["entries"] = "Each line must have source<TAB>target format"
    return errors


def ensure_valid_glossary_form(name: str | None, entries_tsv: str | None) -> None:
    errors = validate_glossary_form(name, entries_tsv)
    if errors:
        raise GlossaryValidationError(errors)


def filter_glossaries(
    glossaries: Iterable[Glossary],
    source_lang: str | None = None,
    target_lang: str | None = None,
) -> list[Glossary]:
    """Glossaries usable for a source → target translation.

    The source must match exactly (case-insensitive) when given; the target
    only has to share the base language (`EN-US` matches an `en` glossary).
    """

    items = list(glossaries)
    if not source_lang and not target_lang:
        return items

    out: list[Glossary] = []
    for glossary in items:
        src_ok = not source_lang or glossary.source_lang.upper() == source_lang.upper()
        tgt_ok = not target_lang or glossary.target_lang.upper().startswith(
            target_lang.split("-")[0].upper()
        )
        if src_ok and tgt_ok:
            out.append(glossary)
    return out
