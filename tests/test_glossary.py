"""Glossary parsing, form validation and filtering."""

from datetime import datetime, timezone

import pytest

from core.domain.models import Glossary, GlossaryEntry
from core.errors import GlossaryValidationError
from core.services.glossary import (
    ensure_valid_glossary_form,
    entries_to_tsv,
    filter_glossaries,
    parse_glossary_entries,
    validate_glossary_form,
)


def _glossary(glossary_id: str, source: str, target: str) -> Glossary:
    return Glossary(
        glossary_id=glossary_id,
        name=glossary_id,
        ready=True,
        source_lang=source,
        target_lang=target,
        creation_time=datetime(2026, 1, 1, tzinfo=timezone.utc),
        entry_count=1,
    )


class TestParseEntries:

    def test_scenario(self):
        entries = parse_glossary_entries("cat\tkatze\ndog\thund\n")
        assert entries == [
            GlossaryEntry(source="cat", target="katze"),
            GlossaryEntry(source="dog", target="hund"),
        ]

    def test_blank_lines_skipped(self):
        entries = parse_glossary_entries("\n\na\tb\n\nc\td\n\n")
        assert [(e.source, e.target) for e in entries] == [("a", "b"), ("c", "d")]

    def test_extra_columns_ignored(self):
        assert parse_glossary_entries("a\tb\tc") == [GlossaryEntry(source="a", target="b")]

    def test_line_without_tab_is_not_rejected_here(self):
        assert parse_glossary_entries("catkatze") == [GlossaryEntry(source="catkatze", target="")]

    def test_entries_to_tsv(self):
        entries = [GlossaryEntry(source="a", target="b"), GlossaryEntry(source="c", target="d")]
        assert entries_to_tsv(entries) == "a\tb\nc\td"


class TestValidation:

    def test_valid_form(self):
        assert validate_glossary_form("Animals", "cat\tkatze\ndog\thund\n") == {}

    def test_missing_name(self):
        assert set(validate_glossary_form("  ", "a\tb")) == {"name"}

    def test_empty_entries(self):
        assert validate_glossary_form("Animals", " \n ") == {"entries": "Entries required"}

    def test_line_without_separator(self):
        errors = validate_glossary_form("Animals", "catkatze")
        assert errors == {"entries": "Each line must have source<TAB>target format"}

    def test_one_bad_line_among_good_ones(self):
        assert "entries" in validate_glossary_form("Animals", "a\tb\nbroken\nc\td")

    def test_reports_every_field(self):
        with pytest.raises(GlossaryValidationError) as info:
            ensure_valid_glossary_form("", "")
        assert set(info.value.errors) == {"name", "entries"}


class TestFilterGlossaries:

    def setup_method(self):
        self.items = [
            _glossary("en-de", "en", "de"),
            _glossary("en-en", "en", "en"),
            _glossary("fr-de", "fr", "de"),
        ]

    def test_no_languages_keeps_everything(self):
        assert filter_glossaries(self.items) == self.items

    def test_target_matches_base_language(self):
        kept = filter_glossaries(self.items, None, "DE")
        assert [g.glossary_id for g in kept] == ["en-de", "fr-de"]

    def test_regional_target_matches(self):
        kept = filter_glossaries(self.items, "", "EN-US")
        assert [g.glossary_id for g in kept] == ["en-en"]

    def test_source_and_target(self):
        kept = filter_glossaries(self.items, "EN", "de")
        assert [g.glossary_id for g in kept] == ["en-de"]
