"""Option resolvers: override → preference → default."""

from core.config import AppSettings
from core.domain.models import RewriteOverrides, TranslateOverrides
from core.domain.options import Formality, ModelType, TagHandling, Tone, WritingStyle
from core.services.options import (
    resolve_rewrite_options,
    resolve_translate_options,
    split_tag_list,
)


def _prefs(**kwargs):
    return AppSettings(_env_file=None, api_key="k", **kwargs)


class TestResolveTranslateOptions:

    def test_no_overrides_uses_preferences(self):
        prefs = _prefs(
            translate_target_lang="FR",
            formality="prefer_less",
            default_model_type="latency_optimized",
            preserve_formatting=True,
            show_billed_characters=True,
        )

        options = resolve_translate_options(None, prefs)

        assert options.target_lang == "FR"
        assert options.formality is Formality.PREFER_LESS
        assert options.model_type is ModelType.LATENCY_OPTIMIZED
        assert options.preserve_formatting is True
        assert options.show_billed_characters is True
        assert options.source_lang is None

    def test_overrides_win(self):
        prefs = _prefs(translate_target_lang="FR", formality="prefer_less", preserve_formatting=True)
        overrides = TranslateOverrides(
            target_lang="JA",
            formality=Formality.DEFAULT,
            preserve_formatting=False,
            source_lang="EN",
            tag_handling=TagHandling.XML,
            ignore_tags=["code"],
        )

        options = resolve_translate_options(overrides, prefs)

        assert options.target_lang == "JA"
        assert options.formality is Formality.DEFAULT
        assert options.preserve_formatting is False
        assert options.source_lang == "EN"
        assert options.tag_handling is TagHandling.XML
        assert options.ignore_tags == ["code"]

    def test_empty_model_preference_means_unset(self):
        options = resolve_translate_options(None, _prefs(default_model_type=""))
        assert options.model_type is None

    def test_billed_characters_always_from_preferences(self):
        options = resolve_translate_options(TranslateOverrides(), _prefs(show_billed_characters=False))
        assert options.show_billed_characters is False

    def test_inputs_are_not_mutated(self):
        prefs = _prefs(translate_target_lang="FR")
        overrides = TranslateOverrides(ignore_tags=["x"])

        options = resolve_translate_options(overrides, prefs)

        assert overrides.target_lang is None
        assert prefs.translate_target_lang == "FR"
        assert options.ignore_tags == ["x"]


class TestResolveRewriteOptions:

    def test_preferences_fill_missing_values(self):
        prefs = _prefs(target_lang="de", writing_style="prefer_business", tone="default")

        options = resolve_rewrite_options(None, prefs)

        assert options.target_lang == "de"
        assert options.writing_style is WritingStyle.PREFER_BUSINESS
        assert options.tone is Tone.DEFAULT

    def test_overrides_win(self):
        prefs = _prefs(target_lang="de", writing_style="prefer_business")
        overrides = RewriteOverrides(target_lang="fr", writing_style=WritingStyle.CASUAL, tone=Tone.FRIENDLY)

        options = resolve_rewrite_options(overrides, prefs)

        assert (options.target_lang, options.writing_style, options.tone) == (
            "fr",
            WritingStyle.CASUAL,
            Tone.FRIENDLY,
        )

    def test_strict_mode_drops_prefer_prefix(self):
        prefs = _prefs(writing_style="prefer_academic", tone="prefer_diplomatic")

        options = resolve_rewrite_options(RewriteOverrides(strict=True), prefs)

        assert options.writing_style is WritingStyle.ACADEMIC
        assert options.tone is Tone.DIPLOMATIC

    def test_strict_mode_keeps_default(self):
        options = resolve_rewrite_options(RewriteOverrides(strict=True), _prefs())
        assert options.writing_style is WritingStyle.DEFAULT
        assert options.tone is Tone.DEFAULT


def test_split_tag_list():
    assert split_tag_list("p, span ,div") == ["p", "span", "div"]
    assert split_tag_list("  ") is None
    assert split_tag_list(None) is None
    assert split_tag_list(",") is None
