"""CLI principal (Typer).

Comandos:
- `translate` / `rewrite`: selección (argumento o stdin) o portapapeles.
- `languages`: menús de idiomas soportados.
- `glossary …` y `doctor …`: sub-apps.
"""

from __future__ import annotations

import typer
from pydantic import ValidationError

from cli import doctor, glossary, runtime
from cli.ui_components import build_languages_table, configure_logging
from core.domain.language import LANGUAGE_MENUS
from core.domain.models import RewriteOverrides, TranslateOverrides
from core.domain.options import (
    Formality,
    ModelType,
    SplitSentences,
    TagHandling,
    Tone,
    WritingStyle,
)
from core.services.commands import run_rewrite, run_translate
from core.services.options import split_tag_list

app = typer.Typer(
    no_args_is_help=True,
    help="Translate and rewrite selected or clipboard text with DeepL.",
)
app.add_typer(glossary.app, name="glossary")
app.add_typer(doctor.app, name="doctor")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    try:
        level = runtime.load_settings().log_level
    except ValidationError as exc:
        # `doctor` must stay usable to repair the preferences.
        if ctx.invoked_subcommand != "doctor":
            runtime.report_invalid_settings(exc)
            raise typer.Exit(code=1)
        level = "WARNING"
    configure_logging("DEBUG" if verbose else level, runtime.console)


@app.command()
def translate(
    text: str | None = typer.Argument(None, help="Text to translate. Defaults to stdin, then the clipboard."),
    source_lang: str | None = typer.Option(None, "--from", help="Source language (auto-detect when omitted)."),
    target_lang: str | None = typer.Option(None, "--to", help="Target language (default from preferences)."),
    formality: Formality | None = typer.Option(None, "--formality", case_sensitive=False),
    model_type: ModelType | None = typer.Option(None, "--model", case_sensitive=False),
    split_sentences: SplitSentences | None = typer.Option(None, "--split"),
    preserve_formatting: bool | None = typer.Option(
        None, "--preserve-formatting/--no-preserve-formatting"
    ),
    context: str | None = typer.Option(None, "--context", help="Additional context for better translation."),
    glossary_id: str | None = typer.Option(None, "--glossary", help="Glossary ID to apply."),
    tag_handling: TagHandling | None = typer.Option(None, "--tag-handling", case_sensitive=False),
    outline_detection: bool = typer.Option(
        True, "--outline-detection/--no-outline-detection", help="XML tag handling only."
    ),
    non_splitting_tags: str | None = typer.Option(None, "--non-splitting-tags", help="tag1, tag2 (XML only)."),
    splitting_tags: str | None = typer.Option(None, "--splitting-tags", help="tag1, tag2 (XML only)."),
    ignore_tags: str | None = typer.Option(None, "--ignore-tags", help="tag1, tag2 (XML only)."),
) -> None:
    """Translate the selection; clipboard text is translated and copied back."""

    xml = tag_handling is TagHandling.XML
    overrides = TranslateOverrides(
        source_lang=source_lang or None,
        target_lang=target_lang or None,
        formality=formality,
        model_type=model_type,
        split_sentences=split_sentences,
        preserve_formatting=preserve_formatting,
        context=context or None,
        glossary_id=glossary_id or None,
        tag_handling=tag_handling,
        outline_detection=outline_detection if xml else None,
        non_splitting_tags=split_tag_list(non_splitting_tags) if xml else None,
        splitting_tags=split_tag_list(splitting_tags) if xml else None,
        ignore_tags=split_tag_list(ignore_tags) if xml else None,
    )
    ok = run_translate(
        client=runtime.build_deepl_client(),
        io=runtime.build_desktop_io(text),
        settings_factory=runtime.load_settings,
        overrides=overrides,
    )
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def rewrite(
    text: str | None = typer.Argument(None, help="Text to rewrite. Defaults to stdin, then the clipboard."),
    target_lang: str | None = typer.Option(None, "--lang", help="Language (default from preferences)."),
    writing_style: WritingStyle | None = typer.Option(None, "--style", case_sensitive=False),
    tone: Tone | None = typer.Option(None, "--tone", case_sensitive=False),
    strict: bool = typer.Option(False, "--strict", help="Use strict style/tone (no fallback to similar styles)."),
) -> None:
    """Rewrite (improve) the selection or clipboard text with DeepL Write."""

    ok = run_rewrite(
        client=runtime.build_deepl_client(),
        io=runtime.build_desktop_io(text),
        settings_factory=runtime.load_settings,
        overrides=RewriteOverrides(
            target_lang=target_lang or None,
            writing_style=writing_style,
            tone=tone,
            strict=strict,
        ),
    )
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def languages(
    kind: str = typer.Option("target", "--kind", help="target, source, rewrite or glossary."),
) -> None:
    """List the language codes each command accepts."""

    menu = LANGUAGE_MENUS.get(kind.lower())
    if menu is None:
        raise typer.BadParameter(f"expected one of: {', '.join(LANGUAGE_MENUS)}", param_hint="--kind")
    runtime.out.print(build_languages_table(f"{kind.capitalize()} languages", menu))


def run() -> None:
    app()
