"""Glossary commands: list, view, create, delete, export."""

from __future__ import annotations

import sys
from pathlib import Path

import typer

from adapters.json_exporter import export_glossary_json
from cli import runtime
from cli.ui_components import build_entries_table, build_glossaries_table, print_field_errors
from core.errors import GlossaryValidationError
from core.services.commands import create_glossary, load_glossary, report_failure
from core.services.glossary import filter_glossaries

app = typer.Typer(no_args_is_help=True, help="Manage DeepL glossaries.")


@app.command("list")
def list_glossaries(
    source_lang: str | None = typer.Option(None, "--source", help="Only glossaries from this language."),
    target_lang: str | None = typer.Option(None, "--target", help="Only glossaries usable for this target."),
) -> None:
    """List glossaries with their language pair, size and status."""

    try:
        glossaries = runtime.build_deepl_client().list_glossaries()
    except Exception as exc:
        report_failure(runtime.build_notifier(), exc, "Failed to load glossaries")
        raise typer.Exit(code=1)

    glossaries = filter_glossaries(glossaries, source_lang, target_lang)
    if not glossaries:
        runtime.out.print("No glossaries")
        runtime.out.print("[dim]Create one with `glossary create`[/dim]")
        return
    runtime.out.print(build_glossaries_table(glossaries))


@app.command("view")
def view_glossary(glossary_id: str = typer.Argument(..., help="Glossary ID.")) -> None:
    """Show the entries of a glossary."""

    try:
        glossary, entries = load_glossary(runtime.build_deepl_client(), glossary_id)
    except Exception as exc:
        report_failure(runtime.build_notifier(), exc, "Failed to load glossary")
        raise typer.Exit(code=1)
    runtime.out.print(build_entries_table(glossary, entries))


@app.command("create")
def create(
    name: str = typer.Option("", "--name", help="Glossary name."),
    source_lang: str = typer.Option("en", "--source", help="Source language."),
    target_lang: str = typer.Option("de", "--target", help="Target language."),
    entries: str | None = typer.Option(None, "--entries", help="TSV entries: source<TAB>target per line."),
    file: Path | None = typer.Option(
        None, "--file", exists=True, dir_okay=False, readable=True, help="Read TSV entries from a file."
    ),
) -> None:
    """Create a glossary from TSV entries (option, file or stdin)."""

    if file is not None:
        entries = file.read_text(encoding="utf-8")
    elif entries is None and not sys.stdin.isatty():
        entries = sys.stdin.read()

    notifier = runtime.build_notifier()
    try:
        glossary = create_glossary(
            runtime.build_deepl_client(),
            name=name,
            source_lang=source_lang,
            target_lang=target_lang,
            entries_tsv=entries or "",
        )
    except GlossaryValidationError as exc:
        print_field_errors(runtime.console, exc.errors)
        raise typer.Exit(code=2)
    except Exception as exc:
        report_failure(notifier, exc, "Failed to create glossary")
        raise typer.Exit(code=1)

    notifier.success("Glossary created", f"{glossary.name} ({glossary.glossary_id})")


@app.command("delete")
def delete(
    glossary_id: str = typer.Argument(..., help="Glossary ID."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """Delete a glossary."""

    if not yes and not typer.confirm(f'Delete glossary "{glossary_id}"?'):
        raise typer.Abort()

    notifier = runtime.build_notifier()
    try:
        runtime.build_deepl_client().delete_glossary(glossary_id)
    except Exception as exc:
        report_failure(notifier, exc, "Failed to delete")
        raise typer.Exit(code=1)
    notifier.success("Glossary deleted", glossary_id)


@app.command("export")
def export(
    glossary_id: str = typer.Argument(..., help="Glossary ID."),
    output: Path = typer.Option(..., "--output", "-o", dir_okay=False, help="Destination JSON file."),
) -> None:
    """Export glossary metadata and entries to JSON."""

    notifier = runtime.build_notifier()
    try:
        glossary, entries = load_glossary(runtime.build_deepl_client(), glossary_id)
        path = export_glossary_json(glossary=glossary, entries=entries, output_path=output)
    except Exception as exc:
        report_failure(notifier, exc, "Failed to export glossary")
        raise typer.Exit(code=1)
    notifier.success("Glossary exported", str(path))
