"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

import logging
from typing import Iterable

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from core.domain.models import Glossary, GlossaryEntry


def configure_logging(level: str | int, console: Console) -> None:
    """Instala un RichHandler en stderr (idempotente entre invocaciones)."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO; keep it quiet unless debugging.
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))


def build_glossaries_table(glossaries: Iterable[Glossary]) -> Table:
    table = Table(title="Glossaries")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("ID", style="dim")
    table.add_column("Languages", style="white")
    table.add_column("Entries", justify="right")
    table.add_column("Status")
    for g in glossaries:
        status = "[green]Ready[/green]" if g.ready else "[yellow]Processing[/yellow]"
        table.add_row(
            g.name,
            g.glossary_id,
            f"{g.source_lang} → {g.target_lang}",
            f"{g.entry_count} entries",
            status,
        )
    return table


def build_entries_table(glossary: Glossary, entries: list[GlossaryEntry]) -> Table:
    """Entradas de un glosario, con el par de idiomas como título."""

    table = Table(
        title=f"{glossary.name}: {glossary.source_lang} → {glossary.target_lang}",
        caption=f"{len(entries)} entries",
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Source", style="cyan")
    table.add_column("Target", style="magenta")
    for i, entry in enumerate(entries, start=1):
        table.add_row(str(i), entry.source, entry.target)
    return table


def build_languages_table(title: str, languages: Iterable[tuple[str, str]]) -> Table:
    table = Table(title=title)
    table.add_column("Code", style="bright_green", no_wrap=True)
    table.add_column("Language", style="white")
    for code, name in languages:
        table.add_row(code, name)
    return table


def print_field_errors(console: Console, errors: dict[str, str]) -> None:
    for field, message in errors.items():
        console.print(f"[red]{field}[/red]: {message}")
