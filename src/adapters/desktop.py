"""Colaboradores de escritorio concretos.

- Selección: texto pasado como argumento o por stdin (pipe / filtro de editor).
  Un terminal interactivo sin argumento equivale a "nada seleccionado".
- Portapapeles: `pyperclip`. "Pegar en el cursor" escribe en stdout, que es
  donde el editor o el pipe esperan el texto que reemplaza la selección.
- Notificaciones: consola Rich en stderr, para no ensuciar stdout.
"""

from __future__ import annotations

import sys
from typing import TextIO

import pyperclip
from rich.console import Console
from rich.markup import escape

from core.errors import NoSelectionError


class ArgumentOrStdinSelection:
    def __init__(self, argument: str | None = None, stream: TextIO | None = None) -> None:
        self._argument = argument
        self._stream = stream if stream is not None else sys.stdin

    def read_selection(self) -> str:
        if self._argument is not None:
            return self._argument
        if self._stream is None or self._stream.isatty():
            raise NoSelectionError("Nothing selected")
        text = self._stream.read()
        # An empty pipe (e.g. /dev/null from a hotkey daemon) is no selection.
        if not text:
            raise NoSelectionError("Nothing selected")
        return text


class PyperclipClipboard:
    def __init__(self, output: TextIO | None = None) -> None:
        self._output = output

    def read_text(self) -> str | None:
        return pyperclip.paste()

    def copy(self, text: str) -> None:
        pyperclip.copy(text)

    def paste(self, text: str) -> None:
        out = self._output if self._output is not None else sys.stdout
        out.write(text)
        if not text.endswith("\n"):
            out.write("\n")
        out.flush()


class RichNotifier:
    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    def success(self, title: str, message: str | None = None) -> None:
        self._console.print(f"[green]✔ {escape(title)}[/green]" + (f" [dim]{escape(message)}[/dim]" if message else ""))

    def failure(self, title: str, message: str | None = None) -> None:
        self._console.print(f"[red]✘ {escape(title)}[/red]" + (f"\n  [dim]{escape(message)}[/dim]" if message else ""))

    def hud(self, message: str) -> None:
        self._console.print(f"[cyan]{escape(message)}[/cyan]")
