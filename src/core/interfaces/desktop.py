"""Contratos de los colaboradores de escritorio.

Por qué Protocol:
- Los comandos no saben de dónde viene el texto ni cómo se notifica al
  usuario; solo consumen estas interfaces.
- Permite sustituirlos por fakes en memoria en los tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SelectionReader(Protocol):
    """Currently selected text.

    Raises `NoSelectionError` when nothing is selected.
    """

    def read_selection(self) -> str:
        ...


@runtime_checkable
class Clipboard(Protocol):
    def read_text(self) -> str | None:
        ...

    def copy(self, text: str) -> None:
        ...

    def paste(self, text: str) -> None:
        """Deliver `text` at the cursor, replacing the live selection."""

        ...


@runtime_checkable
class Notifier(Protocol):
    def success(self, title: str, message: str | None = None) -> None:
        ...

    def failure(self, title: str, message: str | None = None) -> None:
        ...

    def hud(self, message: str) -> None:
        """Short, transient confirmation line."""

        ...
