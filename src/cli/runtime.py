"""Wiring de colaboradores para la CLI.

Los comandos piden aquí su cliente y sus colaboradores de escritorio, así
los tests pueden sustituirlos (monkeypatch) sin tocar los comandos.
"""

from __future__ import annotations

from pydantic import ValidationError
from rich.console import Console

from adapters.deepl_client import DeepLClient
from adapters.desktop import ArgumentOrStdinSelection, PyperclipClipboard, RichNotifier
from core.config import AppSettings
from core.services.commands import DesktopIO

# Notificaciones y logs en stderr; tablas y resultados en stdout.
console = Console(stderr=True)
out = Console()


def load_settings() -> AppSettings:
    return AppSettings()


def build_deepl_client() -> DeepLClient:
    return DeepLClient(load_settings)


def build_notifier() -> RichNotifier:
    return RichNotifier(console)


def report_invalid_settings(exc: ValidationError) -> None:
    """One failure line per invalid preference, e.g. `formality: Input should be ...`."""

    detail = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    build_notifier().failure("Invalid configuration", f"{detail}. Fix it with `deepl-launcher doctor setup`.")


def build_desktop_io(text: str | None = None) -> DesktopIO:
    return DesktopIO(
        selection=ArgumentOrStdinSelection(text),
        clipboard=PyperclipClipboard(),
        notifier=build_notifier(),
    )
