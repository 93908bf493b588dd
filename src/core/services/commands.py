"""Command orchestration utilities.

Each command is a one-shot chain: acquire input → resolve options → call the
API client → deliver the result. Everything that talks to the user goes
through the desktop collaborators (`core.interfaces.desktop`), so the same
flow backs the CLI and the tests. Failures are caught here, at the command
boundary, and turned into exactly one failure notification; no partial
results are delivered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from adapters.deepl_client import DeepLClient
from core.config import AppSettings
from core.domain.language import get_language_name
from core.domain.models import (
    Glossary,
    GlossaryEntry,
    RewriteOverrides,
    TranslateOverrides,
    TranslateResult,
)
from core.errors import DeepLError, GlossaryValidationError, NoSelectionError, NoTextError
from core.interfaces.desktop import Clipboard, Notifier, SelectionReader
from core.services.glossary import ensure_valid_glossary_form, parse_glossary_entries
from core.services.options import resolve_rewrite_options, resolve_translate_options

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AcquiredText:
    text: str
    from_selection: bool


@dataclass
class DesktopIO:
    """Collaborators a command reads from and reports to."""

    selection: SelectionReader
    clipboard: Clipboard
    notifier: Notifier


def acquire_text(selection: SelectionReader, clipboard: Clipboard) -> AcquiredText:
    """Selected text first, clipboard as fallback.

    Raises `NoTextError` when neither yields non-blank text.
    """

    try:
        text = selection.read_selection()
        from_selection = True
    except NoSelectionError:
        text = clipboard.read_text() or ""
        from_selection = False

    if not text.strip():
        raise NoTextError()
    return AcquiredText(text=text, from_selection=from_selection)


def translate_text(
    client: DeepLClient,
    prefs: AppSettings,
    text: str,
    overrides: TranslateOverrides | None = None,
) -> TranslateResult:
    return client.translate(text, resolve_translate_options(overrides, prefs))


def rewrite_text(
    client: DeepLClient,
    prefs: AppSettings,
    text: str,
    overrides: RewriteOverrides | None = None,
) -> str:
    return client.rewrite(text, resolve_rewrite_options(overrides, prefs))


def describe_translation(result: TranslateResult) -> str:
    """`From German (42 chars)` style summary."""

    detected = get_language_name(result.detected_source_language)
    billed = f" ({result.billed_characters} chars)" if result.billed_characters else ""
    return f"From {detected}{billed}"


def deliver(
    text: str,
    acquired: AcquiredText,
    io: DesktopIO,
    *,
    pasted_title: str,
    message: str | None = None,
) -> None:
    """Paste over a live selection, otherwise copy back to the clipboard."""

    if acquired.from_selection:
        io.clipboard.paste(text)
        io.notifier.success(pasted_title, message)
        return

    io.clipboard.copy(text)
    io.notifier.hud(f"Copied to clipboard • {message}" if message else "Copied to clipboard")


def report_failure(notifier: Notifier, exc: BaseException, fallback_title: str) -> None:
    if isinstance(exc, DeepLError):
        logger.debug("DeepL error body: %s", exc.body)
        notifier.failure(exc.message)
    elif isinstance(exc, NoTextError):
        notifier.failure(str(exc))
    elif isinstance(exc, GlossaryValidationError):
        notifier.failure(fallback_title, str(exc))
    else:
        logger.debug("Unclassified failure", exc_info=exc)
        notifier.failure(fallback_title, str(exc) or exc.__class__.__name__)


def run_translate(
    *,
    client: DeepLClient,
    io: DesktopIO,
    settings_factory: Callable[[], AppSettings] = AppSettings,
    overrides: TranslateOverrides | None = None,
) -> bool:
    try:
        acquired = acquire_text(io.selection, io.clipboard)
        result = translate_text(client, settings_factory(), acquired.text, overrides)
        deliver(
            result.text,
            acquired,
            io,
            pasted_title="Text translated",
            message=describe_translation(result),
        )
    except Exception as exc:
        report_failure(io.notifier, exc, "Failed to translate")
        return False
    return True


def run_rewrite(
    *,
    client: DeepLClient,
    io: DesktopIO,
    settings_factory: Callable[[], AppSettings] = AppSettings,
    overrides: RewriteOverrides | None = None,
) -> bool:
    try:
        acquired = acquire_text(io.selection, io.clipboard)
        result = rewrite_text(client, settings_factory(), acquired.text, overrides)
        deliver(result, acquired, io, pasted_title="Text replaced")
    except Exception as exc:
        report_failure(io.notifier, exc, "Failed to rewrite")
        return False
    return True


def create_glossary(
    client: DeepLClient,
    *,
    name: str,
    source_lang: str,
    target_lang: str,
    entries_tsv: str,
) -> Glossary:
    """Validate the form, then create. Invalid input never reaches the API."""

    ensure_valid_glossary_form(name, entries_tsv)
    return client.create_glossary(name.strip(), source_lang, target_lang, entries_tsv.strip())


def load_glossary(client: DeepLClient, glossary_id: str) -> tuple[Glossary, list[GlossaryEntry]]:
    glossary = client.get_glossary(glossary_id)
    entries = parse_glossary_entries(client.get_glossary_entries(glossary_id))
    return glossary, entries
