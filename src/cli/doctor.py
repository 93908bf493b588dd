"""Doctor command for environment diagnostics."""

from __future__ import annotations

import pyperclip
import typer
from pydantic import ValidationError
from rich.table import Table

from cli import runtime
from core.config import ApiType, Credentials, write_user_env_vars
from core.errors import LauncherError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")


def _check_api() -> tuple[bool, str]:
    try:
        glossaries = runtime.build_deepl_client().list_glossaries()
    except LauncherError as exc:
        return False, str(exc)
    except Exception as exc:
        return False, f"{exc.__class__.__name__}: {exc}"
    return True, f"{len(glossaries)} glossaries"


def _check_clipboard() -> tuple[bool, str]:
    try:
        pyperclip.paste()
    except pyperclip.PyperclipException as exc:
        return False, str(exc)
    return True, "OK"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    try:
        settings = runtime.load_settings()
    except ValidationError as exc:
        runtime.report_invalid_settings(exc)
        raise typer.Exit(code=1)

    table = Table(title="deepl-launcher Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    has_key = bool((settings.api_key or "").strip())
    table.add_row("API key", "OK" if has_key else "MISSING", "set" if has_key else "run `doctor setup`")
    if has_key:
        table.add_row("Endpoint", "OK", Credentials.from_settings(settings).base_url)
        ok_api, detail_api = _check_api()
        table.add_row("API access", "OK" if ok_api else "FAIL", detail_api)
    table.add_row("Translate to", "OK", settings.translate_target_lang)
    table.add_row("Rewrite in", "OK", settings.target_lang)

    ok_clip, detail_clip = _check_clipboard()
    table.add_row("Clipboard", "OK" if ok_clip else "FAIL", detail_clip)

    runtime.out.print(table)

    if not ok_clip:
        runtime.out.print(
            "\n[yellow]Note:[/yellow] Without a clipboard backend, pass text as an argument or via stdin."
        )


@app.command()
def setup() -> None:
    """Interactive setup (stores preferences in the user config .env)."""

    api_key = typer.prompt("DeepL API key", hide_input=True).strip()
    if not api_key:
        raise typer.BadParameter("API key is required")

    api_type = typer.prompt(
        "Account type (free/pro)",
        default="free" if api_key.endswith(":fx") else "pro",
        show_default=True,
    ).strip().lower()
    if api_type not in {t.value for t in ApiType}:
        raise typer.BadParameter("account type must be 'free' or 'pro'")

    translate_target = typer.prompt("Default translation target", default="EN-US", show_default=True).strip()
    rewrite_lang = typer.prompt("Default rewrite language", default="en-US", show_default=True).strip()

    env_path = write_user_env_vars(
        {
            "DEEPL_LAUNCHER_API_KEY": api_key,
            "DEEPL_LAUNCHER_API_TYPE": api_type,
            "DEEPL_LAUNCHER_TRANSLATE_TARGET_LANG": translate_target or None,
            "DEEPL_LAUNCHER_TARGET_LANG": rewrite_lang or None,
        }
    )

    runtime.out.print(f"[green]Saved config to:[/green] {env_path}")
