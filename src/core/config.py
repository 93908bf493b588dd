"""Configuración del Core.

Por qué aquí:
- Centraliza las preferencias (pydantic-settings) sin contaminar la CLI.
- El cliente de DeepL lee un snapshot *nuevo* en cada request: las
  preferencias pueden cambiar entre invocaciones y no cacheamos la API key.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.options import Formality, ModelType, Tone, WritingStyle
from core.errors import MissingApiKeyError

FREE_BASE_URL = "https://api-free.deepl.com/v2"
PRO_BASE_URL = "https://api.deepl.com/v2"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "deepl-launcher"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "deepl-launcher"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "deepl-launcher"
    return Path.home() / ".config" / "deepl-launcher"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# deepl-launcher user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class ApiType(str, Enum):
    """Account tier; each tier has its own API hostname."""

    FREE = "free"
    PRO = "pro"


class AppSettings(BaseSettings):
    """Preferencias de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars / .env) sin ensuciar el Core.
    - Un único contrato de preferencias para CLI, resolvers y cliente HTTP.
    """

    model_config = SettingsConfigDict(
        env_prefix="DEEPL_LAUNCHER_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        description="DeepL authentication key.",
    )
    api_type: ApiType = Field(
        default=ApiType.FREE,
        description="Account tier (free/pro), selects the API hostname.",
    )

    # Rewrite defaults
    target_lang: str = Field(
        default="en-US",
        min_length=2,
        description="Default language for rewriting.",
    )
    writing_style: WritingStyle = Field(default=WritingStyle.DEFAULT)
    tone: Tone = Field(default=Tone.DEFAULT)

    # Translate defaults
    translate_target_lang: str = Field(
        default="EN-US",
        min_length=2,
        description="Default target language for translation.",
    )
    formality: Formality = Field(default=Formality.DEFAULT)
    default_model_type: ModelType | None = Field(
        default=None,
        description="Default model hint; empty means 'let DeepL decide'.",
    )
    preserve_formatting: bool = Field(default=False)
    show_billed_characters: bool = Field(default=False)

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="deepl-launcher/0.1",
        min_length=1,
        description="User-Agent para peticiones a la API.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging por defecto (WARNING, INFO, DEBUG...).",
    )

    @field_validator("default_model_type", mode="before")
    @classmethod
    def _empty_model_type(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


@dataclass(frozen=True)
class Credentials:
    """API key + tier, built from one preference snapshot."""

    api_key: str
    api_type: ApiType = ApiType.FREE

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "Credentials":
        key = (settings.api_key or "").strip()
        if not key:
            raise MissingApiKeyError()
        return cls(api_key=key, api_type=settings.api_type)

    @property
    def base_url(self) -> str:
        return FREE_BASE_URL if self.api_type is ApiType.FREE else PRO_BASE_URL

    def auth_header(self) -> dict[str, str]:
        return {"Authorization": f"DeepL-Auth-Key {self.api_key}"}
