"""Adaptador HTTP para la API de DeepL.

Responsabilidad:
- Único borde entre la aplicación y el servicio externo.
- Serializar opciones a JSON (inclusión selectiva de campos).
- Deserializar respuestas a modelos del dominio.
- Clasificar respuestas no-2xx como `DeepLError`.

Regla de diseño: un campo sin valor, vacío o en su opción "default"
(formality, writing_style, tone) no se envía. DeepL interpreta la
*presencia* de un campo como override explícito.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable
from urllib.parse import quote

import httpx

from adapters.http_client import build_client
from core.config import AppSettings, Credentials
from core.domain.models import (
    Glossary,
    RewriteOptions,
    TranslateOptions,
    TranslateResult,
)
from core.errors import DeepLError

logger = logging.getLogger(__name__)

_DEFAULT_SENTINEL = "default"
TSV_MEDIA_TYPE = "text/tab-separated-values"


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def _put(body: dict[str, Any], key: str, value: Any) -> None:
    """Append `key` only when `value` carries an explicit choice.

    Only enum options have a "default" member; free text equal to "default"
    is still sent.
    """

    if isinstance(value, Enum) and value.value == _DEFAULT_SENTINEL:
        return
    value = _plain(value)
    if value is None:
        return
    if isinstance(value, (str, list, tuple)) and not value:
        return
    body[key] = list(value) if isinstance(value, tuple) else value


def build_translate_body(text: str, options: TranslateOptions) -> dict[str, Any]:
    body: dict[str, Any] = {
        "text": [text],
        "target_lang": options.target_lang,
    }
    _put(body, "source_lang", options.source_lang)
    _put(body, "formality", options.formality)
    _put(body, "model_type", options.model_type)
    _put(body, "split_sentences", options.split_sentences)
    # Flags that only mean something when switched on.
    _put(body, "preserve_formatting", options.preserve_formatting or None)
    _put(body, "context", options.context)
    _put(body, "glossary_id", options.glossary_id)
    _put(body, "tag_handling", options.tag_handling)
    # outline_detection defaults to true server-side, so False is a real choice.
    _put(body, "outline_detection", options.outline_detection)
    _put(body, "non_splitting_tags", options.non_splitting_tags)
    _put(body, "splitting_tags", options.splitting_tags)
    _put(body, "ignore_tags", options.ignore_tags)
    _put(body, "show_billed_characters", options.show_billed_characters or None)
    return body


def build_rewrite_body(text: str, options: RewriteOptions) -> dict[str, Any]:
    body: dict[str, Any] = {
        "text": [text],
        "target_lang": options.target_lang.upper(),
    }
    _put(body, "writing_style", options.writing_style)
    _put(body, "tone", options.tone)
    return body


def build_glossary_body(
    name: str,
    source_lang: str,
    target_lang: str,
    entries_tsv: str,
) -> dict[str, Any]:
    return {
        "name": name,
        "source_lang": source_lang,
        "target_lang": target_lang,
        "entries": entries_tsv,
        "entries_format": "tsv",
    }


def _read_body(response: httpx.Response) -> str | None:
    try:
        return response.text
    except (httpx.HTTPError, UnicodeDecodeError, LookupError):
        return None


class DeepLClient:
    """Cliente síncrono de la API de DeepL.

    Las credenciales se leen de un snapshot nuevo de preferencias en *cada*
    request (`settings_factory`), nunca se cachean entre llamadas.
    """

    def __init__(
        self,
        settings_factory: Callable[[], AppSettings] = AppSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings_factory = settings_factory
        self._transport = transport

    def _request(
        self,
        method: str,
        endpoint: str,
        *,
        json_body: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        capture_body: bool = False,
    ) -> httpx.Response:
        settings = self._settings_factory()
        credentials = Credentials.from_settings(settings)

        with build_client(
            settings,
            base_url=credentials.base_url,
            extra_headers=credentials.auth_header(),
            transport=self._transport,
        ) as client:
            response = client.request(method, endpoint, json=json_body, headers=headers)

        logger.debug("%s %s -> %s", method, endpoint, response.status_code)
        if not response.is_success:
            body = _read_body(response) if capture_body else None
            logger.warning("DeepL %s %s failed with HTTP %s", method, endpoint, response.status_code)
            raise DeepLError(response.status_code, body)
        return response

    def translate(self, text: str, options: TranslateOptions) -> TranslateResult:
        response = self._request(
            "POST",
            "/translate",
            json_body=build_translate_body(text, options),
            capture_body=True,
        )
        translations = response.json().get("translations") or []
        if not translations:
            raise ValueError("DeepL returned no translations")
        return TranslateResult.model_validate(translations[0])

    def rewrite(self, text: str, options: RewriteOptions) -> str:
        response = self._request(
            "POST",
            "/write/rephrase",
            json_body=build_rewrite_body(text, options),
            capture_body=True,
        )
        improvements = response.json().get("improvements") or []
        if not improvements:
            raise ValueError("DeepL returned no improvements")
        return str(improvements[0]["text"])

    def list_glossaries(self) -> list[Glossary]:
        response = self._request("GET", "/glossaries")
        raw = response.json().get("glossaries") or []
        return [Glossary.model_validate(item) for item in raw]

    def get_glossary(self, glossary_id: str) -> Glossary:
        response = self._request("GET", f"/glossaries/{quote(glossary_id, safe='')}")
        return Glossary.model_validate(response.json())

    def get_glossary_entries(self, glossary_id: str) -> str:
        """Raw TSV entries; parsing is up to the caller."""

        response = self._request(
            "GET",
            f"/glossaries/{quote(glossary_id, safe='')}/entries",
            headers={"Accept": TSV_MEDIA_TYPE},
        )
        return response.text

    def create_glossary(
        self,
        name: str,
        source_lang: str,
        target_lang: str,
        entries_tsv: str,
    ) -> Glossary:
        response = self._request(
            "POST",
            "/glossaries",
            json_body=build_glossary_body(name, source_lang, target_lang, entries_tsv),
            capture_body=True,
        )
        return Glossary.model_validate(response.json())

    def delete_glossary(self, glossary_id: str) -> None:
        self._request("DELETE", f"/glossaries/{quote(glossary_id, safe='')}")
