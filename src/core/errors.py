"""Errores del dominio.

Taxonomía:
- `NoTextError`: no hay texto (ni selección ni portapapeles).
- `GlossaryValidationError`: formulario de glosario inválido (por campo).
- `DeepLError`: respuesta HTTP no-2xx, clasificada solo por status code.
- `MissingApiKeyError`: no hay API key configurada.
"""

from __future__ import annotations

ERROR_MESSAGES: dict[int, str] = {
    400: "Bad request. Check your parameters.",
    403: "Authorization failed. Check your API key.",
    404: "Resource not found.",
    413: "Request too large. Text exceeds size limit.",
    429: "Too many requests. Please wait.",
    456: "Quota exceeded. Check your DeepL plan.",
    500: "Internal server error.",
    503: "Service temporarily unavailable.",
    529: "Too many requests. Please wait.",
}


def describe_status(status: int) -> str:
    """Human readable cause for an HTTP status returned by DeepL."""

    return ERROR_MESSAGES.get(status, f"DeepL API error: {status}")


class LauncherError(RuntimeError):
    pass


class DeepLError(LauncherError):
    """Non-success response from the DeepL API.

    `body` is informational only; the message depends on `status` alone.
    """

    def __init__(self, status: int, body: str | None = None) -> None:
        self.status = status
        self.body = body
        self.message = describe_status(status)
        super().__init__(self.message)


class MissingApiKeyError(LauncherError):
    def __init__(self) -> None:
        super().__init__("Missing DeepL API key. Run `deepl-launcher doctor setup`.")


class NoSelectionError(LauncherError):
    """Raised by selection readers when nothing is selected."""


class NoTextError(LauncherError):
    def __init__(self, message: str = "No text found") -> None:
        super().__init__(message)


class GlossaryValidationError(LauncherError):
    """Per-field validation failures of the glossary creation form."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        detail = "; ".join(f"{field}: {msg}" for field, msg in self.errors.items())
        super().__init__(detail or "Invalid glossary")
