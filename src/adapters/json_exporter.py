"""Exportación JSON de glosarios.

Por qué JSON:
- Respaldo legible de un glosario (metadata + entradas) antes de borrarlo;
  DeepL no permite editar glosarios, solo recrearlos.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import Glossary, GlossaryEntry


def export_glossary_json(
    *,
    glossary: Glossary,
    entries: list[GlossaryEntry],
    output_path: Path,
) -> Path:
    """Exporta glosario + entradas a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "glossary": glossary.model_dump(mode="json"),
        "entries": [entry.model_dump(mode="json") for entry in entries],
    }
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
