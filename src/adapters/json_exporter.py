"""Exportación JSON de resultados.

Por qué JSON:
- Es el formato nativo de los registries: se guarda tal cual se imprime.
- Interoperabilidad con scripts/pipelines que consumen la salida.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from core.errors import ExportError


def _to_jsonable(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    return data


def dumps_pretty(data: Any) -> str:
    """Render estable (indent=2, UTF-8 sin escapar) usado en stdout y ficheros."""

    return json.dumps(_to_jsonable(data), ensure_ascii=False, indent=2)


def write_json_to_file(data: Any, file_name: str | Path) -> Path:
    """Escribe `data` como JSON con formato en `file_name` (sobrescribe)."""

    output_path = Path(file_name)
    try:
        text = dumps_pretty(data)
    except (TypeError, ValueError) as exc:
        raise ExportError(output_path, str(exc)) from exc

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        raise ExportError(output_path, exc.strerror or str(exc)) from exc
    return output_path
