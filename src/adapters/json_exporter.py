"""Exportación JSON de los registros de uso.

Por qué JSON compacto:
- Lo consumen scripts de monitorización existentes que esperan una lista de
  objetos `{"Interface", "Used", "Size"}` en una sola línea.
- `Size` es la capacidad cruda; el libre se deriva en el consumidor.
"""

from __future__ import annotations

import json
from typing import Sequence

from pydantic import TypeAdapter

from core.domain.models import PoolUsageRecord

_RECORDS = TypeAdapter(list[PoolUsageRecord])


class JsonRenderer:
    """Estrategia de salida estructurada."""

    def render(self, records: Sequence[PoolUsageRecord]) -> str:
        payload = [record.model_dump(mode="json", by_alias=True) for record in records]
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))

    def render_error(self, summary: str, detail: str | None = None) -> str:
        # The structured diagnostic carries the summary only.
        return json.dumps({"Error": summary}, ensure_ascii=False, separators=(",", ":"))


def parse_records_json(text: str) -> list[PoolUsageRecord]:
    """Lee de vuelta la salida de `JsonRenderer.render`."""

    return _RECORDS.validate_json(text)
