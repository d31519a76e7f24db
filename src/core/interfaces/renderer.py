"""Contrato de renderizado de resultados."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import PoolUsageRecord


@runtime_checkable
class RecordRenderer(Protocol):
    """Convierte la secuencia inmutable de registros en texto de salida.

    Cada modo (texto, JSON) es una estrategia independiente; la agregación
    no sabe qué modo se usa.
    """

    def render(self, records: Sequence[PoolUsageRecord]) -> str:
        ...

    def render_error(self, summary: str, detail: str | None = None) -> str:
        """Formatea el único diagnóstico fatal de la ejecución."""

        ...
