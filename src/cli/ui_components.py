"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- La tabla Rich es un modo de salida más: consume los mismos registros que
  los renderizadores de texto y JSON.
"""

from __future__ import annotations

from typing import Sequence

from rich.table import Table
from rich.text import Text

from core.domain.models import PoolUsageRecord


def format_free_pct(record: PoolUsageRecord) -> str:
    if record.size <= 0:
        return "n/a"
    return f"{100.0 * record.free / record.size:.1f}%"


def build_usage_table(records: Sequence[PoolUsageRecord], *, title: str | None = None) -> Table:
    """Crea una tabla Rich con el uso de cada pool."""

    table = Table(title=title or "DHCP Pool Usage")
    table.add_column("Interface", style="cyan", no_wrap=True)
    table.add_column("Used", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("Free", justify="right")
    table.add_column("% Free", justify="right", style="dim")

    for record in records:
        free = Text(str(record.free), style="red" if record.free < 0 else "green")
        table.add_row(
            record.interface,
            str(record.used),
            str(record.size),
            free,
            format_free_pct(record),
        )
    return table
