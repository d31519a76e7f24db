"""Plain text rendering of usage records.

One header line, then one tab separated line per record with the free count
derived at render time. Column widths match the tool's historical output so
existing shell pipelines keep working.
"""

from __future__ import annotations

from typing import Sequence

from core.domain.models import PoolUsageRecord

HEADER = "Interface\tUsed\tFree"


def format_record_line(record: PoolUsageRecord) -> str:
    return f"{record.interface}\t{record.used:12d}\t{record.free:4d}"


class TextRenderer:
    """Human readable, tab separated output."""

    def render(self, records: Sequence[PoolUsageRecord]) -> str:
        lines = [HEADER]
        lines.extend(format_record_line(record) for record in records)
        return "\n".join(lines)

    def render_error(self, summary: str, detail: str | None = None) -> str:
        if detail:
            return f"{summary}: {detail}"
        return summary
