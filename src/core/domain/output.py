"""Output format options for dhcp-poolstat.

Kept in the domain layer so the CLI and the renderers share a single source
of truth without importing each other.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Supported renderings of the usage records."""

    TEXT = "text"
    JSON = "json"
    TABLE = "table"

    @classmethod
    def default(cls) -> "OutputFormat":
        """Return the default format (tab separated text)."""

        return cls.TEXT

    @classmethod
    def from_flags(cls, *, json_flag: bool, fmt: "OutputFormat | None") -> "OutputFormat":
        """Resolve the `--json` shortcut against an explicit `--format`."""

        if json_flag:
            return cls.JSON
        return fmt or cls.default()

    @property
    def structured(self) -> bool:
        return self is OutputFormat.JSON
