"""Mapping of pipeline errors to the single diagnostic a run may print.

The core raises; only the CLI decides the wording and the exit status. The
structured summary is kept short and stable for machine consumers, the text
form adds the underlying detail.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.domain.errors import (
    ConfigurationError,
    ConnectError,
    FormatError,
    PoolStatsError,
    QueryError,
)
from core.services.pool_stats import (
    BINDING_LIST_CONTEXT,
    pool_lookup_context,
    usage_lookup_context,
)

EXIT_FAILURE = 1
EXIT_CONFIG = 2


@dataclass(frozen=True)
class FatalError:
    """One fatal diagnostic, ready for either output mode."""

    summary: str
    text: str
    detail: str | None = None
    exit_code: int = EXIT_FAILURE


MISSING_USERNAME = FatalError(
    summary="MT_USERNAME is empty or not set",
    text="Error: MT_USERNAME is empty or not set",
    exit_code=EXIT_CONFIG,
)


def _query_failure(exc: QueryError) -> FatalError:
    pool = exc.pool_name
    if exc.context == BINDING_LIST_CONTEXT:
        return FatalError(
            summary="Error fetching list of dhcp interfaces from router",
            text="Error fetching list of dhcp interfaces",
            detail=exc.message,
        )
    if pool is not None and exc.context == pool_lookup_context(pool):
        return FatalError(
            summary=f"Error fetching pool information for pool {pool}",
            text=f"Error fetching pool information for pool {pool}",
            detail=exc.message,
        )
    if pool is not None and exc.context == usage_lookup_context(pool):
        return FatalError(
            summary=f"Error fetching pool usage for pool {pool}",
            text=f"Error fetching pool usage for pool {pool}",
            detail=exc.message,
        )
    return FatalError(summary="Error querying router", text="Error querying router", detail=str(exc))


def describe_failure(exc: PoolStatsError) -> FatalError:
    """Translate a pipeline error into its diagnostic."""

    if isinstance(exc, ConfigurationError):
        return FatalError(
            summary="Invalid address for router",
            text="Invalid address for router",
            detail=str(exc),
            exit_code=EXIT_CONFIG,
        )
    if isinstance(exc, ConnectError):
        return FatalError(
            summary="Error connecting to router",
            text="Error connecting to router",
            detail=exc.message,
        )
    if isinstance(exc, QueryError):
        return _query_failure(exc)
    if isinstance(exc, FormatError):
        pool = exc.pool_name or "?"
        return FatalError(
            summary=f"Invalid range definition for pool {pool}",
            text=f"Invalid range definition for pool {pool}",
            detail=str(exc),
        )
    return FatalError(summary=str(exc), text=f"Error: {exc}")
