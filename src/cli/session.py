"""Settings loading and router session creation shared by CLI commands."""

from __future__ import annotations

from adapters.routeros_rest import RouterOSRestQuery
from core.config import AppSettings


def load_settings(
    *,
    port: int | None = None,
    http: bool = False,
    verify_tls: bool = False,
    timeout: float | None = None,
) -> AppSettings:
    """Environment settings with command line overrides applied on top."""

    settings = AppSettings()
    updates: dict[str, object] = {}
    if port is not None:
        updates["port"] = port
    if http:
        updates["use_tls"] = False
    if verify_tls:
        updates["verify_tls"] = True
    if timeout is not None:
        updates["timeout_seconds"] = timeout
    if updates:
        settings = settings.model_copy(update=updates)
    return settings


def open_router(host: str, settings: AppSettings) -> RouterOSRestQuery:
    return RouterOSRestQuery(host, settings)
