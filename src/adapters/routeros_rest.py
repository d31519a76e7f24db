"""RouterOS REST API query adapter.

Implements `core.interfaces.router.RouterQuery` on top of the RouterOS v7
REST API. Reads use the ``print`` command so that the router applies the
filter and the property list itself:

    POST /rest/ip/pool/print
    {".proplist": [".id", "ranges"], ".query": ["name=guest-pool"]}
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import httpx

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.errors import ConnectError, QueryError

logger = logging.getLogger(__name__)

LOGIN_CONTEXT = "router login"


def _error_detail(response: httpx.Response) -> str:
    """Extract RouterOS's error text from a failed response."""
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase
    if isinstance(body, dict):
        parts = [str(body[k]) for k in ("message", "detail") if body.get(k)]
        if parts:
            return " - ".join(parts)
    return str(body)


def _normalize_rows(payload: Any, path: str) -> list[dict[str, str]]:
    # A print with a single match is still a list; anything else is a protocol error.
    if not isinstance(payload, list):
        raise QueryError(f"unexpected response from {path}: expected a list")
    rows: list[dict[str, str]] = []
    for item in payload:
        if not isinstance(item, dict):
            raise QueryError(f"unexpected response from {path}: expected objects")
        rows.append({str(k): "" if v is None else str(v) for k, v in item.items()})
    return rows


class RouterOSRestQuery:
    """Authenticated, sequential query channel to one router.

    Use as a context manager so the underlying client is closed on success
    and on failure.
    """

    def __init__(
        self,
        host: str,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.host = host
        self._settings = settings or AppSettings()
        self._client = build_client(host, self._settings, transport=transport)

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    def __enter__(self) -> "RouterOSRestQuery":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = path.rstrip("/")
        logger.debug("%s %s %s", method, url, kwargs.get("json", ""))
        try:
            response = self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            detail = _error_detail(e.response)
            logger.debug("HTTP %s on %s: %s", status, url, detail)
            raise QueryError(f"HTTP {status}: {detail}") from e
        except httpx.HTTPError as e:
            logger.debug("request to %s failed: %r", url, e)
            raise QueryError(str(e) or e.__class__.__name__) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise QueryError(f"invalid JSON from {url}") from e
        logger.debug("HTTP %s on %s: %d bytes", response.status_code, url, len(response.content))
        return payload

    def connect(self) -> str:
        """Verify address and credentials; return the router identity name."""

        try:
            payload = self._request("GET", "/system/identity")
        except QueryError as exc:
            raise ConnectError(exc.message, context=LOGIN_CONTEXT) from exc
        if isinstance(payload, dict):
            return str(payload.get("name", ""))
        return ""

    def query(
        self,
        path: str,
        filters: Mapping[str, str],
        fields: Sequence[str],
    ) -> list[dict[str, str]]:
        body: dict[str, list[str]] = {".proplist": list(fields)}
        if filters:
            body[".query"] = [f"{key}={value}" for key, value in filters.items()]
        payload = self._request("POST", f"{path.rstrip('/')}/print", json=body)
        return _normalize_rows(payload, path)
