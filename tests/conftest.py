"""Shared fixtures: an in-memory router standing in for the REST adapter."""

from __future__ import annotations

from typing import Mapping, Sequence

import pytest

from core.domain.errors import QueryError


class FakeRouter:
    """Answers queries from canned tables and records every call.

    `fail_on` maps a (path, filter value) pair to an error message; the
    matching call raises `QueryError` instead of answering.
    """

    def __init__(
        self,
        *,
        bindings: list[dict[str, str]] | None = None,
        pools: dict[str, str] | None = None,
        used: dict[str, int] | None = None,
        fail_on: dict[tuple[str, str], str] | None = None,
    ) -> None:
        self.bindings = bindings or []
        self.pools = pools or {}
        self.used = used or {}
        self.fail_on = fail_on or {}
        self.calls: list[tuple[str, dict[str, str], tuple[str, ...]]] = []
        self.connected = False
        self.closed = False

    def __enter__(self) -> "FakeRouter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.closed = True

    @property
    def base_url(self) -> str:
        return "https://fake:443/rest"

    def connect(self) -> str:
        self.connected = True
        return "fake-router"

    def query(
        self,
        path: str,
        filters: Mapping[str, str],
        fields: Sequence[str],
    ) -> list[dict[str, str]]:
        self.calls.append((path, dict(filters), tuple(fields)))
        key = next(iter(filters.values()), "")
        if (path, key) in self.fail_on:
            raise QueryError(self.fail_on[(path, key)])

        if path == "/ip/dhcp-server":
            return [dict(row) for row in self.bindings]
        if path == "/ip/pool":
            name = filters["name"]
            if name not in self.pools:
                return []
            return [{".id": f"*{len(self.calls)}", "ranges": self.pools[name]}]
        if path == "/ip/pool/used":
            count = self.used.get(filters["pool"], 0)
            return [{".id": f"*{i}", "address": f"10.0.0.{i + 1}"} for i in range(count)]
        raise AssertionError(f"unexpected path {path}")


def binding(interface: str, pool: str = "") -> dict[str, str]:
    return {".id": f"*{interface}", "interface": interface, "address-pool": pool}


@pytest.fixture
def office_router() -> FakeRouter:
    return FakeRouter(
        bindings=[
            binding("bridge-lan", "office-pool"),
            binding("ether2"),
            binding("vlan20", "guest-pool"),
        ],
        pools={"office-pool": "10.0.0.10-10.0.0.20", "guest-pool": "10.0.20.10-10.0.20.20,10.0.20.30-10.0.20.40"},
        used={"office-pool": 3, "guest-pool": 12},
    )


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep developer credentials and .env files out of the tests."""

    for name in ("MT_USERNAME", "MT_PASSWORD", "MT_PORT", "MT_USE_TLS", "MT_VERIFY_TLS", "MT_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
