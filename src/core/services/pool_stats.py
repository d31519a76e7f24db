"""DHCP pool usage aggregation.

This module correlates the three datasets the router exposes (DHCP server
bindings, pool range definitions and in-use pool addresses) into one
`PoolUsageRecord` per active binding. It only talks to the router through the
`RouterQuery` protocol and never prints, logs or exits: every failure is
raised to the caller, which owns message formatting and the exit status.

Execution is strictly sequential: the binding list first, then for each
binding its pool lookup followed by its usage lookup.
"""

from __future__ import annotations

from core.domain.errors import FormatError, QueryError
from core.domain.models import AddressPool, DhcpBinding, PoolUsageRecord
from core.interfaces.router import RouterQuery
from core.services.range_parser import parse_ranges

BINDINGS_PATH = "/ip/dhcp-server"
POOLS_PATH = "/ip/pool"
POOL_USED_PATH = "/ip/pool/used"

BINDING_FIELDS = (".id", "address-pool", "interface")
POOL_FIELDS = (".id", "ranges")
POOL_USED_FIELDS = (".id", "address")

BINDING_LIST_CONTEXT = "binding list"


def pool_lookup_context(pool_name: str) -> str:
    return f"pool range lookup for pool {pool_name}"


def usage_lookup_context(pool_name: str) -> str:
    return f"usage lookup for pool {pool_name}"


def list_bindings(*, query: RouterQuery) -> list[DhcpBinding]:
    """Return the enabled DHCP servers in the order the router reports them."""

    try:
        rows = query.query(BINDINGS_PATH, {"disabled": "no"}, BINDING_FIELDS)
    except QueryError as exc:
        raise exc.with_context(BINDING_LIST_CONTEXT) from exc

    return [
        DhcpBinding(
            interface_name=row.get("interface") or "",
            pool_name=row.get("address-pool") or "",
        )
        for row in rows
    ]


def resolve_pool(*, query: RouterQuery, pool_name: str) -> AddressPool:
    """Fetch the ranges defined for `pool_name`.

    An unknown pool, or one without ranges, resolves to an empty pool with
    capacity 0. That is a valid outcome on a partially configured router.
    """

    try:
        rows = query.query(POOLS_PATH, {"name": pool_name}, POOL_FIELDS)
    except QueryError as exc:
        raise exc.with_context(pool_lookup_context(pool_name), pool_name=pool_name) from exc

    if not rows:
        return AddressPool(name=pool_name)

    try:
        ranges = parse_ranges(rows[0].get("ranges"))
    except FormatError as exc:
        raise exc.for_pool(pool_name) from exc

    return AddressPool(name=pool_name, ranges=tuple(ranges))


def count_used(*, query: RouterQuery, pool_name: str) -> int:
    """Number of addresses currently assigned from `pool_name`.

    Each returned row is one leased address. Duplicates are counted as-is.
    """

    try:
        rows = query.query(POOL_USED_PATH, {"pool": pool_name}, POOL_USED_FIELDS)
    except QueryError as exc:
        raise exc.with_context(usage_lookup_context(pool_name), pool_name=pool_name) from exc
    return len(rows)


def aggregate(*, query: RouterQuery) -> list[PoolUsageRecord]:
    """Build one usage record per enabled binding that has a pool.

    Bindings without a pool cannot be sized and are skipped. Pools shared by
    several bindings are looked up again for each one. The first error
    aborts the whole aggregation; a partial list is never returned.
    """

    records: list[PoolUsageRecord] = []
    for binding in list_bindings(query=query):
        if not binding.pool_name:
            continue

        pool = resolve_pool(query=query, pool_name=binding.pool_name)
        used = count_used(query=query, pool_name=binding.pool_name)
        records.append(
            PoolUsageRecord(
                interface=binding.interface_name,
                used=used,
                size=pool.capacity,
            )
        )
    return records
