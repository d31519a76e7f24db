"""Parsing of RouterOS pool range lists.

RouterOS reports a pool's ranges as a single field such as
``"10.0.0.10-10.0.0.20,10.0.0.30-10.0.0.40"``. Only the final octet of each
address is used: pools are assumed never to cross a ``.0``/``.255`` boundary,
since operators avoid handing out those addresses anyway. This is not subnet
arithmetic and must not become it, the capacity numbers have to match what
the tool has always reported.
"""

from __future__ import annotations

from typing import Iterable

from core.domain.errors import FormatError
from core.domain.models import AddressRange


def _last_octet(address: str, *, segment: str) -> int:
    address = address.strip()
    if not address:
        raise FormatError("empty address in range", value=segment)
    parts = address.split(".")
    if len(parts) != 4:
        raise FormatError("address is not a dotted quad", value=segment)
    octet = parts[-1]
    # int() alone would accept "1_0", "+5" and non-ASCII digits.
    if not (octet.isascii() and octet.isdigit()) or int(octet) > 255:
        raise FormatError("address octet is not an integer", value=segment)
    return int(octet)


def parse_ranges(value: str | None) -> list[AddressRange]:
    """Parse a comma separated ``low-high`` list into ordered `AddressRange` values.

    Empty input means no ranges are defined and yields an empty list.
    Anything that cannot be read as numeric bounds raises `FormatError`.
    """

    if value is None or not value.strip():
        return []

    ranges: list[AddressRange] = []
    for segment in value.split(","):
        parts = segment.split("-")
        if len(parts) != 2:
            raise FormatError("range must contain exactly one '-'", value=segment)
        low, high = parts
        ranges.append(
            AddressRange(
                low=_last_octet(low, segment=segment),
                high=_last_octet(high, segment=segment),
            )
        )
    return ranges


def range_capacity(ranges: Iterable[AddressRange]) -> int:
    """Sum of ``high - low`` over all ranges."""

    return sum(r.capacity for r in ranges)
