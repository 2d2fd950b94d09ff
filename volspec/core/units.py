"""
Byte-size parsing.

Accepts a non-negative decimal number followed by an optional unit:

    "4096"  -> 4096
    "10G"   -> 10 * 1024**3
    "1.5 MiB" -> 1572864

Units are case-insensitive and always binary (1024-based); "KB", "K", "Ki"
and "KiB" are the same multiple. Surrounding whitespace is rejected and the
result must fit in an unsigned 64-bit byte count.
"""
from __future__ import annotations

import re
from decimal import Decimal
from typing import Dict

from volspec.core.errors import UnitParseError

KiB = 1 << 10
MiB = 1 << 20
GiB = 1 << 30
TiB = 1 << 40
PiB = 1 << 50

MAX_SIZE = (1 << 64) - 1

_UNIT_RE = re.compile(r"([0-9]+(?:\.[0-9]+)?)\s*([A-Za-z]*)")


def _unit_table() -> Dict[str, int]:
    out: Dict[str, int] = {"": 1, "b": 1}
    for prefix, mult in (("k", KiB), ("m", MiB), ("g", GiB), ("t", TiB), ("p", PiB)):
        for suffix in ("", "b", "i", "ib"):
            out[prefix + suffix] = mult
    return out


_UNITS = _unit_table()


def parse_size(text: str) -> int:
    m = _UNIT_RE.fullmatch(text or "")
    if not m:
        raise UnitParseError(f"Unit parse error: {text!r}")

    number, unit = m.group(1), m.group(2).lower()
    mult = _UNITS.get(unit)
    if mult is None:
        raise UnitParseError(f"Unit parse error: unknown unit {m.group(2)!r} in {text!r}")

    if "." in number:
        size = int(Decimal(number) * mult)
    else:
        size = int(number) * mult
    if size > MAX_SIZE:
        raise UnitParseError(f"Unit parse error: {text!r} exceeds {MAX_SIZE} bytes")
    return size
