"""Deterministic sample values for synthetic datasets.

Every numeric field of a seeded document is derived from a string key of the
form ``"<entity>-<date>-<field>"``. The same key always yields the same value,
so re-seeding with unchanged inputs reproduces the same numbers without any
random state or seed file.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from datetime import date, datetime, timedelta, timezone
from typing import Optional


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def key_hash(key: str) -> int:
    """Fold a key into a signed 32-bit hash (``hash * 31 + code``)."""
    data = key.encode("utf-16-le")
    h = 0
    for i in range(0, len(data), 2):
        code = data[i] | (data[i + 1] << 8)
        h = _to_int32((h << 5) - h + code)
    return h


def seeded_float(key: str) -> float:
    """Stable pseudo-random value in [0, 1) for ``key``."""
    value = abs(math.sin(key_hash(key)))
    return value - math.floor(value)


def seeded_number(min_value: float, max_value: float, key: str, digits: int = 2) -> float:
    raw = min_value + seeded_float(key) * (max_value - min_value)
    return round_fixed(raw, digits)


def round_fixed(value: float, digits: int = 2) -> float:
    """Round to ``digits`` decimals, exact ties away from zero.

    Works on the exact binary value of ``value``, so 2.675 (stored just below
    the tie) still rounds down while 0.125 rounds up.
    """
    exact = Decimal(value).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    return float(exact)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return int(math.floor(value + 0.5))


def today_utc() -> date:
    return datetime.now(timezone.utc).date()


def build_date_window(days: int, today: Optional[date] = None) -> list[str]:
    """ISO dates for the last ``days`` days ending at ``today``, oldest first."""
    today = today or today_utc()
    return [(today - timedelta(days=offset)).isoformat() for offset in range(days - 1, -1, -1)]
