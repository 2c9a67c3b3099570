"""Raw field → typed value normalizers for point-of-sale report rows.

Currency values follow Brazilian Portuguese conventions (``R$ 1.234,56``) but
plain-decimal exports (``15.9``) are accepted too. Dates are ``DD/MM/YYYY`` and
times ``HH:MM[:SS]``. None of the helpers here raise on malformed input:
unparseable currency becomes ``0.0`` and the date gate is a boolean check.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta

from .models import CycleType

# Strict row-acceptance gate for the raw date column. Digit classes in this
# module are ASCII-only: ``\d`` would also accept fullwidth or Arabic-Indic digits.
DATE_PATTERN = re.compile(r"^[0-9]{2}/[0-9]{2}/[0-9]{4}$")

# Longest leading float literal, matching lenient "parse what you can" semantics
# ("15.9 " -> 15.9, "12abc" -> 12, "1.2.3" -> 1.2).
_LEADING_FLOAT = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_LEADING_INT = re.compile(r"^\s*[+-]?[0-9]+")

_WASH_MARKER = "lava"
_DRY_MARKER = "seca"

# Python's weekday() is Monday=0; reports count from Sunday=0.
_SUNDAY_FIRST = (1, 2, 3, 4, 5, 6, 0)


def parse_currency(value: str | None) -> float:
    """Parse a currency cell into a float, returning ``0.0`` on failure.

    Disambiguation:
    - both ``.`` and ``,`` present: ``.`` is the thousands separator (removed)
      and ``,`` the decimal point;
    - only ``,`` present: it is the decimal point;
    - only ``.`` present: already in decimal notation.
    """

    if not value:
        return 0.0
    clean = value.replace("'", "").replace('"', "").replace("R$", "", 1).strip()

    if "," in clean and "." in clean:
        clean = clean.replace(".", "").replace(",", ".", 1)
    elif "," in clean:
        clean = clean.replace(",", ".", 1)

    match = _LEADING_FLOAT.match(clean)
    if match is None:
        return 0.0
    try:
        return float(match.group(0)) or 0.0
    except ValueError:
        return 0.0


def determine_cycle_type(product_label: str | None) -> CycleType:
    """Classify a machine/product label; the wash marker takes precedence."""

    if not product_label:
        return CycleType.UNKNOWN
    lower = product_label.lower()
    if _WASH_MARKER in lower:
        return CycleType.WASH
    if _DRY_MARKER in lower:
        return CycleType.DRY
    return CycleType.UNKNOWN


def is_valid_raw_date(value: str | None) -> bool:
    return bool(value) and DATE_PATTERN.fullmatch(value) is not None


def _leading_int(value: str | None) -> int:
    if not value:
        return 0
    match = _LEADING_INT.match(value)
    return int(match.group(0)) if match else 0


def build_timestamp(raw_date: str, raw_time: str | None = None) -> datetime:
    """Combine ``DD/MM/YYYY`` and ``HH:MM:SS`` into a naive ``datetime``.

    Missing time components default to ``0``; a missing time is midnight.
    Out-of-range components roll over into the next unit instead of failing,
    so ``31/02/2024`` becomes ``2024-03-02``. Callers must gate ``raw_date``
    with :func:`is_valid_raw_date` first.
    """

    day_s, month_s, year_s = raw_date.split("/")
    time_parts = raw_time.split(":") if raw_time else []
    hour, minute, second = (
        _leading_int(time_parts[i]) if i < len(time_parts) else 0 for i in range(3)
    )

    month_index = int(month_s) - 1
    year = int(year_s) + month_index // 12
    base = datetime(year, month_index % 12 + 1, 1)
    return base + timedelta(
        days=int(day_s) - 1, hours=hour, minutes=minute, seconds=second
    )


def day_of_week(ts: datetime) -> int:
    """Return the day of week with ``0`` = Sunday through ``6`` = Saturday."""

    return _SUNDAY_FIRST[ts.weekday()]


__all__ = [
    "DATE_PATTERN",
    "build_timestamp",
    "day_of_week",
    "determine_cycle_type",
    "is_valid_raw_date",
    "parse_currency",
]
