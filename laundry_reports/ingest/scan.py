"""Structural scans over the raw report lines.

These locate the header row (where data starts), the reporting period and,
for self-service exports, the operator/unit name. They never raise: a missing
marker yields ``None`` or the corresponding sentinel.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..models import UNKNOWN_PERIOD
from .detect import DEFAULT_SCAN_LIMIT
from .rows import clean_field, split_csv_line

HEADER_MARKERS: tuple[str, ...] = ("Data", "Hora")
PERIOD_MARKER = "Vendas de"
OPERATOR_MARKER = "Operador:"
DEFAULT_OPERATOR_SCAN_LIMIT = 50


def locate_header(lines: Sequence[str], *, scan_limit: int = DEFAULT_SCAN_LIMIT) -> int | None:
    """Return the index of the first line holding both date and time column names."""

    for idx, line in enumerate(lines[:scan_limit]):
        if all(marker in line for marker in HEADER_MARKERS):
            return idx
    return None


def extract_period(lines: Sequence[str], *, scan_limit: int = DEFAULT_SCAN_LIMIT) -> str:
    """Extract ``"01/05/2024 - 31/05/2024"`` from ``"Vendas de 01/05/2024 ate 31/05/2024"``."""

    for line in lines[:scan_limit]:
        if PERIOD_MARKER not in line:
            continue
        for part in line.split(","):
            if PERIOD_MARKER in part:
                return part.replace(PERIOD_MARKER + " ", "", 1).replace(" ate ", " - ", 1).strip()
    return UNKNOWN_PERIOD


def extract_operator_name(
    lines: Sequence[str], *, scan_limit: int = DEFAULT_OPERATOR_SCAN_LIMIT
) -> str | None:
    """Return the unit name from the first ``Operador:,<name>`` line, if any."""

    for line in lines[:scan_limit]:
        if not line.startswith(OPERATOR_MARKER):
            continue
        parts = split_csv_line(line)
        if len(parts) > 1:
            name = clean_field(parts[1])
            if name:
                return name
    return None


__all__ = [
    "DEFAULT_OPERATOR_SCAN_LIMIT",
    "HEADER_MARKERS",
    "extract_operator_name",
    "extract_period",
    "locate_header",
]
