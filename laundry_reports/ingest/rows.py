"""Row mapping: one source line → raw string fields, or a silent rejection.

Rows are split with a quote-aware comma split rather than :mod:`csv` because
the exports are not RFC 4180 clean (stray quotes, ragged rows, preambles and
footers interleaved with data) and rejection must happen per line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .formats import FormatSpec

# A comma is a delimiter only when followed by an even number of quotes.
_DELIMITER = re.compile(r',(?=(?:(?:[^"]*"){2})*[^"]*$)')

FOOTER_MARKER = "Total"
DATE_SEPARATOR = "/"


@dataclass(frozen=True, slots=True)
class RawRow:
    """Cleaned but untyped fields extracted from one data line."""

    machine: str
    amount: str
    date: str
    time: str
    payment: str
    unit: str = ""


def is_blank_line(line: str | None) -> bool:
    """Return ``True`` for empty lines and lines made only of commas/whitespace."""

    if not line or not line.strip():
        return True
    return not line.replace(",", "").strip()


def split_csv_line(line: str) -> list[str]:
    """Split on commas outside double-quoted spans; quotes are kept."""

    return _DELIMITER.split(line)


def clean_field(value: str | None) -> str:
    """Strip every quote character and surrounding whitespace."""

    if not value:
        return ""
    return value.replace("'", "").replace('"', "").strip()


def map_row(line: str, spec: FormatSpec) -> RawRow | None:
    """Map ``line`` through ``spec``'s column table.

    Returns ``None`` for blank lines, ``Total`` footers, rows with fewer fields
    than ``spec.min_columns`` and, when the layout requires it, rows whose date
    column lacks a ``/``.
    """

    stripped = line.strip()
    if is_blank_line(stripped) or stripped.startswith(FOOTER_MARKER):
        return None

    cols = split_csv_line(stripped)
    if len(cols) < spec.min_columns:
        return None

    columns = spec.columns
    if spec.require_date_separator and DATE_SEPARATOR not in cols[columns["date"]]:
        return None

    unit_idx = columns.get("unit")
    return RawRow(
        machine=clean_field(cols[columns["machine"]]),
        amount=clean_field(cols[columns["amount"]]),
        date=clean_field(cols[columns["date"]]),
        time=clean_field(cols[columns["time"]]),
        payment=clean_field(cols[columns["payment"]]),
        unit=clean_field(cols[unit_idx]) if unit_idx is not None else "",
    )


__all__ = ["RawRow", "clean_field", "is_blank_line", "map_row", "split_csv_line"]
