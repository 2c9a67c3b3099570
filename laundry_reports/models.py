"""Data models for ``laundry_reports``.

Every record here is created fresh by a single :func:`~laundry_reports.parser.parse_csv`
call and is never mutated afterwards. Field names are snake_case; the camelCase
wire shape consumed by dashboards is produced by :mod:`laundry_reports.schemas`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

# Sentinels used when the report carries no recognizable metadata lines.
UNKNOWN_UNIT_NAME = "Unidade Desconhecida"
UNKNOWN_PERIOD = "Período não identificado"


class CycleType(StrEnum):
    """Classification of a laundry transaction."""

    WASH = "WASH"
    DRY = "DRY"
    UNKNOWN = "UNKNOWN"


class ReportType(StrEnum):
    """Report type exposed to downstream consumers (never ``UNKNOWN``)."""

    SELF_SERVICE = "SELF_SERVICE"
    ATTENDANT = "ATTENDANT"


class CsvFormat(StrEnum):
    """Layout detected from the header signature line."""

    SELF_SERVICE = "SELF_SERVICE"
    ATTENDANT = "ATTENDANT"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single normalized point-of-sale transaction.

    ``timestamp`` is a naive local wall-clock value: the source reports carry
    no timezone and none is attached or assumed. ``raw_date``/``raw_time`` keep
    the exact source strings for grouping and sorting.

    ``id`` is only unique within one parse call (line index + raw fields).
    """

    id: str
    timestamp: datetime
    raw_date: str
    raw_time: str
    product_label: str
    cycle_type: CycleType
    amount: float
    payment_method: str
    machine: str
    day_of_week: int


@dataclass(frozen=True, slots=True)
class ReportMetadata:
    unit_name: str = UNKNOWN_UNIT_NAME
    period: str = UNKNOWN_PERIOD
    report_type: ReportType = ReportType.SELF_SERVICE


@dataclass(frozen=True, slots=True)
class Advisory:
    """A non-fatal diagnostic produced while parsing.

    ``code`` is one of ``"unknown_format"``, ``"header_not_found"`` or
    ``"report_type_mismatch"``. ``line`` is the 0-based source line the
    advisory refers to, when there is one.
    """

    code: str
    message: str
    line: int | None = None


@dataclass(frozen=True, slots=True)
class ParseResult:
    metadata: ReportMetadata
    transactions: tuple[Transaction, ...] = ()
    advisories: tuple[Advisory, ...] = ()
    detected_format: CsvFormat = CsvFormat.UNKNOWN

    def to_dict(self) -> dict:
        """Return the camelCase wire shape (see :mod:`laundry_reports.schemas`)."""

        from .schemas import ParseResultOut

        return ParseResultOut.from_result(self).model_dump(mode="json", by_alias=True)


__all__ = [
    "UNKNOWN_PERIOD",
    "UNKNOWN_UNIT_NAME",
    "Advisory",
    "CsvFormat",
    "CycleType",
    "ParseResult",
    "ReportMetadata",
    "ReportType",
    "Transaction",
]
