"""Public interface for the ``laundry_reports`` package.

Stable import surface only; no runtime logic here.
"""

from .config import ParserSettings
from .ingest.utils import ReportReadError, load_report, parse_many, read_report_text
from .metrics import RevenueComparison, ReportSummary, compare_revenue, summarize
from .models import (
    Advisory,
    CsvFormat,
    CycleType,
    ParseResult,
    ReportMetadata,
    ReportType,
    Transaction,
)
from .normalizers import build_timestamp, determine_cycle_type, parse_currency
from .parser import parse_csv

__all__ = [
    # Parsing
    "parse_csv",
    "load_report",
    "parse_many",
    "read_report_text",
    "ParserSettings",
    "ReportReadError",
    # Normalizers
    "parse_currency",
    "determine_cycle_type",
    "build_timestamp",
    # Models
    "Advisory",
    "CsvFormat",
    "CycleType",
    "ParseResult",
    "ReportMetadata",
    "ReportType",
    "Transaction",
    # Aggregates
    "ReportSummary",
    "RevenueComparison",
    "summarize",
    "compare_revenue",
]
