"""Top-level parse operation: raw report text → :class:`ParseResult`.

Pipeline (strictly forward, no stage revisits an earlier one):

1. detect the layout from the header signature line;
2. scan for the header row, the reporting period and the unit name;
3. map each data line through the layout's column table;
4. normalize raw fields into typed :class:`Transaction` records.

Malformed input never raises. Bad rows are dropped; document-level problems
are reported as :class:`Advisory` records on the result and as warnings on the
supplied (or package) logger. Only caller misuse raises: an
``expected_report_type`` that is not a :class:`ReportType` value.
"""

from __future__ import annotations

import logging
import re

from .config import ParserSettings
from .ingest.detect import detect_spec
from .ingest.formats import FormatSpec
from .ingest.rows import RawRow, map_row
from .ingest.scan import extract_operator_name, extract_period, locate_header
from .logging_setup import get_logger
from .models import (
    UNKNOWN_UNIT_NAME,
    Advisory,
    CsvFormat,
    ParseResult,
    ReportMetadata,
    ReportType,
    Transaction,
)
from .normalizers import (
    build_timestamp,
    day_of_week,
    determine_cycle_type,
    is_valid_raw_date,
    parse_currency,
)

_LINE_BREAK = re.compile(r"\r\n|\n")

# Literal header label of the attendant unit column; never a unit name.
_ATTENDANT_UNIT_HEADER = "Cliente"


def split_lines(text: str) -> list[str]:
    return _LINE_BREAK.split(text)


def _to_transaction(line_idx: int, raw: RawRow) -> Transaction | None:
    if not is_valid_raw_date(raw.date):
        return None
    try:
        ts = build_timestamp(raw.date, raw.time)
    except (ValueError, OverflowError):
        # Shape-valid but unrepresentable, e.g. year 0000.
        return None
    return Transaction(
        id=f"{line_idx}-{raw.date}-{raw.time}-{raw.machine}",
        timestamp=ts,
        raw_date=raw.date,
        raw_time=raw.time,
        product_label=raw.machine,
        cycle_type=determine_cycle_type(raw.machine),
        amount=parse_currency(raw.amount),
        payment_method=raw.payment,
        machine=raw.machine,
        day_of_week=day_of_week(ts),
    )


def _coerce_report_type(value: ReportType | str | None) -> ReportType | None:
    if value is None or isinstance(value, ReportType):
        return value
    try:
        return ReportType(value)
    except ValueError:
        allowed = ", ".join(t.value for t in ReportType)
        raise ValueError(
            f"expected_report_type must be one of {allowed}; got {value!r}"
        ) from None


def _advise(
    advisories: list[Advisory],
    logger: logging.Logger,
    code: str,
    message: str,
    line: int | None = None,
) -> None:
    advisories.append(Advisory(code=code, message=message, line=line))
    logger.warning("%s: %s", code, message)


def parse_csv(
    text: str,
    *,
    expected_report_type: ReportType | str | None = None,
    settings: ParserSettings | None = None,
    logger: logging.Logger | None = None,
) -> ParseResult:
    """Parse one report document held entirely in memory.

    Parameters
    ----------
    text:
        Full document text; rows separated by ``\\n`` or ``\\r\\n``.
    expected_report_type:
        Report type the caller expects (e.g., the upload slot the file came
        from). A differing detected type only adds a
        ``report_type_mismatch`` advisory.
    settings:
        Scan limits; defaults to :class:`ParserSettings` defaults.
    logger:
        Destination for advisory warnings. Defaults to
        ``laundry_reports.parser``.

    Raises
    ------
    ValueError
        If ``expected_report_type`` is not a :class:`ReportType` value.
    """

    expected = _coerce_report_type(expected_report_type)
    settings = settings or ParserSettings()
    log = logger or get_logger(__name__)
    advisories: list[Advisory] = []

    lines = split_lines(text)
    spec, signature_idx = detect_spec(lines, scan_limit=settings.scan_limit)
    period = extract_period(lines, scan_limit=settings.scan_limit)
    header_idx = locate_header(lines, scan_limit=settings.scan_limit)

    if spec is None:
        _advise(
            advisories,
            log,
            "unknown_format",
            "no known report signature found; no transactions extracted",
        )
    elif header_idx is None:
        _advise(
            advisories,
            log,
            "header_not_found",
            f"{spec.format} format detected but header row not found; parsing from line 0",
            signature_idx,
        )

    report_type = spec.report_type if spec is not None else ReportType.SELF_SERVICE
    if expected is not None and spec is not None and expected != report_type:
        _advise(
            advisories,
            log,
            "report_type_mismatch",
            f"expected a {expected} report but the file is {report_type}",
        )

    unit_name, transactions = (
        _map_lines(lines, spec, header_idx, settings) if spec is not None else (None, [])
    )
    log.debug(
        "parsed %d transactions from %d lines (format=%s)",
        len(transactions),
        len(lines),
        spec.format if spec is not None else CsvFormat.UNKNOWN,
    )

    return ParseResult(
        metadata=ReportMetadata(
            unit_name=unit_name or UNKNOWN_UNIT_NAME,
            period=period,
            report_type=report_type,
        ),
        transactions=tuple(transactions),
        advisories=tuple(advisories),
        detected_format=spec.format if spec is not None else CsvFormat.UNKNOWN,
    )


def _map_lines(
    lines: list[str],
    spec: FormatSpec,
    header_idx: int | None,
    settings: ParserSettings,
) -> tuple[str | None, list[Transaction]]:
    unit_name: str | None = None
    operator_scanned = False
    transactions: list[Transaction] = []
    start = 0 if header_idx is None else header_idx + 1

    for idx in range(start, len(lines)):
        raw = map_row(lines[idx], spec)
        if raw is None:
            continue

        if unit_name is None:
            if spec.unit_name_source == "operator_line" and not operator_scanned:
                operator_scanned = True
                unit_name = extract_operator_name(
                    lines, scan_limit=settings.operator_scan_limit
                )
            elif (
                spec.unit_name_source == "first_column"
                and raw.unit
                and raw.unit != _ATTENDANT_UNIT_HEADER
            ):
                unit_name = raw.unit

        tx = _to_transaction(idx, raw)
        if tx is not None:
            transactions.append(tx)

    return unit_name, transactions


__all__ = ["parse_csv", "split_lines"]
