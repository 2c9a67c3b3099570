"""Ingest utilities shared by the CLI and library callers.

The parser core works on text only; reading and decoding files happens here.
Read and decode failures surface as :class:`ReportReadError` before the parser
ever sees the content.
"""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from os import PathLike
from pathlib import Path

from ..config import ParserSettings
from ..logging_setup import get_logger
from ..models import ParseResult, ReportType

logger = get_logger(__name__)


class ReportReadError(Exception):
    """Raised when a report file cannot be read or decoded."""


def read_report_text(
    path: str | PathLike[str], *, encodings: Sequence[str] = ("utf-8-sig", "cp1252")
) -> str:
    """Read ``path`` trying each encoding in order."""

    p = Path(path)
    try:
        data = p.read_bytes()
    except FileNotFoundError as exc:
        raise ReportReadError(f"File not found: {p}") from exc
    except PermissionError as exc:
        raise ReportReadError(f"Permission denied: {p}") from exc
    except OSError as exc:
        raise ReportReadError(f"Could not read {p}: {exc}") from exc

    for enc in encodings:
        try:
            text = data.decode(enc)
        except UnicodeDecodeError:
            logger.debug("could not decode %s as %s", p, enc)
            continue
        logger.debug("read %s (%d bytes, %s)", p, len(data), enc)
        return text
    raise ReportReadError(f"Could not decode {p} with any of: {', '.join(encodings)}")


def load_report(
    path: str | PathLike[str],
    *,
    expected_report_type: ReportType | str | None = None,
    settings: ParserSettings | None = None,
) -> ParseResult:
    """Read and parse one report file."""

    from ..parser import parse_csv

    settings = settings or ParserSettings()
    text = read_report_text(path, encodings=settings.encodings)
    return parse_csv(text, expected_report_type=expected_report_type, settings=settings)


def _resolve_max_workers(n_files: int, max_workers: int | None) -> int:
    if max_workers is not None and max_workers > 0:
        return max(1, min(max_workers, n_files))
    return max(1, min(8, n_files))


def parse_many(
    paths: Sequence[str | PathLike[str]],
    *,
    settings: ParserSettings | None = None,
    max_workers: int | None = None,
) -> list[ParseResult]:
    """Parse independent report files concurrently, preserving input order.

    The first :class:`ReportReadError` raised by any file propagates.
    """

    if not paths:
        return []
    settings = settings or ParserSettings()
    workers = _resolve_max_workers(len(paths), max_workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(lambda p: load_report(p, settings=settings), paths))


__all__ = ["ReportReadError", "load_report", "parse_many", "read_report_text"]
