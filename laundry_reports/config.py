"""Parser settings with environment overrides.

The defaults mirror the limits the exports have been observed to need; the
environment variables exist for unusually long preambles.

- ``LAUNDRY_REPORTS_SCAN_LIMIT``: lines scanned for the format signature, the
  header row and the period (default 5000).
- ``LAUNDRY_REPORTS_OPERATOR_SCAN_LIMIT``: lines scanned for the
  ``Operador:`` line (default 50).
- ``LAUNDRY_REPORTS_LOG_LEVEL``: level for advisory logging (default
  ``WARNING``); unknown names fall back to the default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .ingest.detect import DEFAULT_SCAN_LIMIT
from .ingest.scan import DEFAULT_OPERATOR_SCAN_LIMIT
from .logging_setup import ADVISORY_FORMAT, DEFAULT_LOG_LEVEL, resolve_level


def _env_positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    try:
        value = int(raw) if raw else None
    except ValueError:
        value = None
    return value if value is not None and value > 0 else default


def _env_log_level(name: str, default: str) -> str:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        resolve_level(raw)
    except ValueError:
        return default
    return raw.upper()


@dataclass(frozen=True, slots=True)
class ParserSettings:
    scan_limit: int = DEFAULT_SCAN_LIMIT
    operator_scan_limit: int = DEFAULT_OPERATOR_SCAN_LIMIT
    # Tried in order when reading files; cp1252 covers legacy Windows exports.
    encodings: tuple[str, ...] = ("utf-8-sig", "cp1252")
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = ADVISORY_FORMAT

    @classmethod
    def from_env(cls) -> ParserSettings:
        return cls(
            scan_limit=_env_positive_int("LAUNDRY_REPORTS_SCAN_LIMIT", DEFAULT_SCAN_LIMIT),
            operator_scan_limit=_env_positive_int(
                "LAUNDRY_REPORTS_OPERATOR_SCAN_LIMIT", DEFAULT_OPERATOR_SCAN_LIMIT
            ),
            log_level=_env_log_level("LAUNDRY_REPORTS_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )


__all__ = ["ParserSettings"]
