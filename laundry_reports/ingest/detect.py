"""Header-signature based format detection.

The exports carry no explicit format tag; the literal column names of the
header row are the only reliable discriminator. Detection looks at a bounded
prefix of the document so pathological inputs stay cheap.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..models import CsvFormat
from .formats import FORMAT_SPECS, FormatSpec

DEFAULT_SCAN_LIMIT = 5000


def detect_spec(
    lines: Sequence[str],
    *,
    scan_limit: int = DEFAULT_SCAN_LIMIT,
    specs: Sequence[FormatSpec] = FORMAT_SPECS,
) -> tuple[FormatSpec | None, int | None]:
    """Return the first matching layout and the index of its signature line."""

    for idx, line in enumerate(lines[:scan_limit]):
        for spec in specs:
            if spec.matches(line):
                return spec, idx
    return None, None


def detect_format(lines: Sequence[str], *, scan_limit: int = DEFAULT_SCAN_LIMIT) -> CsvFormat:
    """Classify ``lines`` as one of the known layouts or ``CsvFormat.UNKNOWN``."""

    spec, _ = detect_spec(lines, scan_limit=scan_limit)
    return spec.format if spec is not None else CsvFormat.UNKNOWN


__all__ = ["DEFAULT_SCAN_LIMIT", "detect_format", "detect_spec"]
