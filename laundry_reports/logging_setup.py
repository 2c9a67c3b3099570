"""Logging for the ``laundry_reports`` package.

Parser advisories (``unknown_format``, ``header_not_found``,
``report_type_mismatch``) are emitted as warnings on ``laundry_reports.*``
loggers acquired through :func:`get_logger`. Library modules never attach
handlers; the CLI calls :func:`configure_logging` with the effective
:class:`~laundry_reports.config.ParserSettings` once ``.env`` has been loaded.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING

if TYPE_CHECKING:
    from .config import ParserSettings

_PKG_LOGGER_NAME = "laundry_reports"

DEFAULT_LOG_LEVEL = "WARNING"
# One advisory per line: "WARNING laundry_reports.parser: header_not_found: ..."
ADVISORY_FORMAT = "%(levelname)s %(name)s: %(message)s"


class _ReportHandler(logging.StreamHandler):
    """Stream handler installed by :func:`configure_logging`; replaced on reconfigure."""


def resolve_level(name: str) -> int:
    """Map a level name (``"debug"``, ``"WARNING"``) to its numeric value."""

    try:
        return logging.getLevelNamesMapping()[name.strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown log level: {name!r}") from None


def configure_logging(
    settings: ParserSettings | None = None,
    *,
    level: str | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Install the package handler using ``settings.log_level``/``log_format``.

    ``level`` overrides the settings level (the CLI's ``--log-level``). Calling
    again replaces the previously installed handler instead of stacking a
    second one. Raises ``ValueError`` for an unknown level name.
    """

    level_name = level or (settings.log_level if settings else DEFAULT_LOG_LEVEL)
    fmt = settings.log_format if settings else ADVISORY_FORMAT
    resolved = resolve_level(level_name)

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, (logging.NullHandler, _ReportHandler)):
            logger.removeHandler(h)

    handler = _ReportHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(resolved)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not pkg_logger.handlers:
        # Silent until configure_logging() runs.
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = [
    "ADVISORY_FORMAT",
    "DEFAULT_LOG_LEVEL",
    "configure_logging",
    "get_logger",
    "resolve_level",
]
