"""Pytest configuration for test isolation.

Parser settings and the log level can be overridden through
``LAUNDRY_REPORTS_*`` environment variables, and the CLI installs a handler on
the package logger. Both would leak between tests, so every test starts from a
clean environment and an unconfigured package logger.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("LAUNDRY_REPORTS_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("laundry_reports")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
