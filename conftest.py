"""Global test configuration and shared fixtures."""

from __future__ import annotations

import logging
import typing as t

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers used across the suite."""
    config.addinivalue_line(
        "markers",
        "short_circuit: exercises left-to-right short-circuit evaluation",
    )


@pytest.fixture(autouse=True)
def dobby_debug_logging(
    caplog: pytest.LogCaptureFixture,
) -> t.Generator[None, None, None]:
    """Capture dobby's debug records so failing tests show match traces."""
    with caplog.at_level(logging.DEBUG, logger="dobby"):
        yield
