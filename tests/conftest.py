from __future__ import annotations

import logging
from collections.abc import Generator

import click.testing
import pytest

# Loggers whose handlers the CLI may configure ("" is the root logger)
_MDOCGEN_LOGGERS = ("mdocgen", "")


@pytest.fixture(autouse=True)
def reset_logging_handlers() -> Generator[None]:
    """Drop handlers left behind by CLI invocations.

    The CLI calls logging.basicConfig(force=True), which can leave the root
    logger writing to a CliRunner stream that has since been closed.
    """
    for name in _MDOCGEN_LOGGERS:
        logging.getLogger(name).handlers.clear()
    yield


@pytest.fixture
def runner() -> click.testing.CliRunner:
    """Create a CLI runner for testing."""
    return click.testing.CliRunner()
