"""Pytest configuration."""

import logging

import pytest
from loguru import logger


class _StdlibBridge(logging.Handler):
    """Re-emit loguru records through the stdlib logger of the same name."""

    def emit(self, record):
        logging.getLogger(record.name).handle(record)


@pytest.fixture(autouse=True)
def caplog(caplog):
    """Route loguru output into pytest's caplog."""
    sink_id = logger.add(_StdlibBridge(), format="{message}", level="DEBUG")
    yield caplog
    # The CLI callback may already have removed every sink
    try:
        logger.remove(sink_id)
    except ValueError:
        pass
