"""Fixtures for end-to-end tests."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from order_placing.logging import PROJECT_PREFIX


@pytest.fixture(autouse=True)
def restore_project_logger() -> Iterator[None]:
    """Undo handler/propagation changes made by the CLI entry point."""
    logger = logging.getLogger(PROJECT_PREFIX)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
