"""Shared pytest fixtures and configuration for the immutable-id test suite.

Guidelines
----------
* No filesystem or network access in any test.
* Core tests must be pure — no side effects.
* CLI tests drive :func:`immutable_id.cli.app.main` with explicit argv
  and an in-memory stdin.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo handler/level changes made by ``configure_logging``."""
    logger = logging.getLogger("immutable_id")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
