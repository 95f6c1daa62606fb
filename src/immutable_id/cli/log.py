"""Logging configuration for the CLI layer.

Library modules only create module-level loggers; handlers are
installed here, once, by the entry point.  Rich is used for rendering
when available, mirroring :mod:`immutable_id.cli.console`.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT: str = "%(name)s: %(message)s"


def _build_handler() -> logging.Handler:
    """Return a Rich handler on stderr, or a plain stream handler."""
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s " + LOG_FORMAT))
        return handler

    from immutable_id.cli.console import get_rich_console

    handler = RichHandler(
        console=get_rich_console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def configure_logging(verbose: bool = False) -> None:
    """Attach a single handler to the package logger.

    Calling this repeatedly replaces the previous handler rather than
    stacking duplicates.
    """
    logger = logging.getLogger("immutable_id")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    logger.addHandler(_build_handler())
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
