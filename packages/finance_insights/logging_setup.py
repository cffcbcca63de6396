"""Logging for the ``finance_insights`` package.

Pipeline modules only call :func:`get_logger` and never decide where output
goes. The CLI is the one caller of :func:`configure_logging`: its root
callback runs it on every invocation with the level from ``--log-level`` (or
``FINANCE_INSIGHTS_LOG_LEVEL``), so records render through Rich on stderr and
never mix with report output on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "finance_insights"
LEVEL_ENV = "FINANCE_INSIGHTS_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"


class _ReportHandler(RichHandler):
    """The handler installed by :func:`configure_logging` (found again by type)."""


def resolve_level(level: int | str) -> int:
    """``"debug"`` / ``"20"`` / ``logging.INFO`` → numeric level.

    Raises ``ValueError`` for a name the ``logging`` module does not know.
    """

    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    try:
        return logging.getLevelNamesMapping()[name]
    except KeyError:
        raise ValueError(f"unknown log level: {level!r}") from None


def configure_logging(
    level: int | str = DEFAULT_LEVEL, *, console: Console | None = None
) -> logging.Handler:
    """Install (or replace) the package's Rich handler at ``level``."""

    resolved = resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        if isinstance(h, (_ReportHandler, logging.NullHandler)):
            logger.removeHandler(h)

    handler = _ReportHandler(
        console=console or Console(stderr=True),
        level=resolved,
        show_path=False,
        markup=False,
    )
    logger.addHandler(handler)
    logger.setLevel(resolved)
    logger.propagate = False
    return handler


def get_logger(name: str) -> logging.Logger:
    """Logger for a package module; silent until the CLI configures output."""

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    if not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = [
    "DEFAULT_LEVEL",
    "LEVEL_ENV",
    "configure_logging",
    "get_logger",
    "resolve_level",
]
