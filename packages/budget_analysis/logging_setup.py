"""Logging for the ``budget_analysis`` package.

Library modules only ever call ``get_logger("budget_analysis.<module>")``;
until a host configures logging, the package logger carries a
``NullHandler`` and stays silent.

The CLI calls ``configure_logging()`` from its root callback. Output goes to
stderr so it never mixes with command results on stdout, and the default
level is WARNING: per-upload and per-row diagnostics are DEBUG and only show
up with ``--log-level debug`` or ``BUDGET_ANALYSIS_LOG_LEVEL=debug``.
"""

from __future__ import annotations

import logging
import os

_PKG_LOGGER_NAME = "budget_analysis"
LEVEL_ENV_VAR = "BUDGET_ANALYSIS_LOG_LEVEL"
DEFAULT_LEVEL = logging.WARNING
_CLI_FORMAT = "%(levelname)s %(name)s: %(message)s"


class _CliHandler(logging.StreamHandler):
    """Stderr handler installed by :func:`configure_logging`."""


def resolve_level(value: int | str | None = None) -> int:
    """Turn an explicit level, or ``BUDGET_ANALYSIS_LOG_LEVEL``, into a number.

    Accepts ints, numeric strings and level names in any case. Unset or blank
    values give WARNING; unknown names raise ``ValueError`` so a typo on the
    command line is reported instead of silently ignored.
    """

    raw = value if value is not None else os.getenv(LEVEL_ENV_VAR)
    if raw is None:
        return DEFAULT_LEVEL
    if isinstance(raw, int):
        return raw
    name = raw.strip().upper()
    if not name:
        return DEFAULT_LEVEL
    if name.isdigit():
        return int(name)
    level = logging.getLevelNamesMapping().get(name)
    if level is None:
        raise ValueError(f"unknown log level: {raw!r}")
    return level


def configure_logging(level: int | str | None = None) -> int:
    """Send package logs to the current ``sys.stderr`` at ``level``.

    Calling it again replaces the previous CLI handler, so repeated command
    invocations in one process (tests, REPL use) never stack handlers or keep
    writing to a stale stream. Returns the level that was applied.
    """

    resolved = resolve_level(level)
    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler | _CliHandler):
            logger.removeHandler(h)

    handler = _CliHandler()
    handler.setFormatter(logging.Formatter(_CLI_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolved)
    logger.propagate = False
    return resolved


def get_logger(name: str) -> logging.Logger:
    """Return ``name``'s logger; the package root gets a NullHandler if bare."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["DEFAULT_LEVEL", "LEVEL_ENV_VAR", "configure_logging", "get_logger", "resolve_level"]
