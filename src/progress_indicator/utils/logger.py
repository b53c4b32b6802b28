# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Logging helpers shared by the indicator components.

Every module logs through :func:`get_logger` with structured ``extra`` fields
(``{"event": "ratelimit.deferred", ...}``) so hosts can route or filter records
without parsing messages. The package never installs handlers on import; call
:func:`configure_logging` from the host when plain stderr output is wanted.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "progress_indicator"

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_FLAG = "_progress_indicator_handler"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the ``progress_indicator`` namespace."""
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int | str = logging.INFO, *, fmt: str = _DEFAULT_FORMAT) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Repeated calls only adjust the level; the handler is installed once.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown log level: {level}")
        level = resolved
    logger.setLevel(level)

    if not any(getattr(handler, _HANDLER_FLAG, False) for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        setattr(handler, _HANDLER_FLAG, True)
        logger.addHandler(handler)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "configure_logging", "get_logger"]
