# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Busy/idle status for background tools that report progress.

Language servers and MCP servers report progress per task. This package folds
those reports into one signal per tool and renders it for a status line:

- ``progress_indicator.store`` - latest percentage per (client, token)
- ``progress_indicator.ratelimit`` - leading/trailing update coalescing
- ``progress_indicator.formatting`` - percentage to glyph, themes
- ``progress_indicator.events`` - LSP and MCP envelope adapters
- ``progress_indicator.bus`` - ordered event subscribers

Most hosts only need :class:`ProgressIndicator` and a :class:`ProgressBus`.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .bus import ProgressBus, Subscription
from .config import IndicatorConfig
from .diagnostics import DIAGNOSTIC_ICONS, Severity, format_diagnostics
from .events import LspProgressParams, ProgressEvent, WorkDoneProgressValue
from .formatting import (
    NAMED_PROGRESS_THEME,
    NAMED_STATE_THEME,
    PROGRESS_THEME,
    STATE_THEME,
    ClientInfo,
    Theme,
    format_clients,
    icon,
)
from .indicator import ProgressIndicator
from .ratelimit import RateLimiter, ScheduledCall, Scheduler, TaskGroupScheduler
from .store import ProgressStore
from .utils import configure_logging, get_logger

try:
    __version__ = version("progress-indicator")
except PackageNotFoundError:
    __version__ = "0.0.0+local"


__all__ = [
    "ClientInfo",
    "DIAGNOSTIC_ICONS",
    "IndicatorConfig",
    "LspProgressParams",
    "NAMED_PROGRESS_THEME",
    "NAMED_STATE_THEME",
    "PROGRESS_THEME",
    "ProgressBus",
    "ProgressEvent",
    "ProgressIndicator",
    "ProgressStore",
    "RateLimiter",
    "STATE_THEME",
    "ScheduledCall",
    "Scheduler",
    "Severity",
    "Subscription",
    "TaskGroupScheduler",
    "Theme",
    "WorkDoneProgressValue",
    "__version__",
    "configure_logging",
    "format_clients",
    "format_diagnostics",
    "get_logger",
    "icon",
]
