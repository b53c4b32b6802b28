# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Indicator configuration dataclasses."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

UpdateCallback = Callable[[], None]


@dataclass(slots=True, frozen=True)
class IndicatorConfig:
    """Tunable parameters for :class:`~progress_indicator.ProgressIndicator`.

    Example:
        >>> from progress_indicator import IndicatorConfig, ProgressIndicator
        >>>
        >>> indicator = ProgressIndicator(IndicatorConfig(on_update=redraw, interval_ms=250))
    """

    on_update: UpdateCallback | None = None
    """Called when progress changes, at most once per ``interval_ms``."""

    interval_ms: int = 500
    """Minimum spacing between two ``on_update`` calls."""

    log: bool = False
    """Log every raw progress envelope to the ``progress_indicator.trace`` logger."""

    def __post_init__(self) -> None:
        if self.interval_ms < 0:
            raise ValueError("interval_ms must be >= 0")

    @property
    def interval(self) -> float:
        """``interval_ms`` in seconds, the unit of the anyio clock."""
        return self.interval_ms / 1000


__all__ = ["IndicatorConfig", "UpdateCallback"]
