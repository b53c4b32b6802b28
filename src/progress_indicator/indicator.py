# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Host-facing progress indicator.

:class:`ProgressIndicator` owns one :class:`ProgressStore`, one
:class:`RateLimiter` and the current settings. Hosts create one instance,
feed it events (directly or through a :class:`ProgressBus`), and either poll
the formatted status or react to the rate-limited ``on_update`` callback.

Usage:
    async with ProgressIndicator(IndicatorConfig(on_update=redraw)) as indicator:
        subscription = indicator.attach(bus)
        ...
        status = indicator.named_progress(clients)

Entering the indicator opens an anyio task group that runs deferred update
calls. Hosts that bring their own timers pass ``scheduler=`` instead and never
need to enter it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import anyio
from anyio.abc import TaskGroup

from .bus import ProgressBus, Subscription
from .config import IndicatorConfig, UpdateCallback
from .diagnostics import DIAGNOSTIC_ICONS, Severity, format_diagnostics
from .events import ProgressEvent
from .formatting import (
    NAMED_PROGRESS_THEME,
    NAMED_STATE_THEME,
    PROGRESS_THEME,
    STATE_THEME,
    ClientInfo,
    Theme,
    format_clients,
)
from .ratelimit import RateLimiter, Scheduler, TaskGroupScheduler
from .store import ClientId, ProgressStore
from .utils import get_logger


class ProgressIndicator:
    """Aggregates progress events and reports a per-client busy/idle status.

    Args:
        config: Initial settings. Replace them later with :meth:`configure`.
        scheduler: Timer source for deferred updates. Defaults to a
            :class:`TaskGroupScheduler` installed by ``async with``.
        store: Progress store to use, e.g. one built with
            ``evict_completed=True``.
    """

    def __init__(
        self,
        config: IndicatorConfig | None = None,
        *,
        scheduler: Scheduler | None = None,
        store: ProgressStore | None = None,
    ) -> None:
        self._config = config or IndicatorConfig()
        self._store = store if store is not None else ProgressStore()
        self._scheduler = scheduler
        self._limiter = RateLimiter(scheduler) if scheduler is not None else None
        self._task_group: TaskGroup | None = None
        self._logger = get_logger("progress_indicator.indicator")
        self._trace = get_logger("progress_indicator.trace")

    async def __aenter__(self) -> "ProgressIndicator":
        if self._task_group is not None:
            raise RuntimeError("ProgressIndicator is already running")
        task_group = anyio.create_task_group()
        await task_group.__aenter__()
        self._task_group = task_group
        if self._scheduler is None:
            self._limiter = RateLimiter(TaskGroupScheduler(task_group))
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool | None:
        task_group, self._task_group = self._task_group, None
        if task_group is None:
            return None
        try:
            # Waits for any pending deferred update.
            return await task_group.__aexit__(exc_type, exc, tb)
        finally:
            if self._scheduler is None:
                self._limiter = None

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    @property
    def config(self) -> IndicatorConfig:
        return self._config

    @property
    def store(self) -> ProgressStore:
        return self._store

    def configure(
        self,
        on_update: UpdateCallback | None = None,
        *,
        interval_ms: int = 500,
        log: bool = False,
    ) -> IndicatorConfig:
        """Replace the current settings.

        Omitted arguments fall back to their defaults rather than keeping the
        previous values; calling ``configure()`` with no arguments removes the
        update callback.
        """
        self._config = IndicatorConfig(on_update=on_update, interval_ms=interval_ms, log=log)
        self._logger.debug(
            "indicator configured",
            extra={
                "event": "indicator.configure",
                "interval_ms": interval_ms,
                "has_callback": on_update is not None,
                "log": log,
            },
        )
        return self._config

    # ------------------------------------------------------------------
    # Inbound events
    # ------------------------------------------------------------------

    def attach(self, bus: ProgressBus) -> Subscription:
        """Subscribe to ``bus``; cancel the returned subscription to detach."""
        return bus.subscribe(self.handle_event)

    def handle_event(self, event: ProgressEvent) -> None:
        """Record ``event`` and request a rate-limited ``on_update`` call."""
        config = self._config
        if config.log:
            self._trace.debug(
                "progress envelope",
                extra={
                    "event": "indicator.progress",
                    "client": event.client,
                    "token": event.token,
                    "percentage": event.percentage,
                    "raw": event.raw,
                },
            )
        self._store.update(event.client, event.token, event.percentage)
        if config.on_update is None:
            return
        self._require_limiter().notify(self._fire_update, config.interval)

    def _fire_update(self) -> None:
        # Read at fire time: the callback may have been replaced since scheduling.
        callback = self._config.on_update
        if callback is None:
            return
        callback()

    def _require_limiter(self) -> RateLimiter:
        if self._limiter is None:
            raise RuntimeError(
                "ProgressIndicator has no scheduler; use 'async with' or pass scheduler= to deliver updates."
            )
        return self._limiter

    # ------------------------------------------------------------------
    # Read API
    # ------------------------------------------------------------------

    def min_percentage(self, client: ClientId) -> int | None:
        return self._store.min_percentage(client)

    def format(self, clients: Iterable[ClientInfo], theme: Theme) -> str:
        return format_clients(clients, self._store, theme)

    def progress(self, clients: Iterable[ClientInfo]) -> str:
        """Progress glyphs only, e.g. two clients render as two adjacent glyphs."""
        return self.format(clients, PROGRESS_THEME)

    def named_progress(self, clients: Iterable[ClientInfo]) -> str:
        """Progress glyph plus name per client, e.g. ``"<glyph> lua <glyph> rust"``."""
        return self.format(clients, NAMED_PROGRESS_THEME)

    def state(self, clients: Iterable[ClientInfo]) -> str:
        return self.format(clients, STATE_THEME)

    def named_state(self, clients: Iterable[ClientInfo]) -> str:
        return self.format(clients, NAMED_STATE_THEME)

    @staticmethod
    def diagnostics(
        counts: Mapping[Severity | int, int],
        icons: Mapping[Severity, str] = DIAGNOSTIC_ICONS,
    ) -> str:
        return format_diagnostics(counts, icons)


__all__ = ["ProgressIndicator"]
