# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Leading/trailing rate limiting for host update callbacks.

Progress notifications tend to arrive in bursts: a language server indexing a
workspace can report dozens of percentages per second. Hosts that redraw a
status line on every update would waste work, so :class:`RateLimiter` lets a
callback through at most once per interval:

- if the window since the last invocation is free, the callback runs at once;
- otherwise one deferred call is scheduled for the end of the window, and
  every further request inside the window is folded into it.

The deferred call does not capture any state. Callers pass a callback that
reads whatever it needs when it runs, so the trailing invocation always sees
the latest progress.

Timers come from a :class:`Scheduler`. :class:`TaskGroupScheduler` is the
anyio implementation; tests substitute a manual clock.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

import anyio
from anyio.abc import TaskGroup

from .utils import get_logger

_logger = get_logger("progress_indicator.ratelimit")


# =============================================================================
# Scheduling
# =============================================================================


class ScheduledCall:
    """Handle for a callback scheduled by :meth:`TaskGroupScheduler.call_later`."""

    def __init__(self, scope: anyio.CancelScope) -> None:
        self._scope = scope
        self._fired = False

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def cancelled(self) -> bool:
        return self._scope.cancel_called and not self._fired

    def cancel(self) -> None:
        if not self._fired:
            self._scope.cancel()


class Cancellable(Protocol):
    @property
    def cancelled(self) -> bool: ...

    def cancel(self) -> None: ...


@runtime_checkable
class Scheduler(Protocol):
    """Clock and timer facility used by :class:`RateLimiter`.

    ``now()`` and ``call_later()`` must agree on units. The limiter's interval
    is expressed in the same units.
    """

    def now(self) -> float: ...

    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancellable: ...


class TaskGroupScheduler:
    """Runs deferred callbacks as tasks in an anyio task group.

    Times are in seconds on the event loop clock (:func:`anyio.current_time`).
    A callback that raises propagates out of its task and therefore out of the
    task group, where the host's own error handling takes over.
    """

    def __init__(self, task_group: TaskGroup) -> None:
        self._task_group = task_group

    def now(self) -> float:
        return anyio.current_time()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(anyio.CancelScope())
        self._task_group.start_soon(self._run, max(0.0, delay), callback, call)
        return call

    @staticmethod
    async def _run(delay: float, callback: Callable[[], None], call: ScheduledCall) -> None:
        with call._scope:
            await anyio.sleep(delay)
            call._fired = True
            callback()


# =============================================================================
# Rate limiter
# =============================================================================


class RateLimiter:
    """Invoke a callback at most once per interval, never starving it.

    At most one deferred call is pending at any time. ``notify`` while a call
    is pending is a no-op; the pending call covers the request.

    Args:
        scheduler: Clock and timer source. The interval passed to
            :meth:`notify` uses the scheduler's time units.
    """

    def __init__(self, scheduler: Scheduler) -> None:
        self._scheduler = scheduler
        self._last_fired: float | None = None
        self._pending: Cancellable | None = None

    @property
    def last_fired(self) -> float | None:
        return self._last_fired

    @property
    def pending(self) -> bool:
        return self._live_pending() is not None

    def cancel(self) -> None:
        """Drop the pending deferred call, if any."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def notify(self, callback: Callable[[], None], interval: float) -> bool:
        """Request an invocation of ``callback``.

        Returns:
            True if the callback ran immediately, False if the request was
            deferred or folded into an already pending call.
        """
        now = self._scheduler.now()
        elapsed = None if self._last_fired is None else now - self._last_fired
        if elapsed is None or elapsed >= interval:
            callback()
            self._last_fired = self._scheduler.now()
            return True

        if self._live_pending() is not None:
            return False

        delay = interval - elapsed
        _logger.debug(
            "update deferred",
            extra={"event": "ratelimit.deferred", "delay": delay},
        )
        self._pending = self._scheduler.call_later(delay, lambda: self._fire_deferred(callback))
        return False

    def _fire_deferred(self, callback: Callable[[], None]) -> None:
        # Clear before invoking; the callback may raise.
        self._pending = None
        callback()
        self._last_fired = self._scheduler.now()

    def _live_pending(self) -> Cancellable | None:
        # A handle cancelled behind the limiter's back no longer covers requests.
        if self._pending is not None and self._pending.cancelled:
            self._pending = None
        return self._pending


__all__ = ["Cancellable", "RateLimiter", "ScheduledCall", "Scheduler", "TaskGroupScheduler"]
