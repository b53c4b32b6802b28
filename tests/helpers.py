# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Deterministic timers for rate limiter tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass
class FakeCall:
    due: float
    callback: Callable[[], None]
    fired: bool = False
    cancelled: bool = False

    def cancel(self) -> None:
        if not self.fired:
            self.cancelled = True


class FakeScheduler:
    """Manual clock. Nothing happens until the test calls :meth:`advance_to`.

    Use dyadic times (0.125, 0.25, ...) so delays add up exactly.
    """

    def __init__(self, start: float = 0.0) -> None:
        self.time = start
        self.calls: list[FakeCall] = []

    def now(self) -> float:
        return self.time

    def call_later(self, delay: float, callback: Callable[[], None]) -> FakeCall:
        call = FakeCall(due=self.time + delay, callback=callback)
        self.calls.append(call)
        return call

    @property
    def waiting(self) -> list[FakeCall]:
        return [call for call in self.calls if not call.fired and not call.cancelled]

    def advance_to(self, when: float) -> None:
        """Move the clock to ``when``, running due callbacks in order."""
        while True:
            due = [call for call in self.waiting if call.due <= when]
            if not due:
                break
            call = min(due, key=lambda item: item.due)
            self.time = call.due
            call.fired = True
            call.callback()
        self.time = when
