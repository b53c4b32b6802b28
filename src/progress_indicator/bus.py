# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Ordered fan-out of progress events to subscribers.

A host typically receives progress envelopes in one place (an LSP handler
table, an MCP session callback) and may want several consumers: the
indicator, a logger, an older handler it replaced. Instead of each handler
calling the previous one, they all subscribe to one :class:`ProgressBus` and
are called in registration order with the same event.

Example:
    >>> bus = ProgressBus()
    >>> seen = []
    >>> subscription = bus.subscribe(seen.append)
    >>> bus.publish(ProgressEvent(client=1, token="index", percentage=10))
    >>> subscription.cancel()
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from .events import ClientKey, ProgressEvent, TokenKey
from .utils import get_logger

_logger = get_logger("progress_indicator.bus")

EventHandler = Callable[[ProgressEvent], None]
ProgressCallback = Callable[[float, float | None, str | None], Awaitable[None]]


class Subscription:
    """Handle returned by :meth:`ProgressBus.subscribe`; cancel it exactly once."""

    def __init__(self, bus: ProgressBus, handler: EventHandler) -> None:
        self._bus = bus
        self._handler = handler
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            raise RuntimeError("Subscription already cancelled")
        self._active = False
        self._bus._remove(self)


class ProgressBus:
    """Delivers each published event to every subscriber, oldest first.

    A handler that raises stops delivery; later subscribers do not see the
    event and the exception reaches the publisher.
    """

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []

    def __len__(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, handler: EventHandler) -> Subscription:
        subscription = Subscription(self, handler)
        self._subscriptions.append(subscription)
        _logger.debug(
            "subscriber added",
            extra={"event": "bus.subscribe", "subscribers": len(self._subscriptions)},
        )
        return subscription

    def publish(self, event: ProgressEvent) -> None:
        # Snapshot: handlers may cancel their own subscription while running.
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription._handler(event)

    def progress_callback(self, client: ClientKey, token: TokenKey) -> ProgressCallback:
        """Adapt the bus to the MCP SDK's ``progress_callback`` signature.

        Usage:
            await session.send_request(
                request,
                types.CallToolResult,
                progress_callback=bus.progress_callback(server_name, token),
            )
        """

        async def _on_progress(progress: float, total: float | None, message: str | None) -> None:
            raw = {"progress": progress, "total": total, "message": message}
            self.publish(ProgressEvent.from_progress(client, token, progress, total, raw=raw))

        return _on_progress

    def _remove(self, subscription: Subscription) -> None:
        self._subscriptions.remove(subscription)
        _logger.debug(
            "subscriber removed",
            extra={"event": "bus.unsubscribe", "subscribers": len(self._subscriptions)},
        )


__all__ = ["EventHandler", "ProgressBus", "ProgressCallback", "Subscription"]
