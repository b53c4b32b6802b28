# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Per-client progress bookkeeping.

Each client (one language server, one MCP session, ...) may run several tasks
in parallel, each identified by its own progress token. The store keeps the
latest percentage per ``(client, token)`` pair and reduces a client's tasks to
a single number: the minimum percentage, i.e. the least complete task.

A percentage of ``None`` means the task finished or never reported a number.
Such entries stay in the store but never take part in aggregation.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator

ClientId = Hashable
ProgressToken = Hashable


class ProgressStore:
    """Latest known percentage per client and token.

    Args:
        evict_completed: Drop an entry once it is overwritten with ``None``
            instead of keeping it around. Aggregation results are the same
            either way; eviction only bounds memory for long-lived clients
            that churn through many short tasks.
    """

    def __init__(self, *, evict_completed: bool = False) -> None:
        self._evict_completed = evict_completed
        self._progress: dict[ClientId, dict[ProgressToken, int | None]] = {}

    def update(self, client: ClientId, token: ProgressToken, percentage: int | None) -> None:
        if percentage is None and self._evict_completed:
            tasks = self._progress.get(client)
            if tasks is None:
                return
            tasks.pop(token, None)
            if not tasks:
                del self._progress[client]
            return
        self._progress.setdefault(client, {})[token] = percentage

    def min_percentage(self, client: ClientId) -> int | None:
        """Return the lowest active percentage for ``client``, or ``None`` when idle."""
        tasks = self._progress.get(client)
        if not tasks:
            return None
        active = [percentage for percentage in tasks.values() if percentage is not None]
        return min(active) if active else None

    def tasks(self, client: ClientId) -> dict[ProgressToken, int | None]:
        """Snapshot of the stored entries for ``client``."""
        return dict(self._progress.get(client, {}))

    def clients(self) -> Iterator[ClientId]:
        return iter(list(self._progress))


__all__ = ["ClientId", "ProgressStore", "ProgressToken"]
