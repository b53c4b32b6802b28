# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Inbound progress events and the adapters that produce them.

Everything downstream of the bus works on :class:`ProgressEvent`, a flat
``(client, token, percentage)`` triple. Protocol envelopes are converted at
the edge:

- LSP ``$/progress`` carries ``{"token": ..., "value": {"kind": ...}}`` with an
  optional ``percentage`` on ``begin`` and ``report`` values. ``end`` means the
  task is done.
- MCP ``notifications/progress`` carries ``progress`` and an optional
  ``total``. Without a total there is no percentage to show; reaching the
  total counts as done.

Shape validation happens here, with pydantic. The store and the rate limiter
trust what they are given.

See:
    https://microsoft.github.io/language-server-protocol/specifications/lsp/3.17/specification/#progress
    https://modelcontextprotocol.io/specification/2025-06-18/basic/utilities/progress
"""

from __future__ import annotations

from collections.abc import Mapping
import math
from typing import Any, Literal

from mcp.types import ProgressNotificationParams
from pydantic import BaseModel, ConfigDict, Field

ClientKey = int | str
TokenKey = int | str


# =============================================================================
# LSP wire models
# =============================================================================


class WorkDoneProgressValue(BaseModel):
    """``value`` of an LSP work-done progress notification."""

    model_config = ConfigDict(extra="allow")

    kind: Literal["begin", "report", "end"]
    title: str | None = None
    message: str | None = None
    cancellable: bool | None = None
    percentage: int | None = Field(default=None, ge=0, le=100)


class LspProgressParams(BaseModel):
    """Params of an LSP ``$/progress`` notification."""

    model_config = ConfigDict(extra="allow")

    token: TokenKey
    value: WorkDoneProgressValue


# =============================================================================
# Normalized event
# =============================================================================


class ProgressEvent(BaseModel):
    """One progress update for one task of one client.

    Attributes:
        client: Opaque client identifier, stable for the process lifetime
        token: Task identifier, unique within the client
        percentage: 0-100, or None once the task is done or reports no number
        raw: Original envelope, kept for debug logging only
    """

    model_config = ConfigDict(frozen=True)

    client: ClientKey
    token: TokenKey
    percentage: int | None = Field(default=None, ge=0, le=100)
    raw: Any = Field(default=None, exclude=True, repr=False)

    @classmethod
    def from_lsp(cls, client: ClientKey, params: Mapping[str, Any] | LspProgressParams) -> "ProgressEvent":
        """Build an event from LSP ``$/progress`` params.

        Raises:
            pydantic.ValidationError: If ``params`` lacks a token or a valid value.
        """
        parsed = params if isinstance(params, LspProgressParams) else LspProgressParams.model_validate(params)
        percentage = None if parsed.value.kind == "end" else parsed.value.percentage
        return cls(client=client, token=parsed.token, percentage=percentage, raw=params)

    @classmethod
    def from_mcp(cls, client: ClientKey, params: ProgressNotificationParams) -> "ProgressEvent":
        """Build an event from MCP ``notifications/progress`` params."""
        # Attribute name varies by mcp release; the wire alias is stable.
        token = params.model_dump(by_alias=True)["progressToken"]
        return cls.from_progress(client, token, params.progress, params.total, raw=params)

    @classmethod
    def from_progress(
        cls,
        client: ClientKey,
        token: TokenKey,
        progress: float,
        total: float | None,
        *,
        raw: Any = None,
    ) -> "ProgressEvent":
        """Build an event from a ``progress``/``total`` pair."""
        return cls(client=client, token=token, percentage=progress_to_percentage(progress, total), raw=raw)


def progress_to_percentage(progress: float, total: float | None) -> int | None:
    """Map ``progress`` out of ``total`` to a whole percentage.

    Returns None when no positive total is known or the total has been reached.
    """
    if total is None or total <= 0 or progress >= total:
        return None
    return max(0, math.floor(progress / total * 100))


__all__ = [
    "ClientKey",
    "LspProgressParams",
    "ProgressEvent",
    "TokenKey",
    "WorkDoneProgressValue",
    "progress_to_percentage",
]
