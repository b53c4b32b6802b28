# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Turn aggregate progress into status-line glyphs.

A theme carries a *ramp*: a string whose characters go from "just started" to
"done". A percentage is rounded to the nearest step of the ramp, so a ramp of
five glyphs maps 0% to the first, 50% to the middle one and 100% to the last.
Clients without active work render as the theme's idle glyph.

The preset themes use Nerd Font code points (moon phases for progress, a
spinner-like glyph for the busy state and a check mark for idle).
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass
import math

import regex

from .store import ProgressStore


@dataclass(slots=True, frozen=True)
class Theme:
    """Display settings for :func:`format_clients`."""

    show_name: bool
    """Append the client name after each glyph."""

    ramp: str
    """Glyphs from least to most complete."""

    idle: str
    """Glyph for clients with nothing in progress."""


@dataclass(slots=True, frozen=True)
class ClientInfo:
    """A client as the host sees it: an opaque id plus a display name."""

    id: Hashable
    name: str


# Moon phases, new to full.
PROGRESS_RAMP = "\ue3d5\ue3d3\ue3d2\ue3d1\ue3d0\ue3cf\ue3ce\ue3cd\ue3cc\ue3cb\ue3ca\ue3c9\ue3c8\ue3e3"
BUSY_GLYPH = "\uf558"
IDLE_GLYPH = "\uf632"

PROGRESS_THEME = Theme(show_name=False, ramp=PROGRESS_RAMP, idle=IDLE_GLYPH)
NAMED_PROGRESS_THEME = Theme(show_name=True, ramp=PROGRESS_RAMP, idle=IDLE_GLYPH)
STATE_THEME = Theme(show_name=False, ramp=BUSY_GLYPH, idle=IDLE_GLYPH)
NAMED_STATE_THEME = Theme(show_name=True, ramp=BUSY_GLYPH, idle=IDLE_GLYPH)


def icon(percentage: float | None, ramp: str, idle: str) -> str:
    """Pick the ramp glyph nearest to ``percentage``; ``idle`` when there is none.

    The ramp is split into grapheme clusters, so a glyph followed by combining
    marks or a variation selector counts as one step.
    """
    if percentage is None:
        return idle
    glyphs = ramp_glyphs(ramp)
    index = math.floor(0.5 + percentage / 100 * (len(glyphs) - 1))
    return glyphs[index]


def ramp_glyphs(ramp: str) -> list[str]:
    """Split ``ramp`` into user-perceived characters."""
    return regex.findall(r"\X", ramp)


def format_clients(clients: Iterable[ClientInfo], store: ProgressStore, theme: Theme) -> str:
    """Render every client's aggregate progress as one line, ordered by name.

    Example:
        >>> store = ProgressStore()
        >>> store.update(1, "index", 0)
        >>> clients = [ClientInfo(1, "rust"), ClientInfo(2, "lua")]
        >>> format_clients(clients, store, Theme(show_name=True, ramp="abc", idle="-"))
        '- lua a rust'
    """
    ordered = sorted(clients, key=lambda client: client.name)
    rendered = []
    for client in ordered:
        glyph = icon(store.min_percentage(client.id), theme.ramp, theme.idle)
        rendered.append(f"{glyph} {client.name}" if theme.show_name else glyph)
    separator = " " if theme.show_name else ""
    return separator.join(rendered)


__all__ = [
    "BUSY_GLYPH",
    "ClientInfo",
    "IDLE_GLYPH",
    "NAMED_PROGRESS_THEME",
    "NAMED_STATE_THEME",
    "PROGRESS_RAMP",
    "PROGRESS_THEME",
    "STATE_THEME",
    "Theme",
    "format_clients",
    "icon",
    "ramp_glyphs",
]
