# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Diagnostic counts for the status line (errors, warnings, infos, hints)."""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum


class Severity(IntEnum):
    """Diagnostic severities, numbered as in the Language Server Protocol."""

    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


DIAGNOSTIC_ICONS: Mapping[Severity, str] = {
    Severity.ERROR: "\uf659",
    Severity.WARNING: "\uf529",
    Severity.INFORMATION: "\uf7fc",
    Severity.HINT: "\uf835",
}


def format_diagnostics(
    counts: Mapping[Severity | int, int],
    icons: Mapping[Severity, str] = DIAGNOSTIC_ICONS,
) -> str:
    """Render non-zero counts as ``"<icon> <count>"``, most severe first.

    Plain integers are accepted as keys so LSP severities can be passed through
    untouched.
    """
    shown = []
    for severity in Severity:
        count = counts.get(severity, 0)
        if count > 0:
            shown.append(f"{icons[severity]} {count}")
    return "  ".join(shown)


__all__ = ["DIAGNOSTIC_ICONS", "Severity", "format_diagnostics"]
