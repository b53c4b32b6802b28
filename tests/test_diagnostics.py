# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Diagnostic count rendering."""

from __future__ import annotations

from progress_indicator import DIAGNOSTIC_ICONS, Severity, format_diagnostics


def test_no_diagnostics_renders_empty():
    assert format_diagnostics({}) == ""
    assert format_diagnostics({Severity.ERROR: 0, Severity.HINT: 0}) == ""


def test_counts_in_severity_order():
    counts = {Severity.HINT: 3, Severity.ERROR: 5, Severity.WARNING: 1}
    expected = "  ".join(
        [
            f"{DIAGNOSTIC_ICONS[Severity.ERROR]} 5",
            f"{DIAGNOSTIC_ICONS[Severity.WARNING]} 1",
            f"{DIAGNOSTIC_ICONS[Severity.HINT]} 3",
        ]
    )
    assert format_diagnostics(counts) == expected


def test_plain_lsp_severity_numbers():
    icons = {Severity.ERROR: "E", Severity.WARNING: "W", Severity.INFORMATION: "I", Severity.HINT: "H"}
    assert format_diagnostics({1: 2, 3: 4}, icons) == "E 2  I 4"


def test_severity_numbers_match_lsp():
    assert [int(s) for s in Severity] == [1, 2, 3, 4]
