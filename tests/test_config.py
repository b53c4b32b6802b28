# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""IndicatorConfig defaults and validation."""

from __future__ import annotations

import dataclasses

import pytest

from progress_indicator import IndicatorConfig


def test_defaults():
    config = IndicatorConfig()
    assert config.on_update is None
    assert config.interval_ms == 500
    assert config.log is False


def test_interval_in_seconds():
    assert IndicatorConfig(interval_ms=250).interval == 0.25
    assert IndicatorConfig(interval_ms=0).interval == 0


def test_negative_interval_rejected():
    with pytest.raises(ValueError, match="interval_ms"):
        IndicatorConfig(interval_ms=-1)


def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        IndicatorConfig().interval_ms = 10  # type: ignore[misc]
