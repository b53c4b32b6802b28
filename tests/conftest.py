# Copyright (c) 2026 Dedalus Labs, Inc. and its contributors
# SPDX-License-Identifier: MIT

"""Shared fixtures for the indicator test-suite."""

from __future__ import annotations

import pytest

from progress_indicator import ProgressIndicator, ProgressStore
from tests.helpers import FakeScheduler


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def store() -> ProgressStore:
    return ProgressStore()


@pytest.fixture
def indicator(scheduler: FakeScheduler) -> ProgressIndicator:
    return ProgressIndicator(scheduler=scheduler)


__all__ = ["anyio_backend", "indicator", "scheduler", "store"]
