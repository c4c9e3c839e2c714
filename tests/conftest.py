"""Shared fixtures: a demo API app on a frozen clock."""

from datetime import UTC, datetime

import pytest

from demo_api.app import App
from demo_api.clock import FrozenClock
from demo_api.config import AppConfig
from demo_api.service import create_app

FROZEN_AT = datetime(2024, 6, 1, 9, 30, 15, 250000, tzinfo=UTC)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(FROZEN_AT)


@pytest.fixture
def demo_app(clock: FrozenClock) -> App:
    """A fresh demo API with a pinned clock and default config."""
    return create_app(AppConfig(), clock=clock)
