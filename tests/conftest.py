from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

import pytest

from datefmt.formatter import DateTimeUtils

FIXED_NOW = datetime(2024, 3, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def app_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Forces test mode and clears CLI overrides from the caller's environment.
    Automatically applied to all tests.
    """
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.delenv("DATEFMT_LANGUAGE", raising=False)
    monkeypatch.delenv("DATEFMT_TIME_ZONE", raising=False)


@pytest.fixture
def fixed_now() -> datetime:
    """The instant every clock-injected formatter treats as "now"."""
    return FIXED_NOW


@pytest.fixture
def clock(fixed_now: datetime) -> Callable[[], datetime]:
    return lambda: fixed_now


@pytest.fixture
def utils(clock: Callable[[], datetime]) -> DateTimeUtils:
    """
    Formatter with a frozen clock and UTC default zone, so output does not
    depend on the host running the tests.
    """
    return DateTimeUtils(default_time_zone="UTC", now=clock)
