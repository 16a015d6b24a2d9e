"""Shared fixtures for performance analytics tests."""

from datetime import date

import pytest

from perfpath.calendar import Anchor, Frequency, advance_periods, to_serial
from perfpath.system import config as config_module
from perfpath.system.config import SystemConfig


@pytest.fixture(autouse=True)
def default_system_config(monkeypatch):
    """Pin analytics defaults so a local perfpath.yaml cannot leak into tests."""
    monkeypatch.setattr(config_module, "_system_config", SystemConfig())


@pytest.fixture
def month_ends():
    """Factory for ``count`` consecutive month-end serials starting at ``first``."""

    def build(count: int, first: date = date(2008, 1, 31)) -> list[int]:
        start = to_serial(first)
        return [advance_periods(Frequency.MONTHLY, i, start, Anchor.END) for i in range(count)]

    return build
