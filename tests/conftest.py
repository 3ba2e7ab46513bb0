"""Pytest configuration and fixtures for tui-shimmer tests."""

import pytest
from rich.color import ColorSystem

from tui_shimmer import ShimmerConfig
from tui_shimmer.config import supports_true_color

_COLOR_ENV_VARS = (
    "NO_COLOR",
    "CLICOLOR",
    "CLICOLOR_FORCE",
    "COLORTERM",
)


@pytest.fixture(autouse=True)
def clean_color_env(monkeypatch):
    """Keep colour detection independent of the developer's terminal."""
    for name in _COLOR_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    supports_true_color.cache_clear()
    yield
    supports_true_color.cache_clear()


@pytest.fixture
def truecolor_config():
    return ShimmerConfig(color_system=ColorSystem.TRUECOLOR)


@pytest.fixture
def eight_bit_config():
    return ShimmerConfig(color_system=ColorSystem.EIGHT_BIT)


@pytest.fixture
def standard_config():
    return ShimmerConfig(color_system=ColorSystem.STANDARD)
