"""Shared fixtures for PySnowMelt tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from pysnowmelt import SiteConfig, WeatherConfig


@pytest.fixture
def site() -> SiteConfig:
    """Reference forested site."""
    return SiteConfig()


@pytest.fixture
def weather() -> WeatherConfig:
    """Reference weather, no rain."""
    return WeatherConfig()


@pytest.fixture
def rainy_weather() -> WeatherConfig:
    """Reference weather with 10 mm/day of rain."""
    return WeatherConfig(rain_rate=10.0)
