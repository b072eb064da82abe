"""Tests for SiteConfig and WeatherConfig validation, immutability and warnings."""

import logging
import math

import pytest

from pysnowmelt import DomainError, SiteConfig, WeatherConfig
from pysnowmelt.temperature_index import degree_day_factors


class TestSiteConfig:
    """Tests for the frozen site configuration."""

    def test_defaults(self) -> None:
        """Defaults are the reference forested site."""
        site = SiteConfig()

        assert site.measurement_height == 5.0
        assert site.roughness_height == 0.0015
        assert site.forest_fraction == 0.8
        assert site.albedo == 0.55
        assert site.snow_density == 500.0

    def test_is_frozen_dataclass(self) -> None:
        """SiteConfig is immutable."""
        site = SiteConfig()

        with pytest.raises(AttributeError):
            site.albedo = 0.9  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("forest_fraction", -0.1),
            ("forest_fraction", 1.1),
            ("albedo", -0.01),
            ("albedo", 1.5),
            ("measurement_height", 0.0),
            ("measurement_height", -2.0),
            ("roughness_height", 0.0),
            ("snow_density", 0.0),
            ("albedo", math.nan),
            ("snow_density", math.inf),
        ],
    )
    def test_rejects_out_of_domain(self, name: str, value: float) -> None:
        """Values outside the physical domain raise DomainError."""
        with pytest.raises(DomainError) as excinfo:
            SiteConfig(**{name: value})

        assert excinfo.value.name == name

    def test_rejects_roughness_above_measurement_height(self) -> None:
        """Roughness length must lie below the measurement height."""
        with pytest.raises(DomainError, match="roughness_height"):
            SiteConfig(measurement_height=0.01, roughness_height=0.01)

    def test_domain_error_is_value_error(self) -> None:
        """DomainError can be caught as ValueError."""
        with pytest.raises(ValueError):
            SiteConfig(forest_fraction=2.0)

    def test_accepts_fraction_bounds(self) -> None:
        """Fractions of exactly 0 and 1 are valid."""
        SiteConfig(forest_fraction=0.0, albedo=1.0)
        SiteConfig(forest_fraction=1.0, albedo=0.0)

    def test_warns_when_density_above_range(self, caplog: pytest.LogCaptureFixture) -> None:
        """Warning logged for very dense snow."""
        with caplog.at_level(logging.WARNING):
            SiteConfig(snow_density=800.0)

        assert len(caplog.records) == 1
        assert "snow_density" in caplog.text
        assert "outside typical range" in caplog.text

    def test_warns_when_forest_degree_day_factor_negative(self, caplog: pytest.LogCaptureFixture) -> None:
        """Light snow with a negative forest degree-day factor is flagged."""
        with caplog.at_level(logging.WARNING):
            SiteConfig(snow_density=100.0)

        assert len(caplog.records) == 1
        assert "snow_density" in caplog.text

    def test_typical_density_range_keeps_degree_day_factors_positive(self) -> None:
        """Both degree-day factors are positive across the typical range."""
        lower, upper = SiteConfig.BOUNDS["snow_density"]

        for rho in (lower, 300.0, upper):
            forest, open_ = degree_day_factors(rho)
            assert forest > 0
            assert open_ > 0

    def test_no_warning_for_defaults(self, caplog: pytest.LogCaptureFixture) -> None:
        """Reference values are within typical ranges."""
        with caplog.at_level(logging.WARNING):
            SiteConfig()

        assert len(caplog.records) == 0


class TestWeatherConfig:
    """Tests for the frozen weather configuration."""

    def test_defaults(self) -> None:
        """Defaults are the reference weather."""
        weather = WeatherConfig()

        assert weather.clear_sky_rad == 14.3
        assert weather.cloud_fraction == 0.5
        assert weather.relative_humidity == 0.8
        assert weather.wind_speed == 6.0
        assert weather.rain_rate == 0.0
        assert weather.pressure == 101.3

    def test_is_frozen_dataclass(self) -> None:
        """WeatherConfig is immutable."""
        weather = WeatherConfig()

        with pytest.raises(AttributeError):
            weather.wind_speed = 1.0  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("cloud_fraction", -0.5),
            ("cloud_fraction", 1.01),
            ("relative_humidity", 1.2),
            ("wind_speed", 0.0),
            ("wind_speed", -3.0),
            ("pressure", 0.0),
            ("rain_rate", -1.0),
            ("clear_sky_rad", -5.0),
            ("pressure", math.nan),
        ],
    )
    def test_rejects_out_of_domain(self, name: str, value: float) -> None:
        """Values outside the physical domain raise DomainError."""
        with pytest.raises(DomainError) as excinfo:
            WeatherConfig(**{name: value})

        assert excinfo.value.name == name

    def test_warns_multiple_parameters_out_of_range(self, caplog: pytest.LogCaptureFixture) -> None:
        """One warning per atypical parameter."""
        with caplog.at_level(logging.WARNING):
            WeatherConfig(pressure=30.0, wind_speed=60.0)

        assert len(caplog.records) == 2

    def test_bounds_class_variable_exists(self) -> None:
        """Typical ranges are exposed on the class."""
        assert "pressure" in WeatherConfig.BOUNDS
        assert "snow_density" in SiteConfig.BOUNDS
