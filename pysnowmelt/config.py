"""
Site and weather configuration for one model evaluation.

Both configs are frozen dataclasses: they are built once before a sweep
and shared read-only by every evaluation in it. Values outside the
physically valid domain raise DomainError at construction; values that
are valid but outside the range the empirical fits were derived for only
log a warning.
"""

import logging
import math
from dataclasses import dataclass, fields
from typing import ClassVar, Dict, Tuple

from .errors import DomainError

logger = logging.getLogger(__name__)


def _require_finite(config):
    for f in fields(config):
        value = getattr(config, f.name)
        if not math.isfinite(value):
            raise DomainError(f"{f.name} must be finite, got {value}",
                              name=f.name, value=value)


def _require_fraction(name, value):
    if not 0.0 <= value <= 1.0:
        raise DomainError(f"{name} must lie in [0, 1], got {value}",
                          name=name, value=value)


def _require_positive(name, value):
    if value <= 0.0:
        raise DomainError(f"{name} must be positive, got {value}",
                          name=name, value=value)


def _require_non_negative(name, value):
    if value < 0.0:
        raise DomainError(f"{name} must be non-negative, got {value}",
                          name=name, value=value)


def _warn_if_outside_bounds(config, bounds):
    """Log warnings for values outside typical ranges. Never raises."""
    for name, (lower, upper) in bounds.items():
        value = getattr(config, name)
        if value < lower or value > upper:
            logger.warning(
                "Parameter %s=%.4f is outside typical range [%.4f, %.2f]",
                name,
                value,
                lower,
                upper,
            )


_SITE_BOUNDS: Dict[str, Tuple[float, float]] = {
    "measurement_height": (0.5, 50.0),
    "roughness_height": (0.0001, 0.05),
    "snow_density": (122.0, 600.0),  # forest degree-day factor > 0
}

_WEATHER_BOUNDS: Dict[str, Tuple[float, float]] = {
    "clear_sky_rad": (0.0, 45.0),
    "wind_speed": (0.0, 40.0),
    "rain_rate": (0.0, 200.0),
    "pressure": (40.0, 110.0),
}


@dataclass(frozen=True)
class SiteConfig:
    """Site parameters, fixed for a run.

    Attributes:
        measurement_height: Height of wind/temperature measurement [m].
        roughness_height: Surface roughness length [m]. Must be below the
            measurement height.
        forest_fraction: Forest-cover fraction [0-1].
        albedo: Snow surface albedo [0-1].
        snow_density: Snowpack density [kg/m³].
    """

    measurement_height: float = 5.0
    roughness_height: float = 0.0015
    forest_fraction: float = 0.8
    albedo: float = 0.55
    snow_density: float = 500.0

    BOUNDS: ClassVar[Dict[str, Tuple[float, float]]] = _SITE_BOUNDS

    def __post_init__(self) -> None:
        _require_finite(self)
        _require_positive("measurement_height", self.measurement_height)
        _require_positive("roughness_height", self.roughness_height)
        if self.roughness_height >= self.measurement_height:
            # ln(za/z0) <= 0 breaks the transfer coefficients
            raise DomainError(
                f"roughness_height ({self.roughness_height}) must be below "
                f"measurement_height ({self.measurement_height})",
                name="roughness_height", value=self.roughness_height)
        _require_fraction("forest_fraction", self.forest_fraction)
        _require_fraction("albedo", self.albedo)
        _require_positive("snow_density", self.snow_density)
        _warn_if_outside_bounds(self, self.BOUNDS)


@dataclass(frozen=True)
class WeatherConfig:
    """Weather parameters, fixed for a run.

    Attributes:
        clear_sky_rad: Clear-sky solar radiation [MJ/(m²·day)].
        cloud_fraction: Cloud-cover fraction [0-1].
        relative_humidity: Relative humidity [0-1].
        wind_speed: Wind speed above the canopy [m/s].
        rain_rate: Rain rate [mm/day].
        pressure: Atmospheric pressure [kPa].
    """

    clear_sky_rad: float = 14.3
    cloud_fraction: float = 0.5
    relative_humidity: float = 0.8
    wind_speed: float = 6.0
    rain_rate: float = 0.0
    pressure: float = 101.3

    BOUNDS: ClassVar[Dict[str, Tuple[float, float]]] = _WEATHER_BOUNDS

    def __post_init__(self) -> None:
        _require_finite(self)
        _require_non_negative("clear_sky_rad", self.clear_sky_rad)
        _require_fraction("cloud_fraction", self.cloud_fraction)
        _require_fraction("relative_humidity", self.relative_humidity)
        # Zero wind makes the Richardson number undefined
        _require_positive("wind_speed", self.wind_speed)
        _require_non_negative("rain_rate", self.rain_rate)
        _require_positive("pressure", self.pressure)
        _warn_if_outside_bounds(self, self.BOUNDS)
