"""
Turbulent heat transfer calculations.

Includes sensible and latent heat transfer using:
- Bulk aerodynamic transfer coefficients in daily units
- Bulk Richardson number stability correction
- Condensation and rain heat

Fluxes are positive toward the snow surface, relative to a melting
(0°C, saturated) snow surface.
"""

from enum import Enum

import numpy as np
from .constants import (TFRZ, T_SNOW, E_SAT_0, CP_AIR, CP_WATER, VON_KARMAN,
                        GRAVITY, R_AIR, EPSILON, LV_VAPORIZATION,
                        RICHARDSON_CRITICAL, FOREST_WIND_REDUCTION,
                        SECONDS_PER_DAY)
from .errors import DomainError


class StabilityRegime(Enum):
    """Atmospheric stability regime, from the sign of the Richardson number."""
    STABLE = 'stable'
    NEUTRAL = 'neutral'
    UNSTABLE = 'unstable'


class VaporExchange(Enum):
    """Direction of vapor exchange, from the sign of the latent heat rate."""
    SUBLIMATION = 'sublimation'    # latent rate < 0, vapor leaves the pack
    CONDENSATION = 'condensation'  # latent rate >= 0


def adjusted_wind_speed(wind_speed, forest_fraction):
    """Wind speed reduced by the forest canopy [m/s]."""
    return wind_speed * (1.0 - FOREST_WIND_REDUCTION * forest_fraction)


def air_density(pressure, air_temp):
    """
    Air density from the ideal gas law.

    Parameters
    ----------
    pressure : float
        Atmospheric pressure [kPa]
    air_temp : float
        Air temperature [°C]

    Returns
    -------
    float
        Air density [kg/m³]
    """
    return pressure / (R_AIR * (air_temp + TFRZ))


def richardson_number(measurement_height, roughness_height, air_temp,
                      adjusted_wind_speed):
    """
    Calculate bulk Richardson number over a melting snow surface.

    Ri > 0: Stable (air warmer than snow)
    Ri < 0: Unstable (air colder than snow)

    Parameters
    ----------
    measurement_height : float
        Measurement height [m]
    roughness_height : float
        Roughness length [m]
    air_temp : float
        Air temperature [°C]
    adjusted_wind_speed : float
        Wind speed below the canopy [m/s]

    Raises
    ------
    DomainError
        If the adjusted wind speed is zero.
    """
    if adjusted_wind_speed == 0:
        raise DomainError("Richardson number undefined for zero wind speed",
                          name='adjusted_wind_speed', value=adjusted_wind_speed)

    dt = air_temp - T_SNOW
    t_mean = 0.5 * ((air_temp + TFRZ) + (T_SNOW + TFRZ))
    dz = measurement_height - roughness_height

    return GRAVITY * dz * dt / (t_mean * adjusted_wind_speed ** 2)


def stability_factor_m(measurement_height, roughness_height):
    """
    Upper limit on the Richardson number used in the stable regime.

    1 / (ln(za / z0) + 5)
    """
    return float(1.0 / (np.log(measurement_height / roughness_height) + 5.0))


def stability_regime(richardson_number):
    """Classify the atmosphere by the sign of the Richardson number."""
    if richardson_number > 0:
        return StabilityRegime.STABLE
    if richardson_number < 0:
        return StabilityRegime.UNSTABLE
    return StabilityRegime.NEUTRAL


def stability_factors_v_h(richardson_number, stability_factor_m):
    """
    Stability correction for heat and vapor transfer.

    Stable: (1 - min(Ri, m) / 0.2)^2, where the Richardson number is capped
    at the stability limit m so the factor never reaches zero.
    Unstable and neutral: (1 - Ri / 0.2)^2.

    Parameters
    ----------
    richardson_number : float
        Bulk Richardson number
    stability_factor_m : float
        Stable-regime Richardson limit, see stability_factor_m()
    """
    regime = stability_regime(richardson_number)

    if regime is StabilityRegime.STABLE:
        ri = min(richardson_number, stability_factor_m)
    else:
        ri = richardson_number

    return (1.0 - ri / RICHARDSON_CRITICAL) ** 2


def _log_height_ratio_sq(measurement_height, roughness_height):
    return np.log(measurement_height / roughness_height) ** 2


def sensible_heat_xfer_coefficient(air_density, measurement_height,
                                   roughness_height):
    """
    Bulk sensible heat transfer coefficient.

    Multiply by wind speed [m/s] and temperature difference [K] for a
    flux in MJ/(m²·day).
    """
    k2 = VON_KARMAN ** 2
    ln2 = _log_height_ratio_sq(measurement_height, roughness_height)

    return float(EPSILON * k2 * air_density * CP_AIR / ln2 * SECONDS_PER_DAY)


def latent_heat_xfer_coefficient(air_density, pressure, measurement_height,
                                 roughness_height):
    """
    Bulk latent heat transfer coefficient.

    Multiply by wind speed [m/s] and vapor pressure difference [kPa] for a
    flux in MJ/(m²·day).
    """
    k2 = VON_KARMAN ** 2
    ln2 = _log_height_ratio_sq(measurement_height, roughness_height)

    return float(EPSILON * air_density * LV_VAPORIZATION * k2
                 / (pressure * ln2) * SECONDS_PER_DAY)


def sensible_heat_xfer_rate(stability_factors_v_h, sensible_coefficient,
                            adjusted_wind_speed, air_temp):
    """Sensible heat transfer to the snow [MJ/(m²·day)]."""
    return (stability_factors_v_h * sensible_coefficient * adjusted_wind_speed
            * (air_temp - T_SNOW))


def latent_heat_xfer_rate(stability_factors_v_h, latent_coefficient,
                          adjusted_wind_speed, vapor_pressure):
    """
    Latent heat transfer to the snow [MJ/(m²·day)].

    Driven by the vapor pressure gradient against a saturated snow surface
    at 0°C (0.611 kPa). Negative = sublimation/evaporation from the pack.
    """
    return (stability_factors_v_h * latent_coefficient * adjusted_wind_speed
            * (vapor_pressure - E_SAT_0))


def vapor_exchange(latent_rate):
    """Classify vapor exchange by the sign of the latent heat rate."""
    if latent_rate < 0:
        return VaporExchange.SUBLIMATION
    return VaporExchange.CONDENSATION


def condensation(latent_rate):
    """Water mass exchanged with the air [mm/day]."""
    return abs(latent_rate) / LV_VAPORIZATION


def rain_heat(rain_rate, air_temp):
    """
    Heat delivered by rain at air temperature [MJ/(m²·day)].

    Parameters
    ----------
    rain_rate : float
        Rain rate [mm/day]
    air_temp : float
        Air (rain) temperature [°C]
    """
    return rain_rate * air_temp * CP_WATER
