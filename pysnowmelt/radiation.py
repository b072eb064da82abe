"""
Radiation balance calculations.

Includes shortwave and longwave radiation at the snow surface, in daily
units [MJ/(m²·day)]. General formulas from Dingman (2015).
"""

import numpy as np
from .constants import (TFRZ, E_SAT_0, TETENS_A, TETENS_B, STEFAN_BOLTZMANN,
                        CLOUD_TRANSMISSION_BASE, CLOUD_TRANSMISSION_SLOPE,
                        FOREST_EXTINCTION)


def net_solar_rad(clear_sky_rad, cloud_fraction, forest_fraction, albedo):
    """
    Calculate net shortwave radiation absorbed by the snowpack.

    K = K_cs * tau_c * tau_f * (1 - albedo), with cloud transmission
    tau_c = 0.355 + 0.68 * (1 - c) (Croley 1989) and forest transmission
    tau_f = exp(-3.91 * F) (lodgepole pine, Mahat and Tarboton 2012).

    Parameters
    ----------
    clear_sky_rad : float
        Clear-sky solar radiation [MJ/(m²·day)]
    cloud_fraction : float
        Cloud-cover fraction [0-1]
    forest_fraction : float
        Forest-cover fraction [0-1]
    albedo : float
        Snow albedo [0-1]

    Returns
    -------
    float
        Net shortwave radiation [MJ/(m²·day)]
    """
    tau_c = CLOUD_TRANSMISSION_BASE + CLOUD_TRANSMISSION_SLOPE * (1.0 - cloud_fraction)
    tau_f = np.exp(-FOREST_EXTINCTION * forest_fraction)

    return float(clear_sky_rad * tau_c * tau_f * (1.0 - albedo))


def vapor_pressure(air_temp, relative_humidity):
    """
    Actual vapor pressure of the air [kPa].

    Saturation vapor pressure from the Tetens curve scaled by relative
    humidity.

    Parameters
    ----------
    air_temp : float
        Air temperature [°C]
    relative_humidity : float
        Relative humidity [0-1]
    """
    e_sat = E_SAT_0 * np.exp(TETENS_A * air_temp / (air_temp + TETENS_B))

    return float(e_sat * relative_humidity)


def atmos_emissivity(forest_fraction, vapor_pressure, cloud_fraction):
    """
    Effective emissivity of the atmosphere and canopy.

    Clear-sky emissivity 0.83 - 0.18 * exp(-1.54 * ea) is blended with a
    black-body cloud base (weight 0.84 * c), and the forest canopy is
    treated as a black body covering fraction F.

    Parameters
    ----------
    forest_fraction : float
        Forest-cover fraction [0-1]
    vapor_pressure : float
        Vapor pressure of the air [kPa]
    cloud_fraction : float
        Cloud-cover fraction [0-1]

    Returns
    -------
    float
        Emissivity [-]
    """
    clear_sky = 0.83 - 0.18 * np.exp(-1.54 * vapor_pressure)
    sky = (1.0 - 0.84 * cloud_fraction) * clear_sky + 0.84 * cloud_fraction

    return float((1.0 - forest_fraction) * sky + forest_fraction)


def net_long_wave_rad(emissivity, air_temp):
    """
    Net longwave radiation at a melting snow surface.

    Incoming emission of the atmosphere at air temperature minus the
    emission of a black-body snow surface at 0°C.

    Parameters
    ----------
    emissivity : float
        Effective atmospheric emissivity [-]
    air_temp : float
        Air temperature [°C]

    Returns
    -------
    float
        Net longwave radiation [MJ/(m²·day)], positive = toward surface
    """
    lw_down = emissivity * STEFAN_BOLTZMANN * (air_temp + TFRZ) ** 4
    lw_up = STEFAN_BOLTZMANN * TFRZ ** 4

    return float(lw_down - lw_up)


def net_rad(net_solar_rad, net_long_wave_rad):
    """Total net radiation [MJ/(m²·day)]."""
    return net_solar_rad + net_long_wave_rad
