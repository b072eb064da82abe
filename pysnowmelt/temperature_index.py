"""
Temperature-index (degree-day) melt.

Empirical melt driven only by air temperature, with separate degree-day
factors for forested and open sites that depend on snow density.
"""

from .constants import RHO_WATER


def degree_day_factors(snow_density):
    """
    Forested and open degree-day factors [mm/(°C·day)].

    The forest factor is negative below about 122 kg/m³ and the open
    factor below about 67 kg/m³, giving negative melt.

    Returns
    -------
    tuple of float
        (forest, open)
    """
    rho = snow_density / RHO_WATER
    return 19.6 * rho - 2.39, 10.4 * rho - 0.7


def ti_total_melt(air_temp, forest_fraction, snow_density):
    """
    Temperature-index melt [mm/day].

    No melt unless the air is strictly above 0°C.

    Parameters
    ----------
    air_temp : float
        Air temperature [°C]
    forest_fraction : float
        Forest-cover fraction [0-1]
    snow_density : float
        Snowpack density [kg/m³]
    """
    if air_temp <= 0:
        return 0.0

    m_forest, m_open = degree_day_factors(snow_density)
    return (forest_fraction * m_forest * air_temp
            + (1.0 - forest_fraction) * m_open * air_temp)


def ti_total_water_output(ti_total_melt, rain_rate):
    """Temperature-index water output [mm/day]."""
    return ti_total_melt + rain_rate
