"""
Energy balance aggregation.

Combines radiation, turbulent and rain heat into the total heat input to
the snowpack and converts it to melt, ablation and water output.
"""

from .constants import LF_FUSION
from .turbulent import VaporExchange, vapor_exchange


def total_heat_input_rate(net_rad, sensible_rate, latent_rate, rain_heat):
    """Total heat input to the snowpack [MJ/(m²·day)]."""
    return net_rad + sensible_rate + latent_rate + rain_heat


def total_melt(heat_input_rate):
    """
    Melt produced by the heat input [mm/day].

    An energy deficit produces no melt (no refreezing is modeled).

    Parameters
    ----------
    heat_input_rate : float
        Total heat input [MJ/(m²·day)]
    """
    if heat_input_rate < 0:
        return 0.0
    return heat_input_rate / LF_FUSION


def total_ablation(latent_rate, total_melt, condensation):
    """
    Total mass loss from the snowpack [mm/day].

    When vapor leaves the pack the exchanged mass is added to melt.
    """
    if vapor_exchange(latent_rate) is VaporExchange.SUBLIMATION:
        return total_melt + condensation
    return total_melt


def total_water_output(latent_rate, total_melt, rain_rate, condensation):
    """
    Water leaving the snowpack [mm/day].

    Parameters
    ----------
    latent_rate : float
        Latent heat transfer rate [MJ/(m²·day)]
    total_melt : float
        Melt [mm/day]
    rain_rate : float
        Rain rate [mm/day]
    condensation : float
        Vapor mass exchanged [mm/day]
    """
    if vapor_exchange(latent_rate) is VaporExchange.SUBLIMATION:
        return total_melt + rain_rate + condensation
    return total_melt + rain_rate
