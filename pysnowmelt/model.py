"""
PySnowMelt: energy-balance and temperature-index snowmelt.

Main model driver that combines all physics modules.
"""

import math
import sys
import numpy as np
from dataclasses import dataclass, asdict
from typing import Dict, Iterable, List, Optional, Sequence

from .config import SiteConfig, WeatherConfig
from .constants import TETENS_B
from .errors import DomainError
from . import radiation
from . import turbulent
from . import energy_balance
from . import temperature_index
from . import diagnostics as diagnostics_module

# Series published by a sweep, in file order
OUTPUT_SERIES = (
    'air_temp',
    'total_water_output',
    'total_ablation',
    'total_melt',
    'ti_total_melt',
    'ti_total_water_output',
)


@dataclass(frozen=True)
class ModelResult:
    """All quantities of one evaluation at a single air temperature."""

    air_temp: float                        # [°C]

    # Radiation [MJ/(m²·day)]
    net_solar_rad: float
    vapor_pressure: float                  # [kPa]
    atmos_emissivity: float                # [-]
    net_long_wave_rad: float
    net_rad: float

    # Turbulent transfer
    adjusted_wind_speed: float             # [m/s]
    air_density: float                     # [kg/m³]
    richardson_number: float               # [-]
    stability_factor_m: float              # [-]
    stability_factors_v_h: float           # [-]
    sensible_heat_xfer_coefficient: float
    latent_heat_xfer_coefficient: float
    sensible_heat_xfer_rate: float         # [MJ/(m²·day)]
    latent_heat_xfer_rate: float           # [MJ/(m²·day)]
    condensation: float                    # [mm/day]
    rain_heat: float                       # [MJ/(m²·day)]
    total_heat_input_rate: float           # [MJ/(m²·day)]

    # Energy balance outputs [mm/day]
    total_melt: float
    total_ablation: float
    total_water_output: float

    # Temperature index outputs [mm/day]
    ti_total_melt: float
    ti_total_water_output: float

    @property
    def stability_regime(self) -> turbulent.StabilityRegime:
        return turbulent.stability_regime(self.richardson_number)

    @property
    def vapor_exchange(self) -> turbulent.VaporExchange:
        return turbulent.vapor_exchange(self.latent_heat_xfer_rate)

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def _check_air_temp(air_temp):
    if not math.isfinite(air_temp):
        raise DomainError(f"air_temp must be finite, got {air_temp}",
                          name='air_temp', value=air_temp)
    # Pole of the saturation vapor pressure curve, also below absolute zero
    if air_temp <= -TETENS_B:
        raise DomainError(f"air_temp must be above {-TETENS_B}°C, got {air_temp}",
                          name='air_temp', value=air_temp)


def evaluate(site: SiteConfig, weather: WeatherConfig, air_temp: float,
             diagnostics: bool = False, sink=None) -> ModelResult:
    """
    Evaluate both snowmelt approaches at one air temperature.

    Parameters
    ----------
    site : SiteConfig
        Site parameters
    weather : WeatherConfig
        Weather parameters
    air_temp : float
        Air temperature [°C]
    diagnostics : bool
        Write an input/output report to `sink`
    sink : file-like, optional
        Text sink for the report, default sys.stdout

    Returns
    -------
    ModelResult

    Raises
    ------
    DomainError
        If air_temp is not finite or lies at or below -237.3°C.
    """
    _check_air_temp(air_temp)
    air_temp = float(air_temp)

    # -------------------------------------------------------------------------
    # Radiation
    # -------------------------------------------------------------------------
    k_net = radiation.net_solar_rad(
        weather.clear_sky_rad, weather.cloud_fraction,
        site.forest_fraction, site.albedo
    )
    ea = radiation.vapor_pressure(air_temp, weather.relative_humidity)
    emissivity = radiation.atmos_emissivity(
        site.forest_fraction, ea, weather.cloud_fraction
    )
    l_net = radiation.net_long_wave_rad(emissivity, air_temp)
    rn = radiation.net_rad(k_net, l_net)

    # -------------------------------------------------------------------------
    # Turbulent transfer
    # -------------------------------------------------------------------------
    za = site.measurement_height
    z0 = site.roughness_height

    ua = turbulent.adjusted_wind_speed(weather.wind_speed, site.forest_fraction)
    rho_air = turbulent.air_density(weather.pressure, air_temp)
    ri = turbulent.richardson_number(za, z0, air_temp, ua)
    m = turbulent.stability_factor_m(za, z0)
    vh = turbulent.stability_factors_v_h(ri, m)

    kh = turbulent.sensible_heat_xfer_coefficient(rho_air, za, z0)
    kle = turbulent.latent_heat_xfer_coefficient(rho_air, weather.pressure, za, z0)
    h = turbulent.sensible_heat_xfer_rate(vh, kh, ua, air_temp)
    le = turbulent.latent_heat_xfer_rate(vh, kle, ua, ea)

    cond = turbulent.condensation(le)
    r_heat = turbulent.rain_heat(weather.rain_rate, air_temp)

    # -------------------------------------------------------------------------
    # Energy balance
    # -------------------------------------------------------------------------
    s = energy_balance.total_heat_input_rate(rn, h, le, r_heat)
    melt = energy_balance.total_melt(s)
    ablation = energy_balance.total_ablation(le, melt, cond)
    water = energy_balance.total_water_output(le, melt, weather.rain_rate, cond)

    # -------------------------------------------------------------------------
    # Temperature index
    # -------------------------------------------------------------------------
    ti_melt = temperature_index.ti_total_melt(
        air_temp, site.forest_fraction, site.snow_density
    )
    ti_water = temperature_index.ti_total_water_output(ti_melt, weather.rain_rate)

    result = ModelResult(
        air_temp=air_temp,
        net_solar_rad=k_net,
        vapor_pressure=ea,
        atmos_emissivity=emissivity,
        net_long_wave_rad=l_net,
        net_rad=rn,
        adjusted_wind_speed=ua,
        air_density=rho_air,
        richardson_number=ri,
        stability_factor_m=m,
        stability_factors_v_h=vh,
        sensible_heat_xfer_coefficient=kh,
        latent_heat_xfer_coefficient=kle,
        sensible_heat_xfer_rate=h,
        latent_heat_xfer_rate=le,
        condensation=cond,
        rain_heat=r_heat,
        total_heat_input_rate=s,
        total_melt=melt,
        total_ablation=ablation,
        total_water_output=water,
        ti_total_melt=ti_melt,
        ti_total_water_output=ti_water,
    )

    if diagnostics:
        report = diagnostics_module.format_report(site, weather, result)
        diagnostics_module.write_report(report, sink if sink is not None else sys.stdout)

    return result


def default_temperatures(max_temp: int = 50) -> np.ndarray:
    """Integer-degree samples 0, 1, ..., max_temp - 1 [°C]."""
    return np.arange(0, max_temp, dtype=float)


def run_sweep(site: SiteConfig, weather: WeatherConfig,
              temperatures: Optional[Iterable[float]] = None) -> List[ModelResult]:
    """
    Evaluate the model over a sequence of air temperatures.

    Parameters
    ----------
    site : SiteConfig
        Site parameters
    weather : WeatherConfig
        Weather parameters
    temperatures : iterable of float, optional
        Air temperature samples [°C]. Uses default_temperatures() if not
        provided.

    Returns
    -------
    list of ModelResult
        One result per sample, in sample order
    """
    if temperatures is None:
        temperatures = default_temperatures()

    return [evaluate(site, weather, t) for t in temperatures]


def collect_series(results: Sequence[ModelResult],
                   names: Sequence[str] = OUTPUT_SERIES) -> Dict[str, np.ndarray]:
    """
    Gather named fields of a sweep into arrays.

    Parameters
    ----------
    results : sequence of ModelResult
        Sweep output
    names : sequence of str
        ModelResult field names to collect

    Returns
    -------
    dict
        Field name -> array with one value per result
    """
    n = len(results)
    outputs = {name: np.zeros(n) for name in names}

    for i, result in enumerate(results):
        for name in names:
            outputs[name][i] = getattr(result, name)

    return outputs


class SnowMeltModel:
    """
    Snowmelt model bound to one site and weather configuration.

    Examples
    --------
    >>> model = SnowMeltModel(SiteConfig(forest_fraction=0.5))
    >>> result = model.evaluate(10.0)
    >>> series = model.run_series()
    """

    def __init__(self, site: Optional[SiteConfig] = None,
                 weather: Optional[WeatherConfig] = None):
        """
        Initialize snowmelt model.

        Parameters
        ----------
        site : SiteConfig, optional
            Site parameters. Uses defaults if not provided.
        weather : WeatherConfig, optional
            Weather parameters. Uses defaults if not provided.
        """
        self.site = site if site else SiteConfig()
        self.weather = weather if weather else WeatherConfig()

    def evaluate(self, air_temp: float, diagnostics: bool = False,
                 sink=None) -> ModelResult:
        """Evaluate at a single air temperature [°C]."""
        return evaluate(self.site, self.weather, air_temp,
                        diagnostics=diagnostics, sink=sink)

    def run(self, temperatures: Optional[Iterable[float]] = None) -> List[ModelResult]:
        """Evaluate over a sequence of air temperatures [°C]."""
        return run_sweep(self.site, self.weather, temperatures)

    def run_series(self, temperatures: Optional[Iterable[float]] = None,
                   names: Sequence[str] = OUTPUT_SERIES) -> Dict[str, np.ndarray]:
        """Evaluate a sweep and return the named output series."""
        return collect_series(self.run(temperatures), names)
