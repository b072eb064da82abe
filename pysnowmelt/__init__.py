"""
PySnowMelt: snowmelt from an energy balance and a temperature index.

Computes snowpack melt, ablation and water output for one site and
weather configuration, at a single air temperature or over a sweep.
General formulas from Dingman (2015).

Usage
-----
>>> from pysnowmelt import SiteConfig, WeatherConfig, evaluate, run_sweep
>>>
>>> site = SiteConfig(forest_fraction=0.8, albedo=0.55, snow_density=500.0)
>>> weather = WeatherConfig(wind_speed=6.0, cloud_fraction=0.5)
>>>
>>> result = evaluate(site, weather, air_temp=10.0)
>>> results = run_sweep(site, weather)          # 0 .. 49 °C

Approaches
----------
Energy balance:
    - Net shortwave with cloud and forest attenuation
    - Net longwave from an effective atmosphere/canopy emissivity
    - Sensible and latent transfer with Richardson number stability
    - Rain heat
    - Melt, ablation and water output from the total heat input

Temperature index:
    - Density-dependent degree-day factors, blended by forest cover
"""

from .config import SiteConfig, WeatherConfig
from .errors import PySnowMeltError, DomainError, SeriesLengthError
from .model import (ModelResult, SnowMeltModel, OUTPUT_SERIES, evaluate,
                    run_sweep, collect_series, default_temperatures)
from .turbulent import StabilityRegime, VaporExchange

__version__ = '0.1.0'
__all__ = ['SiteConfig', 'WeatherConfig', 'ModelResult', 'SnowMeltModel',
           'OUTPUT_SERIES', 'evaluate', 'run_sweep', 'collect_series',
           'default_temperatures', 'StabilityRegime', 'VaporExchange',
           'PySnowMeltError', 'DomainError', 'SeriesLengthError']
