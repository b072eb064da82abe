"""
Human-readable input/output report for a single model evaluation.
"""

import logging

logger = logging.getLogger(__name__)


def format_report(site, weather, result):
    """
    Format the inputs and outputs of one evaluation as text.

    Parameters
    ----------
    site : SiteConfig
    weather : WeatherConfig
    result : ModelResult

    Returns
    -------
    str
    """
    lines = [
        "---Simple Snow Melt Model---",
        "",
        "INPUT:",
        "",
        "Site:",
        f"Measurement Height: {site.measurement_height}",
        f"Roughness Height: {site.roughness_height}",
        f"Forest Cover: {site.forest_fraction}",
        f"Albedo: {site.albedo}",
        f"Snowpack Density: {site.snow_density}",
        "",
        "Weather:",
        f"Clear Sky Solar Rad: {weather.clear_sky_rad}",
        f"Cloud Fraction: {weather.cloud_fraction}",
        f"Air Temp: {result.air_temp}",
        f"Relative Humidity: {weather.relative_humidity}",
        f"Wind Speed: {weather.wind_speed}",
        f"Rain Rate: {weather.rain_rate}",
        f"Atmos Pressure: {weather.pressure}",
        "",
        "OUTPUT:",
        "",
        "Energy Balance Approach:",
        f"Total Melt: {result.total_melt}",
        f"Total Ablation: {result.total_ablation}",
        f"Total Water Output: {result.total_water_output}",
        "",
        "Temperature Index Approach:",
        f"Total Melt: {result.ti_total_melt}",
        f"Total Water Output: {result.ti_total_water_output}",
        "",
        "---Complete---",
    ]
    return "\n".join(lines) + "\n"


def write_report(report, sink):
    """
    Write a report to a text sink.

    A failing sink is logged and ignored; diagnostics never affect results.
    """
    try:
        sink.write(report)
        flush = getattr(sink, "flush", None)
        if flush is not None:
            flush()
    except Exception as e:
        logger.warning("Could not write diagnostic report: %s", e)
