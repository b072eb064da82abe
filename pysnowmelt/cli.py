"""
Run the snowmelt model over a range of air temperatures.

Evaluates the energy-balance and temperature-index approaches at integer
air temperatures 0 .. max-temp - 1 and saves the output series to a
delimited file.

Usage:
    pysnowmelt
    pysnowmelt --max-temp 30 --output melt.csv --plot melt.png
    pysnowmelt --forest-fraction 0.2 --wind-speed 3 --diagnostics 10

Examples:
    # Default site and weather, 0-49°C, saved to model_output.csv
    pysnowmelt

    # Open site with rain, print the full report at 5°C
    pysnowmelt --forest-fraction 0 --rain-rate 10 --diagnostics 5
"""

import argparse
import sys
from dataclasses import fields, replace

import matplotlib.pyplot as plt

from .config import SiteConfig, WeatherConfig
from .errors import DomainError
from .io import write_series_csv
from .model import SnowMeltModel, default_temperatures, collect_series
from .plotting import plot_sweep


def _add_config_arguments(parser, config_cls, title):
    group = parser.add_argument_group(title)
    for f in fields(config_cls):
        group.add_argument(f"--{f.name.replace('_', '-')}", dest=f.name,
                           type=float, default=None,
                           help=f"(default: {f.default})")


def _override(config, args):
    changes = {f.name: getattr(args, f.name) for f in fields(config)
               if getattr(args, f.name) is not None}
    return replace(config, **changes)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='pysnowmelt',
        description='Energy-balance and temperature-index snowmelt over a temperature sweep.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--max-temp', type=int, default=50,
                        help='Sweep 0 .. max-temp - 1 °C (default: 50)')
    parser.add_argument('--output', type=str, default='model_output.csv',
                        help='Output CSV file (default: model_output.csv)')
    parser.add_argument('--plot', type=str, default=None,
                        help='Save a plot of the output series to this file')
    parser.add_argument('--diagnostics', type=float, default=None, metavar='TEMP',
                        help='Print the input/output report at this air temperature')

    _add_config_arguments(parser, SiteConfig, 'site')
    _add_config_arguments(parser, WeatherConfig, 'weather')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        site = _override(SiteConfig(), args)
        weather = _override(WeatherConfig(), args)
        model = SnowMeltModel(site, weather)

        if args.diagnostics is not None:
            model.evaluate(args.diagnostics, diagnostics=True)

        results = model.run(default_temperatures(args.max_temp))
    except DomainError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    series = collect_series(results)
    out = write_series_csv(series, args.output)
    print(f"Saved {len(results)} samples: {out}")

    if args.plot:
        ax = plot_sweep(series, path=args.plot)
        plt.close(ax.figure)
        print(f"Plot saved: {args.plot}")

    if results:
        last = results[-1]
        print(f"\nAt {last.air_temp:.1f}°C:")
        print(f"  Energy balance:    melt {last.total_melt:.2f}, "
              f"water output {last.total_water_output:.2f} mm/day")
        print(f"  Temperature index: melt {last.ti_total_melt:.2f}, "
              f"water output {last.ti_total_water_output:.2f} mm/day")

    return 0


if __name__ == '__main__':
    sys.exit(main())
