"""
Temperature-vs-output plots for a sweep.
"""

import matplotlib.pyplot as plt

LABELS = {
    'total_water_output': 'Water output (energy balance)',
    'total_ablation': 'Ablation (energy balance)',
    'total_melt': 'Melt (energy balance)',
    'ti_total_melt': 'Melt (temperature index)',
    'ti_total_water_output': 'Water output (temperature index)',
}


def plot_sweep(series, path=None, ax=None, x='air_temp'):
    """
    Plot every output series against air temperature.

    Parameters
    ----------
    series : dict
        Series name -> values, must include `x`
    path : str or Path, optional
        Save the figure here
    ax : matplotlib Axes, optional
        Axes to draw into. A new figure is created if not provided.
    x : str
        Name of the temperature series

    Returns
    -------
    matplotlib.axes.Axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))
    else:
        fig = ax.figure

    temps = series[x]
    for name, values in series.items():
        if name == x:
            continue
        ax.plot(temps, values, label=LABELS.get(name, name), linewidth=1.5)

    ax.set_xlabel('Air temperature [°C]')
    ax.set_ylabel('Rate [mm/day]')
    ax.set_title('Snowmelt: energy balance vs temperature index')
    ax.legend(loc='upper left', fontsize=8)
    ax.grid(True, alpha=0.3)

    if path is not None:
        fig.tight_layout()
        fig.savefig(path, dpi=150)

    return ax
