"""
Delimited-file output of sweep series.

Each named series is one row: the series name followed by its values.
Floats are written at full precision and parsed back with round-trip
precision, so a write/read cycle reproduces the values exactly.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence

import numpy as np
import pandas as pd

from .errors import SeriesLengthError


def series_frame(series: Mapping[str, Sequence[float]]) -> pd.DataFrame:
    """Build a frame with one row per named series."""
    arrays = {name: np.asarray(values, dtype=float) for name, values in series.items()}

    lengths = {name: len(values) for name, values in arrays.items()}
    if len(set(lengths.values())) > 1:
        raise SeriesLengthError(lengths)

    return pd.DataFrame.from_dict(arrays, orient="index")


def write_series_csv(series: Mapping[str, Sequence[float]], path: str | Path) -> Path:
    """Write named series to `path`, one row each.

    Args:
        series: Mapping of series name to values. All series must share
            one length.
        path: Output file path.

    Returns:
        The path written.

    Raises:
        SeriesLengthError: If the series differ in length.
        OSError: If the file cannot be written.
    """
    path = Path(path)
    series_frame(series).to_csv(path, header=False)
    return path


def read_series_csv(path: str | Path) -> dict[str, np.ndarray]:
    """Read series written by write_series_csv(), preserving row order."""
    frame = pd.read_csv(path, header=None, index_col=0, float_precision="round_trip")
    return {str(name): row.to_numpy(dtype=float) for name, row in frame.iterrows()}
