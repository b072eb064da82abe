"""Tests for writing and reading sweep series as delimited files."""

from pathlib import Path

import numpy as np
import pytest

from pysnowmelt import OUTPUT_SERIES, SeriesLengthError, SiteConfig, WeatherConfig, collect_series, run_sweep
from pysnowmelt.io import read_series_csv, series_frame, write_series_csv


class TestWriteSeriesCsv:
    """Tests for the tabular writer."""

    def test_one_row_per_series(self, tmp_path: Path) -> None:
        """Each series is written as one labelled row."""
        path = write_series_csv({"a": [1.0, 2.0], "b": [3.0, 4.0]}, tmp_path / "out.csv")

        lines = path.read_text().strip().splitlines()
        assert lines == ["a,1.0,2.0", "b,3.0,4.0"]

    def test_rejects_mismatched_lengths(self, tmp_path: Path) -> None:
        """Series of different lengths raise SeriesLengthError."""
        with pytest.raises(SeriesLengthError) as excinfo:
            write_series_csv({"a": [1.0, 2.0], "b": [3.0]}, tmp_path / "out.csv")

        assert excinfo.value.lengths == {"a": 2, "b": 1}
        assert not (tmp_path / "out.csv").exists()

    def test_missing_directory_raises_oserror(self, tmp_path: Path) -> None:
        """File-system failures surface to the caller."""
        with pytest.raises(OSError):
            write_series_csv({"a": [1.0]}, tmp_path / "missing" / "out.csv")

    def test_series_frame_shape(self) -> None:
        """The frame has one row per series and one column per sample."""
        frame = series_frame({"x": np.arange(5.0), "y": np.ones(5)})

        assert frame.shape == (2, 5)
        assert list(frame.index) == ["x", "y"]


class TestRoundTrip:
    """Tests for write/read cycles of sweep output."""

    def test_sweep_series_round_trip(self, tmp_path: Path, site: SiteConfig, weather: WeatherConfig) -> None:
        """The six published series are reproduced after a write/read cycle."""
        series = collect_series(run_sweep(site, weather))
        path = write_series_csv(series, tmp_path / "model_output.csv")

        loaded = read_series_csv(path)

        assert list(loaded) == list(OUTPUT_SERIES)
        for name in OUTPUT_SERIES:
            np.testing.assert_allclose(loaded[name], series[name], rtol=1e-12, atol=0.0)

    def test_awkward_floats_round_trip(self, tmp_path: Path) -> None:
        """Values without short decimal forms survive unchanged."""
        values = np.array([1.0 / 3.0, 2.0 ** -30, 1e300, -0.1 - 0.2])
        path = write_series_csv({"v": values}, tmp_path / "v.csv")

        np.testing.assert_allclose(read_series_csv(path)["v"], values, rtol=1e-12, atol=0.0)
