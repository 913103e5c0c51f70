"""
Uber 2014 trip pipeline - pytest configuration and fixtures

Provides:
- Non-interactive matplotlib backend
- Synthetic trip frames
- A directory of six small monthly raw CSV files
"""

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from config import raw_file_names


def _make_trips(timestamps, base="B02512"):
    """Raw-shaped trip frame with one row per timestamp string."""
    return pd.DataFrame({
        "Date/Time": list(timestamps),
        "Lat": [40.7690] * len(timestamps),
        "Lon": [-73.9549] * len(timestamps),
        "Base": [base] * len(timestamps),
    })


@pytest.fixture
def make_trips():
    """Factory: make_trips(timestamps, base="B02512") -> raw-shaped trip frame."""
    return _make_trips


@pytest.fixture
def one_trip_per_hour():
    """24 trips on 2014-04-01, one in each hour 0-23."""
    return _make_trips([f"04/01/2014 {h:02d}:15:30" for h in range(24)])


@pytest.fixture
def raw_dir(tmp_path):
    """
    Six monthly files in tmp_path. Month number m (4..9) gets m - 2 rows,
    so April has 2 rows and September 7 (27 in total).

    Returns:
        (directory, {filename: row count})
    """
    counts = {}
    for month, name in zip(range(4, 10), raw_file_names()):
        n_rows = month - 2
        stamps = [f"{month}/{day + 1}/2014 {(day * 5) % 24}:0{day}:00" for day in range(n_rows)]
        _make_trips(stamps, base=f"B0251{month % 2}").to_csv(tmp_path / name, index=False)
        counts[name] = n_rows
    return tmp_path, counts
