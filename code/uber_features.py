# -*- coding: utf-8 -*-
"""
Created on Sat Oct 17 20:05:51 2026

@author: epicx

uber_features.py

Calendar / time-of-day features for the combined Uber trip table.

Behavior:
1. Parse "Date/Time" once with the fixed format MM/DD/YYYY HH:MM:SS.
   Unparseable values become NaT.
2. From that single parsed value derive:
     Time (HH:MM:SS string), day, month, year, dayofweek,
     second, minute, hour
   day/month/dayofweek/hour/minute/second are ordered categoricals with
   fixed levels; values outside the levels become missing.
3. Drop every row with any missing value (original or derived column).
"""
from __future__ import annotations

import pandas as pd

from config import (
    DATETIME_COL,
    DATETIME_FORMAT,
    DAY_LEVELS,
    HOUR_LEVELS,
    MINUTE_LEVELS,
    MONTH_LEVELS,
    SECOND_LEVELS,
    WEEKDAY_LEVELS,
)

# calendar month number -> level (April..September only)
MONTH_NUMBER_TO_LEVEL = dict(zip(range(4, 10), MONTH_LEVELS))

# pandas dayofweek: 0=Mon, 6=Sun
DAYOFWEEK_TO_LEVEL = {
    0: "Mon", 1: "Tue", 2: "Wed", 3: "Thu", 4: "Fri", 5: "Sat", 6: "Sun",
}

DERIVED_COLS = ["Time", "day", "month", "year", "dayofweek", "second", "minute", "hour"]


def _as_levels(values: pd.Series, levels: list) -> pd.Categorical:
    return pd.Categorical(values, categories=levels, ordered=True)


def parse_datetimes(s: pd.Series) -> pd.Series:
    """Parse MM/DD/YYYY HH:MM:SS strings; anything else -> NaT."""
    return pd.to_datetime(s, format=DATETIME_FORMAT, errors="coerce")


def add_time_features(df: pd.DataFrame) -> pd.DataFrame:
    """
    Return a copy of df with Date/Time parsed and the derived columns added.
    Rows whose timestamp did not parse get missing values in every derived
    column; nothing is dropped here.
    """
    if DATETIME_COL not in df.columns:
        raise KeyError(f"Expected column '{DATETIME_COL}' not found in DataFrame.")

    df = df.copy()
    ts = parse_datetimes(df[DATETIME_COL])
    df[DATETIME_COL] = ts

    df["Time"] = ts.dt.strftime("%H:%M:%S")

    df["day"] = _as_levels(ts.dt.day, DAY_LEVELS)
    df["month"] = _as_levels(ts.dt.month.map(MONTH_NUMBER_TO_LEVEL), MONTH_LEVELS)
    df["year"] = ts.dt.year.astype("Int64")
    df["dayofweek"] = _as_levels(ts.dt.dayofweek.map(DAYOFWEEK_TO_LEVEL), WEEKDAY_LEVELS)

    df["second"] = _as_levels(ts.dt.second, SECOND_LEVELS)
    df["minute"] = _as_levels(ts.dt.minute, MINUTE_LEVELS)
    df["hour"] = _as_levels(ts.dt.hour, HOUR_LEVELS)

    return df


def clean_trips_with_report(df: pd.DataFrame) -> tuple[pd.DataFrame, dict]:
    """
    Derive features, then drop incomplete rows.

    Returns (cleaned, report) where report has:
      rows_in, rows_out, rows_dropped, bad_timestamps,
      missing_by_column (missing count per column before the drop,
      columns with no missing values omitted)
    """
    featured = add_time_features(df)

    missing = featured.isna().sum()
    missing_by_column = {col: int(n) for col, n in missing.items() if n > 0}

    cleaned = featured.dropna().reset_index(drop=True)

    report = {
        "rows_in": int(len(featured)),
        "rows_out": int(len(cleaned)),
        "rows_dropped": int(len(featured) - len(cleaned)),
        "bad_timestamps": int(featured[DATETIME_COL].isna().sum()),
        "missing_by_column": missing_by_column,
    }
    return cleaned, report


def clean_trips(df: pd.DataFrame) -> pd.DataFrame:
    """Derive features and silently drop every incomplete row."""
    cleaned, _ = clean_trips_with_report(df)
    return cleaned


def format_report(report: dict) -> str:
    lines = [
        f"Rows in:        {report['rows_in']:,}",
        f"Rows out:       {report['rows_out']:,}",
        f"Rows dropped:   {report['rows_dropped']:,}",
        f"Bad timestamps: {report['bad_timestamps']:,}",
    ]
    for col, n in report["missing_by_column"].items():
        lines.append(f"  missing {col}: {n:,}")
    return "\n".join(lines)
