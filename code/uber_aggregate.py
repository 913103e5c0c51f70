# -*- coding: utf-8 -*-
"""
Created on Sat Oct 17 21:14:09 2026

@author: epicx

uber_aggregate.py

Trip-count tables over the cleaned Uber trip data (GROUP BY ... COUNT(*)).

Every table has one row per key combination actually present in the data,
sorted ascending by its keys, with the count in a "Total" column. Raw
counts only -- no normalization.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from config import COUNT_COL, HOUR_GROUPS, HOUR_GROUP_LEVELS


def _count_by(df: pd.DataFrame, keys: list[str]) -> pd.DataFrame:
    missing = [k for k in keys if k not in df.columns]
    if missing:
        raise KeyError(f"Expected columns {missing} not found in DataFrame.")

    # observed=True: categorical levels with no rows do not produce a row
    counts = (
        df.groupby(keys, observed=True, sort=True)
        .size()
        .rename(COUNT_COL)
        .reset_index()
    )
    counts[COUNT_COL] = counts[COUNT_COL].astype("int64")
    return counts


def hour_group_for(hour: int) -> str:
    """
    Static bucket rule:
        0-5   -> "12am - 6am"
        6-11  -> "7am - 12pm"
        12-17 -> "1pm - 6pm"
        18-23 -> "7pm - 12am"
    """
    hour = int(hour)
    for label, lo, hi in HOUR_GROUPS:
        if lo <= hour <= hi:
            return label
    raise ValueError(f"Hour out of range 0-23: {hour}")


def add_hour_group(df: pd.DataFrame, hour_col: str = "hour") -> pd.DataFrame:
    df = df.copy()
    groups = [hour_group_for(h) for h in df[hour_col]]
    df["hour_group"] = pd.Categorical(groups, categories=HOUR_GROUP_LEVELS, ordered=True)
    return df


def aggregate_by_hour(df: pd.DataFrame) -> pd.DataFrame:
    """Trips per hour of day: columns hour, Total."""
    return _count_by(df, ["hour"])


def aggregate_by_month_hour(df: pd.DataFrame) -> pd.DataFrame:
    """Trips per (month, hour): columns month, hour, Total, hour_group."""
    counts = _count_by(df, ["month", "hour"])
    return add_hour_group(counts)


def aggregate_by_day(df: pd.DataFrame) -> pd.DataFrame:
    """Trips per day of month: columns day, Total."""
    return _count_by(df, ["day"])


def aggregate_by_month_weekday(df: pd.DataFrame) -> pd.DataFrame:
    """Trips per (month, dayofweek): columns month, dayofweek, Total."""
    return _count_by(df, ["month", "dayofweek"])


def aggregate_by_base(df: pd.DataFrame) -> pd.DataFrame:
    """Trips per dispatching base: columns Base, Total."""
    return _count_by(df, ["Base"])


def write_tables(tables: dict[str, pd.DataFrame], out_dir: Path) -> list[Path]:
    """Write each aggregate to <out_dir>/<name>.parquet."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for name, table in tables.items():
        outfile = out_dir / f"{name}.parquet"
        table.to_parquet(outfile, index=False)
        print(f"Saved {outfile}")
        written.append(outfile)
    return written
