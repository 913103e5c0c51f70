# -*- coding: utf-8 -*-
"""
Created on Sat Oct 17 19:40:02 2026

@author: epicx

uber_loader.py

Read the six monthly Uber 2014 raw CSV exports of the form:
    uber-raw-data-<mon>14.csv

and combine them into one DataFrame. Row order is file order (April ->
September), then the original row order within each file.

Any missing file or schema mismatch aborts the whole load.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd

from config import REQUIRED_COLS, raw_file_names


def default_raw_paths(data_dir: Path | str = ".") -> list[Path]:
    """Paths of the six monthly files inside data_dir."""
    data_dir = Path(data_dir)
    return [data_dir / name for name in raw_file_names()]


def load_month(path: Path) -> pd.DataFrame:
    """
    Load one monthly CSV and check that the required columns are present.
    Date/Time and Base are kept as strings; parsing happens later.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    df = pd.read_csv(path, dtype={"Date/Time": "string", "Base": "string"})

    missing = [c for c in REQUIRED_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"{path.name}: missing required columns {missing}")

    return df


def combine_months(paths: Iterable[Path]) -> pd.DataFrame:
    """
    Read every file in paths and concatenate them.

    All files must share the column schema of the first one (same names,
    same order), otherwise a ValueError names the offending file.
    """
    dfs = []
    expected_cols = None

    for fp in paths:
        fp = Path(fp)
        print(f"Reading {fp} ...")
        df = load_month(fp)

        if expected_cols is None:
            expected_cols = list(df.columns)
        elif list(df.columns) != expected_cols:
            extra = sorted(set(df.columns) - set(expected_cols))
            absent = sorted(set(expected_cols) - set(df.columns))
            raise ValueError(
                f"{fp.name}: schema mismatch "
                f"(expected {expected_cols}, extra={extra}, missing={absent})"
            )

        dfs.append(df)

    if not dfs:
        raise ValueError("No input files were given to combine.")

    return pd.concat(dfs, ignore_index=True)


def load_trips(data_dir: Path | str = ".") -> pd.DataFrame:
    """Load and combine April-September 2014 from data_dir."""
    return combine_months(default_raw_paths(data_dir))
