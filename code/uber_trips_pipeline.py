# -*- coding: utf-8 -*-
"""
Created on Sun Oct 18 10:37:48 2026

@author: epicx

uber_trips_pipeline.py

Load -> clean -> derive -> aggregate -> plot for the Uber April-September
2014 raw trip exports.

Usage (from repo root):

    python code/uber_trips_pipeline.py
    python code/uber_trips_pipeline.py --data-dir data/raw/uber --out-dir plots
    python code/uber_trips_pipeline.py --save-tables --extra-plots

Inputs default to the current working directory, and so do the outputs:
    hourly_trips_plot.png       (1500x800 px @ 300 dpi)
    month_hour_trips_plot.png   (1900x900 px @ 100 dpi)
Existing files are overwritten.
"""
from __future__ import annotations

import argparse
from pathlib import Path

import pandas as pd

from config import COLORS, TABLES_SUBDIR
from uber_loader import load_trips
from uber_features import clean_trips_with_report, format_report
from uber_aggregate import (
    aggregate_by_base,
    aggregate_by_day,
    aggregate_by_hour,
    aggregate_by_month_hour,
    aggregate_by_month_weekday,
    write_tables,
)
from uber_plotting import (
    plot_hourly_trips,
    plot_month_hour_trips,
    plot_month_weekday_trips,
    plot_trips_by_base,
    plot_trips_by_day,
)


def run_pipeline(
    data_dir: Path | str = ".",
    out_dir: Path | str = ".",
    save_tables: bool = False,
    extra_plots: bool = False,
) -> dict[str, Path]:
    """
    Run the whole batch once. Any missing input, schema mismatch or empty
    aggregate raises and aborts the run.

    Returns {name: path} for every file written.
    """
    out_dir = Path(out_dir)

    print(COLORS)

    trips = load_trips(data_dir)
    print(f"Combined data: {trips.shape[0]:,} rows x {trips.shape[1]} columns")

    cleaned, report = clean_trips_with_report(trips)
    print(format_report(report))
    print(f"Cleaned data: {cleaned.shape[0]:,} rows x {cleaned.shape[1]} columns")

    hourly = aggregate_by_hour(cleaned)
    month_hour = aggregate_by_month_hour(cleaned)

    with pd.option_context("display.max_rows", None):
        print(hourly)

    written = {
        "hourly_plot": plot_hourly_trips(hourly, out_dir),
        "month_hour_plot": plot_month_hour_trips(month_hour, out_dir),
    }

    tables = {"hourly": hourly, "month_hour": month_hour}

    if extra_plots:
        by_day = aggregate_by_day(cleaned)
        month_weekday = aggregate_by_month_weekday(cleaned)
        by_base = aggregate_by_base(cleaned)

        written["day_plot"] = plot_trips_by_day(by_day, out_dir)
        written["month_weekday_plot"] = plot_month_weekday_trips(month_weekday, out_dir)
        written["base_plot"] = plot_trips_by_base(by_base, out_dir)

        tables.update({"day": by_day, "month_weekday": month_weekday, "base": by_base})

    if save_tables:
        for path in write_tables(tables, out_dir / TABLES_SUBDIR):
            written[f"table_{path.stem}"] = path

    return written


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Aggregate Uber 2014 raw trips by hour and month, and plot them."
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path.cwd(),
        help="Directory holding uber-raw-data-<mon>14.csv (default: cwd).",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=Path.cwd(),
        help="Directory for the PNG charts (default: cwd).",
    )
    parser.add_argument(
        "--save-tables",
        action="store_true",
        help="Also write the aggregate tables as parquet under <out-dir>/tables.",
    )
    parser.add_argument(
        "--extra-plots",
        action="store_true",
        help="Also plot trips by day, by month and weekday, and by base.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    run_pipeline(
        data_dir=args.data_dir,
        out_dir=args.out_dir,
        save_tables=args.save_tables,
        extra_plots=args.extra_plots,
    )


if __name__ == "__main__":
    main()
