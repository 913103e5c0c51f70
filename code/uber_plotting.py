# -*- coding: utf-8 -*-
"""
Created on Sun Oct 18 09:21:33 2026

@author: epicx

Bar charts for the Uber trip aggregates.

Each plot function takes one aggregate table (see uber_aggregate.py) and
writes a PNG at a fixed pixel size / DPI from config.py, returning the
path written. An empty or malformed table raises before any figure is
created, so no image is produced.
"""

from pathlib import Path

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import matplotlib.ticker as ticker

from config import (
    BASE_PLOT,
    COLORS,
    COUNT_COL,
    DAY_PLOT,
    HOUR_GROUP_COLORS,
    HOUR_GROUP_LEVELS,
    HOURLY_PLOT,
    MONTH_HOUR_PLOT,
    MONTH_WEEKDAY_PLOT,
)

BAR_COLOR = "steelblue"

THOUSANDS = ticker.StrMethodFormatter("{x:,.0f}")

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _ensure_out_dir(out_dir: Path | str) -> Path:
    """
    Ensure output directory exists; accept either Path or string.
    """
    if isinstance(out_dir, str):
        out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    return out_dir


def _check_table(table: pd.DataFrame, cols: list[str], what: str) -> None:
    missing = [c for c in cols if c not in table.columns]
    if missing:
        raise KeyError(f"{what}: expected columns {missing} not found.")
    if table.empty:
        raise ValueError(f"{what}: aggregate table is empty, nothing to plot.")


def _new_figure(spec: dict):
    """Figure sized so that the saved PNG is exactly width_px x height_px."""
    dpi = spec["dpi"]
    figsize = (spec["width_px"] / dpi, spec["height_px"] / dpi)
    return plt.subplots(figsize=figsize, dpi=dpi)


def _save(fig, out_dir: Path | str, spec: dict) -> Path:
    out_dir = _ensure_out_dir(out_dir)
    outfile = out_dir / spec["filename"]
    # no bbox_inches="tight": that would change the pixel size
    fig.savefig(outfile, dpi=spec["dpi"])
    plt.close(fig)
    print(f"Saved {outfile}")
    return outfile


def _simple_bars(ax, labels, values, color, fontsize):
    x = np.arange(len(labels))
    ax.bar(x, values, color=color)
    ax.set_xticks(x)
    ax.set_xticklabels([str(v) for v in labels])
    ax.yaxis.set_major_formatter(THOUSANDS)
    ax.tick_params(labelsize=fontsize)
    ax.grid(True, axis="y", alpha=0.3)


# ---------------------------------------------------------------------------
# Core charts
# ---------------------------------------------------------------------------

def plot_hourly_trips(hourly: pd.DataFrame, out_dir: Path | str = ".") -> Path:
    """
    Trips Every Hour (subtitle "aggregated today"): one bar per hour in
    the table, ascending, single fill color, no legend.
    """
    _check_table(hourly, ["hour", COUNT_COL], "Hourly chart")

    table = hourly.sort_values("hour")

    # 5 x 2.67 in at 300 dpi -- fonts are sized for that
    fig, ax = _new_figure(HOURLY_PLOT)
    _simple_bars(ax, table["hour"], table[COUNT_COL].to_numpy(), BAR_COLOR, fontsize=4)

    fig.suptitle("Trips Every Hour", fontsize=7, ha="center")
    ax.set_title("aggregated today", fontsize=5, loc="center")
    ax.set_xlabel("hour", fontsize=5)
    ax.set_ylabel(COUNT_COL, fontsize=5)

    fig.tight_layout(rect=[0, 0, 1, 0.93])
    return _save(fig, out_dir, HOURLY_PLOT)


def plot_month_hour_trips(month_hour: pd.DataFrame, out_dir: Path | str = ".") -> Path:
    """
    Trips by Hour and Month: one stacked bar per month (April -> September),
    segments colored by hour_group, legend without a title.
    """
    _check_table(month_hour, ["month", "hour_group", COUNT_COL], "Month/hour chart")

    stacked = (
        month_hour.groupby(["month", "hour_group"], observed=True)[COUNT_COL]
        .sum()
        .unstack("hour_group", fill_value=0)
        .sort_index()
    )
    groups = [g for g in HOUR_GROUP_LEVELS if g in stacked.columns]

    fig, ax = _new_figure(MONTH_HOUR_PLOT)
    x = np.arange(len(stacked.index))
    bottom = np.zeros(len(stacked.index))

    for group in groups:
        values = stacked[group].to_numpy(dtype=float)
        ax.bar(x, values, bottom=bottom, color=HOUR_GROUP_COLORS[group], label=group)
        bottom += values

    ax.set_xticks(x)
    ax.set_xticklabels([str(m) for m in stacked.index])
    ax.yaxis.set_major_formatter(THOUSANDS)
    ax.set_xlabel("month")
    ax.set_ylabel(COUNT_COL)
    ax.set_title("Trips by Hour and Month", loc="center")
    ax.legend(title=None)
    ax.grid(True, axis="y", alpha=0.3)

    fig.tight_layout()
    return _save(fig, out_dir, MONTH_HOUR_PLOT)


# ---------------------------------------------------------------------------
# Extra charts (--extra-plots)
# ---------------------------------------------------------------------------

def plot_trips_by_day(by_day: pd.DataFrame, out_dir: Path | str = ".") -> Path:
    _check_table(by_day, ["day", COUNT_COL], "Day chart")

    table = by_day.sort_values("day")
    fig, ax = _new_figure(DAY_PLOT)
    _simple_bars(ax, table["day"], table[COUNT_COL].to_numpy(), BAR_COLOR, fontsize=10)
    ax.set_title("Trips Every Day", loc="center")
    ax.set_xlabel("day")
    ax.set_ylabel(COUNT_COL)

    fig.tight_layout()
    return _save(fig, out_dir, DAY_PLOT)


def plot_month_weekday_trips(month_weekday: pd.DataFrame, out_dir: Path | str = ".") -> Path:
    """Grouped bars: months on the x-axis, one bar per weekday."""
    _check_table(month_weekday, ["month", "dayofweek", COUNT_COL], "Month/weekday chart")

    wide = (
        month_weekday.groupby(["month", "dayofweek"], observed=True)[COUNT_COL]
        .sum()
        .unstack("dayofweek", fill_value=0)
        .sort_index()
    )
    weekdays = list(wide.columns)

    fig, ax = _new_figure(MONTH_WEEKDAY_PLOT)
    x = np.arange(len(wide.index))
    width = 0.8 / max(len(weekdays), 1)

    for i, dow in enumerate(weekdays):
        offset = (i - (len(weekdays) - 1) / 2) * width
        ax.bar(x + offset, wide[dow].to_numpy(), width=width,
               color=COLORS[i % len(COLORS)], label=str(dow))

    ax.set_xticks(x)
    ax.set_xticklabels([str(m) for m in wide.index])
    ax.yaxis.set_major_formatter(THOUSANDS)
    ax.set_xlabel("month")
    ax.set_ylabel(COUNT_COL)
    ax.set_title("Trips by Day and Month", loc="center")
    ax.legend(title=None)
    ax.grid(True, axis="y", alpha=0.3)

    fig.tight_layout()
    return _save(fig, out_dir, MONTH_WEEKDAY_PLOT)


def plot_trips_by_base(by_base: pd.DataFrame, out_dir: Path | str = ".") -> Path:
    _check_table(by_base, ["Base", COUNT_COL], "Base chart")

    table = by_base.sort_values("Base")
    fig, ax = _new_figure(BASE_PLOT)
    _simple_bars(ax, table["Base"], table[COUNT_COL].to_numpy(), BAR_COLOR, fontsize=10)
    ax.set_title("Trips by Base", loc="center")
    ax.set_xlabel("Base")
    ax.set_ylabel(COUNT_COL)

    fig.tight_layout()
    return _save(fig, out_dir, BASE_PLOT)
