# -*- coding: utf-8 -*-
"""
Created on Sat Oct 17 19:12:40 2026

@author: epicx

Project-wide constants for the Uber 2014 trip pipeline.
"""

# ---------------------------------------------------------------------------
# Raw input files
# ---------------------------------------------------------------------------

YEAR_SUFFIX = "14"
MONTH_CODES = ["apr", "may", "jun", "jul", "aug", "sep"]

RAW_FILE_TEMPLATE = "uber-raw-data-{mon}{yy}.csv"

DATETIME_COL = "Date/Time"
REQUIRED_COLS = [DATETIME_COL, "Lat", "Lon", "Base"]

# e.g. "04/01/2014 00:11:00"
DATETIME_FORMAT = "%m/%d/%Y %H:%M:%S"


def raw_file_names() -> list[str]:
    """The six monthly CSV names, April -> September."""
    return [RAW_FILE_TEMPLATE.format(mon=m, yy=YEAR_SUFFIX) for m in MONTH_CODES]


# ---------------------------------------------------------------------------
# Bounded levels for the derived fields
# ---------------------------------------------------------------------------

MONTH_LEVELS = ["Apr", "May", "Jun", "Jul", "Aug", "Sep"]
WEEKDAY_LEVELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
HOUR_LEVELS = list(range(24))
MINUTE_LEVELS = list(range(60))
SECOND_LEVELS = list(range(60))
DAY_LEVELS = list(range(1, 32))

# (label, first hour, last hour) -- inclusive bounds
HOUR_GROUPS = [
    ("12am - 6am", 0, 5),
    ("7am - 12pm", 6, 11),
    ("1pm - 6pm", 12, 17),
    ("7pm - 12am", 18, 23),
]
HOUR_GROUP_LEVELS = [label for label, _, _ in HOUR_GROUPS]

HOUR_GROUP_COLORS = {
    "12am - 6am": "red",
    "7am - 12pm": "blue",
    "1pm - 6pm": "green",
    "7pm - 12am": "purple",
}

# Printed at the start of a run; also used by the extra charts
COLORS = ["#CC1011", "#665555", "#05a399", "#cfcaca", "#f5e840", "#0683c9", "#e075b0"]

# ---------------------------------------------------------------------------
# Chart exports
# ---------------------------------------------------------------------------

HOURLY_PLOT = {
    "filename": "hourly_trips_plot.png",
    "width_px": 1500,
    "height_px": 800,
    "dpi": 300,
}

MONTH_HOUR_PLOT = {
    "filename": "month_hour_trips_plot.png",
    "width_px": 1900,
    "height_px": 900,
    "dpi": 100,
}

# Extra charts (only written with --extra-plots)
DAY_PLOT = {"filename": "day_trips_plot.png", "width_px": 1900, "height_px": 900, "dpi": 100}
MONTH_WEEKDAY_PLOT = {"filename": "month_weekday_trips_plot.png", "width_px": 1900, "height_px": 900, "dpi": 100}
BASE_PLOT = {"filename": "base_trips_plot.png", "width_px": 1500, "height_px": 900, "dpi": 100}

TABLES_SUBDIR = "tables"

# count column of every aggregate table
COUNT_COL = "Total"
