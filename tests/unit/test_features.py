"""
Uber trip pipeline - feature derivation unit tests

Tests add_time_features / clean_trips:
- Parsing with the fixed MM/DD/YYYY HH:MM:SS format
- Derived calendar and time-of-day fields
- Dropping incomplete rows and the cleaning report
"""

import pandas as pd
import pytest

from uber_features import (
    DERIVED_COLS,
    add_time_features,
    clean_trips,
    clean_trips_with_report,
    format_report,
)


class TestAddTimeFeatures:

    def test_derived_fields_for_one_trip(self, make_trips):
        df = add_time_features(make_trips(["04/01/2014 00:11:05"]))
        row = df.iloc[0]

        assert row["Date/Time"] == pd.Timestamp("2014-04-01 00:11:05")
        assert row["Time"] == "00:11:05"
        assert row["day"] == 1
        assert row["month"] == "Apr"
        assert row["year"] == 2014
        assert row["dayofweek"] == "Tue"
        assert row["hour"] == 0
        assert row["minute"] == 11
        assert row["second"] == 5

    def test_non_padded_timestamps_parse(self, make_trips):
        df = add_time_features(make_trips(["9/30/2014 22:57:00"]))
        row = df.iloc[0]

        assert row["month"] == "Sep"
        assert row["day"] == 30
        assert row["hour"] == 22
        assert row["Time"] == "22:57:00"

    def test_sunday_weekday(self, make_trips):
        df = add_time_features(make_trips(["04/06/2014 12:00:00"]))
        assert df.loc[0, "dayofweek"] == "Sun"

    def test_bounded_levels(self, make_trips):
        df = add_time_features(make_trips(["04/01/2014 00:11:00"]))

        assert list(df["hour"].cat.categories) == list(range(24))
        assert list(df["minute"].cat.categories) == list(range(60))
        assert list(df["month"].cat.categories) == ["Apr", "May", "Jun", "Jul", "Aug", "Sep"]
        assert list(df["dayofweek"].cat.categories) == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
        assert df["month"].cat.ordered

    def test_malformed_timestamp_nulls_derived_fields(self, make_trips):
        df = add_time_features(make_trips(["not a date", "2014-04-01 00:11:00"]))

        assert len(df) == 2
        assert df[DERIVED_COLS].isna().all(axis=None)

    def test_missing_datetime_column(self):
        with pytest.raises(KeyError):
            add_time_features(pd.DataFrame({"Lat": [1.0]}))


class TestCleanTrips:

    def test_drops_malformed_rows(self, make_trips):
        raw = make_trips(["04/01/2014 00:11:00", "garbage", "05/02/2014 13:00:00"])

        cleaned = clean_trips(raw)

        assert len(cleaned) == 2
        assert list(cleaned["hour"]) == [0, 13]
        assert cleaned.index.equals(pd.RangeIndex(2))

    def test_no_missing_values_survive(self, make_trips):
        raw = make_trips(["04/01/2014 00:11:00", "bad", "06/15/2014 08:30:00"])
        raw.loc[2, "Lat"] = None

        cleaned = clean_trips(raw)

        assert len(cleaned) == 1
        assert not cleaned.isna().any(axis=None)
        for col in ["hour", "minute", "second", "day", "month", "year", "dayofweek"]:
            assert cleaned[col].notna().all()

    def test_month_outside_range_dropped(self, make_trips):
        cleaned = clean_trips(make_trips(["01/15/2014 10:00:00", "07/04/2014 21:00:00"]))

        assert list(cleaned["month"]) == ["Jul"]

    def test_all_malformed_gives_empty_table(self, make_trips):
        cleaned = clean_trips(make_trips(["x", "y", "13/45/2014 99:00:00"]))

        assert cleaned.empty

    def test_report_counts(self, make_trips):
        raw = make_trips(["04/01/2014 00:11:00", "bad", "also bad", "08/08/2014 08:08:08"])
        raw.loc[3, "Base"] = None

        cleaned, report = clean_trips_with_report(raw)

        assert report["rows_in"] == 4
        assert report["rows_out"] == len(cleaned) == 1
        assert report["rows_dropped"] == 3
        assert report["bad_timestamps"] == 2
        assert report["missing_by_column"]["Base"] == 1
        assert report["missing_by_column"]["hour"] == 2
        assert "Lat" not in report["missing_by_column"]

    def test_format_report(self):
        text = format_report({
            "rows_in": 1200,
            "rows_out": 1000,
            "rows_dropped": 200,
            "bad_timestamps": 200,
            "missing_by_column": {"hour": 200},
        })

        assert "Rows in:        1,200" in text
        assert "missing hour: 200" in text
