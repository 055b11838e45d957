"""Tests for time span formatting (timespan.py)."""

import pytest

from buildnotify.helpers.timespan import (
    ONE_DAY_MS,
    ONE_HOUR_MS,
    ONE_MINUTE_MS,
    format_timespan,
)


# Under a minute

class TestShortSpans:
    def test_milliseconds(self):
        assert format_timespan(40) == "40 ms"

    def test_zero(self):
        assert format_timespan(0) == "0 ms"

    def test_negative_renders_as_zero(self):
        assert format_timespan(-5) == "0 ms"

    def test_hundredths_of_a_second(self):
        assert format_timespan(120) == "0.12 sec"

    def test_tenth_of_a_second(self):
        assert format_timespan(100) == "0.1 sec"

    def test_seconds_with_one_decimal(self):
        # 1100ms is the back-to-normal example: 1500 - 400
        assert format_timespan(1100) == "1.1 sec"

    def test_sub_tenth_is_truncated(self):
        assert format_timespan(1150) == "1.1 sec"

    def test_whole_seconds_drop_decimal(self):
        assert format_timespan(9000) == "9 sec"

    def test_ten_seconds_and_above_are_whole(self):
        assert format_timespan(12900) == "12 sec"


# Two-unit spans

class TestLongSpans:
    def test_minutes_and_seconds(self):
        assert format_timespan(3 * ONE_MINUTE_MS + 12000) == "3 min 12 sec"

    def test_small_unit_shown_even_when_zero(self):
        assert format_timespan(ONE_MINUTE_MS) == "1 min 0 sec"

    def test_ten_minutes_drops_seconds(self):
        assert format_timespan(12 * ONE_MINUTE_MS + 30000) == "12 min"

    def test_hours_and_minutes(self):
        assert format_timespan(2 * ONE_HOUR_MS + 5 * ONE_MINUTE_MS) == "2 hr 5 min"

    def test_many_hours(self):
        assert format_timespan(14 * ONE_HOUR_MS) == "14 hr"

    def test_single_day(self):
        assert format_timespan(ONE_DAY_MS + 3 * ONE_HOUR_MS) == "1 day 3 hr"

    def test_plural_days(self):
        assert format_timespan(2 * ONE_DAY_MS) == "2 days 0 hr"

    @pytest.mark.parametrize("days, expected", [
        (45, "1 mo 15 days"),
        (400, "1 yr 1 mo"),
    ])
    def test_months_and_years(self, days, expected):
        assert format_timespan(days * ONE_DAY_MS) == expected
