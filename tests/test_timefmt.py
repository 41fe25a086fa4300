"""Tests for elapsed-time formatting."""

from datetime import datetime

from jobclock.timefmt import decimal_hours, elapsed_seconds, format_elapsed, format_timestamp, now

from conftest import at


class TestElapsed:

    def test_one_hour_five_minutes(self):
        seconds = elapsed_seconds(at(20, 0, 0), at(21, 5, 0))
        assert seconds == 3900
        assert format_elapsed(seconds) == "1h 5m 0s"
        assert decimal_hours(seconds) == 1.08
        assert f"{decimal_hours(seconds):.2f}" == "1.08"

    def test_zero(self):
        assert format_elapsed(0) == "0h 0m 0s"
        assert f"{decimal_hours(0):.2f}" == "0.00"

    def test_seconds_and_minutes(self):
        assert format_elapsed(59) == "0h 0m 59s"
        assert format_elapsed(61) == "0h 1m 1s"
        assert format_elapsed(3 * 3600 + 7) == "3h 0m 7s"

    def test_hours_beyond_a_day(self):
        assert format_elapsed(26 * 3600 + 30 * 60) == "26h 30m 0s"
        assert decimal_hours(26 * 3600 + 30 * 60) == 26.5

    def test_elapsed_across_midnight(self):
        begin = datetime(2024, 3, 13, 23, 30, 0)
        end = datetime(2024, 3, 14, 0, 45, 30)
        assert format_elapsed(elapsed_seconds(begin, end)) == "1h 15m 30s"


class TestTimestamp:

    def test_format(self):
        assert format_timestamp(at(20, 0, 0)) == "13-03-2024 20:00:00"
        assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "02-01-2024 03:04:05"

    def test_now_is_aware_and_whole_seconds(self):
        current = now()
        assert current.tzinfo is not None
        assert current.microsecond == 0
