"""Factories for building NDFD series in tests."""

import datetime

from NDFD.series import Sample, SampleStatus, Series

HOUR = 3600
DAY = 86400


def epoch(year, month, day, hour=0, minute=0, second=0):
    """Unix seconds of a UTC wall clock time."""
    return int(
        datetime.datetime(
            year, month, day, hour, minute, second, tzinfo=datetime.timezone.utc
        ).timestamp()
    )


def make_series(element, times, values, period_hours=0, missing=()):
    """Series with one sample per time; positions listed in ``missing`` are MISSING."""
    samples = [
        Sample(
            t,
            v,
            SampleStatus.MISSING if i in missing else SampleStatus.OK,
        )
        for i, (t, v) in enumerate(zip(times, values))
    ]
    return Series(element, samples, period_hours)


def hourly_times(start, count, step_hours=3):
    """Valid times ending each ``step_hours`` interval after ``start``."""
    return [start + (i + 1) * step_hours * HOUR for i in range(count)]
