"""Resolve the summary window and its 12 or 24 hour forecast periods."""

from __future__ import annotations

import datetime
import logging
from typing import List

from pytz import utc

from NDFD.constants.shared_const import (
    DEFAULT_NUM_DAYS,
    PERIOD_ANCHOR_HOURS,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SUMMARY_MODES,
)
from NDFD.series import Period, Window
from NDFD.utils.time_utils import local_datetime, local_instant, parse_local_string

logger = logging.getLogger(__name__)


def _anchor(date, hour, utc_offset_hours, observes_dst):
    return local_instant(
        date.year, date.month, date.day, hour, utc_offset_hours, observes_dst
    )


def resolve_window(
    requested_start=0,
    number_of_days=DEFAULT_NUM_DAYS,
    mode="12hourly",
    utc_offset_hours=0,
    observes_dst=True,
    first_valid_time=None,
    first_pop_valid_time=None,
) -> Window:
    """
    Computes the start and end of the summary window.

    Periods are anchored to local 06:00 and 18:00. Without an explicit start
    time the anchor is inferred from the first PoP sample (half-day) or from
    the first sample of the whole match set (whole-day), and from the current
    time when there are no samples at all.

    Parameters:
    - requested_start (int | str): Requested start in unix seconds or ISO 8601, 0 when unspecified
    - number_of_days (int): Number of days to summarize
    - mode (str): "12hourly" for day/night periods or "24hourly" for whole days
    - utc_offset_hours (float): Hours to add to local standard time to reach UTC
    - observes_dst (bool): Whether the location follows daylight saving time
    - first_valid_time (int | None): First valid time of all matched data
    - first_pop_valid_time (int | None): First valid time of the PoP series

    Returns:
    - Window: The resolved window
    """
    if isinstance(requested_start, str):
        requested_start = parse_local_string(requested_start)

    if mode not in SUMMARY_MODES:
        logger.warning("Unknown summarization mode %s, using 12hourly", mode)
        mode = "12hourly"

    if number_of_days is None or number_of_days <= 0:
        logger.warning(
            "Invalid number of days %s, using %s", number_of_days, DEFAULT_NUM_DAYS
        )
        number_of_days = DEFAULT_NUM_DAYS

    day_hour = PERIOD_ANCHOR_HOURS["day"]
    night_hour = PERIOD_ANCHOR_HOURS["night"]
    one_day = datetime.timedelta(days=1)
    evening_cycle = False

    if requested_start:
        local = local_datetime(requested_start, utc_offset_hours, observes_dst)
        date = local.date()
        if mode == "24hourly":
            start = _anchor(date, day_hour, utc_offset_hours, observes_dst)
        elif local.hour < day_hour:
            start = _anchor(date - one_day, night_hour, utc_offset_hours, observes_dst)
            evening_cycle = True
        elif local.hour >= night_hour:
            start = _anchor(date, night_hour, utc_offset_hours, observes_dst)
            evening_cycle = True
        else:
            start = _anchor(date, day_hour, utc_offset_hours, observes_dst)
    else:
        reference = first_pop_valid_time
        if reference is None:
            reference = first_valid_time
        if reference is None:
            reference = int(datetime.datetime.now(utc).timestamp())
            logger.warning("No start time and no valid times, anchoring on now")

        pop_local = local_datetime(reference, utc_offset_hours, observes_dst)
        if mode == "12hourly":
            date = pop_local.date()
            if pop_local.hour - 12 < 0:
                start = _anchor(
                    date - one_day, night_hour, utc_offset_hours, observes_dst
                )
                evening_cycle = True
            else:
                start = _anchor(date, day_hour, utc_offset_hours, observes_dst)
        else:
            first = first_valid_time if first_valid_time is not None else reference
            date = local_datetime(first, utc_offset_hours, observes_dst).date()
            if pop_local.date() != date:
                date = date + one_day
            start = _anchor(date, day_hour, utc_offset_hours, observes_dst)

    end = start + number_of_days * SECONDS_PER_DAY
    logger.debug("Resolved window %s - %s (%s)", start, end, mode)
    return Window(
        start=start,
        end=end,
        number_of_days=number_of_days,
        mode=mode,
        evening_cycle=evening_cycle,
    )


def build_periods(window: Window) -> List[Period]:
    """
    Splits a window into contiguous forecast periods.

    Half-day periods alternate day and night starting from the window's cycle;
    whole-day periods are always daytime.
    """
    length = window.period_hours
    count = (window.end - window.start) // (length * SECONDS_PER_HOUR)
    periods = []
    for i in range(count):
        start = window.start + i * length * SECONDS_PER_HOUR
        if length == 24:
            is_day = True
        else:
            is_day = (i + int(window.evening_cycle)) % 2 == 0
        periods.append(
            Period(
                index=i,
                start_time=start,
                end_time=start + length * SECONDS_PER_HOUR,
                length_hours=length,
                is_day=is_day,
            )
        )
    return periods
