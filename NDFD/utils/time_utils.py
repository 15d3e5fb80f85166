"""Utility functions for calendar and timezone conversions.

All instants are unix epoch seconds. Offsets follow the NDFD convention:
the number of hours to *add* to local standard time to reach UTC, so US
Eastern is ``5`` and Central European Time is ``-1``.
"""

import datetime
import math

from dateutil.parser import isoparse
from dateutil.relativedelta import SU, relativedelta
from pytz import FixedOffset, utc

from NDFD.constants.shared_const import SECONDS_PER_HOUR
from NDFD.errors import FormatError


def _standard_datetime(instant, utc_offset_hours):
    """Naive local standard time for an instant."""
    return datetime.datetime.fromtimestamp(float(instant), tz=utc).replace(
        tzinfo=None
    ) - datetime.timedelta(hours=utc_offset_hours)


def is_daylight_saving(instant, utc_offset_hours):
    """
    Determines whether daylight saving time is in effect at an instant.

    Uses the United States rule: from the second Sunday of March at 02:00
    local standard time until the first Sunday of November at 02:00 local
    daylight time (01:00 standard).

    Parameters:
    - instant (int): Unix seconds
    - utc_offset_hours (float): Hours to add to local standard time to reach UTC

    Returns:
    - bool: True when daylight saving time is active
    """
    local = _standard_datetime(instant, utc_offset_hours)
    year_start = datetime.datetime(local.year, 1, 1)
    dst_start = year_start + relativedelta(month=3, day=1, weekday=SU(+2), hour=2)
    dst_end = year_start + relativedelta(month=11, day=1, weekday=SU(+1), hour=1)
    return dst_start <= local < dst_end


def local_offset_hours(instant, utc_offset_hours, observes_dst=True):
    """Return the offset in effect at an instant, one hour less during DST."""
    if observes_dst and is_daylight_saving(instant, utc_offset_hours):
        return utc_offset_hours - 1
    return utc_offset_hours


def local_datetime(instant, utc_offset_hours, observes_dst=True):
    """Return an aware datetime holding the local wall clock of an instant."""
    offset = local_offset_hours(instant, utc_offset_hours, observes_dst)
    zone = FixedOffset(int(round(-offset * 60)))
    return datetime.datetime.fromtimestamp(float(instant), tz=utc).astimezone(zone)


def to_local_string(instant, utc_offset_hours, observes_dst=True):
    """
    Formats an instant as a local ISO 8601 string.

    Parameters:
    - instant (int): Unix seconds
    - utc_offset_hours (float): Hours to add to local standard time to reach UTC
    - observes_dst (bool): Whether the location follows daylight saving time

    Returns:
    - str: The local time, e.g. ``2024-07-04T06:00:00-04:00``
    """
    return local_datetime(instant, utc_offset_hours, observes_dst).isoformat()


def parse_local_string(text):
    """
    Parses an ISO 8601 string into unix seconds.

    Strings without an offset are read as UTC.

    Parameters:
    - text (str): The string to parse

    Returns:
    - int: Unix seconds

    Raises:
    - FormatError: When the string is not a valid ISO 8601 date/time
    """
    if not isinstance(text, str):
        raise FormatError(f"Expected a date/time string, got {type(text).__name__}")
    try:
        parsed = isoparse(text.strip())
    except (ValueError, OverflowError) as err:
        raise FormatError(f"Malformed date/time string: {text!r}") from err
    if parsed.tzinfo is None:
        parsed = utc.localize(parsed)
    return int(parsed.timestamp())


def local_instant(year, month, day, hour, utc_offset_hours, observes_dst=True):
    """
    Converts a local wall clock time into unix seconds.

    The standard offset is applied first; if daylight saving time is active at
    the result the offset is recomputed with one hour less.
    """
    naive = datetime.datetime(year, month, day) + datetime.timedelta(hours=hour)
    instant = int(utc.localize(naive).timestamp() + utc_offset_hours * SECONDS_PER_HOUR)
    if observes_dst and is_daylight_saving(instant, utc_offset_hours):
        instant -= SECONDS_PER_HOUR
    return instant


def round_to_nearest_ten(value):
    """Round to the nearest multiple of ten, ties rounding up."""
    return int(math.floor(value / 10.0 + 0.5)) * 10
