"""Trim each series to the samples that fall inside the summary window."""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from NDFD.constants.shared_const import SECONDS_PER_HOUR
from NDFD.errors import DegradedSeries
from NDFD.series import Series, Window
from NDFD.utils.indices import NDFDElement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClippedSeries:
    """A series together with the number of samples dropped at each end."""

    series: Series
    total_count: int
    skip_leading: int
    skip_trailing: int
    first_usable_time: Optional[int]
    last_usable_time: Optional[int]

    @property
    def usable_count(self) -> int:
        return max(0, self.total_count - self.skip_leading - self.skip_trailing)

    @property
    def available(self) -> bool:
        return self.usable_count > 0

    @property
    def usable(self) -> Series:
        """The in-window samples."""
        return self.series.subset(
            self.skip_leading, self.skip_leading + self.usable_count
        )


def margin_seconds(period_hours):
    """Quarter period guard band applied at both window edges."""
    return period_hours / 4 * SECONDS_PER_HOUR


def fold_tolerance(period_hours):
    """How far an admitted sample's interval may start outside the window.

    A sample is admitted once its valid time passes the leading margin, so its
    interval may begin up to three quarters of a period before the window.
    """
    return period_hours * SECONDS_PER_HOUR - margin_seconds(period_hours)


def clip_series(series: Series, window: Window, name=None) -> ClippedSeries:
    """
    Counts the samples of a series lying outside the window.

    A sample is dropped at the front when its valid time is earlier than the
    window start plus a quarter of the series' period. PoP in an evening cycle
    window is compared against the start minus 12 hours instead. A sample is
    dropped at the back when its valid time, less one hour short of a full
    period, is later than the window end minus the quarter period.

    Parameters:
    - series (Series): The series to clip
    - window (Window): The resolved summary window
    - name (str | None): Name used when reporting a degraded series

    Returns:
    - ClippedSeries: Counts and usable time bounds for the series
    """
    period = series.period_hours
    margin = margin_seconds(period)
    times = series.valid_times

    if series.element == NDFDElement.POP and window.evening_cycle:
        lead_threshold = window.start - 12 * SECONDS_PER_HOUR
    else:
        lead_threshold = window.start + margin
    trail_threshold = window.end - margin

    skip_leading = int(np.count_nonzero(times < lead_threshold))
    skip_trailing = int(
        np.count_nonzero((times - (period - 1) * SECONDS_PER_HOUR) > trail_threshold)
    )

    total = len(series)
    usable = max(0, total - skip_leading - skip_trailing)
    if usable:
        first_time = int(times[skip_leading])
        last_time = int(times[skip_leading + usable - 1])
    else:
        first_time = last_time = None
        label = name or series.element.name
        logger.warning("No usable %s samples inside the summary window", label)
        warnings.warn(
            f"Series {label} has no samples inside the summary window",
            DegradedSeries,
            stacklevel=2,
        )

    return ClippedSeries(
        series=series,
        total_count=total,
        skip_leading=skip_leading,
        skip_trailing=min(skip_trailing, total - skip_leading),
        first_usable_time=first_time,
        last_usable_time=last_time,
    )


def clip_all(series_map: Dict[str, Series], window: Window) -> Dict[str, ClippedSeries]:
    """Clip every series of a point, skipping absent ones."""
    return {
        name: clip_series(series, window, name=name)
        for name, series in series_map.items()
        if series is not None
    }
