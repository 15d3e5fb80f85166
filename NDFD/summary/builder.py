"""Period summary construction for one forecast point."""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from NDFD.constants.shared_const import DEFAULT_NUM_DAYS
from NDFD.errors import InsufficientElementsForIcon
from NDFD.NDFDPeriodText import calculate_period_text
from NDFD.periods.aggregator import PeriodAggregate, aggregate_periods
from NDFD.periods.clipper import ClippedSeries, clip_all, fold_tolerance
from NDFD.periods.resolver import build_periods, resolve_window
from NDFD.series import ClassificationResult, Period, Series, Window
from NDFD.utils.time_indexing import map_times_to_period_indices, period_boundaries
from NDFD.utils.time_utils import local_datetime
from NDFD.weather.decoder import decode_series
from NDFD.weather.dominance import DominantCondition, dominant_condition

logger = logging.getLogger(__name__)

SERIES_KEYS = (
    "sky",
    "wind",
    "wind_direction",
    "temperature",
    "pop",
    "weather",
    "max_temp",
    "min_temp",
)

# Elements that must all be available before icons are produced
ICON_ELEMENTS = ("weather", "pop", "sky", "wind", "temperature")


@dataclass(frozen=True)
class WindowRequest:
    start: object = 0
    number_of_days: int = DEFAULT_NUM_DAYS
    mode: str = "12hourly"


@dataclass(frozen=True)
class CalendarRules:
    utc_offset_hours: float = 0
    observes_dst: bool = True


@dataclass(frozen=True)
class PeriodForecast:
    period: Period
    aggregate: PeriodAggregate
    dominant: DominantCondition
    result: ClassificationResult


@dataclass(frozen=True)
class SummaryResult:
    window: Window
    forecasts: List[PeriodForecast]
    icons_enabled: bool
    degraded: Tuple[str, ...] = ()

    @property
    def phrases(self):
        return [f.result.phrase for f in self.forecasts]

    @property
    def icons(self):
        return [f.result.icon_id for f in self.forecasts]


def icons_available(clipped: Dict[str, ClippedSeries]) -> bool:
    """
    Checks that every element needed for icons has usable data.

    A missing element disables icons for the whole run rather than per period.
    """
    missing = [
        name
        for name in ICON_ELEMENTS
        if name not in clipped or not clipped[name].available
    ]
    if missing:
        logger.warning("Icons disabled, no usable data for %s", ", ".join(missing))
        warnings.warn(
            f"Icons need {', '.join(missing)}",
            InsufficientElementsForIcon,
            stacklevel=3,
        )
        return False
    return True


def _period_conditions(
    periods: List[Period], weather: Optional[ClippedSeries]
) -> List[DominantCondition]:
    if weather is None or not weather.available:
        return [DominantCondition() for _ in periods]

    usable = weather.usable
    decoded = decode_series(usable)
    index = map_times_to_period_indices(
        usable.start_times,
        period_boundaries(periods),
        fold_tolerance(usable.period_hours),
    )
    return [
        dominant_condition([decoded[i] for i in np.flatnonzero(index == p.index)])
        for p in periods
    ]


def _first_valid_time(series: Dict[str, Series]):
    times = [s.first_valid_time for s in series.values() if len(s)]
    return min(times) if times else None


def classify(
    series: Dict[str, Series],
    window: Optional[WindowRequest] = None,
    calendar: Optional[CalendarRules] = None,
) -> SummaryResult:
    """
    Builds the phrase and icon of every forecast period of one point.

    Parameters:
    - series (dict): Series keyed by "sky", "wind", "wind_direction",
      "temperature", "pop", "weather", "max_temp" and "min_temp"
    - window (WindowRequest | None): Requested start, number of days and mode
    - calendar (CalendarRules | None): UTC offset and daylight saving rule

    Returns:
    - SummaryResult: Periods with their aggregates, dominant weather and
      classification, plus whether icons were produced
    """
    window = window or WindowRequest()
    calendar = calendar or CalendarRules()

    known = {}
    for name, values in series.items():
        if values is None:
            continue
        if name not in SERIES_KEYS:
            logger.warning("Ignoring unknown series %s", name)
            continue
        known[name] = values

    pop = known.get("pop")
    resolved = resolve_window(
        requested_start=window.start,
        number_of_days=window.number_of_days,
        mode=window.mode,
        utc_offset_hours=calendar.utc_offset_hours,
        observes_dst=calendar.observes_dst,
        first_valid_time=_first_valid_time(known),
        first_pop_valid_time=pop.first_valid_time if pop is not None else None,
    )
    periods = build_periods(resolved)

    clipped = clip_all(known, resolved)
    degraded = tuple(name for name, c in clipped.items() if not c.available)
    icons_enabled = icons_available(clipped)

    aggregates = aggregate_periods(periods, clipped)
    conditions = _period_conditions(periods, clipped.get("weather"))

    forecasts = []
    for period, aggregate, dominant in zip(periods, aggregates, conditions):
        date = local_datetime(
            period.start_time, calendar.utc_offset_hours, calendar.observes_dst
        ).date()
        result = calculate_period_text(
            aggregate, dominant, period.is_day, date=date, icons=icons_enabled
        )
        forecasts.append(PeriodForecast(period, aggregate, dominant, result))

    return SummaryResult(
        window=resolved,
        forecasts=forecasts,
        icons_enabled=icons_enabled,
        degraded=degraded,
    )
