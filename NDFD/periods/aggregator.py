"""Per period statistics of sky cover, wind, PoP and temperature."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

from NDFD.constants.shared_const import MISSING_DATA
from NDFD.periods.clipper import ClippedSeries, fold_tolerance
from NDFD.series import Period, Series
from NDFD.utils.time_indexing import (
    map_times_to_period_indices,
    period_boundaries,
    period_positions,
)


@dataclass
class PeriodAggregate:
    max_sky_cover: float = MISSING_DATA
    min_sky_cover: float = MISSING_DATA
    avg_sky_cover: float = MISSING_DATA
    max_sky_index: int = MISSING_DATA
    min_sky_index: int = MISSING_DATA
    period_start_index: int = MISSING_DATA
    period_end_index: int = MISSING_DATA
    max_wind_speed: float = MISSING_DATA
    wind_direction_at_max_speed: float = MISSING_DATA
    max_pop: float = MISSING_DATA
    period_max_temperature: float = MISSING_DATA


@dataclass
class _Mapped:
    series: Series
    values: np.ndarray
    valid_times: np.ndarray
    index: np.ndarray


def _map(clipped: Optional[ClippedSeries], boundaries) -> Optional[_Mapped]:
    if clipped is None or not clipped.available:
        return None
    series = clipped.usable
    return _Mapped(
        series=series,
        values=series.values,
        valid_times=series.valid_times,
        index=map_times_to_period_indices(
            series.start_times, boundaries, fold_tolerance(series.period_hours)
        ),
    )


def _sky_stats(agg: PeriodAggregate, sky: _Mapped, period_index: int) -> None:
    in_period = np.flatnonzero(sky.index == period_index)
    if len(in_period) == 0:
        return
    agg.period_start_index = int(in_period[0])
    agg.period_end_index = int(in_period[-1])

    positions = period_positions(sky.index, sky.values, period_index)
    if len(positions) == 0:
        return
    period_values = sky.values[positions]
    agg.max_sky_cover = float(np.max(period_values))
    agg.min_sky_cover = float(np.min(period_values))
    agg.avg_sky_cover = float(np.mean(period_values))
    agg.max_sky_index = int(positions[np.argmax(period_values)])
    agg.min_sky_index = int(positions[np.argmin(period_values)])


def _wind_stats(
    agg: PeriodAggregate,
    speed: _Mapped,
    direction: Optional[_Mapped],
    period_index: int,
) -> None:
    positions = period_positions(speed.index, speed.values, period_index)
    if len(positions) == 0:
        return
    best = positions[np.argmax(speed.values[positions])]
    agg.max_wind_speed = float(speed.values[best])
    if direction is None:
        return

    max_time = speed.valid_times[best]
    matches = np.flatnonzero(
        (direction.valid_times == max_time) & (direction.values != MISSING_DATA)
    )
    if len(matches):
        agg.wind_direction_at_max_speed = float(direction.values[matches[0]])


def _max_of(mapped: Optional[_Mapped], period_index: int) -> float:
    if mapped is None:
        return MISSING_DATA
    positions = period_positions(mapped.index, mapped.values, period_index)
    if len(positions) == 0:
        return MISSING_DATA
    return float(np.max(mapped.values[positions]))


def _min_of(mapped: Optional[_Mapped], period_index: int) -> float:
    if mapped is None:
        return MISSING_DATA
    positions = period_positions(mapped.index, mapped.values, period_index)
    if len(positions) == 0:
        return MISSING_DATA
    return float(np.min(mapped.values[positions]))


def aggregate_periods(
    periods: List[Period], clipped: Dict[str, ClippedSeries]
) -> List[PeriodAggregate]:
    """
    Aggregates the clipped series onto each period.

    Samples are placed in the period that contains the start of their
    interval. Intervals starting further outside the window than the clipper's
    guard band count in no period. Sky cover indices refer to positions in the
    clipped sky series so the classifier can judge cloud trends.

    Parameters:
    - periods (list[Period]): Periods from the resolver
    - clipped (dict): Clipped series keyed by "sky", "wind", "wind_direction",
      "temperature", "pop", "max_temp" and "min_temp". Any key may be absent.

    Returns:
    - list[PeriodAggregate]: One aggregate per period; statistics without data
      keep the ``MISSING_DATA`` sentinel
    """
    boundaries = period_boundaries(periods)
    sky = _map(clipped.get("sky"), boundaries)
    wind = _map(clipped.get("wind"), boundaries)
    wind_dir = _map(clipped.get("wind_direction"), boundaries)
    pop = _map(clipped.get("pop"), boundaries)
    max_temp = _map(clipped.get("max_temp"), boundaries)
    min_temp = _map(clipped.get("min_temp"), boundaries)
    temperature = _map(clipped.get("temperature"), boundaries)

    aggregates = []
    for period in periods:
        agg = PeriodAggregate()
        if sky is not None:
            _sky_stats(agg, sky, period.index)
        if wind is not None:
            _wind_stats(agg, wind, wind_dir, period.index)
        agg.max_pop = _max_of(pop, period.index)

        if period.is_day:
            agg.period_max_temperature = _max_of(max_temp, period.index)
            if agg.period_max_temperature == MISSING_DATA:
                agg.period_max_temperature = _max_of(temperature, period.index)
        else:
            agg.period_max_temperature = _min_of(min_temp, period.index)
            if agg.period_max_temperature == MISSING_DATA:
                agg.period_max_temperature = _min_of(temperature, period.index)
        aggregates.append(agg)
    return aggregates
