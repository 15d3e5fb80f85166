import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import numpy as np

from NDFD.constants.shared_const import MISSING_DATA
from NDFD.periods.aggregator import PeriodAggregate, aggregate_periods
from NDFD.periods.clipper import clip_all
from NDFD.periods.resolver import build_periods
from NDFD.series import Window
from NDFD.utils.indices import NDFDElement
from NDFD.utils.time_indexing import (
    map_times_to_period_indices,
    period_boundaries,
    period_positions,
)
from tests.ndfd_test_helpers import DAY, HOUR, epoch, hourly_times, make_series

START = epoch(2024, 1, 15, 6)
WINDOW = Window(start=START, end=START + DAY, number_of_days=1, mode="12hourly")
PERIODS = build_periods(WINDOW)
THREE_HOURLY = hourly_times(START, 8)
TWELVE_HOURLY = hourly_times(START, 2, step_hours=12)


def aggregate(**series):
    return aggregate_periods(PERIODS, clip_all(series, WINDOW))


def test_times_map_to_containing_period():
    boundaries = period_boundaries(PERIODS)
    times = np.array([START - HOUR, START, START + 12 * HOUR - 1, START + 12 * HOUR, START + 2 * DAY])
    assert list(map_times_to_period_indices(times, boundaries)) == [0, 0, 0, 1, 1]


def test_mapping_without_periods_is_missing():
    index = map_times_to_period_indices(np.array([START]), period_boundaries([]))
    assert list(index) == [MISSING_DATA]


def test_tolerance_limits_folding():
    boundaries = period_boundaries(PERIODS)
    times = np.array(
        [
            START - 9 * HOUR - 1,
            START - 9 * HOUR,
            START + DAY + 9 * HOUR - 1,
            START + DAY + 9 * HOUR,
        ]
    )
    index = map_times_to_period_indices(times, boundaries, tolerance=9 * HOUR)
    assert list(index) == [MISSING_DATA, 0, 1, MISSING_DATA]


def test_period_positions_skip_missing_values():
    index = np.array([0, 0, 1, 0])
    values = np.array([1.0, MISSING_DATA, 2.0, 3.0])
    assert list(period_positions(index, values, 0)) == [0, 3]


def test_sky_statistics():
    sky = make_series(NDFDElement.SKY, THREE_HOURLY, [10, 20, 80, 90, 50, 50, 50, 50])
    day, night = aggregate(sky=sky)

    assert day.max_sky_cover == 90
    assert day.min_sky_cover == 10
    assert day.avg_sky_cover == 50
    assert day.max_sky_index == 3
    assert day.min_sky_index == 0
    assert (day.period_start_index, day.period_end_index) == (0, 3)

    assert night.avg_sky_cover == 50
    assert (night.period_start_index, night.period_end_index) == (4, 7)


def test_missing_sky_samples_are_ignored():
    sky = make_series(
        NDFDElement.SKY, THREE_HOURLY, [10, 100, 30, 30, 0, 0, 0, 0], missing=(1,)
    )
    day, _ = aggregate(sky=sky)
    assert day.max_sky_cover == 30
    assert day.min_sky_index == 0
    assert day.max_sky_index == 2


def test_wind_direction_taken_at_max_speed():
    wind = make_series(NDFDElement.WS, THREE_HOURLY, [10, 30, 20, 5, 8, 8, 9, 8])
    direction = make_series(
        NDFDElement.WD, THREE_HOURLY, [0, 350, 90, 180, 10, 20, 30, 40]
    )
    day, night = aggregate(wind=wind, wind_direction=direction)

    assert day.max_wind_speed == 30
    assert day.wind_direction_at_max_speed == 350
    assert night.max_wind_speed == 9
    assert night.wind_direction_at_max_speed == 30


def test_wind_without_direction():
    wind = make_series(NDFDElement.WS, THREE_HOURLY, [10] * 8)
    day, _ = aggregate(wind=wind)
    assert day.max_wind_speed == 10
    assert day.wind_direction_at_max_speed == MISSING_DATA


def test_pop_and_extreme_temperatures():
    pop = make_series(NDFDElement.POP, TWELVE_HOURLY, [40, 10])
    max_temp = make_series(NDFDElement.MAX, TWELVE_HOURLY[:1], [50])
    min_temp = make_series(NDFDElement.MIN, TWELVE_HOURLY[1:], [30])
    day, night = aggregate(pop=pop, max_temp=max_temp, min_temp=min_temp)

    assert (day.max_pop, night.max_pop) == (40, 10)
    assert day.period_max_temperature == 50
    assert night.period_max_temperature == 30


def test_hourly_temperature_fallback():
    temperature = make_series(
        NDFDElement.TEMP, THREE_HOURLY, [40, 45, 48, 44, 38, 33, 31, 35]
    )
    day, night = aggregate(temperature=temperature)
    assert day.period_max_temperature == 48
    assert night.period_max_temperature == 31


def test_absent_series_leave_sentinels():
    assert aggregate() == [PeriodAggregate(), PeriodAggregate()]
    assert PeriodAggregate().max_pop == MISSING_DATA


def test_evening_pop_from_previous_day_is_ignored():
    window = Window(
        start=START,
        end=START + DAY,
        number_of_days=1,
        mode="12hourly",
        evening_cycle=True,
    )
    pop = make_series(
        NDFDElement.POP, [START, START + 12 * HOUR, START + DAY], [90, 5, 5]
    )
    clipped = clip_all({"pop": pop}, window)

    # The 12 hour interval ending at the window start is admitted by the clipper
    assert clipped["pop"].usable_count == 3
    first, second = aggregate_periods(build_periods(window), clipped)
    assert first.max_pop == 5
    assert second.max_pop == 5
