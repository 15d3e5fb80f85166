import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import pytest

from NDFD.request.layouts import TimeLayoutCache
from NDFD.request.matches import (
    Match,
    Sector,
    match_sort_key,
    series_from_matches,
    series_map_from_matches,
    sort_matches,
)
from NDFD.periods.clipper import clip_series
from NDFD.periods.resolver import build_periods, resolve_window
from NDFD.series import SampleStatus
from NDFD.utils.indices import NDFDElement
from tests.ndfd_test_helpers import HOUR, epoch

T0 = epoch(2024, 1, 15, 9)


def test_hemisphere_sectors_sort_between_neighbours():
    sectors = [Sector.GUAM, Sector.NPACOCN, Sector.PUERTORI, Sector.NHEMI, Sector.CONUS, Sector.HAWAII]
    matches = [Match(s, NDFDElement.WS, T0, 10) for s in sectors]
    ordered = [m.sector for m in sort_matches(matches)]
    assert ordered == [
        Sector.CONUS,
        Sector.NHEMI,
        Sector.PUERTORI,
        Sector.HAWAII,
        Sector.NPACOCN,
        Sector.GUAM,
    ]


def test_sort_by_element_then_time():
    matches = [
        Match(Sector.CONUS, NDFDElement.SKY, T0 + 3 * HOUR, 50),
        Match(Sector.CONUS, NDFDElement.SKY, T0, 40),
        Match(Sector.CONUS, NDFDElement.MAX, T0, 70),
    ]
    assert [match_sort_key(m) for m in sort_matches(matches)] == [
        (0.0, int(NDFDElement.MAX), T0),
        (0.0, int(NDFDElement.SKY), T0),
        (0.0, int(NDFDElement.SKY), T0 + 3 * HOUR),
    ]


def test_series_grouped_per_element():
    matches = [
        Match(Sector.CONUS, NDFDElement.SKY, T0 + 3 * HOUR, 50),
        Match(Sector.CONUS, NDFDElement.POP, T0 + 12 * HOUR, 30),
        Match(Sector.CONUS, NDFDElement.SKY, T0, 40, SampleStatus.MISSING),
    ]
    by_element = series_from_matches(matches)

    sky = by_element[NDFDElement.SKY]
    assert list(sky.valid_times) == [T0, T0 + 3 * HOUR]
    assert not sky.samples[0].ok
    assert sky.period_hours == 3
    assert by_element[NDFDElement.POP].period_hours == 12


def test_first_sector_wins_duplicate_times():
    matches = [
        Match(Sector.NHEMI, NDFDElement.WS, T0, 35),
        Match(Sector.CONUS, NDFDElement.WS, T0, 20),
    ]
    wind = series_from_matches(matches)[NDFDElement.WS]
    assert len(wind) == 1
    assert wind.samples[0].value == 20


def test_sector_filter_and_period_override():
    matches = [
        Match(Sector.CONUS, NDFDElement.SKY, T0, 40),
        Match(Sector.ALASKA, NDFDElement.SKY, T0, 90),
    ]
    by_element = series_from_matches(
        matches, sector=Sector.ALASKA, period_hours={NDFDElement.SKY: 6}
    )
    sky = by_element[NDFDElement.SKY]
    assert sky.samples[0].value == 90
    assert sky.period_hours == 6


def test_series_map_uses_summary_keys():
    matches = [
        Match(Sector.CONUS, NDFDElement.WX, T0, "<NoCov>:<NoWx>:<NoInten>:<NoVis>:"),
        Match(Sector.CONUS, NDFDElement.WD, T0, 270),
        Match(Sector.CONUS, NDFDElement.QPF, T0, 0.1),
    ]
    series = series_map_from_matches(matches)
    assert sorted(series) == ["weather", "wind_direction"]


class TestTimeLayoutCache:
    def test_equal_layouts_share_a_key(self):
        cache = TimeLayoutCache()
        first = cache.layout(12, [T0, T0 + 12 * HOUR])
        again = cache.layout(12, [T0, T0 + 12 * HOUR])
        assert first.key == "k-p12h-n2-1"
        assert again is first
        assert len(cache) == 1

    def test_new_layouts_are_numbered(self):
        cache = TimeLayoutCache()
        cache.layout(12, [T0, T0 + 12 * HOUR])
        other = cache.layout(3, [T0, T0 + 3 * HOUR, T0 + 6 * HOUR])
        shifted = cache.layout(12, [T0 + HOUR, T0 + 13 * HOUR])
        assert other.key == "k-p3h-n3-2"
        assert shifted.key == "k-p12h-n2-3"
        assert (12, 2, T0) in cache
        assert [layout.key for layout in cache.layouts] == [
            "k-p12h-n2-1",
            "k-p3h-n3-2",
            "k-p12h-n2-3",
        ]

    def test_period_layout(self):
        window = resolve_window(requested_start=T0, number_of_days=7, observes_dst=False)
        layout = TimeLayoutCache().layout_for_periods(build_periods(window))
        assert layout.key == "k-p12h-n14-1"
        assert layout.start_times[0] == window.start
        assert layout.end_times[-1] == window.end

    def test_series_layout_uses_interval_starts(self):
        window = resolve_window(requested_start=T0, number_of_days=1, observes_dst=False)
        pop = series_from_matches(
            [
                Match(Sector.CONUS, NDFDElement.POP, window.start + 12 * HOUR, 20),
                Match(Sector.CONUS, NDFDElement.POP, window.start + 24 * HOUR, 30),
            ]
        )[NDFDElement.POP]
        layout = TimeLayoutCache().layout_for_series(clip_series(pop, window))
        assert layout.key == "k-p12h-n2-1"
        assert layout.start_times == (window.start, window.start + 12 * HOUR)

    def test_empty_layout_rejected(self):
        with pytest.raises(ValueError):
            TimeLayoutCache().layout(12, [])
