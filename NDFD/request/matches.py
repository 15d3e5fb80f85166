"""Ordering of probed NDFD matches and their conversion into series."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from itertools import groupby
from typing import Dict, Iterable, List, Optional, Union

from NDFD.series import Sample, SampleStatus, Series
from NDFD.utils.indices import NDFDElement


class Sector(IntEnum):
    CONUS = 0
    PUERTORI = 1
    HAWAII = 2
    GUAM = 3
    ALASKA = 4
    NHEMI = 5
    NPACOCN = 6
    UNDEF = 7


# The hemisphere and Pacific ocean sectors hold tropical wind data for their
# neighbours, so they sort between them.
SECTOR_SORT_POSITION = {
    Sector.NHEMI: 0.5,
    Sector.NPACOCN: 2.5,
}

# Series keys used by the summary builder
ELEMENT_KEYS = {
    NDFDElement.SKY: "sky",
    NDFDElement.WS: "wind",
    NDFDElement.WD: "wind_direction",
    NDFDElement.TEMP: "temperature",
    NDFDElement.POP: "pop",
    NDFDElement.WX: "weather",
    NDFDElement.MAX: "max_temp",
    NDFDElement.MIN: "min_temp",
}


@dataclass(frozen=True)
class Match:
    """One probed value at a point."""

    sector: Sector
    element: NDFDElement
    valid_time: int
    value: Union[float, str]
    status: SampleStatus = SampleStatus.OK


def match_sort_key(match: Match):
    """Sector (hemisphere sectors between their neighbours), element, valid time."""
    sector = SECTOR_SORT_POSITION.get(match.sector, float(match.sector))
    return (sector, int(match.element), match.valid_time)


def sort_matches(matches: Iterable[Match]) -> List[Match]:
    return sorted(matches, key=match_sort_key)


def series_from_matches(
    matches: Iterable[Match],
    sector: Optional[Sector] = None,
    period_hours: Optional[Dict[NDFDElement, int]] = None,
) -> Dict[NDFDElement, Series]:
    """
    Groups matches into one time-ascending series per element.

    Parameters:
    - matches (iterable[Match]): Matches for a single point
    - sector (Sector | None): Keep only matches from this sector
    - period_hours (dict | None): Native period per element, overriding the defaults

    Returns:
    - dict: NDFDElement -> Series
    """
    period_hours = period_hours or {}
    selected = [m for m in sort_matches(matches) if sector is None or m.sector == sector]
    # Stable re-sort by element; the first sector wins duplicate valid times.
    selected.sort(key=lambda m: (int(m.element), m.valid_time))

    result = {}
    for element, group in groupby(selected, key=lambda m: m.element):
        samples = []
        for m in group:
            if samples and samples[-1].valid_time == m.valid_time:
                continue
            samples.append(Sample(m.valid_time, m.value, m.status))
        result[element] = Series(element, samples, period_hours.get(element, 0))
    return result


def series_map_from_matches(matches: Iterable[Match], sector: Optional[Sector] = None, period_hours=None):
    """Series keyed by the names ``classify`` expects; other elements are dropped."""
    by_element = series_from_matches(matches, sector=sector, period_hours=period_hours)
    return {
        ELEMENT_KEYS[element]: series
        for element, series in by_element.items()
        if element in ELEMENT_KEYS
    }
