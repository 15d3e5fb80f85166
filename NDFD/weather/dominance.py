"""Pick the most significant weather condition of a sample and of a period."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from NDFD.constants.wx_const import (
    COVERAGE_ORDER,
    INTENSITY_ORDER,
    PRESENCE_FLAGS,
    TYPE_ORDER,
)
from NDFD.weather.decoder import WeatherGroup


class WxField(Enum):
    COVERAGE = "coverage"
    INTENSITY = "intensity"
    TYPE = "wx_type"


RANKS = {
    WxField.COVERAGE: {code: rank for rank, code in enumerate(COVERAGE_ORDER)},
    WxField.INTENSITY: {code: rank for rank, code in enumerate(INTENSITY_ORDER)},
    WxField.TYPE: {code: rank for rank, code in enumerate(TYPE_ORDER)},
}


def rank(code, wx_field: WxField) -> int:
    """Rank of a code in its precedence table; unknown codes rank with ``none``."""
    return RANKS[wx_field].get(code, 0)


def is_dominant(a, b, wx_field: WxField) -> bool:
    """True when code ``a`` outranks code ``b`` in the given field."""
    return rank(a, wx_field) > rank(b, wx_field)


def group_key(group: WeatherGroup) -> Tuple[int, int, int]:
    """Coverage, then intensity, then type ranks of a group."""
    return (
        rank(group.coverage, WxField.COVERAGE),
        rank(group.intensity, WxField.INTENSITY),
        rank(group.wx_type, WxField.TYPE),
    )


def dominant_group(groups: Sequence[WeatherGroup]) -> WeatherGroup:
    """
    Finds the dominant group among the concurrent groups of one sample.

    A group replaces the running best when its coverage outranks the best's,
    or, with coverage tied, its intensity does, or, with both tied, its type
    does. The first of several identical groups is kept.

    Parameters:
    - groups (list[WeatherGroup]): The groups of one sample

    Returns:
    - WeatherGroup: The dominant group, or a "none" group for an empty sample
    """
    best = None
    for group in groups:
        if best is None or group_key(group) > group_key(best):
            best = group
    return best if best is not None else WeatherGroup()


@dataclass(frozen=True)
class DominantCondition:
    """The dominant group of a period plus precipitation presence flags."""

    group: WeatherGroup = field(default_factory=WeatherGroup)
    groups: Tuple[WeatherGroup, ...] = ()
    sample_index: Optional[int] = None
    drizzle: bool = False
    rain: bool = False
    rain_showers: bool = False
    snow: bool = False
    snow_showers: bool = False
    freezing_drizzle: bool = False
    freezing_rain: bool = False
    ice_pellets: bool = False

    @classmethod
    def from_groups(cls, groups, sample_index=None):
        flags = {
            PRESENCE_FLAGS[g.wx_type]: True
            for g in groups
            if g.wx_type in PRESENCE_FLAGS
        }
        return cls(
            group=dominant_group(groups),
            groups=tuple(groups),
            sample_index=sample_index,
            **flags,
        )

    @property
    def flags(self):
        return frozenset(name for name in PRESENCE_FLAGS.values() if getattr(self, name))

    def types(self):
        """Weather types of every group in the winning sample."""
        return [g.wx_type for g in self.groups]


def dominant_condition(samples: Sequence[List[WeatherGroup]]) -> DominantCondition:
    """
    Finds the dominant sample among the samples of a period.

    Each sample is represented by its dominant group and compared with the
    same three level rule as within a sample. When all three fields tie, the
    sample carrying more concurrent groups wins so that a multi-condition
    sample is not discarded for an equally ranked single one.

    Parameters:
    - samples (list[list[WeatherGroup]]): Decoded groups of each in-period sample

    Returns:
    - DominantCondition: The winner, with presence flags scanned from all of
      the winning sample's groups
    """
    best_index = None
    best_key = None
    for i, groups in enumerate(samples):
        if not groups:
            continue
        key = (group_key(dominant_group(groups)), len(groups))
        if best_key is None or key > best_key:
            best_key = key
            best_index = i

    if best_index is None:
        return DominantCondition()
    return DominantCondition.from_groups(samples[best_index], sample_index=best_index)
