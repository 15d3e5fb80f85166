"""Decode NDFD weather ("ugly") strings into structured groups.

An encoded sample looks like::

    Chc:R:-:<NoVis>:^Sct:T:<NoInten>:<NoVis>:DmgW,LgA

Groups are separated by ``^`` and each group holds five ``:`` separated
fields: coverage, type, intensity, visibility and a qualifier list.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

from NDFD.constants.shared_const import NONE_STR
from NDFD.constants.wx_const import (
    FIELD_SEPARATOR,
    FIELDS_PER_GROUP,
    GROUP_SEPARATOR,
    QUALIFIER_SEPARATORS,
)
from NDFD.series import Series

_QUALIFIER_SPLIT = re.compile("[" + re.escape("".join(QUALIFIER_SEPARATORS)) + "]+")


@dataclass(frozen=True)
class WeatherGroup:
    coverage: str = NONE_STR
    wx_type: str = NONE_STR
    intensity: str = NONE_STR
    visibility: str = NONE_STR
    qualifiers: Tuple[str, ...] = (NONE_STR,)

    @property
    def is_none(self) -> bool:
        return self.wx_type == NONE_STR

    def has_qualifier(self, *codes) -> bool:
        return any(q in codes for q in self.qualifiers)


def clean_field(field):
    """Trim a field and map empty or ``No...`` placeholders to ``none``."""
    field = field.strip()
    bare = field.strip("<>")
    if not bare or bare.startswith("No"):
        return NONE_STR
    return field


def split_qualifiers(blob):
    """Split a qualifier blob on commas and spaces."""
    qualifiers = [clean_field(q) for q in _QUALIFIER_SPLIT.split(blob.strip()) if q]
    qualifiers = [q for q in qualifiers if q != NONE_STR]
    return tuple(qualifiers) if qualifiers else (NONE_STR,)


def decode_group(raw):
    """
    Decodes one group of an encoded weather string.

    A group with fewer than five fields is padded with ``none``; anything past
    the fourth separator stays in the qualifier field.

    Parameters:
    - raw (str): One group, e.g. ``"Chc:R:-:<NoVis>:"``

    Returns:
    - WeatherGroup: The decoded group
    """
    fields = raw.split(FIELD_SEPARATOR, FIELDS_PER_GROUP - 1)
    fields += [""] * (FIELDS_PER_GROUP - len(fields))
    coverage, wx_type, intensity, visibility, blob = fields
    return WeatherGroup(
        coverage=clean_field(coverage),
        wx_type=clean_field(wx_type),
        intensity=clean_field(intensity),
        visibility=clean_field(visibility),
        qualifiers=split_qualifiers(blob),
    )


def decode_weather(encoded) -> List[WeatherGroup]:
    """
    Decodes a full encoded weather string.

    Parameters:
    - encoded (str | None): The encoded weather of one sample

    Returns:
    - list[WeatherGroup]: The groups in their original order. Empty for a missing
      value; a lone "no weather" group for ``<NoCov>:<NoWx>:...``.
    """
    if encoded is None:
        return []
    encoded = str(encoded).strip()
    if not encoded:
        return []
    return [decode_group(raw) for raw in encoded.split(GROUP_SEPARATOR) if raw.strip()]


def decode_series(series: Series) -> List[List[WeatherGroup]]:
    """Decode every sample of a weather series; unusable samples decode to []."""
    return [decode_weather(s.value) if s.ok else [] for s in series.samples]
