"""English text for decoded weather groups."""

from NDFD.constants.shared_const import NONE_STR
from NDFD.constants.wx_const import (
    COVERAGE_TEXT,
    INTENSITY_TEXT,
    QUALIFIER_TEXT,
    TRAILING_COVERAGES,
    TYPE_TEXT,
)

NO_WEATHER = TYPE_TEXT[NONE_STR]
_PLACE_PREFIXES = ("in ", "on ", "over ")


def describe_group(group):
    """
    Builds the English phrase of one weather group.

    Parameters:
    - group (WeatherGroup): The group to describe

    Returns:
    - str: e.g. "Chance Light Rain", "Rain Likely" or "No Weather"
    """
    if group.is_none:
        return NO_WEATHER

    wx_text = TYPE_TEXT.get(group.wx_type, group.wx_type)
    intensity = INTENSITY_TEXT.get(group.intensity, "")
    coverage = COVERAGE_TEXT.get(group.coverage, group.coverage)

    words = [intensity, wx_text] if intensity else [wx_text]
    if group.coverage in TRAILING_COVERAGES:
        words.append(coverage)
    elif coverage:
        words.insert(0, coverage)
    text = " ".join(words)

    hazards = []
    for code in group.qualifiers:
        qualifier = QUALIFIER_TEXT.get(code, "")
        if not qualifier:
            continue
        if qualifier.startswith(_PLACE_PREFIXES):
            text = f"{text} {qualifier}"
        else:
            hazards.append(qualifier)
    if hazards:
        text = f"{text} with {_join(hazards)}"
    return text


def _join(parts):
    if len(parts) == 1:
        return parts[0]
    return ", ".join(parts[:-1]) + " and " + parts[-1]


def describe_groups(groups):
    """English text of all groups of a sample, "No Weather" when empty."""
    texts = [describe_group(g) for g in groups if not g.is_none]
    if not texts:
        return NO_WEATHER
    return _join(texts)
