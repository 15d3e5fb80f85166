# %% Helper functions used to build the phrase and icon of an NDFD forecast period
from NDFD.constants.shared_const import MISSING_DATA
from NDFD.constants.text_const import (
    BLUSTERY_SECTOR,
    BLUSTERY_SEASON,
    ORGANIZED_SKY_COVER,
    POP_ICON_MAX,
    POP_ICON_MIN,
    POP_THRESHOLDS,
    SKY_COVER_THRESHOLDS,
    SKY_ICONS,
    SKY_PHRASES,
    SKY_TREND_MIN_CATEGORY_CHANGE,
    SKY_TREND_WIDE_SPAN,
    TEMP_ICONS,
    TEMP_THRESHOLDS,
    WIND_ICONS,
    WIND_THRESHOLDS,
)
from NDFD.constants.wx_const import (
    FLURRIES_PHRASE,
    MIXTURE_FAMILIES,
    MIXTURE_PHRASES,
    OBSTRUCTION_PHRASES,
    PRECIP_PHRASES,
    SEVERE_QUALIFIERS,
    SEVERE_THUNDER_PHRASE,
    SHOWER_ICONS,
    SHOWER_PHRASE,
    THUNDER_ICONS,
    THUNDER_PHRASE,
    WINTRY_MIX,
)
from NDFD.utils.time_utils import round_to_nearest_ten


def _missing(*values):
    return any(v is None or v == MISSING_DATA for v in values)


def _day_night(icons, isDayTime):
    return icons[0] if isDayTime else icons[1]


def calculate_pop_icon(icon, pop):
    """
    Adds the rounded PoP to an icon name.

    Parameters:
    - icon (str): The base icon, e.g. "ra"
    - pop (float): The probability of precipitation in percent

    Returns:
    - str: e.g. "ra50" when the rounded PoP is between 10 and 100, otherwise the base icon
    """
    if icon is None or _missing(pop):
        return icon
    rounded = round_to_nearest_ten(pop)
    if POP_ICON_MIN <= rounded <= POP_ICON_MAX:
        return f"{icon}{rounded}"
    return icon


def sky_category(skyCover):
    """Sky cover band from 0 (clear) to 4 (cloudy)."""
    if skyCover <= SKY_COVER_THRESHOLDS["clear"]:
        return 0
    elif skyCover <= SKY_COVER_THRESHOLDS["mostly_clear"]:
        return 1
    elif skyCover <= SKY_COVER_THRESHOLDS["partly_cloudy"]:
        return 2
    elif skyCover <= SKY_COVER_THRESHOLDS["mostly_cloudy"]:
        return 3
    return 4


def calculate_sky_text(skyCover, isDayTime, mode="both"):
    """
    Calculates the sky cover phrase and icon.

    Parameters:
    - skyCover (float): The average sky cover of the period in percent
    - isDayTime (bool): Whether the period is daytime
    - mode (str): "both", "summary" or "icon"

    Returns:
    - str | None: The sky phrase
    - str | None: The sky icon
    """
    if _missing(skyCover):
        return (None, None) if mode == "both" else None

    category = sky_category(skyCover)
    skyText = SKY_PHRASES["day" if isDayTime else "night"][category]
    skyIcon = SKY_ICONS[category] if isDayTime else "n" + SKY_ICONS[category]

    if mode == "summary":
        return skyText
    elif mode == "icon":
        return skyIcon
    else:
        return skyText, skyIcon


def calculate_sky_trend(aggregate):
    """
    Refines the sky phrase when the clouds change a lot during the period.

    A change of at least two sky categories between the minimum and maximum
    sample is a trend. Spans of four samples or more read as Increasing or
    Decreasing Clouds; narrower spans only count when the change lands in the
    second half of the period and read as Becoming Cloudy or Clearing.
    Those two phrases describe a change late in the period, so a narrow change
    in the first half keeps the plain sky phrase.

    Parameters:
    - aggregate (PeriodAggregate): The period statistics

    Returns:
    - str | None: The trend phrase or None when there is no trend
    """
    if _missing(
        aggregate.max_sky_cover,
        aggregate.min_sky_cover,
        aggregate.max_sky_index,
        aggregate.min_sky_index,
    ):
        return None

    change = sky_category(aggregate.max_sky_cover) - sky_category(
        aggregate.min_sky_cover
    )
    if change < SKY_TREND_MIN_CATEGORY_CHANGE:
        return None

    increasing = aggregate.min_sky_index < aggregate.max_sky_index
    span = abs(aggregate.max_sky_index - aggregate.min_sky_index) + 1
    if span >= SKY_TREND_WIDE_SPAN:
        return "Increasing Clouds" if increasing else "Decreasing Clouds"

    if _missing(aggregate.period_start_index, aggregate.period_end_index):
        return None
    # Becoming Cloudy / Clearing only for changes after the midpoint
    midpoint = (aggregate.period_start_index + aggregate.period_end_index) / 2
    if max(aggregate.max_sky_index, aggregate.min_sky_index) > midpoint:
        return "Becoming Cloudy" if increasing else "Clearing"
    return None


def calculate_temp_text(temperature, isDayTime):
    """
    Calculates the extreme temperature phrase and icon.

    Parameters:
    - temperature (float): The period's representative temperature in F
    - isDayTime (bool): Whether the period is daytime

    Returns:
    - tuple: ("Hot", "hot"), ("Cold", "cold") or (None, None)
    """
    if _missing(temperature) or not isDayTime:
        return None, None
    if temperature > TEMP_THRESHOLDS["hot"]:
        return "Hot", TEMP_ICONS["hot"]
    if temperature < TEMP_THRESHOLDS["cold"]:
        return "Cold", TEMP_ICONS["cold"]
    return None, None


def is_blustery_season(date):
    """True when the date falls inside the cold season window."""
    if date is None:
        return False
    month_day = (date.month, date.day)
    start = BLUSTERY_SEASON["start"]
    end = BLUSTERY_SEASON["end"]
    if start <= end:
        return start <= month_day <= end
    return month_day >= start or month_day <= end


def is_northerly(direction):
    """True for wind directions in the northerly sector."""
    if _missing(direction):
        return False
    return direction >= BLUSTERY_SECTOR["from"] or direction <= BLUSTERY_SECTOR["to"]


def calculate_wind_text(wind, isDayTime, direction=MISSING_DATA, temperature=MISSING_DATA, date=None):
    """
    Calculates the extreme wind phrase and icon.

    Parameters:
    - wind (float): The period's maximum wind speed in knots
    - isDayTime (bool): Whether the period is daytime
    - direction (float): The wind direction at the maximum speed in degrees
    - temperature (float): The period's representative temperature in F
    - date (datetime.date | None): The local date of the period

    Returns:
    - str | None: "Windy", "Blustery", "Breezy" or None
    - str | None: The wind icon
    """
    if _missing(wind):
        return None, None

    windIcon = _day_night((WIND_ICONS["day"], WIND_ICONS["night"]), isDayTime)
    if wind >= WIND_THRESHOLDS["windy"]:
        return "Windy", windIcon
    if wind >= WIND_THRESHOLDS["breezy"]:
        if (
            is_blustery_season(date)
            and is_northerly(direction)
            and not _missing(temperature)
            and temperature < TEMP_THRESHOLDS["freezing"]
        ):
            return "Blustery", windIcon
        return "Breezy", windIcon
    return None, None


def calculate_obstruction_text(group, isDayTime):
    """Phrase and icon for fog-like obstructions, which need no PoP."""
    entry = OBSTRUCTION_PHRASES.get(group.wx_type)
    if entry is None:
        return None, None
    phrase, day_icon, night_icon = entry
    return phrase, _day_night((day_icon, night_icon), isDayTime)


def calculate_precip_text(group, pop, skyCover, isDayTime):
    """
    Calculates the precipitation phrase and icon of the dominant group.

    Parameters:
    - group (WeatherGroup): The dominant weather group
    - pop (float): The period's maximum PoP in percent
    - skyCover (float): The period's average sky cover in percent
    - isDayTime (bool): Whether the period is daytime

    Returns:
    - str | None: The precipitation phrase
    - str | None: The icon with its PoP suffix
    """
    if _missing(pop) or pop < POP_THRESHOLDS["precip"]:
        return None, None

    wx_type = group.wx_type
    if wx_type == "RW":
        organized = not _missing(skyCover) and skyCover > ORGANIZED_SKY_COVER
        icons = SHOWER_ICONS["organized" if organized else "scattered"]
        return SHOWER_PHRASE, calculate_pop_icon(_day_night(icons, isDayTime), pop)

    if wx_type in ("S", "SW") and group.intensity == "--":
        phrase, day_icon, night_icon = FLURRIES_PHRASE
    elif wx_type in PRECIP_PHRASES:
        phrase, day_icon, night_icon = PRECIP_PHRASES[wx_type]
    else:
        return None, None
    return phrase, calculate_pop_icon(_day_night((day_icon, night_icon), isDayTime), pop)


def mixture_families(dominant):
    """Precipitation families flagged in the dominant sample."""
    return sorted(
        family
        for family, flags in MIXTURE_FAMILIES.items()
        if any(getattr(dominant, flag) for flag in flags)
    )


def calculate_mixture_text(dominant, pop, isDayTime):
    """
    Calculates the combined phrase when several precipitation types co-occur.

    Parameters:
    - dominant (DominantCondition): The period's dominant condition
    - pop (float): The period's maximum PoP in percent
    - isDayTime (bool): Whether the period is daytime

    Returns:
    - tuple: (phrase, icon) or (None, None) when fewer than two families are present
    """
    if _missing(pop) or pop < POP_THRESHOLDS["precip"]:
        return None, None
    families = mixture_families(dominant)
    if len(families) < 2:
        return None, None
    if len(families) > 2:
        phrase, icon = WINTRY_MIX
    else:
        phrase, icon = MIXTURE_PHRASES[tuple(families)]
    if not isDayTime:
        icon = "n" + icon
    return phrase, calculate_pop_icon(icon, pop)


def calculate_thunderstorm_text(dominant, pop, skyCover, isDayTime):
    """
    Calculates the thunderstorm phrase and icon.

    Any thunderstorm group in the dominant sample counts. Damaging wind, large
    hail or tornado qualifiers make the phrase "Severe Tstms".

    Returns:
    - tuple: (phrase, icon) or (None, None)
    """
    if _missing(pop) or pop < POP_THRESHOLDS["thunder"]:
        return None, None
    storms = [g for g in dominant.groups if g.wx_type == "T"]
    if not storms:
        return None, None

    severe = any(g.has_qualifier(*SEVERE_QUALIFIERS) for g in storms)
    organized = not _missing(skyCover) and skyCover > ORGANIZED_SKY_COVER
    icons = THUNDER_ICONS["organized" if organized else "scattered"]
    phrase = SEVERE_THUNDER_PHRASE if severe else THUNDER_PHRASE
    return phrase, calculate_pop_icon(_day_night(icons, isDayTime), pop)
