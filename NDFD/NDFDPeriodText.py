# %% Script to generate the weather phrase and icon of a 12 or 24 hour NDFD period
# Rules run in priority order: obstructions, precipitation, mixtures,
# thunderstorms, then the sky/temperature/wind fallback.

import os

from NDFD.NDFDTextHelper import (
    calculate_mixture_text,
    calculate_obstruction_text,
    calculate_precip_text,
    calculate_sky_text,
    calculate_sky_trend,
    calculate_temp_text,
    calculate_thunderstorm_text,
    calculate_wind_text,
)
from NDFD.series import ClassificationResult

ICON_EXTENSION = os.environ.get("NDFD_ICON_EXTENSION", "jpg")

NO_DATA_PHRASE = "No Data"


def calculate_period_text(aggregate, dominant, is_day_time, date=None, icons=True):
    """
    Calculates the weather phrase and icon for one forecast period.

    Parameters:
    - aggregate (PeriodAggregate): Sky, wind, PoP and temperature statistics
    - dominant (DominantCondition): The period's dominant weather condition
    - is_day_time (bool): Whether the period is daytime
    - date (datetime.date | None): The local date of the period, used for Blustery
    - icons (bool): Whether icons are produced for this run

    Returns:
    - ClassificationResult: The phrase and icon of the period
    """
    c_text = None
    c_icon = None
    group = dominant.group
    pop = aggregate.max_pop
    sky = aggregate.avg_sky_cover

    # Priority 1: obstructions fire regardless of PoP
    obstruction_text, obstruction_icon = calculate_obstruction_text(group, is_day_time)
    if obstruction_text is not None:
        c_text, c_icon = obstruction_text, obstruction_icon

    # Priority 2: precipitation types
    precip_text, precip_icon = calculate_precip_text(group, pop, sky, is_day_time)
    if precip_text is not None:
        c_text, c_icon = precip_text, precip_icon

    # Priority 3: mixtures supersede single types
    mix_text, mix_icon = calculate_mixture_text(dominant, pop, is_day_time)
    if mix_text is not None:
        c_text, c_icon = mix_text, mix_icon

    # Priority 4: thunderstorms
    thu_text, thu_icon = calculate_thunderstorm_text(dominant, pop, sky, is_day_time)
    if thu_text is not None:
        c_text, c_icon = thu_text, thu_icon

    # Priority 5: sky, then temperature, then wind
    if c_icon is None:
        c_text, c_icon = calculate_sky_text(sky, is_day_time)
        trend_text = calculate_sky_trend(aggregate)
        if trend_text is not None:
            c_text = trend_text

        temp_text, temp_icon = calculate_temp_text(
            aggregate.period_max_temperature, is_day_time
        )
        if temp_text is not None:
            c_text, c_icon = temp_text, temp_icon

        wind_text, wind_icon = calculate_wind_text(
            aggregate.max_wind_speed,
            is_day_time,
            direction=aggregate.wind_direction_at_max_speed,
            temperature=aggregate.period_max_temperature,
            date=date,
        )
        if wind_text is not None:
            c_text = wind_text if c_text is None else f"{c_text} and {wind_text}"
            c_icon = wind_icon

    if c_text is None:
        c_text = NO_DATA_PHRASE

    return ClassificationResult(
        phrase=c_text,
        icon_id=c_icon if icons else None,
        extension=ICON_EXTENSION,
    )
