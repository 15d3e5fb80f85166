"""Translations and icons for NDFD hazard codes such as ``WS.W``."""

from NDFD.constants.hazard_const import (
    HAZARD_CODE_SEPARATOR,
    HAZARD_ICONS,
    HAZARD_PHENOMENA,
    HAZARD_SIGNIFICANCE,
)
from NDFD.constants.shared_const import NONE_STR


def hazard_phenomena(code):
    """
    Translates a hazard phenomena code and finds its icon.

    Parameters:
    - code (str): The phenomena part of the hazard, e.g. "GL"

    Returns:
    - tuple: (English text, icon file or None). Unknown codes give ("none", None).
    """
    text = HAZARD_PHENOMENA.get(code)
    if text is None:
        return NONE_STR, None
    return text, HAZARD_ICONS.get(code)


def parse_hazard_code(hazard):
    """Split ``"WS.W"`` into ``("WS", "W")``; a bare code gets ``none`` significance."""
    phenomena, _, significance = hazard.strip().partition(HAZARD_CODE_SEPARATOR)
    return phenomena or NONE_STR, significance or NONE_STR


def describe_hazard(hazard):
    """English text of a full hazard code, e.g. "Winter Storm Warning"."""
    phenomena, significance = parse_hazard_code(hazard)
    text, _ = hazard_phenomena(phenomena)
    if text == NONE_STR:
        return NONE_STR
    sig_text = HAZARD_SIGNIFICANCE.get(significance, NONE_STR)
    if sig_text == NONE_STR:
        return text
    return f"{text} {sig_text}"
