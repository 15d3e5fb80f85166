"""Indices and names used for NDFD elements."""
from enum import IntEnum


class NDFDElement(IntEnum):
    MAX = 0
    MIN = 1
    POP = 2
    TEMP = 3
    WD = 4
    WS = 5
    TD = 6
    SKY = 7
    QPF = 8
    SNOW = 9
    WX = 10
    WH = 11
    AT = 12
    RH = 13
    UNDEF = 14
    MATCHALL = 15


# Short names (convention 0)
NDFD_TYPE_NAMES = (
    "maxt",
    "mint",
    "pop12",
    "t",
    "winddir",
    "windspd",
    "td",
    "sky",
    "qpf",
    "snowamt",
    "wx",
    "waveheight",
    "apparentt",
    "rh",
)

# Standard NDFD file names (convention 1)
NDFD_FILE_NAMES = (
    "maxt",
    "mint",
    "pop12",
    "temp",
    "wdir",
    "wspd",
    "td",
    "sky",
    "qpf",
    "snow",
    "wx",
    "waveh",
    "apt",
    "rhm",
)

# Verification file names (convention 2)
NDFD_FILE2_NAMES = (
    "mx",
    "mn",
    "po",
    "tt",
    "wd",
    "ws",
    "dp",
    "cl",
    "qp",
    "sn",
    "wx",
    "wh",
    "at",
    "rh",
)

_CONVENTIONS = {
    0: NDFD_TYPE_NAMES,
    1: NDFD_FILE_NAMES,
    2: NDFD_FILE2_NAMES,
}

# Length of the interval each element describes, in hours.
# Instantaneous elements default to the 3 hour grid spacing of the first days.
ELEMENT_PERIOD_HOURS = {
    NDFDElement.MAX: 12,
    NDFDElement.MIN: 12,
    NDFDElement.POP: 12,
    NDFDElement.TEMP: 3,
    NDFDElement.WD: 3,
    NDFDElement.WS: 3,
    NDFDElement.TD: 3,
    NDFDElement.SKY: 3,
    NDFDElement.QPF: 6,
    NDFDElement.SNOW: 6,
    NDFDElement.WX: 3,
    NDFDElement.WH: 3,
    NDFDElement.AT: 3,
    NDFDElement.RH: 3,
}


def lookup_element(name, to_lower=True, convention=0):
    """
    Finds the element matching a name.

    Parameters:
    - name (str): The element name to look up
    - to_lower (bool): Lower case the name before comparing
    - convention (int): 0 for short names, 1 for NDFD file names, 2 for verification file names

    Returns:
    - NDFDElement: The matching element, or UNDEF when nothing matches
    """
    names = _CONVENTIONS.get(convention)
    if names is None:
        return NDFDElement.UNDEF
    if to_lower:
        name = name.lower()
    try:
        return NDFDElement(names.index(name))
    except ValueError:
        return NDFDElement.UNDEF


def element_name(element, convention=0):
    """Return the name of an element, or None for UNDEF/MATCHALL."""
    if element >= NDFDElement.UNDEF:
        return None
    names = _CONVENTIONS.get(convention)
    if names is None:
        return None
    return names[element]
