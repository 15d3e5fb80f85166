"""Utility subpackage for the NDFD period summaries."""

from .indices import NDFDElement, element_name, lookup_element
from .logging_config import setup_logging
from .time_indexing import map_times_to_period_indices, period_boundaries
from .time_utils import (
    local_datetime,
    local_instant,
    parse_local_string,
    round_to_nearest_ten,
    to_local_string,
)

__all__ = [
    "NDFDElement",
    "element_name",
    "lookup_element",
    "setup_logging",
    "map_times_to_period_indices",
    "period_boundaries",
    "local_datetime",
    "local_instant",
    "parse_local_string",
    "round_to_nearest_ten",
    "to_local_string",
]
