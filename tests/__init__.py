"""Test package initialization.

Suppress noisy warnings during test runs.
"""

import warnings as _warnings

from NDFD.errors import DegradedSeries, InsufficientElementsForIcon

_warnings.filterwarnings("ignore")
_warnings.filterwarnings("default", category=DegradedSeries)
_warnings.filterwarnings("default", category=InsufficientElementsForIcon)
