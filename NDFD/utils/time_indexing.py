"""Helpers for mapping sample times onto forecast periods."""

from __future__ import annotations

import numpy as np

from NDFD.constants.shared_const import MISSING_DATA


def period_boundaries(periods) -> np.ndarray:
    """Ascending boundaries: every period start followed by the last end."""
    if not periods:
        return np.array([], dtype=np.int64)
    return np.array(
        [p.start_time for p in periods] + [periods[-1].end_time], dtype=np.int64
    )


def map_times_to_period_indices(
    times: np.ndarray, boundaries: np.ndarray, tolerance=None
) -> np.ndarray:
    """Return the period index each time belongs to based on ascending boundaries.

    Times before the first boundary fold into the first period and times past
    the last boundary into the last one. With a ``tolerance`` (seconds), only
    times within that distance of the outer boundaries fold; the rest map to
    ``MISSING_DATA``.
    """
    times = np.asarray(times)
    if len(boundaries) < 2:
        return np.full(len(times), MISSING_DATA, dtype=int)
    idx = np.searchsorted(boundaries, times, side="right") - 1
    idx = np.clip(idx, 0, len(boundaries) - 2).astype(int)
    if tolerance is not None:
        outside = (times < boundaries[0] - tolerance) | (
            times >= boundaries[-1] + tolerance
        )
        idx[outside] = MISSING_DATA
    return idx


def period_positions(index_array: np.ndarray, values: np.ndarray, period_index: int):
    """Positions of the usable samples that belong to one period."""
    mask = (index_array == period_index) & (values != MISSING_DATA)
    return np.flatnonzero(mask)
