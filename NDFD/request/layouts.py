"""Memo of time layouts shared by elements of a forecast product.

Elements with the same period length, number of values and first start time
share one layout. The cache belongs to the caller building a product and is
never module level state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from NDFD.constants.shared_const import SECONDS_PER_HOUR


@dataclass(frozen=True)
class TimeLayout:
    key: str
    period_hours: int
    start_times: Tuple[int, ...]
    end_times: Optional[Tuple[int, ...]] = None


class TimeLayoutCache:
    """Hands out layout keys such as ``k-p12h-n14-1``, reusing equal layouts."""

    def __init__(self):
        self._layouts: Dict[Tuple[int, int, int], TimeLayout] = {}

    def __len__(self):
        return len(self._layouts)

    def __contains__(self, memo_key):
        return memo_key in self._layouts

    @property
    def layouts(self):
        return list(self._layouts.values())

    def layout(
        self,
        period_hours: int,
        start_times: Sequence[int],
        end_times: Optional[Sequence[int]] = None,
    ) -> TimeLayout:
        """
        Returns the layout for a set of start times, creating it when new.

        Parameters:
        - period_hours (int): Length of each interval in hours
        - start_times (list[int]): Interval starts in unix seconds
        - end_times (list[int] | None): Interval ends, for elements that describe intervals

        Returns:
        - TimeLayout: The existing or newly numbered layout
        """
        if not start_times:
            raise ValueError("A time layout needs at least one start time")
        memo_key = (int(period_hours), len(start_times), int(start_times[0]))
        existing = self._layouts.get(memo_key)
        if existing is not None:
            return existing

        serial = len(self._layouts) + 1
        layout = TimeLayout(
            key=f"k-p{int(period_hours)}h-n{len(start_times)}-{serial}",
            period_hours=int(period_hours),
            start_times=tuple(int(t) for t in start_times),
            end_times=tuple(int(t) for t in end_times) if end_times is not None else None,
        )
        self._layouts[memo_key] = layout
        return layout

    def layout_for_periods(self, periods) -> TimeLayout:
        """Layout of the summary periods themselves."""
        return self.layout(
            periods[0].length_hours,
            [p.start_time for p in periods],
            [p.end_time for p in periods],
        )

    def layout_for_series(self, clipped) -> TimeLayout:
        """Layout of the usable samples of a clipped series."""
        series = clipped.usable
        ends = [int(t) for t in series.valid_times]
        starts = [t - series.period_hours * SECONDS_PER_HOUR for t in ends]
        return self.layout(series.period_hours, starts, ends)
