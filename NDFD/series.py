"""Data model shared by the period summary modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Union

import numpy as np

from NDFD.constants.shared_const import MISSING_DATA, SECONDS_PER_HOUR
from NDFD.utils.indices import ELEMENT_PERIOD_HOURS, NDFDElement


class SampleStatus(Enum):
    OK = "ok"
    MISSING = "missing"
    NOT_APPLICABLE = "notApplicable"


@dataclass(frozen=True)
class Sample:
    """One value of an element. ``valid_time`` is the end of the interval it describes."""

    valid_time: int
    value: Union[float, str]
    status: SampleStatus = SampleStatus.OK

    @property
    def ok(self) -> bool:
        return self.status is SampleStatus.OK


@dataclass(frozen=True)
class Series:
    """Time-ascending samples of a single element."""

    element: NDFDElement
    samples: Tuple[Sample, ...]
    period_hours: int = 0

    def __post_init__(self):
        object.__setattr__(self, "samples", tuple(self.samples))
        if not self.period_hours:
            object.__setattr__(
                self, "period_hours", ELEMENT_PERIOD_HOURS.get(self.element, 3)
            )

    def __len__(self):
        return len(self.samples)

    @property
    def valid_times(self) -> np.ndarray:
        return np.array([s.valid_time for s in self.samples], dtype=np.int64)

    @property
    def start_times(self) -> np.ndarray:
        """Start of each sample's interval."""
        return self.valid_times - self.period_hours * SECONDS_PER_HOUR

    @property
    def values(self) -> np.ndarray:
        """Numeric values with ``MISSING_DATA`` in place of unusable samples.

        Weather strings are returned as an object array with None for unusable samples.
        """
        if self.element == NDFDElement.WX:
            return np.array([s.value if s.ok else None for s in self.samples], dtype=object)
        return np.array(
            [float(s.value) if s.ok else MISSING_DATA for s in self.samples],
            dtype=float,
        )

    @property
    def first_valid_time(self):
        return self.samples[0].valid_time if self.samples else None

    def subset(self, start, stop) -> "Series":
        return Series(self.element, self.samples[start:stop], self.period_hours)


@dataclass(frozen=True)
class Window:
    """The interval being summarized."""

    start: int
    end: int
    number_of_days: int
    mode: str
    evening_cycle: bool = False

    @property
    def period_hours(self) -> int:
        return 24 if self.mode == "24hourly" else 12


@dataclass(frozen=True)
class Period:
    index: int
    start_time: int
    end_time: int
    length_hours: int
    is_day: bool = True

    def contains(self, instant) -> bool:
        return self.start_time <= instant < self.end_time


@dataclass(frozen=True)
class ClassificationResult:
    phrase: str
    icon_id: str | None = None
    extension: str = field(default="jpg", compare=False)

    @property
    def icon_file(self):
        """Icon file name handed to the XML writer."""
        if self.icon_id is None:
            return None
        return f"{self.icon_id}.{self.extension}"
