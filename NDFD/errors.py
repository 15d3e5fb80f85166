"""Exceptions and warnings raised by the period summary core."""


class NDFDError(Exception):
    """Base class for summary errors."""


class FormatError(NDFDError, ValueError):
    """A date/time string could not be parsed."""


class DegradedSeries(UserWarning):
    """Warning emitted when a series has no usable samples after clipping."""


class InsufficientElementsForIcon(UserWarning):
    """Warning emitted when an element needed for icons is entirely missing."""
