"""Streaming trend smoothing for numeric series."""

from .exceptions import InvalidParameterError, SmoothlineValidationError
from .indicators import DEFAULT_PERIOD, RelativeMovingAverage, close_value, rma
from .protocols import Close, Next, Reset

__all__ = [
    "DEFAULT_PERIOD",
    "RelativeMovingAverage",
    "rma",
    "close_value",
    "Close",
    "Next",
    "Reset",
    "InvalidParameterError",
    "SmoothlineValidationError",
]
