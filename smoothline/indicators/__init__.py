"""Streaming indicators built on top of ``smoothline``."""

from .rma import DEFAULT_PERIOD, RelativeMovingAverage, rma
from .helpers import close_value

__all__ = [
    "DEFAULT_PERIOD",
    "RelativeMovingAverage",
    "rma",
    "close_value",
]
