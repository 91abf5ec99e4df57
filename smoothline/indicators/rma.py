"""Relative moving average indicator.

The relative moving average (RMA) is a recursive exponential smoother with
``alpha = 1 / (period + 1)``. The first sample seeds the average verbatim;
every later sample ``x`` moves it to ``alpha * x + (1 - alpha) * previous``.
"""

from __future__ import annotations

import logging
from typing import Any

from smoothline.exceptions import InvalidParameterError
from smoothline.indicators.helpers import close_value

logger = logging.getLogger(__name__)

DEFAULT_PERIOD = 9


def _validate_period(period: Any) -> int:
    if isinstance(period, bool) or not isinstance(period, int):
        raise InvalidParameterError("period", period, "must be an integer")
    if period < 1:
        raise InvalidParameterError("period", period, "must be >= 1")
    return period


class RelativeMovingAverage:
    """Streaming relative moving average.

    Parameters
    ----------
    period:
        Nominal number of samples the average represents. Must be ``>= 1``.

    Raises
    ------
    InvalidParameterError
        If ``period`` is not a positive integer.
    """

    def __init__(self, period: int) -> None:
        try:
            self._period = _validate_period(period)
        except InvalidParameterError as exc:
            logger.warning("Rejected RMA configuration: %s", exc)
            raise
        self._weight = 1.0 / (self._period + 1.0)
        self._value: float | None = None

    @classmethod
    def default(cls) -> "RelativeMovingAverage":
        """Return a smoother using :data:`DEFAULT_PERIOD`."""
        return cls(DEFAULT_PERIOD)

    @property
    def period(self) -> int:
        return self._period

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def value(self) -> float | None:
        """Current smoothed value, ``None`` until the first sample."""
        return self._value

    @property
    def is_seeded(self) -> bool:
        return self._value is not None

    def update(self, value: float) -> float:
        """Feed ``value`` and return the updated average."""

        if self._value is None:
            self._value = value
        else:
            self._value = self._weight * value + (1.0 - self._weight) * self._value
        return self._value

    def update_close(self, record: Any) -> float:
        """Feed the closing value of ``record``."""
        return self.update(close_value(record))

    def reset(self) -> None:
        self._value = None
        logger.debug("%s reset", self)

    def __str__(self) -> str:
        return f"EMA({self._period})"

    def __repr__(self) -> str:
        return (
            f"RelativeMovingAverage(period={self._period}, "
            f"weight={self._weight!r}, value={self._value!r})"
        )


def rma(period: int = DEFAULT_PERIOD) -> RelativeMovingAverage:
    """Return a :class:`RelativeMovingAverage` for ``period``."""

    return RelativeMovingAverage(period)
