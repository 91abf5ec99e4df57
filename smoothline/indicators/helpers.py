"""Helper utilities for feeding records into indicators."""

from collections.abc import Mapping
from typing import Any

__all__ = ["close_value"]


def close_value(record: Any) -> float:
    """Return the closing value exposed by ``record``.

    ``record`` may carry ``close`` as an attribute, a property or a
    zero-argument method, or be a mapping with a ``"close"`` key. Objects such
    as :class:`pandas.Series` rows satisfy the attribute form.

    Raises
    ------
    TypeError
        If ``record`` exposes no closing value.
    """

    if isinstance(record, Mapping):
        try:
            raw = record["close"]
        except KeyError:
            raise TypeError("record mapping has no 'close' key") from None
    else:
        try:
            raw = record.close
        except AttributeError:
            raise TypeError(
                f"{type(record).__name__} does not expose a closing value"
            ) from None
        if callable(raw):
            raw = raw()
    return float(raw)
