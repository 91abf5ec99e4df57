from __future__ import annotations

"""Structural interfaces shared by indicators and the records they consume."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Close(Protocol):
    """Records exposing a closing value, e.g. an OHLC bar."""

    @property
    def close(self) -> float: ...


@runtime_checkable
class Next(Protocol):
    """Indicators that consume one sample and emit the updated output."""

    def update(self, value: float) -> float: ...


@runtime_checkable
class Reset(Protocol):
    """Indicators that can return to their pristine state."""

    def reset(self) -> None: ...


__all__ = ["Close", "Next", "Reset"]
