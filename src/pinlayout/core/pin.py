"""Pin variants describing how a child is placed along one axis.

A pin is one of a small set of shapes, each a frozen dataclass:

- BothEdges: inset from both the near and the far edge
- StartAndSize: inset from the near edge plus a fixed size
- EndAndSize: inset from the far edge plus a fixed size
- SizeAndMiddle: fixed size, positioned by a fraction of the leftover space
- Fill: occupy the whole available length

Insets are either absolute or a fraction of the available length; the
distinction is kept until layout time, when the available length is known.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


class PinError(ValueError):
    """Raised when a pin is constructed from a forbidden combination of values."""


@dataclass(frozen=True)
class Inset:
    """Distance from a parent edge, absolute or as a fraction of the parent length."""

    value: float
    fraction: bool = False

    @classmethod
    def absolute(cls, value: float) -> Inset:
        return cls(value, fraction=False)

    @classmethod
    def relative(cls, value: float) -> Inset:
        return cls(value, fraction=True)

    def resolve(self, length: float) -> float:
        """Convert to an absolute distance for the given available length."""
        if self.fraction:
            return self.value * length
        return self.value


def _inset_fields(inset: Inset | None, name: str) -> dict[str, float | None]:
    if inset is None:
        return {name: None, f"{name}_fraction": None}
    if inset.fraction:
        return {name: None, f"{name}_fraction": inset.value}
    return {name: inset.value, f"{name}_fraction": None}


class _PinBase:
    """Shared helpers for the pin variants."""

    def fields(self) -> dict[str, float | None]:
        """Return the six-field view of this pin; unset fields are None."""
        start = getattr(self, "start", None)
        end = getattr(self, "end", None)
        result = {}
        result.update(_inset_fields(start, "start"))
        result.update(_inset_fields(end, "end"))
        result["size"] = getattr(self, "size", None)
        result["middle"] = getattr(self, "middle", None)
        return result

    def __repr__(self) -> str:
        values = ", ".join(f"{key}: {value}" for key, value in self.fields().items())
        return f"Pin({values})"


@dataclass(frozen=True, repr=False)
class BothEdges(_PinBase):
    start: Inset
    end: Inset


@dataclass(frozen=True, repr=False)
class StartAndSize(_PinBase):
    start: Inset
    size: float


@dataclass(frozen=True, repr=False)
class EndAndSize(_PinBase):
    end: Inset
    size: float


@dataclass(frozen=True, repr=False)
class SizeAndMiddle(_PinBase):
    size: float
    middle: float


@dataclass(frozen=True, repr=False)
class Fill(_PinBase):
    """Occupies the whole axis.

    Keeps any single edge or lone size it was built from, so incomplete pins
    stay distinct and print what was given, though all of them resolve alike.
    """

    start: Inset | None = None
    end: Inset | None = None
    size: float | None = None


AxisPin = Union[BothEdges, StartAndSize, EndAndSize, SizeAndMiddle, Fill]


def _side(value: float | None, fraction: float | None) -> Inset | None:
    if value is not None:
        return Inset.absolute(value)
    if fraction is not None:
        return Inset.relative(fraction)
    return None


def pin(
    start: float | None = None,
    start_fraction: float | None = None,
    end: float | None = None,
    end_fraction: float | None = None,
    size: float | None = None,
    middle: float | None = None,
) -> AxisPin:
    """Build a pin from the six optional field values.

    Args:
        start: Absolute inset from the near edge (left or top)
        start_fraction: Near-edge inset as a fraction of the available length
        end: Absolute inset from the far edge (right or bottom)
        end_fraction: Far-edge inset as a fraction of the available length
        size: Fixed length along the axis
        middle: Fraction of the leftover space placed before the child

    Returns:
        The pin variant matching the given values. Combinations that are legal
        but incomplete (one edge without a size, a size alone) give a Fill
        carrying those values.

    Raises:
        PinError: If the values combine in a forbidden way
    """
    if start is not None and start_fraction is not None:
        raise PinError("Cannot have both start and start_fraction values.")
    if end is not None and end_fraction is not None:
        raise PinError("Cannot have both end and end_fraction values.")
    if middle is not None and size is None:
        raise PinError("A size value is required with a middle value.")

    start_inset = _side(start, start_fraction)
    end_inset = _side(end, end_fraction)

    if middle is not None and (start_inset is not None or end_inset is not None):
        raise PinError("Only a size value can be used with a middle value.")
    if size is not None and start_inset is not None and end_inset is not None:
        raise PinError("Cannot have both start and end values when a size value is used.")

    if start_inset is not None and end_inset is not None:
        return BothEdges(start_inset, end_inset)
    if size is not None and start_inset is not None:
        return StartAndSize(start_inset, size)
    if size is not None and end_inset is not None:
        return EndAndSize(end_inset, size)
    if size is not None and middle is not None:
        return SizeAndMiddle(size, middle)
    return Fill(start=start_inset, end=end_inset, size=size)
