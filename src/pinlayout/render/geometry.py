"""2D geometry value types shared by the render boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Self

import numpy as np
from numpy.typing import ArrayLike


@dataclass(frozen=True)
class Size:
    """Width and height of a box."""

    width: float
    height: float

    @classmethod
    def coerce(cls, value: Size | ArrayLike) -> Self:
        """Accept a Size or any [width, height] sequence."""
        if isinstance(value, Size):
            return value
        values = np.asarray(value, dtype=np.float64)
        if values.shape != (2,):
            raise ValueError(f"Size needs [width, height], got {value!r}")
        return cls(float(values[0]), float(values[1]))


@dataclass(frozen=True)
class Offset:
    """Position of a child's origin relative to its parent's origin."""

    dx: float
    dy: float

    @staticmethod
    def zero() -> Offset:
        return Offset(0.0, 0.0)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and its size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @classmethod
    def from_ltwh(cls, left: float, top: float, width: float, height: float) -> Self:
        return cls(left, top, width, height)

    @classmethod
    def from_offset_size(cls, offset: Offset, size: Size) -> Self:
        return cls(offset.dx, offset.dy, size.width, size.height)

    @classmethod
    def coerce(cls, value: Rect | ArrayLike) -> Self:
        """Accept a Rect or any [left, top, width, height] sequence."""
        if isinstance(value, Rect):
            return value
        values = np.asarray(value, dtype=np.float64)
        if values.shape != (4,):
            raise ValueError(f"Rect needs [left, top, width, height], got {value!r}")
        return cls(*(float(v) for v in values))


@dataclass(frozen=True)
class BoxConstraints:
    """Allowed range of sizes offered to a box by its parent.

    Either maximum may be infinite; the minimums are always finite.
    """

    min_width: float = 0.0
    max_width: float = math.inf
    min_height: float = 0.0
    max_height: float = math.inf

    @classmethod
    def tight(cls, size: Size) -> Self:
        """Constraints that allow exactly one size."""
        return cls(size.width, size.width, size.height, size.height)

    @classmethod
    def loose(cls, size: Size) -> Self:
        """Constraints that allow any size up to the given one."""
        return cls(0.0, size.width, 0.0, size.height)

    @property
    def is_tight(self) -> bool:
        return self.min_width >= self.max_width and self.min_height >= self.max_height

    @property
    def biggest(self) -> Size:
        return Size(self.max_width, self.max_height)

    @property
    def smallest(self) -> Size:
        return Size(self.min_width, self.min_height)

    def constrain(self, size: Size) -> Size:
        """Clamp a size into the allowed range."""
        return Size(
            min(max(size.width, self.min_width), self.max_width),
            min(max(size.height, self.min_height), self.max_height),
        )
