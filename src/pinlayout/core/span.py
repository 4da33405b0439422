"""Resolution of a pin into a span along one axis."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .pin import AxisPin, BothEdges, EndAndSize, Fill, SizeAndMiddle, StartAndSize


@dataclass(frozen=True)
class Span:
    """Resolved start and end coordinates along one axis."""

    start: float
    end: float

    @property
    def size(self) -> float:
        """Length of the span, never negative."""
        return max(0.0, self.end - self.start)


def resolve_span(pin: AxisPin, available_length: float) -> Span:
    """Resolve a pin against the available length of its axis.

    A fixed-size child pinned to one edge is shifted back inside the parent
    rather than shrunk when the inset would push it past the opposite edge.

    Args:
        pin: The pin for this axis
        available_length: Maximum length offered by the container

    Returns:
        The resolved Span
    """
    length = available_length

    if isinstance(pin, BothEdges):
        start = pin.start.resolve(length)
        end = length - pin.end.resolve(length)
    elif isinstance(pin, StartAndSize):
        start = min(length - pin.size, pin.start.resolve(length))
        end = start + pin.size
    elif isinstance(pin, EndAndSize):
        end = max(pin.size, length - pin.end.resolve(length))
        start = end - pin.size
    elif isinstance(pin, SizeAndMiddle):
        start = pin.middle * (length - pin.size)
        end = start + pin.size
    elif isinstance(pin, Fill):
        start, end = 0.0, length
    else:
        raise TypeError(f"Not a pin: {pin!r}")

    return Span(start, end)


def resolve_spans(
    pin: AxisPin, lengths: ArrayLike
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Resolve a pin against many available lengths at once.

    Args:
        pin: The pin for this axis
        lengths: Available lengths, any shape

    Returns:
        Tuple of (starts, ends) arrays with the same shape as lengths
    """
    length = np.asarray(lengths, dtype=np.float64)

    if isinstance(pin, BothEdges):
        start = np.broadcast_to(pin.start.resolve(length), length.shape)
        end = length - pin.end.resolve(length)
    elif isinstance(pin, StartAndSize):
        start = np.minimum(length - pin.size, pin.start.resolve(length))
        end = start + pin.size
    elif isinstance(pin, EndAndSize):
        end = np.maximum(pin.size, length - pin.end.resolve(length))
        start = end - pin.size
    elif isinstance(pin, SizeAndMiddle):
        start = pin.middle * (length - pin.size)
        end = start + pin.size
    elif isinstance(pin, Fill):
        start = np.zeros_like(length)
        end = length.copy()
    else:
        raise TypeError(f"Not a pin: {pin!r}")

    return np.asarray(start, dtype=np.float64).copy(), np.asarray(end, dtype=np.float64)


def span_sizes(starts: NDArray[np.float64], ends: NDArray[np.float64]) -> NDArray[np.float64]:
    """Vectorised Span.size: clamp negative lengths to zero."""
    return np.maximum(0.0, ends - starts)
