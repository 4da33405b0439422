"""Core pin model and span resolution."""

from .pin import (
    AxisPin,
    BothEdges,
    EndAndSize,
    Fill,
    Inset,
    PinError,
    SizeAndMiddle,
    StartAndSize,
    pin,
)
from .span import Span, resolve_span, resolve_spans, span_sizes

__all__ = [
    "AxisPin",
    "BothEdges",
    "EndAndSize",
    "Fill",
    "Inset",
    "PinError",
    "SizeAndMiddle",
    "StartAndSize",
    "pin",
    "Span",
    "resolve_span",
    "resolve_spans",
    "span_sizes",
]
