"""Pinlayout - place a single child inside its parent from per-axis pins."""

from .core import (
    AxisPin,
    BothEdges,
    EndAndSize,
    Fill,
    Inset,
    PinError,
    SizeAndMiddle,
    Span,
    StartAndSize,
    pin,
    resolve_span,
    resolve_spans,
)
from .layout import Pinned, PinnedLoader
from .render import BoxConstraints, LeafBox, Offset, PinnedBox, Rect, RenderBox, Size

__version__ = "0.1.0"

__all__ = [
    "AxisPin",
    "BothEdges",
    "EndAndSize",
    "Fill",
    "Inset",
    "PinError",
    "SizeAndMiddle",
    "Span",
    "StartAndSize",
    "pin",
    "resolve_span",
    "resolve_spans",
    "Pinned",
    "PinnedLoader",
    "BoxConstraints",
    "LeafBox",
    "Offset",
    "PinnedBox",
    "Rect",
    "RenderBox",
    "Size",
]
