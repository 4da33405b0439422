"""Render boxes: the host-side interface and the pinned layout box."""

from .geometry import BoxConstraints, Offset, Rect, Size
from .box import LeafBox, RenderBox, SingleChildRenderBox
from .pinned_box import PinnedBox

__all__ = [
    "BoxConstraints",
    "Offset",
    "Rect",
    "Size",
    "LeafBox",
    "RenderBox",
    "SingleChildRenderBox",
    "PinnedBox",
]
