"""Pinned: immutable description of a pinned child, and its constructors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self

from numpy.typing import ArrayLike

from ..core.pin import AxisPin, Fill, pin
from ..render.box import RenderBox
from ..render.geometry import Rect, Size
from ..render.pinned_box import PinnedBox


@dataclass(frozen=True)
class Pinned:
    """Positions and sizes a single child from a horizontal and a vertical pin.

    Pinned fills as much space as its container offers and places the child
    inside it according to the pins. It follows the responsive layout model of
    design tools such as Adobe XD: each edge may be fixed to an absolute inset
    or scale with the parent, and each axis may keep a fixed size.

    Three ways to build one:

    - Pinned.from_pins(h_pin, v_pin): from ready-made pins
    - Pinned.semantic(left=..., width=..., ...): from edge and size names
    - Pinned.from_size(bounds, size, pin_left=..., ...): from a design export

    Example:
        # 20 from the left, 60 wide, vertically centred 40 tall
        badge = Pinned.semantic(left=20, width=60, height=40, vertical_middle=0.5)
        box = badge.create_render_object()
    """

    h_pin: AxisPin = field(default_factory=Fill)
    v_pin: AxisPin = field(default_factory=Fill)
    child: RenderBox | None = field(default=None, compare=False)
    name: str = field(default="pinned", compare=False)

    @classmethod
    def from_pins(
        cls,
        h_pin: AxisPin,
        v_pin: AxisPin,
        child: RenderBox | None = None,
        name: str = "pinned",
    ) -> Self:
        return cls(h_pin=h_pin, v_pin=v_pin, child=child, name=name)

    @classmethod
    def semantic(
        cls,
        left: float | None = None,
        left_fraction: float | None = None,
        right: float | None = None,
        right_fraction: float | None = None,
        width: float | None = None,
        horizontal_middle: float | None = None,
        top: float | None = None,
        top_fraction: float | None = None,
        bottom: float | None = None,
        bottom_fraction: float | None = None,
        height: float | None = None,
        vertical_middle: float | None = None,
        child: RenderBox | None = None,
        name: str = "pinned",
    ) -> Self:
        """Build from named edges and sizes.

        Horizontal names map onto the horizontal pin (left -> start,
        right -> end, width -> size) and vertical names onto the vertical pin
        (top -> start, bottom -> end, height -> size).

        Raises:
            PinError: If either axis combines values in a forbidden way
        """
        h_pin = pin(
            start=left,
            start_fraction=left_fraction,
            end=right,
            end_fraction=right_fraction,
            size=width,
            middle=horizontal_middle,
        )
        v_pin = pin(
            start=top,
            start_fraction=top_fraction,
            end=bottom,
            end_fraction=bottom_fraction,
            size=height,
            middle=vertical_middle,
        )
        return cls(h_pin=h_pin, v_pin=v_pin, child=child, name=name)

    @classmethod
    def from_size(
        cls,
        bounds: Rect | ArrayLike,
        size: Size | ArrayLike,
        pin_left: bool = False,
        pin_right: bool = False,
        pin_top: bool = False,
        pin_bottom: bool = False,
        fixed_width: bool = False,
        fixed_height: bool = False,
        child: RenderBox | None = None,
        name: str = "pinned",
    ) -> Self:
        """Build from a design export: original child bounds within an original parent.

        Pinned edges keep their absolute inset. Unpinned edges on a flexible
        axis keep their inset as a fraction of the parent, so the child scales
        with it. A fixed-size axis with no pinned edge keeps its relative
        position in the leftover space.

        Args:
            bounds: Original child rectangle within the parent [left, top, width, height]
            size: Original parent size [width, height]
            pin_left, pin_right, pin_top, pin_bottom: Keep that edge's absolute inset
            fixed_width, fixed_height: Keep the child's original length on that axis

        Raises:
            PinError: If an axis is fixed-size and pinned on both edges
        """
        bounds = Rect.coerce(bounds)
        size = Size.coerce(size)

        h_pin = _pin_from_design(
            near=bounds.left,
            far=bounds.right,
            extent=bounds.width,
            parent=size.width,
            pin_near=pin_left,
            pin_far=pin_right,
            fixed=fixed_width,
        )
        v_pin = _pin_from_design(
            near=bounds.top,
            far=bounds.bottom,
            extent=bounds.height,
            parent=size.height,
            pin_near=pin_top,
            pin_far=pin_bottom,
            fixed=fixed_height,
        )
        return cls(h_pin=h_pin, v_pin=v_pin, child=child, name=name)

    def create_render_object(self) -> PinnedBox:
        """Create the render box that performs this layout."""
        return PinnedBox(h_pin=self.h_pin, v_pin=self.v_pin, child=self.child, name=self.name)

    def update_render_object(self, box: PinnedBox) -> PinnedBox:
        """Push this configuration's pins onto an existing render box.

        The box only schedules a new layout when a pin actually changed.
        """
        box.h_pin = self.h_pin
        box.v_pin = self.v_pin
        return box

    def __str__(self) -> str:
        return f"Pinned(\n  h_pin: {self.h_pin!r},\n  v_pin: {self.v_pin!r}\n)"


def _pin_from_design(
    near: float,
    far: float,
    extent: float,
    parent: float,
    pin_near: bool,
    pin_far: bool,
    fixed: bool,
) -> AxisPin:
    """Derive one axis's pin from its original geometry and design flags."""
    return pin(
        size=extent if fixed else None,
        start=near if pin_near else None,
        end=parent - far if pin_far else None,
        start_fraction=_ratio(near, parent) if not pin_near and not fixed else None,
        end_fraction=_ratio(parent - far, parent) if not pin_far and not fixed else None,
        middle=_ratio(near, parent - extent) if fixed and not pin_near and not pin_far else None,
    )


def _ratio(part: float, whole: float) -> float:
    # A zero-length parent or leftover leaves nothing to distribute.
    if whole == 0:
        return 0.0
    return part / whole
