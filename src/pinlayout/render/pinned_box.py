"""Render box that positions a single child from a pair of pins."""

from __future__ import annotations

import logging

from ..core.pin import AxisPin, Fill
from ..core.span import Span, resolve_span
from .box import RenderBox, SingleChildRenderBox
from .geometry import BoxConstraints, Offset, Rect, Size

logger = logging.getLogger(__name__)


class PinnedBox(SingleChildRenderBox):
    """Fills all the space offered to it and places its child by two pins.

    Each layout pass resolves the horizontal pin against the maximum width and
    the vertical pin against the maximum height. The child is laid out at
    exactly the resolved size and offset to the resolved start of each span.

    Assigning a pin that equals the current one does not schedule a layout.
    """

    def __init__(
        self,
        h_pin: AxisPin | None = None,
        v_pin: AxisPin | None = None,
        child: RenderBox | None = None,
        name: str | None = None,
    ) -> None:
        self._h_pin = h_pin if h_pin is not None else Fill()
        self._v_pin = v_pin if v_pin is not None else Fill()
        super().__init__(child, name)

    @property
    def h_pin(self) -> AxisPin:
        return self._h_pin

    @h_pin.setter
    def h_pin(self, value: AxisPin) -> None:
        if value == self._h_pin:
            return
        logger.debug("%s h_pin %r -> %r", self.name, self._h_pin, value)
        self._h_pin = value
        self.mark_needs_layout()

    @property
    def v_pin(self) -> AxisPin:
        return self._v_pin

    @v_pin.setter
    def v_pin(self, value: AxisPin) -> None:
        if value == self._v_pin:
            return
        logger.debug("%s v_pin %r -> %r", self.name, self._v_pin, value)
        self._v_pin = value
        self.mark_needs_layout()

    def perform_layout(self) -> None:
        constraints = self.constraints
        child = self.child

        if child is None:
            self.size = constraints.constrain(Size(0.0, 0.0))
            return

        max_width = constraints.max_width
        max_height = constraints.max_height
        h_span = resolve_span(self._h_pin, max_width)
        v_span = resolve_span(self._v_pin, max_height)
        logger.debug("%s spans h=%s v=%s", self.name, h_span, v_span)

        child.layout(BoxConstraints.tight(Size(h_span.size, v_span.size)))
        child.offset = Offset(h_span.start, v_span.start)

        self.size = Size(max_width, max_height)

    def spans(self, size: Size) -> tuple[Span, Span]:
        """Resolve both pins against a parent size without laying anything out."""
        return resolve_span(self._h_pin, size.width), resolve_span(self._v_pin, size.height)

    def child_rect(self) -> Rect | None:
        """The child's rectangle from the last layout pass, in this box's coordinates."""
        child = self.child
        if child is None or child.size is None:
            return None
        return Rect.from_offset_size(child.offset, child.size)
