"""Minimal render box tree used as the host for pinned layout.

A RenderBox receives BoxConstraints from its parent, decides its own size in
perform_layout(), and is positioned by its parent through its offset. This is
the whole surface the pinned layout relies on, so any host framework can be
adapted by implementing it.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterator

from .geometry import BoxConstraints, Offset, Size

logger = logging.getLogger(__name__)


class RenderBox(ABC):
    """A node in the render tree with a size and an offset within its parent."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name or self.__class__.__name__
        self.parent: RenderBox | None = None
        self.offset: Offset = Offset.zero()
        self.size: Size | None = None
        self.constraints: BoxConstraints | None = None
        self.needs_layout = True

    def mark_needs_layout(self) -> None:
        """Flag this box and its ancestors so the next layout() from the root reaches it."""
        if self.needs_layout:
            return
        logger.debug("%s marked for layout", self.name)
        self.needs_layout = True
        if self.parent is not None:
            self.parent.mark_needs_layout()

    def layout(self, constraints: BoxConstraints) -> Size:
        """Lay out this box within the given constraints.

        The pass is skipped when the box is clean and the constraints are
        unchanged since the previous pass.

        Returns:
            The size chosen by the box
        """
        if not self.needs_layout and constraints == self.constraints and self.size is not None:
            return self.size

        self.constraints = constraints
        self.perform_layout()
        self.needs_layout = False
        return self.size

    @abstractmethod
    def perform_layout(self) -> None:
        """Compute self.size from self.constraints and lay out any children."""
        raise NotImplementedError

    def iter_children(self) -> Iterator[RenderBox]:
        return iter(())

    def iter_boxes(self) -> Iterator[RenderBox]:
        """Iterate over this box and all descendants (depth-first)."""
        yield self
        for child in self.iter_children():
            yield from child.iter_boxes()

    def __repr__(self) -> str:
        size_str = f", size={self.size.width}x{self.size.height}" if self.size else ""
        return f"{self.__class__.__name__}({self.name!r}{size_str})"


class SingleChildRenderBox(RenderBox):
    """A render box with at most one child."""

    def __init__(self, child: RenderBox | None = None, name: str | None = None) -> None:
        super().__init__(name)
        self._child: RenderBox | None = None
        self.child = child

    @property
    def child(self) -> RenderBox | None:
        return self._child

    @child.setter
    def child(self, child: RenderBox | None) -> None:
        if child is self._child:
            return
        if self._child is not None:
            self._child.parent = None
        self._child = child
        if child is not None:
            child.parent = self
        self.mark_needs_layout()

    def iter_children(self) -> Iterator[RenderBox]:
        if self._child is not None:
            yield self._child


class LeafBox(RenderBox):
    """A childless box that takes the size closest to its preferred size.

    Given tight constraints it takes exactly the offered size.
    """

    def __init__(self, preferred: Size | None = None, name: str | None = None) -> None:
        super().__init__(name)
        self.preferred = preferred or Size(0.0, 0.0)

    def perform_layout(self) -> None:
        self.size = self.constraints.constrain(self.preferred)
