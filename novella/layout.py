"""Anchored, size-mode based layout of scene objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from novella.attributes import Layoutable
from novella.vector import Rectangle, Vector2


class Anchor(Enum):
    """Point of the parent that an object is aligned to."""

    TOP_LEFT = 0
    TOP_CENTER = 1
    TOP_RIGHT = 2
    CENTER_LEFT = 3
    CENTER = 4
    CENTER_RIGHT = 5
    BOTTOM_LEFT = 6
    BOTTOM_CENTER = 7
    BOTTOM_RIGHT = 8


class SizeMode(Enum):
    """How a dimension is derived."""

    FIXED = 0
    PERCENT = 1
    FIT_WIDTH = 2
    FIT_HEIGHT = 3


@dataclass
class Layout:
    """Placement rules for one object."""

    anchor: Anchor = Anchor.TOP_LEFT
    width_mode: SizeMode = SizeMode.FIXED
    height_mode: SizeMode = SizeMode.FIXED
    width: int = 0
    height: int = 0
    width_percent: float = 100.0
    height_percent: float = 100.0
    offset: Vector2 = field(default_factory=lambda: Vector2(0, 0))


# Fraction of the free space placed before the object, per anchor.
_ANCHOR_FRACTIONS: dict[Anchor, tuple[float, float]] = {
    Anchor.TOP_LEFT: (0.0, 0.0),
    Anchor.TOP_CENTER: (0.5, 0.0),
    Anchor.TOP_RIGHT: (1.0, 0.0),
    Anchor.CENTER_LEFT: (0.0, 0.5),
    Anchor.CENTER: (0.5, 0.5),
    Anchor.CENTER_RIGHT: (1.0, 0.5),
    Anchor.BOTTOM_LEFT: (0.0, 1.0),
    Anchor.BOTTOM_CENTER: (0.5, 1.0),
    Anchor.BOTTOM_RIGHT: (1.0, 1.0),
}


class LayoutSystem:
    """Turns layouts into rectangles in the parent's coordinate space."""

    def compute(self, layout: Layout, parent_size: Vector2) -> Rectangle:
        """The rectangle a layout occupies inside a parent of the given size."""
        size = self._compute_size(layout, parent_size)
        position = self._compute_position(layout, size, parent_size)
        return Rectangle(position.x, position.y, size.x, size.y)

    def compute_scene(self, scene: Any, window_size: Vector2) -> None:
        """Lay out every layoutable object of a scene."""
        for obj in scene.objects:
            if isinstance(obj, Layoutable):
                obj.computed_rectangle = self.compute(obj.layout, window_size)

    @staticmethod
    def compute_label(layout: Layout, text_size: Vector2, parent_size: Vector2) -> Rectangle:
        """The rectangle of a text whose size is already measured."""
        position = LayoutSystem._compute_position(layout, text_size, parent_size)
        position = position + Vector2(float(layout.offset.x), float(layout.offset.y))
        return Rectangle(position.x, position.y, text_size.x, text_size.y)

    @staticmethod
    def _compute_size(layout: Layout, parent_size: Vector2) -> Vector2:
        width = _dimension(layout.width_mode, SizeMode.FIT_WIDTH, layout.width,
                           layout.width_percent, float(parent_size.x))
        height = _dimension(layout.height_mode, SizeMode.FIT_HEIGHT, layout.height,
                            layout.height_percent, float(parent_size.y))
        return Vector2(width, height)

    @staticmethod
    def _compute_position(layout: Layout, size: Vector2, parent_size: Vector2) -> Vector2:
        fx, fy = _ANCHOR_FRACTIONS[layout.anchor]
        x = _place(fx, parent_size.x, size.x) + layout.offset.x
        y = _place(fy, parent_size.y, size.y) + layout.offset.y
        return Vector2(float(x), float(y))


def _dimension(mode: SizeMode, fit_mode: SizeMode, fixed: int, percent: float, parent: float) -> float:
    if mode is SizeMode.PERCENT:
        return parent * (min(max(percent, 0.0), 100.0) / 100.0)
    if mode is fit_mode:
        return parent
    return float(fixed)


def _place(fraction: float, parent: float, size: float) -> float:
    if fraction == 0.0:
        return 0.0
    if fraction == 1.0:
        return parent - size
    return (parent - size) * fraction