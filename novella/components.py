"""The visual components a scene is built from."""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from novella.attributes import Clickable, ComponentType, GameObject, Layoutable, Renderable
from novella.color import WHITE
from novella.layout import Layout, LayoutSystem
from novella.vector import Vector2


def _within(point: Vector2, x: float, y: float, width: float, height: float) -> bool:
    return x <= point.x <= x + width and y <= point.y <= y + height


class _TexturedComponent(GameObject, Renderable, Layoutable):
    """A texture stretched over the object's computed rectangle."""

    component_type: ClassVar[ComponentType]
    default_render_layer: ClassVar[int] = 0

    def __init__(self, texture: Any, layout: Layout, render_layer: Optional[int] = None) -> None:
        Layoutable.__init__(self, layout)
        self.texture = texture
        self.render_layer = self.default_render_layer if render_layer is None else render_layer
        self.color = WHITE
        self.rotation = 0.0
        self.object_id = 0

    def _draw_texture(self, renderer: Any) -> None:
        renderer.draw_texture(self.texture, self.computed_rectangle, self.rotation, self.color)


class Background(_TexturedComponent):
    """A full-scene picture, drawn behind other objects by default."""

    component_type = ComponentType.BACKGROUND
    default_render_layer = -1

    def draw(self, renderer: Any) -> None:
        """Draw the texture over the computed rectangle."""
        self._draw_texture(renderer)

    def serialize(self) -> dict[str, Any]:
        """Components do not describe themselves yet; this is always empty."""
        return {}


class Character(_TexturedComponent):
    """A character sprite."""

    component_type = ComponentType.CHARACTER

    def draw(self, renderer: Any) -> None:
        """Draw the texture over the computed rectangle."""
        self._draw_texture(renderer)

    def serialize(self) -> dict[str, Any]:
        """Components do not describe themselves yet; this is always empty."""
        return {}


class Button(_TexturedComponent, Clickable):
    """A clickable picture."""

    component_type = ComponentType.BUTTON

    def draw(self, renderer: Any) -> None:
        """Draw the texture over the computed rectangle."""
        self._draw_texture(renderer)

    def serialize(self) -> dict[str, Any]:
        """Components do not describe themselves yet; this is always empty."""
        return {}

    def contains(self, mouse_pos: Vector2) -> bool:
        """Whether the point lies inside the computed rectangle, edges included."""
        rect = self.computed_rectangle
        return _within(mouse_pos, rect.x, rect.y, rect.width, rect.height)


class Label(GameObject, Renderable, Clickable, Layoutable):
    """A line of text in a given font, size and letter spacing."""

    component_type = ComponentType.LABEL

    def __init__(self, font: Any, size: int, text: str, layout: Layout, render_layer: int = 0) -> None:
        Layoutable.__init__(self, layout)
        self.font = font
        self.size = size
        self.text = text
        self.spacing = 1.0
        self.render_layer = render_layer
        self.color = WHITE
        self.object_id = 0

    @property
    def font(self) -> Any:
        return self._font

    @font.setter
    def font(self, font: Any) -> None:
        if font is None:
            raise ValueError("Cannot set the font to None")
        self._font = font

    def _text_size(self) -> Vector2:
        return self._font.measure(self.text, float(self.size), self.spacing)

    def draw(self, renderer: Any) -> None:
        """Draw the text at the computed rectangle's corner."""
        renderer.draw_font(self._font, self.text, self.computed_rectangle, self.size, self.spacing, self.color)

    def serialize(self) -> dict[str, Any]:
        """Components do not describe themselves yet; this is always empty."""
        return {}

    def contains(self, mouse_pos: Vector2) -> bool:
        """Whether the point lies on the measured text, edges included."""
        extent = self._text_size()
        rect = self.computed_rectangle
        return _within(mouse_pos, rect.x, rect.y, extent.x, extent.y)

    def compute_size(self, parent_size: Vector2) -> None:
        """Place the label from its measured text inside a parent of the given size."""
        self.computed_rectangle = LayoutSystem.compute_label(self.layout, self._text_size(), parent_size)