"""Capabilities that scene objects may have."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

from novella.color import WHITE, Color
from novella.vector import Rectangle, Vector2

if TYPE_CHECKING:
    from novella.layout import Layout


class ComponentType(Enum):
    """Kind of a scene component, used when serialising."""

    BACKGROUND = 0
    CHARACTER = 1
    LABEL = 2
    BUTTON = 3


class GameObject(ABC):
    """Anything that lives in a scene and has an id."""

    component_type: ClassVar[ComponentType]
    object_id: int = 0

    @abstractmethod
    def serialize(self) -> dict[str, Any]:
        """Describe the object as JSON-compatible data."""


class Renderable(ABC):
    """An object that can be drawn, ordered by its render layer."""

    render_layer: int = 0
    color: Color = WHITE

    @abstractmethod
    def draw(self, renderer: Any) -> None:
        """Draw the object with the given renderer."""


class Clickable(ABC):
    """An object that can be hit by the mouse."""

    @abstractmethod
    def contains(self, mouse_pos: Vector2) -> bool:
        """Whether the point lies on the object."""


class Interactable(ABC):
    """An object that receives keyboard events."""

    @abstractmethod
    def accepts_keyboard_input(self) -> bool:
        """Whether the object currently wants keyboard input."""


class Layoutable:
    """An object placed by the layout system."""

    def __init__(self, layout: Layout) -> None:
        self.layout = layout
        self.computed_rectangle = Rectangle()