import pytest

from novella.attributes import (
    Clickable,
    ComponentType,
    GameObject,
    Interactable,
    Layoutable,
    Renderable,
)
from novella.color import WHITE, Color
from novella.layout import Anchor, Layout
from novella.vector import Rectangle, Vector2


class _Thing(GameObject, Renderable, Clickable, Interactable, Layoutable):
    component_type = ComponentType.BUTTON

    def __init__(self, layout):
        Layoutable.__init__(self, layout)
        self.drawn_with = None

    def serialize(self):
        return {"id": self.object_id, "type": self.component_type.value}

    def draw(self, renderer):
        self.drawn_with = renderer

    def contains(self, mouse_pos):
        r = self.computed_rectangle
        return r.x <= mouse_pos.x <= r.x + r.width and r.y <= mouse_pos.y <= r.y + r.height

    def accepts_keyboard_input(self):
        return True


@pytest.mark.parametrize("abstract", [GameObject, Renderable, Clickable, Interactable])
def test_abstract_classes_cannot_be_instantiated(abstract):
    with pytest.raises(TypeError):
        abstract()


def test_component_type_order():
    assert [t.value for t in ComponentType] == [0, 1, 2, 3]
    assert ComponentType(0) is ComponentType.BACKGROUND
    assert ComponentType(3) is ComponentType.BUTTON


def test_layoutable_stores_layout_and_empty_rectangle():
    layout = Layout(anchor=Anchor.CENTER)
    thing = _Thing(layout)
    assert thing.layout is layout
    assert thing.computed_rectangle == Rectangle(0.0, 0.0, 0.0, 0.0)


def test_renderable_defaults():
    thing = _Thing(Layout())
    assert thing.render_layer == 0
    assert thing.color == WHITE


def test_renderable_attributes_are_per_instance():
    a = _Thing(Layout())
    b = _Thing(Layout())
    a.render_layer = 7
    a.color = Color(0, 0, 0, 0)
    assert b.render_layer == 0
    assert b.color == WHITE


def test_concrete_object_behaviour():
    thing = _Thing(Layout())
    thing.object_id = 42
    thing.computed_rectangle = Rectangle(10.0, 10.0, 5.0, 5.0)
    assert thing.serialize() == {"id": 42, "type": ComponentType.BUTTON.value}
    assert thing.contains(Vector2(12.0, 14.0))
    assert not thing.contains(Vector2(20.0, 12.0))
    thing.draw("renderer")
    assert thing.drawn_with == "renderer"
    assert thing.accepts_keyboard_input() is True