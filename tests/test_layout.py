import pytest

from novella.attributes import Layoutable
from novella.layout import Anchor, Layout, LayoutSystem, SizeMode
from novella.vector import Rectangle, Vector2

PARENT = Vector2(1920, 1200)


def _fixed(anchor, width=500, height=300, offset=Vector2(0, 0)):
    return Layout(anchor=anchor, width=width, height=height, offset=offset)


def test_default_layout_is_empty_at_origin():
    assert LayoutSystem().compute(Layout(), PARENT) == Rectangle(0.0, 0.0, 0.0, 0.0)


def test_fit_width_and_height_fill_parent():
    layout = Layout(width_mode=SizeMode.FIT_WIDTH, height_mode=SizeMode.FIT_HEIGHT)
    rect = LayoutSystem().compute(layout, PARENT)
    assert rect == Rectangle(0.0, 0.0, float(PARENT.x), float(PARENT.y))


def test_fixed_size_is_kept():
    rect = LayoutSystem().compute(_fixed(Anchor.TOP_LEFT, 500, 1000), PARENT)
    assert (rect.width, rect.height) == (500.0, 1000.0)


def test_percent_half():
    layout = Layout(width_mode=SizeMode.PERCENT, height_mode=SizeMode.PERCENT,
                    width_percent=50.0, height_percent=50.0)
    rect = LayoutSystem().compute(layout, PARENT)
    assert rect.width * 2 == PARENT.x
    assert rect.height * 2 == PARENT.y


def test_percent_is_clamped():
    layout = Layout(width_mode=SizeMode.PERCENT, height_mode=SizeMode.PERCENT,
                    width_percent=250.0, height_percent=-40.0)
    rect = LayoutSystem().compute(layout, PARENT)
    assert rect.width == PARENT.x
    assert rect.height == 0.0


def test_mismatched_fit_mode_is_fixed():
    layout = Layout(width_mode=SizeMode.FIT_HEIGHT, height_mode=SizeMode.FIT_WIDTH, width=40, height=60)
    rect = LayoutSystem().compute(layout, PARENT)
    assert (rect.width, rect.height) == (40.0, 60.0)


def test_top_left_anchor():
    rect = LayoutSystem().compute(_fixed(Anchor.TOP_LEFT), PARENT)
    assert (rect.x, rect.y) == (0.0, 0.0)


def test_bottom_right_anchor_touches_corner():
    rect = LayoutSystem().compute(_fixed(Anchor.BOTTOM_RIGHT), PARENT)
    assert rect.x + rect.width == PARENT.x
    assert rect.y + rect.height == PARENT.y


def test_center_anchor_is_centred():
    rect = LayoutSystem().compute(_fixed(Anchor.CENTER), PARENT)
    assert rect.x * 2 + rect.width == PARENT.x
    assert rect.y * 2 + rect.height == PARENT.y


@pytest.mark.parametrize("anchor", [Anchor.TOP_CENTER, Anchor.BOTTOM_CENTER])
def test_horizontal_centre_anchors(anchor):
    rect = LayoutSystem().compute(_fixed(anchor), PARENT)
    assert rect.x * 2 + rect.width == PARENT.x


@pytest.mark.parametrize("anchor", [Anchor.CENTER_LEFT, Anchor.CENTER_RIGHT])
def test_vertical_centre_anchors(anchor):
    rect = LayoutSystem().compute(_fixed(anchor), PARENT)
    assert rect.y * 2 + rect.height == PARENT.y


@pytest.mark.parametrize("anchor", list(Anchor))
def test_offset_shifts_position(anchor):
    system = LayoutSystem()
    offset = Vector2(10, 23)
    plain = system.compute(_fixed(anchor), PARENT)
    moved = system.compute(_fixed(anchor, offset=offset), PARENT)
    assert (moved.x - plain.x, moved.y - plain.y) == (offset.x, offset.y)
    assert (moved.width, moved.height) == (plain.width, plain.height)


def test_compute_label_uses_text_size_and_applies_offset_twice():
    text = Vector2(120.0, 40.0)
    offset = Vector2(10, 23)
    plain = LayoutSystem.compute_label(Layout(anchor=Anchor.CENTER), text, PARENT)
    moved = LayoutSystem.compute_label(Layout(anchor=Anchor.CENTER, offset=offset), text, PARENT)
    assert (moved.width, moved.height) == (text.x, text.y)
    assert (moved.x - plain.x, moved.y - plain.y) == (offset.x * 2, offset.y * 2)
    assert plain.x * 2 + plain.width == PARENT.x


class _Box(Layoutable):
    pass


class _Scene:
    def __init__(self, objects):
        self.objects = objects


def test_compute_scene_updates_only_layoutables():
    system = LayoutSystem()
    layout = Layout(width_mode=SizeMode.FIT_WIDTH, height_mode=SizeMode.FIT_HEIGHT)
    box = _Box(layout)
    other = object()
    system.compute_scene(_Scene([box, other]), PARENT)
    assert box.computed_rectangle == system.compute(layout, PARENT)
    assert box.computed_rectangle.width == PARENT.x