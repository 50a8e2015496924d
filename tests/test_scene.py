import pytest

from novella.attributes import GameObject, Renderable
from novella.scene import Scene, SceneManager


class Prop(GameObject):
    def __init__(self, name="prop"):
        self.name = name

    def serialize(self):
        return {"name": self.name}


class Sprite(GameObject, Renderable):
    def serialize(self):
        return {}

    def draw(self, renderer):
        pass


class RecordingAudio:
    def __init__(self):
        self.played = []

    def play(self, name):
        self.played.append(name)


def test_create_object_assigns_sequential_ids():
    scene = Scene()
    first = scene.create_object(Prop, "a")
    second = scene.create_object(Prop, name="b")
    assert (first.object_id, second.object_id) == (0, 1)
    assert scene.objects == [first, second]
    assert second.name == "b"


def test_find_object():
    scene = Scene()
    obj = scene.create_object(Prop)
    assert scene.find_object(obj.object_id) is obj
    assert scene.find_object(99) is None


def test_create_marks_dirty_and_clear_resets():
    scene = Scene()
    assert scene.needs_sorting is False
    scene.create_object(Prop)
    assert scene.needs_sorting is True
    scene.clear_dirty_flag()
    assert scene.needs_sorting is False


def test_add_object_uses_its_id():
    scene = Scene()
    obj = Prop()
    obj.object_id = 42
    scene.add_object(obj)
    assert scene.find_object(42) is obj
    assert scene.needs_sorting


def test_add_object_duplicate_id_rejected():
    scene = Scene()
    obj = scene.create_object(Prop)
    other = Prop()
    other.object_id = obj.object_id
    with pytest.raises(ValueError):
        scene.add_object(other)


def test_remove_object():
    scene = Scene()
    keep = scene.create_object(Prop)
    gone = scene.create_object(Prop)
    scene.clear_dirty_flag()
    scene.remove_object(gone.object_id)
    assert scene.objects == [keep]
    assert scene.find_object(gone.object_id) is None
    assert scene.needs_sorting


def test_get_object_as():
    scene = Scene()
    sprite = scene.create_object(Sprite)
    assert scene.get_object_as(sprite.object_id, Renderable) is sprite
    prop = scene.create_object(Prop)
    assert scene.get_object_as(prop.object_id, Renderable) is None


def test_get_object_as_missing():
    with pytest.raises(KeyError):
        Scene().get_object_as(5, Prop)


def test_bgm():
    scene = Scene()
    assert not scene.has_bgm
    scene.bgm = "theme"
    assert scene.has_bgm


def test_manager_without_scene():
    manager = SceneManager(None, RecordingAudio())
    with pytest.raises(RuntimeError):
        manager.current_scene
    with pytest.raises(RuntimeError):
        manager.add_object(Prop)


def test_manager_create_and_add():
    manager = SceneManager(None, RecordingAudio())
    scene = manager.create_scene()
    obj = manager.add_object(Prop, "x")
    assert manager.current_scene is scene
    assert scene.objects == [obj]


def test_load_scene_plays_bgm():
    audio = RecordingAudio()
    manager = SceneManager(None, audio)
    scene = Scene()
    scene.bgm = "theme"
    manager.load_scene(scene)
    assert manager.current_scene is scene
    assert audio.played == ["theme"]


def test_load_scene_without_bgm_is_silent():
    audio = RecordingAudio()
    manager = SceneManager(None, audio)
    manager.load_scene(Scene())
    assert audio.played == []


def test_manager_clear():
    manager = SceneManager(None, RecordingAudio())
    manager.create_scene()
    manager.add_object(Prop, "old")
    manager.clear()
    with pytest.raises(RuntimeError):
        manager.current_scene
    fresh = manager.create_scene()
    assert fresh.objects == []
    assert manager.current_scene is fresh