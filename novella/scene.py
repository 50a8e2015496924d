"""Scenes of game objects and the manager that holds the current one."""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from novella.attributes import GameObject

T = TypeVar("T", bound=GameObject)


class Scene:
    """An ordered collection of objects, addressable by id."""

    def __init__(self) -> None:
        self._objects: list[GameObject] = []
        self._registry: dict[int, GameObject] = {}
        self._next_id = 0
        self._dirty = False
        self.bgm: Optional[str] = None

    @property
    def objects(self) -> list[GameObject]:
        """The objects in drawing order."""
        return self._objects

    @property
    def has_bgm(self) -> bool:
        return self.bgm is not None

    @property
    def needs_sorting(self) -> bool:
        """Whether objects were added or removed since the last sort."""
        return self._dirty

    def create_object(self, cls: type[T], *args: Any, **kwargs: Any) -> T:
        """Build an object, give it the next free id and add it."""
        obj = cls(*args, **kwargs)
        object_id = self._next_id
        self._next_id += 1
        obj.object_id = object_id
        self._registry.setdefault(object_id, obj)
        self._objects.append(obj)
        self._dirty = True
        return obj

    def get_object_as(self, object_id: int, cls: type[T]) -> Optional[T]:
        """The object with this id if it is an instance of cls, else None."""
        obj = self.find_object(object_id)
        if obj is None:
            raise KeyError(f"Scene.get_object_as: id not found: {object_id}")
        return obj if isinstance(obj, cls) else None

    def add_object(self, obj: GameObject) -> None:
        """Add an object that already carries its id."""
        object_id = obj.object_id
        if object_id in self._registry:
            raise ValueError(f"Scene.add_object: an object with this id already exists in the scene: {object_id}")
        self._registry[object_id] = obj
        self._objects.append(obj)
        self._dirty = True

    def remove_object(self, object_id: int) -> None:
        """Remove every object with this id."""
        self._registry.pop(object_id, None)
        self._objects[:] = [obj for obj in self._objects if obj.object_id != object_id]
        self._dirty = True

    def find_object(self, object_id: int) -> Optional[GameObject]:
        return self._registry.get(object_id)

    def clear_dirty_flag(self) -> None:
        self._dirty = False


class SceneManager:
    """Owns the active scene."""

    def __init__(self, resource_manager: Any, audio: Any) -> None:
        self.resource_manager = resource_manager
        self.audio = audio
        self._current: Optional[Scene] = None

    @property
    def current_scene(self) -> Scene:
        if self._current is None:
            raise RuntimeError("SceneManager.current_scene: there is no current scene")
        return self._current

    def load_scene(self, scene: Scene) -> None:
        """Make a scene current and start its music."""
        self._current = scene
        if scene.has_bgm:
            self.audio.play(scene.bgm)

    def create_scene(self) -> Scene:
        """Replace the current scene with a new empty one."""
        self._current = Scene()
        return self._current

    def add_object(self, cls: type[T], *args: Any, **kwargs: Any) -> T:
        """Create an object in the current scene."""
        if self._current is None:
            raise RuntimeError("SceneManager.add_object: no active scene")
        return self._current.create_object(cls, *args, **kwargs)

    def clear(self) -> None:
        self._current = None