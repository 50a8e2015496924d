"""Audio resources, the command queue that drives them and the playback backend."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

PathLike = Union[str, "os.PathLike[str]"]


class AssetType(Enum):
    """Whether a resource is background music or a sound effect."""

    MUSIC = 0
    SFX = 1


@dataclass
class AudioResource:
    """A named audio file known to the audio system."""

    name: str
    src: Path
    type: AssetType
    id: int = 0
    default_volume: float = 1.0
    default_pitch: float = 1.0
    default_pan: float = 1.0

    def __post_init__(self) -> None:
        self.src = Path(self.src)

    def to_json(self) -> dict[str, Any]:
        """Describe the resource as JSON-compatible data."""
        return {
            "id": self.name,
            "path": str(self.src),
            "type": self.type.value,
            "volume": self.default_volume,
            "pitch": self.default_pitch,
            "pan": self.default_pan,
        }


class AudioCommandType(Enum):
    """What an audio command asks the backend to do."""

    PLAY = 0
    STOP = 1
    SET_VOLUME = 2
    SET_PAN = 3
    SET_PITCH = 4


@dataclass(frozen=True)
class AudioCommand:
    """One queued request for the backend."""

    type: AudioCommandType
    id: int
    value: float = 1.0


class SoundRegistry:
    """Audio resources indexed by their numeric id."""

    def __init__(self) -> None:
        self._sounds: dict[int, AudioResource] = {}

    def register(self, resource: AudioResource) -> None:
        """Add a resource; an id already present keeps its first resource."""
        self._sounds.setdefault(resource.id, resource)

    def get(self, resource_id: int) -> AudioResource:
        """The resource with this id."""
        try:
            return self._sounds[resource_id]
        except KeyError:
            raise KeyError(f"SoundRegistry.get: no resource with id {resource_id}") from None

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._sounds

    def __iter__(self) -> Iterator[AudioResource]:
        return iter(list(self._sounds.values()))

    def __len__(self) -> int:
        return len(self._sounds)

    def clear(self) -> None:
        self._sounds.clear()


@dataclass
class _Track:
    sound: Any
    loops: int
    pan: float = 0.5
    pitch: float = 1.0
    channel: Any = None

    def apply_pan(self) -> None:
        if self.channel is None:
            return
        pan = min(max(self.pan, 0.0), 1.0)
        self.channel.set_volume(min(1.0, 2.0 * (1.0 - pan)), min(1.0, 2.0 * pan))


class AudioBackend:
    """Plays registered resources through a pygame-style mixer.

    Music loops until stopped; sound effects play once. Every resource is
    loaded on first use and kept until cleared. The mixer's pitch cannot be
    changed during playback, so pitch values are only recorded.
    """

    def __init__(self, registry: SoundRegistry, mixer: Any = None) -> None:
        self._registry = registry
        self._mixer = mixer if mixer is not None else pygame.mixer
        self._music: dict[int, _Track] = {}
        self._sounds: dict[int, _Track] = {}
        self._owns_device = False

    def _ensure_device(self) -> None:
        if not self._mixer.get_init():
            self._mixer.init()
            self._owns_device = True

    def _track(self, resource: AudioResource) -> _Track:
        is_music = resource.type is AssetType.MUSIC
        store = self._music if is_music else self._sounds
        track = store.get(resource.id)
        if track is None:
            self._ensure_device()
            try:
                sound = self._mixer.Sound(str(resource.src))
            except (pygame.error, OSError) as exc:
                kind = "music" if is_music else "sound"
                raise RuntimeError(f"Failed to load {kind}: {resource.name}") from exc
            track = _Track(sound, loops=-1 if is_music else 0)
            store[resource.id] = track
        return track

    def play(self, resource: AudioResource) -> None:
        track = self._track(resource)
        track.channel = track.sound.play(loops=track.loops)
        track.apply_pan()

    def stop(self, resource: AudioResource) -> None:
        track = self._track(resource)
        track.sound.stop()
        track.channel = None

    def volume(self, resource: AudioResource, volume: float) -> None:
        self._track(resource).sound.set_volume(volume)

    def pitch(self, resource: AudioResource, pitch: float) -> None:
        self._track(resource).pitch = pitch

    def pan(self, resource: AudioResource, pan: float) -> None:
        track = self._track(resource)
        track.pan = pan
        track.apply_pan()

    def execute(self, commands: Iterable[AudioCommand]) -> None:
        """Carry out commands in order, skipping ids that are not registered."""
        actions = {
            AudioCommandType.PLAY: lambda res, _value: self.play(res),
            AudioCommandType.STOP: lambda res, _value: self.stop(res),
            AudioCommandType.SET_VOLUME: self.volume,
            AudioCommandType.SET_PITCH: self.pitch,
            AudioCommandType.SET_PAN: self.pan,
        }
        for command in commands:
            if command.id not in self._registry:
                continue
            actions[command.type](self._registry.get(command.id), command.value)

    def update(self) -> None:
        """Forget channels whose playback has finished."""
        for track in (*self._music.values(), *self._sounds.values()):
            if track.channel is not None and not track.channel.get_busy():
                track.channel = None

    def clear(self) -> None:
        """Stop and unload every loaded resource."""
        for track in (*self._sounds.values(), *self._music.values()):
            track.sound.stop()
        self._music.clear()
        self._sounds.clear()

    def close(self) -> None:
        """Unload everything and shut the mixer down if this backend started it."""
        self.clear()
        if self._owns_device and self._mixer.get_init():
            self._mixer.quit()
        self._owns_device = False


class AudioSystem:
    """Front end that names resources and queues commands for the backend."""

    def __init__(self, mixer: Any = None) -> None:
        self._commands: list[AudioCommand] = []
        self._pipeline: dict[str, int] = {}
        self._assets = SoundRegistry()
        self._backend = AudioBackend(self._assets, mixer)
        self._next = 0
        self._current_bgm: Optional[str] = None

    @property
    def current_bgm(self) -> Optional[str]:
        """Name of the music resource last started and not yet stopped."""
        return self._current_bgm

    @property
    def pending(self) -> tuple[AudioCommand, ...]:
        """Commands queued since the last update."""
        return tuple(self._commands)

    def _resolve(self, resource_name: str) -> int:
        try:
            return self._pipeline[resource_name]
        except KeyError:
            raise KeyError(f"AudioSystem.resolve: resource not found: {resource_name}") from None

    def _add(self, kind: AudioCommandType, resource_id: int, value: float) -> None:
        self._commands.append(AudioCommand(kind, resource_id, value))

    def _consume(self) -> list[AudioCommand]:
        commands, self._commands = self._commands, []
        return commands

    def create_resource(self, resource_name: str, src: PathLike, asset_type: AssetType) -> AudioResource:
        """Register an audio file under a name."""
        path = Path(src)
        if not path.exists():
            raise FileNotFoundError(f"AudioSystem.create_resource: file not found: {path}")
        if resource_name in self._pipeline:
            raise ValueError(f"{resource_name} is already a registered key")
        resource = AudioResource(resource_name, path, asset_type, id=self._next)
        self._next += 1
        self._pipeline[resource_name] = resource.id
        self._assets.register(resource)
        return resource

    def play(self, resource_name: str) -> None:
        resource_id = self._resolve(resource_name)
        self._add(AudioCommandType.PLAY, resource_id, 0.0)
        if self._assets.get(resource_id).type is AssetType.MUSIC:
            self._current_bgm = resource_name

    def stop(self, resource_name: str) -> None:
        resource_id = self._resolve(resource_name)
        self._add(AudioCommandType.STOP, resource_id, 0.0)
        if self._assets.get(resource_id).type is AssetType.MUSIC and self._current_bgm == resource_name:
            self._current_bgm = None

    def volume(self, resource_name: str, volume: float) -> None:
        self._add(AudioCommandType.SET_VOLUME, self._resolve(resource_name), volume)

    def pitch(self, resource_name: str, pitch: float) -> None:
        self._add(AudioCommandType.SET_PITCH, self._resolve(resource_name), pitch)

    def pan(self, resource_name: str, pan: float) -> None:
        self._add(AudioCommandType.SET_PAN, self._resolve(resource_name), pan)

    def update(self) -> None:
        """Hand queued commands to the backend and let it advance."""
        self._backend.execute(self._consume())
        self._backend.update()

    def clear(self) -> None:
        """Forget every resource and queued command."""
        self._commands.clear()
        self._pipeline.clear()
        self._assets.clear()
        self._backend.clear()
        self._next = 0

    def close(self) -> None:
        """Release the backend and its audio device."""
        self._backend.close()

    def serialize(self) -> dict[str, Any]:
        return {"audio": [resource.to_json() for resource in self._assets]}

    def deserialize(self, data: dict[str, Any]) -> None:
        """Register every resource listed in serialized data."""
        for sound in data["audio"]:
            self.create_resource(sound["id"], sound["path"], AssetType(sound["type"]))