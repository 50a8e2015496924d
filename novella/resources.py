"""Named registry of images, textures and fonts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Generic, TypeVar

from novella.graphics import Font, Image, PathLike, Texture

T = TypeVar("T")


@dataclass
class _Loaded(Generic[T]):
    src: Path
    resource: T


class ResourceManager:
    """Loads assets once and hands them out by name."""

    def __init__(self) -> None:
        self._images: dict[str, _Loaded[Image]] = {}
        self._textures: dict[str, _Loaded[Texture]] = {}
        self._fonts: dict[str, _Loaded[Font]] = {}

    def load_image(self, name: str, src: PathLike) -> Image:
        """Load an image and register it under a name."""
        image = Image(src)
        if name in self._images:
            raise ValueError(f"There is already an image with this name: {name}")
        self._images[name] = _Loaded(Path(src), image)
        return image

    def load_texture(self, name: str, src: PathLike) -> Texture:
        """Load a texture and register it under a name."""
        path = Path(src)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        texture = Texture(path)
        if name in self._textures:
            raise ValueError(f"There is already a texture with this name: {name}")
        self._textures[name] = _Loaded(path, texture)
        return texture

    def load_font(self, name: str, src: PathLike) -> Font:
        """Load a font and register it under a name."""
        path = Path(src)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        font = Font(path)
        if name in self._fonts:
            raise ValueError(f"There is already a font with this name: {name}")
        self._fonts[name] = _Loaded(path, font)
        return font

    def get_image(self, name: str) -> Image:
        if name not in self._images:
            raise KeyError(f"{name} is not a registered image")
        return self._images[name].resource

    def get_texture(self, name: str) -> Texture:
        if name not in self._textures:
            raise KeyError(f"{name} is not a registered texture")
        return self._textures[name].resource

    def get_font(self, name: str) -> Font:
        if name not in self._fonts:
            raise KeyError(f"{name} is not a registered font")
        return self._fonts[name].resource

    def serialize(self) -> dict[str, Any]:
        """The registered textures and fonts with their source paths."""
        return {
            "textures": [{"id": name, "path": str(entry.src)} for name, entry in self._textures.items()],
            "fonts": [{"id": name, "path": str(entry.src)} for name, entry in self._fonts.items()],
        }

    def deserialize(self, data: dict[str, Any]) -> None:
        """Load every texture and font listed in serialized data."""
        for texture in data.get("textures", []):
            self.load_texture(texture["id"], texture["path"])
        for font in data.get("fonts", []):
            self.load_font(font["id"], font["path"])

    def clear(self) -> None:
        """Forget every registered asset."""
        self._images.clear()
        self._textures.clear()
        self._fonts.clear()