"""Images, textures and fonts loaded from disk."""

from __future__ import annotations

import math
import os
from pathlib import Path
from typing import Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from novella.color import WHITE, Color  # noqa: E402
from novella.vector import Vector2  # noqa: E402

PathLike = Union[str, "os.PathLike[str]"]


def _existing(path: PathLike) -> Path:
    resolved = Path(path)
    if not resolved.exists():
        raise FileNotFoundError(f"File not found: {resolved}")
    return resolved


class _SurfaceAsset:
    """A picture loaded from a file into a pygame surface."""

    def __init__(self, path: PathLike) -> None:
        self.path = _existing(path)
        self.surface: pygame.Surface = pygame.image.load(str(self.path))

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()


class Image(_SurfaceAsset):
    """Pixel data kept for processing, such as a window icon."""


class Texture(_SurfaceAsset):
    """A picture meant to be drawn by the renderer."""


class Font:
    """A TrueType font that can be measured and rendered at any size."""

    def __init__(self, path: PathLike, base_size: int = 32) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.path = _existing(path)
        self._faces: dict[int, pygame.font.Font] = {}
        self._base_size = int(base_size)
        self._face(self._base_size)

    @property
    def size(self) -> int:
        """The size the font was loaded at."""
        return self._base_size

    def _face(self, size: float) -> pygame.font.Font:
        pixels = max(1, int(size))
        face = self._faces.get(pixels)
        if face is None:
            face = pygame.font.Font(str(self.path), pixels)
            self._faces[pixels] = face
        return face

    def measure(self, text: str, size: float, spacing: float) -> Vector2:
        """Width and height of the text drawn with the given size and letter spacing."""
        face = self._face(size)
        advance = sum(face.size(ch)[0] for ch in text)
        width = advance + spacing * (len(text) - 1) if text else 0.0
        return Vector2(float(width), float(face.get_height()))

    def render(self, text: str, size: float, spacing: float, color: Color = WHITE) -> pygame.Surface:
        """The text drawn onto a new transparent surface."""
        face = self._face(size)
        extent = self.measure(text, size, spacing)
        surface = pygame.Surface((max(0, math.ceil(extent.x)), int(extent.y)), pygame.SRCALPHA)
        rgb = (color.red, color.green, color.blue)
        x = 0.0
        for ch in text:
            glyph = face.render(ch, True, rgb)
            glyph.set_alpha(color.alpha)
            surface.blit(glyph, (round(x), 0))
            x += face.size(ch)[0] + spacing
        return surface