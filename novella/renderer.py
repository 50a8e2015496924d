"""Draws scenes onto a fixed-resolution canvas scaled into the window."""

from __future__ import annotations

import math
from typing import Any

import pygame

from novella.attributes import Renderable
from novella.color import BLACK, WHITE, Color
from novella.graphics import Font, Texture
from novella.vector import Rectangle, Vector2


class Renderer:
    """Renders at a virtual resolution and letterboxes the result."""

    def __init__(self, width: int, height: int) -> None:
        self._base = Vector2(float(width), float(height))
        self.canvas = pygame.Surface((int(width), int(height)))
        self.offset = Vector2(0.0, 0.0)
        self.scale = 1.0

    @property
    def virtual_resolution(self) -> Vector2:
        return self._base

    def begin_frame(self) -> None:
        """Start a frame with a cleared canvas."""
        self.canvas.fill(BLACK.as_tuple())

    def end_frame(self, target: pygame.Surface) -> None:
        """Clear the target and draw the scaled canvas onto it."""
        target.fill(BLACK.as_tuple())
        size = (round(self._base.x * self.scale), round(self._base.y * self.scale))
        scaled = pygame.transform.scale(self.canvas, size)
        target.blit(scaled, (round(self.offset.x), round(self.offset.y)))

    def draw_texture(self, texture: Texture, rect: Rectangle, rotation: float, tint: Color) -> None:
        """Stretch a texture into a rectangle, rotated clockwise about its top-left corner."""
        size = (max(0, round(rect.width)), max(0, round(rect.height)))
        image = pygame.transform.scale(texture.surface, size)
        if tint != WHITE:
            tinted = pygame.Surface(size, pygame.SRCALPHA)
            tinted.blit(image, (0, 0))
            tinted.fill(tint.as_tuple(), special_flags=pygame.BLEND_RGBA_MULT)
            image = tinted
        if rotation == 0:
            self.canvas.blit(image, (round(rect.x), round(rect.y)))
            return
        rotated = pygame.transform.rotate(image, -rotation)
        theta = math.radians(rotation)
        cx, cy = -size[0] / 2, -size[1] / 2
        corner_x = cx * math.cos(theta) - cy * math.sin(theta)
        corner_y = cx * math.sin(theta) + cy * math.cos(theta)
        center_x, center_y = rect.x - corner_x, rect.y - corner_y
        self.canvas.blit(rotated, (round(center_x - rotated.get_width() / 2),
                                   round(center_y - rotated.get_height() / 2)))

    def draw_font(self, font: Font, text: str, rect: Rectangle, font_size: int, spacing: float,
                  tint: Color) -> None:
        """Draw text with its top-left corner at the rectangle's origin."""
        self.canvas.blit(font.render(text, font_size, spacing, tint), (round(rect.x), round(rect.y)))

    def draw_scene(self, scene: Any) -> None:
        """Draw every renderable object, lowest render layer first."""
        if scene.needs_sorting:
            scene.objects.sort(key=lambda obj: obj.render_layer if isinstance(obj, Renderable) else 0)
            scene.clear_dirty_flag()
        for obj in scene.objects:
            if isinstance(obj, Renderable):
                obj.draw(self)

    def resize(self, window_size: Vector2) -> None:
        """Fit the canvas into a window of the given size, keeping its aspect ratio."""
        if self._base.x == 0 or self._base.y == 0:
            return
        self.scale = min(float(window_size.x) / self._base.x, float(window_size.y) / self._base.y)
        self.offset = Vector2(
            (window_size.x - self._base.x * self.scale) * 0.5,
            (window_size.y - self._base.y * self.scale) * 0.5,
        )

    def to_virtual_coordinates(self, mouse_position: Vector2) -> Vector2:
        """Map a window position to canvas coordinates."""
        return Vector2(
            (mouse_position.x - self.offset.x) / self.scale,
            (mouse_position.y - self.offset.y) / self.scale,
        )