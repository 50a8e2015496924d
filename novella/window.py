"""The application window."""

from __future__ import annotations

import os
from enum import IntFlag
from pathlib import Path
from typing import Any, Iterable, Optional, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from novella.color import Color  # noqa: E402
from novella.graphics import Image  # noqa: E402
from novella.vector import Vector2  # noqa: E402

PathLike = Union[str, "os.PathLike[str]"]


class WindowFlags(IntFlag):
    """Options chosen before the window is opened."""

    NONE = 0
    FULLSCREEN = 0x00000002
    RESIZABLE = 0x00000004
    UNDECORATED = 0x00000008
    TRANSPARENT = 0x00000010
    MSAA4X = 0x00000020
    VSYNC = 0x00000040
    HIDDEN = 0x00000080
    ALWAYS_RUN = 0x00000100
    MINIMIZED = 0x00000200
    MAXIMIZED = 0x00000400
    UNFOCUSED = 0x00000800
    TOPMOST = 0x00001000
    HIGHDPI = 0x00002000
    INTERLACED = 0x00010000


_PYGAME_FLAGS = {
    WindowFlags.FULLSCREEN: pygame.FULLSCREEN,
    WindowFlags.RESIZABLE: pygame.RESIZABLE,
    WindowFlags.UNDECORATED: pygame.NOFRAME,
    WindowFlags.HIDDEN: getattr(pygame, "HIDDEN", 0),
}


def _display_ready() -> bool:
    return pygame.display.get_init() and pygame.display.get_surface() is not None


def _event_type(name: str) -> Optional[int]:
    return getattr(pygame, name, None)


class Window:
    """A single pygame display window with a frame-rate clock."""

    def __init__(self, width: int, height: int, title: str, target_fps: int,
                 icon: Optional[PathLike] = None, flags: WindowFlags = WindowFlags.NONE) -> None:
        self._title = ""
        self._flags = WindowFlags.NONE
        self._should_close = False
        self._resized = False
        self._minimized = False
        self._maximized = False
        self._windowed_size: Optional[tuple[int, int]] = None
        self.target_fps = int(target_fps)
        self._clock = pygame.time.Clock()
        if _display_ready():
            return
        self.set_flags(flags)
        pygame.display.init()
        self._set_mode((int(width), int(height)), self._mode_flags())
        pygame.display.set_caption(title)
        self._title = title
        if WindowFlags.MINIMIZED in self._flags:
            self.minimize()
        if WindowFlags.MAXIMIZED in self._flags:
            self.maximize()
        if icon is not None:
            self.set_icon(icon)

    def _mode_flags(self) -> int:
        result = 0
        for flag, pygame_flag in _PYGAME_FLAGS.items():
            if flag in self._flags:
                result |= pygame_flag
        return result

    @staticmethod
    def _set_mode(size: tuple[int, int], flags: int) -> pygame.Surface:
        return pygame.display.set_mode(size, flags)

    @staticmethod
    def _sdl_window() -> Any:
        from pygame._sdl2.video import Window as SDLWindow

        return SDLWindow.from_display_module()

    @property
    def surface(self) -> pygame.Surface:
        """The surface shown in the window."""
        surface = pygame.display.get_surface() if pygame.display.get_init() else None
        if surface is None:
            raise RuntimeError("Window: the window is not open")
        return surface

    def is_open(self) -> bool:
        return _display_ready() and not self._should_close

    def process_events(self, events: Iterable[pygame.event.Event]) -> None:
        """Update the window state from one frame's events."""
        self._resized = False
        resize_types = {pygame.VIDEORESIZE, _event_type("WINDOWSIZECHANGED"), _event_type("WINDOWRESIZED")}
        resize_types.discard(None)
        for event in events:
            if event.type == pygame.QUIT:
                self._should_close = True
            elif event.type in resize_types:
                self._resized = True
            elif event.type == _event_type("WINDOWMINIMIZED"):
                self._minimized = True
            elif event.type == _event_type("WINDOWMAXIMIZED"):
                self._maximized = True
                self._minimized = False
            elif event.type == _event_type("WINDOWRESTORED"):
                self._minimized = False
                self._maximized = False

    def flip(self) -> None:
        """Show the drawn frame and wait to hold the target frame rate."""
        pygame.display.flip()
        self._clock.tick(self.target_fps)

    @property
    def fps(self) -> float:
        """The measured frame rate."""
        return self._clock.get_fps()

    def clear(self, color: Color) -> None:
        self.surface.fill(color.as_tuple())

    def toggle_fullscreen(self) -> None:
        pygame.display.toggle_fullscreen()

    def is_fullscreen(self) -> bool:
        return bool(self.surface.get_flags() & pygame.FULLSCREEN)

    def toggle_borderless(self) -> None:
        """Switch between an undecorated desktop-sized window and the normal window."""
        base = self._mode_flags() & ~pygame.FULLSCREEN
        if self._windowed_size is None:
            self._windowed_size = self.surface.get_size()
            desktop = pygame.display.get_desktop_sizes()[0]
            self._set_mode(desktop, base | pygame.NOFRAME)
            self.set_position(Vector2(0, 0))
        else:
            size, self._windowed_size = self._windowed_size, None
            self._set_mode(size, base)
        self._resized = True

    def minimize(self) -> None:
        if pygame.display.iconify():
            self._minimized = True

    def is_minimized(self) -> bool:
        return self._minimized

    def maximize(self) -> None:
        self._sdl_window().maximize()
        self._maximized = True
        self._minimized = False

    def is_maximized(self) -> bool:
        return self._maximized

    def is_focused(self) -> bool:
        return bool(pygame.key.get_focused())

    def is_resized(self) -> bool:
        """Whether the window changed size during the last processed frame."""
        return self._resized

    @property
    def size(self) -> Vector2:
        width, height = self.surface.get_size()
        return Vector2(width, height)

    @size.setter
    def size(self, dimensions: Vector2) -> None:
        self._set_mode((int(dimensions.x), int(dimensions.y)), self._mode_flags())
        self._resized = True

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, title: str) -> None:
        pygame.display.set_caption(title)
        self._title = title

    def set_icon(self, file: PathLike) -> None:
        path = Path(file)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        pygame.display.set_icon(Image(path).surface)

    def set_flags(self, flags: WindowFlags) -> None:
        """Choose window options; only allowed before the window opens."""
        if _display_ready():
            raise RuntimeError("Window flags must be set before initialization")
        self._flags = WindowFlags(flags)

    @property
    def flags(self) -> WindowFlags:
        return self._flags

    def set_position(self, position: Vector2) -> None:
        self._sdl_window().position = (int(position.x), int(position.y))

    def close(self) -> None:
        if _display_ready():
            pygame.display.quit()