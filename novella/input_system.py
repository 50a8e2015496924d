"""Per-frame keyboard, mouse and cursor state built from pygame events."""

from __future__ import annotations

import os
from collections import deque
from typing import Any, Iterable, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from novella.input_types import Key, MouseButton  # noqa: E402
from novella.vector import Vector2  # noqa: E402

_KNOWN_BUTTONS = {button.to_pygame(): button for button in MouseButton}


class _PygameCursor:
    """Cursor operations carried out by pygame."""

    @staticmethod
    def set_visible(visible: bool) -> None:
        pygame.mouse.set_visible(visible)

    @staticmethod
    def set_pos(position: tuple[int, int]) -> None:
        pygame.mouse.set_pos(position)

    @staticmethod
    def set_grab(grab: bool) -> None:
        pygame.event.set_grab(grab)


class InputSystem:
    """Keyboard and mouse state for the current frame.

    Call update() once per frame with that frame's events; the "pressed" and
    "released" queries then describe what changed during the frame.
    """

    def __init__(self, cursor: Any = None) -> None:
        self._cursor = cursor if cursor is not None else _PygameCursor()
        self._keys_down: set[Key] = set()
        self._keys_pressed: set[Key] = set()
        self._keys_released: set[Key] = set()
        self._key_queue: deque[Key] = deque()
        self._char_queue: deque[str] = deque()
        self._buttons_down: set[MouseButton] = set()
        self._buttons_pressed: set[MouseButton] = set()
        self._buttons_released: set[MouseButton] = set()
        self._position = Vector2(0.0, 0.0)
        self._frame_start = self._position
        self._wheel = 0.0
        self._hidden = False
        self._on_screen = True

    def update(self, events: Iterable[pygame.event.Event]) -> None:
        """Start a new frame and apply its events."""
        self._keys_pressed.clear()
        self._keys_released.clear()
        self._key_queue.clear()
        self._char_queue.clear()
        self._buttons_pressed.clear()
        self._buttons_released.clear()
        self._frame_start = self._position
        self._wheel = 0.0
        enter = getattr(pygame, "WINDOWENTER", None)
        leave = getattr(pygame, "WINDOWLEAVE", None)
        for event in events:
            kind = event.type
            if kind == pygame.KEYDOWN:
                key = Key.from_pygame(event.key)
                if key is Key.UNKNOWN:
                    continue
                if key not in self._keys_down:
                    self._keys_pressed.add(key)
                    self._key_queue.append(key)
                self._keys_down.add(key)
            elif kind == pygame.KEYUP:
                key = Key.from_pygame(event.key)
                if key is Key.UNKNOWN:
                    continue
                self._keys_down.discard(key)
                self._keys_released.add(key)
            elif kind == pygame.TEXTINPUT:
                self._char_queue.extend(event.text)
            elif kind == pygame.MOUSEMOTION:
                self._set_position(event.pos)
            elif kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                if hasattr(event, "pos"):
                    self._set_position(event.pos)
                button = _KNOWN_BUTTONS.get(event.button)
                if button is None:
                    continue
                if kind == pygame.MOUSEBUTTONDOWN:
                    if button not in self._buttons_down:
                        self._buttons_pressed.add(button)
                    self._buttons_down.add(button)
                else:
                    self._buttons_down.discard(button)
                    self._buttons_released.add(button)
            elif kind == pygame.MOUSEWHEEL:
                self._wheel += float(event.y)
            elif enter is not None and kind == enter:
                self._on_screen = True
            elif leave is not None and kind == leave:
                self._on_screen = False

    def _set_position(self, pos: Any) -> None:
        self._position = Vector2(float(pos[0]), float(pos[1]))

    def is_key_pressed(self, key: Key) -> bool:
        """Whether the key went down during this frame."""
        return key in self._keys_pressed

    def is_key_down(self, key: Key) -> bool:
        return key in self._keys_down

    def is_key_released(self, key: Key) -> bool:
        """Whether the key went up during this frame."""
        return key in self._keys_released

    def is_key_up(self, key: Key) -> bool:
        return key not in self._keys_down

    def key_pressed(self) -> Key:
        """The next key pressed this frame, in press order; UNKNOWN once none are left."""
        return self._key_queue.popleft() if self._key_queue else Key.UNKNOWN

    def char_pressed(self) -> str:
        """The next character typed this frame; an empty string once none are left."""
        return self._char_queue.popleft() if self._char_queue else ""

    def keyboard_key_pressed(self) -> Optional[Key]:
        """The first key, in key order, that went down this frame."""
        return next((key for key in Key if key in self._keys_pressed), None)

    def is_mouse_button_pressed(self, button: MouseButton) -> bool:
        return button in self._buttons_pressed

    def is_mouse_button_down(self, button: MouseButton) -> bool:
        return button in self._buttons_down

    def is_mouse_button_released(self, button: MouseButton) -> bool:
        return button in self._buttons_released

    def is_mouse_button_up(self, button: MouseButton) -> bool:
        return button not in self._buttons_down

    def mouse_button_pressed(self) -> Optional[MouseButton]:
        """The first button, in button order and before BACK, that went down this frame."""
        return next(
            (b for b in MouseButton if b is not MouseButton.BACK and b in self._buttons_pressed),
            None,
        )

    def mouse_position(self) -> Vector2:
        return self._position

    def mouse_delta(self) -> Vector2:
        """How far the mouse moved during this frame."""
        return self._position - self._frame_start

    def wheel_move(self) -> float:
        """Vertical wheel movement during this frame."""
        return self._wheel

    def set_mouse_position(self, position: Vector2) -> None:
        x, y = int(position.x), int(position.y)
        self._cursor.set_pos((x, y))
        self._position = Vector2(float(x), float(y))

    def show_cursor(self) -> None:
        self._cursor.set_visible(True)
        self._hidden = False

    def hide_cursor(self) -> None:
        self._cursor.set_visible(False)
        self._hidden = True

    def enable_cursor(self) -> None:
        """Release the cursor and show it."""
        self._cursor.set_grab(False)
        self.show_cursor()

    def disable_cursor(self) -> None:
        """Hide the cursor and lock it to the window."""
        self.hide_cursor()
        self._cursor.set_grab(True)

    def is_cursor_hidden(self) -> bool:
        return self._hidden

    def is_cursor_on_screen(self) -> bool:
        return self._on_screen