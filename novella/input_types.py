"""Keyboard keys, mouse buttons and the input events built from them."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from novella.vector import Vector2  # noqa: E402


class Key(Enum):
    """Keyboard keys known to the engine."""

    UNKNOWN = 0
    A = 1
    B = 2
    C = 3
    D = 4
    E = 5
    F = 6
    G = 7
    H = 8
    I = 9  # noqa: E741
    J = 10
    K = 11
    L = 12
    M = 13
    N = 14
    O = 15  # noqa: E741
    P = 16
    Q = 17
    R = 18
    S = 19
    T = 20
    U = 21
    V = 22
    W = 23
    X = 24
    Y = 25
    Z = 26
    NUM0 = 27
    NUM1 = 28
    NUM2 = 29
    NUM3 = 30
    NUM4 = 31
    NUM5 = 32
    NUM6 = 33
    NUM7 = 34
    NUM8 = 35
    NUM9 = 36
    ESCAPE = 37
    SPACE = 38
    ENTER = 39
    BACKSPACE = 40
    TAB = 41
    LEFT = 42
    RIGHT = 43
    UP = 44
    DOWN = 45
    LSHIFT = 46
    RSHIFT = 47
    LCONTROL = 48
    RCONTROL = 49
    LALT = 50
    RALT = 51

    @staticmethod
    def from_pygame(code: int) -> Key:
        """The key for a pygame key code; unknown codes give UNKNOWN."""
        return _KEY_FROM_PYGAME.get(code, Key.UNKNOWN)

    def to_pygame(self) -> int:
        """The pygame key code of this key."""
        return _KEY_TO_PYGAME.get(self, pygame.K_UNKNOWN)


_KEY_TO_PYGAME: dict[Key, int] = {
    **{Key[chr(c).upper()]: getattr(pygame, f"K_{chr(c)}") for c in range(ord("a"), ord("z") + 1)},
    **{Key[f"NUM{d}"]: getattr(pygame, f"K_{d}") for d in range(10)},
    Key.ESCAPE: pygame.K_ESCAPE,
    Key.SPACE: pygame.K_SPACE,
    Key.ENTER: pygame.K_RETURN,
    Key.BACKSPACE: pygame.K_BACKSPACE,
    Key.TAB: pygame.K_TAB,
    Key.LEFT: pygame.K_LEFT,
    Key.RIGHT: pygame.K_RIGHT,
    Key.UP: pygame.K_UP,
    Key.DOWN: pygame.K_DOWN,
    Key.LSHIFT: pygame.K_LSHIFT,
    Key.RSHIFT: pygame.K_RSHIFT,
    Key.LCONTROL: pygame.K_LCTRL,
    Key.RCONTROL: pygame.K_RCTRL,
    Key.LALT: pygame.K_LALT,
    Key.RALT: pygame.K_RALT,
}
_KEY_FROM_PYGAME: dict[int, Key] = {code: key for key, code in _KEY_TO_PYGAME.items()}


class MouseButton(Enum):
    """Mouse buttons known to the engine."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    SIDE = 3
    EXTRA = 4
    FORWARD = 5
    BACK = 6

    @staticmethod
    def from_pygame(code: int) -> MouseButton:
        """The button for a pygame button number; unknown numbers give LEFT."""
        return _BUTTON_FROM_PYGAME.get(code, MouseButton.LEFT)

    def to_pygame(self) -> int:
        """The pygame button number of this button."""
        return _BUTTON_TO_PYGAME[self]


_BUTTON_TO_PYGAME: dict[MouseButton, int] = {
    MouseButton.LEFT: pygame.BUTTON_LEFT,
    MouseButton.RIGHT: pygame.BUTTON_RIGHT,
    MouseButton.MIDDLE: pygame.BUTTON_MIDDLE,
    MouseButton.SIDE: pygame.BUTTON_X1,
    MouseButton.EXTRA: pygame.BUTTON_X2,
    MouseButton.FORWARD: pygame.BUTTON_X2 + 1,
    MouseButton.BACK: pygame.BUTTON_X2 + 2,
}
_BUTTON_FROM_PYGAME: dict[int, MouseButton] = {code: b for b, code in _BUTTON_TO_PYGAME.items()}


@dataclass(frozen=True)
class KeyEvent:
    """A key press aimed at a scene object."""

    object_id: int
    key: Key


@dataclass(frozen=True)
class ClickEvent:
    """A mouse click on a scene object, in virtual coordinates."""

    object_id: int
    button: MouseButton
    position: Vector2