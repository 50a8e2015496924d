"""RGBA colours."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour; opaque white by default."""

    red: int = 255
    green: int = 255
    blue: int = 255
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"Color: {name} must be an integer between 0 and 255, got {value!r}")

    def as_tuple(self) -> tuple[int, int, int, int]:
        """The colour as (red, green, blue, alpha)."""
        return (self.red, self.green, self.blue, self.alpha)


RED = Color(255, 0, 0, 255)
GREEN = Color(0, 255, 0, 255)
BLUE = Color(0, 0, 255, 255)
BLACK = Color(0, 0, 0, 255)
WHITE = Color(255, 255, 255, 255)