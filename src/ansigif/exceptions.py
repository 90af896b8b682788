from __future__ import annotations


class AnsiGifError(Exception):
    """Base exception for all ansigif errors."""


class ConfigError(AnsiGifError, ValueError):
    """Raised when rendering configuration or grid dimensions are invalid."""


class DecodeError(AnsiGifError):
    """Raised when an image source is malformed or has no frames."""


class OutOfBoundsError(AnsiGifError, IndexError):
    """Raised on a cell read or write outside the grid."""

    def __init__(self, y: int, x: int, height: int, width: int) -> None:
        super().__init__(f"cell ({y}, {x}) is out of bounds for a {height}x{width} grid")
        self.y = y
        self.x = x
