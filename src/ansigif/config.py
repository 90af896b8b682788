from __future__ import annotations

import enum
from dataclasses import dataclass

from PIL import ImageColor

from ansigif.exceptions import ConfigError

# Source pixels per cell when dithering (height x width)
BLOCK_SIZE_Y = 8
BLOCK_SIZE_X = 4

MIN_GRID_SIZE = 2


class DitheringMode(enum.Enum):
    """How a block of source pixels becomes one terminal glyph."""

    NONE = "none"  # half-block truecolor, two pixels per character
    BLOCKS = "blocks"  # shade characters chosen by brightness
    CHARS = "chars"  # ASCII density ladder chosen by brightness


class ScaleMode(enum.Enum):
    """How the source is fitted into the target pixel area."""

    RESIZE = "resize"
    FILL = "fill"
    FIT = "fit"


def _coerce(enum_cls: type[enum.Enum], value, what: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(m.value for m in enum_cls)
        raise ConfigError(f"unknown {what}: {value!r} (expected one of: {choices})") from None


def parse_dithering(value) -> DitheringMode:
    return _coerce(DitheringMode, value, "dithering mode")


def parse_scale_mode(value) -> ScaleMode:
    return _coerce(ScaleMode, value, "scale mode")


def parse_background(value) -> tuple[int, int, int, int]:
    """Normalise a colour name, hex string or RGB(A) tuple to an RGBA tuple."""
    if isinstance(value, str):
        try:
            rgb = ImageColor.getrgb(value)
        except ValueError:
            raise ConfigError(f"unknown background colour: {value!r}") from None
    else:
        try:
            rgb = tuple(value)
        except TypeError:
            raise ConfigError(f"background must be a colour name or tuple, got {value!r}") from None
        if len(rgb) not in (3, 4) or not all(isinstance(c, int) and 0 <= c <= 255 for c in rgb):
            raise ConfigError(f"background must be 3 or 4 integers in 0-255, got {value!r}")
    if len(rgb) == 3:
        rgb = (*rgb, 255)
    return rgb


def pixel_factor(dithering: DitheringMode) -> tuple[int, int]:
    """Source pixels per terminal character as (height, width)."""
    if dithering is DitheringMode.NONE:
        return 2, 1
    return BLOCK_SIZE_Y, BLOCK_SIZE_X


def check_grid_size(height: int, width: int, dithering: DitheringMode) -> None:
    """Validate cell grid dimensions for a dithering mode."""
    if height < MIN_GRID_SIZE or width < MIN_GRID_SIZE:
        raise ConfigError(f"grid height and width must be >= {MIN_GRID_SIZE}, got {height}x{width}")
    if dithering is DitheringMode.NONE and height % 2 != 0:
        raise ConfigError(f"grid height must be even without dithering, got {height}")


@dataclass(frozen=True)
class RenderConfig:
    background: tuple[int, int, int, int] = (0, 0, 0, 255)
    scale_mode: ScaleMode = ScaleMode.FIT
    dithering: DitheringMode = DitheringMode.NONE
    parallelism: int = 1

    def __post_init__(self):
        object.__setattr__(self, "background", parse_background(self.background))
        object.__setattr__(self, "scale_mode", parse_scale_mode(self.scale_mode))
        object.__setattr__(self, "dithering", parse_dithering(self.dithering))
        if not isinstance(self.parallelism, int) or self.parallelism < 1:
            raise ConfigError(f"parallelism must be a positive integer, got {self.parallelism!r}")
