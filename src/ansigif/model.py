import enum
from dataclasses import dataclass

from ansigif.config import DitheringMode, check_grid_size
from ansigif.exceptions import OutOfBoundsError


class Role(enum.Enum):
    """Half of a two-pixel-tall character a cell stands for (no dithering only)."""

    UPPER = "upper"
    LOWER = "lower"


def role_for(dithering: DitheringMode, y: int) -> Role:
    if dithering is DitheringMode.NONE and y % 2 == 0:
        return Role.UPPER
    return Role.LOWER


@dataclass(frozen=True)
class ColorCell:
    r: int = 0
    g: int = 0
    b: int = 0
    brightness: int = 0  # only meaningful when dithering
    role: Role = Role.LOWER  # only meaningful without dithering


class FrameGrid:
    """Cells for one animation frame, addressed as (y, x)."""

    def __init__(self, height: int, width: int, dithering: DitheringMode):
        check_grid_size(height, width, dithering)
        self.height = height
        self.width = width
        self.dithering = dithering
        self._rows = [[ColorCell(role=role_for(dithering, y))] * width for y in range(height)]

    def _check(self, y: int, x: int) -> None:
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise OutOfBoundsError(y, x, self.height, self.width)

    def set_at(self, y: int, x: int, r: int, g: int, b: int, brightness: int = 0) -> None:
        self._check(y, x)
        self._rows[y][x] = ColorCell(r, g, b, brightness, role_for(self.dithering, y))

    def get_at(self, y: int, x: int) -> ColorCell:
        self._check(y, x)
        return self._rows[y][x]

    def row(self, y: int) -> tuple[ColorCell, ...]:
        self._check(y, 0)
        return tuple(self._rows[y])
