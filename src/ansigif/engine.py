from __future__ import annotations

import sys

from ansigif.config import RenderConfig, check_grid_size
from ansigif.encoder import render_frame
from ansigif.exceptions import ConfigError
from ansigif.model import ColorCell, FrameGrid


class RenderedImage:
    """Animation frames as cell grids plus the settings needed to render them.

    Cells are written once while the image is built and only read afterwards,
    so any number of threads may render frames concurrently.
    """

    def __init__(self, height: int, width: int, frame_count: int, config: RenderConfig):
        check_grid_size(height, width, config.dithering)
        if frame_count < 1:
            raise ConfigError(f"frame count must be >= 1, got {frame_count}")
        self.height = height
        self.width = width
        self.config = config
        self.frames = tuple(FrameGrid(height, width, config.dithering) for _ in range(frame_count))
        self._delays = [0] * frame_count
        self.parallelism = config.parallelism

    @classmethod
    def new(cls, height: int, width: int, frame_count: int = 1, config: RenderConfig | None = None) -> RenderedImage:
        """Create a blank image ready to be drawn on."""
        return cls(height, width, frame_count, config if config is not None else RenderConfig())

    @property
    def background(self) -> tuple[int, int, int, int]:
        return self.config.background

    @property
    def dithering(self):
        return self.config.dithering

    @property
    def scale_mode(self):
        return self.config.scale_mode

    @property
    def delays(self) -> tuple[int, ...]:
        return tuple(self._delays)

    def set_parallelism(self, parallelism: int) -> None:
        """Set how many rows are rendered concurrently. Output is unaffected."""
        if not isinstance(parallelism, int) or parallelism < 1:
            raise ConfigError(f"parallelism must be a positive integer, got {parallelism!r}")
        self.parallelism = parallelism

    def frame_count(self) -> int:
        return len(self.frames)

    def _check_frame(self, frame: int) -> None:
        if not 0 <= frame < len(self.frames):
            raise IndexError(f"frame {frame} out of range for {len(self.frames)} frame(s)")

    def frame_delay(self, frame: int) -> int:
        """Delay after ``frame`` in hundredths of a second."""
        self._check_frame(frame)
        return self._delays[frame]

    def set_delay(self, frame: int, delay: int) -> None:
        self._check_frame(frame)
        self._delays[frame] = delay

    def get_at(self, frame: int, y: int, x: int) -> ColorCell:
        self._check_frame(frame)
        return self.frames[frame].get_at(y, x)

    def set_at(self, frame: int, y: int, x: int, r: int, g: int, b: int, brightness: int = 0) -> None:
        self._check_frame(frame)
        self.frames[frame].set_at(y, x, r, g, b, brightness)

    def render(self, frame: int = 0, suppress_background: bool = False) -> str:
        """ANSI text for one frame, one line per terminal row."""
        self._check_frame(frame)
        return render_frame(
            self.frames[frame],
            self.config.background,
            suppress_background=suppress_background,
            parallelism=self.parallelism,
        )

    def draw(self, frame: int = 0, suppress_background: bool = False, file=None) -> None:
        """Write one frame to ``file`` (stdout by default)."""
        file = file if file is not None else sys.stdout
        file.write(self.render(frame, suppress_background))
        file.flush()
