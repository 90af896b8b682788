import logging
import time
from typing import Callable, TextIO

from ansigif.engine import RenderedImage
from ansigif.exceptions import ConfigError
from ansigif.terminal import CLEAR_SCREEN

logger = logging.getLogger(__name__)


def play(
    image: RenderedImage,
    out: TextIO,
    loops: int = 0,
    clear: bool = True,
    suppress_background: bool = False,
    sleep: Callable[[float], None] | None = None,
    should_stop: Callable[[], bool] | None = None,
) -> int:
    """Write frames to ``out`` at their own delays, wrapping around at the end.

    ``loops`` is the number of passes over the animation; 0 plays until
    ``should_stop`` returns true or the reader goes away. Returns the number
    of frames written.
    """
    if loops < 0:
        raise ConfigError(f"loops must be >= 0, got {loops}")
    sleep = sleep if sleep is not None else time.sleep
    count = image.frame_count()
    written = 0
    frame = 0
    while loops == 0 or written < loops * count:
        if should_stop is not None and should_stop():
            break
        try:
            if clear:
                out.write(CLEAR_SCREEN)
            out.write(image.render(frame, suppress_background))
            out.flush()
        except BrokenPipeError:
            logger.info("Output closed after %d frame(s)", written)
            break
        written += 1
        sleep(image.frame_delay(frame) / 100)
        frame = (frame + 1) % count
    return written
