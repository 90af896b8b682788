from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import BinaryIO

import numpy as np
from PIL import Image, ImageSequence

from ansigif.exceptions import DecodeError

logger = logging.getLogger(__name__)


@dataclass
class DecodedFrame:
    image: Image.Image  # mode "RGB", native resolution
    delay: int  # hundredths of a second


def compose(frame: Image.Image, background: tuple[int, int, int, int]) -> Image.Image:
    """Flatten a frame to RGB.

    With an opaque background the frame is alpha-composited over it. Otherwise
    the frame's own pixels are kept and premultiplied by their alpha, so fully
    transparent pixels come out black.
    """
    rgba = frame.convert("RGBA")
    if background[3] == 255:
        canvas = Image.new("RGBA", rgba.size, background)
        return Image.alpha_composite(canvas, rgba).convert("RGB")
    arr = np.asarray(rgba, dtype=np.uint16)
    rgb = (arr[:, :, :3] * arr[:, :, 3:] + 127) // 255
    return Image.fromarray(rgb.astype(np.uint8))


def _frame_delay(frame: Image.Image) -> int:
    # Pillow reports GIF delays in milliseconds
    duration = frame.info.get("duration") or 0
    return int(duration) // 10


def decode_frames(source: BinaryIO | bytes, background: tuple[int, int, int, int]) -> list[DecodedFrame]:
    """Decode and composite every frame of ``source``."""
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    frames: list[DecodedFrame] = []
    try:
        with Image.open(source) as img:
            size = img.size
            for frame in ImageSequence.Iterator(img):
                frames.append(DecodedFrame(image=compose(frame, background), delay=_frame_delay(frame)))
    except (OSError, EOFError, ValueError) as exc:
        raise DecodeError(f"cannot decode image: {exc}") from exc

    if not frames:
        raise DecodeError("image contains no frames")

    logger.debug("Decoded %d frame(s) at %dx%d", len(frames), *size)
    return frames
