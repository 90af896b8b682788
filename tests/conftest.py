import io

import pytest
from PIL import Image


def encode(frames, fmt="GIF", durations=None):
    """Save Pillow frames to bytes; several frames become an animation."""
    buf = io.BytesIO()
    if len(frames) == 1:
        frames[0].save(buf, format=fmt)
    else:
        frames[0].save(
            buf,
            format=fmt,
            save_all=True,
            append_images=frames[1:],
            duration=durations or [100] * len(frames),
            loop=0,
        )
    return buf.getvalue()


def gradient(width, height):
    """RGB image whose colour changes along both axes."""
    img = Image.new("RGB", (width, height))
    pixels = img.load()
    for y in range(height):
        for x in range(width):
            pixels[x, y] = (x * 255 // max(width - 1, 1), y * 255 // max(height - 1, 1), 128)
    return img


@pytest.fixture
def two_frame_gif():
    """40x20 animation: solid red for 100ms then solid blue for 200ms."""
    frames = [Image.new("RGB", (40, 20), (255, 0, 0)), Image.new("RGB", (40, 20), (0, 0, 255))]
    return encode(frames, durations=[100, 200])


@pytest.fixture
def solid_png():
    def _make(colour, size=(8, 8)):
        return encode([Image.new("RGB", size, colour)], fmt="PNG")

    return _make
