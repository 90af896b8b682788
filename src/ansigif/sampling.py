import numpy as np
from PIL import Image

from ansigif.config import BLOCK_SIZE_X, BLOCK_SIZE_Y, DitheringMode
from ansigif.model import FrameGrid


def grid_size(width: int, height: int, dithering: DitheringMode) -> tuple[int, int]:
    """Cell grid (height, width) that a ``width`` x ``height`` pixel image fills."""
    if dithering is DitheringMode.NONE:
        # One cell per pixel, rows paired into characters
        return height - height % 2, width
    return height // BLOCK_SIZE_Y, width // BLOCK_SIZE_X


def sample_half_blocks(image: Image.Image) -> np.ndarray:
    """Raw RGB pixels trimmed to an even number of rows. Shape (h, w, 3) uint8."""
    arr = np.asarray(image.convert("RGB"), dtype=np.uint8)
    return arr[: arr.shape[0] - arr.shape[0] % 2]


def average_blocks(
    rgb: np.ndarray, value: np.ndarray, block_h: int = BLOCK_SIZE_Y, block_w: int = BLOCK_SIZE_X
) -> np.ndarray:
    """Average colour and brightness over each block.

    ``rgb`` is (H, W, 3) and ``value`` is (H, W), both floats in 0-1. Pixels
    past the last whole block are dropped.

    Returns array of shape (rows, cols, 4) as uint8 holding R, G, B and
    brightness, each rounded half up to 0-255.
    """
    rows = rgb.shape[0] // block_h
    cols = rgb.shape[1] // block_w

    channels = np.concatenate([rgb, value[:, :, None]], axis=2)
    trimmed = channels[: rows * block_h, : cols * block_w]
    # (rows, cols, block_h, block_w, 4)
    cells = trimmed.reshape(rows, block_h, cols, block_w, 4).transpose(0, 2, 1, 3, 4)

    mean = cells.sum(axis=(2, 3)) / (block_h * block_w)
    return np.clip(np.floor(mean * 255.0 + 0.5), 0, 255).astype(np.uint8)


def sample_blocks(image: Image.Image) -> np.ndarray:
    """Per-block average RGB and HSV value of an image. Shape (rows, cols, 4) uint8."""
    rgb_image = image.convert("RGB")
    rgb = np.asarray(rgb_image, dtype=np.float64) / 255.0
    value = np.asarray(rgb_image.convert("HSV"), dtype=np.float64)[:, :, 2] / 255.0
    return average_blocks(rgb, value)


def quantize_frame(grid: FrameGrid, image: Image.Image) -> None:
    """Fill ``grid`` from a scaled frame."""
    if grid.dithering is DitheringMode.NONE:
        pixels = sample_half_blocks(image)
        for y, row in enumerate(pixels.tolist()):
            for x, (r, g, b) in enumerate(row):
                grid.set_at(y, x, r, g, b)
    else:
        cells = sample_blocks(image)
        for y, row in enumerate(cells.tolist()):
            for x, (r, g, b, brightness) in enumerate(row):
                grid.set_at(y, x, r, g, b, brightness)
