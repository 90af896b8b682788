import numpy as np
import pytest
from PIL import Image

from ansigif.config import DitheringMode
from ansigif.exceptions import OutOfBoundsError
from ansigif.model import ColorCell, FrameGrid, Role
from ansigif.sampling import average_blocks, grid_size, quantize_frame, sample_blocks, sample_half_blocks


def test_grid_size_without_dithering_truncates_to_even_height():
    assert grid_size(10, 7, DitheringMode.NONE) == (6, 10)
    assert grid_size(10, 8, DitheringMode.NONE) == (8, 10)


def test_grid_size_with_dithering_counts_whole_blocks():
    assert grid_size(17, 33, DitheringMode.BLOCKS) == (4, 4)
    assert grid_size(80, 48, DitheringMode.CHARS) == (6, 20)


def test_uniform_block_average():
    rgb = np.empty((8, 4, 3))
    rgb[:, :] = (100 / 255, 150 / 255, 200 / 255)
    value = np.full((8, 4), 0.5)
    result = average_blocks(rgb, value)
    assert result.shape == (1, 1, 4)
    assert result[0, 0].tolist() == [100, 150, 200, 128]


def test_block_average_rounds_to_nearest():
    rgb = np.zeros((8, 4, 3))
    rgb[:6, :, 0] = 1 / 255  # 24 of 32 pixels -> 0.75
    rgb[:2, :, 1] = 1 / 255  # 8 of 32 pixels -> 0.25
    value = np.zeros((8, 4))
    assert average_blocks(rgb, value)[0, 0, :2].tolist() == [1, 0]


def test_block_average_drops_partial_blocks():
    rgb = np.ones((10, 9, 3))
    value = np.ones((10, 9))
    assert average_blocks(rgb, value).shape == (1, 2, 4)


def test_sample_blocks_uses_hsv_value():
    img = Image.new("RGB", (4, 8), (100, 150, 200))
    result = sample_blocks(img)
    assert result[0, 0].tolist() == [100, 150, 200, 200]


def test_sample_blocks_separates_cells():
    img = Image.new("RGB", (8, 8), (0, 0, 0))
    img.paste((255, 255, 255), (4, 0, 8, 8))
    result = sample_blocks(img)
    assert result[0, 0].tolist() == [0, 0, 0, 0]
    assert result[0, 1].tolist() == [255, 255, 255, 255]


def test_sample_half_blocks_keeps_raw_pixels():
    img = Image.new("RGB", (2, 3), (1, 2, 3))
    img.putpixel((1, 0), (9, 8, 7))
    pixels = sample_half_blocks(img)
    assert pixels.shape == (2, 2, 3)
    assert pixels[0, 1].tolist() == [9, 8, 7]


def test_quantize_frame_without_dithering():
    grid = FrameGrid(2, 2, DitheringMode.NONE)
    img = Image.new("RGB", (2, 3), (10, 20, 30))
    img.putpixel((0, 1), (40, 50, 60))
    quantize_frame(grid, img)
    assert grid.get_at(0, 0) == ColorCell(10, 20, 30, 0, Role.UPPER)
    assert grid.get_at(1, 0) == ColorCell(40, 50, 60, 0, Role.LOWER)


def test_quantize_frame_with_dithering():
    grid = FrameGrid(2, 2, DitheringMode.BLOCKS)
    img = Image.new("RGB", (8, 16), (255, 0, 0))
    quantize_frame(grid, img)
    assert grid.get_at(1, 1) == ColorCell(255, 0, 0, 255, Role.LOWER)


def test_quantize_frame_larger_than_grid_reports_out_of_bounds():
    grid = FrameGrid(2, 2, DitheringMode.NONE)
    with pytest.raises(OutOfBoundsError):
        quantize_frame(grid, Image.new("RGB", (3, 2)))
