from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from ansigif.config import DitheringMode, RenderConfig, check_grid_size
from ansigif.decoder import decode_frames
from ansigif.engine import RenderedImage
from ansigif.sampling import grid_size, quantize_frame
from ansigif.scaling import resolve_scaler, target_size

logger = logging.getLogger(__name__)

Source = BinaryIO | bytes


def _requested_grid(rows: int, columns: int, config: RenderConfig) -> tuple[int, int]:
    # Without dithering each terminal character holds two cells
    height = rows * 2 if config.dithering is DitheringMode.NONE else rows
    check_grid_size(height, columns, config.dithering)
    return height, columns


def _assemble(frames, config: RenderConfig) -> RenderedImage:
    first = frames[0].image
    height, width = grid_size(first.width, first.height, config.dithering)
    image = RenderedImage(height, width, len(frames), config)
    for index, frame in enumerate(frames):
        image.set_delay(index, frame.delay)
        quantize_frame(image.frames[index], frame.image)
    logger.info(
        "Built %d frame(s) of %dx%d cells (%s dithering)",
        len(frames),
        height,
        width,
        config.dithering.value,
    )
    return image


def build(
    source: Source,
    rows: int,
    columns: int,
    background="black",
    scale_mode="fit",
    dithering="none",
    parallelism: int = 1,
) -> RenderedImage:
    """Decode ``source`` and scale it to ``rows`` x ``columns`` terminal characters.

    Configuration is validated before any decoding happens.
    """
    config = RenderConfig(
        background=background,
        scale_mode=scale_mode,
        dithering=dithering,
        parallelism=parallelism,
    )
    _requested_grid(rows, columns, config)
    scaler = resolve_scaler(config.scale_mode)
    width_px, height_px = target_size(rows, columns, config.dithering)

    frames = decode_frames(source, config.background)
    for frame in frames:
        frame.image = scaler(frame.image, width_px, height_px)
    logger.debug(
        "Scaled to %dx%d pixels (%s, target %dx%d)",
        frames[0].image.width,
        frames[0].image.height,
        config.scale_mode.value,
        width_px,
        height_px,
    )
    return _assemble(frames, config)


def from_reader(source: Source, background="black", dithering="none", parallelism: int = 1) -> RenderedImage:
    """Decode ``source`` at its native resolution, without scaling."""
    config = RenderConfig(background=background, dithering=dithering, parallelism=parallelism)
    return _assemble(decode_frames(source, config.background), config)


def from_file(path: str | Path, background="black", dithering="none", parallelism: int = 1) -> RenderedImage:
    with Path(path).open("rb") as f:
        return from_reader(f, background=background, dithering=dithering, parallelism=parallelism)


def build_from_file(path: str | Path, rows: int, columns: int, **options) -> RenderedImage:
    with Path(path).open("rb") as f:
        return build(f, rows, columns, **options)


def gif_to_ansi(source: Source | str | Path, rows: int, columns: int, frame: int = 0, **options) -> str:
    """Render a single frame of an image in one call."""
    if isinstance(source, (str, Path)):
        image = build_from_file(source, rows, columns, **options)
    else:
        image = build(source, rows, columns, **options)
    return image.render(frame)
