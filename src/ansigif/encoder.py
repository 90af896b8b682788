from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed

from ansigif.charsets import BLOCK_LADDER, CHAR_LADDER, LOWER_HALF_BLOCK, pick_glyph
from ansigif.config import DitheringMode
from ansigif.model import ColorCell, FrameGrid, Role
from ansigif.terminal import RESET, bg, fg

logger = logging.getLogger(__name__)

ROW_END = RESET + "\n"


def encode_cell(
    cell: ColorCell,
    dithering: DitheringMode,
    background: tuple[int, ...],
    suppress_background: bool = False,
) -> str:
    """Escape sequence and glyph for one cell.

    Without dithering an upper cell only sets the background colour and a
    lower cell sets the foreground and draws the half block, so the pair forms
    one character. ``background`` and ``suppress_background`` only apply to
    the dithering modes.
    """
    if dithering is DitheringMode.NONE:
        if cell.role is Role.UPPER:
            return bg(cell.r, cell.g, cell.b)
        return fg(cell.r, cell.g, cell.b) + LOWER_HALF_BLOCK

    if dithering is DitheringMode.BLOCKS:
        glyph = pick_glyph(BLOCK_LADDER, cell.brightness)
    elif dithering is DitheringMode.CHARS:
        glyph = pick_glyph(CHAR_LADDER, cell.brightness)
    else:
        raise AssertionError(f"unreachable dithering mode: {dithering!r}")

    prefix = "" if suppress_background else bg(*background[:3])
    return prefix + fg(cell.r, cell.g, cell.b) + glyph


def row_count(grid: FrameGrid) -> int:
    """Number of terminal rows a grid renders to."""
    if grid.dithering is DitheringMode.NONE:
        return grid.height // 2
    return grid.height


def render_row(
    grid: FrameGrid,
    row: int,
    background: tuple[int, ...],
    suppress_background: bool = False,
) -> tuple[int, str]:
    """Render terminal row ``row`` of ``grid``, returning ``(row, text)``."""
    dithering = grid.dithering
    parts = []
    if dithering is DitheringMode.NONE:
        for upper, lower in zip(grid.row(2 * row), grid.row(2 * row + 1)):
            parts.append(encode_cell(upper, dithering, background, suppress_background))
            parts.append(encode_cell(lower, dithering, background, suppress_background))
    else:
        for cell in grid.row(row):
            parts.append(encode_cell(cell, dithering, background, suppress_background))
    parts.append(ROW_END)
    return row, "".join(parts)


def render_frame(
    grid: FrameGrid,
    background: tuple[int, ...],
    suppress_background: bool = False,
    parallelism: int = 1,
) -> str:
    """Render a whole frame, ``parallelism`` rows at a time.

    Results are stored by row index, so the text is in row order whatever
    order the workers finish in.
    """
    total = row_count(grid)
    rows: list[str] = [""] * total

    with ThreadPoolExecutor(max_workers=parallelism) as pool:
        for start in range(0, total, parallelism):
            window = range(start, min(start + parallelism, total))
            futures = [pool.submit(render_row, grid, r, background, suppress_background) for r in window]
            # Wait for the whole window before submitting the next one
            for future in as_completed(futures):
                index, text = future.result()
                rows[index] = text

    logger.debug("Rendered %d rows with %d worker(s)", total, parallelism)
    return "".join(rows)
