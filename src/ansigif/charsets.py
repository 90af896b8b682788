# Lower half block: foreground paints the lower pixel, background the upper one
LOWER_HALF_BLOCK = "▄"

# Block elements by brightness, as (threshold, glyph); first threshold exceeded wins
BLOCK_LADDER = (
    (204, "█"),  # full block
    (152, "▓"),  # dark shade
    (100, "▒"),  # medium shade
    (48, "░"),  # light shade
)

# ASCII glyphs from densest to sparsest
CHAR_LADDER = (
    (230, "#"),
    (207, "&"),
    (184, "$"),
    (161, "X"),
    (138, "x"),
    (115, "="),
    (92, "+"),
    (69, ";"),
    (46, ":"),
    (23, "."),
)

BLANK = " "


def pick_glyph(ladder: tuple[tuple[int, str], ...], brightness: int) -> str:
    """Return the glyph of the first tier whose threshold brightness exceeds."""
    for threshold, glyph in ladder:
        if brightness > threshold:
            return glyph
    return BLANK
