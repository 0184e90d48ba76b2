"""5x3 bitmap font and column strips for scrolling text."""

GLYPH_HEIGHT = 5
GLYPH_WIDTH = 3
VIEWPORT_WIDTH = 8

Column = tuple[bool, ...]

# Rows top to bottom; '#' is a lit pixel.
_FONT_ROWS: dict[str, tuple[str, str, str, str, str]] = {
    " ": ("...", "...", "...", "...", "..."),
    "A": (".#.", "#.#", "###", "#.#", "#.#"),
    "B": ("##.", "#.#", "##.", "#.#", "##."),
    "C": (".##", "#..", "#..", "#..", ".##"),
    "D": ("##.", "#.#", "#.#", "#.#", "##."),
    "E": ("###", "#..", "##.", "#..", "###"),
    "F": ("###", "#..", "##.", "#..", "#.."),
    "G": (".##", "#..", "#.#", "#.#", ".##"),
    "H": ("#.#", "#.#", "###", "#.#", "#.#"),
    "I": ("###", ".#.", ".#.", ".#.", "###"),
    "J": ("..#", "..#", "..#", "#.#", ".#."),
    "K": ("#.#", "#.#", "##.", "#.#", "#.#"),
    "L": ("#..", "#..", "#..", "#..", "###"),
    "M": ("#.#", "###", "###", "#.#", "#.#"),
    "N": ("##.", "#.#", "#.#", "#.#", "#.#"),
    "O": (".#.", "#.#", "#.#", "#.#", ".#."),
    "P": ("##.", "#.#", "##.", "#..", "#.."),
    "Q": (".#.", "#.#", "#.#", "##.", ".##"),
    "R": ("##.", "#.#", "##.", "#.#", "#.#"),
    "S": (".##", "#..", ".#.", "..#", "##."),
    "T": ("###", ".#.", ".#.", ".#.", ".#."),
    "U": ("#.#", "#.#", "#.#", "#.#", "###"),
    "V": ("#.#", "#.#", "#.#", "#.#", ".#."),
    "W": ("#.#", "#.#", "###", "###", "#.#"),
    "X": ("#.#", "#.#", ".#.", "#.#", "#.#"),
    "Y": ("#.#", "#.#", ".#.", ".#.", ".#."),
    "Z": ("###", "..#", ".#.", "#..", "###"),
    "0": ("###", "#.#", "#.#", "#.#", "###"),
    "1": (".#.", "##.", ".#.", ".#.", "###"),
    "2": ("##.", "..#", ".#.", "#..", "###"),
    "3": ("##.", "..#", ".#.", "..#", "##."),
    "4": ("#.#", "#.#", "###", "..#", "..#"),
    "5": ("###", "#..", "##.", "..#", "##."),
    "6": (".##", "#..", "###", "#.#", "###"),
    "7": ("###", "..#", ".#.", ".#.", ".#."),
    "8": ("###", "#.#", "###", "#.#", "###"),
    "9": ("###", "#.#", "###", "..#", "##."),
    "!": (".#.", ".#.", ".#.", "...", ".#."),
    "-": ("...", "...", "###", "...", "..."),
}


def _to_columns(rows: tuple[str, ...]) -> list[Column]:
    return [tuple(row[x] == "#" for row in rows) for x in range(GLYPH_WIDTH)]


FONT: dict[str, list[Column]] = {ch: _to_columns(rows) for ch, rows in _FONT_ROWS.items()}

BLANK_COLUMN: Column = (False,) * GLYPH_HEIGHT


def text_columns(text: str) -> list[Column]:
    """
    Lay text out as a strip of pixel columns.

    Each glyph contributes three columns followed by one blank spacer
    column. Characters without a glyph are skipped.
    """
    columns: list[Column] = []
    for ch in text.upper():
        glyph = FONT.get(ch)
        if glyph is None:
            continue
        columns.extend(glyph)
        columns.append(BLANK_COLUMN)
    return columns


def scroll_frames(text: str, width: int = VIEWPORT_WIDTH) -> list[list[Column]]:
    """
    Frames of text scrolling right to left through a viewport.

    The strip is padded with a full viewport of blank columns on both
    sides, so the first and last frames are empty.
    """
    padding = [BLANK_COLUMN] * width
    strip = padding + text_columns(text) + padding
    return [strip[offset:offset + width] for offset in range(len(strip) - width + 1)]
