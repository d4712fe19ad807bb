"""Bitmap fonts for the text tool.

Glyphs are written row by row (`#` = pixel on) and stored as columns, the
unit the rasterizer advances by. Standard glyphs are 5 rows high, full-height
glyphs use all 7 rows of a week.
"""

from dataclasses import dataclass


FULL_HEIGHT = 7


@dataclass(frozen=True)
class Glyph:
    columns: tuple[tuple[int, ...], ...]

    @classmethod
    def from_rows(cls, *rows: str) -> "Glyph":
        if len({len(row) for row in rows}) != 1:
            raise ValueError("glyph rows must have equal width")
        columns = tuple(
            tuple(1 if row[x] == "#" else 0 for row in rows)
            for x in range(len(rows[0]))
        )
        return cls(columns=columns)

    @property
    def width(self) -> int:
        return len(self.columns)

    @property
    def height(self) -> int:
        return len(self.columns[0]) if self.columns else 0


SMILEY = "😊"
HEART = "♥"

ALIASES: dict[str, str] = {
    ":)": SMILEY,
    "*": SMILEY,
    "<3": HEART,
}

_G = Glyph.from_rows

BLOCK_FONT: dict[str, Glyph] = {
    "A": _G(".###.", "#...#", "#####", "#...#", "#...#"),
    "B": _G("####.", "#...#", "####.", "#...#", "####."),
    "C": _G(".####", "#....", "#....", "#....", ".####"),
    "D": _G("####.", "#...#", "#...#", "#...#", "####."),
    "E": _G("#####", "#....", "####.", "#....", "#####"),
    "F": _G("#####", "#....", "####.", "#....", "#...."),
    "G": _G(".####", "#....", "#..##", "#...#", ".###."),
    "H": _G("#...#", "#...#", "#####", "#...#", "#...#"),
    "I": _G("#####", "..#..", "..#..", "..#..", "#####"),
    "J": _G("#####", "...#.", "...#.", "#..#.", ".##.."),
    "K": _G("#...#", "#..#.", "###..", "#..#.", "#...#"),
    "L": _G("#....", "#....", "#....", "#....", "#####"),
    "M": _G("#...#", "##.##", "#.#.#", "#...#", "#...#"),
    "N": _G("#...#", "##..#", "#.#.#", "#..##", "#...#"),
    "O": _G(".###.", "#...#", "#...#", "#...#", ".###."),
    "P": _G("####.", "#...#", "####.", "#....", "#...."),
    "Q": _G(".###.", "#...#", "#.#.#", "#..#.", ".##.#"),
    "R": _G("####.", "#...#", "####.", "#..#.", "#...#"),
    "S": _G(".####", "#....", ".###.", "....#", "####."),
    "T": _G("#####", "..#..", "..#..", "..#..", "..#.."),
    "U": _G("#...#", "#...#", "#...#", "#...#", ".###."),
    "V": _G("#...#", "#...#", "#...#", ".#.#.", "..#.."),
    "W": _G("#...#", "#...#", "#.#.#", "##.##", "#...#"),
    "X": _G("#...#", ".#.#.", "..#..", ".#.#.", "#...#"),
    "Y": _G("#...#", ".#.#.", "..#..", "..#..", "..#.."),
    "Z": _G("#####", "...#.", "..#..", ".#...", "#####"),
    "0": _G(".###.", "#..##", "#.#.#", "##..#", ".###."),
    "1": _G("..#..", ".##..", "..#..", "..#..", ".###."),
    "2": _G(".###.", "#...#", "..##.", ".#...", "#####"),
    "3": _G("####.", "....#", "..##.", "....#", "####."),
    "4": _G("#..#.", "#..#.", "#####", "...#.", "...#."),
    "5": _G("#####", "#....", "####.", "....#", "####."),
    "6": _G(".###.", "#....", "####.", "#...#", ".###."),
    "7": _G("#####", "....#", "...#.", "..#..", "..#.."),
    "8": _G(".###.", "#...#", ".###.", "#...#", ".###."),
    "9": _G(".###.", "#...#", ".####", "....#", ".###."),
    "!": _G("#", "#", "#", ".", "#"),
    "?": _G("###", "..#", ".##", "...", ".#."),
    ".": _G(".", ".", ".", ".", "#"),
    "-": _G("...", "...", "###", "...", "..."),
    " ": _G("..", "..", "..", "..", ".."),
    SMILEY: _G(".....", ".#.#.", ".....", "#...#", ".###."),
    HEART: _G(
        ".##.##.",
        "#######",
        "#######",
        "#######",
        ".#####.",
        "..###..",
        "...#...",
    ),
}

# 3x5 letters; N is drawn wide so it reads apart from H.
COMPACT_FONT: dict[str, Glyph] = {
    "A": _G(".#.", "#.#", "###", "#.#", "#.#"),
    "B": _G("##.", "#.#", "##.", "#.#", "##."),
    "C": _G(".##", "#..", "#..", "#..", ".##"),
    "D": _G("##.", "#.#", "#.#", "#.#", "##."),
    "E": _G("###", "#..", "###", "#..", "###"),
    "F": _G("###", "#..", "###", "#..", "#.."),
    "G": _G(".##", "#..", "#.#", "#.#", ".##"),
    "H": _G("#.#", "#.#", "###", "#.#", "#.#"),
    "I": _G("###", ".#.", ".#.", ".#.", "###"),
    "J": _G("..#", "..#", "..#", "..#", "##."),
    "K": _G("#.#", "#.#", "##.", "#.#", "#.#"),
    "L": _G("#..", "#..", "#..", "#..", "###"),
    "M": _G("#.#", "###", "#.#", "#.#", "#.#"),
    "N": _G("###", "#.#", "#.#", "#.#", "#.#"),
    "O": _G(".#.", "#.#", "#.#", "#.#", ".#."),
    "P": _G("##.", "#.#", "##.", "#..", "#.."),
    "Q": _G(".#.", "#.#", "#.#", "###", ".##"),
    "R": _G("##.", "#.#", "##.", "#.#", "#.#"),
    "S": _G("###", "#..", "###", "..#", "###"),
    "T": _G("###", ".#.", ".#.", ".#.", ".#."),
    "U": _G("#.#", "#.#", "#.#", "#.#", ".#."),
    "V": _G("#.#", "#.#", "#.#", ".#.", ".#."),
    "W": _G("#.#", "#.#", "#.#", "###", "#.#"),
    "X": _G("#.#", "#.#", ".#.", "#.#", "#.#"),
    "Y": _G("#.#", "#.#", ".#.", ".#.", ".#."),
    "Z": _G("###", "..#", ".#.", "#..", "###"),
    "0": _G("###", "#.#", "#.#", "#.#", "###"),
    "1": _G(".#.", "##.", ".#.", ".#.", "###"),
    "2": _G("###", "..#", "###", "#..", "###"),
    "3": _G("###", "..#", "###", "..#", "###"),
    "4": _G("#.#", "#.#", "###", "..#", "..#"),
    "5": _G("###", "#..", "###", "..#", "###"),
    "6": _G("###", "#..", "###", "#.#", "###"),
    "7": _G("###", "..#", "..#", "..#", "..#"),
    "8": _G("###", "#.#", "###", "#.#", "###"),
    "9": _G("###", "#.#", "###", "..#", "###"),
    " ": _G("..", "..", "..", "..", ".."),
    SMILEY: _G(".....", ".#.#.", ".....", "#...#", ".###."),
}

FONTS: dict[str, dict[str, Glyph]] = {
    "block": BLOCK_FONT,
    "compact": COMPACT_FONT,
}


def get_font(name: str) -> dict[str, Glyph]:
    try:
        return FONTS[name]
    except KeyError:
        raise ValueError(f"unknown font: {name}") from None
