from collections.abc import Mapping
from datetime import date
from datetime import timedelta

import regex

from contribart.services.fonts import ALIASES
from contribart.services.fonts import BLOCK_FONT
from contribart.services.fonts import FULL_HEIGHT
from contribart.services.fonts import Glyph


LETTER_SPACING = 1
VARIATION_SELECTORS = ("\ufe0e", "\ufe0f")

_GRAPHEME = regex.compile(r"\X")


def split_symbols(
    text: str, aliases: Mapping[str, str] = ALIASES
) -> list[str]:
    """Uppercase `text`, expand aliases and split it into grapheme clusters.

    Variation selectors are dropped so emoji-styled symbols match their
    plain glyphs.
    """

    normalized = text.upper()
    for selector in VARIATION_SELECTORS:
        normalized = normalized.replace(selector, "")
    for token, symbol in aliases.items():
        normalized = normalized.replace(token, symbol)
    return _GRAPHEME.findall(normalized)


def rasterize(
    text: str,
    glyphs: Mapping[str, Glyph] = BLOCK_FONT,
    aliases: Mapping[str, str] = ALIASES,
) -> list[tuple[int, int]]:
    """Return the (column, row) pixels of `text` drawn with `glyphs`.

    Symbols without a glyph are skipped. Five-row glyphs are shifted down
    one row to sit in the middle of the week; full-height glyphs are not.
    """

    coords: list[tuple[int, int]] = []
    cursor = 0
    for symbol in split_symbols(text, aliases):
        glyph = glyphs.get(symbol)
        if glyph is None:
            continue

        y_offset = 0 if glyph.height == FULL_HEIGHT else 1
        for column_index, column in enumerate(glyph.columns):
            for row_index, pixel in enumerate(column):
                if pixel:
                    coords.append((cursor + column_index, row_index + y_offset))

        cursor += glyph.width + LETTER_SPACING
    return coords


def measure(
    text: str,
    glyphs: Mapping[str, Glyph] = BLOCK_FONT,
    aliases: Mapping[str, str] = ALIASES,
) -> int:
    """Return how many week columns `text` spans, trailing spacing excluded."""

    widths = [
        glyphs[symbol].width
        for symbol in split_symbols(text, aliases)
        if symbol in glyphs
    ]
    if not widths:
        return 0
    return sum(widths) + LETTER_SPACING * (len(widths) - 1)


def place_text(
    text: str,
    start_date: date,
    column_offset: int = 0,
    glyphs: Mapping[str, Glyph] = BLOCK_FONT,
) -> list[date]:
    """Map the pixels of `text` onto dates, counting weeks from `start_date`.

    Dates are returned in drawing order without duplicates. Callers filter
    them to the year they are painting.
    """

    dates: dict[date, None] = {}
    for x, y in rasterize(text, glyphs):
        dates[start_date + timedelta(weeks=x + column_offset, days=y)] = None
    return list(dates)
