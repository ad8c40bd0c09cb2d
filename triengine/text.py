"""Fixed-size glyph layout for on-screen text."""

from __future__ import annotations

from typing import NamedTuple

GLYPH_SIZE = 32

Point = tuple[int, int]


class GlyphQuad(NamedTuple):
    top_left: Point
    top_right: Point
    bottom_left: Point
    bottom_right: Point


def glyph_quads(text: str) -> list[GlyphQuad]:
    """Lay out one GLYPH_SIZE square per character, left to right."""
    quads = []
    for index, _ in enumerate(text):
        left = index * GLYPH_SIZE
        right = left + GLYPH_SIZE
        quads.append(
            GlyphQuad(
                top_left=(left, 0),
                top_right=(right, 0),
                bottom_left=(left, GLYPH_SIZE),
                bottom_right=(right, GLYPH_SIZE),
            )
        )
    return quads


class Text:
    """A string placed at a screen position, laid out as glyph quads."""

    def __init__(self, text: str, x: int, y: int) -> None:
        self.text = text
        self.pos_x = x
        self.pos_y = y
        self.quads = glyph_quads(text)