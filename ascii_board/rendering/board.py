#!/usr/bin/env python3
# ascii_board/rendering/board.py
"""
Board and marker drawing.

draw_board() paints, in this order:
- the outer frame (edges, then the four corners)
- interior gridlines, inset one cell from the frame on both ends
- interior intersections, so a crossing always shows the junction glyph

Interior lines stop one cell short of the frame, so frame cells only ever
hold frame glyphs. All coordinates go through Canvas.set_cell, which drops
anything off-canvas.
"""

from __future__ import annotations

from dataclasses import dataclass

from ascii_board.rendering.canvas import Canvas
from ascii_board.rendering.geometry import BoardSpec, DEFAULT_BOARD, cell_center, compute_rect

__all__ = [
    "GlyphSet",
    "LIGHT",
    "draw_board",
    "draw_marker",
]


@dataclass(frozen=True)
class GlyphSet:
    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    cross: str

    def all(self) -> frozenset:
        return frozenset((
            self.horizontal, self.vertical,
            self.top_left, self.top_right, self.bottom_left, self.bottom_right,
            self.cross,
        ))


LIGHT = GlyphSet("─", "│", "┌", "┐", "└", "┘", "┼")


def draw_board(canvas: Canvas, spec: BoardSpec = DEFAULT_BOARD, glyphs: GlyphSet = LIGHT) -> None:
    rect = compute_rect(canvas.width, canvas.height, spec)
    left, top, right, bottom = rect.left, rect.top, rect.right, rect.bottom

    # Outer frame
    for x in range(left + 1, right):
        canvas.set_cell(x, top, glyphs.horizontal)
        canvas.set_cell(x, bottom, glyphs.horizontal)
    for y in range(top + 1, bottom):
        canvas.set_cell(left, y, glyphs.vertical)
        canvas.set_cell(right, y, glyphs.vertical)
    canvas.set_cell(left, top, glyphs.top_left)
    canvas.set_cell(right, top, glyphs.top_right)
    canvas.set_cell(left, bottom, glyphs.bottom_left)
    canvas.set_cell(right, bottom, glyphs.bottom_right)

    # Interior gridlines, inset from the frame
    for r in range(1, spec.rows):
        y = top + r * spec.cell_height
        for x in range(left + 1, right):
            canvas.set_cell(x, y, glyphs.horizontal)
    for c in range(1, spec.columns):
        x = left + c * spec.cell_width
        for y in range(top + 1, bottom):
            canvas.set_cell(x, y, glyphs.vertical)

    # Intersections last
    for r in range(1, spec.rows):
        for c in range(1, spec.columns):
            canvas.set_cell(left + c * spec.cell_width, top + r * spec.cell_height, glyphs.cross)


def draw_marker(canvas: Canvas, col: int, row: int, spec: BoardSpec = DEFAULT_BOARD, glyph: str = "O") -> None:
    """Write the marker glyph at the middle of logical cell (col, row)."""
    rect = compute_rect(canvas.width, canvas.height, spec)
    x, y = cell_center(rect, col, row, spec)
    canvas.set_cell(x, y, glyph)
