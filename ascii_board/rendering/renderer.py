#!/usr/bin/env python3
# ascii_board/rendering/renderer.py
"""
Per-tick rendering pipeline and glyph set registry.

- Common API: Renderer.render(canvas, col, row) -> text snapshot
- Glyph sets may be added via Renderer.register(name, glyphs)
- Unknown glyph set names fall back to the default set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from ascii_board.rendering.board import LIGHT, GlyphSet, draw_board, draw_marker
from ascii_board.rendering.canvas import Canvas
from ascii_board.rendering.geometry import BoardSpec, DEFAULT_BOARD

__all__ = [
    "Renderer",
    "default_glyph_sets",
]

# -------------------------
# Glyph sets
# -------------------------

def default_glyph_sets() -> Dict[str, GlyphSet]:
    return {
        "light": LIGHT,
        "heavy": GlyphSet("━", "┃", "┏", "┓", "┗", "┛", "╋"),
        "rounded": GlyphSet("─", "│", "╭", "╮", "╰", "╯", "┼"),
        "double": GlyphSet("═", "║", "╔", "╗", "╚", "╝", "╬"),
        "ascii": GlyphSet("-", "|", "+", "+", "+", "+", "+"),
    }

# -------------------------
# Pipeline
# -------------------------

@dataclass
class Renderer:
    """
    Draws one frame: clear, board, marker.
    Board parameters and the marker glyph are fixed for the renderer's life.
    """
    spec: BoardSpec = DEFAULT_BOARD
    marker: str = "O"
    glyph_set: str = "light"
    glyph_sets: Dict[str, GlyphSet] = field(default_factory=default_glyph_sets)
    default_glyph_set: str = "light"

    def register(self, name: str, glyphs: GlyphSet) -> None:
        self.glyph_sets[name] = glyphs

    def get_glyphs(self, name: Optional[str] = None) -> GlyphSet:
        name = name or self.glyph_set
        if name in self.glyph_sets:
            return self.glyph_sets[name]
        if self.default_glyph_set in self.glyph_sets:
            return self.glyph_sets[self.default_glyph_set]
        return LIGHT

    def render(self, canvas: Canvas, col: int, row: int) -> str:
        if not canvas.is_ready():
            return ""
        canvas.clear()
        draw_board(canvas, self.spec, self.get_glyphs())
        draw_marker(canvas, col, row, self.spec, self.marker)
        return canvas.render()
