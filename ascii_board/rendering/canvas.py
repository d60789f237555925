#!/usr/bin/env python3
# ascii_board/rendering/canvas.py
"""
Character framebuffer for one full-screen redraw.

The cells live in a flat numpy array addressed as ``y * stride + x``.
Writes outside the canvas are dropped inside ``set_cell`` so drawing code
can run its geometry unconditionally, even for boards larger than the
terminal. Each cell holds a whole glyph string (combining sequences
included); empty glyphs are ignored so every row stays ``width`` cells wide.
A canvas sized to zero (or less) in either direction is "not
ready": it holds no cells and every operation becomes a no-op.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

BLANK = " "

__all__ = ["Canvas", "BLANK"]


class Canvas:
    """Flat grid of single-glyph cells with width/height."""

    def __init__(self, width: int = 0, height: int = 0):
        self._stride = 0
        self._cells = np.empty(0, dtype=object)
        self.initialize(width, height)

    def initialize(self, width: int, height: int) -> None:
        """Reallocate to ``width * height`` blank cells."""
        if width <= 0 or height <= 0:
            self._stride = 0
            self._cells = np.empty(0, dtype=object)
            return
        self._stride = int(width)
        self._cells = np.full(int(width) * int(height), BLANK, dtype=object)

    def clear(self) -> None:
        self._cells.fill(BLANK)

    # ------------- queries -------------

    @property
    def width(self) -> int:
        return self._stride

    @property
    def height(self) -> int:
        if self._stride == 0:
            return 0
        return self._cells.size // self._stride

    def is_ready(self) -> bool:
        return self._stride > 0 and self._cells.size > 0

    # ------------- cell access -------------

    def set_cell(self, x: int, y: int, glyph: str) -> None:
        if not glyph:
            return
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return
        self._cells[y * self._stride + x] = glyph

    def get_cell(self, x: int, y: int) -> Optional[str]:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        return self._cells[y * self._stride + x]

    # ------------- output -------------

    def render(self) -> str:
        """Return rows joined by newlines, or an empty string when not ready."""
        if not self.is_ready():
            return ""
        rows = self._cells.reshape(self.height, self._stride).tolist()
        return "\n".join("".join(row) for row in rows)

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"
