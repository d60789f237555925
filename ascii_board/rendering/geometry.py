#!/usr/bin/env python3
# ascii_board/rendering/geometry.py
"""
Board geometry for ASCII Board.
Maps the fixed logical grid onto a canvas of arbitrary size, centered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

__all__ = [
    "BoardSpec",
    "BoardRect",
    "DEFAULT_BOARD",
    "compute_rect",
    "cell_center",
]


@dataclass(frozen=True)
class BoardSpec:
    """Fixed board parameters: logical size and per-cell size in terminal cells."""
    columns: int = 7
    rows: int = 6
    cell_width: int = 9
    cell_height: int = 4

    @property
    def table_width(self) -> int:
        return self.columns * self.cell_width + 1

    @property
    def table_height(self) -> int:
        return self.rows * self.cell_height + 1

    @property
    def center(self) -> Tuple[int, int]:
        """Logical (col, row) of the middle cell."""
        return self.columns // 2, self.rows // 2


DEFAULT_BOARD = BoardSpec()


@dataclass(frozen=True)
class BoardRect:
    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top


def compute_rect(canvas_width: int, canvas_height: int, spec: BoardSpec = DEFAULT_BOARD) -> BoardRect:
    """
    Return the rectangle that centers the board on the canvas.
    Not clamped: left/top go negative when the board does not fit.
    """
    table_w = spec.table_width
    table_h = spec.table_height
    left = (canvas_width - table_w) // 2
    top = (canvas_height - table_h) // 2
    return BoardRect(left, top, left + table_w, top + table_h)


def cell_center(rect: BoardRect, col: int, row: int, spec: BoardSpec = DEFAULT_BOARD) -> Tuple[int, int]:
    """Canvas (x, y) of the middle of logical cell (col, row)."""
    x = rect.left + col * spec.cell_width + spec.cell_width // 2
    y = rect.top + row * spec.cell_height + spec.cell_height // 2
    return x, y
