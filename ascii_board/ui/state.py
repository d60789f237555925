#!/usr/bin/env python3
# ascii_board/ui/state.py
"""Cursor position on the logical board."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from ascii_board.rendering.geometry import BoardSpec, DEFAULT_BOARD


def _clamp(v: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, v))


@dataclass
class CursorState:
    spec: BoardSpec = DEFAULT_BOARD

    col: int = field(init=False)
    row: int = field(init=False)

    def __post_init__(self):
        self.col, self.row = self.spec.center

    @property
    def position(self) -> Tuple[int, int]:
        return self.col, self.row

    # ------------- moves -------------

    def move(self, dx: int, dy: int) -> None:
        """Shift by (dx, dy), clamped to the board. Never wraps."""
        self.col = _clamp(self.col + dx, 0, self.spec.columns - 1)
        self.row = _clamp(self.row + dy, 0, self.spec.rows - 1)

    def move_up(self) -> None:
        self.move(0, -1)

    def move_down(self) -> None:
        self.move(0, 1)

    def move_left(self) -> None:
        self.move(-1, 0)

    def move_right(self) -> None:
        self.move(1, 0)
