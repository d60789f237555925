#!/usr/bin/env python3
# ascii_board/engine.py
"""
Event handlers between the frame driver and the drawing core.

The driver calls on_resize, on_key and on_tick one at a time, in arrival
order. Nothing here blocks or schedules work; the next tick is always the
driver's job.
"""

from __future__ import annotations

import logging
from typing import Optional

from ascii_board.actions import Command, parse_command
from ascii_board.config import Config
from ascii_board.rendering.canvas import Canvas
from ascii_board.rendering.geometry import BoardSpec, DEFAULT_BOARD
from ascii_board.rendering.renderer import Renderer
from ascii_board.ui.state import CursorState

log = logging.getLogger(__name__)


class BoardEngine:
    def __init__(self, renderer: Optional[Renderer] = None, spec: BoardSpec = DEFAULT_BOARD):
        self.renderer = renderer or Renderer(spec=spec)
        self.canvas = Canvas()
        self.cursor = CursorState(self.renderer.spec)
        self.last_frame = ""
        self.quit_requested = False

    @classmethod
    def from_config(cls, cfg: Config) -> "BoardEngine":
        renderer = Renderer(
            spec=cfg.board_spec(),
            marker=cfg.marker_glyph,
            glyph_set=cfg["ui"]["border_style"],
        )
        return cls(renderer)

    @property
    def spec(self) -> BoardSpec:
        return self.renderer.spec

    def is_ready(self) -> bool:
        return self.canvas.is_ready()

    # ------------- events -------------

    def on_resize(self, width: int, height: int) -> None:
        log.debug("Resize to %dx%d", width, height)
        self.canvas.initialize(width, height)
        if not self.canvas.is_ready():
            self.last_frame = ""

    def on_key(self, command) -> bool:
        """Apply a command. Returns True when the command asks to quit."""
        command = parse_command(command)
        if command is Command.QUIT:
            log.info("Quit requested")
            self.quit_requested = True
        elif command is Command.UP:
            self.cursor.move_up()
        elif command is Command.DOWN:
            self.cursor.move_down()
        elif command is Command.LEFT:
            self.cursor.move_left()
        elif command is Command.RIGHT:
            self.cursor.move_right()
        return command is Command.QUIT

    def on_tick(self) -> str:
        """Redraw and return the text snapshot ("" while the canvas is not ready)."""
        if not self.canvas.is_ready():
            return ""
        self.last_frame = self.renderer.render(self.canvas, self.cursor.col, self.cursor.row)
        return self.last_frame
