#!/usr/bin/env python3
# ascii_board/ui/app.py
"""Compose the prompt_toolkit application for the board viewer."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import Layout, Window

from ascii_board.actions import KEY_BINDINGS, Command
from ascii_board.config import Config
from ascii_board.engine import BoardEngine
from ascii_board.logging_conf import setup_logging
from ascii_board.styles import make_style
from ascii_board.ui.board_control import BoardControl
from ascii_board.version import version_info

log = logging.getLogger(__name__)


class AsciiBoardApp:
    def __init__(self, cfg: Optional[Config] = None):
        self.cfg = cfg or Config.load()
        setup_logging(self.cfg)
        self.engine = BoardEngine.from_config(self.cfg)
        self.board_control = BoardControl(self.engine)

        # Single full-screen window; the board is centered inside the canvas.
        self.board_window = Window(
            content=self.board_control,
            dont_extend_width=False,
            wrap_lines=False,
        )

        self.kb = self._build_key_bindings()
        self.app = Application(
            layout=Layout(self.board_window, focused_element=self.board_window),
            key_bindings=self.kb,
            full_screen=True,
            style=make_style(self.cfg),
        )

    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        def bind(command: Command):
            def _(event):
                if self.engine.on_key(command):
                    event.app.exit()
            return _

        for command, keys in KEY_BINDINGS.items():
            handler = bind(command)
            for key in keys:
                kb.add(key)(handler)

        return kb

    async def _tick_loop(self) -> None:
        """Redraw at the configured frame rate until the app exits."""
        period = 1.0 / self.cfg.fps
        while True:
            self.engine.on_tick()
            self.app.invalidate()
            await asyncio.sleep(period)

    def _start_ticks(self) -> None:
        self.app.create_background_task(self._tick_loop())

    def run(self) -> None:
        log.info("Starting %s (%s) at %d fps", self.cfg["app"]["title"], version_info(), self.cfg.fps)
        try:
            self.app.run(pre_run=self._start_ticks)
        finally:
            log.info("Stopped")
