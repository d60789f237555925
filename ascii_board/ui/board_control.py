#!/usr/bin/env python3
# ascii_board/ui/board_control.py
"""prompt_toolkit UIControl that presents the engine's latest frame."""

from __future__ import annotations

from typing import FrozenSet, List, Tuple

from prompt_toolkit.layout.controls import UIContent, UIControl
from prompt_toolkit.utils import get_cwidth

from ascii_board.engine import BoardEngine

StyleRun = Tuple[str, str]                # (style, text)
LineFrag = List[StyleRun]                 # one terminal row as runs


class BoardControl(UIControl):
    """
    Forward the window size to the engine and show the last tick's snapshot.
    prompt_toolkit calls create_content on every redraw with the current
    size, which makes it the resize notification for the engine.
    """

    def __init__(self, engine: BoardEngine):
        self.engine = engine
        self._size = None

    # -------- UIControl interface --------

    def is_focusable(self) -> bool:
        return True

    def preferred_width(self, max_available_width: int) -> int:
        return max_available_width

    def preferred_height(
        self,
        width: int,
        max_available_height: int,
        wrap_lines: bool,
        get_line_prefix,
    ) -> int:
        return max_available_height

    def create_content(self, width: int, height: int) -> UIContent:
        if (width, height) != self._size:
            self._size = (width, height)
            self.engine.on_resize(width, height)

        lines = self.engine.last_frame.split("\n") if self.engine.last_frame else []
        if len(lines) != height or any(get_cwidth(line) != width for line in lines):
            # Nothing drawn for this size yet; the next tick fills it in.
            return self._blank_content(width, height)

        glyphs = self.engine.renderer.get_glyphs().all()
        marker = self.engine.renderer.marker
        lines_frag = [self._to_fragments(line, glyphs, marker) for line in lines]
        return UIContent(
            get_line=lambda i: lines_frag[i] if 0 <= i < height else [("", " " * width)],
            line_count=height,
        )

    # -------- helpers --------

    @staticmethod
    def _blank_content(width: int, height: int) -> UIContent:
        empty_line = [("", " " * max(0, width))]
        return UIContent(
            get_line=lambda i: empty_line,
            line_count=max(0, height),
        )

    @staticmethod
    def _to_fragments(line: str, glyphs: FrozenSet[str], marker: str) -> LineFrag:
        """Split one row into style runs: board lines, marker, blank."""
        frags: LineFrag = []
        run_style = None
        run_text: List[str] = []
        for ch in line:
            if ch == marker:
                style = "class:marker"
            elif ch in glyphs:
                style = "class:board"
            else:
                style = ""
            if style != run_style and run_text:
                frags.append((run_style, "".join(run_text)))
                run_text = []
            run_style = style
            run_text.append(ch)
        if run_text:
            frags.append((run_style, "".join(run_text)))
        return frags or [("", "")]


__all__ = ["BoardControl"]
