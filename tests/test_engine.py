"""Tests for BoardEngine -- resize, key and tick handling."""

from __future__ import annotations

import pytest

from ascii_board.actions import Command
from ascii_board.config import Config
from ascii_board.engine import BoardEngine
from ascii_board.rendering.geometry import compute_rect


@pytest.fixture
def engine() -> BoardEngine:
    return BoardEngine()


class TestLifecycle:
    def test_starts_uninitialized(self, engine: BoardEngine) -> None:
        assert not engine.is_ready()
        assert engine.on_tick() == ""
        assert engine.cursor.position == (3, 3)

    def test_first_resize_makes_ready(self, engine: BoardEngine) -> None:
        engine.on_resize(100, 40)
        assert engine.is_ready()
        frame = engine.on_tick()
        rows = frame.split("\n")
        assert len(rows) == 40
        assert all(len(row) == 100 for row in rows)
        assert engine.last_frame == frame

    def test_resize_to_zero(self, engine: BoardEngine) -> None:
        engine.on_resize(80, 24)
        engine.on_tick()
        engine.on_resize(0, 0)
        assert engine.canvas.render() == ""
        assert engine.last_frame == ""
        assert engine.on_tick() == ""
        # The tick does not resize on its own.
        assert not engine.is_ready()
        assert (engine.canvas.width, engine.canvas.height) == (0, 0)

    def test_small_canvas_still_renders_all_rows(self, engine: BoardEngine) -> None:
        engine.on_resize(80, 24)
        assert len(engine.on_tick().split("\n")) == 24


class TestKeys:
    def test_moves_show_up_on_next_tick(self, engine: BoardEngine) -> None:
        engine.on_resize(100, 40)
        engine.on_key(Command.RIGHT)
        engine.on_key(Command.UP)
        assert engine.cursor.position == (4, 2)
        engine.on_tick()
        rect = compute_rect(100, 40)
        x, y = rect.left + 4 * 9 + 4, rect.top + 2 * 4 + 2
        assert engine.canvas.get_cell(x, y) == "O"

    def test_string_commands(self, engine: BoardEngine) -> None:
        assert engine.on_key("left") is False
        assert engine.on_key("DOWN") is False
        assert engine.cursor.position == (2, 4)

    def test_quit(self, engine: BoardEngine) -> None:
        assert engine.on_key(Command.QUIT) is True
        assert engine.quit_requested

    def test_moves_after_quit_do_not_report_quit(self, engine: BoardEngine) -> None:
        engine.on_key(Command.QUIT)
        assert engine.on_key(Command.LEFT) is False
        assert engine.quit_requested
        assert engine.cursor.position == (2, 3)

    def test_unknown_command(self, engine: BoardEngine) -> None:
        with pytest.raises(ValueError):
            engine.on_key("jump")

    def test_keys_work_before_first_resize(self, engine: BoardEngine) -> None:
        engine.on_key(Command.LEFT)
        assert engine.cursor.position == (2, 3)


class TestFromConfig:
    def test_uses_board_marker_and_border(self, tmp_path) -> None:
        cfg = Config(path=str(tmp_path / "cfg.json"))
        cfg.update({
            "board": {"columns": 3, "rows": 3, "cell_width": 4, "cell_height": 2},
            "marker": {"glyph": "X"},
            "ui": {"border_style": "ascii"},
        })
        engine = BoardEngine.from_config(cfg)
        assert engine.cursor.position == (1, 1)
        engine.on_resize(20, 10)
        frame = engine.on_tick()
        assert frame.count("X") == 1
        assert "┼" not in frame
        assert "+" in frame
