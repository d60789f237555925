"""Tests for make_style -- theme selection and marker color."""

from __future__ import annotations

from ascii_board.config import Config
from ascii_board.styles import make_style


def _cfg(tmp_path, **ui) -> Config:
    cfg = Config(path=str(tmp_path / "cfg.json"))
    cfg.update({"ui": ui, "marker": {"color": "#ff0000"}})
    return cfg


def test_marker_color_and_bold(tmp_path) -> None:
    attrs = make_style(_cfg(tmp_path, theme="dark")).get_attrs_for_style_str("class:marker")
    assert attrs.color == "ff0000"
    assert attrs.bold


def test_light_theme(tmp_path) -> None:
    attrs = make_style(_cfg(tmp_path, theme="light")).get_attrs_for_style_str("class:board")
    assert attrs.color == "444444"


def test_auto_theme_reads_env(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("TERM_THEME", "light")
    attrs = make_style(_cfg(tmp_path, theme="auto")).get_attrs_for_style_str("class:board")
    assert attrs.color == "444444"
    monkeypatch.setenv("TERM_THEME", "")
    attrs = make_style(_cfg(tmp_path, theme="auto")).get_attrs_for_style_str("class:board")
    assert attrs.color == "bbbbbb"
