#!/usr/bin/env python3
# ascii_board/config.py
"""
Config loader and defaults for the ASCII Board TUI.

Goals:
- Single JSON file per user.
- Safe atomic writes.
- Deep-merge of user config over defaults.
- Basic validation with sane fallbacks.

Board dimensions, frame rate and marker glyph are read once at startup and
stay fixed for the lifetime of the process.

Usage:
    from ascii_board.config import Config, DEFAULT_CONFIG
    cfg = Config.load()                 # ~/.config/ascii_board/ascii_board_tui.json
    spec = cfg.board_spec()
    fps = cfg["app"]["fps"]
"""

from __future__ import annotations

import copy
import json
import logging
import os
import platform
import re
import shutil
import tempfile
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from prompt_toolkit.utils import get_cwidth

from ascii_board.rendering.geometry import BoardSpec

log = logging.getLogger(__name__)

# ----------------------------
# Defaults
# ----------------------------

DEFAULT_CONFIG: Dict[str, Any] = {
    "app": {
        "title": "ASCII Board",
        "fps": 30,                        # redraw ticks per second
    },
    "board": {
        "columns": 7,
        "rows": 6,
        "cell_width": 9,                  # horizontal spacing in terminal columns
        "cell_height": 4,                 # vertical spacing in terminal rows
    },
    "marker": {
        "glyph": "O",                     # must occupy exactly one terminal column
        "color": "#ffff00",               # xterm 226
    },
    "ui": {
        "theme": "auto",                  # auto | light | dark
        "border_style": "light",          # light | heavy | rounded | double | ascii
    },
    "logging": {
        "level": "WARNING",
        "file": None,                     # path or None
        "rotate_bytes": 5 * 1024 * 1024,
        "rotate_keep": 3,
    },
}

BORDER_STYLES = ("light", "heavy", "rounded", "double", "ascii")

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")

# ----------------------------
# Helpers
# ----------------------------

def _os_config_home() -> str:
    """Return per-OS config base directory."""
    if platform.system() == "Windows":
        base = os.environ.get("APPDATA") or os.path.expanduser("~\\AppData\\Roaming")
        return os.path.join(base, "AsciiBoard")
    # macOS: ~/Library/Application Support/AsciiBoard
    if platform.system() == "Darwin":
        return os.path.join(os.path.expanduser("~/Library/Application Support"), "AsciiBoard")
    # Linux and others: ~/.config/ascii_board
    return os.path.join(os.path.expanduser("~/.config"), "ascii_board")

def _default_config_path() -> str:
    """Resolve default config path, honoring ASCII_BOARD_CONFIG env override."""
    env = os.environ.get("ASCII_BOARD_CONFIG")
    if env:
        return os.path.expanduser(env)
    return os.path.join(_os_config_home(), "ascii_board_tui.json")

def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """Return deep-merged copy of dicts: values in b override a."""
    out = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out

def _atomic_write_json(path: str, data: Dict[str, Any]) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=".tmp_cfg_", dir=os.path.dirname(path) or ".")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True)
            f.write("\n")
        os.replace(tmp, path)
    except Exception:
        # Clean temp on error
        try:
            os.remove(tmp)
        except OSError:
            pass
        raise

def _coerce_int(v: Any, default: int, minmax: Optional[Tuple[int, int]] = None) -> int:
    try:
        x = int(v)
    except (TypeError, ValueError):
        return int(default)
    if minmax:
        lo, hi = minmax
        if x < lo: x = lo
        if x > hi: x = hi
    return x

def _coerce_glyph(v: Any, default: str) -> str:
    """Accept a single code point that renders one terminal column wide."""
    if isinstance(v, str) and len(v) == 1 and get_cwidth(v) == 1:
        return v
    return default

# ----------------------------
# Validation
# ----------------------------

def _validate(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Return validated copy with fallbacks applied."""
    c = _deep_merge(copy.deepcopy(DEFAULT_CONFIG), cfg or {})

    # app
    a = c["app"]
    a["title"] = str(a.get("title") or DEFAULT_CONFIG["app"]["title"])
    a["fps"] = _coerce_int(a.get("fps"), DEFAULT_CONFIG["app"]["fps"], (1, 240))

    # board
    b = c["board"]
    b["columns"]     = _coerce_int(b.get("columns"), 7, (1, 64))
    b["rows"]        = _coerce_int(b.get("rows"), 6, (1, 64))
    b["cell_width"]  = _coerce_int(b.get("cell_width"), 9, (2, 32))
    b["cell_height"] = _coerce_int(b.get("cell_height"), 4, (2, 16))

    # marker
    m = c["marker"]
    m["glyph"] = _coerce_glyph(m.get("glyph"), DEFAULT_CONFIG["marker"]["glyph"])
    color = m.get("color")
    if not isinstance(color, str) or not _HEX_COLOR.match(color):
        m["color"] = DEFAULT_CONFIG["marker"]["color"]

    # ui
    ui = c["ui"]
    if ui.get("theme") not in ("auto", "light", "dark"):
        ui["theme"] = DEFAULT_CONFIG["ui"]["theme"]
    if ui.get("border_style") not in BORDER_STYLES:
        ui["border_style"] = DEFAULT_CONFIG["ui"]["border_style"]

    # logging
    lg = c["logging"]
    if lg.get("level") not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"):
        lg["level"] = DEFAULT_CONFIG["logging"]["level"]
    lf = lg.get("file")
    lg["file"] = str(lf) if lf else None
    lg["rotate_bytes"] = _coerce_int(lg.get("rotate_bytes"), DEFAULT_CONFIG["logging"]["rotate_bytes"], (256 * 1024, 50 * 1024 * 1024))
    lg["rotate_keep"]  = _coerce_int(lg.get("rotate_keep"), DEFAULT_CONFIG["logging"]["rotate_keep"], (0, 50))

    return c

# ----------------------------
# Public API
# ----------------------------

@dataclass
class Config:
    """Thin wrapper around a nested dict with load/merge."""
    data: Dict[str, Any] = field(default_factory=lambda: _validate(DEFAULT_CONFIG))
    path: str = field(default_factory=_default_config_path)

    # --- Mapping-style access
    def __getitem__(self, k: str) -> Any:
        return self.data[k]

    # --- Ops
    @classmethod
    def load(cls, path: Optional[str] = None, create_if_missing: bool = True) -> "Config":
        cfg_path = os.path.expanduser(path) if path else _default_config_path()
        if not os.path.exists(cfg_path):
            cfg = _validate(DEFAULT_CONFIG)
            if create_if_missing:
                _atomic_write_json(cfg_path, cfg)
            return cls(cfg, cfg_path)

        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                user_cfg = json.load(f)
            if not isinstance(user_cfg, dict):
                raise ValueError("top-level JSON value must be an object")
        except (OSError, ValueError):
            # Corrupt file. Backup and fall back to defaults.
            log.warning("Config %s is unreadable, using defaults", cfg_path)
            backup = cfg_path + ".corrupt.bak"
            try:
                shutil.copyfile(cfg_path, backup)
            except OSError:
                pass
            user_cfg = {}

        return cls(_validate(user_cfg), cfg_path)

    def update(self, partial: Dict[str, Any]) -> None:
        """Deep-merge a partial config then validate."""
        merged = _deep_merge(self.data, partial)
        self.data = _validate(merged)

    # Convenience getters
    def board_spec(self) -> BoardSpec:
        b = self.data["board"]
        return BoardSpec(b["columns"], b["rows"], b["cell_width"], b["cell_height"])

    @property
    def marker_glyph(self) -> str:
        return self.data["marker"]["glyph"]

    @property
    def fps(self) -> int:
        return self.data["app"]["fps"]


__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "BORDER_STYLES",
    "_default_config_path",
]
