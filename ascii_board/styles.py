#!/usr/bin/env python3
# ascii_board/styles.py
"""
Style definitions for the ASCII Board TUI.
Provides light, dark, and auto themes for prompt_toolkit.
"""

import os

from prompt_toolkit.styles import Style
from ascii_board.config import Config

def make_style(cfg: Config) -> Style:
    theme = cfg["ui"].get("theme", "auto")
    marker = f"fg:{cfg['marker']['color']} bold"

    base_dark = {
        "board": "fg:#bbbbbb",
        "marker": marker,
    }
    base_light = {
        "board": "fg:#444444",
        "marker": marker,
    }

    if theme == "light":
        return Style.from_dict(base_light)
    if theme == "dark":
        return Style.from_dict(base_dark)

    # Auto-detect via environment
    if os.getenv("TERM_THEME", "").lower() == "light":
        return Style.from_dict(base_light)

    return Style.from_dict(base_dark)
