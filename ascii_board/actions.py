#!/usr/bin/env python3
# ascii_board/actions.py
"""
Commands the key bindings can issue, and the keys bound to each.
Each command either moves the cursor or ends the program.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Command(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"


# prompt_toolkit key names per command.
KEY_BINDINGS: Dict[Command, Tuple[str, ...]] = {
    Command.UP: ("up", "w"),
    Command.DOWN: ("down", "s"),
    Command.LEFT: ("left", "a"),
    Command.RIGHT: ("right", "d"),
    Command.QUIT: ("q", "c-c"),
}


def parse_command(value) -> Command:
    """Accept a Command or its string value; raise ValueError otherwise."""
    if isinstance(value, Command):
        return value
    return Command(str(value).lower())
