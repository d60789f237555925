#!/usr/bin/env python3
# ascii_board/cli.py
"""
Entry point for ASCII Board TUI.
Loads configuration and runs AsciiBoardApp.
"""

import logging
import sys, os
from ascii_board.ui.app import AsciiBoardApp

log = logging.getLogger(__name__)

def main():
    if os.name == "nt" and not sys.stdout.isatty():
        print("No Windows console detected. Run from cmd, PowerShell, or Windows Terminal.")
        raise SystemExit(1)
    try:
        app = AsciiBoardApp()
        app.run()
    except Exception as exc:
        log.exception("Terminal event loop failed")
        print(f"terminal error: {exc}", file=sys.stderr)
        raise SystemExit(1)

if __name__ == "__main__":
    main()
