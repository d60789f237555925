#!/usr/bin/env python3
# ascii_board/__main__.py
from ascii_board.cli import main

main()
