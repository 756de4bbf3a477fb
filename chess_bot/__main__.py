"""
Main entry point for playing against the engine in a terminal.

Usage:
    python -m chess_bot
"""

import sys

from chess_bot.host.cli import main

if __name__ == "__main__":
    sys.exit(main())
