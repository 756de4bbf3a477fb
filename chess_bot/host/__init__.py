"""
Host Module

Terminal front end: the tick-driven game loop, a text board renderer and
the command line entry point.
"""

from chess_bot.host.loop import GameLoop, TextRenderer, setup_logger

__all__ = ['GameLoop', 'TextRenderer', 'setup_logger']
