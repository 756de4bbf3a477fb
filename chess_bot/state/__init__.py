"""
Position State Module

Key Components:
    - GameState: the live board plus render change detection
    - InputGesture: a half-entered player move
    - PlayerInput: two-selection move entry on top of a GameState
"""

from chess_bot.state.game import GameState
from chess_bot.state.input import (
    InputGesture,
    PlayerInput,
    infer_promotion,
    parse_square,
    square_from_coordinates,
)

__all__ = [
    'GameState',
    'InputGesture',
    'PlayerInput',
    'infer_promotion',
    'parse_square',
    'square_from_coordinates',
]
