"""
Board Representation Module

Conversions between python-chess boards, FEN placement text, occupant grids
and occupancy tensors.

Key Components:
    - Occupant: closed (piece kind, side) enumeration with FEN letters
    - parse_placement / board_to_grid: FEN text and boards to an 8x8 grid
    - board_to_tensor: 12-channel occupancy tensor (12-8-8)

Data Flow:
    chess.Board → board_fen() → parse_placement() → grid → renderer
    chess.Board → board_to_tensor() → (12, 8, 8) numpy array → evaluator
"""

from chess_bot.board.representation import (
    Occupant,
    OccupantGrid,
    board_to_grid,
    board_to_tensor,
    parse_placement,
    square_to_coordinates,
    swap_colors,
)

__all__ = [
    'Occupant',
    'OccupantGrid',
    'board_to_grid',
    'board_to_tensor',
    'parse_placement',
    'square_to_coordinates',
    'swap_colors',
]
