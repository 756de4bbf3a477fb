"""
Search Module

Fixed-depth minimax over the legal moves of a position.

Key Components:
    - find_best_move: Root search over the supplied moves, board untouched
    - choose_move: find_best_move, then apply the result to a GameState
    - minimax: Recursive scoring of a position to a given depth
    - SearchMode: full branching or the single-line variant
"""

from chess_bot.search.minimax import (
    SearchMode,
    SearchResult,
    choose_move,
    find_best_move,
    minimax,
)

__all__ = ['SearchMode', 'SearchResult', 'choose_move', 'find_best_move', 'minimax']
