"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
Search only talks to this interface, so evaluators can be swapped without
touching the search code.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() always returns an integer score from White's perspective
    3. Positive = White advantage, Negative = Black advantage
    4. Checkmate positions score ±MATE_SCORE via evaluate_terminal()
"""

from abc import ABC, abstractmethod
from typing import Optional

import chess

MATE_SCORE = 50000  # Far outside anything the positional tables can sum to


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    Methods:
        evaluate(board): Returns the static score of a position
        evaluate_terminal(board): Scores positions without legal moves
    """

    @abstractmethod
    def evaluate(self, board: chess.Board) -> int:
        """
        Evaluate a chess position from White's perspective.

        Args:
            board: python-chess Board object to evaluate (not modified)

        Returns:
            int: Positive favors White, negative favors Black
        """

    def is_draw(self, board: chess.Board) -> bool:
        """
        Check if a position is drawn on the board itself: stalemate or
        insufficient material. Draws that must be claimed are not counted.
        """
        return board.is_stalemate() or board.is_insufficient_material()

    def evaluate_terminal(self, board: chess.Board, ply_from_root: int = 0) -> Optional[int]:
        """
        Evaluate terminal positions (checkmate, stalemate, draw).

        Args:
            board: python-chess Board object
            ply_from_root: Distance from root, so that faster mates score higher

        Returns:
            int: Evaluation if terminal position
            None: If position is not terminal
        """
        if board.is_checkmate():
            if board.turn == chess.WHITE:
                return -(MATE_SCORE - ply_from_root)  # White is mated
            return MATE_SCORE - ply_from_root  # Black is mated

        if self.is_draw(board):
            return 0

        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
