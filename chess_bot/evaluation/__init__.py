"""
Evaluation Module

Position evaluation for the engine. Evaluators are SWAPPABLE: search works
with anything implementing the Evaluator interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - PositionalEvaluator: Piece-square table evaluation

Data Flow:
    chess.Board → evaluator.evaluate() → int
                                         Positive = White advantage
                                         Negative = Black advantage
"""

from chess_bot.evaluation.base import MATE_SCORE, Evaluator
from chess_bot.evaluation.positional import PIECE_TABLES, PositionalEvaluator

__all__ = ['Evaluator', 'MATE_SCORE', 'PIECE_TABLES', 'PositionalEvaluator']
