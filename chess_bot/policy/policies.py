"""
Move Selection Policies

A policy picks the move for the side it controls and applies it to the
GameState. Exactly one policy is active per game, chosen by configuration:

    - EnginePolicy: fixed-depth search
    - RandomPolicy: uniform choice among the legal moves, no scoring
"""

import logging
import random
from abc import ABC, abstractmethod
from typing import List, Optional

import chess

from chess_bot.evaluation.base import Evaluator
from chess_bot.evaluation.positional import PositionalEvaluator
from chess_bot.search.minimax import SearchMode, choose_move
from chess_bot.state.game import GameState

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 3


class MovePolicy(ABC):
    """Picks and applies one move for the side to move."""

    name = "policy"

    @abstractmethod
    def play(self, state: GameState, legal_moves: List[chess.Move]) -> chess.Move:
        """
        Choose one of legal_moves and apply it to state.

        Args:
            state: Live game state
            legal_moves: Non-empty list of legal moves for the side to move

        Returns:
            The applied move
        """


class EnginePolicy(MovePolicy):
    """
    Moves chosen by search.

    Attributes:
        depth: Plies to look ahead
        evaluator: Position evaluation function
        mode: Search mode below the first ply
    """

    name = "engine"

    def __init__(
        self,
        depth: int = DEFAULT_DEPTH,
        evaluator: Optional[Evaluator] = None,
        mode: SearchMode = SearchMode.MINIMAX,
    ):
        if depth < 1:
            raise ValueError(f"depth must be at least 1, got {depth}")

        self.depth = depth
        self.evaluator = evaluator if evaluator else PositionalEvaluator()
        self.mode = mode

    def play(self, state: GameState, legal_moves: List[chess.Move]) -> chess.Move:
        return choose_move(state, legal_moves, self.depth, self.evaluator, self.mode)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(depth={self.depth}, mode={self.mode.value}, evaluator={self.evaluator!r})"


class RandomPolicy(MovePolicy):
    """Moves chosen uniformly at random."""

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def play(self, state: GameState, legal_moves: List[chess.Move]) -> chess.Move:
        move = self.rng.choice(legal_moves)
        state.apply(move)
        logger.info(f"Random move: {move}")
        return move

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
