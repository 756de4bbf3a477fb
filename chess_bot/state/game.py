"""
Position State

GameState owns the live board for the whole process. It is created once by
the host and passed explicitly to every per-tick operation (decision cycle,
player input, rendering) rather than living in a global.

Rendering reads the position through take_render_update(), which hands out
the FEN placement only when it differs from what was rendered last.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import chess

from chess_bot.errors import IllegalMove

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """
    The current position and the last position handed to the renderer.

    Attributes:
        board: Live position (rules engine board, side to move included)
        rendered_placement: FEN placement last returned by
            take_render_update(), None before the first render
    """

    board: chess.Board = field(default_factory=chess.Board)
    rendered_placement: Optional[str] = None

    @classmethod
    def from_fen(cls, fen: str) -> "GameState":
        """
        Raises:
            ValueError: If the FEN is rejected by python-chess
        """
        return cls(board=chess.Board(fen))

    def side_to_move(self) -> chess.Color:
        return self.board.turn

    def legal_moves(self) -> List[chess.Move]:
        return list(self.board.legal_moves)

    def is_legal(self, move: chess.Move) -> bool:
        return self.board.is_legal(move)

    def is_game_over(self) -> bool:
        return self.board.is_game_over()

    def result(self) -> str:
        return self.board.result()

    def apply(self, move: chess.Move) -> None:
        """
        Apply a move that the rules engine accepts.

        Raises:
            IllegalMove: If the move is not legal here; the board is unchanged
        """
        if not self.board.is_legal(move):
            raise IllegalMove(move, self.board.fen())

        self.board.push(move)
        logger.debug(f"Applied {move}, position now {self.board.fen()}")

    def fen(self) -> str:
        return self.board.fen()

    def placement(self) -> str:
        """Piece placement field of the FEN (what the renderer draws)."""
        return self.board.board_fen()

    def take_render_update(self) -> Optional[str]:
        """
        Return the placement if it changed since the last call, else None.

        The returned placement is recorded as rendered.
        """
        placement = self.placement()
        if placement == self.rendered_placement:
            return None
        self.rendered_placement = placement
        return placement
