"""
Player Input Boundary

A player move arrives as two square selections: origin first, destination
second. Between the two the half-entered move lives in an InputGesture,
kept apart from GameState since it belongs to the input side and is reset
after every attempt.

Squares are validated before any Move is built; bad references raise
MalformedSquareReference. Illegal moves are dropped without touching the
board.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import chess

from chess_bot.errors import MalformedSquareReference
from chess_bot.state.game import GameState

logger = logging.getLogger(__name__)


def square_from_coordinates(file: int, rank: int) -> chess.Square:
    """
    Convert 1-based board coordinates to a square.

    Args:
        file: 1 (a-file) to 8 (h-file)
        rank: 1 to 8

    Raises:
        MalformedSquareReference: If either coordinate is off the board
    """
    if not (1 <= file <= 8 and 1 <= rank <= 8):
        raise MalformedSquareReference(f"Coordinates ({file}, {rank}) are off the board")
    return chess.square(file - 1, rank - 1)


def parse_square(text: str) -> chess.Square:
    """
    Parse an algebraic square name such as "e4".

    Raises:
        MalformedSquareReference: If the text is not a square name
    """
    name = text.strip().lower()
    try:
        return chess.parse_square(name)
    except ValueError:
        raise MalformedSquareReference(f"Not a square: {text!r}") from None


def infer_promotion(
    board: chess.Board, origin: chess.Square, destination: chess.Square
) -> Optional[chess.PieceType]:
    """Queen if a pawn of the side to move is heading for its far rank."""
    piece = board.piece_at(origin)
    if piece is None or piece.piece_type != chess.PAWN or piece.color != board.turn:
        return None

    far_rank = 7 if piece.color == chess.WHITE else 0
    if chess.square_rank(destination) == far_rank:
        return chess.QUEEN
    return None


@dataclass
class InputGesture:
    """A move that is half entered, waiting for its destination square."""

    pending_origin_square: Optional[chess.Square] = None
    awaiting_destination: bool = False

    def begin(self, square: chess.Square) -> None:
        self.pending_origin_square = square
        self.awaiting_destination = True

    def reset(self) -> None:
        self.pending_origin_square = None
        self.awaiting_destination = False


class PlayerInput:
    """
    Turns square selections into moves on a GameState.

    Attributes:
        gesture: The current half-entered move
    """

    def __init__(self, gesture: Optional[InputGesture] = None):
        self.gesture = gesture if gesture is not None else InputGesture()

    def select(self, state: GameState, square: chess.Square) -> Optional[chess.Move]:
        """
        Feed one square selection.

        The first selection records the origin. The second builds the move
        (promoting to a queen on the far rank), applies it if legal and
        resets the gesture either way.

        Returns:
            The applied move, or None if nothing was applied
        """
        if not self.gesture.awaiting_destination:
            self.gesture.begin(square)
            logger.debug(f"Origin selected: {chess.square_name(square)}")
            return None

        origin = self.gesture.pending_origin_square
        self.gesture.reset()

        promotion = infer_promotion(state.board, origin, square)
        move = chess.Move(origin, square, promotion=promotion)

        if not state.is_legal(move):
            logger.debug(f"Illegal move discarded: {move}")
            return None

        state.apply(move)
        logger.info(f"Player move: {move}")
        return move

    def select_name(self, state: GameState, text: str) -> Optional[chess.Move]:
        """
        Like select(), with the square given by name.

        Raises:
            MalformedSquareReference: If text is not a square; the gesture
                is left as it was
        """
        return self.select(state, parse_square(text))
