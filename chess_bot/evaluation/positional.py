"""
Piece-Square Table Evaluation

The only scoring term is positional: each piece contributes the weight of
the square it stands on in its kind's table. There is no separate material
count; a piece's worth shows up only through the magnitude of its table.

Tables are written from White's perspective (row 0 = rank 8, row 7 = rank 1,
column 0 = a-file). Black's weight for a square is read from the vertically
mirrored table, so a black pawn on e7 scores like a white pawn on e2.
Constructing the evaluator with mirror_black=False makes Black read White's
table unflipped instead.

Reference:
    Simplified Evaluation Function
    https://www.chessprogramming.org/Simplified_Evaluation_Function
"""

import chess
import numpy as np

from chess_bot.board.representation import board_to_tensor
from chess_bot.evaluation.base import Evaluator

# fmt: off
PAWN_TABLE = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],  # Rank 8 (promotion)
    [ 50,  50,  50,  50,  50,  50,  50,  50],  # Rank 7
    [ 10,  10,  20,  30,  30,  20,  10,  10],  # Rank 6
    [  5,   5,  10,  25,  25,  10,   5,   5],  # Rank 5
    [  0,   0,   0,  20,  20,   0,   0,   0],  # Rank 4
    [  5,  -5, -10,   0,   0, -10,  -5,   5],  # Rank 3
    [  5,  10,  10, -20, -20,  10,  10,   5],  # Rank 2
    [  0,   0,   0,   0,   0,   0,   0,   0],  # Rank 1
], dtype=np.int32)

# Knights on the rim are dim
KNIGHT_TABLE = np.array([
    [-50, -40, -30, -30, -30, -30, -40, -50],
    [-40, -20,   0,   0,   0,   0, -20, -40],
    [-30,   0,  10,  15,  15,  10,   0, -30],
    [-30,   5,  15,  20,  20,  15,   5, -30],
    [-30,   0,  15,  20,  20,  15,   0, -30],
    [-30,   5,  10,  15,  15,  10,   5, -30],
    [-40, -20,   0,   5,   5,   0, -20, -40],
    [-50, -40, -30, -30, -30, -30, -40, -50],
], dtype=np.int32)

BISHOP_TABLE = np.array([
    [-20, -10, -10, -10, -10, -10, -10, -20],
    [-10,   0,   0,   0,   0,   0,   0, -10],
    [-10,   0,   5,  10,  10,   5,   0, -10],
    [-10,   5,   5,  10,  10,   5,   5, -10],
    [-10,   0,  10,  10,  10,  10,   0, -10],
    [-10,  10,  10,  10,  10,  10,  10, -10],
    [-10,   5,   0,   0,   0,   0,   5, -10],
    [-20, -10, -10, -10, -10, -10, -10, -20],
], dtype=np.int32)

ROOK_TABLE = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  5,  10,  10,  10,  10,  10,  10,   5],
    [ -5,   0,   0,   0,   0,   0,   0,  -5],
    [ -5,   0,   0,   0,   0,   0,   0,  -5],
    [ -5,   0,   0,   0,   0,   0,   0,  -5],
    [ -5,   0,   0,   0,   0,   0,   0,  -5],
    [ -5,   0,   0,   0,   0,   0,   0,  -5],
    [  0,   0,   0,   5,   5,   0,   0,   0],
], dtype=np.int32)

QUEEN_TABLE = np.array([
    [-20, -10, -10,  -5,  -5, -10, -10, -20],
    [-10,   0,   0,   0,   0,   0,   0, -10],
    [-10,   0,   5,   5,   5,   5,   0, -10],
    [ -5,   0,   5,   5,   5,   5,   0,  -5],
    [  0,   0,   5,   5,   5,   5,   0,  -5],
    [-10,   5,   5,   5,   5,   5,   0, -10],
    [-10,   0,   5,   0,   0,   0,   0, -10],
    [-20, -10, -10,  -5,  -5, -10, -10, -20],
], dtype=np.int32)

# Stay behind the pawn shield, prefer the castled corners
KING_TABLE = np.array([
    [-30, -40, -40, -50, -50, -40, -40, -30],
    [-30, -40, -40, -50, -50, -40, -40, -30],
    [-30, -40, -40, -50, -50, -40, -40, -30],
    [-30, -40, -40, -50, -50, -40, -40, -30],
    [-20, -30, -30, -40, -40, -30, -30, -20],
    [-10, -20, -20, -20, -20, -20, -20, -10],
    [ 20,  20,   0,   0,   0,   0,  20,  20],
    [ 20,  30,  10,   0,   0,  10,  30,  20],
], dtype=np.int32)
# fmt: on

PIECE_TABLES = {
    chess.PAWN: PAWN_TABLE,
    chess.KNIGHT: KNIGHT_TABLE,
    chess.BISHOP: BISHOP_TABLE,
    chess.ROOK: ROOK_TABLE,
    chess.QUEEN: QUEEN_TABLE,
    chess.KING: KING_TABLE,
}


class PositionalEvaluator(Evaluator):
    """
    Evaluation from piece-square tables only.

    Attributes:
        piece_tables: Dictionary mapping piece types to White's tables
        mirror_black: If True, Black reads each table flipped vertically
    """

    def __init__(self, mirror_black: bool = True):
        self.piece_tables = PIECE_TABLES
        self.mirror_black = mirror_black

        # Stacked in channel order (pawn..king) to line up with board_to_tensor()
        self._white_weights = np.stack(
            [self.piece_tables[piece_type] for piece_type in chess.PIECE_TYPES]
        )
        if mirror_black:
            self._black_weights = self._white_weights[:, ::-1, :]
        else:
            self._black_weights = self._white_weights

    def square_weight(self, piece: chess.Piece, square: chess.Square) -> int:
        """Table weight for a single piece on a square, before the side's sign."""
        table = self.piece_tables[piece.piece_type]
        rank = chess.square_rank(square)
        file = chess.square_file(square)
        row = 7 - rank

        if piece.color == chess.BLACK and self.mirror_black:
            row = rank

        return int(table[row, file])

    def evaluate(self, board: chess.Board) -> int:
        """
        Sum White's square weights and subtract Black's.

        Args:
            board: Chess board to evaluate

        Returns:
            int: Score from White's perspective
        """
        tensor = board_to_tensor(board, dtype=np.int32)
        white = int(np.sum(tensor[:6] * self._white_weights))
        black = int(np.sum(tensor[6:] * self._black_weights))
        return white - black

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(mirror_black={self.mirror_black})"
