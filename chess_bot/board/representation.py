"""
Board Representation

This module converts between python-chess Board objects, FEN placement text
and the two array layouts the rest of the engine works with.

Occupant Enumeration:
    Every (piece kind, side) pair is a member of the closed Occupant enum.
    Each member carries its FEN letter, so the character mapping is total in
    both directions:

        Occupant.WHITE_KNIGHT.symbol  -> "N"
        Occupant.from_symbol("n")     -> Occupant.BLACK_KNIGHT

Occupant Grid:
    An 8x8 list of rows holding Optional[Occupant]. This is what the
    rendering side reconstructs from FEN whenever the position changes.

12-Channel Occupancy Tensor:
    0: White Pawns      6: Black Pawns
    1: White Knights    7: Black Knights
    2: White Bishops    8: Black Bishops
    3: White Rooks      9: Black Rooks
    4: White Queens    10: Black Queens
    5: White Kings     11: Black Kings

Board Orientation (grid and tensor):
    - Row 0 = Rank 8 (Black's back rank)
    - Row 7 = Rank 1 (White's back rank)
    - Column 0 = A-file
    - Column 7 = H-file
"""

from enum import Enum
from typing import List, Optional, Tuple

import chess
import numpy as np

OccupantGrid = List[List[Optional["Occupant"]]]


class Occupant(Enum):
    """A piece kind on a given side. Declaration order is the channel order."""

    WHITE_PAWN = (chess.PAWN, chess.WHITE)
    WHITE_KNIGHT = (chess.KNIGHT, chess.WHITE)
    WHITE_BISHOP = (chess.BISHOP, chess.WHITE)
    WHITE_ROOK = (chess.ROOK, chess.WHITE)
    WHITE_QUEEN = (chess.QUEEN, chess.WHITE)
    WHITE_KING = (chess.KING, chess.WHITE)
    BLACK_PAWN = (chess.PAWN, chess.BLACK)
    BLACK_KNIGHT = (chess.KNIGHT, chess.BLACK)
    BLACK_BISHOP = (chess.BISHOP, chess.BLACK)
    BLACK_ROOK = (chess.ROOK, chess.BLACK)
    BLACK_QUEEN = (chess.QUEEN, chess.BLACK)
    BLACK_KING = (chess.KING, chess.BLACK)

    @property
    def piece_type(self) -> chess.PieceType:
        return self.value[0]

    @property
    def color(self) -> chess.Color:
        return self.value[1]

    @property
    def symbol(self) -> str:
        """FEN letter: uppercase for White, lowercase for Black."""
        return chess.Piece(self.piece_type, self.color).symbol()

    @property
    def channel(self) -> int:
        return PIECE_TO_CHANNEL[self.value]

    def swapped(self) -> "Occupant":
        """Same piece kind, other side."""
        return Occupant((self.piece_type, not self.color))

    @classmethod
    def from_piece(cls, piece: chess.Piece) -> "Occupant":
        return cls((piece.piece_type, piece.color))

    @classmethod
    def from_symbol(cls, symbol: str) -> "Occupant":
        """
        Look up the occupant for a FEN letter.

        Raises:
            ValueError: If the letter is not one of PNBRQK/pnbrqk
        """
        try:
            return _SYMBOL_TO_OCCUPANT[symbol]
        except KeyError:
            raise ValueError(f"Unknown piece symbol: {symbol!r}") from None


# Piece type to channel index mapping
# White pieces: channels 0-5
# Black pieces: channels 6-11
PIECE_TO_CHANNEL = {member.value: index for index, member in enumerate(Occupant)}

_SYMBOL_TO_OCCUPANT = {member.symbol: member for member in Occupant}

EMPTY_RUN_DIGITS = "12345678"


def square_to_coordinates(square: chess.Square) -> Tuple[int, int]:
    """
    Convert python-chess square index to (row, column) coordinates.

    Args:
        square: Square index (0-63) where 0=A1, 63=H8

    Returns:
        Tuple of (row, col) where row 0 = rank 8 and col 0 = A-file
    """
    rank = chess.square_rank(square)
    file = chess.square_file(square)
    return 7 - rank, file


def empty_grid() -> OccupantGrid:
    return [[None] * 8 for _ in range(8)]


def board_to_grid(board: chess.Board) -> OccupantGrid:
    """Build the occupant grid for an in-memory board."""
    grid = empty_grid()
    for square, piece in board.piece_map().items():
        row, col = square_to_coordinates(square)
        grid[row][col] = Occupant.from_piece(piece)
    return grid


def parse_placement(fen: str) -> OccupantGrid:
    """
    Parse the piece placement field of a FEN string into an occupant grid.

    Accepts either a full FEN or only its first field. Ranks are separated
    by "/", pieces are single letters and digits 1-8 count empty squares.

    Args:
        fen: FEN text, e.g. "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"

    Returns:
        8x8 grid, row 0 = rank 8

    Raises:
        ValueError: If the placement is not exactly 8 ranks of 8 squares
    """
    fields = fen.split()
    if not fields:
        raise ValueError("Empty FEN")

    ranks = fields[0].split("/")
    if len(ranks) != 8:
        raise ValueError(f"Expected 8 ranks in placement, got {len(ranks)}: {fields[0]}")

    grid = empty_grid()
    for row, rank_text in enumerate(ranks):
        col = 0
        for char in rank_text:
            if char in EMPTY_RUN_DIGITS:
                col += int(char)
                continue
            if col >= 8:
                raise ValueError(f"Rank {8 - row} overflows the board: {rank_text}")
            grid[row][col] = Occupant.from_symbol(char)
            col += 1
        if col != 8:
            raise ValueError(f"Rank {8 - row} does not cover 8 squares: {rank_text}")

    return grid


def swap_colors(board: chess.Board) -> chess.Board:
    """
    Swap every piece's side without moving it, and flip the side to move.

    Unlike chess.Board.mirror() the pieces stay on their squares. Castling
    rights and en passant are dropped since they no longer make sense.
    """
    swapped = chess.Board(fen=None)
    for square, piece in board.piece_map().items():
        swapped.set_piece_at(square, chess.Piece(piece.piece_type, not piece.color))
    swapped.turn = not board.turn
    return swapped


def board_to_tensor(board: chess.Board, dtype=np.float32) -> np.ndarray:
    """
    Convert a chess board to a 12-channel occupancy tensor.

    Args:
        board: python-chess Board object
        dtype: numpy dtype of the result (float32 by default)

    Returns:
        numpy array of shape (12, 8, 8); 1 where a piece exists, 0 elsewhere
    """
    tensor = np.zeros((12, 8, 8), dtype=dtype)

    for square, piece in board.piece_map().items():
        channel = PIECE_TO_CHANNEL[(piece.piece_type, piece.color)]
        row, col = square_to_coordinates(square)
        tensor[channel, row, col] = 1

    return tensor
