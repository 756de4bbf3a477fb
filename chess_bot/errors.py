"""
Exception Hierarchy

All conditions raised by the engine core are recoverable. The host catches
them, logs them and carries on with the next tick.

    ChessBotError
    ├── IllegalMove               rules engine rejected a candidate move
    ├── EmptySearchSpace          search invoked with no legal moves
    └── MalformedSquareReference  coordinate or square name off the board
"""


class ChessBotError(Exception):
    """Base class for every error raised by chess_bot."""


class IllegalMove(ChessBotError):
    """
    A candidate move failed the rules engine's legality check.

    The position is left untouched when this is raised.
    """

    def __init__(self, move, fen: str):
        self.move = move
        self.fen = fen
        super().__init__(f"Illegal move {move} in position {fen}")


class EmptySearchSpace(ChessBotError, ValueError):
    """Search was asked to pick from an empty move list (game is over)."""


class MalformedSquareReference(ChessBotError, ValueError):
    """An input coordinate does not name a square on the 8x8 board."""
