"""
Text Game Host

Drives a game from the terminal. Each tick runs, in order:

    render   - redraw the board if the position changed
    engine   - one decision cycle for the engine side
    player   - on the player's turn, read square selections from input

Everything runs synchronously on one thread; a search started in a tick
finishes before the tick returns.
"""

import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

import chess

from chess_bot.board.representation import parse_placement
from chess_bot.errors import ChessBotError, MalformedSquareReference
from chess_bot.policy.cycle import DecisionCycle
from chess_bot.state.game import GameState
from chess_bot.state.input import PlayerInput

logger = logging.getLogger(__name__)


def setup_logger(level: str = "INFO", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Configure the chess_bot logger.

    Args:
        level: Logging level name
        log_file: Write to this file instead of stderr

    Returns:
        Configured logger instance
    """
    root = logging.getLogger("chess_bot")
    root.setLevel(getattr(logging, level.upper()))

    root.handlers.clear()

    if log_file is not None:
        handler = logging.FileHandler(log_file, mode='w')
    else:
        handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)

    return root


class TextRenderer:
    """Draws the board from FEN placement text, White at the bottom."""

    def __init__(self, out: Optional[TextIO] = None):
        self.out = out if out is not None else sys.stdout

    def render(self, placement: str) -> None:
        grid = parse_placement(placement)
        for row, occupants in enumerate(grid):
            squares = " ".join(o.symbol if o is not None else "." for o in occupants)
            print(f"{8 - row} {squares}", file=self.out)
        print("  a b c d e f g h", file=self.out)
        self.out.flush()

    def message(self, text: str) -> None:
        print(text, file=self.out)
        self.out.flush()


class GameLoop:
    """
    Tick-driven game between the engine side and a text player.

    Attributes:
        state: Live game state
        cycle: Decision cycle for the engine side
        player: Square-selection input for the other side
        renderer: Board output
        reader: Returns one line of player input; raises EOFError at the end
    """

    def __init__(
        self,
        state: GameState,
        cycle: DecisionCycle,
        player: Optional[PlayerInput] = None,
        renderer: Optional[TextRenderer] = None,
        reader: Optional[Callable[[str], str]] = None,
        max_ticks: Optional[int] = None,
    ):
        self.state = state
        self.cycle = cycle
        self.player = player if player is not None else PlayerInput()
        self.renderer = renderer if renderer is not None else TextRenderer()
        self.reader = reader if reader is not None else input
        self.max_ticks = max_ticks
        self.ticks = 0

    def render(self) -> None:
        placement = self.state.take_render_update()
        if placement is not None:
            self.renderer.render(placement)

    def player_step(self) -> Optional[chess.Move]:
        """
        Read one line of square names and feed them to the player input.

        A line may hold one square ("e2") or both ("e2 e4"). Malformed
        squares are reported and the rest of the line is skipped, as is
        anything after a completed move.
        """
        if self.player.gesture.awaiting_destination:
            prompt = "to> "
        else:
            prompt = "from> "
        line = self.reader(prompt)

        move = None
        for token in line.split():
            try:
                move = self.player.select_name(self.state, token)
            except MalformedSquareReference as e:
                logger.warning(str(e))
                self.renderer.message(str(e))
                break
            if move is not None:
                break
        return move

    def tick(self) -> Optional[chess.Move]:
        """
        Run one frame.

        Returns:
            The last move applied during the frame, or None
        """
        self.ticks += 1
        self.render()

        move = self.cycle.tick(self.state)

        if self.state.is_game_over():
            return move

        if self.state.side_to_move() != self.cycle.side:
            self.render()
            player_move = self.player_step()
            if player_move is not None:
                move = player_move

        return move

    def run(self) -> str:
        """
        Play until the game ends, input runs out or max_ticks is reached.

        Returns:
            Game result string ("1-0", "0-1", "1/2-1/2" or "*")
        """
        logger.info(f"=== Game started: {self.cycle!r} ===")

        while not self.state.is_game_over():
            if self.max_ticks is not None and self.ticks >= self.max_ticks:
                logger.info(f"Stopping after {self.ticks} ticks")
                break
            try:
                self.tick()
            except EOFError:
                logger.info("EOF received, stopping game")
                break
            except ChessBotError as e:
                logger.error(f"Tick error: {e}", exc_info=True)

        self.render()
        result = self.state.result()
        logger.info(f"=== Game finished: {result} ===")
        return result
