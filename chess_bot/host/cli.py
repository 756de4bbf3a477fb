"""
Command line entry point.

Usage:
    python -m chess_bot [--policy engine|random] [--depth 3] [--side white]
                        [--trigger-probability 0.04] [--legacy-trigger]
                        [--search-mode minimax|first-line] [--fen FEN]
                        [--seed N] [--log-level INFO] [--log-file PATH]

Squares are entered by name, one or two per line ("e7", then "e5"; or
"e7 e5").
"""

import argparse
from pathlib import Path
from typing import List, Optional

from chess_bot.config import LOG_LEVELS, POLICIES, EngineConfig
from chess_bot.host.loop import GameLoop, TextRenderer, setup_logger
from chess_bot.policy.cycle import DecisionCycle
from chess_bot.policy.policies import DEFAULT_DEPTH
from chess_bot.policy.trigger import LEGACY_TRIGGER_PROBABILITY
from chess_bot.search.minimax import SearchMode
from chess_bot.state.game import GameState
from chess_bot.state.input import PlayerInput


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chess-bot",
        description="Play chess against a piece-square table engine",
    )
    parser.add_argument(
        "--policy",
        choices=POLICIES,
        default="engine",
        help="Engine side policy: search or uniform random moves (default: engine)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=DEFAULT_DEPTH,
        help=f"Search depth in plies (default: {DEFAULT_DEPTH})",
    )
    parser.add_argument(
        "--search-mode",
        choices=[mode.value for mode in SearchMode],
        default=SearchMode.MINIMAX.value,
        help="Branch fully at every ply, or follow only the first line (default: minimax)",
    )
    parser.add_argument(
        "--trigger-probability",
        type=float,
        default=LEGACY_TRIGGER_PROBABILITY,
        help="Chance per tick, within (0, 1], that the engine side moves (default: 1/24)",
    )
    parser.add_argument(
        "--legacy-trigger",
        action="store_true",
        help="Use the two-draws-for-equality trigger",
    )
    parser.add_argument(
        "--side",
        choices=["white", "black"],
        default="white",
        help="Side the engine plays (default: white)",
    )
    parser.add_argument(
        "--unmirrored-tables",
        action="store_true",
        help="Let Black read piece-square tables without flipping them",
    )
    parser.add_argument("--fen", default=None, help="Starting position")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write the log to this file instead of stderr",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = EngineConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))

    setup_logger(config.log_level, args.log_file)

    state = GameState.from_fen(config.start_fen) if config.start_fen else GameState()
    renderer = TextRenderer()
    loop = GameLoop(state, DecisionCycle.from_config(config), PlayerInput(), renderer)

    result = loop.run()
    renderer.message(f"Result: {result}")
    return 0
