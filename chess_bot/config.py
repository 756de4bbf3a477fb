"""
Engine configuration.
"""

import argparse
from dataclasses import dataclass
from typing import Optional

import chess

from chess_bot.policy.policies import DEFAULT_DEPTH
from chess_bot.policy.trigger import LEGACY_TRIGGER_PROBABILITY
from chess_bot.search.minimax import SearchMode

POLICIES = ("engine", "random")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class EngineConfig:
    """Configuration for one game between the engine and a player.

    Everything the host needs to build its decision cycle lives here, so a
    game can be reproduced from its config and seed.
    """

    policy: str = "engine"
    """Move policy for the engine side: 'engine' (search) or 'random'"""

    depth: int = DEFAULT_DEPTH
    """Search depth in plies, counting the candidate move"""

    search_mode: SearchMode = SearchMode.MINIMAX
    """Full minimax, or follow only the first line below the root"""

    trigger_probability: float = LEGACY_TRIGGER_PROBABILITY
    """Chance per decision cycle that the engine side acts"""

    legacy_trigger: bool = False
    """Use the two-draws-for-equality trigger instead of trigger_probability"""

    engine_side: chess.Color = chess.WHITE
    """Side the engine plays; the other side is left to the player"""

    mirror_black_tables: bool = True
    """Black reads piece-square tables flipped vertically"""

    start_fen: Optional[str] = None
    """Starting position (None for the standard arrangement)"""

    seed: Optional[int] = None
    """Random seed for the trigger and random policy (None for random)"""

    log_level: str = "INFO"
    """Logging level for the chess_bot logger"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.search_mode, str):
            self.search_mode = SearchMode(self.search_mode)

        if isinstance(self.engine_side, str):
            if self.engine_side.lower() not in chess.COLOR_NAMES:
                raise ValueError(f"engine_side should be 'white' or 'black', got {self.engine_side}")
            self.engine_side = self.engine_side.lower() == "white"

        self.log_level = self.log_level.upper()

        if self.policy not in POLICIES:
            raise ValueError(f"policy should be one of {POLICIES}, got {self.policy}")

        if self.depth < 1:
            raise ValueError(f"depth must be at least 1, got {self.depth}")

        if not 0.0 < self.trigger_probability <= 1.0:
            raise ValueError(
                f"trigger_probability must be within (0, 1], got {self.trigger_probability}"
            )

        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level should be one of {LOG_LEVELS}, got {self.log_level}")

        if self.start_fen is not None:
            try:
                chess.Board(self.start_fen)
            except ValueError as e:
                raise ValueError(f"Invalid start_fen: {e}") from e

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "EngineConfig":
        """Build a config from the host's parsed command line."""
        return cls(
            policy=args.policy,
            depth=args.depth,
            search_mode=args.search_mode,
            trigger_probability=args.trigger_probability,
            legacy_trigger=args.legacy_trigger,
            engine_side=args.side,
            mirror_black_tables=not args.unmirrored_tables,
            start_fen=args.fen,
            seed=args.seed,
            log_level=args.log_level,
        )

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"EngineConfig(\n"
            f"  Policy: {self.policy}, depth={self.depth}, mode={self.search_mode.value}\n"
            f"  Trigger: p={self.trigger_probability:.4f}, legacy={self.legacy_trigger}\n"
            f"  Engine side: {chess.COLOR_NAMES[self.engine_side]}\n"
            f"  Seed: {self.seed}\n"
            f")"
        )
