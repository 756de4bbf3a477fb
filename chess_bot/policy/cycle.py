"""
Decision Cycle

Runs once per host tick for the engine-controlled side:

    1. Not this side's turn?           → do nothing
    2. Trigger does not fire?          → do nothing
    3. No legal moves (mate/stalemate) → do nothing, the policy is never asked
    4. Otherwise the policy picks a move and applies it
"""

import logging
import random
from typing import Optional

import chess

from chess_bot.evaluation.positional import PositionalEvaluator
from chess_bot.policy.policies import EnginePolicy, MovePolicy, RandomPolicy
from chess_bot.policy.trigger import TriggerPolicy
from chess_bot.state.game import GameState

logger = logging.getLogger(__name__)


class DecisionCycle:
    """
    One engine-controlled side with its trigger and move policy.

    Attributes:
        policy: Active move policy
        trigger: Per-cycle gate
        side: Side the engine plays (chess.WHITE or chess.BLACK)
    """

    def __init__(
        self,
        policy: MovePolicy,
        trigger: Optional[TriggerPolicy] = None,
        side: chess.Color = chess.WHITE,
    ):
        self.policy = policy
        self.trigger = trigger if trigger is not None else TriggerPolicy()
        self.side = side

    @classmethod
    def from_config(cls, config) -> "DecisionCycle":
        """
        Build the cycle described by an EngineConfig.

        One random.Random seeded from config.seed drives both the trigger and
        the random policy, so a seeded game is reproducible.
        """
        rng = random.Random(config.seed)
        trigger = TriggerPolicy(
            probability=config.trigger_probability,
            rng=rng,
            legacy_draws=config.legacy_trigger,
        )

        if config.policy == RandomPolicy.name:
            policy = RandomPolicy(rng)
        else:
            policy = EnginePolicy(
                depth=config.depth,
                evaluator=PositionalEvaluator(mirror_black=config.mirror_black_tables),
                mode=config.search_mode,
            )

        return cls(policy, trigger, config.engine_side)

    def tick(self, state: GameState) -> Optional[chess.Move]:
        """
        Run one decision cycle.

        Returns:
            The move applied this cycle, or None
        """
        if state.side_to_move() != self.side:
            return None

        if not self.trigger.should_act():
            return None

        legal_moves = state.legal_moves()
        if not legal_moves:
            logger.info(f"No legal moves for {chess.COLOR_NAMES[self.side]}, game over: {state.result()}")
            return None

        return self.policy.play(state, legal_moves)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(policy={self.policy!r}, trigger={self.trigger!r}, "
            f"side={chess.COLOR_NAMES[self.side]})"
        )
