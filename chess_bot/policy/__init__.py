"""
Policy Module

Whether the engine side acts on a given tick, and which move it plays.

Key Components:
    - TriggerPolicy: probabilistic per-cycle gate
    - MovePolicy (ABC): picks and applies a move
    - EnginePolicy / RandomPolicy: search-driven and uniform-random choice
    - DecisionCycle: ties a side, a trigger and a policy together
"""

from chess_bot.policy.cycle import DecisionCycle
from chess_bot.policy.policies import DEFAULT_DEPTH, EnginePolicy, MovePolicy, RandomPolicy
from chess_bot.policy.trigger import LEGACY_TRIGGER_PROBABILITY, TriggerPolicy

__all__ = [
    'DEFAULT_DEPTH',
    'DecisionCycle',
    'EnginePolicy',
    'LEGACY_TRIGGER_PROBABILITY',
    'MovePolicy',
    'RandomPolicy',
    'TriggerPolicy',
]
