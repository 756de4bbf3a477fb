"""
chess-bot

A small chess engine that picks its moves with piece-square table
evaluation and a fixed-depth minimax search. python-chess is the rules
engine: legality, move generation and move application all come from it.

## Architecture

1. **board**: Occupant enumeration, FEN placement parsing, occupancy tensors
2. **evaluation**: Swappable evaluators; PositionalEvaluator sums table weights
3. **search**: Fixed-depth minimax (full or first-line) over the legal moves
4. **policy**: Per-tick trigger, engine/random move policies, decision cycle
5. **state**: GameState (live board) and PlayerInput (two-square move entry)
6. **host**: Terminal game loop and command line

## Quick Start

```python
import chess
from chess_bot.search import find_best_move

board = chess.Board()
result = find_best_move(board, board.legal_moves, depth=2)
print(f"Best move: {result.move} (score: {result.score})")
```

```bash
python -m chess_bot --depth 3 --trigger-probability 1
```
"""

__version__ = "0.1.0"
__license__ = "MIT"

from chess_bot.evaluation import Evaluator, PositionalEvaluator
from chess_bot.policy import DecisionCycle, EnginePolicy, RandomPolicy, TriggerPolicy
from chess_bot.search import SearchMode, SearchResult, choose_move, find_best_move
from chess_bot.state import GameState, PlayerInput

__all__ = [
    'DecisionCycle',
    'EnginePolicy',
    'Evaluator',
    'GameState',
    'PlayerInput',
    'PositionalEvaluator',
    'RandomPolicy',
    'SearchMode',
    'SearchResult',
    'TriggerPolicy',
    'choose_move',
    'find_best_move',
]
