"""
Fixed-Depth Minimax Search

This module implements the look-ahead that picks the engine's move. Every
candidate first move is applied to a private copy of the position, the tree
below it is explored to a fixed depth, and the leaves are scored by the
evaluator. There is no pruning, no transposition table and no time budget:
a search always runs to its full depth.

Key Concepts:
    - Depth counts plies, including the candidate first move. Depth 1 scores
      each candidate by evaluate(position after the move).
    - Scores are from White's perspective, so White maximises and Black
      minimises at every ply.
    - Ties: the first move seen with the best score is kept.

Search Modes:
    MINIMAX     every ply branches over all legal moves
    FIRST_LINE  below the first ply only the first legal move is followed,
                so each candidate is valued by a single line of play

References:
    - Minimax: https://www.chessprogramming.org/Minimax
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

import chess

from chess_bot.errors import EmptySearchSpace
from chess_bot.evaluation.base import Evaluator
from chess_bot.evaluation.positional import PositionalEvaluator

logger = logging.getLogger(__name__)


class SearchMode(Enum):
    MINIMAX = "minimax"
    FIRST_LINE = "first-line"


@dataclass
class SearchResult:
    """Best first move, its score and the number of positions visited."""

    move: chess.Move
    score: int
    nodes: int = 0


def _improves(score: int, best: Optional[int], maximizing: bool) -> bool:
    # Strict comparison: equal scores never displace an earlier move
    if best is None:
        return True
    return score > best if maximizing else score < best


def minimax(
    board: chess.Board,
    depth: int,
    evaluator: Evaluator,
    mode: SearchMode = SearchMode.MINIMAX,
    ply_from_root: int = 0,
    nodes_searched: Optional[List[int]] = None,
) -> int:
    """
    Score a position by looking ahead `depth` plies.

    Args:
        board: Position to score. Moves are pushed and popped on it, so pass
            a copy of anything that must not change.
        depth: Remaining plies (0 = score this position statically)
        evaluator: Position evaluation function
        mode: Full branching or first-line-only below the root
        ply_from_root: Distance from root (for mate distance)
        nodes_searched: Optional mutable list [count] of positions visited

    Returns:
        int: Score of the position from White's perspective
    """
    if nodes_searched is not None:
        nodes_searched[0] += 1

    # Base case: Reached leaf node
    if depth == 0:
        return evaluator.evaluate(board)

    legal_moves = list(board.legal_moves)
    if not legal_moves:
        # Checkmate or stalemate
        terminal_score = evaluator.evaluate_terminal(board, ply_from_root)
        return terminal_score if terminal_score is not None else evaluator.evaluate(board)

    if mode is SearchMode.FIRST_LINE:
        legal_moves = legal_moves[:1]

    maximizing = board.turn == chess.WHITE
    best_score = None

    for move in legal_moves:
        board.push(move)
        score = minimax(
            board,
            depth - 1,
            evaluator,
            mode,
            ply_from_root + 1,
            nodes_searched,
        )
        board.pop()

        if _improves(score, best_score, maximizing):
            best_score = score

    return best_score


def find_best_move(
    board: chess.Board,
    legal_moves: Iterable[chess.Move],
    depth: int,
    evaluator: Optional[Evaluator] = None,
    mode: SearchMode = SearchMode.MINIMAX,
) -> SearchResult:
    """
    Pick the best of the supplied moves for the side to move.

    The board itself is never modified; each candidate is explored on a copy.

    Args:
        board: Current chess position
        legal_moves: Candidate moves, normally board.legal_moves
        depth: Plies to look ahead, counting the candidate move (>= 1)
        evaluator: Position evaluation function (default: PositionalEvaluator)
        mode: Search mode below the first ply

    Returns:
        SearchResult for the first move with the best score

    Raises:
        EmptySearchSpace: If there are no candidate moves (game over)
        ValueError: If depth is less than 1
    """
    candidates = list(legal_moves)
    if not candidates:
        raise EmptySearchSpace("No legal moves available")
    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}")

    if evaluator is None:
        evaluator = PositionalEvaluator()

    maximizing = board.turn == chess.WHITE
    best_move = None
    best_score = None
    nodes = [0]

    for move in candidates:
        child = board.copy()
        child.push(move)

        score = minimax(
            child,
            depth - 1,
            evaluator,
            mode,
            ply_from_root=1,
            nodes_searched=nodes,
        )
        logger.debug(f"Move: {move}, Score: {score}")

        if _improves(score, best_score, maximizing):
            best_score = score
            best_move = move

    logger.info(
        f"Best move: {best_move}, Score: {best_score}, depth={depth}, "
        f"mode={mode.value}, nodes={nodes[0]}"
    )
    return SearchResult(best_move, best_score, nodes[0])


def choose_move(
    state,
    legal_moves: Iterable[chess.Move],
    depth: int,
    evaluator: Optional[Evaluator] = None,
    mode: SearchMode = SearchMode.MINIMAX,
) -> chess.Move:
    """
    Search the live position and apply the chosen move to it.

    Exactly one move is applied per call. Callers must check for game end
    first; an empty move list raises EmptySearchSpace and nothing is applied.

    Args:
        state: GameState holding the live board
        legal_moves: Candidate moves for the side to move
        depth: Plies to look ahead
        evaluator: Position evaluation function
        mode: Search mode below the first ply

    Returns:
        The move that was applied
    """
    result = find_best_move(state.board, legal_moves, depth, evaluator, mode)
    state.apply(result.move)
    return result.move
