import logging
import math
import random
from typing import Dict, Optional, Tuple
from ..board import Board, Move, Piece
from ..config import DEFAULT_DEPTH, DEFAULT_WEIGHTS, EvalWeights
from .evaluate import evaluate, win_score

_log = logging.getLogger(__name__)

DRAW_SCORE = 0.0

STATS: Dict[str, int] = {
    "nodes": 0,
    "evals": 0,
    "cuts": 0,
    "terminal": 0,
}

def reset_stats() -> None:
    for k in STATS:
        STATS[k] = 0

def stats_snapshot() -> Dict[str, int]:
    return dict(STATS)

def search(board: Board,
           mover: Piece,
           ply: int,
           max_depth: int,
           alpha: float,
           beta: float,
           weights: EvalWeights = DEFAULT_WEIGHTS) -> Tuple[Optional[Move], float]:
    """Alpha-beta over placements+rotations. Black maximizes, White minimizes.

    Returns the move that last tightened the mover's bound (None at leaves)
    together with that bound.
    """
    STATS["nodes"] += 1
    winner = board.check_winner()
    if winner != Piece.EMPTY:
        STATS["terminal"] += 1
        return None, win_score(winner, ply)
    if ply == max_depth:
        STATS["evals"] += 1
        return None, evaluate(board, weights)

    moves = board.valid_moves()
    if not moves:
        STATS["terminal"] += 1
        return None, DRAW_SCORE

    best_mv: Optional[Move] = None
    nxt = mover.opponent()
    if mover == Piece.BLACK:
        for mv in moves:
            child = board.clone()
            child.apply_move(mv, mover)
            _, val = search(child, nxt, ply + 1, max_depth, alpha, beta, weights)
            if val > alpha:
                alpha = val
                best_mv = mv
            if beta <= alpha:
                STATS["cuts"] += 1
                break
        return best_mv, alpha
    else:
        for mv in moves:
            child = board.clone()
            child.apply_move(mv, mover)
            _, val = search(child, nxt, ply + 1, max_depth, alpha, beta, weights)
            if val < beta:
                beta = val
                best_mv = mv
            if beta <= alpha:
                STATS["cuts"] += 1
                break
        return best_mv, beta

def analyse(board: Board,
            color: Piece,
            max_depth: int = DEFAULT_DEPTH,
            weights: EvalWeights = DEFAULT_WEIGHTS) -> Tuple[Optional[Move], float]:
    nodes0 = STATS["nodes"]
    mv, score = search(board, color, 0, max_depth, -math.inf, math.inf, weights)
    _log.debug("depth=%d color=%s move=%s score=%.4f nodes=%d",
               max_depth, color.name, mv, score, STATS["nodes"] - nodes0)
    return mv, score

def best_move(board: Board,
              color: Piece,
              max_depth: int = DEFAULT_DEPTH,
              weights: EvalWeights = DEFAULT_WEIGHTS) -> Optional[Move]:
    moves = board.valid_moves()
    if not moves:
        return None
    mv, _ = analyse(board, color, max_depth, weights)
    if mv is None:
        # position already decided; any legal placement will do
        return moves[0]
    return mv

def random_move(board: Board, rng: Optional[random.Random] = None) -> Optional[Move]:
    moves = board.valid_moves()
    if not moves:
        return None
    return (rng or random).choice(moves)
