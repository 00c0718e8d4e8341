import sys
import argparse
import logging
import random
import time
from typing import Optional

from pydantic import ValidationError

from pentago.board import Direction, Move, Piece, make_move
from pentago.config import SearchSettings
from pentago.game import Game, new_game
from pentago.ai.minimax import best_move, random_move, reset_stats, stats_snapshot

COLORS = {Piece.WHITE: "White", Piece.BLACK: "Black"}
STRATEGIES = ("human", "random", "ai")
DMAP = {"CW": Direction.CW, "0": Direction.CW, "CCW": Direction.CCW, "1": Direction.CCW}

def parse_move(s: str) -> Move:
    parts = s.strip().upper().split()
    if len(parts) != 4:
        raise ValueError("Invalid format, expected: row col quadrant direction")
    try:
        r, c, q = int(parts[0]), int(parts[1]), int(parts[2])
    except ValueError:
        raise ValueError("Row, column and quadrant must be numbers") from None
    if parts[3] not in DMAP:
        raise ValueError("Direction is CW (0) or CCW (1)")
    return make_move(r, c, q, DMAP[parts[3]])

def prompt_for_move(g: Game) -> Optional[Move]:
    while True:
        try:
            s = input(f"{COLORS[g.current_player()]}> ").strip()
        except EOFError:
            print()
            return None
        if not s:
            continue
        if s.lower() in ("q", "quit", "exit"):
            return None
        if s.lower() in ("h", "help", "?"):
            print("Move format: <row 0-5> <col 0-5> <quadrant 0-3> <CW|CCW>")
            print("Quadrants: 0 top-left, 1 top-right, 2 bottom-left, 3 bottom-right")
            continue
        try:
            mv = parse_move(s)
        except ValueError as e:
            print(e)
            continue
        if not mv.is_valid(g.board):
            print("Invalid move: cell is taken")
            continue
        return mv

def play(g: Game, strategies: dict, settings: SearchSettings, rng: random.Random) -> int:
    while True:
        print(g, end="")
        winner = g.check_winner()
        if winner != Piece.EMPTY:
            print(f"{COLORS[winner]} won!")
            return 0
        if g.is_draw():
            print("Draw.")
            return 0
        side = g.current_player()
        print(f"\n{COLORS[side]}'s move")

        start = time.time()
        strategy = strategies[side]
        if strategy == "human":
            mv = prompt_for_move(g)
            if mv is None:
                print("Bye.")
                return 0
        elif strategy == "random":
            mv = random_move(g.board, rng)
        else:
            reset_stats()
            mv = best_move(g.board, side, max_depth=settings.depth, weights=settings.weights)
            s = stats_snapshot()
            print(f"searched {s['nodes']} nodes, {s['evals']} evals, {s['cuts']} cuts")
        print(f"finished in {time.time() - start:.3f}s")

        if not g.move(mv):
            print("Error")
        print(mv)

def main() -> int:
    parser = argparse.ArgumentParser(description="Play Pentago in the terminal.")
    parser.add_argument("white", nargs="?", choices=STRATEGIES, default="ai")
    parser.add_argument("black", nargs="?", choices=STRATEGIES, default="ai")
    parser.add_argument("--depth", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper())
    try:
        settings = SearchSettings() if args.depth is None else SearchSettings(depth=args.depth)
    except ValidationError as e:
        parser.error(f"invalid --depth: {e.errors()[0]['msg']}")

    g = new_game()
    return play(g, {Piece.WHITE: args.white, Piece.BLACK: args.black}, settings, random.Random(args.seed))

if __name__ == "__main__":
    sys.exit(main())
