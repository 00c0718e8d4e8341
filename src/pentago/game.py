import random
from typing import List, Optional
from .board import Board, Move, Piece


class Game:
    def __init__(self) -> None:
        self.board = Board()
        self.turn: Piece = Piece.WHITE

    def current_player(self) -> Piece:
        return self.turn

    def valid_moves(self) -> List[Move]:
        return self.board.valid_moves()

    def move(self, move: Move) -> bool:
        """Play ``move`` for the side to move. The turn passes only on success."""
        if not self.board.apply_move(move, self.turn):
            return False
        self.turn = self.turn.opponent()
        return True

    def check_winner(self) -> Piece:
        return self.board.check_winner()

    def terminal(self) -> bool:
        return self.check_winner() != Piece.EMPTY or self.board.full()

    def is_draw(self) -> bool:
        return self.board.full() and self.check_winner() == Piece.EMPTY

    def random_move(self, rng: Optional[random.Random] = None) -> Optional[Move]:
        return self.board.random_move(rng)

    def best_move(self, depth: Optional[int] = None) -> Optional[Move]:
        return self.board.best_move(self.turn, depth)

    def __str__(self) -> str:
        return str(self.board)


def new_game() -> Game:
    return Game()
