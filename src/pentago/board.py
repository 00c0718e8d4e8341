import random
from enum import IntEnum
from typing import List, NamedTuple, Optional, Tuple

SIZE = 6
WIN_LENGTH = 5


class Piece(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def opponent(self) -> "Piece":
        if self == Piece.BLACK:
            return Piece.WHITE
        if self == Piece.WHITE:
            return Piece.BLACK
        return Piece.EMPTY


class Quadrant(IntEnum):
    Q00 = 0
    Q01 = 1
    Q10 = 2
    Q11 = 3


class Direction(IntEnum):
    CW = 1
    CCW = -1


class OutOfRangeError(ValueError):
    pass


GLYPHS = {Piece.EMPTY: ".", Piece.BLACK: "B", Piece.WHITE: "W"}
PIECES_BY_GLYPH = {v: k for k, v in GLYPHS.items()}

QUADRANT_ORIGINS = {
    Quadrant.Q00: (0, 0),
    Quadrant.Q01: (0, 3),
    Quadrant.Q10: (3, 0),
    Quadrant.Q11: (3, 3),
}

DIRECTIONS = (Direction.CW, Direction.CCW)


class Move(NamedTuple):
    row: int
    col: int
    quadrant: Quadrant
    direction: Direction

    def is_valid(self, board: "Board") -> bool:
        return board.grid[self.row][self.col] == Piece.EMPTY

    def __str__(self) -> str:
        return "Put piece (%d, %d), rotate quadrant %d %s" % (
            self.row, self.col, int(self.quadrant), Direction(self.direction).name)


def make_move(row: int, col: int, quadrant: int, direction: int) -> Move:
    """Build a Move from untrusted input, rejecting anything off the board."""
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise OutOfRangeError("row and column are 0-5")
    try:
        q = Quadrant(quadrant)
    except ValueError:
        raise OutOfRangeError("quadrant is 0-3") from None
    try:
        d = Direction(direction)
    except ValueError:
        raise OutOfRangeError("direction is CW or CCW") from None
    return Move(row, col, q, d)


def _compute_lines() -> List[Tuple[int, int, int, int, int]]:
    # (start_row, start_col, d_row, d_col, length), in scan order
    lines = []
    for r in range(SIZE):
        lines.append((r, 0, 0, 1, SIZE))
    for c in range(SIZE):
        lines.append((0, c, 1, 0, SIZE))
    lines.append((0, 0, 1, 1, SIZE))
    lines.append((5, 0, -1, 1, SIZE))
    lines.append((0, 1, 1, 1, WIN_LENGTH))
    lines.append((1, 0, 1, 1, WIN_LENGTH))
    lines.append((4, 0, -1, 1, WIN_LENGTH))
    lines.append((5, 1, -1, 1, WIN_LENGTH))
    return lines


class Board:
    LINES = _compute_lines()

    def __init__(self) -> None:
        self.grid: List[List[Piece]] = [[Piece.EMPTY for _ in range(SIZE)] for _ in range(SIZE)]

    @classmethod
    def from_string(cls, text: str) -> "Board":
        rows = [line.split() for line in text.strip("\n").splitlines() if line.strip()]
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("expected 6 rows of 6 cells")
        b = cls()
        for r, row in enumerate(rows):
            for c, glyph in enumerate(row):
                if glyph not in PIECES_BY_GLYPH:
                    raise ValueError("unknown cell %r" % glyph)
                b.grid[r][c] = PIECES_BY_GLYPH[glyph]
        return b

    def clone(self) -> "Board":
        b = Board()
        b.grid = [row[:] for row in self.grid]
        return b

    def at(self, r: int, c: int) -> Piece:
        return self.grid[r][c]

    def place(self, r: int, c: int, piece: Piece) -> bool:
        if r < 0 or c < 0:
            raise OutOfRangeError("row and column are 0-5")
        if self.grid[r][c] != Piece.EMPTY:
            return False
        self.grid[r][c] = piece
        return True

    def rotate(self, q: Quadrant, d: Direction) -> None:
        r0, c0 = QUADRANT_ORIGINS[q]
        old = [[self.grid[r0 + i][c0 + j] for j in range(3)] for i in range(3)]
        if d == Direction.CW:
            for i in range(3):
                for j in range(3):
                    self.grid[r0 + i][c0 + j] = old[2 - j][i]
        elif d == Direction.CCW:
            for i in range(3):
                for j in range(3):
                    self.grid[r0 + i][c0 + j] = old[j][2 - i]
        else:
            raise ValueError("Invalid direction")

    def apply_move(self, move: Move, piece: Piece) -> bool:
        r, c, q, d = move
        # all fields checked before the board is touched
        if not (0 <= r < SIZE and 0 <= c < SIZE) or q not in QUADRANT_ORIGINS or d not in DIRECTIONS:
            raise OutOfRangeError("move out of range: %r" % (tuple(move),))
        if not self.place(r, c, piece):
            return False
        self.rotate(q, d)
        return True

    def empty_cells(self) -> List[Tuple[int, int]]:
        out = []
        for r in range(SIZE):
            for c in range(SIZE):
                if self.grid[r][c] == Piece.EMPTY:
                    out.append((r, c))
        return out

    def valid_moves(self) -> List[Move]:
        moves = []
        for r, c in self.empty_cells():
            for q in Quadrant:
                moves.append(Move(r, c, q, Direction.CW))
                moves.append(Move(r, c, q, Direction.CCW))
        return moves

    def full(self) -> bool:
        for row in self.grid:
            if Piece.EMPTY in row:
                return False
        return True

    def _check_line(self, r: int, c: int, dr: int, dc: int, length: int) -> Piece:
        g = self.grid
        # A five inside a six-cell line contains index 0 exactly when cells 0 and 1 agree.
        if length > WIN_LENGTH and g[r][c] != g[r + dr][c + dc]:
            r += dr
            c += dc
        color = g[r][c]
        if color == Piece.EMPTY:
            return Piece.EMPTY
        for k in range(1, WIN_LENGTH):
            if g[r + k * dr][c + k * dc] != color:
                return Piece.EMPTY
        return color

    def check_winner(self) -> Piece:
        for r, c, dr, dc, length in Board.LINES:
            color = self._check_line(r, c, dr, dc, length)
            if color != Piece.EMPTY:
                return color
        return Piece.EMPTY

    def random_move(self, rng: Optional[random.Random] = None) -> Optional[Move]:
        """Uniform pick from valid_moves(); None on a full board.

        Thin wrapper over pentago.ai.minimax.random_move, imported here because
        the search module itself depends on Board.
        """
        from .ai.minimax import random_move
        return random_move(self, rng)

    def best_move(self, color: Piece, depth: Optional[int] = None) -> Optional[Move]:
        """Alpha-beta choice for ``color``; see pentago.ai.minimax.best_move."""
        from .ai.minimax import best_move
        if depth is None:
            return best_move(self, color)
        return best_move(self, color, max_depth=depth)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    def __str__(self) -> str:
        return "".join("".join(" " + GLYPHS[p] for p in row) + "\n" for row in self.grid)
