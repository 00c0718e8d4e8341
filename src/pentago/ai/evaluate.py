from typing import Dict, List, NamedTuple, Tuple
from ..board import Board, Piece, SIZE, WIN_LENGTH
from ..config import DEFAULT_WEIGHTS, EvalWeights

WIN_SCORE = 1_000_000_000.0

Occupancy = Dict[Piece, List[List[float]]]


class Span(NamedTuple):
    row: int
    col: int
    d_row: int
    d_col: int
    pieces: int


def win_score(winner: Piece, ply: int = 0) -> float:
    if winner == Piece.BLACK:
        return WIN_SCORE - ply
    if winner == Piece.WHITE:
        return -(WIN_SCORE - ply)
    return 0.0


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < SIZE and 0 <= c < SIZE


def rotational_images(r: int, c: int) -> List[Tuple[int, int]]:
    """Cells that (r, c) visits under 0, 1, 2 and 3 clockwise turns of its quadrant."""
    r0 = (r // 3) * 3
    c0 = (c // 3) * 3
    i, j = r - r0, c - c0
    out = []
    for _ in range(4):
        out.append((r0 + i, c0 + j))
        i, j = j, 2 - i
    return out


def future_occupancy(board: Board, weights: EvalWeights = DEFAULT_WEIGHTS) -> Occupancy:
    """Rough chance of each color ending up on each cell once quadrants turn.

    Every cell spreads its weight over the four places a rotation can carry
    it to. Empty cells count for both colors at a reduced rate. Values stay
    within [0, 1].
    """
    white = [[0.0] * SIZE for _ in range(SIZE)]
    black = [[0.0] * SIZE for _ in range(SIZE)]
    share = weights.rotation_share
    empty = weights.rotation_share * weights.empty_share
    for r in range(SIZE):
        for c in range(SIZE):
            v = board.grid[r][c]
            if v == Piece.WHITE:
                add_white, add_black = share, 0.0
            elif v == Piece.BLACK:
                add_white, add_black = 0.0, share
            else:
                add_white, add_black = empty, empty
            for ir, ic in rotational_images(r, c):
                white[ir][ic] += add_white
                black[ir][ic] += add_black
    return {Piece.WHITE: white, Piece.BLACK: black}


def span_from(board: Board, r: int, c: int, dr: int, dc: int) -> Span:
    """Same-color run starting at (r, c) along (dr, dc).

    The run ends at the board edge, a color change, or the first step that
    leaves the quadrant band it started in, in either direction.
    """
    color = board.grid[r][c]
    pieces = 1
    cr, cc = r, c
    while True:
        nr, nc = cr + dr, cc + dc
        if not in_bounds(nr, nc):
            break
        if nr // 3 != cr // 3 or nc // 3 != cc // 3:
            break
        if board.grid[nr][nc] != color:
            break
        pieces += 1
        cr, cc = nr, nc
    return Span(r, c, dr, dc, pieces)


def spans_at(board: Board, r: int, c: int) -> List[Span]:
    out = [span_from(board, r, c, 0, 1), span_from(board, r, c, 1, 0)]
    if -1 <= r - c <= 1:
        out.append(span_from(board, r, c, 1, 1))
    if 4 <= r + c <= 6:
        out.append(span_from(board, r, c, -1, 1))
    return out


def span_probability(occupancy: List[List[float]], span: Span) -> float:
    # The run itself is assumed to stay put; only the cells around it are uncertain.
    prob = 1.0
    count = span.pieces
    r, c = span.row - span.d_row, span.col - span.d_col
    while count < WIN_LENGTH and in_bounds(r, c):
        prob *= occupancy[r][c]
        count += 1
        r -= span.d_row
        c -= span.d_col
    r = span.row + span.d_row * span.pieces
    c = span.col + span.d_col * span.pieces
    while count < WIN_LENGTH and in_bounds(r, c):
        prob *= occupancy[r][c]
        count += 1
        r += span.d_row
        c += span.d_col
    return prob


def evaluate(board: Board, weights: EvalWeights = DEFAULT_WEIGHTS) -> float:
    winner = board.check_winner()
    if winner != Piece.EMPTY:
        return win_score(winner)

    occupancy = future_occupancy(board, weights)
    score = 0.0
    for r in range(SIZE):
        for c in range(SIZE):
            color = board.grid[r][c]
            if color == Piece.EMPTY:
                continue
            for span in spans_at(board, r, c):
                prob = span_probability(occupancy[color], span)
                if color == Piece.BLACK:
                    score += prob
                else:
                    score -= prob
    return score
