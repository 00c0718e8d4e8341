import pytest

from pentago.board import Board, Piece, Quadrant, Direction, Move, OutOfRangeError
from boards import START, start_board

def test_render_matches_transcript():
    assert str(start_board()) == START.lstrip("\n")

def test_rotate_cw_then_ccw_restores():
    b = Board()
    for r in range(3):
        for c in range(3):
            if (r + c) % 2 == 0:
                b.place(r, c, Piece.BLACK)
    ref = b.clone()
    b.rotate(Quadrant.Q00, Direction.CW)
    b.rotate(Quadrant.Q00, Direction.CCW)
    assert b.grid == ref.grid

def test_four_quarter_turns_are_identity():
    for q in Quadrant:
        for d in Direction:
            b = start_board()
            for _ in range(4):
                b.rotate(q, d)
            assert b == start_board()

def test_center_cells_never_move():
    centers = [(1, 1), (1, 4), (4, 1), (4, 4)]
    b = start_board()
    b.place(4, 4, Piece.BLACK)
    before = [b.at(r, c) for r, c in centers]
    for q in Quadrant:
        for d in Direction:
            b.rotate(q, d)
            assert [b.at(r, c) for r, c in centers] == before

def test_rotate_affects_only_chosen_quadrant():
    b = Board()
    for r in range(3, 6):
        for c in range(3, 6):
            b.place(r, c, Piece.WHITE)
    ref = [row[:] for row in b.grid]
    b.rotate(Quadrant.Q00, Direction.CW)
    for r in range(3, 6):
        for c in range(3, 6):
            assert b.grid[r][c] == ref[r][c]

def test_rotate_mapping_example():
    b = Board()
    b.place(0, 1, Piece.BLACK)
    b.rotate(Quadrant.Q00, Direction.CW)
    assert b.at(1, 2) == Piece.BLACK
    assert b.at(0, 1) == Piece.EMPTY

def test_rotate_top_right_cw_transcript():
    b = start_board()
    b.rotate(Quadrant.Q01, Direction.CW)
    assert str(b) == (
        " . W B B . .\n"
        " . B . . B W\n"
        " . . W . . .\n"
        " B W B . . B\n"
        " W . B . . W\n"
        " W . B . W W\n"
    )

def test_rotate_bottom_left_ccw_transcript():
    b = start_board()
    b.rotate(Quadrant.Q10, Direction.CCW)
    assert str(b) == (
        " . W B . W .\n"
        " . B . . B .\n"
        " . . W B . .\n"
        " B B B . . B\n"
        " W . . . . W\n"
        " B W W . W W\n"
    )

def test_apply_move_on_occupied_cell_changes_nothing():
    b = start_board()
    ref = b.clone()
    assert not b.apply_move(Move(0, 1, Quadrant.Q10, Direction.CCW), Piece.BLACK)
    assert b == ref
    assert str(b) == str(ref)

def test_apply_move_places_then_rotates():
    b = start_board()
    assert b.apply_move(Move(5, 1, Quadrant.Q10, Direction.CCW), Piece.WHITE)
    assert str(b) == (
        " . W B . W .\n"
        " . B . . B .\n"
        " . . W B . .\n"
        " B B B . . B\n"
        " W . W . . W\n"
        " B W W . W W\n"
    )

@pytest.mark.parametrize("move", [
    Move(0, 0, 7, Direction.CW),
    Move(0, 0, Quadrant.Q00, 0),
    Move(-1, 0, Quadrant.Q11, Direction.CW),
    Move(0, -2, Quadrant.Q11, Direction.CCW),
    Move(6, 0, Quadrant.Q00, Direction.CW),
])
def test_out_of_range_move_leaves_board_untouched(move):
    b = Board()
    with pytest.raises(OutOfRangeError):
        b.apply_move(move, Piece.WHITE)
    assert b == Board()

def test_place_rejects_negative_index():
    b = Board()
    with pytest.raises(OutOfRangeError):
        b.place(-1, 0, Piece.BLACK)
    assert b == Board()
