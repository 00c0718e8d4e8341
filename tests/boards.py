from pentago.board import Board

START = """
 . W B . W .
 . B . . B .
 . . W B . .
 B W B . . B
 W . B . . W
 W . B . W W
"""

DRAWN = """
 B B W W B B
 W W B B W W
 B B W W B B
 W W B B W W
 B B W W B B
 W W B B W W
"""

def start_board() -> Board:
    return Board.from_string(START)
