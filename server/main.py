import logging
from typing import Dict, Literal
from uuid import uuid4

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from pentago.board import Direction, Piece, make_move
from pentago.config import DEFAULT_DEPTH, MAX_DEPTH
from pentago.game import Game, new_game
from pentago.ai.minimax import best_move, random_move

_log = logging.getLogger(__name__)

app = FastAPI(title="Pentago")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

GAMES: Dict[str, Game] = {}

class PlayRequest(BaseModel):
    row: int = Field(ge=0, le=5)
    col: int = Field(ge=0, le=5)
    quadrant: int = Field(ge=0, le=3)
    direction: Literal["CW", "CCW"]

class BotRequest(BaseModel):
    strategy: str = "ai"
    depth: int = Field(DEFAULT_DEPTH, ge=1, le=MAX_DEPTH)

GLYPH = {Piece.BLACK: "B", Piece.WHITE: "W"}

def to_state(g: Game) -> dict:
    win = g.check_winner()
    return {
        "board": str(g.board),
        "grid": [[int(v) for v in row] for row in g.board.grid],
        "to_move": GLYPH[g.current_player()],
        "terminal": g.terminal(),
        "winner": GLYPH.get(win),
    }

def get_game(gid: str) -> Game:
    g = GAMES.get(gid)
    if g is None:
        raise HTTPException(404, "unknown game")
    return g

@app.post("/new")
def new():
    g = new_game()
    gid = uuid4().hex
    GAMES[gid] = g
    _log.info("new game %s", gid)
    return {"game_id": gid, "state": to_state(g)}

@app.get("/state/{gid}")
def state(gid: str):
    return {"state": to_state(get_game(gid))}

@app.post("/play/{gid}")
def play(gid: str, req: PlayRequest):
    g = get_game(gid)
    if g.terminal():
        raise HTTPException(409, "game over")
    mv = make_move(req.row, req.col, req.quadrant, Direction[req.direction])
    if not g.move(mv):
        raise HTTPException(400, "cell is taken")
    return {"state": to_state(g)}

@app.post("/bot/{gid}")
def bot(gid: str, req: BotRequest):
    g = get_game(gid)
    strategy = req.strategy.lower()
    if strategy not in ("ai", "random"):
        raise HTTPException(400, "unknown strategy")
    if g.terminal():
        raise HTTPException(409, "game over")

    side = g.current_player()
    if strategy == "ai":
        mv = best_move(g.board, side, max_depth=req.depth)
    else:
        mv = random_move(g.board)
    g.move(mv)
    _log.info("game %s: %s played %s (%s)", gid, side.name, mv, strategy)
    return {"move": str(mv), "state": to_state(g), "strategy": strategy}
