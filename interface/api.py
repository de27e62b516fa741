"""FastAPI REST interface for a single human-vs-computer session."""

import threading
from typing import Annotated, List, Optional

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel, Field

import oxo
from oxo.config import CONFIG
from oxo.core.board import NO_MOVE, Player, evaluate, parse_board
from oxo.core.search import SearchEngine, pick_best
from oxo.core.utils import setup_logging
from oxo.session import GameSession

NO_CACHE = "no-cache, no-store, must-revalidate"

app = FastAPI(title=CONFIG.ui.engine_name, version=oxo.__version__)

# Shared session (keeps the score across games).
session = GameSession()
_session_lock = threading.Lock()


class MoveRequest(BaseModel):
    index: int
    reply: bool = True  # let the computer answer in the same request


class SearchRequest(BaseModel):
    board: Optional[Annotated[List[Optional[Player]], Field(min_length=9, max_length=9)]] = None


@app.middleware("http")
async def no_cache(request: Request, call_next):
    response = await call_next(request)
    response.headers["Cache-Control"] = NO_CACHE
    return response


@app.get("/game")
def get_game():
    with _session_lock:
        return session.to_dict()


@app.post("/move")
def make_move(req: MoveRequest):
    with _session_lock:
        if not session.apply_move(req.index, Player.HUMAN):
            raise HTTPException(status_code=400, detail=f"Invalid move: {req.index}")
        computer_move = NO_MOVE
        if req.reply and not session.is_game_over:
            computer_move = session.play_computer_move()
        return {
            **session.to_dict(),
            "move": req.index,
            "computer_move": computer_move if computer_move != NO_MOVE else None,
        }


@app.post("/computer-move")
def computer_move():
    with _session_lock:
        if session.is_game_over:
            raise HTTPException(status_code=400, detail="Game is already over")
        if session.to_move is not Player.COMPUTER:
            raise HTTPException(status_code=400, detail="It is the human's turn")
        move = session.play_computer_move()
        return {**session.to_dict(), "computer_move": move if move != NO_MOVE else None}


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _session_lock:
        board = parse_board(req.board) if req.board is not None else session.board
        search = SearchEngine(depth=session.search.max_depth, random_move_probability=0.0)

    scores = search.score_moves(board)
    best = pick_best(scores)
    return {
        "best_move": best,
        "scores": {str(i): s for i, s in scores.items()},
        "nodes": search.nodes,
        "status": evaluate(board).status.value,
    }


@app.post("/reset")
def reset_game():
    with _session_lock:
        session.reset()
        return session.to_dict()


if __name__ == "__main__":
    import uvicorn

    setup_logging(CONFIG.log_level)
    uvicorn.run(app, host="0.0.0.0", port=CONFIG.ui.api_port)
