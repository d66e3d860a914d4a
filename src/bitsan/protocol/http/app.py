from __future__ import annotations

import logging
from typing import Dict, Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from .error import (
    exception_handler,
    http_exception_handler,
    request_validation_exception_handler,
)
from .logging_middleware import RequestIDLoggingMiddleware
from .session import InMemorySessionStore
from ...engine.bitboard import square_name
from ...engine.board import STARTPOS_FEN, Board
from ...engine.game import Game
from ...engine.move import parse_uci
from ...engine.pieces import COLOR_NAMES
from ...engine.san import board_san


logger = logging.getLogger(__name__)


class CreateGameResponse(BaseModel):
    game_id: str
    fen: str


class SetPositionRequest(BaseModel):
    fen: str = Field(..., description="FEN string")


class MoveRequest(BaseModel):
    move: str = Field(..., description="UCI move string, e.g., e2e4")


class SanRequest(BaseModel):
    move: str = Field(..., description="UCI move string, e.g., g1f3")
    fen: str = Field(default=STARTPOS_FEN, description="Position the move is played in")


class SanResponse(BaseModel):
    uci: str
    san: str


class GameState(BaseModel):
    game_id: str
    fen: str
    turn: str
    ep_square: Optional[str]
    game_over: bool
    board: str
    last_move: Optional[str]
    move_history: list[str]
    san_history: list[str]


class MoveResponse(GameState):
    san: str


def create_app(log_level: Union[int, str] = logging.INFO) -> FastAPI:
    app = FastAPI(title="bitsan", version="0.1.0")

    logging.basicConfig(level=log_level)

    app.add_middleware(RequestIDLoggingMiddleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, exception_handler)

    store = InMemorySessionStore()

    @app.get("/healthz")
    async def healthz() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/games", response_model=CreateGameResponse)
    async def create_game() -> CreateGameResponse:
        game = Game.new()
        game_id = store.create(game)
        logger.info("created game %s", game_id)
        return CreateGameResponse(game_id=game_id, fen=game.to_fen())

    @app.get("/api/games/{game_id}/state", response_model=GameState)
    async def get_state(game_id: str) -> GameState:
        return _state(game_id, _require_game(store, game_id))

    @app.post("/api/games/{game_id}/position", response_model=GameState)
    async def set_position(game_id: str, req: SetPositionRequest) -> GameState:
        _require_game(store, game_id)
        try:
            game = Game.from_fen(req.fen)
        except ValueError:
            raise HTTPException(status_code=400, detail="invalid FEN")
        store.replace(game_id, game)
        return _state(game_id, game)

    @app.post("/api/games/{game_id}/move", response_model=MoveResponse)
    async def make_move(game_id: str, req: MoveRequest) -> MoveResponse:
        game = _require_game(store, game_id)
        try:
            san = game.apply_uci(req.move)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return MoveResponse(san=san, **_state(game_id, game).model_dump())

    @app.post("/api/games/{game_id}/undo", response_model=GameState)
    async def undo(game_id: str) -> GameState:
        game = _require_game(store, game_id)
        try:
            game.undo_move()
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _state(game_id, game)

    @app.delete("/api/games/{game_id}")
    async def delete_game(game_id: str) -> Dict[str, str]:
        if not store.delete(game_id):
            raise HTTPException(status_code=404, detail="game not found")
        return {"status": "deleted"}

    @app.post("/api/san", response_model=SanResponse)
    async def san(req: SanRequest) -> SanResponse:
        try:
            board = Board.from_fen(req.fen)
        except ValueError:
            raise HTTPException(status_code=400, detail="invalid FEN")
        move = parse_uci(req.move)
        if not move:
            raise HTTPException(status_code=400, detail=f"invalid UCI move: {req.move!r}")
        return SanResponse(uci=move.to_uci(), san=board_san(board, move))

    return app


def _require_game(store: InMemorySessionStore, game_id: str) -> Game:
    game = store.get(game_id)
    if game is None:
        raise HTTPException(status_code=404, detail="game not found")
    return game


def _state(game_id: str, game: Game) -> GameState:
    board = game.board
    history = game.move_history_uci()
    return GameState(
        game_id=game_id,
        fen=game.to_fen(),
        turn=COLOR_NAMES[board.turn],
        ep_square=square_name(board.ep_square) if board.ep_square is not None else None,
        game_over=game.is_over(),
        board=str(board),
        last_move=history[-1] if history else None,
        move_history=history,
        san_history=game.san_history(),
    )
