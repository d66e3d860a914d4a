from __future__ import annotations

from .engine.board import STARTPOS_FEN, Board
from .engine.game import Game
from .engine.move import NULL_MOVE, Move, parse_uci
from .engine.san import board_san

__all__ = ["Board", "Game", "Move", "NULL_MOVE", "STARTPOS_FEN", "board_san", "parse_uci"]
__version__ = "0.1.0"
