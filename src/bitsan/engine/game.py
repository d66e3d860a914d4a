from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .bitboard import square_name
from .board import Board
from .move import Move, parse_uci
from .pieces import BLACK, NO_PIECE, PAWN
from .san import board_san


@dataclass
class Game:
    """Game wrapper around a board with helper operations.

    Responsibility: drive one position move by move, keep UCI/SAN history
    and the move clocks, and reject moves the board itself would silently
    ignore.
    """

    board: Board
    halfmove_clock: int = 0
    fullmove_number: int = 1
    # (move, san, board before the move, clocks before the move)
    history: List[Tuple[Move, str, Board, Tuple[int, int]]] = field(default_factory=list)

    @classmethod
    def new(cls) -> "Game":
        return cls(board=Board.startpos())

    @classmethod
    def from_fen(cls, fen: str) -> "Game":
        board = Board.from_fen(fen)
        counters = fen.split()[4:]
        halfmove = int(counters[0]) if counters else 0
        fullmove = int(counters[1]) if len(counters) > 1 else 1
        return cls(board=board, halfmove_clock=halfmove, fullmove_number=max(1, fullmove))

    def to_fen(self) -> str:
        return self.board.to_fen(self.halfmove_clock, self.fullmove_number)

    def apply_move(self, move: Move) -> str:
        """Play ``move`` and return its SAN rendered against the prior position.

        Raises:
            ValueError: For the null move, or when ``from_sq`` does not hold a
                piece of the side to move.
        """
        if not move:
            raise ValueError("null move")
        if self.board.color_at(move.from_sq) != self.board.turn:
            raise ValueError(f"no piece to move on {square_name(move.from_sq)}")
        san = board_san(self.board, move)
        before = self.board.copy()
        clocks = (self.halfmove_clock, self.fullmove_number)

        # Pawn moves and captures reset the halfmove clock
        pawn_move = before.piece_type_at(move.from_sq) == PAWN
        capture = before.piece_type_at(move.to_sq) != NO_PIECE
        self.halfmove_clock = 0 if pawn_move or capture else self.halfmove_clock + 1
        if before.turn == BLACK:
            self.fullmove_number += 1

        self.board.push(move)
        self.history.append((move, san, before, clocks))
        return san

    def apply_uci(self, uci: str) -> str:
        move = parse_uci(uci)
        if not move:
            raise ValueError(f"invalid UCI move: {uci!r}")
        return self.apply_move(move)

    def undo_move(self) -> Move:
        if not self.history:
            raise ValueError("no moves to undo")
        move, _, before, clocks = self.history.pop()
        self.board = before
        self.halfmove_clock, self.fullmove_number = clocks
        return move

    def is_over(self) -> bool:
        return self.board.is_game_over()

    def move_history_uci(self) -> List[str]:
        return [entry[0].to_uci() for entry in self.history]

    def san_history(self) -> List[str]:
        return [entry[1] for entry in self.history]
