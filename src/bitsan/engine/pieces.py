from __future__ import annotations

from typing import Dict, Optional


# Piece type indices; 0 doubles as "no piece" and as the aggregate slot of
# Board.occupied.
NO_PIECE = ALL = 0
PAWN, KNIGHT, BISHOP, ROOK, QUEEN, KING = range(1, 7)
PIECE_TYPES = (PAWN, KNIGHT, BISHOP, ROOK, QUEEN, KING)

WHITE, BLACK = 0, 1
COLOR_NAMES = ("w", "b")

PIECE_SYMBOLS = ("", "P", "N", "B", "R", "Q", "K")
CHAR_TO_PIECE: Dict[str, int] = {PIECE_SYMBOLS[pt]: pt for pt in PIECE_TYPES}


def piece_symbol(piece_type: int, color: int = WHITE) -> str:
    """Return the letter for a piece: uppercase for White, lowercase for Black."""
    symbol = PIECE_SYMBOLS[piece_type]
    return symbol if color == WHITE else symbol.lower()


def piece_from_symbol(ch: str) -> Optional[tuple[int, int]]:
    """Map a FEN letter to ``(piece_type, color)``, or None if unknown."""
    pt = CHAR_TO_PIECE.get(ch.upper())
    if pt is None:
        return None
    return pt, (WHITE if ch.isupper() else BLACK)
