from __future__ import annotations

from typing import List

from .attacks import bishop_attacks, king_attacks, knight_attacks, rook_attacks
from .bitboard import BB_SQUARES, FILE_NAMES, RANK_NAMES, scan_forward, square_file, square_rank
from .board import Board
from .move import Move
from .pieces import ALL, BISHOP, KING, KNIGHT, NO_PIECE, PAWN, QUEEN, ROOK, piece_symbol


def board_san(board: Board, move: Move) -> str:
    """Render ``move`` in Standard Algebraic Notation.

    ``board`` is the position before the move and is not modified. The
    null move or an empty source square renders as ``"--"``. A trailing
    ``#`` marks a move after which the side to move has no pseudo-legal
    move; there is no ``+`` marker.
    """
    from_sq, to_sq = move.from_sq, move.to_sq
    pt = board.piece_type_at(from_sq) if move else NO_PIECE
    if pt == NO_PIECE:
        return "--"

    parts: List[str] = []
    if pt == PAWN:
        if square_file(from_sq) != square_file(to_sq):
            parts.append(FILE_NAMES[square_file(from_sq)] + "x")
    else:
        parts.append(piece_symbol(pt))
        parts.append(_disambiguation(board, pt, from_sq, to_sq))
        if board.occupied[ALL] & BB_SQUARES[to_sq]:
            parts.append("x")

    parts.append(FILE_NAMES[square_file(to_sq)] + RANK_NAMES[square_rank(to_sq)])

    if move.promotion:
        parts.append("=" + piece_symbol(move.promotion))

    after = board.copy()
    after.push(move)
    if after.is_game_over():
        parts.append("#")

    return "".join(parts)


def _disambiguation(board: Board, pt: int, from_sq: int, to_sq: int) -> str:
    occupied = board.occupied[ALL]
    candidates = 0
    if pt == KING:
        candidates = king_attacks(to_sq)
    elif pt == KNIGHT:
        candidates = knight_attacks(to_sq)
    if pt in (ROOK, QUEEN):
        candidates |= rook_attacks(to_sq, occupied)
    if pt in (BISHOP, QUEEN):
        candidates |= bishop_attacks(to_sq, occupied)
    candidates &= board.pieces(pt, board.turn)

    need_file = need_rank = False
    for sq in scan_forward(candidates & ~BB_SQUARES[from_sq]):
        if square_rank(sq) == square_rank(from_sq):
            need_file = True
        if square_file(sq) == square_file(from_sq):
            need_rank = True
        else:
            need_file = True

    return (FILE_NAMES[square_file(from_sq)] if need_file else "") + (
        RANK_NAMES[square_rank(from_sq)] if need_rank else ""
    )
