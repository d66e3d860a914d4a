from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .attacks import bishop_attacks, knight_attacks, rook_attacks
from .bitboard import (
    BB_ALL,
    BB_FILE_A,
    BB_FILE_H,
    BB_SQUARES,
    parse_square,
    scan_forward,
    square,
    square_distance,
    square_file,
    square_name,
    square_rank,
)
from .move import Move
from .pieces import (
    ALL,
    BISHOP,
    BLACK,
    COLOR_NAMES,
    KING,
    KNIGHT,
    NO_PIECE,
    PAWN,
    PIECE_TYPES,
    QUEEN,
    ROOK,
    WHITE,
    piece_from_symbol,
    piece_symbol,
)


logger = logging.getLogger(__name__)

STARTPOS_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_START_OCCUPIED = (
    0xFFFF_0000_0000_FFFF,  # ALL
    0x00FF_0000_0000_FF00,  # PAWN
    0x4200_0000_0000_0042,  # KNIGHT
    0x2400_0000_0000_0024,  # BISHOP
    0x8100_0000_0000_0081,  # ROOK
    0x0800_0000_0000_0008,  # QUEEN
    0x1000_0000_0000_0010,  # KING
)
_START_OCCUPIED_CO = (0x0000_0000_0000_FFFF, 0xFFFF_0000_0000_0000)


def _empty_occupied() -> List[int]:
    return [0] * 7


def _empty_occupied_co() -> List[int]:
    return [0, 0]


@dataclass
class Board:
    """Position held as bitboards.

    Notes:
    - ``occupied[pt]`` holds the squares of piece type ``pt`` for both
      colors; ``occupied[ALL]`` is their union.
    - ``occupied_co[color]`` holds the squares of one color.
    - ``ep_square`` is the square a pawn may move to in order to capture en
      passant, or None.
    - Castling rights, move clocks and check are not modeled.
    """

    occupied: List[int] = field(default_factory=_empty_occupied)
    occupied_co: List[int] = field(default_factory=_empty_occupied_co)
    turn: int = WHITE
    ep_square: Optional[int] = None

    @classmethod
    def startpos(cls) -> "Board":
        """Create a board initialized to the standard chess starting position."""
        board = cls()
        board.reset()
        return board

    def reset(self) -> None:
        """Restore the starting position in place: White to move, no ep target."""
        self.occupied = list(_START_OCCUPIED)
        self.occupied_co = list(_START_OCCUPIED_CO)
        self.turn = WHITE
        self.ep_square = None

    def copy(self) -> "Board":
        return Board(
            occupied=list(self.occupied),
            occupied_co=list(self.occupied_co),
            turn=self.turn,
            ep_square=self.ep_square,
        )

    @classmethod
    def from_fen(cls, fen: str) -> "Board":
        """Create a board from a Forsyth–Edwards Notation (FEN) string.

        Only piece placement, side to move and the en-passant square are
        read. Trailing fields may be omitted; castling rights and move
        counters are checked for shape and otherwise ignored.

        Raises:
            ValueError: If ``fen`` is empty, has too many fields, or contains
                invalid piece placement, side to move, en passant square, or
                move counters.
        """
        if not fen or not isinstance(fen, str):
            raise ValueError("FEN must be a non-empty string")
        parts = fen.strip().split()
        if not parts or len(parts) > 6:
            raise ValueError("FEN must have 1 to 6 fields")
        placement = parts[0]
        stm = parts[1] if len(parts) > 1 else "w"
        castling = parts[2] if len(parts) > 2 else "-"
        ep = parts[3] if len(parts) > 3 else "-"

        board = cls()
        ranks = placement.split("/")
        if len(ranks) != 8:
            raise ValueError("FEN board must have 8 ranks")
        for rank_idx, row in enumerate(ranks[::-1]):  # start from rank 1 (bottom)
            file_idx = 0
            for ch in row:
                if ch.isdigit():
                    n = int(ch)
                    if n < 1 or n > 8:
                        raise ValueError("invalid empty count in FEN rank")
                    file_idx += n
                    continue
                piece = piece_from_symbol(ch)
                if piece is None:
                    raise ValueError(f"invalid piece in FEN: {ch!r}")
                if file_idx >= 8:
                    raise ValueError("too many squares in FEN rank")
                board._put(square(file_idx, rank_idx), *piece)
                file_idx += 1
            if file_idx != 8:
                raise ValueError("rank does not sum to 8 squares in FEN")

        if stm not in COLOR_NAMES:
            raise ValueError("side to move must be 'w' or 'b'")
        board.turn = COLOR_NAMES.index(stm)

        if castling != "-" and any(ch not in "KQkq" for ch in castling):
            raise ValueError("invalid castling rights")

        if ep != "-":
            try:
                board.ep_square = parse_square(ep)
            except ValueError as e:
                raise ValueError("invalid en passant square") from e
            if square_rank(board.ep_square) not in (2, 5):
                raise ValueError("invalid en passant square rank")

        for counter in parts[4:]:
            if not counter.isdigit():
                raise ValueError("invalid move counters in FEN")
        return board

    def to_fen(self, halfmove_clock: int = 0, fullmove_number: int = 1) -> str:
        """Serialize the position into FEN; castling rights are always ``-``."""
        rows: List[str] = []
        for rank_idx in range(7, -1, -1):
            run = 0
            row = []
            for file_idx in range(8):
                sq = square(file_idx, rank_idx)
                pt = self.piece_type_at(sq)
                if pt == NO_PIECE:
                    run += 1
                    continue
                if run:
                    row.append(str(run))
                    run = 0
                row.append(piece_symbol(pt, self.color_at(sq)))
            if run:
                row.append(str(run))
            rows.append("".join(row))
        ep = square_name(self.ep_square) if self.ep_square is not None else "-"
        return (
            f"{'/'.join(rows)} {COLOR_NAMES[self.turn]} - {ep} "
            f"{halfmove_clock} {fullmove_number}"
        )

    def _put(self, sq: int, piece_type: int, color: int) -> None:
        mask = BB_SQUARES[sq]
        self.occupied[ALL] |= mask
        self.occupied[piece_type] |= mask
        self.occupied_co[color] |= mask

    def pieces(self, piece_type: int, color: int) -> int:
        return self.occupied[piece_type] & self.occupied_co[color]

    def piece_type_at(self, sq: int) -> int:
        """Return the piece type on ``sq``, or ``NO_PIECE`` when empty."""
        mask = BB_SQUARES[sq]
        for pt in PIECE_TYPES:
            if self.occupied[pt] & mask:
                return pt
        return NO_PIECE

    def color_at(self, sq: int) -> Optional[int]:
        mask = BB_SQUARES[sq]
        if self.occupied_co[WHITE] & mask:
            return WHITE
        if self.occupied_co[BLACK] & mask:
            return BLACK
        return None

    def push(self, move: Move) -> bool:
        """Apply ``move`` in place without any legality checking.

        Handles captures, en passant captures, double-push ep targets and
        promotion, then flips the side to move.

        Returns:
            bool: False, with the board untouched, for the null move or when
                ``from_sq`` is empty; True otherwise.
        """
        if not move:
            return False
        from_sq, to_sq = move.from_sq, move.to_sq
        pt = self.piece_type_at(from_sq)
        if pt == NO_PIECE:
            logger.debug("no piece on %s, ignoring %s", square_name(from_sq), move.to_uci())
            return False

        us, them = self.turn, self.turn ^ 1
        self.ep_square = None

        from_bb = BB_SQUARES[from_sq]
        self.occupied_co[us] &= ~from_bb
        self.occupied[ALL] &= ~from_bb
        self.occupied[pt] &= ~from_bb

        to_bb = BB_SQUARES[to_sq]
        captured = self.piece_type_at(to_sq)
        if captured:
            self.occupied_co[them] &= ~to_bb
            self.occupied[captured] &= ~to_bb

        if pt == PAWN:
            if square_file(from_sq) != square_file(to_sq) and not captured:
                # En passant: the captured pawn sits behind the destination
                victim_sq = to_sq - 8 if us == WHITE else to_sq + 8
                if 0 <= victim_sq < 64:
                    victim_bb = BB_SQUARES[victim_sq]
                    self.occupied_co[them] &= ~victim_bb
                    self.occupied[ALL] &= ~victim_bb
                    self.occupied[PAWN] &= ~victim_bb
            elif square_distance(from_sq, to_sq) == 2:
                self.ep_square = from_sq + 8 if us == WHITE else from_sq - 8

        if move.promotion:
            pt = move.promotion
        self.occupied_co[us] |= to_bb
        self.occupied[ALL] |= to_bb
        self.occupied[pt] |= to_bb

        self.turn = them
        return True

    def is_game_over(self) -> bool:
        """Return True if the side to move has no pseudo-legal move.

        A side without any pieces ends the game as well. Self-check is not
        considered and castling never counts as an available move.
        """
        if not self.occupied_co[WHITE] or not self.occupied_co[BLACK]:
            return True

        us = self.occupied_co[self.turn]
        them = self.occupied_co[self.turn ^ 1]
        occupied = self.occupied[ALL]

        pawns = self.occupied[PAWN] & us
        if self.turn == WHITE:
            pawn_attacks = ((pawns << 7) & ~BB_FILE_H) | ((pawns << 9) & ~BB_FILE_A)
            pawn_pushes = pawns << 8
        else:
            pawn_attacks = ((pawns >> 9) & ~BB_FILE_H) | ((pawns >> 7) & ~BB_FILE_A)
            pawn_pushes = pawns >> 8
        pawn_attacks &= BB_ALL
        pawn_pushes &= BB_ALL
        if pawn_attacks & them:
            return False
        if self.ep_square is not None and pawn_attacks & BB_SQUARES[self.ep_square]:
            return False
        if pawn_pushes & ~occupied:
            return False

        for sq in scan_forward(self.occupied[KNIGHT] & us):
            if knight_attacks(sq) & ~us:
                return False

        # Kings are scanned with both slider families.
        diagonal = (self.occupied[BISHOP] | self.occupied[QUEEN] | self.occupied[KING]) & us
        for sq in scan_forward(diagonal):
            if bishop_attacks(sq, occupied) & ~us:
                return False

        straight = (self.occupied[ROOK] | self.occupied[QUEEN] | self.occupied[KING]) & us
        for sq in scan_forward(straight):
            if rook_attacks(sq, occupied) & ~us:
                return False

        return True

    def __str__(self) -> str:
        rows = []
        for rank_idx in range(7, -1, -1):
            cells = []
            for file_idx in range(8):
                sq = square(file_idx, rank_idx)
                pt = self.piece_type_at(sq)
                cells.append(piece_symbol(pt, self.color_at(sq)) if pt else ".")
            rows.append(" ".join(cells))
        return "\n".join(rows) + "\n"
