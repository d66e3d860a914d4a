from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .bitboard import FILE_NAMES, RANK_NAMES, square, square_name
from .pieces import BISHOP, KING, KNIGHT, NO_PIECE, PAWN, QUEEN, ROOK


# Promotion letters in UCI text and their piece types.
PROMOTION_PIECES = {"n": KNIGHT, "b": BISHOP, "r": ROOK, "q": QUEEN, "k": KING}
PROMOTION_LETTERS = {pt: ch for ch, pt in PROMOTION_PIECES.items()}

# Packed layout: bits 0-5 to-square, 6-11 from-square, 12-14 promotion tag.
_SQUARE_MASK = 0o77
_FROM_SHIFT = 6
_PROMO_SHIFT = 12
_PROMO_MASK = 0o7


@dataclass(frozen=True)
class Move:
    """Engine-internal move representation.

    Attributes:
        from_sq (int): Origin square index (0-based).
        to_sq (int): Destination square index (0-based).
        promotion (Optional[int]): Piece type the mover becomes, if any.

    ``Move(0, 0)`` is the null move (see ``NULL_MOVE``); it is the only
    falsy move.
    """

    from_sq: int
    to_sq: int
    promotion: Optional[int] = None

    def __post_init__(self) -> None:
        # Pawn and "no piece" both mean no promotion
        if self.promotion in (NO_PIECE, PAWN):
            object.__setattr__(self, "promotion", None)

    def __bool__(self) -> bool:
        return self.encode() != 0

    def encode(self) -> int:
        """Pack the move into its compact integer form."""
        tag = 0
        if self.promotion is not None:
            tag = self.promotion - 1
        return self.to_sq | (self.from_sq << _FROM_SHIFT) | (tag << _PROMO_SHIFT)

    @classmethod
    def decode(cls, value: int) -> "Move":
        """Unpack an integer produced by ``encode``; 0 decodes to ``NULL_MOVE``."""
        tag = (value >> _PROMO_SHIFT) & _PROMO_MASK
        if tag > KING - 1:
            tag = 0
        return cls(
            from_sq=(value >> _FROM_SHIFT) & _SQUARE_MASK,
            to_sq=value & _SQUARE_MASK,
            promotion=tag + 1 if tag else None,
        )

    def to_uci(self) -> str:
        """Serialize the move into long algebraic UCI form.

        Returns:
            str: Move encoded like ``"e2e4"`` or ``"e7e8q"``, or ``"(none)"``
                for the null move.
        """
        if not self:
            return "(none)"
        promo = PROMOTION_LETTERS.get(self.promotion, "")
        return square_name(self.from_sq) + square_name(self.to_sq) + promo


NULL_MOVE = Move(0, 0)


def parse_uci(uci: str) -> Move:
    """Parse a UCI move string.

    Args:
        uci (str): Move in long algebraic notation (e.g. ``"e2e4"``).

    Returns:
        Move: Parsed move, or ``NULL_MOVE`` if the text has the wrong length,
            names a square off the board, or carries an unknown promotion
            letter. Callers must check for the null move before using it.
    """
    if len(uci) not in (4, 5):
        return NULL_MOVE
    for ch, names in zip(uci[:4], (FILE_NAMES, RANK_NAMES, FILE_NAMES, RANK_NAMES)):
        if ch not in names:
            return NULL_MOVE
    promotion: Optional[int] = None
    if len(uci) == 5:
        promotion = PROMOTION_PIECES.get(uci[4])
        if promotion is None:
            return NULL_MOVE
    return Move(
        from_sq=square(FILE_NAMES.index(uci[0]), RANK_NAMES.index(uci[1])),
        to_sq=square(FILE_NAMES.index(uci[2]), RANK_NAMES.index(uci[3])),
        promotion=promotion,
    )
