from __future__ import annotations

from typing import Iterator, Tuple


# Squares are 0..63 (a1=0 .. h8=63), rank-major from white's perspective.
BB_ALL = 0xFFFF_FFFF_FFFF_FFFF
BB_FILE_A = 0x0101_0101_0101_0101
BB_FILE_H = 0x8080_8080_8080_8080

BB_SQUARES = [1 << sq for sq in range(64)]

FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"


def square(file: int, rank: int) -> int:
    return rank * 8 + file


def square_file(sq: int) -> int:
    return sq & 7


def square_rank(sq: int) -> int:
    return sq >> 3


def square_distance(a: int, b: int) -> int:
    """Return the Chebyshev (king-move) distance between two squares."""
    return max(abs(square_rank(a) - square_rank(b)), abs(square_file(a) - square_file(b)))


def square_name(sq: int) -> str:
    """Convert a 0-based square index into algebraic notation.

    Raises:
        ValueError: If ``sq`` is outside the valid square range.
    """
    if sq < 0 or sq > 63:
        raise ValueError(f"invalid square index: {sq}")
    return FILE_NAMES[square_file(sq)] + RANK_NAMES[square_rank(sq)]


def parse_square(name: str) -> int:
    """Convert algebraic notation such as ``"e4"`` into a square index.

    Raises:
        ValueError: If ``name`` is not a valid square.
    """
    if len(name) != 2 or name[0] not in FILE_NAMES or name[1] not in RANK_NAMES:
        raise ValueError(f"invalid square: {name!r}")
    return square(FILE_NAMES.index(name[0]), RANK_NAMES.index(name[1]))


def pop_lsb(bb: int) -> Tuple[int, int]:
    """Split a non-empty bitboard into its lowest square and the remainder.

    Undefined for ``bb == 0``; callers check for emptiness first.
    """
    low = bb & -bb
    return low.bit_length() - 1, bb ^ low


def scan_forward(bb: int) -> Iterator[int]:
    """Yield the member squares of ``bb`` from lowest to highest."""
    while bb:
        sq, bb = pop_lsb(bb)
        yield sq


def popcount(bb: int) -> int:
    return bin(bb).count("1")


def render_bitboard(bb: int) -> str:
    """Render a bitboard as an 8x8 grid of ``1`` and ``.``, rank 8 first."""
    rows = []
    for rank in range(7, -1, -1):
        rows.append(
            " ".join("1" if bb & BB_SQUARES[square(file, rank)] else "." for file in range(8))
        )
    return "\n".join(rows) + "\n"
