from __future__ import annotations

from typing import Sequence

from .bitboard import BB_ALL, BB_SQUARES, square_distance


# Deltas in square-index units: +8 is one rank up, +1 one file right.
ROOK_DELTAS = (8, 1, -8, -1)
BISHOP_DELTAS = (9, -9, 7, -7)
KING_DELTAS = (8, 1, -8, -1, 9, -9, 7, -7)
KNIGHT_DELTAS = (17, 15, 10, 6, -6, -10, -15, -17)


def sliding_attacks(deltas: Sequence[int], sq: int, occupied: int) -> int:
    """Return the squares reached by walking each delta ray from ``sq``.

    A ray includes its first occupied square and stops there. A step whose
    king distance from the previous square exceeds 2 has wrapped around a
    board edge, which ends the ray as well. Knight jumps have distance 2,
    so the same guard serves the stepping families.
    """
    attack = 0
    for delta in deltas:
        s = sq + delta
        while 0 <= s < 64 and square_distance(s, s - delta) <= 2:
            attack |= BB_SQUARES[s]
            if occupied & BB_SQUARES[s]:
                break
            s += delta
    return attack


def step_attacks(deltas: Sequence[int], sq: int) -> int:
    """Single-step variant for kings and knights: every ray has length 1."""
    return sliding_attacks(deltas, sq, BB_ALL)


def rook_attacks(sq: int, occupied: int) -> int:
    return sliding_attacks(ROOK_DELTAS, sq, occupied)


def bishop_attacks(sq: int, occupied: int) -> int:
    return sliding_attacks(BISHOP_DELTAS, sq, occupied)


def queen_attacks(sq: int, occupied: int) -> int:
    return rook_attacks(sq, occupied) | bishop_attacks(sq, occupied)


def knight_attacks(sq: int) -> int:
    return step_attacks(KNIGHT_DELTAS, sq)


def king_attacks(sq: int) -> int:
    return step_attacks(KING_DELTAS, sq)
