from __future__ import annotations

from bitsan.engine.attacks import (
    bishop_attacks,
    king_attacks,
    knight_attacks,
    queen_attacks,
    rook_attacks,
)
from bitsan.engine.bitboard import BB_SQUARES, parse_square, popcount, scan_forward, square_name


def squares(bb: int) -> set[str]:
    return {square_name(sq) for sq in scan_forward(bb)}


def test_rook_on_empty_board_covers_file_and_rank() -> None:
    bb = rook_attacks(parse_square("a1"), 0)
    assert popcount(bb) == 14
    assert not bb & BB_SQUARES[parse_square("a1")]


def test_rook_ray_stops_at_first_blocker_inclusive() -> None:
    blocker = BB_SQUARES[parse_square("a4")]
    bb = rook_attacks(parse_square("a1"), blocker)
    assert {"a2", "a3", "a4"} <= squares(bb)
    assert "a5" not in squares(bb)


def test_rook_does_not_wrap_around_board_edge() -> None:
    bb = rook_attacks(parse_square("h1"), 0)
    assert "a2" not in squares(bb)
    assert popcount(bb) == 14


def test_bishop_rays() -> None:
    assert popcount(bishop_attacks(parse_square("d4"), 0)) == 13
    bb = bishop_attacks(parse_square("h4"), 0)
    assert "g5" in squares(bb)
    assert "a6" not in squares(bb)


def test_queen_is_rook_plus_bishop() -> None:
    sq = parse_square("d4")
    assert popcount(queen_attacks(sq, 0)) == 27


def test_knight_steps_from_corners() -> None:
    assert squares(knight_attacks(parse_square("a1"))) == {"b3", "c2"}
    assert squares(knight_attacks(parse_square("h8"))) == {"g6", "f7"}
    assert popcount(knight_attacks(parse_square("d4"))) == 8


def test_king_steps_once() -> None:
    assert squares(king_attacks(parse_square("e1"))) == {"d1", "f1", "d2", "e2", "f2"}
    assert squares(king_attacks(parse_square("a1"))) == {"a2", "b1", "b2"}
    assert popcount(king_attacks(parse_square("e4"))) == 8
