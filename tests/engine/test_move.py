from __future__ import annotations

import pytest

from bitsan.engine.bitboard import parse_square
from bitsan.engine.move import NULL_MOVE, Move, parse_uci
from bitsan.engine.pieces import KING, KNIGHT, NO_PIECE, PAWN, QUEEN


@pytest.mark.parametrize("uci", ["e2e4", "g1f3", "a7a8q", "h2h1n", "b7c8r", "g7g8b", "e7e8k"])
def test_uci_round_trip(uci: str) -> None:
    assert parse_uci(uci).to_uci() == uci


def test_parse_uci_fields() -> None:
    mv = parse_uci("e7e8q")
    assert mv == Move(parse_square("e7"), parse_square("e8"), QUEEN)
    assert parse_uci("e2e4").promotion is None


@pytest.mark.parametrize("text", ["", "e2", "e2e2e2e2", "e2e9", "i2e4", "e7e8x", "e7e8p", "E2E4"])
def test_malformed_uci_yields_null_move(text: str) -> None:
    assert parse_uci(text) == NULL_MOVE
    assert not parse_uci(text)


def test_null_move_renders_none() -> None:
    assert NULL_MOVE.to_uci() == "(none)"
    assert NULL_MOVE.encode() == 0
    assert parse_uci("e2e4")


def test_encode_bit_layout() -> None:
    e2e4 = parse_uci("e2e4")
    assert e2e4.encode() == 28 | (12 << 6)
    promo = parse_uci("e7e8q")
    assert promo.encode() == 60 | (52 << 6) | (4 << 12)
    assert parse_uci("e7e8n").encode() >> 12 == 1
    assert parse_uci("e7e8k").encode() >> 12 == 5


def test_pawn_promotion_tag_means_no_promotion() -> None:
    assert Move(52, 60, PAWN).encode() == Move(52, 60).encode()


def test_decode_inverts_encode() -> None:
    for mv in (parse_uci("e2e4"), parse_uci("b7a8n"), Move(12, 28, KING), Move(1, 18, KNIGHT)):
        assert Move.decode(mv.encode()) == mv
    assert Move.decode(0) == NULL_MOVE


def test_no_piece_or_pawn_promotion_normalizes_to_none() -> None:
    assert Move(52, 60, NO_PIECE).promotion is None
    assert Move(52, 60, PAWN).promotion is None
    assert Move(52, 60, NO_PIECE).encode() == Move(52, 60).encode() == 60 | (52 << 6)
    assert Move(52, 60, PAWN).to_uci() == "e7e8"
    assert Move(52, 60, NO_PIECE) == Move(52, 60)
