from __future__ import annotations

from bitsan.engine.board import Board
from bitsan.engine.move import parse_uci
from bitsan.engine.pieces import BLACK, WHITE


# White king boxed in on h1 by its own pawns; every pawn is blocked and
# nothing black stands on a capture square.
BOXED_IN = "k5PP/6PP/6PP/6PP/6PP/6PP/6PP/6PK w - - 0 1"


def test_startpos_is_not_over() -> None:
    assert not Board.startpos().is_game_over()


def test_side_without_pieces_is_over() -> None:
    b = Board.startpos()
    b.occupied_co[BLACK] = 0
    assert b.is_game_over()
    b = Board.startpos()
    b.occupied_co[WHITE] = 0
    b.turn = BLACK
    assert b.is_game_over()


def test_no_pseudo_legal_move_is_over() -> None:
    assert Board.from_fen(BOXED_IN).is_game_over()


def test_black_to_move_in_boxed_position_still_has_moves() -> None:
    b = Board.from_fen(BOXED_IN.replace(" w ", " b "))
    assert not b.is_game_over()


def test_pawn_capture_counts_as_a_move() -> None:
    # A black piece on f5 is capturable by the g4 pawn
    assert not Board.from_fen("k5PP/6PP/6PP/5nPP/6PP/6PP/6PP/6PK w - - 0 1").is_game_over()


def test_single_pawn_push_counts_as_a_move() -> None:
    # Remove the g7 pawn: g6 can now advance
    assert not Board.from_fen("k5PP/7P/6PP/6PP/6PP/6PP/6PP/6PK w - - 0 1").is_game_over()


def test_en_passant_counts_as_a_move() -> None:
    # Blocked pawns on both sides; only d5xe6 e.p. remains for White
    fen = "4k3/8/3n4/3Pp3/3p4/3P4/8/8 w - e6 0 1"
    b = Board.from_fen(fen)
    assert not b.is_game_over()
    b.ep_square = None
    assert b.is_game_over()


def test_king_step_counts_as_a_move() -> None:
    assert not Board.from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1").is_game_over()


def test_knight_move_counts_as_a_move() -> None:
    # Replace the g1 pawn with a knight that can jump to f3
    assert not Board.from_fen("k5PP/6PP/6PP/6PP/6PP/6PP/6PP/6NK w - - 0 1").is_game_over()


def test_game_over_after_pushing_into_blockade() -> None:
    b = Board.from_fen("1k4PP/6PP/6PP/6PP/6PP/6PP/6PP/6PK b - - 0 1")
    assert not b.is_game_over()
    b.push(parse_uci("b8a8"))
    assert b.is_game_over()
