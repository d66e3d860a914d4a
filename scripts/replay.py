#!/usr/bin/env python3
# ruff: noqa: E402
from __future__ import annotations

import argparse
import os
import sys

# Allow running this script directly via `python scripts/replay.py`
# by adding the repo's src/ to sys.path.
SRC_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from bitsan.engine.board import STARTPOS_FEN
from bitsan.engine.game import Game


def main() -> int:
    parser = argparse.ArgumentParser(description="Replay UCI moves and print their SAN")
    parser.add_argument(
        "--fen", type=str, default=STARTPOS_FEN, help="FEN string (default: startpos)"
    )
    parser.add_argument("--board", action="store_true", help="Print the final board")
    parser.add_argument("moves", nargs="*", help="UCI moves, e.g. e2e4 e7e5")
    args = parser.parse_args()

    try:
        game = Game.from_fen(args.fen)
    except ValueError as e:
        print(f"invalid FEN: {e}", file=sys.stderr)
        return 1

    for uci in args.moves:
        try:
            print(game.apply_uci(uci))
        except ValueError as e:
            print(f"{uci}: {e}", file=sys.stderr)
            return 1

    if args.board:
        print(game.board, end="")
        if game.is_over():
            print("game over")
    return 0


if __name__ == "__main__":
    sys.exit(main())
