#!/usr/bin/env python3
"""Compare minimax and alpha-beta on a single position."""

import argparse
import json
import logging
from pathlib import Path

from pentago import PentagoBoard, compare_algorithms


def load_position(path_str: str) -> PentagoBoard:
    """Read six rows of ``.``/``X``/``O`` from a text file."""
    rows = [line for line in Path(path_str).read_text().splitlines() if line.strip()]
    return PentagoBoard.from_rows(rows)


def main() -> None:
    parser = argparse.ArgumentParser(description="Compare minimax and alpha-beta node counts.")
    parser.add_argument("--position", type=str, help="File with six board rows; empty board if omitted")
    parser.add_argument("--depth", type=int, default=1)
    parser.add_argument("--side", choices=["max", "min"], default="max")
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    board = load_position(args.position) if args.position else PentagoBoard()
    print(board.render())
    result = compare_algorithms(board, args.depth, args.side == "max")
    summary = {
        "depth": result.depth,
        "minimax": {"result": result.minimax.as_tuple(), "nodes": result.minimax_nodes},
        "alphabeta": {"result": result.alphabeta.as_tuple(), "nodes": result.alphabeta_nodes},
        "scores_match": result.scores_match,
        "nodes_saved": result.nodes_saved,
    }
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
