#!/usr/bin/env python3
"""Play Pentago against the computer in the console, with optional logging & replay."""

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from pentago import ComputerPlayer, IllegalMoveError, Marker, Move, PentagoBoard, Rotation, SearchConfig, SearchError

DIRECTION_NAMES = {"cw": Rotation.CW, "ccw": Rotation.CCW, "0": Rotation.CW, "1": Rotation.CCW}


def load_search_config(
    config_path: Optional[str],
    *,
    depth: Optional[int] = None,
    algorithm: Optional[str] = None,
) -> SearchConfig:
    cfg: Dict = {}
    if config_path:
        path = Path(config_path)
        if path.exists():
            cfg = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    search_cfg = dict(cfg.get("search", {}))
    if depth is not None:
        search_cfg["depth"] = depth
    if algorithm is not None:
        search_cfg["algorithm"] = algorithm
    config = SearchConfig(**search_cfg)
    config.validate()
    return config


def parse_move(raw: str) -> Move:
    """Parse ``"row col quadrant cw|ccw"`` into a move."""
    parts = raw.split()
    if len(parts) != 4:
        raise IllegalMoveError("Enter four values: row col quadrant cw|ccw")
    try:
        row, col, block = (int(p) for p in parts[:3])
    except ValueError as exc:
        raise IllegalMoveError("Row, column and quadrant must be integers.") from exc
    direction = DIRECTION_NAMES.get(parts[3].lower())
    if direction is None:
        raise IllegalMoveError(f"Unknown rotation {parts[3]!r}; use cw or ccw.")
    return Move(row, col, block, direction)


def prompt_human_move(board: PentagoBoard, marker: Marker) -> Move:
    while True:
        raw = input("Your move: row col quadrant cw|ccw (q to quit): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("Quitting.")
            sys.exit(0)
        try:
            move = parse_move(raw)
            board.place(move, marker)
        except IllegalMoveError as exc:
            print(f"Illegal move: {exc}")
            continue
        return move


def move_record(move_index: int, actor: str, marker: Marker, move: Move) -> Dict:
    return {
        "move_index": move_index,
        "actor": actor,
        "marker": marker.name,
        "row": move.row,
        "col": move.col,
        "block": move.block,
        "direction": move.direction.name,
    }


def result_name(winner: Optional[Marker]) -> str:
    if winner is None:
        return "ongoing"
    if winner == Marker.EMPTY:
        return "draw"
    return f"{winner.name.lower()}_win"


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, indent=2))
    print(f"Game log saved to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    moves = data.get("moves", [])
    board = PentagoBoard()
    if verbose:
        print("Replaying logged game.")
        print(board.render())
    for entry in moves:
        move = Move(entry["row"], entry["col"], entry["block"], Rotation[entry["direction"]])
        marker = Marker[entry["marker"]]
        board.place(move, marker)
        if verbose:
            print(f"{entry.get('actor', 'unknown')} ({marker.symbol}) plays {move}")
            print(board.render())
    summary = {
        "result": result_name(board.winner()),
        "moves": len(moves),
        "board": board.grid.tolist(),
    }
    if verbose:
        print("Replay finished.")
        print(f"Result: {summary['result']}")
    return summary


def play_interactive(args: argparse.Namespace) -> None:
    config = load_search_config(args.config, depth=args.depth, algorithm=args.algorithm)
    if config.depth < 1:
        raise SearchError(f"Playing needs a search depth of at least 1, got {config.depth}.")
    computer = ComputerPlayer(config)
    print(f"Computer searches with {config.algorithm} at depth {config.depth}.")

    rng = random.Random(args.seed)
    if args.first == "human":
        human_first = True
    elif args.first == "ai":
        human_first = False
    else:
        human_first = rng.random() < 0.5
    # The first mover always plays the maximizing side.
    human_marker = Marker.MAX if human_first else Marker.MIN
    print(f"You play {human_marker.symbol}; {'you move' if human_first else 'computer moves'} first.")

    board = PentagoBoard()
    log_records: List[Dict] = []
    maximizing = True
    while board.winner() is None:
        marker = Marker.for_side(maximizing)
        print("\nBoard:")
        print(board.render())
        if marker == human_marker:
            move = prompt_human_move(board, marker)
            actor = "human"
        else:
            before = computer.nodes_expanded
            result = computer.choose_move(board, maximizing)
            move = result.move
            board.place(move, marker)
            actor = "ai"
            print(f"Computer plays {move} (score {result.score}, {computer.nodes_expanded - before} nodes)")
        log_records.append(move_record(len(log_records), actor, marker, move))
        maximizing = not maximizing

    print("\nFinal board:")
    print(board.render())
    winner = board.winner()
    if winner == human_marker:
        print("You win!")
    elif winner == Marker.EMPTY:
        print("Draw.")
    else:
        print("Computer wins.")

    if args.log_file:
        metadata = {
            "human_marker": human_marker.name,
            "algorithm": config.algorithm,
            "depth": config.depth,
            "result": result_name(winner),
        }
        save_log({"metadata": metadata, "moves": log_records}, Path(args.log_file))


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Pentago in the console against the computer.")
    parser.add_argument("--config", type=str, default="configs/search.yaml")
    parser.add_argument("--depth", type=int)
    parser.add_argument("--algorithm", choices=["alphabeta", "minimax"])
    parser.add_argument("--first", choices=["human", "ai", "random"], default="random")
    parser.add_argument("--seed", type=int)
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--log-level", type=str, default="WARNING")
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    play_interactive(args)


if __name__ == "__main__":
    main()
