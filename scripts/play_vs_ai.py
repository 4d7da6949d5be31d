#!/usr/bin/env python3
"""Play Five Horse in the console, against a friend or the alpha-beta computer."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from fivehorse.core import Move, Player, enumerate_legal_moves
from fivehorse.env import render_ascii
from fivehorse.search import SearchConfig
from fivehorse.session import GameMode, GameSession, SessionConfig


def load_yaml_config(path_str: Optional[str]) -> Dict:
    if not path_str:
        return {}
    path = Path(path_str)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def build_session_config(cfg: Dict, args: Optional[argparse.Namespace] = None) -> SessionConfig:
    search_cfg = dict(cfg.get("search", {}))
    mode = cfg.get("mode", "pvp")
    computer_side = cfg.get("computer_side", "white")
    if args is not None:
        if args.depth is not None:
            search_cfg["depth"] = args.depth
        if args.mode is not None:
            mode = args.mode
        if args.computer_side is not None:
            computer_side = args.computer_side
    return SessionConfig(
        mode=GameMode(mode),
        computer_side=Player[computer_side.upper()],
        search=SearchConfig(**search_cfg),
    )


def describe_move(move: Move) -> str:
    text = f"{move.source} -> {move.destination}"
    if move.capture_steps:
        groups = " then ".join("[" + ", ".join(group) + "]" for group in move.capture_steps)
        text += f" captures {groups}"
    return text


def prompt_human_move(session: GameSession) -> Optional[Move]:
    """Return the chosen move, or ``None`` when the player asked to undo."""
    while True:
        raw = input(f"{session.position.side_to_move.name} to move (node, 'u' undo, 'q' quit): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("Game over.")
            sys.exit(0)
        if raw.lower() in {"u", "undo"}:
            if session.undo():
                return None
            print("Nothing to undo.")
            continue
        try:
            moves: List[Move] = session.select(raw)
        except KeyError:
            print(f"Unknown node {raw!r}.")
            continue
        if not moves:
            print("That node has no legal moves.")
            continue
        for idx, move in enumerate(moves):
            print(f"  {idx}: {describe_move(move)}")
        choice = input("move index (blank to reselect): ").strip()
        if choice.isdigit() and int(choice) < len(moves):
            return moves[int(choice)]


def play_interactive(config: SessionConfig) -> None:
    session = GameSession(config)
    while not session.is_over:
        print("\n" + render_ascii(session.position))
        if not enumerate_legal_moves(session.position):
            print(f"{session.position.side_to_move.name} has no legal move.")
            break
        if session.is_computer_turn():
            record = session.computer_move()
            print(f"Computer plays {describe_move(record.move)}")
            continue
        move = prompt_human_move(session)
        if move is None:
            continue
        record = session.play(move)
        for step, frame in enumerate(record.frames[1:], start=1):
            print(f"capture step {step}:\n{render_ascii(frame)}")

    print("\nFinal board:")
    print(render_ascii(session.position))
    if session.winner is not None:
        print(f"{session.winner.name} wins after {session.turn_count} turns!")


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Five Horse in the console.")
    parser.add_argument("--config", type=str, default="configs/play.yaml")
    parser.add_argument("--mode", choices=[mode.value for mode in GameMode])
    parser.add_argument("--computer-side", choices=["black", "white"])
    parser.add_argument("--depth", type=int)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    config = build_session_config(load_yaml_config(args.config), args)
    play_interactive(config)


if __name__ == "__main__":
    main()
