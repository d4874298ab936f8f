"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import os

from rich.console import Console

from scrabble.constants import DEFAULT_HAND_SIZE, DEFAULT_MIN_WORD_LENGTH, MAX_PLAYERS
from scrabble.errors import FileError
from scrabble.game import Game, GameConfig
from scrabble.player import ComputerPlayer

log = logging.getLogger("scrabble")

_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Scrabble -- play against friends or the computer",
    )
    parser.add_argument("--board", type=str, default=os.path.join(_DATA_DIR, "board.txt"),
                        help="Path to the board layout file")
    parser.add_argument("--dict", type=str, default=os.path.join(_DATA_DIR, "dictionary.txt"),
                        help="Path to dictionary / word list file")
    parser.add_argument("--bag", type=str, default=None,
                        help="Path to a tile bag file (default: standard 100 tiles)")
    parser.add_argument("--hand-size", type=int, default=DEFAULT_HAND_SIZE,
                        help="Tiles per hand")
    parser.add_argument("--min-word-length", type=int, default=DEFAULT_MIN_WORD_LENGTH,
                        help="Fewest tiles a placement may use")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for tile draws")
    parser.add_argument("--computers", type=int, default=0, metavar="N",
                        help="Skip player setup and pit N computer players against each other")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if not 0 <= args.computers <= MAX_PLAYERS:
        log.error("--computers must be between 0 and %d", MAX_PLAYERS)
        return 1

    config = GameConfig(
        board_path=args.board,
        dictionary_path=args.dict,
        bag_path=args.bag,
        hand_size=args.hand_size,
        minimum_word_length=args.min_word_length,
        seed=args.seed,
    )
    console = Console()
    try:
        game = Game.from_config(config, console)
    except FileError as exc:
        log.error("%s", exc)
        return 1

    try:
        if args.computers:
            for i in range(args.computers):
                game.add_player(ComputerPlayer(f"Computer {i + 1}", config.hand_size))
        else:
            game.add_players_interactive()
        game.play()
    except (EOFError, KeyboardInterrupt):
        console.print()
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
