"""
Command-line entry point for terminal Minesweeper.

Usage:
    python main.py <board_size> <num_mines> [--seed N] [--log-file PATH]
"""
import argparse
import logging
import sys
import termios
from typing import List, Optional

from .board import Board, BoardConfig
from .events import Game
from .terminal import KeyReader, TerminalView, play

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="minesweeper",
        description="Play Minesweeper in the terminal",
    )
    parser.add_argument("board_size", type=int, help="Board size (NxN)")
    parser.add_argument(
        "num_mines",
        type=int,
        help="Number of mines (at most board_size**2 - 1; one cell must be safe)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    parser.add_argument(
        "--log-file", default=None, help="Write log records to this file"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Log level used with --log-file",
    )
    return parser


def parse_config(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> BoardConfig:
    """
    Build a validated board configuration from parsed arguments.

    Invalid values end the program with a usage error instead of
    falling back to defaults.
    """
    try:
        return BoardConfig(args.board_size, args.num_mines, args.seed)
    except ValueError as exc:
        parser.error(str(exc))


def configure_logging(log_file: Optional[str], level: str) -> None:
    """Send log records to a file; the terminal belongs to the game view."""
    if log_file is None:
        return
    logging.basicConfig(filename=log_file, level=level, format=LOG_FORMAT)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run one game."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = parse_config(parser, args)
    configure_logging(args.log_file, args.log_level)

    logger.info(
        "Starting %dx%d game with %d mines",
        config.size, config.size, config.num_mines,
    )
    game = Game(Board(config))

    try:
        with TerminalView() as view:
            final = play(game, KeyReader(), view)
    except (termios.error, OSError) as exc:
        logger.error("Terminal unavailable: %s", exc)
        print(f"minesweeper: cannot use terminal: {exc}", file=sys.stderr)
        return 1

    if final.game_over:
        print(final.status_message)
    return 0
