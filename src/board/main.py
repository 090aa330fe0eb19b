"""Program entry point for the phasellus scorekeeper.

Usage:
    phasellus
    phasellus --shell
    phasellus --load scores.json
    phasellus --scores-file games/tonight.json
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import structlog

from board.app import ScoreboardApp
from console.shell import ScoreShell
from scoring.exceptions import ScoreFileError
from scoring.persistence import load_registry
from scoring.registry import PlayerRegistry
from shared.logging import setup_logging
from shared.settings import AppSettings

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="phasellus", description="Keep score of Yacht dice games")
    parser.add_argument(
        "--shell",
        action="store_true",
        help="use the line-oriented command shell instead of the full-screen board",
    )
    parser.add_argument(
        "--load",
        type=Path,
        metavar="PATH",
        help="load scores from a file before starting",
    )
    parser.add_argument(
        "--scores-file",
        type=Path,
        metavar="PATH",
        help="default file for save and load (overrides PHASELLUS_SCORES_FILE)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = AppSettings()
    if args.scores_file is not None:
        settings = settings.model_copy(update={"scores_file": args.scores_file})

    # both front ends own the terminal, so logs only go to the log file
    log_path = setup_logging(settings.log_path, stream=False)
    logger.info("starting", front_end="shell" if args.shell else "board", log_path=str(log_path))

    registry = PlayerRegistry()
    if args.load is not None:
        try:
            registry = load_registry(args.load)
        except ScoreFileError as e:
            print(f"Cannot load scores: {e}", file=sys.stderr)
            return 1

    if args.shell:
        ScoreShell(registry, settings).cmdloop()
    else:
        ScoreboardApp(registry, settings).run()

    logger.info("exiting")
    return 0


if __name__ == "__main__":
    sys.exit(main())
