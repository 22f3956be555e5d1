"""Command line entry point: `tower` or `python -m tower`."""

import argparse
import logging
import sys

from pydantic import ValidationError

from . import __version__
from .config import TowerConfig
from .game import TowerGame
from .terminal import ConsoleTerminal


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tower",
        description="Play the Towers of Hanoi puzzle in the terminal.",
    )
    parser.add_argument(
        "--max-disks",
        type=int,
        default=TowerConfig.model_fields["max_disks"].default,
        help="largest puzzle the player may choose (at least 3, default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log game events to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = TowerConfig(max_disks=args.max_disks)
    except ValidationError as exc:
        parser.error(f"invalid configuration: {exc.errors()[0]['msg']}")

    return TowerGame(ConsoleTerminal(), config).run()


if __name__ == "__main__":
    sys.exit(main())
