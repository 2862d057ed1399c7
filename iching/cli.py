"""
Command-line I-Ching divination.

Usage:
    iching divine -q "Your question here"
    iching divine -m coin-toss --seed 42
    iching cast 789768
    iching hexagram 11
    iching trigram 4
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional

from rich.console import Console

from . import config
from .display import (
    ColorPreference,
    display_hexagram_info,
    display_reading,
    display_trigram,
    make_console,
)
from .divination import DivinationMethod
from .errors import IChingError
from .hexagram import Hexagram
from .reading import Diviner
from .repository import HexagramJson
from .trigram import TrigramName

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=config.APP_NAME,
        description=config.APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {config.APP_VERSION}"
    )
    parser.add_argument(
        "--color",
        type=ColorPreference,
        choices=list(ColorPreference),
        default=ColorPreference.AUTO,
        help="Set whether output should be colorful or not",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging verbosity (default: $ICHING_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--data",
        help="Path to a JSON file with hexagram texts (default: bundled data)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    divine = subparsers.add_parser("divine", help="Receive the answers that you seek")
    divine.add_argument(
        "-q", "--question",
        help="A question that you wish to answer",
    )
    divine.add_argument(
        "-m", "--method",
        type=DivinationMethod,
        choices=list(DivinationMethod),
        help="The method of divination to use (default: $ICHING_DEFAULT_METHOD or ancient-yarrow-stalk)",
    )
    divine.add_argument(
        "--seed",
        type=int,
        help="Use a specific seed for a repeatable cast (bypasses question and timestamp)",
    )
    divine.add_argument(
        "--no-nuclear",
        action="store_true",
        help="Omit the nuclear hexagram",
    )

    cast = subparsers.add_parser(
        "cast", help="Cast your own coins and enter the results as six digits 6-9, bottom line first"
    )
    cast.add_argument("digits", metavar="COIN TOSS RESULTS")
    cast.add_argument("-q", "--question", help="A question that you wish to answer")
    cast.add_argument("--no-nuclear", action="store_true", help="Omit the nuclear hexagram")

    hexagram = subparsers.add_parser(
        "hexagram", help="Look up a hexagram by its King Wen sequence number"
    )
    hexagram.add_argument("number", type=int, metavar="HEXAGRAM NUMBER", help="A number 1-64")

    trigram = subparsers.add_parser("trigram", help="Look up a trigram by its number")
    trigram.add_argument("number", type=int, metavar="TRIGRAM NUMBER", help="A number 1-8")

    return parser


def default_method() -> DivinationMethod:
    try:
        return DivinationMethod(config.DEFAULT_METHOD)
    except ValueError:
        raise ValueError(
            f"ICHING_DEFAULT_METHOD must be one of "
            f"{', '.join(str(m) for m in DivinationMethod)}, got {config.DEFAULT_METHOD!r}"
        ) from None


def run(args: argparse.Namespace, console: Console) -> None:
    if args.command == "trigram":
        display_trigram(console, TrigramName.from_rank(args.number))
        return

    repository = HexagramJson.load(args.data)

    if args.command == "hexagram":
        display_hexagram_info(console, repository.get_by_number(args.number))
    elif args.command == "cast":
        diviner = Diviner(repository, show_nuclear=not args.no_nuclear)
        display_reading(console, diviner.read(Hexagram.from_digits(args.digits), args.question))
    elif args.command == "divine":
        method = args.method if args.method is not None else default_method()
        diviner = Diviner(repository, method=method, show_nuclear=not args.no_nuclear)
        rng = random.Random(args.seed) if args.seed is not None else None
        with console.status("[bold cyan]Consulting the oracle...[/bold cyan]", spinner="dots"):
            reading = diviner.cast(args.question, rng=rng)
        display_reading(console, reading)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # argparse applies type but not choices to a default taken from the environment
    if args.log_level not in LOG_LEVELS:
        print(
            f"Error: ICHING_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {args.log_level!r}",
            file=sys.stderr,
        )
        return 1

    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)

    if args.command is None:
        parser.print_help()
        return 0

    console = make_console(args.color)
    try:
        run(args, console)
    except KeyboardInterrupt:
        print("\n\nDivination cancelled.")
        return 0
    except (IChingError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        return 1
    return 0
