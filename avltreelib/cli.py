"""Command line interface for AVLTreeLib.

Usage:
    avltreelib markov [-l N] [-i WORD] [-t] [-d DELIM] [-w] [--seed S] [FILE]
    avltreelib demo [-n COUNT] [--seed S]

The markov command reads text from FILE (stdin when omitted) and prints a
randomly generated word chain; the demo command runs the integer driver.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import MarkovConfig
from .demo import run_demo
from .errors import InvalidConfigurationError, MarkovError
from .markov import TransitionTable, format_chain

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="avltreelib",
        description="AVL tree demos: Markov chain text generator and integer driver",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    defaults = MarkovConfig()
    markov = subparsers.add_parser("markov", help="Generate text from a Markov chain")
    markov.add_argument("-l", "--length", type=int, default=defaults.out_len, dest="out_len",
                        help="Length (in words) of the generated sequence")
    markov.add_argument("-i", "--initial", dest="initial_word",
                        help="Initial word of the sequence")
    markov.add_argument("-t", "--stats", action="store_true", dest="print_stats",
                        help="Print the transition statistics")
    markov.add_argument("-d", "--delimiter", default=defaults.delimiter,
                        help="Word delimiter characters, default is space")
    markov.add_argument("-w", "--wrap", action="store_true",
                        help=f"Wrap output if longer than {defaults.wrap_width} characters")
    markov.add_argument("--seed", type=int, help="Random seed for a reproducible chain")
    markov.add_argument("file", nargs="?", type=argparse.FileType("r"), default=None,
                        help="Input text (default: stdin)")

    demo = subparsers.add_parser("demo", help="Run the integer tree driver")
    demo.add_argument("-n", "--count", type=int, default=16, help="Number of random values")
    demo.add_argument("--seed", type=int, help="Random seed for a reproducible run")

    return parser


def run_markov(args: argparse.Namespace, stdin=None, stdout=None) -> int:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    config = MarkovConfig(
        out_len=args.out_len,
        initial_word=args.initial_word,
        delimiter=args.delimiter,
        print_stats=args.print_stats,
        wrap=args.wrap,
        seed=args.seed,
    )
    errors = config.validate()
    if errors:
        print(f"error: {'; '.join(errors)}", file=sys.stderr)
        return 1

    source = args.file if args.file is not None else stdin
    with TransitionTable() as table:
        try:
            table.build(source, config.delimiter)
        finally:
            if args.file is not None:
                args.file.close()
        if config.print_stats:
            stdout.write(table.format_stats())
        if len(table) == 0:
            return 0
        logger.debug("Generating %d words from %d distinct words", config.out_len, len(table))
        try:
            words = list(table.generate(config))
        except (MarkovError, InvalidConfigurationError) as e:
            print(str(e), file=sys.stderr)
            return 1
        stdout.write(format_chain(words, config))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "markov":
        return run_markov(args)
    run_demo(count=args.count, seed=args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
