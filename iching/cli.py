#!/usr/bin/env python3
"""
iching: I-Ching readings and hexagram transformation analysis.

Usage:
    iching -q "Your question here"              # cast a reading
    iching -m coins -r pseudo                   # local randomness, coin method
    iching analyze hexagram 11
    iching analyze shortest-distance 1 2 --all
    iching analyze king-wen --paths
    iching analyze compare-king-wen --seed 7
    iching analyze min-random 100 --workers 4
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from iching import config, display
from iching.errors import IChingError
from iching.operations import CATALOGUES
from iching.reading import RandomnessMode, ReadingMethod, generate_reading
from iching.search import HexagramAnalysis, HexagramSearcher
from iching.sequence import analyze_sequence, compare_with_random, find_min_random_sequence, king_wen

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iching",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-m", "--method",
        type=ReadingMethod, choices=list(ReadingMethod), default=ReadingMethod.YARROW_STALKS,
        help="The method used to generate the reading",
    )
    parser.add_argument(
        "-r", "--randomness",
        type=RandomnessMode, choices=list(RandomnessMode), default=RandomnessMode.RANDOM,
        help="Use random.org or a pseudo-random number generator",
    )
    parser.add_argument("-q", "--question", default="", help="The optional question to ask the I Ching")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")
    analyze = subparsers.add_parser("analyze", help="Sub-commands to analyze hexagrams")
    analyze.add_argument(
        "--catalogue", choices=sorted(CATALOGUES), default="extended",
        help="Operation catalogue used by the search (default: extended)",
    )
    actions = analyze.add_subparsers(dest="action", required=True)

    hexagram = actions.add_parser("hexagram", help="Analyze a single hexagram")
    hexagram.add_argument("number", type=int, help="The hexagram to analyze")

    shortest = actions.add_parser("shortest-distance", help="Find the shortest path between two hexagrams")
    shortest.add_argument("start", type=int, help="The hexagram from which to start")
    shortest.add_argument("end", type=int, help="The hexagram to reach")
    shortest.add_argument(
        "-a", "--all", action="store_true",
        help="Print all shortest paths instead of the ones with the least line changes",
    )

    kw = actions.add_parser("king-wen", help="Print an analysis of King Wen's sequence")
    kw.add_argument("--paths", action="store_true", help="Also print the path between each pair")

    compare = actions.add_parser("compare-king-wen", help="Compare a random sequence to King Wen's sequence")
    compare.add_argument("--seed", type=int, default=None, help="Seed for the random shuffling")

    min_random = actions.add_parser(
        "min-random", help="Find the random sequence with the fewest operations and compare it to King Wen's",
    )
    min_random.add_argument(
        "count", type=int, nargs="?", default=config.DEFAULT_RANDOM_SEQUENCES,
        help=f"Number of random sequences to try (default: {config.DEFAULT_RANDOM_SEQUENCES})",
    )
    min_random.add_argument("--seed", type=int, default=None, help="Seed for the random shufflings")
    min_random.add_argument("--workers", type=int, default=None, help="Number of worker processes")
    return parser


def run_analysis(args: argparse.Namespace) -> None:
    operations = CATALOGUES[args.catalogue]
    out = display.console

    if args.action == "hexagram":
        display.print_hexagram_analysis(HexagramAnalysis.new(args.number, operations))

    elif args.action == "shortest-distance":
        searcher = HexagramSearcher(args.start, args.end, operations)
        paths = searcher.find_shortest_paths(args.all)
        display.print_search_result(args.start, args.end, paths)

    elif args.action == "king-wen":
        with out.status("[bold cyan]Analyzing King Wen's sequence...[/bold cyan]", spinner="dots"):
            analysis = analyze_sequence(king_wen(), operations)
        display.print_sequence_analysis(analysis, show_paths=args.paths)

    elif args.action == "compare-king-wen":
        with out.status("[bold cyan]Comparing sequences...[/bold cyan]", spinner="dots"):
            king_wen_analysis, random_analysis = compare_with_random(args.seed, operations)
        display.print_comparison(king_wen_analysis, random_analysis)

    elif args.action == "min-random":
        with out.status(f"[bold cyan]Analyzing {args.count} random sequences...[/bold cyan]", spinner="dots"):
            best = find_min_random_sequence(args.count, args.seed, args.workers, operations)
            king_wen_analysis = analyze_sequence(king_wen(), operations)
        display.print_comparison(king_wen_analysis, best, titles=("King Wen", f"Best of {args.count} random"))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    config.configure_logging(args.verbose)

    if args.command == "analyze":
        run_analysis(args)
        return 0

    with display.console.status("[bold cyan]Consulting the oracle...[/bold cyan]", spinner="dots"):
        reading = generate_reading(args.method, args.randomness, args.question)
    display.print_reading(reading)
    return 0


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nReading cancelled.")
        sys.exit(0)
    except IChingError as e:
        logger.error(f"{e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
