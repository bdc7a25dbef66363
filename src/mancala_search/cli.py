# Command-line front end: print the best ways to play out one turn
import argparse
import logging
import sys
from typing import List, Optional

from mancala_search.io.settings import START_STONES, TOP_N
from mancala_search.search.ranker import format_result, search
from mancala_search.utils.features import score_histogram

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mancala-search",
        description="Enumerate every chain of moves for one turn and rank them by banked score.",
    )
    parser.add_argument("--stones", type=int, default=START_STONES,
                        help=f"stones per bin at the start (default: {START_STONES})")
    parser.add_argument("--top", type=int, default=TOP_N,
                        help=f"how many results to print (default: {TOP_N})")
    parser.add_argument("--histogram", action="store_true",
                        help="also print how many paths end on each score")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    if args.stones < 0:
        parser.error("--stones must be >= 0")
    if args.top < 1:
        parser.error("--top must be >= 1")
    return args

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    ranked = search(args.stones)
    for entry in ranked[:args.top]:
        print(format_result(entry))

    if args.histogram:
        print()
        for score, count in score_histogram(ranked).items():
            print(f"{score:>3}: {count}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
