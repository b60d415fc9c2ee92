"""
Solve a Word Hunt board from the command line.

Usage:
    python -m scripts.solve_board <board> [--dictionary PATH] [--min-length N]

Examples:
    python -m scripts.solve_board "cats/orex/dpqm/enti"
    python -m scripts.solve_board "c a t s
    o r e x
    d p q m
    e n t i" --limit 20
    python -m scripts.solve_board board.txt --dictionary words.txt --workers 4

The board is either a file path or inline text. Rows are separated by
newlines or "/", tiles by spaces or commas (a row of single letters may be
written without separators). Use "." for a blank tile.
"""
import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wordhunt.board import parse_grid
from wordhunt.dictionary import Dictionary
from wordhunt.dictionary_source import load_dictionary_text
from wordhunt.errors import WordHuntError
from wordhunt.metrics import StageTimer
from wordhunt.paths import format_path
from wordhunt.settings import settings
from wordhunt.solver import WordHuntSolver


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Word Hunt Solver")
    parser.add_argument("board", help="Board text or path to a file containing it")
    parser.add_argument("--dictionary", type=str, default=None,
                        help=f"Word list file (default: {settings.DICTIONARY_PATH}, then {settings.DICTIONARY_URL})")
    parser.add_argument("--min-length", type=int, default=settings.MIN_WORD_LENGTH,
                        help=f"Minimum word length (default: {settings.MIN_WORD_LENGTH})")
    parser.add_argument("--limit", type=int, default=settings.MAX_RESULTS,
                        help="Maximum words to print, 0 for all")
    parser.add_argument("--workers", type=int, default=settings.SOLVER_WORKERS,
                        help="Threads used for root searches")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log stage timings")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    board_arg = Path(args.board)
    board_text = board_arg.read_text(encoding="utf-8") if board_arg.is_file() else args.board

    timer = StageTimer()
    try:
        with timer.stage("dictionary"):
            if args.dictionary:
                dictionary = Dictionary.from_file(args.dictionary)
            else:
                text = load_dictionary_text(settings.DICTIONARY_PATH, settings.DICTIONARY_URL,
                                            settings.DICTIONARY_TIMEOUT)
                dictionary = Dictionary.from_text(text)
        with timer.stage("solve"):
            solver = WordHuntSolver(parse_grid(board_text), dictionary)
            results = solver.solve(min_length=args.min_length, workers=args.workers)
    except WordHuntError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for row in solver.grid:
        print(" ".join((tok or ".").upper().ljust(2) for tok in row))
    print()

    shown = results[:args.limit] if args.limit > 0 else results
    width = max((len(r.word) for r in shown), default=0)
    for r in shown:
        print(f"{r.word.upper():<{width}}  {r.score:>5}  {format_path(r.path)}")

    total = sum(r.score for r in results)
    print(f"\n{len(results)} words, {total} points")
    timer.log_summary("solve_board")
    return 0


if __name__ == "__main__":
    sys.exit(main())
