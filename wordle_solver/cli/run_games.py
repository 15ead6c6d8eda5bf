"""
wordle_solver/cli/run_games.py

Let the solver play a batch of random games and report how it did.

Usage examples:
  python -m wordle_solver.cli.run_games
  python -m wordle_solver.cli.run_games --iterations 500 --seed 7
  python -m wordle_solver.cli.run_games --words-file ANC-token-count.txt --no-download

Prints one line per game, then the tally of win indices
[lost, won in 1, won in 2, ...] and a short summary.
"""

from __future__ import annotations

import argparse
import logging

from wordle_solver.data_utils import ANC_URL, DEFAULT_FALLBACK_PATH, load_library
from wordle_solver.game import STANDARD_GUESSES, STANDARD_LENGTH
from wordle_solver.report import run_iterations, summarize, tally_results
from wordle_solver.sampler import ANSWER_POOL_SIZE, WordSampler

NUM_ITERATIONS = 5


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Run the Wordle solver over random games")
    ap.add_argument("iterations", nargs="?", type=int, default=NUM_ITERATIONS,
                    help="number of games to play")
    ap.add_argument("--length", type=int, default=STANDARD_LENGTH, help="word length")
    ap.add_argument("--guesses", type=int, default=STANDARD_GUESSES, help="guesses per game")
    ap.add_argument("--pool-size", type=int, default=ANSWER_POOL_SIZE,
                    help="hidden words come from this many most frequent words")
    ap.add_argument("--url", default=ANC_URL, help="token-count listing to download")
    ap.add_argument("--no-download", action="store_true", help="skip the download, read --words-file")
    ap.add_argument("--words-file", default=DEFAULT_FALLBACK_PATH,
                    help="local token-count listing, used when the download fails")
    ap.add_argument("--seed", type=int, default=None, help="seed for hidden word selection")
    ap.add_argument("--verbose", "-v", action="store_true", help="log every guess")
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    if args.iterations <= 0:
        raise SystemExit("iterations must be positive")

    vocab = load_library(
        args.length,
        url=None if args.no_download else args.url,
        fallback_path=args.words_file,
    )
    sampler = WordSampler(vocab, seed=args.seed, pool_size=args.pool_size)

    records = run_iterations(vocab, sampler, args.iterations, num_guesses=args.guesses)
    for r in records:
        print(r)

    print(tally_results(records, args.guesses).tolist())

    stats = summarize(records)
    print(f"\nGames: {stats['games']}")
    print(f"Win rate (<= {args.guesses}): {stats['win_rate']:.3f}")
    print(f"Avg guesses (won only): {stats['avg_guesses']:.2f} | median: {stats['median_guesses']}")


if __name__ == "__main__":
    main()
