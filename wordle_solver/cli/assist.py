"""
wordle_solver/cli/assist.py

Interactive Wordle helper (human-in-the-loop):
- YOU type the word you guessed and the feedback pattern you saw.
- Feedback accepted as: 'gybby', '21001', or a Python-like list '[0, 0, 2, 2, 2]'.
- The engine prunes its candidates and suggests the next guess.
- Play the suggestion (or anything else) and report again; repeat until solved.

Run:
  python -m wordle_solver.cli.assist --words-file ANC-token-count.txt --no-download

Shortcuts:
  quit / q / exit  -> exit
"""
from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional

from wordle_solver.constraints import CandidateEngine
from wordle_solver.data_utils import ANC_URL, DEFAULT_FALLBACK_PATH, load_library
from wordle_solver.feedback import Score, is_valid_guess, parse_feedback

QUIT_WORDS = {"q", "quit", "exit"}
SHOW_CANDIDATES = 10


def _ask_guess(word_length: int, suggestion: Optional[str], read: Callable[[str], str]) -> Optional[str]:
    prompt = "Enter your guess word: " if suggestion is None else f"Your guess (Enter for '{suggestion}'): "
    while True:
        guess = read(prompt).strip().lower()
        if guess in QUIT_WORDS:
            return None
        if not guess and suggestion is not None:
            return suggestion
        if is_valid_guess(guess, word_length):
            return guess
        print(f"Please enter a {word_length}-letter alphabetic word.")


def _ask_feedback(word_length: int, read: Callable[[str], str]) -> Optional[List[Score]]:
    while True:
        fb = read("Feedback for that guess (g/y/b or 2/1/0 or [..]): ").strip()
        if fb.lower() in QUIT_WORDS:
            return None
        try:
            return parse_feedback(fb, word_length)
        except ValueError as e:
            print("Invalid feedback:", e)


def assist(
    engine: CandidateEngine,
    read: Callable[[str], str] = input,
    suggestion: Optional[str] = None,
) -> Optional[str]:
    """Run the helper loop; returns the solved word, None on quit or dead end."""
    while True:
        guess = _ask_guess(engine.word_length, suggestion, read)
        if guess is None:
            print("bye!")
            return None
        patt = _ask_feedback(engine.word_length, read)
        if patt is None:
            print("bye!")
            return None
        if all(p is Score.CORRECT for p in patt):
            print("Solved!")
            return guess

        engine.apply_feedback(guess, patt)
        print(f"Remaining candidates: {len(engine)}")
        if not len(engine):
            print("No candidates remain. Check your feedback inputs.")
            return None
        if len(engine) <= SHOW_CANDIDATES:
            print("Candidates:", ", ".join(engine.words()))

        suggestion = engine.select_next_guess()
        print(f"Suggested next guess: {suggestion}")


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Interactive Wordle helper (manual feedback)")
    ap.add_argument("--length", type=int, default=5, help="word length")
    ap.add_argument("--url", default=ANC_URL, help="token-count listing to download")
    ap.add_argument("--no-download", action="store_true", help="skip the download, read --words-file")
    ap.add_argument("--words-file", default=DEFAULT_FALLBACK_PATH, help="local token-count listing")
    ap.add_argument("--verbose", "-v", action="store_true", help="log how each suggestion is picked")
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    vocab = load_library(
        args.length,
        url=None if args.no_download else args.url,
        fallback_path=args.words_file,
    )
    engine = CandidateEngine(args.length, vocab.words())

    print("\nWordle helper: after EACH guess you make in the game, type the feedback here.")
    print("Accepted: g/y/b, 2/1/0, or [0,1,2,2,0]. Type 'quit' to exit.")
    first = engine.select_next_guess()
    print(f"Suggested first guess: {first}\n")
    assist(engine, suggestion=first)


if __name__ == "__main__":
    main()
