"""
wordle_solver/cli/play.py

Play one game of Wordle in an ANSI terminal, then watch the solver play the
same hidden word.

Run:
  python -m wordle_solver.cli.play
  python -m wordle_solver.cli.play --words-file ANC-token-count.txt --no-download

Green letters are in the right place, yellow letters are elsewhere in the
word, red letters are not in it. Type 'quit' to give up.
"""
from __future__ import annotations

import argparse
import logging
from typing import Callable, Collection, List, Optional

from wordle_solver.data_utils import ANC_URL, DEFAULT_FALLBACK_PATH, load_library
from wordle_solver.feedback import is_valid_guess
from wordle_solver.game import STANDARD_LENGTH, WordleGame
from wordle_solver.record import GameRecord
from wordle_solver.render import (
    ANSI_RESET,
    CLEAR_SCREEN,
    Keyboard,
    render_grid,
    render_keyboard,
    render_record,
)
from wordle_solver.sampler import WordSampler
from wordle_solver.solver import solve

QUIT_WORDS = {"q", "quit", "exit"}


def prompt_guess(
    game: WordleGame,
    library: Collection[str],
    read: Callable[[str], str] = input,
) -> Optional[str]:
    """Ask until the player types a playable word; None if they quit."""
    while True:
        guess = read("Guess word: ").strip().lower()
        if guess in QUIT_WORDS:
            return None
        if is_valid_guess(guess, game.word_length, library):
            return guess
        print(f"Please enter a known {game.word_length}-letter word.")


def play(
    game: WordleGame,
    library: Collection[str],
    read: Callable[[str], str] = input,
    clear: bool = True,
) -> Optional[GameRecord]:
    """Run the game loop; returns the finished game's record, None if the player quit."""
    keyboard = Keyboard()
    guesses: List[str] = []

    while not game.is_over:
        print(render_grid(game, keyboard))
        print(render_keyboard(keyboard))
        guess = prompt_guess(game, library, read)
        if guess is None:
            return None
        game.submit_guess(guess)
        guesses.append(guess)
        if clear:
            print(CLEAR_SCREEN, end="", flush=True)

    print(render_grid(game, keyboard))
    return GameRecord.from_game(game, guesses)


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Play Wordle in the terminal")
    ap.add_argument("--url", default=ANC_URL, help="token-count listing to download")
    ap.add_argument("--no-download", action="store_true", help="skip the download, read --words-file")
    ap.add_argument("--words-file", default=DEFAULT_FALLBACK_PATH, help="local token-count listing")
    ap.add_argument("--seed", type=int, default=None, help="seed for hidden word selection")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.WARNING, format="[%(levelname)s] %(message)s")

    print(ANSI_RESET, end="")
    vocab = load_library(
        STANDARD_LENGTH,
        url=None if args.no_download else args.url,
        fallback_path=args.words_file,
    )
    game = WordleGame.random_standard_game(WordSampler(vocab, seed=args.seed))

    record = play(game, set(vocab.words()))
    if record is None:
        print(f"bye! the word was {game.wordle}")
        return
    print(record)

    solver_record = solve(WordleGame(game.wordle, game.num_guesses), vocab.words())
    print("WordleSolver:\n" + str(solver_record))
    print(render_record(solver_record))


if __name__ == "__main__":
    main()
