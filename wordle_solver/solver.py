"""
solver.py

Plays a WordleGame to the end with a CandidateEngine:
ask for a guess -> submit it -> score the row -> feed the score back.
"""

from __future__ import annotations

import logging
from typing import List

from wordle_solver.constraints import CandidateEngine
from wordle_solver.game import WordleGame
from wordle_solver.record import GameRecord

log = logging.getLogger(__name__)


class WordleSolver:
    """
    Solves one game using the given word list.

    `words` should come from the same vocabulary the hidden word was drawn
    from, and must be a list nobody else holds: the engine narrows it in place.
    """

    def __init__(self, game: WordleGame, words: List[str]) -> None:
        if not isinstance(game, WordleGame):
            raise TypeError("game must be a WordleGame")
        self.game = game
        self.engine = CandidateEngine(game.word_length, words)

    def make_next_guess(self) -> str:
        """Submit the engine's next guess and return it."""
        guess = self.engine.select_next_guess()
        if not self.game.submit_guess(guess):
            raise RuntimeError(f"game rejected guess {guess!r}")
        return guess

    def solve(self) -> GameRecord:
        guesses: List[str] = []

        while not self.game.is_over:
            guess = self.make_next_guess()
            guesses.append(guess)
            self.engine.apply_feedback(guess, self.game.last_results())
            log.debug("after %r: %d candidates left", guess, len(self.engine))

        record = GameRecord.from_game(self.game, guesses)
        log.debug("%s", record)
        return record


def solve(game: WordleGame, words: List[str]) -> GameRecord:
    """Solve `game` with a fresh engine seeded from `words`."""
    return WordleSolver(game, words).solve()
