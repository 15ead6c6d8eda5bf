"""
game.py

A minimal Wordle game: a hidden word, a grid of guesses and the state machine
that decides when the game is over. No user interaction happens here.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from wordle_solver.feedback import Score, is_valid_guess, score_letter

if TYPE_CHECKING:
    from wordle_solver.sampler import WordSampler

log = logging.getLogger(__name__)

STANDARD_GUESSES = 6
STANDARD_LENGTH = 5


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class WordleGame:
    """
    Wordle game state.

    API
    ---
    submit_guess(word: str) -> bool
        Places a guess in the next empty row. Returns False, without changing
        anything, for a malformed guess or once the game is over.

    score_row(row: int) -> list[Score]
        Feedback for any submitted row, one Score per column.

    Grid
    ----
    `num_guesses` rows of `len(wordle)` cells; unused cells hold "".
    """

    def __init__(self, wordle: str, num_guesses: int = STANDARD_GUESSES) -> None:
        if not isinstance(wordle, str) or not wordle:
            raise ValueError("wordle must be a non-empty string")
        if not is_valid_guess(wordle, len(wordle)):
            raise ValueError("wordle must be alphabetic")
        if not isinstance(num_guesses, int) or num_guesses <= 0:
            raise ValueError("num_guesses must be a positive integer")

        self._wordle = wordle.lower()
        self._grid: List[List[str]] = [[""] * len(wordle) for _ in range(num_guesses)]
        self._next_row = 0
        self._status = GameStatus.IN_PROGRESS

    @classmethod
    def random_standard_game(cls, sampler: "WordSampler") -> "WordleGame":
        """Standard 6-guess game with a hidden word drawn by `sampler`."""
        return cls(sampler.choice_word(), STANDARD_GUESSES)

    # -------------------------
    # State transitions
    # -------------------------
    def submit_guess(self, word: Optional[str]) -> bool:
        if self.is_over:
            return False
        if not is_valid_guess(word, self.word_length):
            return False

        self._grid[self._next_row] = list(word)
        self._next_row += 1

        if word == self._wordle:
            self._status = GameStatus.WON
        elif self._next_row == self.num_guesses:
            self._status = GameStatus.LOST

        log.debug("guess %d %r -> %s", self._next_row, word, self._status.value)
        return True

    # -------------------------
    # Scoring
    # -------------------------
    def score_cell(self, row: int, col: int) -> Score:
        """Score the letter in `row`, `col`. Only submitted rows can be scored."""
        if row < 0 or row >= self._next_row:
            raise IndexError(f"no guess in row {row}")
        return score_letter(self._grid[row][col], col, self._wordle)

    def score_row(self, row: int) -> List[Score]:
        return [self.score_cell(row, col) for col in range(self.word_length)]

    def last_results(self) -> List[Score]:
        """Feedback for the most recent guess."""
        return self.score_row(self.last_guess_index)

    # -------------------------
    # Introspection helpers
    # -------------------------
    @property
    def wordle(self) -> str:
        return self._wordle

    @property
    def word_length(self) -> int:
        return len(self._wordle)

    @property
    def num_guesses(self) -> int:
        return len(self._grid)

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status is not GameStatus.IN_PROGRESS

    @property
    def won(self) -> bool:
        """True iff the last submitted row is the hidden word."""
        return self._next_row > 0 and self.last_guess == self._wordle

    @property
    def last_guess_index(self) -> int:
        """Row of the most recent guess, -1 before the first one."""
        return self._next_row - 1

    @property
    def next_guess_index(self) -> int:
        return self._next_row

    @property
    def last_guess(self) -> str:
        if self._next_row == 0:
            raise IndexError("no guess has been made")
        return self.row(self.last_guess_index)

    def row(self, idx: int) -> str:
        """Contents of row `idx`; "" for a row not yet played."""
        if idx < 0 or idx >= len(self._grid):
            raise IndexError(f"row out of range: {idx}")
        return "".join(self._grid[idx])

    def guesses(self) -> List[str]:
        """Submitted guesses in the order they were played."""
        return [self.row(i) for i in range(self._next_row)]
