from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from wordle_solver.game import WordleGame


@dataclass(frozen=True)
class GameRecord:
    """Summary of one finished game: the hidden word, the guesses made, the result."""

    wordle: str
    guesses: Tuple[str, ...]
    win: bool

    @classmethod
    def from_game(cls, game: WordleGame, guesses: Iterable[str]) -> "GameRecord":
        if not game.is_over:
            raise ValueError("a record can only be made from a finished game")
        return cls(game.wordle, tuple(guesses), game.won)

    @property
    def win_index(self) -> int:
        """Number of guesses the win took; 0 for a lost game."""
        return len(self.guesses) if self.win else 0

    def __str__(self) -> str:
        return f"{self.wordle}\tWIN: {self.win} -> [{', '.join(self.guesses)}]"
