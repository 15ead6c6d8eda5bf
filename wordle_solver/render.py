"""
render.py

ANSI terminal rendering for a WordleGame: the guess grid, colored by feedback,
and a QWERTY keyboard showing what is known about every letter.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from wordle_solver.feedback import Score, score_guess
from wordle_solver.game import WordleGame
from wordle_solver.record import GameRecord

ANSI_RESET = "\033[0m"
ANSI_GREEN = "\033[32m"
ANSI_YELLOW = "\033[33m"
ANSI_RED = "\033[0;31m"
CLEAR_SCREEN = "\033[H\033[2J"

SCORE_COLORS = {
    Score.CORRECT: ANSI_GREEN,
    Score.PRESENT: ANSI_YELLOW,
    Score.ABSENT: ANSI_RED,
}

KEYBOARD_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")


class Keyboard:
    """
    Best feedback seen so far for every letter.

    Belongs to one game's display; a letter's state only ever improves
    (ABSENT < PRESENT < CORRECT).
    """

    def __init__(self) -> None:
        self._state: Dict[str, Optional[Score]] = {c: None for row in KEYBOARD_ROWS for c in row}

    def update(self, letter: str, score: Score) -> None:
        current = self._state.get(letter)
        if current is None or score > current:
            self._state[letter] = score

    def state(self, letter: str) -> Optional[Score]:
        return self._state.get(letter)


def _paint(text: str, score: Optional[Score]) -> str:
    if score is None:
        return ANSI_RESET + text
    return SCORE_COLORS[score] + text + ANSI_RESET


def render_grid(game: WordleGame, keyboard: Keyboard) -> str:
    """
    Draw the grid top to bottom; blanks show as "_" and the row awaiting
    the next guess is marked with ">". Letters drawn also update `keyboard`.
    """
    lines: List[str] = ["    WORDLE"]
    for i in range(game.num_guesses):
        marker = "> " if i == game.next_guess_index and not game.is_over else "  "
        row = game.row(i)
        if not row:
            lines.append(marker + "_ " * game.word_length)
            continue
        cells = []
        for letter, score in zip(row, game.score_row(i)):
            keyboard.update(letter, score)
            cells.append(_paint(letter, score) + " ")
        lines.append(marker + "".join(cells))
    return "\n".join(lines) + "\n"


def render_keyboard(keyboard: Keyboard) -> str:
    lines = []
    for indent, row in enumerate(KEYBOARD_ROWS):
        keys = "".join(_paint(c, keyboard.state(c)) + " " for c in row)
        lines.append(" " * indent + keys + ANSI_RESET)
    return "\n".join(lines)


def render_record(record: GameRecord) -> str:
    """One line per guess, each letter colored by its feedback."""
    lines = []
    for guess in record.guesses:
        scores = score_guess(guess, record.wordle)
        lines.append("".join(_paint(c, s) for c, s in zip(guess, scores)))
    return "\n".join(lines)
