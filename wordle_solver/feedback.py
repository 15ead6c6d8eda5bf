"""
Feedback utilities for Wordle.

Every guessed letter is scored independently against the hidden word:

- CORRECT (2) when the hidden word holds the same letter in the same column
- PRESENT (1) when the letter occurs anywhere else in the hidden word
- ABSENT  (0) when the letter does not occur at all

Note that this rule looks at each column on its own. A guess that repeats a
letter the hidden word holds only once gets CORRECT/PRESENT for every copy,
unlike the two-pass counting rule of the published game.
"""

from __future__ import annotations

import re
from enum import IntEnum
from typing import Iterable, List, Optional, Sequence

_LETTERS = re.compile(r"[A-Za-z]+")


class Score(IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


_LETTER_CODES = {"b": Score.ABSENT, "y": Score.PRESENT, "g": Score.CORRECT}
_DIGIT_CODES = {"0": Score.ABSENT, "1": Score.PRESENT, "2": Score.CORRECT}
_FEEDBACK_CODES = {**_LETTER_CODES, **_DIGIT_CODES}


def score_letter(letter: str, col: int, hidden: str) -> Score:
    """Score a single guessed `letter` placed at column `col`."""
    if hidden[col] == letter:
        return Score.CORRECT
    if letter in hidden:
        return Score.PRESENT
    return Score.ABSENT


def score_guess(guess: str, hidden: str) -> List[Score]:
    """
    Compute the feedback for `guess` against `hidden`, one Score per column.

    Raises
    ------
    ValueError
        If the two words are not the same length.
    """
    if len(guess) != len(hidden):
        raise ValueError("guess and hidden word must be the same length")
    return [score_letter(ch, i, hidden) for i, ch in enumerate(guess)]


def is_valid_guess(
    guess: Optional[str],
    word_length: int,
    library: Optional[Iterable[str]] = None,
) -> bool:
    """
    Return True iff `guess` may be played in a game of `word_length` letters.

    A guess must be a string of exactly `word_length` ASCII letters and, when
    `library` is given, a member of it.
    """
    if not isinstance(guess, str):
        return False
    if len(guess) != word_length:
        return False
    if not _LETTERS.fullmatch(guess):
        return False
    if library is not None and guess not in library:
        return False
    return True


def parse_feedback(s: str, word_length: int = 5) -> List[Score]:
    """Parse typed feedback into a list of Scores.
    Accepted forms:
      - letters: g/y/b  (green/yellow/black)
      - digits:  2/1/0
      - list:   [0, 1, 2, 2, 0]
    Raises ValueError on invalid input.
    """
    s = s.strip().lower()
    if s.startswith("[") and s.endswith("]"):
        nums = re.findall(r"[012]", s)
        if len(nums) != word_length:
            raise ValueError(f"list form must contain exactly {word_length} 0/1/2 values")
        return [_DIGIT_CODES[x] for x in nums]

    if len(s) != word_length:
        raise ValueError(f"feedback must be length {word_length} (gybgy / 21001 / [0,1,2,2,0])")
    try:
        return [_FEEDBACK_CODES[ch] for ch in s]
    except KeyError as e:
        raise ValueError("feedback must use only g/y/b or 2/1/0") from e


def format_feedback(scores: Sequence[int]) -> str:
    """Render scores in the g/y/b letter form, e.g. [0, 0, 0, 1, 2] -> 'bbbyg'."""
    codes = {int(v): k for k, v in _LETTER_CODES.items()}
    return "".join(codes[int(p)] for p in scores)
