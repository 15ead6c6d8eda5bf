"""
constraints.py

Keeps track of Wordle constraints, narrows the candidate word list after each
guess and picks the next guess from what is left.
"""

from __future__ import annotations

import logging
import string
from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

from wordle_solver.feedback import Score, format_feedback

log = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase


class CandidateEngine:
    """
    Candidate words plus everything learned about the hidden word so far.

    The engine owns `words` and shrinks it in place, so every game needs its
    own list (``WordVocab.words()`` hands out a fresh copy). The order of the
    list is the corpus order, most frequent word first, and is never changed.

    Constraint state only grows while a game is played:
      - known:    confirmed letter per position (None where unknown)
      - included: letters present in the word, in the order they were found
      - excluded: letters absent from the word
    """

    def __init__(self, word_length: int, words: List[str]) -> None:
        if not isinstance(word_length, int) or word_length <= 0:
            raise ValueError("word_length must be a positive integer")
        if not isinstance(words, list):
            raise TypeError("`words` must be a list of strings")

        self.word_length = word_length
        self._words = words
        self._known: List[Optional[str]] = [None] * word_length
        self._included: List[str] = []
        self._excluded: List[str] = []

    # ---------- Constraint application ----------

    def apply_feedback(self, guess: Sequence[str], scores: Sequence[int]) -> None:
        """
        Narrow the candidates using the feedback for one guess.

        Every position of the guess is applied before returning, so the
        candidate list reflects the whole guess once this call is done.

        Feedback typed in from a real game may mark one copy of a repeated
        letter gray and another green or yellow. The gray copy then only rules
        the letter out of its own slot.
        """
        if len(guess) != self.word_length:
            raise ValueError(f"guess must have {self.word_length} letters")
        if len(scores) != self.word_length:
            raise ValueError(f"scores must have {self.word_length} entries")

        scores = [Score(s) for s in scores]
        # letters the guess shows green or yellow somewhere
        found = {ch for ch, s in zip(guess, scores) if s is not Score.ABSENT}

        before = len(self._words)
        for i, (ch, score) in enumerate(zip(guess, scores)):
            if score is Score.ABSENT and ch in found:
                # a repeated letter scored gray next to a scored copy
                self._refine_by_absent_at(ch, i)
            elif score is Score.ABSENT:
                self._refine_by_absent(ch)
            elif score is Score.CORRECT:
                self._refine_by_correct(ch, i)
            else:
                self._refine_by_present(ch, i)

        log.debug(
            "feedback %s for %r: %d -> %d candidates",
            format_feedback(scores), "".join(guess), before, len(self._words),
        )

    def _refine_by_absent(self, ch: str) -> None:
        if ch in self._excluded:
            return
        self._words[:] = [w for w in self._words if ch not in w]
        self._excluded.append(ch)

    def _refine_by_absent_at(self, ch: str, index: int) -> None:
        self._words[:] = [w for w in self._words if w[index] != ch]

    def _refine_by_correct(self, ch: str, index: int) -> None:
        self._words[:] = [w for w in self._words if w[index] == ch]
        self._known[index] = ch

    def _refine_by_present(self, ch: str, index: int) -> None:
        # the letter is elsewhere: keep words holding it, but not at this slot
        self._words[:] = [w for w in self._words if ch in w and w[index] != ch]
        if ch not in self._included:
            self._included.append(ch)

    # ---------- Guess selection ----------

    def letter_frequency(self) -> Dict[str, int]:
        """
        Count letter occurrences over every remaining candidate.

        A word with a repeated letter counts it once per occurrence. Letters
        already fixed in `known` are set to -1 so they rank below every letter
        that is still worth probing.
        """
        counts = Counter("".join(self._words))
        freq = {c: counts[c] for c in ALPHABET}
        for c in self._known:
            if c is not None:
                freq[c] = -1
        return freq

    def ranked_letters(self) -> List[str]:
        """
        The letter at each rank, one rank per letter of the alphabet.

        Rank n is the alphabetically first letter whose count equals the n-th
        highest count, so a count shared by k letters repeats that letter k
        times.
        """
        freq = self.letter_frequency()
        first_with: Dict[int, str] = {}
        for c in ALPHABET:
            first_with.setdefault(freq[c], c)
        return [first_with[v] for v in sorted(freq.values(), reverse=True)]

    def select_next_guess(self) -> str:
        """
        Pick the candidate that covers the most frequent unresolved letters.

        Walk the letters from most to least frequent. Letters already known or
        included carry no new information and are skipped. Tied counts repeat
        a letter across ranks. Each other letter
        narrows the working list to the words containing it, until a single
        word remains, the letter budget of one word is spent, or the letter
        would rule out every word (then the list before it is used). Ties
        always go to the first word in corpus order.
        """
        if not self._words:
            raise IndexError("no candidate words remain")
        if len(self._words) == 1:
            return self._words[0]

        ranked = self.ranked_letters()
        remaining = list(self._words)
        n = 0
        while n < len(ranked):
            letter = ranked[n]
            if letter in self._known or letter in self._included:
                n += 1
                continue

            filtered = [w for w in remaining if letter in w]
            if len(filtered) == 1:
                guess = filtered[0]
                break
            if not filtered:
                guess = remaining[0]
                break
            if n == self.word_length - 1:
                guess = filtered[0]
                break

            log.debug("rank %d letter %r keeps %d words", n, letter, len(filtered))
            remaining = filtered
            n += 1
        else:
            guess = remaining[0]

        log.debug("next guess %r from %d candidates", guess, len(self._words))
        return guess

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Number of candidate words left."""
        return len(self._words)

    def words(self) -> List[str]:
        """Return a copy of the candidate list."""
        return list(self._words)

    def word_at(self, idx: int) -> str:
        """Return the candidate at position `idx`; raise IndexError if out of bounds."""
        if idx < 0 or idx >= len(self._words):
            raise IndexError(f"index out of range: {idx}")
        return self._words[idx]

    def remove_at(self, idx: int) -> str:
        """Drop and return the candidate at position `idx`."""
        if idx < 0 or idx >= len(self._words):
            raise IndexError(f"index out of range: {idx}")
        return self._words.pop(idx)

    @property
    def known(self) -> Tuple[Optional[str], ...]:
        return tuple(self._known)

    @property
    def included(self) -> Tuple[str, ...]:
        return tuple(self._included)

    @property
    def excluded(self) -> Tuple[str, ...]:
        return tuple(self._excluded)

    def __str__(self) -> str:
        return f"{len(self._words)}: {self._words}"
