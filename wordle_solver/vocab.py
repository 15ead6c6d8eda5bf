from __future__ import annotations

import csv
import io
import re
from typing import List, Union

import pandas as pd

_WORD = re.compile(r"[a-z]+")


class WordVocab:
    """
    Immutable, frequency-ordered word list of a single word length.

    Games never touch this object's list: `words()` hands out a fresh copy
    that a game and its solver can narrow down on their own.
    """

    def __init__(self, words: List[str]) -> None:
        if not isinstance(words, list):
            raise TypeError("`words` must be a list of strings")
        if not words:
            raise ValueError("no words provided")
        if not all(isinstance(w, str) for w in words):
            raise TypeError("all items in `words` must be str")

        # Enforce uniqueness (first occurrence policy is handled by from_token_counts)
        if len(set(words)) != len(words):
            raise ValueError("duplicate words detected; input to WordVocab must be deduplicated")
        if len({len(w) for w in words}) != 1:
            raise ValueError("all words must have the same length")

        self._words: List[str] = list(words)
        self._members = frozenset(self._words)

    # ---------- Construction helpers ----------

    @classmethod
    def from_token_counts(
        cls,
        source: Union[str, io.TextIOBase],
        word_len: int = 5,
        *,
        sep: str = "\t",
    ) -> "WordVocab":
        """
        Build a WordVocab from a token-count listing.

        Each line holds a token followed by other tab-separated fields
        (lemma, part of speech, count); lines are expected in descending
        count order, which becomes the vocabulary order.

        Parameters
        ----------
        source : str or text buffer
            Path to the listing, or an open text buffer.
        word_len : int, default=5
            Required word length.
        sep : str, default="\\t"
            Field separator.

        Raises
        ------
        FileNotFoundError, ValueError
        """
        df = pd.read_csv(
            source,
            sep=sep,
            header=None,
            usecols=[0],
            dtype=str,
            keep_default_na=False,
            quoting=csv.QUOTE_NONE,
            on_bad_lines="skip",
            encoding_errors="replace",
        )

        clean: List[str] = []
        seen = set()

        for val in df[0].str.strip().str.lower():
            if len(val) != word_len or not _WORD.fullmatch(val):
                continue
            # the same token appears once per part of speech; keep the first
            if val in seen:
                continue
            seen.add(val)
            clean.append(val)

        if not clean:
            raise ValueError(f"no valid {word_len}-letter words after filtering")

        return cls(clean)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Number of words in the vocabulary."""
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._members

    @property
    def word_length(self) -> int:
        return len(self._words[0])

    def words(self) -> List[str]:
        """Return a copy of the internal word list (to avoid external mutation)."""
        return list(self._words)

    def word_at(self, idx: int) -> str:
        """Return the word at position `idx`; raise IndexError if out of bounds."""
        if idx < 0 or idx >= len(self._words):
            raise IndexError(f"index out of range: {idx}")
        return self._words[idx]
