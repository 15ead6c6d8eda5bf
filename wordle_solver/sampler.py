from __future__ import annotations

import random

from wordle_solver.vocab import WordVocab

# Hidden words come from the most frequent words only, roughly the size of
# the published answer list.
ANSWER_POOL_SIZE = 2309


class WordSampler:
    def __init__(
        self,
        vocab: WordVocab,
        seed: int | None = None,
        pool_size: int = ANSWER_POOL_SIZE,
    ) -> None:
        if not isinstance(vocab, WordVocab):
            raise TypeError("vocab must be a WordVocab")
        if len(vocab) == 0:
            raise ValueError("vocab is empty")
        if not isinstance(pool_size, int) or pool_size <= 0:
            raise ValueError("pool_size must be a positive integer")

        self._vocab = vocab
        self._pool_size = min(pool_size, len(vocab))

        # Deterministic if seed provided
        self._rng = random.Random(seed)

    @property
    def pool_size(self) -> int:
        return self._pool_size

    def choice_index(self) -> int:
        return self._rng.randrange(self._pool_size)

    def choice_word(self) -> str:
        return self._vocab.word_at(self.choice_index())

    def batch_words(self, k: int) -> list[str]:
        if not isinstance(k, int) or k <= 0:
            raise ValueError("k must be a positive integer")
        return [self.choice_word() for _ in range(k)]
