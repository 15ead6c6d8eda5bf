"""
report.py

Run many solver games and summarize how they went.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

import numpy as np

from wordle_solver.game import STANDARD_GUESSES, WordleGame
from wordle_solver.record import GameRecord
from wordle_solver.sampler import WordSampler
from wordle_solver.solver import solve
from wordle_solver.vocab import WordVocab

log = logging.getLogger(__name__)


def run_iterations(
    vocab: WordVocab,
    sampler: WordSampler,
    iterations: int,
    *,
    num_guesses: int = STANDARD_GUESSES,
) -> List[GameRecord]:
    """
    Play `iterations` games with hidden words drawn by `sampler`.

    Each game gets its own copy of the vocabulary; nothing is shared between
    games.
    """
    records: List[GameRecord] = []
    for i, wordle in enumerate(sampler.batch_words(iterations), 1):
        record = solve(WordleGame(wordle, num_guesses), vocab.words())
        log.debug("game %d/%d: %s", i, iterations, record)
        records.append(record)
    return records


def tally_results(records: Sequence[GameRecord], num_guesses: int = STANDARD_GUESSES) -> np.ndarray:
    """
    Count games by win index.

    Slot 0 holds lost games, slot k the games won with the k-th guess.
    """
    win_indices = np.fromiter((r.win_index for r in records), dtype=np.int64, count=len(records))
    return np.bincount(win_indices, minlength=num_guesses + 1)


def summarize(records: Sequence[GameRecord]) -> Dict[str, float]:
    """Aggregate statistics over a batch of records."""
    n = len(records)
    win_indices = np.array([r.win_index for r in records], dtype=np.int64)
    wins = win_indices[win_indices > 0]
    return {
        "games": int(n),
        "wins": int(wins.size),
        "win_rate": float(wins.size / n) if n else float("nan"),
        "avg_guesses": float(wins.mean()) if wins.size else float("nan"),
        "median_guesses": float(np.median(wins)) if wins.size else float("nan"),
    }
