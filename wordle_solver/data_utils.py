from __future__ import annotations

import io
import logging
import os

import requests

from wordle_solver.vocab import WordVocab

log = logging.getLogger(__name__)

# American National Corpus token counts, one token per line, most frequent first.
ANC_URL = "https://www.anc.org/SecondRelease/data/ANC-token-count.txt"
DEFAULT_FALLBACK_PATH = "ANC-token-count.txt"
REQUEST_TIMEOUT = 10.0


def fetch_token_counts(url: str = ANC_URL, timeout: float = REQUEST_TIMEOUT) -> str:
    """Download a token-count listing and return its text."""
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.text


def load_library(
    word_len: int = 5,
    *,
    url: str | None = ANC_URL,
    fallback_path: str = DEFAULT_FALLBACK_PATH,
    timeout: float = REQUEST_TIMEOUT,
) -> WordVocab:
    """
    Load the frequency-ordered word list for `word_len`-letter games.

    The listing is downloaded from `url` first; if that fails (or `url` is
    None) the local copy at `fallback_path` is read instead.

    Raises
    ------
    FileNotFoundError
        If the download fails and there is no local copy.
    ValueError
        If the listing holds no usable words of that length.
    """
    if url:
        try:
            text = fetch_token_counts(url, timeout=timeout)
        except requests.RequestException as e:
            log.warning("could not download %s (%s); using %s", url, e, fallback_path)
        else:
            vocab = WordVocab.from_token_counts(io.StringIO(text), word_len)
            log.info("loaded %d %d-letter words from %s", len(vocab), word_len, url)
            return vocab

    if not os.path.exists(fallback_path):
        raise FileNotFoundError(f"word list not found: {fallback_path}")
    vocab = WordVocab.from_token_counts(fallback_path, word_len)
    log.info("loaded %d %d-letter words from %s", len(vocab), word_len, fallback_path)
    return vocab
