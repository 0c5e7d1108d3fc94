"""
Positional Letter-Frequency Rank (heuristic score).

Idea:
  Build per-position letter histograms from the CURRENT candidate pool.
  Turn each histogram into a rank transform: letters sorted by ascending
  count (ties alphabetical), rank 0 = rarest .. 25 = most common.
  A word's score is the sum of its five positional ranks.

Ranks rather than raw counts keep each position on the same 0..25 scale, so
one very lopsided position cannot dominate the sum.

Cheap: O(|pool| * 5) to build + O(|pool| * 5) to score, vectorized.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from wordhint.engine import WORD_LENGTH
from .base import BaseSolver, Suggestion, Suggestions, register

ALPHABET = 26
_A = ord("a")


def _letter_matrix(texts: Sequence[str]) -> np.ndarray:
    """(|pool|, 5) matrix of letter indices 0..25."""
    buf = "".join(texts).encode("ascii")
    return (np.frombuffer(buf, dtype=np.uint8).reshape(-1, WORD_LENGTH) - _A).astype(np.intp)


def letter_freq_by_position(texts: Sequence[str]) -> np.ndarray:
    """(5, 26) counts: how many pool words have letter j at position i."""
    m = _letter_matrix(texts)
    freq = np.zeros((WORD_LENGTH, ALPHABET), dtype=np.int64)
    for i in range(WORD_LENGTH):
        freq[i] = np.bincount(m[:, i], minlength=ALPHABET)
    return freq


def letter_rank_by_position(freq: np.ndarray) -> np.ndarray:
    """
    (5, 26) rank transform of `freq`.

    Stable argsort makes equal counts keep alphabetical order, so the ranks are
    a total order and identical pools always give identical ranks.
    """
    ranks = np.empty_like(freq)
    for i in range(WORD_LENGTH):
        order = np.argsort(freq[i], kind="stable")
        ranks[i, order] = np.arange(ALPHABET)
    return ranks


def score_words(words: Sequence) -> List[Suggestion]:
    """
    Heuristic score for every word of the pool, in input order.

    Accepts Word objects; an empty pool gives an empty list.
    """
    if not words:
        return []
    texts = [w.text for w in words]
    ranks = letter_rank_by_position(letter_freq_by_position(texts))
    scores = ranks[np.arange(WORD_LENGTH), _letter_matrix(texts)].sum(axis=1)
    return [
        Suggestion(word=w.text, frequency=w.frequency, score=int(s))
        for w, s in zip(words, scores)
    ]


def rank_by_score(scored: List[Suggestion]) -> List[Suggestion]:
    """Highest score first; higher corpus frequency breaks ties; stable otherwise."""
    return sorted(scored, key=lambda s: (-s.score, -s.frequency))


@register
class PositionalRankSolver(BaseSolver):
    """Heuristic-only ranking; skips the expected-remaining refinement."""
    id = "positional_rank"
    name = "Positional Letter-Frequency Rank"
    version = "1.0.0"

    def rank(self, words) -> Suggestions:
        ranked = rank_by_score(score_words(words))
        return Suggestions(ranked=ranked[: self.config.top_n], total=len(words))
