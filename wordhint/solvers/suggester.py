"""
Suggester: heuristic ranking refined by expected remaining candidates.

Steps per pass (output is most-preferred FIRST):
  1) score the whole pool with the positional rank heuristic
  2) sort by (score desc, frequency desc)
  3) shortlist: top `shortlist` words when the pool is larger than
     `threshold`, else the whole pool
  4) compute expected remaining for the shortlist
  5) re-sort by (expected asc, frequency asc, score asc)
  6) emit the first `top_n` and the pool size

Every sort is stable and keyed on precomputed fields, so the same pool always
gives the same ordering.
"""

from __future__ import annotations

import logging
import multiprocessing
from typing import List

from .base import BaseSolver, Suggestion, Suggestions, register
from .config import SuggestConfig, DEFAULT_CONFIG
from .expected_left import expected_remaining_many
from .heuristic import rank_by_score, score_words

log = logging.getLogger(__name__)


def select_shortlist(ranked: List[Suggestion], config: SuggestConfig) -> List[Suggestion]:
    if len(ranked) > config.threshold:
        return ranked[: config.shortlist]
    return list(ranked)


def suggest(words, config: SuggestConfig = DEFAULT_CONFIG, pool=None) -> Suggestions:
    """
    Rank the candidate pool `words` (sequence of Word). `pool` is an optional
    multiprocessing pool used when config.workers > 1.

    Returns Suggestions with at most `config.top_n` entries, most preferred
    first, and `total = len(words)`. An empty pool gives no suggestions.
    """
    if not words:
        return Suggestions(ranked=[], total=0)

    ranked = rank_by_score(score_words(words))
    short = select_shortlist(ranked, config)
    log.debug("pool=%d shortlist=%d", len(ranked), len(short))

    texts = [w.text for w in words]
    for s, e in zip(short, expected_remaining_many(texts, [s.word for s in short],
                                                   workers=config.workers, pool=pool)):
        s.expected = e

    short.sort(key=lambda s: (s.expected, s.frequency, s.score))
    return Suggestions(ranked=short[: config.top_n], total=len(words))


@register
class ExpectedLeftSolver(BaseSolver):
    id = "expected_left"
    name = "Expected Remaining Candidates"
    version = "1.0.0"

    def __init__(self, config: SuggestConfig = DEFAULT_CONFIG):
        super().__init__(config)
        self._pool = None

    def reset(self, *, config: SuggestConfig | None = None) -> None:
        if config is not None and config.workers != self.config.workers:
            self.close()
        super().reset(config=config)

    def close(self) -> None:
        if self._pool is not None:
            self._pool.close()
            self._pool.join()
            self._pool = None

    def rank(self, words) -> Suggestions:
        # One worker pool for the solver's lifetime
        if self.config.workers > 1 and self._pool is None:
            self._pool = multiprocessing.Pool(processes=self.config.workers)
        return suggest(words, self.config, pool=self._pool)
