"""
Word catalog: the pool of candidate answers for one solving session.

A Catalog is an ordered list of Word values (load order). The order carries no
meaning of its own, but every sort downstream is stable, so it decides the
final tie-breaks. The catalog only ever shrinks: `prune` removes words that are
inconsistent with a constraint model and never puts anything back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List

from .constraints import filter_words
from .errors import ContradictionError
from .scoring import WORD_LENGTH

log = logging.getLogger(__name__)


def is_valid_word(text: str) -> bool:
    """True for exactly five lowercase ASCII letters."""
    return len(text) == WORD_LENGTH and text.isascii() and text.isalpha() and text.islower()


@dataclass(frozen=True)
class Word:
    text: str
    frequency: int = 0

    def __post_init__(self):
        if not is_valid_word(self.text):
            raise ValueError(f"not a 5-letter lowercase word: {self.text!r}")
        if self.frequency < 0:
            raise ValueError(f"frequency must be non-negative, got {self.frequency}")

    def __str__(self) -> str:
        return self.text


class Catalog:
    """
    Mutable, shrink-only sequence of Word.

    Iteration, len() and indexing behave like the underlying list. Use
    `prune(model)` to narrow it after each round of feedback.
    """

    def __init__(self, words: Iterable[Word] = ()):
        self._words: List[Word] = list(words)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple]) -> "Catalog":
        """Build from (text, frequency) tuples; handy for tests and fixtures."""
        return cls(Word(t, f) for t, f in pairs)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words)

    def __getitem__(self, i):
        return self._words[i]

    def __contains__(self, text) -> bool:
        t = text.text if isinstance(text, Word) else text
        return any(w.text == t for w in self._words)

    def __repr__(self) -> str:
        return f"Catalog({len(self._words)} words)"

    @property
    def words(self) -> List[Word]:
        """A copy of the current pool (callers may not mutate the catalog)."""
        return list(self._words)

    def texts(self) -> List[str]:
        return [w.text for w in self._words]

    def prune(self, model) -> int:
        """
        Drop every word inconsistent with `model`. Returns how many were removed.

        Raises ContradictionError (and leaves the catalog untouched) if nothing
        would survive: an empty pool after feedback means the feedback was wrong,
        not that the game is over.
        """
        kept = filter_words(model, self._words)
        if not kept:
            raise ContradictionError(
                f"no candidate satisfies the constraints ({len(self._words)} checked)"
            )
        removed = len(self._words) - len(kept)
        self._words = kept
        log.info("pruned %d word(s), %d remaining", removed, len(kept))
        return removed
