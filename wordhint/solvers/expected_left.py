"""
Expected Remaining Candidates (ERC).

Idea:
  Treat every word of the CURRENT pool, in turn, as the hypothetical answer.
  Diff the guess against it, load that delta into a scratch constraint model,
  and count how many pool words would survive. The running mean of those counts
  is the expected pool size after playing the guess. Lower is better.

Cost:
  O(|pool|) hypotheses x O(|pool|) filter = O(|pool|^2) per guess. Hypotheses
  that produce the same feedback marks produce the same delta, so the survivor
  count is reused per marks string within one evaluation.

Parallel:
  Each shortlisted guess is independent. With workers > 1 the shortlist is
  split into one contiguous chunk per worker; a chunk carries the pool words
  once and builds its own scratch model. Chunks come back in input order
  (imap), so output equals the serial path. A batch caller can pass its own
  long-lived `pool`, reused across calls.
"""

from __future__ import annotations

import logging
import multiprocessing
from typing import Dict, List, Sequence, Tuple

from wordhint.engine import ConstraintModel, feedback_marks, satisfies

log = logging.getLogger(__name__)


def expected_remaining(texts: Sequence[str], guess: str,
                       scratch: ConstraintModel | None = None) -> float:
    """
    Mean number of `texts` left after guessing `guess`, averaged over every
    word of `texts` as the hidden answer. Empty pool -> 0.0.
    """
    c = scratch if scratch is not None else ConstraintModel()
    seen: Dict[str, int] = {}
    avg = 0.0
    for i, answer in enumerate(texts):
        marks = feedback_marks(guess, answer)
        n = seen.get(marks)
        if n is None:
            c.load_marks(guess, marks)
            n = 0
            for w in texts:
                if satisfies(c, w):
                    n += 1
            seen[marks] = n
        # Incremental mean; no large running sum
        avg += (n - avg) / (i + 1)
    return avg


def _erc_chunk(task: Tuple[List[str], List[str]]) -> List[float]:
    texts, guesses = task
    scratch = ConstraintModel()
    return [expected_remaining(texts, g, scratch) for g in guesses]


def _split(guesses: List[str], n: int) -> List[List[str]]:
    """n contiguous, near-equal chunks (order preserved, no empties)."""
    size, extra = divmod(len(guesses), n)
    out, start = [], 0
    for i in range(n):
        end = start + size + (1 if i < extra else 0)
        if end > start:
            out.append(guesses[start:end])
        start = end
    return out


def expected_remaining_many(texts: Sequence[str], guesses: Sequence[str],
                            workers: int = 1, pool=None) -> List[float]:
    """
    expected_remaining for each guess, in the order given.

    `pool` is an optional caller-owned multiprocessing pool; without one a
    temporary pool of `workers` processes is used when workers > 1.
    """
    texts = list(texts)
    guesses = list(guesses)
    log.debug("expected remaining: %d guess(es) x %d candidates, workers=%d",
              len(guesses), len(texts), workers)
    if workers <= 1 or len(guesses) <= 1:
        return _erc_chunk((texts, guesses))

    tasks = [(texts, chunk) for chunk in _split(guesses, min(workers, len(guesses)))]
    if pool is not None:
        chunks = list(pool.imap(_erc_chunk, tasks))
    else:
        with multiprocessing.Pool(processes=len(tasks)) as tmp:
            chunks = list(tmp.imap(_erc_chunk, tasks))
    return [e for chunk in chunks for e in chunk]
