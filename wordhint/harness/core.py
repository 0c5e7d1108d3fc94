"""
Simulation harness.

- run_case:  play one puzzle (known hidden answer) with a given solver.
- run_batch: play many puzzles in sequence (optionally a sample prefix).

A game keeps guessing until the answer is hit or the pool runs dry; it is a
success when the answer is found within Wordle's 6-turn budget. Feedback comes
from the diff engine, so the simulated loop exercises exactly the same
constraint/filter path as an interactive session.

These functions are UI-agnostic so they can be reused by a CLI app, a notebook
or a service without changes.
"""

from __future__ import annotations
import logging
import time
from typing import Dict, List, Sequence

from wordhint.engine import Catalog, ContradictionError, Word, diff, format_feedback, is_valid_word
from .session import Session

log = logging.getLogger(__name__)

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6


def run_case(
        solver,
        answer: str,
        *,
        words: Sequence[Word],
        first_guess: str | None = None,
        max_turns: int = WORDLE_MAX_TURNS,
) -> Dict:
    """
    Play one game until the solver finds `answer` or the pool is exhausted.

    Args:
        solver:      a BaseSolver (its config drives the ranking)
        answer:      the hidden word for this case
        words:       the candidate pool the game starts from
        first_guess: force the opening guess instead of asking the solver
        max_turns:   turn budget that decides `success` (play continues past it)

    Returns:
        dict with keys:
            success (bool: solved within max_turns), solved (bool),
            guesses (int), time_ms (float), remaining (int, pool size at the
            end), history (list[(guess, feedback line)]), answer (str)
    """
    if first_guess is not None and not is_valid_word(first_guess):
        raise ValueError(f"first guess must be 5 lowercase letters, got {first_guess!r}")

    session = Session(Catalog(words), solver.config)
    history = session.history
    solved = False

    t0 = time.perf_counter()
    turn = 0
    while True:
        turn += 1
        if turn == 1 and first_guess is not None:
            guess = first_guess
        else:
            if not len(session.catalog):
                break
            guess = solver.next_guess({
                "turn": turn,
                "history": list(history),
                "candidates": session.catalog.words,
            })

        if guess == answer:
            history.append((guess, format_feedback(guess, answer)))
            solved = True
            break
        if session.done:
            history.append((guess, format_feedback(guess, answer)))
            if turn == 1 and first_guess is not None:
                # Forced opener missed a one-word pool; the solver plays that word next
                continue
            # Pool narrowed to a single word that is not the answer
            break

        try:
            session.apply_delta(guess, diff(guess, answer), format_feedback(guess, answer))
        except ContradictionError:
            # Only possible when the answer is not in the pool
            history.append((guess, format_feedback(guess, answer)))
            log.info("pool exhausted for %r after %d guess(es)", answer, turn)
            break

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "success": solved and len(history) <= max_turns,
        "solved": solved,
        "guesses": len(history),
        "time_ms": dt,
        "remaining": len(session.catalog),
        "history": list(history),
        "answer": answer,
    }


def run_batch(
        solver,
        answers: Sequence[str],
        *,
        words: Sequence[Word],
        first_guess: str | None = None,
        sample: int | None = None,
        progress=None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used to speed up quick experiments. `progress` wraps the
    answer iterable (e.g. tqdm) when given.
    """
    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    iterator = progress(pool) if progress is not None else pool
    out: List[Dict] = []
    for ans in iterator:
        r = run_case(solver, ans, words=words, first_guess=first_guess)
        r["solver_id"] = solver.id
        out.append(r)
    return out
