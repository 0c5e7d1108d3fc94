"""
Solving session: one catalog, one constraint model, driven turn by turn.

State machine:

    AWAITING_GUESS --suggest()--> AWAITING_FEEDBACK --apply_feedback()--> FILTERING
          ^                                                                  |
          +------------------------------------------------------------------+
                                      |               |
                               pool == 1 -> SOLVED    pool == 0 -> CONTRADICTION

  stop() ends the session from any state (STOPPED); reset() starts over from
  the catalog the session was created with.

Error policy:
  - FeedbackParseError: nothing changes; the caller re-prompts.
  - ContradictionError: model and catalog keep their last consistent state,
    the session moves to CONTRADICTION and the error propagates so the caller
    can report it. reset() is the way out.
"""

from __future__ import annotations

import enum
import logging
from typing import List, Tuple

from wordhint.engine import Catalog, ConstraintModel, ContradictionError, parse_feedback
from wordhint.solvers import DEFAULT_CONFIG, SuggestConfig, Suggestions, suggest

log = logging.getLogger(__name__)


class State(str, enum.Enum):
    AWAITING_GUESS = "awaiting_guess"
    AWAITING_FEEDBACK = "awaiting_feedback"
    FILTERING = "filtering"
    SOLVED = "solved"
    CONTRADICTION = "contradiction"
    STOPPED = "stopped"


TERMINAL = frozenset({State.SOLVED, State.CONTRADICTION, State.STOPPED})


class Session:
    def __init__(self, catalog: Catalog, config: SuggestConfig = DEFAULT_CONFIG):
        self._initial = catalog.words
        self.catalog = catalog
        self.config = config
        self.model = ConstraintModel()
        self.history: List[Tuple[str, str]] = []  # (guess, feedback line)
        self.state = State.AWAITING_GUESS
        self._settle()

    # ---- queries ----

    @property
    def remaining(self) -> int:
        return len(self.catalog)

    @property
    def done(self) -> bool:
        return self.state in TERMINAL

    @property
    def answer(self) -> str | None:
        """The answer once the pool is down to a single word."""
        return self.catalog[0].text if self.state is State.SOLVED else None

    # ---- transitions ----

    def suggest(self) -> Suggestions:
        """Rank the current pool. Allowed in any state but CONTRADICTION/STOPPED."""
        if self.state in (State.CONTRADICTION, State.STOPPED):
            raise RuntimeError(f"cannot suggest: session is {self.state.value}")
        out = suggest(self.catalog.words, self.config)
        if self.state is State.AWAITING_GUESS:
            self.state = State.AWAITING_FEEDBACK
        return out

    def apply_feedback(self, line: str) -> int:
        """
        Parse a feedback line and narrow the pool. Returns the new pool size.

        Raises FeedbackParseError (no state change) or ContradictionError.
        """
        self._require_open()
        guess, delta = parse_feedback(line)
        return self.apply_delta(guess, delta, line=" ".join(line.split()))

    def apply_delta(self, guess: str, delta: ConstraintModel, line: str) -> int:
        """
        Merge the constraint delta seen for `guess` and prune. `line` is the
        feedback as shown to the operator (kept in history). Returns the new
        pool size.
        """
        self._require_open()
        prev = self.state
        self.state = State.FILTERING

        model = self.model.copy()
        try:
            model.merge(delta)
            self.catalog.prune(model)
        except ContradictionError:
            log.info("contradiction after %r; %d candidates kept", guess, len(self.catalog))
            self.state = State.CONTRADICTION
            raise
        except Exception:
            self.state = prev
            raise

        self.model = model
        self.history.append((guess, line))
        self._settle()
        return len(self.catalog)

    def stop(self) -> None:
        self.state = State.STOPPED

    def reset(self) -> None:
        self.catalog = Catalog(self._initial)
        self.model.reset()
        self.history.clear()
        self.state = State.AWAITING_GUESS
        self._settle()

    # ---- internals ----

    def _require_open(self) -> None:
        if self.state in TERMINAL:
            raise RuntimeError(f"session is {self.state.value}; reset() to start over")

    def _settle(self) -> None:
        self.state = State.SOLVED if len(self.catalog) == 1 else State.AWAITING_GUESS

