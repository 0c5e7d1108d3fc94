"""
Constraint model, diff engine and candidate filtering.

Given:
  - feedback marks for a guess (from a real game or a hypothetical answer)

Build:
  - a ConstraintModel: what is known about the answer so far

Then:
  - keep only the words that are consistent with that model.

This is the core step that turns feedback into a shrinking candidate set.

Encoding:
  fixed_position[i]        letter known to sit at position i (or None)
  excluded_at_position[i]  letters known NOT to sit at position i
  min_count / max_count    per-letter occurrence bounds
  must_contain             letters with min_count >= 1 (derived)
  must_not_contain         letters with max_count == 0 (derived)

The count bounds are what make repeated letters come out right: a '-' on a
letter that is also '+' or '~' elsewhere in the same guess does not mean
"absent", it means "no more copies than the ones already accounted for".
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from .errors import ContradictionError, FeedbackParseError
from .scoring import MARKS, WORD_LENGTH, feedback_marks


class ConstraintModel:
    """Everything known about the answer. Empty (no knowledge) when created."""

    __slots__ = ("fixed_position", "excluded_at_position", "min_count", "max_count")

    def __init__(self):
        self.fixed_position: List[Optional[str]] = [None] * WORD_LENGTH
        self.excluded_at_position: List[Set[str]] = [set() for _ in range(WORD_LENGTH)]
        self.min_count: Dict[str, int] = {}
        self.max_count: Dict[str, int] = {}

    # ---- construction ----

    @classmethod
    def from_marks(cls, guess: str, marks: str) -> "ConstraintModel":
        """Delta implied by seeing `marks` after guessing `guess`."""
        m = cls()
        m._add_marks(guess, marks)
        return m

    def load_marks(self, guess: str, marks: str) -> "ConstraintModel":
        """Reset, then hold exactly the delta for (guess, marks). Reuses storage."""
        self.reset()
        self._add_marks(guess, marks)
        return self

    def _add_marks(self, guess: str, marks: str) -> None:
        # Occurrences accounted for by '+' or '~' in this guess
        accounted = Counter(g for g, m in zip(guess, marks) if m != "-")

        for i, (g, m) in enumerate(zip(guess, marks)):
            if m == "+":
                self.fixed_position[i] = g
                continue
            if m == "~" or accounted[g]:
                self.excluded_at_position[i].add(g)
            if m == "-":
                # No copies beyond the accounted ones (zero -> absent)
                cap = accounted[g]
                self.max_count[g] = min(self.max_count.get(g, cap), cap)

        for g, n in accounted.items():
            if n > self.min_count.get(g, 0):
                self.min_count[g] = n

    def copy(self) -> "ConstraintModel":
        m = ConstraintModel()
        m.fixed_position = list(self.fixed_position)
        m.excluded_at_position = [set(s) for s in self.excluded_at_position]
        m.min_count = dict(self.min_count)
        m.max_count = dict(self.max_count)
        return m

    def reset(self) -> None:
        for i in range(WORD_LENGTH):
            self.fixed_position[i] = None
            self.excluded_at_position[i].clear()
        self.min_count.clear()
        self.max_count.clear()

    # ---- derived views ----

    @property
    def must_contain(self) -> FrozenSet[str]:
        return frozenset(c for c, n in self.min_count.items() if n >= 1)

    @property
    def must_not_contain(self) -> FrozenSet[str]:
        return frozenset(c for c, n in self.max_count.items() if n == 0)

    def is_empty(self) -> bool:
        return (
            not any(self.fixed_position)
            and not any(self.excluded_at_position)
            and not self.min_count
            and not self.max_count
        )

    def __repr__(self) -> str:
        fixed = "".join(c or "." for c in self.fixed_position)
        return (
            f"ConstraintModel(fixed={fixed!r}, "
            f"excluded={[''.join(sorted(s)) for s in self.excluded_at_position]}, "
            f"contains={''.join(sorted(self.must_contain))!r}, "
            f"absent={''.join(sorted(self.must_not_contain))!r})"
        )

    # ---- accumulation ----

    def merge(self, delta: "ConstraintModel") -> None:
        """
        Fold `delta` into this model.

        Raises ContradictionError if the result would break an invariant; the
        model is left untouched in that case.
        """
        merged = self.copy()

        for i, c in enumerate(delta.fixed_position):
            if c is None:
                continue
            have = merged.fixed_position[i]
            if have is not None and have != c:
                raise ContradictionError(
                    f"position {i + 1} fixed to both {have!r} and {c!r}"
                )
            merged.fixed_position[i] = c

        for i, s in enumerate(delta.excluded_at_position):
            merged.excluded_at_position[i] |= s
        for c, n in delta.min_count.items():
            merged.min_count[c] = max(merged.min_count.get(c, 0), n)
        for c, n in delta.max_count.items():
            merged.max_count[c] = min(merged.max_count.get(c, n), n)

        # Fixed letters count towards the minimum too
        for c, n in Counter(c for c in merged.fixed_position if c).items():
            if n > merged.min_count.get(c, 0):
                merged.min_count[c] = n

        merged.check()

        self.fixed_position = merged.fixed_position
        self.excluded_at_position = merged.excluded_at_position
        self.min_count = merged.min_count
        self.max_count = merged.max_count

    def check(self) -> None:
        """Raise ContradictionError if any invariant of the model is broken."""
        for i, c in enumerate(self.fixed_position):
            if c is not None and c in self.excluded_at_position[i]:
                raise ContradictionError(
                    f"{c!r} is both confirmed and excluded at position {i + 1}"
                )
        for c, lo in self.min_count.items():
            hi = self.max_count.get(c)
            if hi is not None and lo > hi:
                if hi == 0:
                    raise ContradictionError(f"{c!r} is both required and absent")
                raise ContradictionError(
                    f"{c!r} must occur at least {lo} time(s) but at most {hi}"
                )
        if sum(self.min_count.values()) > WORD_LENGTH:
            raise ContradictionError(
                f"more than {WORD_LENGTH} letter occurrences are required"
            )


def diff(guess: str, answer: str) -> ConstraintModel:
    """
    Constraint delta implied by guessing `guess` when the answer is `answer`.
    Pure; both words are five lowercase letters.
    """
    return ConstraintModel.from_marks(guess, feedback_marks(guess, answer))


def parse_feedback(line: str) -> Tuple[str, ConstraintModel]:
    """
    Parse a feedback line such as '+a -l ~p -h -a'.

    Returns:
      (guess, delta) where guess is the five letters in order.

    Raises:
      FeedbackParseError on wrong token count, wrong token length, unknown
      operator or a letter outside a-z. Nothing is mutated.
    """
    fields = line.split()
    if len(fields) != WORD_LENGTH:
        raise FeedbackParseError(
            f"expected {WORD_LENGTH} fields, got {len(fields)}: {line.strip()!r}"
        )
    for i, f in enumerate(fields, 1):
        if len(f) != 2:
            raise FeedbackParseError(f"field {i} must be 2 characters, got {f!r}")
        op, b = f[0], f[1]
        if op not in MARKS:
            raise FeedbackParseError(f"field {i} has unknown operator {op!r} (use + ~ -)")
        if not ("a" <= b <= "z"):
            raise FeedbackParseError(f"field {i} has non-letter {b!r} (use a-z)")

    guess = "".join(f[1] for f in fields)
    marks = "".join(f[0] for f in fields)
    return guess, ConstraintModel.from_marks(guess, marks)


def satisfies(model: ConstraintModel, word: str) -> bool:
    """Whether `word` is consistent with `model`. Short-circuits on first failure."""
    fixed = model.fixed_position
    excluded = model.excluded_at_position
    for i in range(WORD_LENGTH):
        ch = word[i]
        want = fixed[i]
        if want is not None and ch != want:
            return False
        if ch in excluded[i]:
            return False
    for c, n in model.min_count.items():
        if word.count(c) < n:
            return False
    for c, n in model.max_count.items():
        if word.count(c) > n:
            return False
    return True


def filter_words(model: ConstraintModel, words: Iterable) -> list:
    """
    Keep only the words consistent with `model` (order preserved).

    Accepts Word objects or plain strings; returns the same kind it was given.
    """
    out = []
    for w in words:
        if satisfies(model, getattr(w, "text", w)):
            out.append(w)
    return out
