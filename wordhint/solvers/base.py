from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Type

from .config import SuggestConfig, DEFAULT_CONFIG

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


@dataclass
class Suggestion:
    """One ranked word for the current pass. `expected` is None unless shortlisted."""
    word: str
    frequency: int
    score: int = 0
    expected: Optional[float] = None

    def as_tuple(self):
        return (self.word, self.expected, self.frequency, self.score)


@dataclass
class Suggestions:
    """Ranked output (most preferred first) plus the size of the candidate pool."""
    ranked: List[Suggestion]
    total: int

    @property
    def best(self) -> Optional[Suggestion]:
        return self.ranked[0] if self.ranked else None

    def words(self) -> List[str]:
        return [s.word for s in self.ranked]


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, config: SuggestConfig = DEFAULT_CONFIG):
        self.config = config

    def reset(self, *, config: SuggestConfig | None = None) -> None:
        if config is not None:
            self.config = config

    def close(self) -> None:
        """Release resources held across calls (worker pools). Safe to repeat."""

    def rank(self, words: List) -> Suggestions:
        raise NotImplementedError("Override in subclass")

    def next_guess(self, state: dict) -> str:
        """
        Top-ranked word for the current pool.

        Args:
            state: dict with keys
                - "candidates": current consistent pool (List[Word])
                - "turn":       1-based turn number
                - "history":    list of (guess, feedback line)
        """
        best = self.rank(state["candidates"]).best
        if best is None:
            raise ValueError("no candidates left to guess from")
        return best.word
