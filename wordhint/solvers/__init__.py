from __future__ import annotations
from typing import List
from .base import BaseSolver, REGISTRY, register, Suggestion, Suggestions
from .config import SuggestConfig, DEFAULT_CONFIG

from . import heuristic  # noqa: F401
from . import suggester  # noqa: F401
from .suggester import suggest


def create_solver(solver_id: str, config: SuggestConfig = DEFAULT_CONFIG) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(config)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
