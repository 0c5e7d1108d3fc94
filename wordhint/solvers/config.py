from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class SuggestConfig:
    """
    Tunables for one ranking pass.

    threshold : pool size above which only a shortlist gets the exact
                expected-remaining evaluation (quadratic in pool size)
    shortlist : how many top heuristic words form that shortlist
    top_n     : how many suggestions to emit
    workers   : processes used for the expected-remaining evaluation (1 = serial)
    """
    threshold: int = 500
    shortlist: int = 20
    top_n: int = 20
    workers: int = 1

    def __post_init__(self):
        for name in ("threshold", "shortlist", "top_n"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


DEFAULT_CONFIG = SuggestConfig()


def add_config_arguments(ap) -> None:
    """Register the SuggestConfig flags on an argparse parser."""
    ap.add_argument("--threshold", type=int, default=DEFAULT_CONFIG.threshold,
                    help="pool size above which only a shortlist gets the expected-remaining pass")
    ap.add_argument("--shortlist", type=int, default=DEFAULT_CONFIG.shortlist,
                    help="number of top heuristic words evaluated on large pools")
    ap.add_argument("--top-n", type=int, default=DEFAULT_CONFIG.top_n,
                    help="number of suggestions to show")
    ap.add_argument("--workers", type=int, default=DEFAULT_CONFIG.workers,
                    help="processes for the expected-remaining pass (1 = serial)")


def config_from_args(args) -> SuggestConfig:
    return SuggestConfig(
        threshold=args.threshold,
        shortlist=args.shortlist,
        top_n=args.top_n,
        workers=args.workers,
    )
