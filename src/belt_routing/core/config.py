from __future__ import annotations

from dataclasses import dataclass

EXACT_THRESHOLD_DEFAULT = 10


@dataclass(frozen=True)
class SolverConfig:
    """Solver dispatch settings.

    Clouds with fewer than ``exact_threshold`` points are searched exhaustively,
    larger ones with the nearest-neighbour heuristic. 9!/2 permutations are still
    fast enough, 10!/2 are not.
    """

    exact_threshold: int = EXACT_THRESHOLD_DEFAULT

    def __post_init__(self):
        if self.exact_threshold < 3:
            raise ValueError(
                f"exact_threshold needs to be at least 3, got {self.exact_threshold}."
            )


SOLVER_DEFAULT = SolverConfig()
