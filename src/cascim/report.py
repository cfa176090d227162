# src/cascim/report.py

"""
Plain-text reporting of a greedy run: seed set, influence, elapsed time.
"""

import time
from typing import Any, Iterable, Optional


def format_seed_set(seeds: Iterable[Any]) -> str:
    """Format nodes as "{1, 2, 3}" in ascending order."""
    return "{" + ", ".join(str(s) for s in sorted(seeds)) + "}"


class Stopwatch:
    """
    Wall-clock timer usable as a context manager.

        with Stopwatch() as sw:
            ...
        sw.elapsed  # seconds
    """

    def __init__(self):
        self._start: Optional[float] = None
        self._stop: Optional[float] = None

    def __enter__(self) -> "Stopwatch":
        self._start = time.perf_counter()
        self._stop = None
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._stop = time.perf_counter()

    @property
    def elapsed(self) -> float:
        if self._start is None:
            return 0.0
        end = self._stop if self._stop is not None else time.perf_counter()
        return end - self._start


def format_report(result, num_cascades: Optional[int] = None) -> str:
    """
    Multi-line summary of a GreedyResult.

    Example:

        CASCADES: 3
        APPROXIMATELY OPTIMAL SET (SIZE 2): {1, 3}
        INFLUENCE OF APPROX. OPTIMAL SET (NUMBER OF NODES): 2.000000
        TIME (SEC): 0.004
    """
    lines = []
    if num_cascades is not None:
        lines.append(f"CASCADES: {num_cascades}")
    lines.append(
        f"APPROXIMATELY OPTIMAL SET (SIZE {len(result.seeds)}): "
        f"{format_seed_set(result.seeds)}"
    )
    lines.append(
        f"INFLUENCE OF APPROX. OPTIMAL SET (NUMBER OF NODES): {result.influence:.6f}"
    )
    lines.append(f"TIME (SEC): {result.elapsed_seconds:.3f}")
    return "\n".join(lines)
