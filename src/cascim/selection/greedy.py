# src/cascim/selection/greedy.py

"""
Greedy hill-climbing for influence maximization (Kempe, Kleinberg, Tardos 2003).

    Start with S = ∅
    for i = 1 to k:
        choose u maximizing σ(S ∪ {u}) − σ(S)
        S ← S ∪ {u}

σ is the average reach over observed cascades (see diffusion.influence).
Candidates are scanned in ascending node order and a node only replaces
the round's best on a strictly larger gain, so the first node in that
order wins ties. Gains are compared as integer total reach (σ times the
number of cascades), which orders candidates exactly like σ does but
without float rounding.
"""

import heapq
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Set, Tuple

from tqdm import tqdm

from cascim.errors import EmptyInputError, validate_k
from cascim.graphs.cascades import CascadeStore
from cascim.diffusion.influence import Cascades, total_reach
from cascim.report import Stopwatch


@dataclass
class GreedyResult:
    """
    Trace of a greedy run.

    Attributes:
        seeds:          [v1, v2, ..., vk] in the order selected
        spreads:        [σ({v1}), σ({v1,v2}), ..., σ(S_k)]
        marginal_gains: [σ(S_1) − 0, σ(S_2) − σ(S_1), ..., σ(S_k) − σ(S_{k-1})]
        num_evaluations: number of σ(·) evaluations performed
        elapsed_seconds: wall-clock time of the selection loop
    """

    seeds: List[Any] = field(default_factory=list)
    spreads: List[float] = field(default_factory=list)
    marginal_gains: List[float] = field(default_factory=list)
    num_evaluations: int = 0
    elapsed_seconds: float = 0.0

    @property
    def seed_set(self) -> Set[Any]:
        return set(self.seeds)

    @property
    def influence(self) -> float:
        """σ of the final seed set (0.0 if nothing was selected)."""
        return self.spreads[-1] if self.spreads else 0.0


def _canonical_universe(vertex_universe: Iterable[Any]) -> List[Any]:
    return sorted(set(vertex_universe))


def _naive_rounds(
    universe: List[Any],
    cascades: Cascades,
    k: int,
    result: GreedyResult,
    verbose: bool,
) -> None:
    num_cascades = len(cascades)
    selected: Set[Any] = set()
    previous_total = 0

    for i in range(k):
        if len(selected) == len(universe):
            break

        best_u: Any = None
        best_gain: float = float("-inf")
        best_total = 0

        candidates = [u for u in universe if u not in selected]
        for u in tqdm(candidates, desc=f"round {i+1}", disable=not verbose, leave=False):
            total_T = total_reach(cascades, selected | {u})
            result.num_evaluations += 1
            delta = total_T - previous_total

            if delta > best_gain:
                best_gain = delta
                best_total = total_T
                best_u = u

        selected.add(best_u)
        _record(result, i, k, best_u, best_total, previous_total, num_cascades, verbose)
        previous_total = best_total


def _lazy_rounds(
    universe: List[Any],
    cascades: Cascades,
    k: int,
    result: GreedyResult,
    verbose: bool,
) -> None:
    """
    Lazy greedy (CELF). Marginal gains from earlier rounds are upper bounds
    on the current ones (submodularity), so only the top of the queue needs
    re-evaluating. Heap entries are (-gain, index in canonical order, round
    the gain was computed in, total reach), with gains kept as integer
    total-reach differences so ties stay exact and the first node in
    canonical order still wins them.
    """
    num_cascades = len(cascades)
    selected: Set[Any] = set()
    previous_total = 0
    heap: List[Tuple[int, int, int, int]] = []

    for idx, u in enumerate(tqdm(universe, desc="round 1", disable=not verbose, leave=False)):
        total = total_reach(cascades, {u})
        result.num_evaluations += 1
        heap.append((-total, idx, 0, total))
    heapq.heapify(heap)

    for i in range(k):
        if not heap:
            break

        while True:
            _, idx, computed_in, total = heap[0]
            if computed_in == i:
                heapq.heappop(heap)
                break
            total = total_reach(cascades, selected | {universe[idx]})
            result.num_evaluations += 1
            heapq.heapreplace(heap, (-(total - previous_total), idx, i, total))

        best_u = universe[idx]
        selected.add(best_u)
        _record(result, i, k, best_u, total, previous_total, num_cascades, verbose)
        previous_total = total


def _record(
    result: GreedyResult,
    i: int,
    k: int,
    u: Any,
    total: int,
    previous_total: int,
    num_cascades: int,
    verbose: bool,
) -> None:
    sigma = total / num_cascades
    gain = (total - previous_total) / num_cascades
    result.seeds.append(u)
    result.spreads.append(sigma)
    result.marginal_gains.append(gain)

    if verbose:
        print(
            f"[iter {i+1}/{k}] chose v = {u}, "
            f"marginal gain = {gain:.3f}, "
            f"σ(S) = {sigma:.3f}"
        )


def greedy_influence_maximization(
    vertex_universe: Iterable[Any],
    cascades: Cascades,
    k: int,
    lazy: bool = False,
    verbose: bool = False,
) -> GreedyResult:
    """
    Greedy approximation algorithm for influence maximization over
    observed cascades.

    Args:
        vertex_universe:
            Candidate nodes. Scanned in ascending order.
        cascades:
            CascadeStore or sequence of Cascades used to estimate σ(·).
        k:
            Number of seeds to select. Must be a positive int.
        lazy:
            Use the CELF priority queue instead of rescanning every
            candidate each round. Selects the same seeds.
        verbose:
            If True, print per-round progress.

    Returns:
        GreedyResult. Holds fewer than k seeds when the universe runs out.

    Raises:
        InvalidParameterError: if k is not a positive int.
        EmptyInputError: if the universe is non-empty but there are no
            cascades to estimate influence from.
    """
    validate_k(k)
    universe = _canonical_universe(vertex_universe)

    result = GreedyResult()
    if not universe:
        return result

    if isinstance(cascades, CascadeStore):
        cascades.freeze()

    if len(cascades) == 0:
        raise EmptyInputError("No cascades loaded; cannot run greedy selection.")

    rounds = _lazy_rounds if lazy else _naive_rounds
    with Stopwatch() as sw:
        rounds(universe, cascades, k, result, verbose)
    result.elapsed_seconds = sw.elapsed

    return result


def select_seeds(
    vertex_universe: Iterable[Any],
    cascades: Cascades,
    k: int,
    lazy: bool = False,
    verbose: bool = False,
) -> Tuple[Set[Any], float]:
    """
    Pick up to k seeds greedily.

    Returns:
        (seed_set, influence of seed_set)
    """
    result = greedy_influence_maximization(
        vertex_universe, cascades, k, lazy=lazy, verbose=verbose
    )
    return result.seed_set, result.influence


def select_seeds_from_store(
    store: CascadeStore,
    k: int,
    lazy: bool = False,
    verbose: bool = False,
) -> GreedyResult:
    """Run greedy selection over a store's own (frozen) vertex universe."""
    return greedy_influence_maximization(
        store.vertex_universe, store, k, lazy=lazy, verbose=verbose
    )
