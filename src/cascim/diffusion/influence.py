# src/cascim/diffusion/influence.py

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Sequence, Union

import numpy as np

from cascim.errors import EmptyInputError
from cascim.graphs.cascades import Cascade, CascadeStore
from cascim.diffusion.reachability import reach_from, reachable_from

Cascades = Union[CascadeStore, Sequence[Cascade]]


def _as_list(cascades: Cascades) -> list:
    cascades = list(cascades)
    if not cascades:
        raise EmptyInputError("No cascades loaded; cannot estimate influence.")
    return cascades


def total_reach(cascades: Cascades, candidate_set: Iterable[Any]) -> int:
    """
    Number of nodes candidate_set reaches, summed over all cascades.

    Exact integer; greedy gains are compared on this rather than on the
    averaged float so that equal gains always compare equal.

    Raises:
        EmptyInputError: if there are no cascades.
    """
    cascades = _as_list(cascades)
    candidate_set = set(candidate_set)

    counts = np.fromiter(
        (reachable_from(A, candidate_set) for A in cascades),
        dtype=np.int64,
        count=len(cascades),
    )
    return int(counts.sum())


def calculate_influence(cascades: Cascades, candidate_set: Iterable[Any]) -> float:
    """
    Expected influence of candidate_set: the number of nodes it reaches,
    averaged uniformly over the observed cascades.

        σ(T) = (1/|C|) * sum_{A in C} reachable_from(A, T)

    Raises:
        EmptyInputError: if there are no cascades.
    """
    cascades = _as_list(cascades)
    return total_reach(cascades, candidate_set) / len(cascades)


@dataclass
class InfluenceSummary:
    """
    Per-node view of a seed set's influence across cascades.

    Attributes:
        reach_prob:
            Mapping node -> fraction of cascades in which the node is
            reached from the seed set.

        expected_spread:
            Expected number of reached nodes:
                expected_spread = sum_v reach_prob[v]
    """

    reach_prob: Dict[Any, float]
    expected_spread: float


def summarize_influence(
    cascades: Cascades,
    seed_set: Iterable[Any],
) -> InfluenceSummary:
    """
    Collapse the reach of seed_set in every cascade into per-node reach
    probabilities and an overall expected spread.

    expected_spread matches calculate_influence for the same inputs.
    """
    cascades = _as_list(cascades)
    seed_set = set(seed_set)

    counts: Dict[Any, int] = {}
    for A in cascades:
        for v in reach_from(A, seed_set).all_reached:
            counts[v] = counts.get(v, 0) + 1

    num_cascades = len(cascades)
    reach_prob: Dict[Any, float] = {
        v: c / num_cascades for v, c in counts.items()
    }
    expected_spread = float(sum(counts.values())) / num_cascades

    return InfluenceSummary(reach_prob=reach_prob, expected_spread=expected_spread)
