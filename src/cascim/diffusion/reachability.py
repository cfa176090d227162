# src/cascim/diffusion/reachability.py

"""
Reachability within a single cascade.

Every edge in an observed cascade already fired, so the reach of a seed
set is just the set of nodes reachable from it along directed edges.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Set

from cascim.graphs.cascades import Cascade


@dataclass
class ReachResult:
    """
    Outcome of one multi-source BFS over a cascade.

    `layers[0]` holds the seeds; `layers[h]` the nodes whose shortest
    distance from the seed set is h. `reached` is their union.
    """

    layers: List[Set[Any]]
    reached: Set[Any]

    @property
    def reached_by_hop(self) -> List[Set[Any]]:
        return self.layers

    @property
    def all_reached(self) -> Set[Any]:
        return self.reached

    def num_reached(self) -> int:
        return len(self.reached)


def reach_from(
    cascade: Cascade,
    seed_set: Iterable[Any],
    max_hops: Optional[int] = None,
) -> ReachResult:
    """
    Breadth-first search from all seeds at once.

    Seeds are reached at hop 0 even when the cascade never mentions them.
    Only outgoing edges are followed and a node is entered at most once,
    so cycles terminate.

    Args:
        cascade: Cascade to traverse.
        seed_set: Source nodes.
        max_hops: Optional depth limit. If None, stop when no new node
            is found.

    Returns:
        ReachResult with the BFS layers and the reached set.
    """
    seeds = set(seed_set)
    if not seeds:
        return ReachResult(layers=[], reached=set())

    reached: Set[Any] = set(seeds)
    layers: List[Set[Any]] = [seeds]

    while max_hops is None or len(layers) <= max_hops:
        next_layer = {
            v
            for u in layers[-1]
            for v in cascade.successors(u)
            if v not in reached
        }
        if not next_layer:
            break
        reached |= next_layer
        layers.append(next_layer)

    return ReachResult(layers=layers, reached=reached)


def reachable_from(cascade: Cascade, seed_set: Iterable[Any]) -> int:
    """Number of distinct nodes reachable from seed_set in cascade, seeds included."""
    return reach_from(cascade, seed_set).num_reached()
