# src/cascim/diffusion/simulate.py

"""
Synthetic cascade generation.

Runs Independent Cascade (IC) on a social graph and records who activated
whom. The result is the same kind of directed cascade the greedy selector
consumes from observed data.
"""

import os
import random
from typing import Any, Iterable, List, Optional

import networkx as nx
from tqdm import tqdm


def simulate_ic_cascade(
    graph: nx.Graph,
    seed_set: Iterable[Any],
    activation_prob: float = 0.1,
    max_steps: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> nx.DiGraph:
    """
    Simulate one observed cascade on graph and return who-activated-whom.

    A node activated in the last wave tries each still-inactive neighbor
    once, succeeding with probability `activation_prob`; the first
    success records the edge u -> v. Waves stop when one activates nobody,
    or after max_steps waves.

    Every non-seed node in the result has exactly one parent, so the
    cascade is a forest rooted at the seeds. Seeds are always present,
    even when they activate nobody.
    """
    if not 0.0 <= activation_prob <= 1.0:
        raise ValueError(f"activation_prob must be in [0, 1], got {activation_prob}.")

    if rng is None:
        rng = random.Random()

    cascade = nx.DiGraph()
    seeds = list(dict.fromkeys(seed_set))
    cascade.add_nodes_from(seeds)

    ever_active = set(seeds)
    frontier = seeds

    step = 0
    while frontier:
        if max_steps is not None and step >= max_steps:
            break

        newly_active: List[Any] = []
        for u in frontier:
            for v in graph.neighbors(u):
                if v in ever_active:
                    continue
                if rng.random() < activation_prob:
                    ever_active.add(v)
                    newly_active.append(v)
                    cascade.add_edge(u, v)

        frontier = newly_active
        step += 1

    return cascade


def generate_ic_cascades(
    graph: nx.Graph,
    num_cascades: int,
    num_seeds: int = 1,
    activation_prob: float = 0.1,
    base_seed: int = 12345,
    max_steps: Optional[int] = None,
    verbose: bool = False,
) -> List[nx.DiGraph]:
    """
    Simulate num_cascades IC cascades, each from num_seeds random seeds.

    Run i uses random.Random(base_seed + i), so the whole batch is
    reproducible.
    """
    if num_cascades <= 0:
        raise ValueError("num_cascades must be positive")

    nodes = sorted(graph.nodes())
    if num_seeds <= 0 or num_seeds > len(nodes):
        raise ValueError(f"Invalid num_seeds={num_seeds} for n={len(nodes)} nodes")

    cascades = []
    for i in tqdm(range(num_cascades), disable=not verbose):
        rng = random.Random(base_seed + i)
        seeds = rng.sample(nodes, num_seeds)
        cascades.append(
            simulate_ic_cascade(
                graph,
                seeds,
                activation_prob=activation_prob,
                max_steps=max_steps,
                rng=rng,
            )
        )
    return cascades


def write_cascade(cascade: nx.DiGraph, path: str) -> None:
    """
    Write a cascade as a whitespace-separated edge list.

    Seeds with no out-edges are not representable in this format and are
    dropped, same as in observed cascade files.
    """
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w") as f:
        f.write(
            f"# cascade: {cascade.number_of_nodes()} nodes, "
            f"{cascade.number_of_edges()} edges\n"
        )
        for u, v in cascade.edges():
            f.write(f"{u} {v}\n")
