# src/cascim/graphs/cascades.py

"""
In-memory cascade store.

A cascade is one observed spread of information, recorded as a directed
who-influenced-whom graph. We keep each one as a plain adjacency mapping
(node -> tuple of direct successors) since the reachability BFS only ever
needs out-neighbors, and collect all of them in a CascadeStore together
with the vertex universe.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import (
    Any,
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

import networkx as nx


@dataclass(frozen=True)
class Cascade:
    """
    Immutable directed adjacency structure for a single cascade.

    Attributes:
        adjacency:
            Mapping node -> tuple of nodes it directly influences, in the
            order the edges were read. Nodes with no out-edges may be
            missing as keys.
        nodes:
            Every node appearing in the cascade, as source or target.
        name:
            Optional label (usually the file the cascade came from).
    """

    adjacency: Mapping[Any, Tuple[Any, ...]]
    nodes: FrozenSet[Any]
    name: Optional[str] = None

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[Any, Any]],
        name: Optional[str] = None,
    ) -> "Cascade":
        """
        Build a cascade from directed (from, to) pairs.

        Duplicate edges are kept; they don't change reachability.
        """
        adj: Dict[Any, List[Any]] = {}
        nodes = set()
        for u, v in edges:
            adj.setdefault(u, []).append(v)
            nodes.add(u)
            nodes.add(v)

        frozen = {u: tuple(vs) for u, vs in adj.items()}
        return cls(
            adjacency=MappingProxyType(frozen),
            nodes=frozenset(nodes),
            name=name,
        )

    @classmethod
    def from_digraph(cls, graph: nx.DiGraph, name: Optional[str] = None) -> "Cascade":
        """
        Build a cascade from a NetworkX DiGraph.

        Isolated nodes of the graph are kept in `nodes`.
        """
        if not graph.is_directed():
            raise ValueError("Cascade.from_digraph expects a directed graph.")

        cascade = cls.from_edges(graph.edges(), name=name)
        isolated = set(graph.nodes()) - cascade.nodes
        if not isolated:
            return cascade
        return cls(
            adjacency=cascade.adjacency,
            nodes=cascade.nodes | frozenset(isolated),
            name=name,
        )

    def successors(self, node: Any) -> Tuple[Any, ...]:
        """Direct out-neighbors of node (empty if it has none)."""
        return self.adjacency.get(node, ())

    def num_nodes(self) -> int:
        return len(self.nodes)

    def num_edges(self) -> int:
        return sum(len(vs) for vs in self.adjacency.values())

    def to_digraph(self) -> nx.DiGraph:
        """Convert back to a NetworkX DiGraph (duplicate edges collapse)."""
        G = nx.DiGraph(name=self.name or "")
        G.add_nodes_from(self.nodes)
        for u, vs in self.adjacency.items():
            G.add_edges_from((u, v) for v in vs)
        return G


@dataclass
class CascadeStore:
    """
    Ordered collection of cascades plus the vertex universe.

    The universe grows as cascades are added. Once frozen (the selector
    freezes it before the first round) further additions are rejected and
    `cascades` becomes a tuple.
    """

    cascades: Sequence[Cascade] = field(default_factory=list)
    _universe: set = field(default_factory=set, repr=False)
    _frozen: Optional[Tuple[Any, ...]] = field(default=None, repr=False)

    def __post_init__(self):
        self.cascades = list(self.cascades)
        for c in self.cascades:
            self._universe |= c.nodes

    def add(self, cascade: Cascade) -> None:
        if self._frozen is not None:
            raise RuntimeError("CascadeStore is frozen; cannot add cascades.")
        self.cascades.append(cascade)
        self._universe |= cascade.nodes

    def freeze(self) -> Tuple[Any, ...]:
        """
        Freeze the store and return the vertex universe in canonical
        (ascending) order.
        """
        if self._frozen is None:
            self._frozen = tuple(sorted(self._universe))
            self.cascades = tuple(self.cascades)
        return self._frozen

    @property
    def vertex_universe(self) -> Tuple[Any, ...]:
        return self.freeze()

    @property
    def is_frozen(self) -> bool:
        return self._frozen is not None

    def __len__(self) -> int:
        return len(self.cascades)

    def __iter__(self) -> Iterator[Cascade]:
        return iter(self.cascades)

    def __getitem__(self, idx: int) -> Cascade:
        return self.cascades[idx]
