"""
Minimum Spanning Tree Solver (Kruskal)
======================================
Selects the cheapest set of links that connects every site.

Why is this file needed?
------------------------
1. Algorithm: It runs Kruskal's algorithm over a snapshot of the network
   (site count + link list) using a fresh disjoint-set forest per call.
2. Determinism: Links are sorted with a STABLE sort by weight, so among
   equally weighted links the one inserted first is always considered
   first. Swapping in an unstable sort would change which tree is built.
3. Purity: The solver never touches the VertexSet or EdgeSet it was fed
   from; the result depends only on the snapshot.

Classes:
    MSTResult: The ordered selection of links and its total cost.
    MSTSolver: The Kruskal implementation.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterable, Iterator

from pipelineplanner.model.edges import Edge, canonical_pair
from pipelineplanner.model.union_find import UnionFind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MSTResult:
    """
    Links selected by the solver, in selection order
    (ascending weight, insertion order among equal weights).

    For a disconnected network this is a minimum spanning forest.
    """
    edges: tuple[Edge, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    @property
    def total_cost(self) -> int:
        return sum(edge.weight for edge in self.edges)

    def is_spanning_tree(self, vertex_count: int) -> bool:
        """True if the selection connects all `vertex_count` sites."""
        return vertex_count >= 1 and len(self.edges) == vertex_count - 1

    def contains(self, a: int, b: int) -> bool:
        key = canonical_pair(a, b)
        return any(edge.key() == key for edge in self.edges)


class MSTSolver:
    @staticmethod
    def solve(vertex_count: int, edges: Iterable[Edge]) -> MSTResult:
        """
        Compute the minimum spanning forest of a network snapshot.

        Args:
            vertex_count: Number of sites; every edge endpoint must be below it.
            edges: Links in insertion order.

        Returns:
            MSTResult holding at most vertex_count - 1 links.
        """
        if vertex_count < 2:
            return MSTResult()

        # sorted() is guaranteed stable
        sorted_edges = sorted(edges, key=lambda edge: edge.weight)
        forest = UnionFind(vertex_count)
        target = vertex_count - 1

        selected: list[Edge] = []
        for edge in sorted_edges:
            if forest.find(edge.a) != forest.find(edge.b):
                forest.union(edge.a, edge.b)
                selected.append(edge)
                if len(selected) == target:
                    break

        logger.debug(
            f"MST selected {len(selected)} of {len(sorted_edges)} links "
            f"for {vertex_count} sites (total cost {sum(e.weight for e in selected)})."
        )
        return MSTResult(edges=tuple(selected))
