"""
Links (Edges)
=============
Stores the undirected, weighted links between sites.

A link is kept with its endpoints in canonical order (smaller id first) and
its weight is the rounded Euclidean distance between the two sites, fixed
when the link is created. The insertion order of links is significant: it
is the tie-break between links of equal weight when building the MST.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterator

from pipelineplanner.model.geometry_primitives import round_half_up
from pipelineplanner.model.outcomes import AddEdgeResult, EdgeError
from pipelineplanner.model.vertices import VertexSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    """A link between sites a < b."""
    a: int
    b: int
    weight: int

    def key(self) -> tuple[int, int]:
        return (self.a, self.b)

    def __repr__(self) -> str:
        return f"E({self.a} - {self.b}, w={self.weight})"


def canonical_pair(a: int, b: int) -> tuple[int, int]:
    return (a, b) if a <= b else (b, a)


class EdgeSet:
    def __init__(self, vertices: VertexSet) -> None:
        self.vertices = vertices
        self._edges: list[Edge] = []
        self._keys: set[tuple[int, int]] = set()

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)})"

    def connect(self, a: int, b: int) -> AddEdgeResult:
        """
        Create a link between sites a and b.

        Checks, in order: self-loop, both ids valid, pair not already linked.

        Returns:
            AddEdgeResult with the link weight, or the EdgeError explaining the refusal.
        """
        if a == b:
            logger.debug(f"Rejected link {a} - {b}: self-loop.")
            return AddEdgeResult(error=EdgeError.SELF_LOOP)

        n = self.vertices.size()
        if not (0 <= a < n and 0 <= b < n):
            logger.debug(f"Rejected link {a} - {b}: invalid site id (have {n} sites).")
            return AddEdgeResult(error=EdgeError.INVALID_INDEX)

        key = canonical_pair(a, b)
        if key in self._keys:
            logger.debug(f"Rejected link {a} - {b}: already exists.")
            return AddEdgeResult(error=EdgeError.DUPLICATE_EDGE)

        p_a = self.vertices.get(a).position
        p_b = self.vertices.get(b).position
        weight = round_half_up(p_a.distance_to(p_b))

        self._edges.append(Edge(a=key[0], b=key[1], weight=weight))
        self._keys.add(key)
        logger.debug(f"Added link between {a} and {b} with weight {weight}.")
        return AddEdgeResult(weight=weight)

    def exists(self, a: int, b: int) -> bool:
        return canonical_pair(a, b) in self._keys

    def all(self) -> tuple[Edge, ...]:
        """All links, in insertion order."""
        return tuple(self._edges)

    def clear(self) -> None:
        self._edges = []
        self._keys = set()
