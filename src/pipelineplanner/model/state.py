"""
Network State (Data Model)
==========================
This module defines the central data structure for a planning session.

Why is this file needed?
------------------------
1. State Management: It holds the sites, the links and the cached MST in
   one place, owned by a single controller (the Store).
2. Consistency: The cached MST is tied to the link list it was computed
   from and is dropped whenever sites or links change.
3. Decoupling: Views read from this object; Controllers write to this object.

Classes:
    NetworkSnapshot: Immutable input of an MST computation.
    NetworkState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Optional

from pipelineplanner import config
from pipelineplanner.controller.mst import MSTResult
from pipelineplanner.model.edges import Edge, EdgeSet
from pipelineplanner.model.vertices import VertexSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NetworkSnapshot:
    """Read-only copy of what the MST solver needs."""
    revision: int
    vertex_count: int
    edges: tuple[Edge, ...]


@dataclass
class NetworkState:
    """
    Container for one planning session.
    Pass this instance to your Controllers and Views.
    """
    min_separation: float = config.MIN_SEPARATION

    vertices: VertexSet = field(init=False)
    edges: EdgeSet = field(init=False)
    mst: Optional[MSTResult] = None

    # Bumped on every successful mutation; lets workers detect stale snapshots
    revision: int = 0

    def __post_init__(self) -> None:
        self.vertices = VertexSet(min_separation=self.min_separation)
        self.edges = EdgeSet(self.vertices)

    @property
    def has_mst(self) -> bool:
        return self.mst is not None

    def invalidate_mst(self) -> None:
        self.revision += 1
        self.mst = None

    def reset(self) -> None:
        """Clear all sites, links and the cached MST."""
        self.vertices.clear()
        self.edges.clear()
        self.invalidate_mst()
        logger.info("Network state has been reset.")

    def snapshot(self) -> NetworkSnapshot:
        return NetworkSnapshot(
            revision=self.revision,
            vertex_count=self.vertices.size(),
            edges=self.edges.all(),
        )
