from __future__ import annotations

import logging
import threading
from typing import Optional

from PySide6.QtCore import QObject, Signal

from pipelineplanner import config
from pipelineplanner.controller.mst import MSTResult, MSTSolver
from pipelineplanner.model.edges import Edge
from pipelineplanner.model.outcomes import AddEdgeResult, AddVertexResult, EdgeError
from pipelineplanner.model.state import NetworkSnapshot, NetworkState
from pipelineplanner.model.vertices import Vertex

logger = logging.getLogger(__name__)

# Status bar text for each refused link
EDGE_ERROR_MESSAGES: dict[EdgeError, str] = {
    EdgeError.SELF_LOOP: "A building cannot be connected to itself",
    EdgeError.INVALID_INDEX: "No such building. Click directly on a building.",
    EdgeError.DUPLICATE_EDGE: "These buildings are already connected",
}


class Store(QObject):
    """
    Central state store for the planner.

    Every request from the host application goes through here. One
    re-entrant lock serialises all access to the NetworkState, and signals
    are emitted after the lock is released.
    """
    vertices_changed = Signal(object)
    edges_changed = Signal(object)
    mst_changed = Signal(object)
    status_changed = Signal(str)

    def __init__(self, min_separation: float = config.MIN_SEPARATION) -> None:
        super().__init__()
        self._lock = threading.RLock()
        self._state = NetworkState(min_separation=min_separation)

    # --- Mutations ---
    def add_vertex(self, x: float, y: float) -> AddVertexResult:
        with self._lock:
            result = self._state.vertices.insert(x, y)
            had_mst = self._state.has_mst
            if result.ok:
                self._state.invalidate_mst()
            vertices = self._state.vertices.all()

        if not result.ok:
            logger.info(f"Site at ({x}, {y}) refused: {result.error}.")
            self.status_changed.emit(
                f"Buildings must be at least {self._state.min_separation:g} pixels apart"
            )
            return result

        logger.info(f"Added site {result.vertex_id} at ({x}, {y}).")
        self.vertices_changed.emit(vertices)
        if had_mst:
            self.mst_changed.emit(None)
        self.status_changed.emit(f"Added building {result.vertex_id + 1}")
        return result

    def add_edge(self, a: int, b: int) -> AddEdgeResult:
        with self._lock:
            result = self._state.edges.connect(a, b)
            had_mst = self._state.has_mst
            if result.ok:
                self._state.invalidate_mst()
            edges = self._state.edges.all()

        if not result.ok:
            logger.info(f"Link {a} - {b} refused: {result.error}.")
            self.status_changed.emit(EDGE_ERROR_MESSAGES[result.error])
            return result

        logger.info(f"Connected sites {a} and {b} with weight {result.weight}.")
        self.edges_changed.emit(edges)
        if had_mst:
            self.mst_changed.emit(None)
        self.status_changed.emit(f"Connected buildings {a + 1} and {b + 1}")
        return result

    def compute_mst(self) -> MSTResult:
        """Solve the current network and cache the result."""
        with self._lock:
            snapshot = self._state.snapshot()
            result = MSTSolver.solve(snapshot.vertex_count, snapshot.edges)
            self._state.mst = result

        self._report_mst(snapshot, result)
        return result

    def accept_mst(self, result: MSTResult, snapshot: NetworkSnapshot) -> bool:
        """
        Cache a result computed elsewhere (e.g. by an MSTWorker).

        Returns:
            False, and discards the result, if the network changed since `snapshot`.
        """
        with self._lock:
            if snapshot.revision != self._state.revision:
                logger.info(
                    f"Discarding stale MST (revision {snapshot.revision}, "
                    f"current {self._state.revision})."
                )
                return False
            self._state.mst = result

        self._report_mst(snapshot, result)
        return True

    def _report_mst(self, snapshot: NetworkSnapshot, result: MSTResult) -> None:
        if snapshot.vertex_count < 2:
            logger.warning("MST requested with fewer than 2 sites.")
            self.status_changed.emit("Add at least 2 buildings first")
        else:
            logger.info(
                f"MST computed: {len(result)} links, total cost {result.total_cost}."
            )
            self.status_changed.emit("Minimum Spanning Tree found!")
        self.mst_changed.emit(result)

    def reset(self) -> None:
        with self._lock:
            self._state.reset()

        self.vertices_changed.emit(())
        self.edges_changed.emit(())
        self.mst_changed.emit(None)
        self.status_changed.emit("Click on the canvas to add buildings")

    # --- Queries ---
    def snapshot(self) -> NetworkSnapshot:
        with self._lock:
            return self._state.snapshot()

    def vertex_count(self) -> int:
        with self._lock:
            return self._state.vertices.size()

    def get_vertex(self, uid: int) -> Vertex:
        with self._lock:
            return self._state.vertices.get(uid)

    def list_vertices(self) -> tuple[Vertex, ...]:
        with self._lock:
            return self._state.vertices.all()

    def list_edges(self) -> tuple[Edge, ...]:
        with self._lock:
            return self._state.edges.all()

    def edge_exists(self, a: int, b: int) -> bool:
        with self._lock:
            return self._state.edges.exists(a, b)

    def pick_vertex(
        self,
        x: float,
        y: float,
        max_distance: float = config.PICK_RADIUS,
        y_offset: float = config.PICK_Y_OFFSET,
    ) -> Optional[int]:
        with self._lock:
            return self._state.vertices.nearest(x, y, max_distance=max_distance, y_offset=y_offset)

    @property
    def mst(self) -> Optional[MSTResult]:
        with self._lock:
            return self._state.mst

    def total_cost(self) -> int:
        with self._lock:
            return self._state.mst.total_cost if self._state.mst is not None else 0

    def is_mst_edge(self, a: int, b: int) -> bool:
        with self._lock:
            return self._state.mst is not None and self._state.mst.contains(a, b)
