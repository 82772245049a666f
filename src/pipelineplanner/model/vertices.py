"""
Sites (Vertices)
================
Stores the sites placed on the canvas.

Every insertion is checked against all existing sites: a candidate closer
than the minimum separation to any of them is refused. Ids are assigned
sequentially from 0 and never reused; sites cannot be moved or removed
individually, only cleared all together.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterator, Optional, TYPE_CHECKING

import numpy as np

from pipelineplanner import config
from pipelineplanner.model.geometry_primitives import Point
from pipelineplanner.model.outcomes import AddVertexResult, VertexError

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vertex:
    """A placed site."""
    uid: int
    position: Point

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y


class VertexSet:
    def __init__(self, min_separation: float = config.MIN_SEPARATION) -> None:
        self.min_separation = float(min_separation)
        self._vertices: list[Vertex] = []
        # (N, 2) coordinate table kept alongside the vertex list for vectorised scans
        self._coords: npt.NDArray[np.float64] = np.empty((0, 2), dtype=np.float64)

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)}, min_separation={self.min_separation})"

    def size(self) -> int:
        return len(self._vertices)

    def get(self, uid: int) -> Vertex:
        if not 0 <= uid < len(self._vertices):
            raise IndexError(f"Vertex id {uid} is out of range [0, {len(self._vertices)}).")
        return self._vertices[uid]

    def all(self) -> tuple[Vertex, ...]:
        return tuple(self._vertices)

    def _squared_distances(self, x: float, y: float, y_offset: float = 0.0) -> npt.NDArray[np.float64]:
        dx = self._coords[:, 0] - x
        dy = self._coords[:, 1] + y_offset - y
        return dx * dx + dy * dy

    def insert(self, x: float, y: float) -> AddVertexResult:
        """
        Place a new site at (x, y).

        Returns:
            AddVertexResult with the new id, or with VertexError.TOO_CLOSE
            if an existing site lies strictly closer than the minimum separation.
        """
        limit_sq = self.min_separation * self.min_separation
        if len(self._vertices) and np.any(self._squared_distances(x, y) < limit_sq):
            logger.debug(f"Rejected site at ({x}, {y}): closer than {self.min_separation} to an existing site.")
            return AddVertexResult(error=VertexError.TOO_CLOSE)

        uid = len(self._vertices)
        self._vertices.append(Vertex(uid=uid, position=Point(float(x), float(y))))
        self._coords = np.vstack([self._coords, [float(x), float(y)]])
        logger.debug(f"Added site {uid} at ({x}, {y}).")
        return AddVertexResult(vertex_id=uid)

    def nearest(
        self,
        x: float,
        y: float,
        max_distance: float = config.PICK_RADIUS,
        y_offset: float = 0.0,
    ) -> Optional[int]:
        """
        Find the site closest to (x, y), for hit-testing clicks.

        Args:
            max_distance: Only sites strictly closer than this are candidates.
            y_offset: Added to every site's y before measuring (picks against
                the base of the drawn building instead of its centre).

        Returns:
            The id of the closest site, or None. On exact ties the lowest id wins.
        """
        if not self._vertices:
            return None
        d2 = self._squared_distances(x, y, y_offset)
        best = int(np.argmin(d2))
        if d2[best] < max_distance * max_distance:
            return best
        return None

    def clear(self) -> None:
        self._vertices = []
        self._coords = np.empty((0, 2), dtype=np.float64)
