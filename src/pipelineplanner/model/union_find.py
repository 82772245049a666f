"""
Disjoint-Set Forest (Union-Find)
================================
Partitions the elements 0..n-1 into disjoint sets.

Uses path compression in `find` and union by rank in `union`. `find` is
iterative (walk to the root, then relink every visited element), so long
parent chains never grow the Python call stack.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


class UnionFind:
    """Union-Find over a fixed number of integer elements."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"UnionFind size must be non-negative, got {size}.")
        self.parent: npt.NDArray[np.int64] = np.arange(size, dtype=np.int64)
        self.rank: npt.NDArray[np.int64] = np.zeros(size, dtype=np.int64)

    def __len__(self) -> int:
        return len(self.parent)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)}, sets={self.count_sets()})"

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self.parent):
            raise IndexError(f"Element {x} is out of range [0, {len(self.parent)}).")

    def find(self, x: int) -> int:
        """Return the root of x's set, compressing the visited path."""
        self._check(x)
        parent = self.parent

        root = x
        while parent[root] != root:
            root = int(parent[root])

        # Second pass: point every element on the path directly at the root
        while parent[x] != root:
            nxt = int(parent[x])
            parent[x] = root
            x = nxt

        return root

    def union(self, x: int, y: int) -> bool:
        """
        Merge the sets containing x and y.

        Returns:
            False if x and y were already connected (nothing changes),
            True if two sets were merged.
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            # Tie: y's root goes under x's root
            self.parent[root_y] = root_x
            self.rank[root_x] += 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def count_sets(self) -> int:
        return len({self.find(i) for i in range(len(self.parent))})
