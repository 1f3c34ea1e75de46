"""
Union-find structure used for cluster tracking.

The same class backs both the cluster statistics and the percolation check;
the latter simply allocates two extra elements for the virtual boundary nodes.
"""

import numpy as np
from typing import Optional


class DisjointSet:
    """
    Disjoint-set forest over the integers 0..n-1 with size tracking.

    Uses union by size and path halving. Every root carries the size of its
    set in `size`; entries for non-root elements are stale and never read.
    """

    def __init__(self, n: int):
        """
        Initialize n singleton sets.

        Args:
            n: Number of elements
        """
        if n < 0:
            raise ValueError(f"Number of elements must be non-negative, got {n}")
        self.n = n
        self.parent = np.arange(n, dtype=np.int64)
        self.size = np.ones(n, dtype=np.int64)

    def __len__(self) -> int:
        return self.n

    def _check(self, x: int) -> int:
        x = int(x)
        if not 0 <= x < self.n:
            raise IndexError(f"Element {x} out of range [0, {self.n})")
        return x

    def find(self, x: int) -> int:
        """Return the representative of the set containing x."""
        x = self._check(x)
        parent = self.parent
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = int(parent[x])
        return x

    def unite(self, x: int, y: int) -> bool:
        """
        Merge the sets containing x and y.

        Returns:
            True if two distinct sets were merged, False if already joined
        """
        rx = self.find(x)
        ry = self.find(y)
        if rx == ry:
            return False
        if self.size[rx] < self.size[ry]:
            rx, ry = ry, rx
        self.parent[ry] = rx
        self.size[rx] += self.size[ry]
        return True

    def get_size(self, x: int) -> int:
        """Size of the set containing x."""
        return int(self.size[self.find(x)])

    def get_roots(self, total: Optional[int] = None) -> np.ndarray:
        """
        Representatives of the first `total` elements (all elements by default).

        Resolved by repeated pointer jumping over the whole parent array, which
        does not modify the forest.
        """
        if total is None:
            total = self.n
        if not 0 <= total <= self.n:
            raise ValueError(f"total must be in [0, {self.n}], got {total}")

        roots = self.parent[:total].copy()
        while True:
            nxt = self.parent[roots]
            if np.array_equal(nxt, roots):
                return roots
            roots = nxt

    def component_count(self, total: int) -> int:
        """Number of distinct sets among the first `total` elements."""
        return int(len(np.unique(self.get_roots(total))))
