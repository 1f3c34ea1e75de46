"""
Square lattice construction and edge list caching.

Nodes are numbered row-major, i = row * L + col, so the top boundary row is
0..L-1 and the bottom boundary row is N-L..N-1.
"""

import math
import os
import numpy as np
from typing import Optional, Tuple


def square_lattice_edges(L: int) -> np.ndarray:
    """
    Compute the nearest-neighbour edge list of an open L x L square lattice.

    Args:
        L: Number of nodes along each side

    Returns:
        Edge list with shape (2*L*(L-1), 2); horizontal edges first, then
        vertical ones, each block in row-major order
    """
    if L < 1:
        raise ValueError(f"Lattice size must be positive, got {L}")

    ids = np.arange(L * L, dtype=np.int64).reshape(L, L)

    horizontal = np.column_stack((ids[:, :-1].ravel(), ids[:, 1:].ravel()))
    vertical = np.column_stack((ids[:-1, :].ravel(), ids[1:, :].ravel()))

    return np.vstack((horizontal, vertical))


def boundary_rows(n_nodes: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Node ids of the top and bottom rows of a square arrangement of n_nodes.

    Returns:
        (top, bottom) index arrays, each of length isqrt(n_nodes)
    """
    grid_size = math.isqrt(n_nodes)
    top = np.arange(grid_size)
    bottom = np.arange(n_nodes - grid_size, n_nodes)
    return top, bottom


class EdgeListManager:
    """
    Manages computation, storage, and retrieval of lattice edge lists.

    Edge lists are keyed by lattice size so repeated runs on the same lattice
    can skip construction.
    """

    def __init__(self, base_dir: str = "edge_lists"):
        """
        Initialize EdgeListManager.

        Args:
            base_dir: Base directory for storing edge list data
        """
        self.base_dir = str(base_dir)
        os.makedirs(self.base_dir, exist_ok=True)

    def _filename(self, L: int) -> str:
        return os.path.join(self.base_dir, f"square_L{L}.npz")

    def save_edge_list(self, L: int, edges: Optional[np.ndarray] = None) -> str:
        """
        Save the edge list of an L x L lattice.

        Args:
            L: Lattice size
            edges: Precomputed edge list (if None, it will be computed)

        Returns:
            Path to the saved edge list file
        """
        if edges is None:
            edges = square_lattice_edges(L)

        filename = self._filename(L)
        np.savez(filename, L=L, edges=edges)

        return filename

    def load_edge_list(self, L: int) -> Optional[np.ndarray]:
        """
        Load the edge list of an L x L lattice.

        Returns:
            Edge list if found, None otherwise
        """
        filename = self._filename(L)

        if not os.path.exists(filename):
            return None

        with np.load(filename) as data:
            return data['edges']

    def get_edge_list(self, L: int, compute_if_missing: bool = True) -> Optional[np.ndarray]:
        """
        Get the edge list of an L x L lattice, computing it if necessary.

        Returns:
            Edge list if found or computed, None if not found and not computed
        """
        edges = self.load_edge_list(L)

        if edges is None and compute_if_missing:
            edges = square_lattice_edges(L)
            self.save_edge_list(L, edges)

        return edges
