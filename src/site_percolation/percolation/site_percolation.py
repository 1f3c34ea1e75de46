"""
Incremental site percolation on a square lattice.

Nodes carry a random threshold in [0, 1). Sweeping the occupation probability p
upwards activates every node whose threshold is <= p and joins active
neighbours into clusters. Two union-find structures are maintained:

- `uf` over the N real nodes, for the component count and cluster sizes
- `uf_aux` over N + 2 slots, where slots N and N + 1 are virtual nodes wired
  to the top and bottom rows so that spanning reduces to one `find` comparison

Activation is monotone, so each call only has to advance the state from the
previous p instead of rebuilding the clusters.
"""

import math
import sys
import numpy as np
from typing import Callable, List, Optional, Sequence, Tuple, Union

from .disjoint_set import DisjointSet
from .lattice import boundary_rows

# Tolerance on the upper bound of the sweep to absorb accumulated step error
P_EPSILON = 1e-10

SweepRow = Tuple[float, int, int, float]
Recorder = Callable[[float, int, int, float, np.ndarray], None]


def generate_configuration(n: int, seed: Optional[int] = None) -> np.ndarray:
    """
    Draw one threshold per node, uniform in [0, 1).

    Args:
        n: Number of nodes
        seed: Seed for the random generator (None draws fresh entropy)

    Returns:
        Array of shape (n,)
    """
    rng = np.random.default_rng(seed)
    return rng.random(n)


class SitePercolation:
    """
    Site percolation engine with a monotone cursor over p.

    The engine owns all mutable simulation state. `step` is the only method
    that changes it, and only ever moves forward in p.
    """

    def __init__(self, n_nodes: int):
        """
        Initialize the engine for a lattice of n_nodes sites.

        Args:
            n_nodes: Number of real nodes N (L*L for an L x L lattice)
        """
        if n_nodes < 1:
            raise ValueError(f"n_nodes must be positive, got {n_nodes}")

        self.N = n_nodes
        self.uf = DisjointSet(n_nodes)
        self.uf_aux = DisjointSet(n_nodes + 2)
        self.superTop = n_nodes
        self.superBottom = n_nodes + 1

        self.active = np.zeros(n_nodes, dtype=bool)
        self.current_p = 0.0
        self.Smax = 1
        self.p_c = None

    def generate_configuration(self, seed: Optional[int] = None) -> np.ndarray:
        """Thresholds for every node of this engine."""
        return generate_configuration(self.N, seed)

    def initialize_boundaries(self) -> None:
        """Wire the virtual top/bottom nodes to the first and last lattice rows."""
        top, bottom = boundary_rows(self.N)
        for i in top:
            self.uf_aux.unite(self.superTop, i)
        for i in bottom:
            self.uf_aux.unite(self.superBottom, i)

    def _validate_inputs(self, edges, thresholds) -> Tuple[np.ndarray, np.ndarray]:
        edges = np.asarray(edges)
        if edges.size == 0:
            edges = np.empty((0, 2), dtype=np.int64)
        if edges.ndim != 2 or edges.shape[1] != 2:
            raise ValueError(f"Expected an edge list of shape (E, 2), got {edges.shape}")
        if edges.dtype.kind not in "iu":
            raise ValueError(f"Edge ids must be integers, got dtype {edges.dtype}")
        edges = edges.astype(np.int64, copy=False)
        thresholds = np.asarray(thresholds, dtype=np.float64)

        if thresholds.shape != (self.N,):
            raise ValueError(
                f"Expected {self.N} thresholds, got array of shape {thresholds.shape}"
            )
        if edges.size and (edges.min() < 0 or edges.max() >= self.N):
            bad = edges[(edges < 0).any(axis=1) | (edges >= self.N).any(axis=1)][0]
            raise IndexError(
                f"Edge ({bad[0]}, {bad[1]}) references a node outside [0, {self.N})"
            )
        return edges, thresholds

    def step(self, edges: Union[np.ndarray, Sequence[Tuple[int, int]]],
             thresholds: Union[np.ndarray, Sequence[float]], p: float) -> int:
        """
        Advance the simulation to occupation probability p.

        Activates every inactive node with threshold <= p, then unites the two
        endpoints of every edge whose endpoints are both active. Smax only
        looks at the clusters touched by those unions.

        Args:
            edges: Edge list of shape (E, 2)
            thresholds: Per-node thresholds of shape (N,)
            p: New occupation probability, must be >= current_p

        Returns:
            Number of connected components among the N nodes (inactive nodes
            count as singletons)
        """
        if not math.isfinite(p):
            raise ValueError(f"p must be a finite number, got {p}")

        if p < self.current_p:
            print(
                f"Error: cannot run percolation at p = {p:g}, "
                f"lower than the current p = {self.current_p:g}",
                file=sys.stderr,
            )
            return self.uf.component_count(self.N)

        edges, thresholds = self._validate_inputs(edges, thresholds)

        self.active |= thresholds <= p

        # The whole edge list is rescanned; only the active/active mask changes
        both_active = self.active[edges[:, 0]] & self.active[edges[:, 1]]
        for u, v in edges[both_active]:
            self.uf.unite(u, v)
            self.Smax = max(self.Smax, self.uf.get_size(u), self.uf.get_size(v))
            self.uf_aux.unite(u, v)

        self.current_p = p

        return self.uf.component_count(self.N)

    generate_single_percolation = step

    def has_percolation(self) -> bool:
        """True once an active path joins the top row to the bottom row."""
        return self.uf_aux.find(self.superTop) == self.uf_aux.find(self.superBottom)

    def sweep_values(self, step_size: float) -> List[float]:
        """
        Values of p visited by a sweep: 0, step, 2*step, ... up to 1.

        A final p = 1.0 is appended when the step does not land on 1 within
        P_EPSILON.
        """
        if not step_size > 0:
            raise ValueError(f"step_size must be positive, got {step_size}")

        values = []
        p = 0.0
        while p <= 1.0 + P_EPSILON:
            values.append(p)
            p += step_size
        if values[-1] < 1.0 - P_EPSILON:
            values.append(1.0)
        return values

    def run_sweep(self, edges, thresholds, step_size: float,
                  recorder: Optional[Recorder] = None) -> List[SweepRow]:
        """
        Run the full sweep of p from 0 to 1.

        Args:
            edges: Edge list of shape (E, 2)
            thresholds: Per-node thresholds of shape (N,)
            step_size: Increment of p between iterations
            recorder: Optional callback receiving (p, Ncc, Smax, Nmax, roots)
                for every iteration, roots being the cluster id of each node

        Returns:
            List of (p, Ncc, Smax, Nmax) tuples, one per iteration
        """
        p_values = self.sweep_values(step_size)
        edges, thresholds = self._validate_inputs(edges, thresholds)

        self.initialize_boundaries()

        results = []

        for p in p_values:
            Ncc = self.step(edges, thresholds, p)
            Nmax = self.Smax / self.N
            results.append((p, Ncc, self.Smax, Nmax))

            if recorder is not None:
                recorder(p, Ncc, self.Smax, Nmax, self.uf.get_roots(self.N))

            if self.p_c is None and self.has_percolation():
                self.p_c = p
                print(f"Percolation detected at p = {self.p_c:g}")

        return results

    generate_full_percolation = run_sweep
