"""Site percolation engine, lattice construction and reporting."""

from .disjoint_set import DisjointSet
from .site_percolation import SitePercolation, generate_configuration
from .lattice import EdgeListManager, square_lattice_edges, boundary_rows
from .report import PercolationReport
from .analysis import sweep_to_dataframe, check_sweep_invariants, summarize_trials

__all__ = [
    'DisjointSet', 'SitePercolation', 'generate_configuration',
    'EdgeListManager', 'square_lattice_edges', 'boundary_rows',
    'PercolationReport',
    'sweep_to_dataframe', 'check_sweep_invariants', 'summarize_trials',
]
