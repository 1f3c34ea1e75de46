"""
Site Percolation - incremental site percolation on square lattices.

This package provides tools for:
- Union-find cluster tracking with virtual boundary nodes
- Incremental p-sweeps reporting Ncc, Smax and the percolation threshold
- CSV export of sweep statistics and per-node cluster membership
- Repeated trials for estimating the critical probability
"""

__version__ = "1.0.0"
