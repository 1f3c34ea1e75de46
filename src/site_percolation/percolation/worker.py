"""
Percolation worker for running lattice simulations.

Wires lattice construction, threshold generation, the sweep and the CSV
report together for single runs and for repeated trials.
"""

import numpy as np
import pandas as pd
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .site_percolation import SitePercolation, generate_configuration
from .lattice import EdgeListManager, square_lattice_edges
from .report import PercolationReport


def _lattice_edges(grid_size: int, edge_list_dir: Optional[Union[str, Path]]) -> np.ndarray:
    if edge_list_dir is None:
        return square_lattice_edges(grid_size)
    return EdgeListManager(base_dir=str(edge_list_dir)).get_edge_list(grid_size)


def run_simulation(
    grid_size: int,
    step: float,
    seed: Optional[int] = None,
    output_dir: Optional[Union[str, Path]] = None,
    edge_list_dir: Optional[Union[str, Path]] = None,
    thresholds: Optional[np.ndarray] = None,
) -> Tuple[SitePercolation, List[Tuple[float, int, int, float]]]:
    """
    Run one site percolation sweep on an L x L lattice.

    This worker:
    1. Builds (or loads from the cache) the lattice edge list
    2. Draws one threshold per node unless thresholds are given
    3. Runs the sweep from p = 0 to 1
    4. Writes percolation_report.csv and cluster_of_each_node.csv if output_dir is set

    Args:
        grid_size: Lattice side L (N = L*L nodes)
        step: Increment of p between sweep iterations
        seed: Seed for threshold generation
        output_dir: Directory for the CSV report (None disables export)
        edge_list_dir: Directory for the edge list cache (None builds in memory)
        thresholds: Precomputed thresholds of length L*L

    Returns:
        Tuple of (engine, results) where results holds (p, Ncc, Smax, Nmax) rows
    """
    n_nodes = grid_size * grid_size
    engine = SitePercolation(n_nodes)

    edges = _lattice_edges(grid_size, edge_list_dir)
    if thresholds is None:
        thresholds = generate_configuration(n_nodes, seed)

    if output_dir is None:
        results = engine.run_sweep(edges, thresholds, step)
    else:
        with PercolationReport(output_dir, n_nodes) as report:
            results = engine.run_sweep(edges, thresholds, step, recorder=report.record)

    return engine, results


def run_trials(
    grid_size: int,
    step: float,
    n_trials: int,
    seed: Optional[int] = None,
    edge_list_dir: Optional[Union[str, Path]] = None,
) -> pd.DataFrame:
    """
    Run independent sweeps on the same lattice with fresh thresholds.

    Args:
        grid_size: Lattice side L
        step: Increment of p between sweep iterations
        n_trials: Number of independent trials
        seed: Root seed; per-trial seeds are spawned from it
        edge_list_dir: Directory for the edge list cache

    Returns:
        DataFrame with columns trial, seed, p_c, final_Ncc, final_Smax
    """
    if n_trials < 1:
        raise ValueError(f"n_trials must be positive, got {n_trials}")

    n_nodes = grid_size * grid_size
    trial_seeds = np.random.SeedSequence(seed).generate_state(n_trials)

    rows = []
    for trial, trial_seed in enumerate(trial_seeds):
        thresholds = generate_configuration(n_nodes, int(trial_seed))
        engine, results = run_simulation(grid_size, step, thresholds=thresholds,
                                         edge_list_dir=edge_list_dir)
        _, final_ncc, final_smax, _ = results[-1]
        rows.append({
            'trial': trial,
            'seed': int(trial_seed),
            'p_c': engine.p_c if engine.p_c is not None else np.nan,
            'final_Ncc': final_ncc,
            'final_Smax': final_smax,
        })

    return pd.DataFrame(rows)
