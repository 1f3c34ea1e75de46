"""
Percolation analysis utilities.

Includes conversion of sweep results to DataFrames, consistency checks on a
sweep, and summaries of repeated trials.
"""

import numpy as np
import pandas as pd
from typing import Any, Dict, List, Sequence, Tuple

SWEEP_COLUMNS = ['p', 'Ncc', 'Smax', 'Nmax']


def sweep_to_dataframe(results: Sequence[Tuple[float, int, int, float]]) -> pd.DataFrame:
    """
    Convert the tuples returned by a sweep into a DataFrame.

    Args:
        results: Sequence of (p, Ncc, Smax, Nmax)

    Returns:
        DataFrame with columns p, Ncc, Smax, Nmax
    """
    df = pd.DataFrame(list(results), columns=SWEEP_COLUMNS)
    return df.astype({'p': float, 'Ncc': int, 'Smax': int, 'Nmax': float})


def check_sweep_invariants(df: pd.DataFrame, n_nodes: int) -> List[str]:
    """
    Check a sweep against the properties every valid sweep satisfies.

    Args:
        df: Sweep DataFrame from sweep_to_dataframe
        n_nodes: Number of nodes N

    Returns:
        List of human-readable violations, empty if the sweep is consistent
    """
    problems = []

    if df.empty:
        return problems

    if not df['p'].is_monotonic_increasing:
        problems.append("p is not non-decreasing")
    if not df['Ncc'].is_monotonic_decreasing:
        problems.append("Ncc is not non-increasing")
    if (df['Ncc'] < 1).any() or (df['Ncc'] > n_nodes).any():
        problems.append(f"Ncc outside [1, {n_nodes}]")
    if not df['Smax'].is_monotonic_increasing:
        problems.append("Smax is not non-decreasing")
    if (df['Smax'] > n_nodes).any():
        problems.append(f"Smax exceeds {n_nodes}")
    if not np.allclose(df['Nmax'], df['Smax'] / n_nodes):
        problems.append("Nmax differs from Smax / N")
    if (df['Nmax'] <= 0).any() or (df['Nmax'] > 1).any():
        problems.append("Nmax outside (0, 1]")

    return problems


def summarize_trials(df: pd.DataFrame) -> Dict[str, Any]:
    """
    Summarize the critical probability over repeated trials.

    Args:
        df: Trial table with a 'p_c' column (NaN where no percolation occurred)

    Returns:
        Dict with n_trials, n_percolated and mean/std/min/max of p_c
    """
    p_c = df['p_c'].dropna()

    summary = {
        'n_trials': int(len(df)),
        'n_percolated': int(len(p_c)),
        'p_c_mean': np.nan,
        'p_c_std': np.nan,
        'p_c_min': np.nan,
        'p_c_max': np.nan,
    }

    if len(p_c) > 0:
        summary['p_c_mean'] = float(p_c.mean())
        summary['p_c_std'] = float(p_c.std(ddof=0))
        summary['p_c_min'] = float(p_c.min())
        summary['p_c_max'] = float(p_c.max())

    return summary
