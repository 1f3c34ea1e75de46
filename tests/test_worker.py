"""Tests for the simulation worker."""

import numpy as np

from site_percolation.percolation.analysis import check_sweep_invariants, sweep_to_dataframe
from site_percolation.percolation.worker import run_simulation, run_trials


class TestRunSimulation:
    """Tests for run_simulation."""

    def test_single_run(self):
        engine, results = run_simulation(5, 0.1, seed=1)

        assert engine.N == 25
        assert len(results) == 11
        assert results[-1][1] == 1
        assert results[-1][2] == 25
        assert engine.p_c is not None
        assert check_sweep_invariants(sweep_to_dataframe(results), 25) == []

    def test_seed_reproducible(self):
        _, first = run_simulation(6, 0.05, seed=42)
        _, second = run_simulation(6, 0.05, seed=42)
        assert first == second

    def test_writes_report(self, tmp_path):
        run_simulation(3, 0.25, seed=0, output_dir=tmp_path / "report",
                       edge_list_dir=tmp_path / "edges")

        assert (tmp_path / "report" / "percolation_report.csv").exists()
        assert (tmp_path / "report" / "cluster_of_each_node.csv").exists()
        assert (tmp_path / "edges" / "square_L3.npz").exists()

    def test_given_thresholds(self):
        thresholds = np.array([0.1, 0.9, 0.2, 0.8])
        engine, results = run_simulation(2, 0.25, thresholds=thresholds)

        assert [r[1] for r in results] == [4, 3, 3, 3, 1]
        assert engine.p_c == 0.25


class TestRunTrials:
    """Tests for run_trials."""

    def test_trial_table(self):
        df = run_trials(4, 0.1, 3, seed=7)

        assert list(df.columns) == ['trial', 'seed', 'p_c', 'final_Ncc', 'final_Smax']
        assert list(df['trial']) == [0, 1, 2]
        assert (df['final_Ncc'] == 1).all()
        assert (df['final_Smax'] == 16).all()
        assert df['p_c'].notna().all()

    def test_trials_reproducible(self):
        first = run_trials(3, 0.2, 4, seed=3)
        second = run_trials(3, 0.2, 4, seed=3)
        assert first.equals(second)
        assert first['seed'].nunique() == 4
