"""Tests for the site-perc command-line interface."""

import pandas as pd
import yaml
from click.testing import CliRunner

from site_percolation.cli.main import cli


class TestRunCommand:
    """Tests for `site-perc run`."""

    def test_run_prints_summary(self):
        result = CliRunner().invoke(cli, ['run', '--size', '3', '--step', '0.25', '--seed', '1'])

        assert result.exit_code == 0, result.output
        assert "p_c = " in result.output
        assert "Final: Ncc=1, Smax=9, Nmax=1" in result.output

    def test_run_writes_report(self, tmp_path):
        out = tmp_path / "report"
        result = CliRunner().invoke(cli, [
            'run', '-L', '4', '-s', '0.1', '--seed', '2', '-o', str(out),
        ])

        assert result.exit_code == 0, result.output
        df = pd.read_csv(out / "percolation_report.csv")
        assert len(df) == 11
        assert df['Ncc'].iloc[-1] == 1

    def test_run_from_config(self, tmp_path):
        config = tmp_path / "sim.yaml"
        config.write_text(yaml.safe_dump({
            'grid_size': 3, 'step': 0.5, 'seed': 5,
            'output': {'dir': str(tmp_path / "cfg_out")},
        }))

        result = CliRunner().invoke(cli, ['run', '--config', str(config)])

        assert result.exit_code == 0, result.output
        assert "3x3 lattice" in result.output
        assert (tmp_path / "cfg_out" / "cluster_of_each_node.csv").exists()

    def test_run_requires_size_and_step(self):
        result = CliRunner().invoke(cli, ['run', '--size', '3'])

        assert result.exit_code != 0
        assert "--size and --step are required" in result.output

    def test_run_rejects_bad_step(self):
        result = CliRunner().invoke(cli, ['run', '--size', '3', '--step', '0'])
        assert result.exit_code != 0


class TestTrialsCommand:
    """Tests for `site-perc trials`."""

    def test_trials_summary_and_table(self, tmp_path):
        out = tmp_path / "trials.csv"
        result = CliRunner().invoke(cli, [
            'trials', '-L', '4', '-s', '0.1', '-n', '3', '--seed', '1', '-o', str(out),
        ])

        assert result.exit_code == 0, result.output
        assert "Percolated in 3/3 trials" in result.output
        assert "p_c mean = " in result.output
        assert len(pd.read_csv(out)) == 3


class TestEdgesCommand:
    """Tests for `site-perc edges`."""

    def test_edges_saved(self, tmp_path):
        result = CliRunner().invoke(cli, ['edges', '--size', '5', '-o', str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "square_L5.npz").exists()
