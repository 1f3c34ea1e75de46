"""
Command-line interface for site_percolation.

Commands:
    site-perc run    --size 64 --step 0.01 --seed 1 --output-dir results/
    site-perc run    --config config/L64.yaml
    site-perc trials --size 64 --step 0.01 --n-trials 50 --output trials.csv
    site-perc edges  --size 64 --edge-list-dir edge_lists/
"""

import click
from pathlib import Path


def _resolve_options(config_path, size, step, seed, output_dir, edge_list_dir, n_trials=None):
    """Merge command-line options over an optional YAML config."""
    from ..run.config import SimulationConfig

    if config_path:
        config = SimulationConfig.from_yaml(config_path)
        size = size if size is not None else config.grid_size
        step = step if step is not None else config.step
        seed = seed if seed is not None else config.seed
        output_dir = output_dir or config.output_dir
        edge_list_dir = edge_list_dir or config.edge_lists_dir
        n_trials = n_trials if n_trials is not None else config.n_trials

    if size is None or step is None:
        raise click.UsageError("--size and --step are required unless given in --config")
    if size < 1:
        raise click.UsageError("--size must be positive")
    if not 0 < step <= 1:
        raise click.UsageError("--step must be in (0, 1]")

    return size, step, seed, output_dir, edge_list_dir, n_trials


@click.group()
@click.version_option()
def cli():
    """Site Percolation - incremental site percolation on square lattices."""
    pass


@cli.command('run')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True),
              help='YAML simulation config')
@click.option('--size', '-L', type=int, help='Lattice side L (N = L*L nodes)')
@click.option('--step', '-s', type=float, help='Increment of p between iterations')
@click.option('--seed', type=int, help='Seed for threshold generation')
@click.option('--output-dir', '-o', type=click.Path(),
              help='Directory for percolation_report.csv and cluster_of_each_node.csv')
@click.option('--edge-list-dir', type=click.Path(), help='Edge list cache directory')
def run(config_path, size, step, seed, output_dir, edge_list_dir):
    """Run one sweep of p from 0 to 1."""
    from ..percolation.worker import run_simulation
    from ..percolation.analysis import sweep_to_dataframe

    size, step, seed, output_dir, edge_list_dir, _ = _resolve_options(
        config_path, size, step, seed, output_dir, edge_list_dir
    )

    click.echo(f"Running site percolation on a {size}x{size} lattice (step={step:g})")
    engine, results = run_simulation(size, step, seed=seed, output_dir=output_dir,
                                     edge_list_dir=edge_list_dir)

    df = sweep_to_dataframe(results)
    final = df.iloc[-1]

    if engine.p_c is None:
        click.echo("No percolation detected")
    else:
        click.echo(f"p_c = {engine.p_c:g}")
    click.echo(f"Final: Ncc={int(final['Ncc'])}, Smax={int(final['Smax'])}, "
               f"Nmax={final['Nmax']:g}")

    if output_dir:
        click.echo(f"Report written to {Path(output_dir)}")


@cli.command('trials')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True),
              help='YAML simulation config')
@click.option('--size', '-L', type=int, help='Lattice side L (N = L*L nodes)')
@click.option('--step', '-s', type=float, help='Increment of p between iterations')
@click.option('--n-trials', '-n', type=int, help='Number of independent trials')
@click.option('--seed', type=int, help='Root seed for the trials')
@click.option('--output', '-o', 'output_file', type=click.Path(),
              help='CSV file for the per-trial table')
@click.option('--edge-list-dir', type=click.Path(), help='Edge list cache directory')
def trials(config_path, size, step, n_trials, seed, output_file, edge_list_dir):
    """Estimate the critical probability over repeated trials."""
    from ..percolation.worker import run_trials
    from ..percolation.analysis import summarize_trials

    size, step, seed, _, edge_list_dir, n_trials = _resolve_options(
        config_path, size, step, seed, None, edge_list_dir, n_trials
    )
    n_trials = n_trials if n_trials is not None else 1
    if n_trials < 1:
        raise click.UsageError("--n-trials must be positive")

    click.echo(f"Running {n_trials} trials on a {size}x{size} lattice (step={step:g})")
    df = run_trials(size, step, n_trials, seed=seed, edge_list_dir=edge_list_dir)
    summary = summarize_trials(df)

    click.echo(f"Percolated in {summary['n_percolated']}/{summary['n_trials']} trials")
    if summary['n_percolated'] > 0:
        click.echo(f"p_c mean = {summary['p_c_mean']:.4f} (std {summary['p_c_std']:.4f}, "
                   f"range {summary['p_c_min']:g}-{summary['p_c_max']:g})")

    if output_file:
        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_file, index=False)
        click.echo(f"Saved trial table to {output_file}")


@cli.command('edges')
@click.option('--size', '-L', required=True, type=int, help='Lattice side L')
@click.option('--edge-list-dir', '-o', required=True, type=click.Path(),
              help='Edge list cache directory')
def edges(size, edge_list_dir):
    """Precompute and cache the edge list of an L x L lattice."""
    from ..percolation.lattice import EdgeListManager

    if size < 1:
        raise click.UsageError("--size must be positive")

    filename = EdgeListManager(base_dir=edge_list_dir).save_edge_list(size)
    click.echo(f"Saved edge list to {filename}")


if __name__ == '__main__':
    cli()
