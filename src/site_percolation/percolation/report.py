"""
CSV export of percolation sweeps.

Two tables are written, one row per sweep iteration:

- percolation_report.csv:   p,Ncc,Smax,Nmax
- cluster_of_each_node.csv: p,Node_0,...,Node_{N-1} (cluster id of each node)
"""

from pathlib import Path
from typing import Sequence, Union

SUMMARY_FILENAME = "percolation_report.csv"
CLUSTERS_FILENAME = "cluster_of_each_node.csv"


class PercolationReport:
    """
    Writer for the sweep tables, used as the `recorder` of a sweep.

    Both files are opened on entering the context, so an unwritable output
    location fails before the sweep starts. They are closed on every exit.

    Example:
        with PercolationReport('out/', engine.N) as report:
            engine.run_sweep(edges, thresholds, 0.01, recorder=report.record)
    """

    def __init__(self, output_dir: Union[str, Path], n_nodes: int):
        self.output_dir = Path(output_dir)
        self.n_nodes = n_nodes
        self.summary_path = self.output_dir / SUMMARY_FILENAME
        self.clusters_path = self.output_dir / CLUSTERS_FILENAME
        self._summary = None
        self._clusters = None

    def open(self) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)

        self._summary = open(self.summary_path, 'w')
        try:
            self._clusters = open(self.clusters_path, 'w')
        except OSError:
            self._summary.close()
            self._summary = None
            raise

        self._summary.write("p,Ncc,Smax,Nmax\n")
        header = ",".join(f"Node_{i}" for i in range(self.n_nodes))
        self._clusters.write(f"p,{header}\n")

    def close(self) -> None:
        for handle in (self._summary, self._clusters):
            if handle is not None:
                handle.close()
        self._summary = None
        self._clusters = None

    def __enter__(self) -> 'PercolationReport':
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def record(self, p: float, Ncc: int, Smax: int, Nmax: float,
               roots: Sequence[int]) -> None:
        """Write one sweep iteration to both tables."""
        if self._summary is None:
            raise RuntimeError("PercolationReport is not open")

        self._summary.write(f"{p:g},{Ncc},{Smax},{Nmax:g}\n")
        cells = ",".join(str(int(r)) for r in roots)
        self._clusters.write(f"{p:g},{cells}\n")
