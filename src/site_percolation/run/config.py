"""
Simulation configuration.

The SimulationConfig loads a YAML run definition, for example:

    grid_size: 64
    step: 0.01
    seed: 42
    n_trials: 20
    output:
      dir: results/L64
      edge_lists_dir: results/edge_lists
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional


class SimulationConfig:
    """
    Loads and validates a simulation configuration.

    Example:
        config = SimulationConfig.from_yaml('config/L64.yaml')
        print(config.grid_size, config.step)
    """

    def __init__(self, data: Dict[str, Any]):
        if not isinstance(data, dict):
            raise ValueError("Simulation config must be a mapping")
        self._data = data
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'SimulationConfig':
        """Load simulation config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Simulation config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        return cls(data)

    def _validate(self):
        """Validate required keys and value ranges."""
        for key in ['grid_size', 'step']:
            if key not in self._data:
                raise ValueError(f"Missing required config key: '{key}'")

        grid_size = self._data['grid_size']
        if not isinstance(grid_size, int) or isinstance(grid_size, bool) or grid_size < 1:
            raise ValueError(f"grid_size must be a positive integer, got {grid_size!r}")

        step = self._data['step']
        if not isinstance(step, (int, float)) or not 0 < step <= 1:
            raise ValueError(f"step must be in (0, 1], got {step!r}")

        seed = self._data.get('seed')
        if seed is not None and not isinstance(seed, int):
            raise ValueError(f"seed must be an integer, got {seed!r}")

        if self.n_trials < 1:
            raise ValueError(f"n_trials must be positive, got {self.n_trials}")

        output = self._data.get('output')
        if output is not None and not isinstance(output, dict):
            raise ValueError(f"output must be a mapping, got {output!r}")

    # --- Properties ---

    @property
    def grid_size(self) -> int:
        return self._data['grid_size']

    @property
    def n_nodes(self) -> int:
        return self.grid_size * self.grid_size

    @property
    def step(self) -> float:
        return float(self._data['step'])

    @property
    def seed(self) -> Optional[int]:
        return self._data.get('seed')

    @property
    def n_trials(self) -> int:
        return int(self._data.get('n_trials', 1))

    # --- Output paths ---

    @property
    def output_dir(self) -> Optional[Path]:
        output_dir = (self._data.get('output') or {}).get('dir')
        return Path(output_dir) if output_dir else None

    @property
    def edge_lists_dir(self) -> Optional[Path]:
        edge_dir = (self._data.get('output') or {}).get('edge_lists_dir')
        return Path(edge_dir) if edge_dir else None
