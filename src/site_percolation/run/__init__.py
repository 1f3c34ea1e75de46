"""Simulation run configuration."""

from .config import SimulationConfig

__all__ = ['SimulationConfig']
