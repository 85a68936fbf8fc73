"""
Forest Fire Spread using Cellular Automata.

A discrete-time stochastic cellular automaton in which fire spreads from
burning cells to their 4-connected tree neighbours and leaves ash behind.
"""

from .cell import CellState, Coordinate, NEIGHBOUR_OFFSETS
from .config import SimulationConfig
from .errors import ForestFireError, InvalidDimension, InvalidProbability, OutOfBoundsIgnition
from .model import ForestFireModel
from .stats import StateCounts, count_states

__version__ = "0.1.0"

__all__ = [
    "CellState",
    "Coordinate",
    "NEIGHBOUR_OFFSETS",
    "SimulationConfig",
    "ForestFireError",
    "InvalidDimension",
    "InvalidProbability",
    "OutOfBoundsIgnition",
    "ForestFireModel",
    "StateCounts",
    "count_states",
]
