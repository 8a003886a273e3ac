"""
Forest fire simulation using cellular automata.

A discrete-time stochastic cellular automaton in which fire spreads from
a single ignition point to orthogonal neighbours with a fixed chance.
"""

from .cell import TreeCell, CellState
from .config import SimulationConfig
from .controller import PlaybackStatus, SimulationController
from .errors import ForestFireError, InvalidConfigurationError, OutOfRangeError
from .forest import Forest
from .model import FireModel
from .random_source import RandomSource
from .spread import FireSpread
from .ticker import ManualTicker, Ticker

__version__ = "0.1.0"

__all__ = [
    "TreeCell",
    "CellState",
    "SimulationConfig",
    "PlaybackStatus",
    "SimulationController",
    "ForestFireError",
    "InvalidConfigurationError",
    "OutOfRangeError",
    "Forest",
    "FireModel",
    "RandomSource",
    "FireSpread",
    "ManualTicker",
    "Ticker",
]
