"""Fire spread model implementation."""

import logging
from typing import Optional

from mesa import Model

from .cell import CellState
from .config import SimulationConfig
from .forest import Forest
from .random_source import RandomSource
from .spread import FireSpread

logger = logging.getLogger(__name__)


class FireModel(Model):
    """Main model for forest fire spread using a stochastic cellular automaton."""

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        random_source: Optional[RandomSource] = None,
        ignition: Optional[tuple[int, int]] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize the fire spread model.

        Args:
            config: Grid size and burn chance; defaults to SimulationConfig()
            random_source: RNG service for ignition and spread draws. Defaults
                to one wrapping the model's own seeded ``random``
            ignition: Optional (x, y) of the initially burning tree. Drawn
                from the interior when omitted
            seed: Seed for the model's ``random`` when no random_source is given
        """
        super().__init__(seed=seed)
        self.config = config if config is not None else SimulationConfig()
        self.random_source = random_source if random_source is not None else RandomSource(self.random)

        width, height = self.config.width, self.config.height
        if ignition is None:
            ignition = self.random_source.ignition_point(width, height)

        self.forest = Forest(self, width, height, ignition)
        self.spread = FireSpread(self.random_source, self.config.burn_chance)

    @property
    def ignition(self) -> tuple[int, int]:
        return self.forest.ignition

    @property
    def burning_count(self) -> int:
        return self.forest.count(CellState.Burning)

    def step(self):
        """
        Execute one tick of the simulation.

        Uses a two-phase update: first every interior cell stages its next
        state from the committed grid, then all staged states are committed
        at once. No cell sees a neighbour's new state within the same tick.
        """
        self.spread.stage_next_states(self.forest)
        self.forest.commit()

        was_running = self.running
        self.running = self.burning_count > 0
        if was_running and not self.running:
            logger.info(f"Fire burned out after {self.steps} steps")
