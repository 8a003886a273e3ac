"""Play / pause / step / reset lifecycle around the fire model."""

import logging
from enum import Enum
from typing import Optional, Protocol

from .config import SimulationConfig
from .forest import Forest
from .model import FireModel
from .random_source import RandomSource
from .ticker import ManualTicker, Ticker

logger = logging.getLogger(__name__)


class PlaybackStatus(Enum):
    """Whether ticks are being scheduled automatically."""
    PAUSED = 0
    PLAYING = 1


class Renderer(Protocol):
    """Anything that can draw a committed forest."""

    def render(self, forest: Forest) -> None: ...


class SimulationController:
    """Owns the model, its RNG service and the play schedule.

    Every operation leaves the grid fully committed before the renderer is
    called, so a render never shows a half-applied tick.

    Attributes:
        config: Parameters used for every reset.
        renderer: Optional renderer notified after reset and each step.
        ticker: Scheduling capability used while playing.
        random_source: RNG shared across resets so each one picks a new ignition.
        status: Current PlaybackStatus.
        model: The current FireModel, replaced on every reset.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        renderer: Optional[Renderer] = None,
        ticker: Optional[Ticker] = None,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        self.config = config if config is not None else SimulationConfig()
        self.renderer = renderer
        self.ticker = ticker if ticker is not None else ManualTicker()
        self.random_source = random_source if random_source is not None else RandomSource()
        self.status = PlaybackStatus.PAUSED
        self.model: FireModel
        self.reset()

    @property
    def playing(self) -> bool:
        return self.status == PlaybackStatus.PLAYING

    @property
    def forest(self) -> Forest:
        return self.model.forest

    def reset(self) -> None:
        """Pause, rebuild the grid around a new random ignition point and render."""
        self.pause()
        self.model = FireModel(self.config, random_source=self.random_source)
        logger.info(
            f"Reset {self.config.width}x{self.config.height} forest, ignition at {self.model.ignition}"
        )
        self._render()

    def step(self) -> None:
        """Run one full tick and render the result. Allowed while playing."""
        self.model.step()
        logger.debug(f"Step {self.model.steps}: {self.model.burning_count} trees burning")
        self._render()

    def play(self) -> None:
        if self.playing:
            return
        self.status = PlaybackStatus.PLAYING
        self.ticker.start(self.step, self.config.interval_millis)
        logger.info(f"Playing, one step every {self.config.interval_millis} ms")

    def pause(self) -> None:
        """Stop scheduled ticks. Safe to call when already paused."""
        self.ticker.stop()
        if not self.playing:
            return
        self.status = PlaybackStatus.PAUSED
        logger.info(f"Paused at step {self.model.steps}")

    def toggle(self) -> None:
        """Play/Pause trigger."""
        if self.playing:
            self.pause()
        else:
            self.play()

    def _render(self) -> None:
        if self.renderer is not None:
            self.renderer.render(self.model.forest)
