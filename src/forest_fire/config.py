"""Simulation parameters and their defaults.

All values are fixed when the simulation is created; nothing here is
changed while it runs.
"""

from dataclasses import dataclass

from .errors import InvalidConfigurationError

BURN_CHANCE: int = 50                               # Chance (0-100) a burning neighbour ignites a tree
GRID_WIDTH: int = 20                                # Trees in x direction
GRID_HEIGHT: int = 20                               # Trees in y direction
INTERVAL_MILLIS: int = 100                          # Milliseconds between ticks while playing
SURFACE_WIDTH: int = 300                            # Pixel width of the drawing surface
SURFACE_HEIGHT: int = 300                           # Pixel height of the drawing surface

# Border ring plus at least one interior row and column
MIN_GRID_SIZE: int = 3


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of one simulation session.

    Attributes:
        width: Number of cells in x direction.
        height: Number of cells in y direction.
        burn_chance: Percentage chance that a burning neighbour ignites a cell.
        interval_millis: Delay between ticks while playing.
        surface_width: Pixel width of the surface the grid is drawn on.
        surface_height: Pixel height of the surface the grid is drawn on.
    """

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    burn_chance: int = BURN_CHANCE
    interval_millis: int = INTERVAL_MILLIS
    surface_width: int = SURFACE_WIDTH
    surface_height: int = SURFACE_HEIGHT

    def __post_init__(self) -> None:
        validate_dimensions(self.width, self.height)
        if not 0 <= self.burn_chance <= 100:
            raise InvalidConfigurationError(
                f"burn_chance must be between 0 and 100, got {self.burn_chance}"
            )
        if self.interval_millis <= 0:
            raise InvalidConfigurationError(
                f"interval_millis must be positive, got {self.interval_millis}"
            )
        if self.surface_width <= 0 or self.surface_height <= 0:
            raise InvalidConfigurationError(
                f"surface size must be positive, got {self.surface_width}x{self.surface_height}"
            )


def validate_dimensions(width: int, height: int) -> None:
    """Raise InvalidConfigurationError if a grid cannot hold an interior cell."""
    if width < MIN_GRID_SIZE or height < MIN_GRID_SIZE:
        raise InvalidConfigurationError(
            f"grid must be at least {MIN_GRID_SIZE}x{MIN_GRID_SIZE}, got {width}x{height}"
        )
