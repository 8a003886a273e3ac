"""Transition rule deciding how fire moves between trees each tick."""

from .cell import CellState
from .forest import Forest
from .random_source import RandomSource

# Orthogonal neighbours as (dx, dy), checked in this order: top, left, right, bottom.
# The order fixes which draw is consumed first when several neighbours burn.
NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = ((0, -1), (-1, 0), (1, 0), (0, 1))


class FireSpread:
    """Nearest-neighbour contagion rule.

    A burning tree burns out after exactly one tick. An unburned tree
    catches fire if any burning orthogonal neighbour wins its own
    independent ``burn_chance`` draw. Burnt trees never change.

    Attributes:
        random_source: Service providing the per-neighbour draws.
        burn_chance: Percentage chance (0-100) for each burning neighbour.
    """

    def __init__(self, random_source: RandomSource, burn_chance: int):
        self.random_source = random_source
        self.burn_chance = burn_chance

    def next_state(self, forest: Forest, x: int, y: int) -> CellState:
        """Compute the state of (x, y) after this tick from committed states only."""
        cell = forest.cell(x, y)
        if cell.state == CellState.Burning:
            return CellState.Burnt
        if not cell.is_burnable():
            return cell.state
        if self._catches_fire(forest, x, y):
            return CellState.Burning
        return CellState.Unburned

    def _catches_fire(self, forest: Forest, x: int, y: int) -> bool:
        for dx, dy in NEIGHBOUR_OFFSETS:
            if forest.get(x + dx, y + dy) != CellState.Burning:
                continue
            # A lost draw does not stop the remaining neighbours from trying
            if self.random_source.burn_chance_happens(self.burn_chance):
                return True
        return False

    def stage_next_states(self, forest: Forest) -> None:
        """Phase one of a tick: stage the next state of every interior cell."""
        for x, y in forest.interior_coords():
            forest.stage_next(x, y, self.next_state(forest, x, y))
