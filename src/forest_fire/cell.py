"""Tree cell agent implementation for the forest fire simulation."""

from enum import Enum

from mesa import Agent


class CellState(Enum):
    """Possible states of a tree cell."""
    Unburned = 0
    Burning = 1
    Burnt = 2


class TreeCell(Agent):
    """Agent representing a single tree in the forest grid.

    ``state`` is what neighbours see during a tick. ``next_state`` is the
    staging value written while the tick is computed; it becomes visible
    only when :meth:`advance` runs.
    """

    def __init__(self, model, state: CellState, border: bool = False):
        """
        Initialize a tree cell.

        Args:
            model: The FireModel instance this cell belongs to
            state: Initial CellState of the cell
            border: Whether the cell lies on the fixed outer ring
        """
        super().__init__(model)
        self.border = border
        self.state = CellState.Burnt if border else state
        self.next_state = self.state

    def is_burnable(self) -> bool:
        """
        Check if the cell can catch fire.

        Returns:
            True if the cell is an interior tree that has not burned yet
        """
        return not self.border and self.state == CellState.Unburned

    def advance(self):
        """
        Apply the next state staged during the current tick.

        Border cells stay Burnt forever, so this is a no-op for them.
        """
        if self.border:
            return
        self.state = self.next_state

    def __repr__(self) -> str:
        return f"TreeCell(pos={self.pos}, state={self.state.name})"
