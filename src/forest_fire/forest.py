"""Grid model holding the state of every tree."""

from typing import Iterator

import numpy as np
from numpy.typing import NDArray
from mesa.space import SingleGrid

from .cell import CellState, TreeCell
from .config import validate_dimensions
from .errors import InvalidConfigurationError, OutOfRangeError


class Forest:
    """Rectangular grid of trees surrounded by a permanently burnt border.

    Cells are addressed by ``(x, y)`` with ``(0, 0)`` in the top-left
    corner. Reads go through :meth:`get`, which only ever sees committed
    states; writes go through :meth:`stage_next` and become visible on
    :meth:`commit`.
    """

    def __init__(self, model, width: int, height: int, ignition: tuple[int, int]):
        """
        Allocate the grid and place one agent per cell.

        Args:
            model: The mesa model the cell agents are registered with
            width: Number of cells in x direction
            height: Number of cells in y direction
            ignition: (x, y) of the interior cell that starts Burning

        Raises:
            InvalidConfigurationError: If the grid is smaller than 3x3 or the
                ignition point is not an interior cell
        """
        validate_dimensions(width, height)
        ignition_x, ignition_y = ignition
        if not (0 < ignition_x < width - 1 and 0 < ignition_y < height - 1):
            raise InvalidConfigurationError(
                f"ignition point {ignition} is not an interior cell of a {width}x{height} grid"
            )

        self.width = width
        self.height = height
        self.ignition = (ignition_x, ignition_y)
        self.grid = SingleGrid(width, height, torus=False)

        for _, (x, y) in self.grid.coord_iter():
            border = self.is_border(x, y)
            if (x, y) == self.ignition:
                state = CellState.Burning
            else:
                state = CellState.Unburned
            cell = TreeCell(model, state, border=border)
            self.grid.place_agent(cell, (x, y))

    def is_border(self, x: int, y: int) -> bool:
        return x in (0, self.width - 1) or y in (0, self.height - 1)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> TreeCell:
        """Return the agent at (x, y), failing loudly outside the grid."""
        if not self.in_bounds(x, y):
            raise OutOfRangeError(
                f"cell ({x}, {y}) is outside the {self.width}x{self.height} grid"
            )
        return self.grid[x][y]

    def get(self, x: int, y: int) -> CellState:
        """Current (committed) state of the cell at (x, y)."""
        return self.cell(x, y).state

    def stage_next(self, x: int, y: int, state: CellState) -> None:
        """Set the state the cell takes on at the next commit.

        Staging a border cell does nothing.
        """
        cell = self.cell(x, y)
        if cell.border:
            return
        cell.next_state = state

    def commit(self) -> None:
        """Make every staged interior state current."""
        for x, y in self.interior_coords():
            self.grid[x][y].advance()

    def interior_coords(self) -> Iterator[tuple[int, int]]:
        """Interior coordinates, x outer and y inner."""
        for x in range(1, self.width - 1):
            for y in range(1, self.height - 1):
                yield x, y

    def cells(self) -> Iterator[TreeCell]:
        for content, _ in self.grid.coord_iter():
            yield content

    def count(self, state: CellState) -> int:
        return sum(1 for cell in self.cells() if cell.state == state)

    def snapshot(self) -> NDArray[np.int8]:
        """Copy of the current states as a ``(width, height)`` array of state values."""
        states = np.empty((self.width, self.height), dtype=np.int8)
        for cell in self.cells():
            x, y = cell.pos
            states[x, y] = cell.state.value
        return states

    def __str__(self) -> str:
        symbols = {CellState.Unburned: "T", CellState.Burning: "*", CellState.Burnt: "."}
        rows = []
        for y in range(self.height):
            rows.append("".join(symbols[self.get(x, y)] for x in range(self.width)))
        return "\n".join(rows)
