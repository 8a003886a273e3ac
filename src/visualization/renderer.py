"""Grid rendering functionality for the forest fire simulation.

This module provides the GridRenderer class which handles drawing the
cellular automaton grid with the fill and outline color of each cell state.
"""

from typing import TYPE_CHECKING

import pygame

from .colors import STATE_COLORS, WHITE

if TYPE_CHECKING:
    from forest_fire.forest import Forest


class GridRenderer:
    """Renders the forest grid onto a Pygame surface.

    Each cell is drawn as a filled rectangle with a one pixel outline.
    Cell size is the surface size divided by the grid size, so the whole
    grid always covers the surface.

    Attributes:
        surface: Surface the grid is drawn on.
        background: Color the surface is cleared to before drawing.
    """

    def __init__(self, surface: pygame.Surface, background: tuple[int, int, int] = WHITE) -> None:
        """Initialize the grid renderer.

        Args:
            surface: Surface to draw on, e.g. a subsurface of the window.
            background: Color used to clear the surface.
        """
        self.surface = surface
        self.background = background

    def cell_rect(self, forest: "Forest", x: int, y: int) -> pygame.Rect:
        """Pixel rectangle covered by the cell at (x, y)."""
        surface_width, surface_height = self.surface.get_size()
        left = x * surface_width // forest.width
        top = y * surface_height // forest.height
        right = (x + 1) * surface_width // forest.width
        bottom = (y + 1) * surface_height // forest.height
        return pygame.Rect(left, top, right - left, bottom - top)

    def render(self, forest: "Forest") -> None:
        """Clear the surface and draw every cell of the forest."""
        self.surface.fill(self.background)
        for x in range(forest.width):
            for y in range(forest.height):
                fill, outline = STATE_COLORS[forest.get(x, y)]
                rect = self.cell_rect(forest, x, y)
                pygame.draw.rect(self.surface, fill, rect)
                pygame.draw.rect(self.surface, outline, rect, 1)
