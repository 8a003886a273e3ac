"""Color definitions and constants for the forest fire visualization.

This module contains all RGB color tuples and default layout values
used throughout the Pygame visualization.
"""

from typing import Tuple

from forest_fire.cell import CellState

# Type alias for RGB color tuples
Color = Tuple[int, int, int]

# ============================================================================
# CELL STATE COLORS
# ============================================================================

UNBURNED_COLOR: Color = (0, 128, 0)                 # green (living tree)
BURNING_COLOR: Color = (255, 0, 0)                  # red (on fire)
BURNT_COLOR: Color = (128, 128, 128)                # gray (burned out)
OUTLINE_COLOR: Color = (0, 0, 0)                    # black cell outline

# State -> (fill, outline)
STATE_COLORS: dict[CellState, tuple[Color, Color]] = {
    CellState.Unburned: (UNBURNED_COLOR, OUTLINE_COLOR),
    CellState.Burning: (BURNING_COLOR, OUTLINE_COLOR),
    CellState.Burnt: (BURNT_COLOR, OUTLINE_COLOR),
}

# ============================================================================
# UI COLORS
# ============================================================================

BLACK: Color = (0, 0, 0)                            # Text
WHITE: Color = (255, 255, 255)                      # Background
BUTTON_COLOR: Color = (180, 0, 0)                   # Enabled button
BUTTON_DISABLED_COLOR: Color = (110, 110, 110)      # Disabled button

# ============================================================================
# LAYOUT
# ============================================================================

PANEL_HEIGHT: int = 110                             # Control panel below the grid
