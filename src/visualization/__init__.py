"""Visualization package for the forest fire simulation using Pygame."""

from .colors import *
from .renderer import GridRenderer
from .ticker import PygameTicker, STEP_EVENT
from .ui import Action, ControlPanel, KEY_ACTIONS, apply_action

__all__ = [
    # Renderer, ticker and UI components
    'GridRenderer',
    'PygameTicker',
    'STEP_EVENT',
    'ControlPanel',
    'Action',
    'KEY_ACTIONS',
    'apply_action',

    # Cell state colors
    'UNBURNED_COLOR',
    'BURNING_COLOR',
    'BURNT_COLOR',
    'OUTLINE_COLOR',
    'STATE_COLORS',

    # UI colors
    'BLACK',
    'WHITE',
    'BUTTON_COLOR',
    'BUTTON_DISABLED_COLOR',

    # Layout
    'PANEL_HEIGHT',
]
