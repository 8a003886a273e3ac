"""UI components for the forest fire visualization.

This module contains the control panel below the grid: the Play/Pause,
Step and Reset buttons and a status line.
"""

from enum import Enum
from typing import TYPE_CHECKING, Optional

import pygame

from .colors import BLACK, BUTTON_COLOR, BUTTON_DISABLED_COLOR, WHITE

if TYPE_CHECKING:
    from forest_fire.controller import SimulationController


class Action(Enum):
    """Triggers exposed by the control surface."""
    PLAY_PAUSE = "play_pause"
    STEP = "step"
    RESET = "reset"
    QUIT = "quit"


KEY_ACTIONS = {
    pygame.K_SPACE: Action.PLAY_PAUSE,
    pygame.K_s: Action.STEP,
    pygame.K_RIGHT: Action.STEP,
    pygame.K_r: Action.RESET,
    pygame.K_ESCAPE: Action.QUIT,
}


def apply_action(controller: "SimulationController", action: Action) -> bool:
    """Map a trigger onto the controller.

    Step is ignored while playing, as the Step button is disabled then.

    Returns:
        False if the application should quit, True otherwise.
    """
    if action == Action.QUIT:
        return False
    if action == Action.PLAY_PAUSE:
        controller.toggle()
    elif action == Action.STEP:
        if not controller.playing:
            controller.step()
    elif action == Action.RESET:
        controller.reset()
    return True


class ControlPanel:
    """Buttons and status text beneath the grid.

    Attributes:
        top: Y coordinate of the panel's top edge.
        width: Width of the panel in pixels.
        font: Font for button labels.
        small_font: Font for the status line.
    """

    BUTTON_W = 90
    BUTTON_H = 36
    SPACING = 8

    def __init__(self, top: int, width: int) -> None:
        """Initialize the panel and lay out its three buttons.

        Args:
            top: Y coordinate of the panel's top edge.
            width: Width of the panel in pixels.
        """
        self.top = top
        self.width = width
        self.font = pygame.font.Font(None, 26)
        self.small_font = pygame.font.Font(None, 22)

        total_width = self.BUTTON_W * 3 + self.SPACING * 2
        left = (width - total_width) // 2
        button_y = top + 12
        self.buttons = {}
        for i, action in enumerate((Action.PLAY_PAUSE, Action.STEP, Action.RESET)):
            x = left + i * (self.BUTTON_W + self.SPACING)
            self.buttons[action] = pygame.Rect(x, button_y, self.BUTTON_W, self.BUTTON_H)

    def action_at(self, pos: tuple[int, int], playing: bool) -> Optional[Action]:
        """Return the action of the enabled button under ``pos``, if any."""
        for action, rect in self.buttons.items():
            if not rect.collidepoint(pos):
                continue
            if action == Action.STEP and playing:
                return None
            return action
        return None

    def draw(self, screen: pygame.Surface, controller: "SimulationController") -> None:
        """Draw the buttons and the step / status line."""
        playing = controller.playing
        labels = {
            Action.PLAY_PAUSE: "Pause" if playing else "Play",
            Action.STEP: "Step",
            Action.RESET: "Reset",
        }

        for action, rect in self.buttons.items():
            enabled = not (action == Action.STEP and playing)
            color = BUTTON_COLOR if enabled else BUTTON_DISABLED_COLOR
            pygame.draw.rect(screen, color, rect, border_radius=8)
            pygame.draw.rect(screen, WHITE, rect, 2, border_radius=8)
            lbl = self.font.render(labels[action], True, WHITE)
            screen.blit(lbl, lbl.get_rect(center=rect.center))

        model = controller.model
        if model.running:
            status = "Playing" if playing else "Paused"
        else:
            status = "Fire out"
        info = f"Step: {model.steps}   Burning: {model.burning_count}   {status}"
        info_text = self.small_font.render(info, True, BLACK)
        screen.blit(info_text, (self.width // 2 - info_text.get_width() // 2, self.top + 62))

        keys = self.small_font.render("SPACE play/pause  S step  R reset  ESC quit", True, BLACK)
        screen.blit(keys, (self.width // 2 - keys.get_width() // 2, self.top + 84))
