#!/usr/bin/env python3
"""Pygame visualization launcher for the forest fire simulation.

Opens a window with the grid on top and the Play/Pause, Step and Reset
controls below it.

Usage:
    python scripts/pygame_run.py
"""

import logging
import sys
from pathlib import Path

import pygame

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import SimulationConfig, SimulationController

from visualization import (
    ControlPanel,
    GridRenderer,
    PygameTicker,
    KEY_ACTIONS,
    PANEL_HEIGHT,
    WHITE,
    apply_action,
)


class SimulationRunner:
    """Main simulation runner with Pygame visualization.

    Handles the event loop and wires pygame input and timer events to the
    simulation controller.

    Attributes:
        screen: Pygame display surface.
        clock: Pygame clock limiting the redraw rate.
        ticker: Timer driving steps while playing.
        panel: Control panel beneath the grid.
        controller: The simulation controller.
    """

    def __init__(self, config: SimulationConfig) -> None:
        window_width = config.surface_width
        window_height = config.surface_height + PANEL_HEIGHT

        pygame.init()
        self.screen = pygame.display.set_mode((window_width, window_height))
        pygame.display.set_caption("Forest Fire")
        self.clock = pygame.time.Clock()

        grid_surface = self.screen.subsurface((0, 0, config.surface_width, config.surface_height))
        self.ticker = PygameTicker()
        self.panel = ControlPanel(top=config.surface_height, width=window_width)
        self.controller = SimulationController(
            config,
            renderer=GridRenderer(grid_surface),
            ticker=self.ticker,
        )

    def _handle_event(self, event: pygame.event.Event) -> bool:
        """Dispatch one event; returns False if the window should close."""
        if event.type == pygame.QUIT:
            return False
        if self.ticker.handle_event(event):
            return True

        if event.type == pygame.KEYDOWN and event.key in KEY_ACTIONS:
            return apply_action(self.controller, KEY_ACTIONS[event.key])

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            action = self.panel.action_at(event.pos, self.controller.playing)
            if action is not None:
                return apply_action(self.controller, action)
        return True

    def _draw_panel(self) -> None:
        panel_rect = (0, self.panel.top, self.screen.get_width(), PANEL_HEIGHT)
        self.screen.fill(WHITE, panel_rect)
        self.panel.draw(self.screen, self.controller)
        pygame.display.flip()

    def run(self) -> None:
        """Run the main loop until the user quits."""
        running = True
        while running:
            for event in pygame.event.get():
                if not self._handle_event(event):
                    running = False
                    break

            self._draw_panel()
            self.clock.tick(60)

        self.controller.pause()
        pygame.quit()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    SimulationRunner(SimulationConfig()).run()


if __name__ == "__main__":
    main()
