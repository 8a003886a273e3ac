#!/usr/bin/env python3
"""Headless console run of the forest fire simulation."""

import logging
import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import CellState, Forest, SimulationConfig, SimulationController

SYMBOLS = {
    CellState.Unburned: "🌲",
    CellState.Burning: "🔥",
    CellState.Burnt: "⬛",
}


class ConsoleRenderer:
    """Prints a simple representation of the grid to the console."""

    def render(self, forest: Forest) -> None:
        grid_str = ""
        for y in range(forest.height):
            for x in range(forest.width):
                grid_str += SYMBOLS[forest.get(x, y)]
            grid_str += "\n"
        print(grid_str)


def main():
    """Run the simulation until the fire is out."""
    logging.basicConfig(level=logging.INFO)
    MAX_STEPS = 200

    print("--- INITIAL STATE ---")
    controller = SimulationController(SimulationConfig(), renderer=ConsoleRenderer())

    for i in range(MAX_STEPS):
        print(f"\n--- STEP {i + 1} ---")
        controller.step()

        if not controller.model.running:
            print("\nFire has been extinguished.")
            break


if __name__ == "__main__":
    main()
