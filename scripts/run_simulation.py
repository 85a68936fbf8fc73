#!/usr/bin/env python3
"""Main script to run the forest fire simulation headless in the console."""

import logging
import sys
from pathlib import Path
from typing import Any, Dict

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import CellState, ForestFireModel, SimulationConfig
from forest_fire.config import (
    DEFAULT_HEIGHT,
    DEFAULT_MAX_STEPS,
    DEFAULT_PROPAGATION_PROB,
    DEFAULT_WIDTH,
)


# ---- User-configurable parameters ----
CONFIG: Dict[str, Any] = {
    "width": DEFAULT_WIDTH,
    "height": DEFAULT_HEIGHT,
    "propagation_prob": DEFAULT_PROPAGATION_PROB,
    "initial_fire": [],     # (row, col) pairs, empty for the grid centre
    "seed": 42,             # None for a different fire on every run
    "max_steps": DEFAULT_MAX_STEPS,
}

SYMBOLS = {
    CellState.Tree: "🌲",
    CellState.Fire: "🔥",
    CellState.Ash: "⬛",
}


def print_grid(model: ForestFireModel) -> None:
    """
    Print a simple representation of the grid to console.

    Args:
        model: The ForestFireModel instance to visualize
    """
    grid_str = ""
    for row in model.get_forest_state():
        grid_str += "".join(SYMBOLS[state] for state in row)
        grid_str += "\n"
    print(grid_str)


def main():
    """Run the forest fire simulation."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    cfg = SimulationConfig(**CONFIG)

    print("--- CREATING MODEL ---")
    model = cfg.build_model()

    print("--- INITIAL STATE ---")
    print_grid(model)

    # Main simulation loop
    while model.has_fire() and model.steps < cfg.max_steps:
        model.step()
        print(f"\n--- STEP {model.steps} ---")
        print_grid(model)

    counts = model.state_counts()
    if model.has_fire():
        print(f"\nStopped after {cfg.max_steps} steps with {counts.fire} cells still burning.")
    else:
        print(f"\nFire has been extinguished after {model.steps} steps.")
    print(f"Burned {counts.ash} of {counts.total} cells ({counts.burned_fraction:.0%}).")


if __name__ == "__main__":
    main()
