"""Default parameters and run configuration for the forest fire model.

The module-level constants are the values used by the example driver when
nothing else is given.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .cell import Coordinate
from .model import ForestFireModel

# ============================================================================
# DEFAULT SIMULATION PARAMETERS
# ============================================================================

DEFAULT_WIDTH: int = 20                             # Grid width in cells
DEFAULT_HEIGHT: int = 10                            # Grid height in cells
DEFAULT_PROPAGATION_PROB: float = 0.6               # Per-neighbour ignition chance
DEFAULT_MAX_STEPS: int = 200                        # Hard stop for the driver loop


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of a single simulation run.

    Grid parameters are checked by `ForestFireModel` itself, so building a
    model from a bad config raises the same errors as constructing it directly.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    propagation_prob: float = DEFAULT_PROPAGATION_PROB
    initial_fire: tuple[Coordinate, ...] = field(default_factory=tuple)
    seed: Optional[int] = None
    max_steps: int = DEFAULT_MAX_STEPS

    def __post_init__(self) -> None:
        if isinstance(self.max_steps, bool) or not isinstance(self.max_steps, int) or self.max_steps <= 0:
            raise ValueError(f"max_steps must be a positive integer, got {self.max_steps!r}")
        # Freeze whatever sequence the caller passed
        object.__setattr__(self, "initial_fire", tuple(self.initial_fire))

    def ignition_points(self) -> tuple[Coordinate, ...]:
        """Configured ignition points, or the grid centre when none are set."""
        if self.initial_fire:
            return self.initial_fire
        return ((self.height // 2, self.width // 2),)

    def build_model(self) -> ForestFireModel:
        return ForestFireModel(
            width=self.width,
            height=self.height,
            propagation_prob=self.propagation_prob,
            initial_fire=self.ignition_points(),
            seed=self.seed,
        )
