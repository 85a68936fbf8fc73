"""Forest fire spread model implementation."""

import logging
import math
import random
from numbers import Integral, Real
from typing import Iterable, List, Optional

import numpy as np
from mesa import Model

from .cell import CellState, Coordinate, NEIGHBOUR_OFFSETS
from .errors import InvalidDimension, InvalidProbability, OutOfBoundsIgnition
from .stats import StateCounts, count_states

logger = logging.getLogger(__name__)


class ForestFireModel(Model):
    """Probabilistic cellular automaton of a fire burning through a forest.

    Every cell is a Tree, Fire or Ash. A burning cell turns to ash after one
    step and tries to ignite each of its 4-connected Tree neighbours with
    probability `propagation_prob`.
    """

    def __init__(
        self,
        width: int,
        height: int,
        propagation_prob: float,
        initial_fire: Iterable[Coordinate] = (),
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the forest fire model.

        Args:
            width: Number of columns of the grid
            height: Number of rows of the grid
            propagation_prob: Chance in [0, 1] that one burning cell ignites
                one adjacent tree during a step
            initial_fire: (row, col) coordinates set on fire at the start
            seed: Seed for the model's own random generator
            rng: Random generator to draw from instead of a seeded one
        """
        if seed is not None and rng is not None:
            raise ValueError("Pass either seed or rng, not both")
        super().__init__(seed=seed)

        self._width = _validate_dimension("width", width)
        self._height = _validate_dimension("height", height)
        self._propagation_prob = _validate_probability(propagation_prob)
        if rng is not None:
            self.random = rng

        self._forest = np.full((self._height, self._width), CellState.Tree.value, dtype=np.int8)
        for coordinate in initial_fire:
            row, col = self._validate_ignition(coordinate)
            self._forest[row, col] = CellState.Fire.value

        self.running = self.has_fire()
        logger.info(
            f"Created {self._height}x{self._width} forest, p={self._propagation_prob}, "
            f"{self.state_counts().fire} burning cells"
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def propagation_prob(self) -> float:
        return self._propagation_prob

    def step(self):
        """
        Execute one step of the simulation.

        All decisions read the grid as it was at the start of the step and
        write into a copy, so the scan order never changes the outcome.
        """
        current = self._forest
        next_forest = current.copy()

        ignited = 0
        # np.argwhere yields cells in row-major order
        burning = np.argwhere(current == CellState.Fire.value)
        for row, col in burning:
            next_forest[row, col] = CellState.Ash.value
            ignited += self._propagate_fire(int(row), int(col), current, next_forest)

        self._forest = next_forest
        self.running = self.has_fire()
        logger.debug(
            f"Step {self.steps}: {len(burning)} cells burned out, "
            f"{ignited} successful ignition attempts"
        )

    def _propagate_fire(self, row: int, col: int, current: np.ndarray, next_forest: np.ndarray) -> int:
        """Give every Tree neighbour of a burning cell its own ignition draw."""
        ignited = 0
        for n_row, n_col in self.neighbours(row, col):
            if current[n_row, n_col] != CellState.Tree.value:
                continue
            if self.random.random() < self._propagation_prob:
                next_forest[n_row, n_col] = CellState.Fire.value
                ignited += 1
        return ignited

    def neighbours(self, row: int, col: int) -> List[Coordinate]:
        """In-bounds 4-connected neighbours in right, down, left, up order."""
        result = []
        for d_row, d_col in NEIGHBOUR_OFFSETS:
            n_row, n_col = row + d_row, col + d_col
            if self.is_valid_cell(n_row, n_col):
                result.append((n_row, n_col))
        return result

    def is_valid_cell(self, row: int, col: int) -> bool:
        return 0 <= row < self._height and 0 <= col < self._width

    def has_fire(self) -> bool:
        """Check if there are still cells on fire."""
        return bool(np.any(self._forest == CellState.Fire.value))

    def get_forest_state(self) -> List[List[CellState]]:
        """
        Get the current state of the forest.

        Returns:
            A fresh height x width list of rows; changing it does not affect
            the model
        """
        return [[CellState(code) for code in row] for row in self._forest.tolist()]

    def cell_state(self, row: int, col: int) -> CellState:
        if not self.is_valid_cell(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside the {self._height}x{self._width} grid")
        return CellState(int(self._forest[row, col]))

    def as_array(self) -> np.ndarray:
        """Read-only copy of the grid as CellState integer codes."""
        snapshot = self._forest.copy()
        snapshot.setflags(write=False)
        return snapshot

    def state_counts(self) -> StateCounts:
        return count_states(self._forest)

    def render(self) -> str:
        """Text grid, one line per row, using each state's symbol."""
        return "\n".join(
            "".join(CellState(code).symbol for code in row) for row in self._forest.tolist()
        )

    def _validate_ignition(self, coordinate) -> Coordinate:
        try:
            row, col = coordinate
        except (TypeError, ValueError):
            logger.error(f"Malformed initial fire coordinate: {coordinate!r}")
            raise OutOfBoundsIgnition(coordinate, self._width, self._height) from None

        if not _is_int(row) or not _is_int(col) or not self.is_valid_cell(row, col):
            logger.error(f"Initial fire coordinate {coordinate!r} is outside the grid")
            raise OutOfBoundsIgnition(coordinate, self._width, self._height)
        return int(row), int(col)

    def __str__(self):
        return self.render()


def _is_int(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _validate_dimension(name: str, value) -> int:
    if not _is_int(value) or value <= 0:
        logger.error(f"Grid {name} must be a positive integer, got {value!r}")
        raise InvalidDimension(f"Grid {name} must be a positive integer, got {value!r}")
    return int(value)


def _validate_probability(value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value) or not 0.0 <= value <= 1.0:
        logger.error(f"Propagation probability must be within [0, 1], got {value!r}")
        raise InvalidProbability(f"Propagation probability must be within [0, 1], got {value!r}")
    return float(value)
