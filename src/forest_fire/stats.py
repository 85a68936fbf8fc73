from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from .cell import CellState


ArrayLike = Any


@dataclass(frozen=True)
class StateCounts:
    """Number of cells in each state of a forest grid."""

    tree: int
    fire: int
    ash: int

    @property
    def total(self) -> int:
        return self.tree + self.fire + self.ash

    @property
    def burned_fraction(self) -> float:
        # Share of the grid already turned to ash
        return _safe_div(self.ash, self.total)


def _safe_div(num: float, den: float) -> float:
    return 0.0 if den == 0 else float(num) / float(den)


def _state_code(value: Any) -> int:
    if isinstance(value, CellState):
        return value.value
    try:
        return CellState(int(value)).value
    except (TypeError, ValueError):
        raise ValueError(f"Unknown cell state code: {value!r}") from None


def _as_state_array(grid: ArrayLike) -> np.ndarray:
    """Coerce a grid of CellState members or integer codes to a 2D int array."""

    arr = np.asarray(grid, dtype=object)
    if arr.ndim != 2:
        raise ValueError(f"Expected 2D grid, got shape={arr.shape}")
    to_code = np.vectorize(_state_code, otypes=[np.int8])
    return to_code(arr) if arr.size else arr.astype(np.int8)


def count_states(grid: ArrayLike) -> StateCounts:
    """Count Tree/Fire/Ash cells.

    Accepts the nested lists returned by `ForestFireModel.get_forest_state`
    as well as numpy arrays of state codes.
    """

    codes = _as_state_array(grid)
    return StateCounts(
        tree=int(np.sum(codes == CellState.Tree.value)),
        fire=int(np.sum(codes == CellState.Fire.value)),
        ash=int(np.sum(codes == CellState.Ash.value)),
    )
