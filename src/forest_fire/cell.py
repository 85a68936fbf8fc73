"""Cell states and neighbourhood definitions for the forest grid."""

from enum import Enum
from typing import Tuple

# Grid positions are always (row, col) against a row-major grid.
Coordinate = Tuple[int, int]

# (d_row, d_col) offsets of the 4-connected neighbourhood: right, down, left, up.
NEIGHBOUR_OFFSETS: Tuple[Coordinate, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


class CellState(Enum):
    """Possible states of a forest cell."""
    Tree = 0
    Fire = 1
    Ash = 2

    @property
    def symbol(self) -> str:
        """One-character tag used for text rendering."""
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "CellState":
        """
        Look up a state by its one-character tag.

        Args:
            symbol: One of "T", "F" or "A"

        Returns:
            The matching CellState
        """
        for state, tag in _SYMBOLS.items():
            if tag == symbol:
                return state
        raise ValueError(f"Unknown cell symbol: {symbol!r}")

    def is_burnable(self) -> bool:
        return self is CellState.Tree


_SYMBOLS = {
    CellState.Tree: "T",
    CellState.Fire: "F",
    CellState.Ash: "A",
}
