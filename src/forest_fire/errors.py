"""Errors raised when a forest fire model is built from invalid parameters."""


class ForestFireError(ValueError):
    """Base class for invalid simulation parameters."""


class InvalidDimension(ForestFireError):
    """Grid width or height is not a positive integer."""


class InvalidProbability(ForestFireError):
    """Propagation probability is not a real number in [0, 1]."""


class OutOfBoundsIgnition(ForestFireError):
    """An initial fire coordinate does not address a cell of the grid."""

    def __init__(self, coordinate, width: int, height: int):
        self.coordinate = coordinate
        self.width = width
        self.height = height
        super().__init__(
            f"Initial fire at {coordinate!r} is outside the {height}x{width} grid "
            f"(expected (row, col) with 0 <= row < {height} and 0 <= col < {width})"
        )
