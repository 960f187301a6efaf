"""Naive and tiled implementations of the Transposer protocol."""

from tilemat.algebra.tiling import blocked_transpose
from tilemat.core.config import validate_block_size
from tilemat.core.matrix import Matrix


class NaiveTransposer:
    """Element-by-element transpose in source row-major order."""

    name = "naive"

    def transpose(self, matrix: Matrix) -> Matrix:
        """Transpose with Matrix.transpose."""
        return matrix.transpose()


class BlockedTransposer:
    """Tile-by-tile transpose with a fixed block shape."""

    def __init__(self, block_rows: int, block_cols: int) -> None:
        validate_block_size(block_rows, block_cols)
        self.block_rows = block_rows
        self.block_cols = block_cols

    @property
    def name(self) -> str:
        return f"blocked {self.block_rows}x{self.block_cols}"

    def transpose(self, matrix: Matrix) -> Matrix:
        """Transpose with blocked_transpose."""
        return blocked_transpose(matrix, self.block_rows, self.block_cols)
