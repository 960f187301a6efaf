"""Error taxonomy for matrix operations."""


class MatrixError(Exception):
    """Base class for all errors raised by tilemat."""


class OutOfRangeError(MatrixError, IndexError):
    """Element access outside the matrix bounds."""

    def __init__(self, row: int, col: int, shape: tuple[int, int]):
        self.row = row
        self.col = col
        self.shape = shape
        super().__init__(
            f"index ({row}, {col}) out of range for {shape[0]}x{shape[1]} matrix"
        )


class DimensionMismatchError(MatrixError, ValueError):
    """Operand shapes are incompatible for the requested operation."""

    def __init__(
        self,
        operation: str,
        left: tuple[int, int],
        right: tuple[int, int],
    ):
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(
            f"cannot {operation} {left[0]}x{left[1]} and "
            f"{right[0]}x{right[1]} matrices"
        )


class InvalidBlockSizeError(MatrixError, ValueError):
    """Block dimensions for a tiled traversal must be positive integers."""

    def __init__(self, block_rows, block_cols):
        self.block_rows = block_rows
        self.block_cols = block_cols
        super().__init__(
            f"block size must be at least 1x1, got {block_rows!r}x{block_cols!r}"
        )
