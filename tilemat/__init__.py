"""
tilemat: dense matrices with a cache-blocked transpose.

This library provides a dense matrix value type with:
- Bounds-checked element access
- Addition, subtraction, scalar and matrix products
- Naive and tiled (cache-blocked) transposes
- Frobenius norm
"""

__version__ = "0.1.0"

from tilemat.core.matrix import Matrix
from tilemat.core.errors import (
    MatrixError,
    OutOfRangeError,
    DimensionMismatchError,
    InvalidBlockSizeError,
)
from tilemat.core.config import TransposeConfig, TransposeMethod
from tilemat.algebra.tiling import BlockGrid, blocked_transpose
from tilemat.algebra.factory import create_transposer

__all__ = [
    "Matrix",
    "MatrixError",
    "OutOfRangeError",
    "DimensionMismatchError",
    "InvalidBlockSizeError",
    "TransposeConfig",
    "TransposeMethod",
    "BlockGrid",
    "blocked_transpose",
    "create_transposer",
]
