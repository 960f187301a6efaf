"""Core matrix type, errors and configuration."""

from tilemat.core.matrix import Matrix
from tilemat.core.errors import (
    MatrixError,
    OutOfRangeError,
    DimensionMismatchError,
    InvalidBlockSizeError,
)
from tilemat.core.config import TransposeConfig, TransposeMethod, default_block_shape

__all__ = [
    "Matrix",
    "MatrixError",
    "OutOfRangeError",
    "DimensionMismatchError",
    "InvalidBlockSizeError",
    "TransposeConfig",
    "TransposeMethod",
    "default_block_shape",
]
