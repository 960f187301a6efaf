"""Transpose configuration and block shape deduction."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional
import numbers
import numpy as np
from numpy.typing import DTypeLike

from tilemat.core.errors import InvalidBlockSizeError

DEFAULT_CACHE_LINE_BYTES = 64


def _is_block_size(size) -> bool:
    return (
        not isinstance(size, bool)
        and isinstance(size, numbers.Integral)
        and size >= 1
    )


def validate_block_size(block_rows, block_cols) -> None:
    """Raise InvalidBlockSizeError unless both block dimensions are integers >= 1."""
    if not (_is_block_size(block_rows) and _is_block_size(block_cols)):
        raise InvalidBlockSizeError(block_rows, block_cols)


class TransposeMethod(Enum):
    """Traversal used to build a transpose."""
    NAIVE = auto()    # element by element, source row-major
    BLOCKED = auto()  # tile by tile


@dataclass(frozen=True)
class TransposeConfig:
    """Which transpose to run, and with which block shape."""

    method: TransposeMethod = TransposeMethod.BLOCKED
    block_rows: Optional[int] = None  # deduced from the dtype when None
    block_cols: Optional[int] = None

    def __post_init__(self):
        for size in (self.block_rows, self.block_cols):
            if size is not None and not _is_block_size(size):
                raise InvalidBlockSizeError(self.block_rows, self.block_cols)


def default_block_shape(
    dtype: DTypeLike,
    cache_line_bytes: int = DEFAULT_CACHE_LINE_BYTES,
) -> tuple[int, int]:
    """
    Square block whose side is the number of elements in one cache line.

    Object arrays store pointers, so their element size is the pointer size.

    Args:
        dtype: Element type
        cache_line_bytes: Cache line size in bytes

    Returns:
        (block_rows, block_cols), each at least 1
    """
    if cache_line_bytes < 1:
        raise ValueError(f"cache line size must be positive, got {cache_line_bytes}")

    itemsize = np.dtype(dtype).itemsize
    side = max(1, cache_line_bytes // max(1, itemsize))
    return side, side
