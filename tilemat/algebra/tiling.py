"""Block partitioning and the cache-blocked transpose."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from functools import cached_property
from typing import Iterator
from numpy.typing import NDArray

from tilemat.core.config import validate_block_size
from tilemat.core.matrix import Matrix

logger = logging.getLogger(__name__)


class TileRegion(Enum):
    """Which part of the block partition a tile belongs to."""
    MAIN = auto()          # full block_rows x block_cols blocks
    BOTTOM_STRIP = auto()  # leftover rows under full column blocks
    RIGHT_STRIP = auto()   # leftover columns beside full row blocks
    CORNER = auto()        # leftover rows and leftover columns


@dataclass(frozen=True)
class Tile:
    """Half-open source rectangle [row_start, row_stop) x [col_start, col_stop)."""

    row_start: int
    row_stop: int
    col_start: int
    col_stop: int
    region: TileRegion

    @property
    def height(self) -> int:
        return self.row_stop - self.row_start

    @property
    def width(self) -> int:
        return self.col_stop - self.col_start


@dataclass(frozen=True)
class BlockGrid:
    """
    Partition of a rows x cols index space into block_rows x block_cols tiles.

    The tiles cover four regions: the grid of full blocks, the strip of
    leftover rows under it, the strip of leftover columns beside it, and
    the corner where both overlap. Together they visit every index once.
    """

    rows: int
    cols: int
    block_rows: int
    block_cols: int

    def __post_init__(self):
        if self.rows < 0 or self.cols < 0:
            raise ValueError(
                f"grid shape must be non-negative, got {self.rows}x{self.cols}"
            )
        validate_block_size(self.block_rows, self.block_cols)

    @cached_property
    def row_blocks(self) -> int:
        """Number of full blocks along the rows."""
        return self.rows // self.block_rows

    @cached_property
    def col_blocks(self) -> int:
        """Number of full blocks along the columns."""
        return self.cols // self.block_cols

    @cached_property
    def row_remainder(self) -> int:
        """Rows left over below the last full row block."""
        return self.rows % self.block_rows

    @cached_property
    def col_remainder(self) -> int:
        """Columns left over right of the last full column block."""
        return self.cols % self.block_cols

    def tiles(self) -> Iterator[Tile]:
        """
        Yield tiles in traversal order: main grid, bottom strip,
        right strip, corner. Empty regions yield nothing.
        """
        br, bc = self.block_rows, self.block_cols
        row_edge = self.row_blocks * br
        col_edge = self.col_blocks * bc

        for rb in range(self.row_blocks):
            for cb in range(self.col_blocks):
                yield Tile(rb * br, (rb + 1) * br, cb * bc, (cb + 1) * bc,
                           TileRegion.MAIN)

        if self.row_remainder > 0:
            for cb in range(self.col_blocks):
                yield Tile(row_edge, self.rows, cb * bc, (cb + 1) * bc,
                           TileRegion.BOTTOM_STRIP)

        if self.col_remainder > 0:
            for rb in range(self.row_blocks):
                yield Tile(rb * br, (rb + 1) * br, col_edge, self.cols,
                           TileRegion.RIGHT_STRIP)

        if self.row_remainder > 0 and self.col_remainder > 0:
            yield Tile(row_edge, self.rows, col_edge, self.cols,
                       TileRegion.CORNER)


def _copy_tile(src: NDArray, dst: NDArray, tile: Tile) -> None:
    """Write src[i, j] to dst[j, i] for every (i, j) in the tile."""
    # Same per-element grain as Matrix.transpose
    for i in range(tile.row_start, tile.row_stop):
        for j in range(tile.col_start, tile.col_stop):
            dst[j, i] = src[i, j]


def blocked_transpose(matrix: Matrix, block_rows: int, block_cols: int) -> Matrix:
    """
    Transpose ``matrix`` one tile at a time.

    Source element (i, j) of each tile lands at (j, i) in the result, so
    the output equals matrix.transpose() for any block size, including
    sizes that leave remainders or exceed the matrix itself.

    Args:
        matrix: Source matrix (rows x cols)
        block_rows: Tile height (>= 1)
        block_cols: Tile width (>= 1)

    Returns:
        New cols x rows matrix

    Raises:
        InvalidBlockSizeError: if either block dimension is < 1
    """
    validate_block_size(block_rows, block_cols)
    grid = BlockGrid(matrix.rows, matrix.cols, block_rows, block_cols)
    logger.debug(
        "blocked transpose %dx%d with %dx%d blocks: %dx%d full, remainder %dx%d",
        grid.rows, grid.cols, block_rows, block_cols,
        grid.row_blocks, grid.col_blocks, grid.row_remainder, grid.col_remainder,
    )

    result = matrix._transposed_shell()
    src, dst = matrix._data, result._data

    for tile in grid.tiles():
        _copy_tile(src, dst, tile)

    return result
