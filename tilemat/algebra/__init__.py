"""Transpose algorithms and strategies."""

from tilemat.algebra.tiling import BlockGrid, Tile, TileRegion, blocked_transpose
from tilemat.algebra.protocols import Transposer
from tilemat.algebra.transposers import NaiveTransposer, BlockedTransposer
from tilemat.algebra.factory import create_transposer

__all__ = [
    "BlockGrid",
    "Tile",
    "TileRegion",
    "blocked_transpose",
    "Transposer",
    "NaiveTransposer",
    "BlockedTransposer",
    "create_transposer",
]
