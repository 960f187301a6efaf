"""Transposer factory and dispatch logic."""

import logging
from typing import Optional
import numpy as np
from numpy.typing import DTypeLike

from tilemat.algebra.protocols import Transposer
from tilemat.algebra.transposers import BlockedTransposer, NaiveTransposer
from tilemat.core.config import TransposeConfig, TransposeMethod, default_block_shape

logger = logging.getLogger(__name__)


def create_transposer(
    config: Optional[TransposeConfig] = None,
    dtype: DTypeLike = np.float64,
) -> Transposer:
    """
    Build the transposer described by ``config``.

    Args:
        config: Method and block shape (blocked with deduced shape if None)
        dtype: Element type used to deduce a missing block dimension

    Returns:
        Transposer instance
    """
    if config is None:
        config = TransposeConfig()

    if config.method is TransposeMethod.NAIVE:
        logger.debug("using naive transposer")
        return NaiveTransposer()

    default_rows, default_cols = default_block_shape(dtype)
    block_rows = config.block_rows if config.block_rows is not None else default_rows
    block_cols = config.block_cols if config.block_cols is not None else default_cols

    logger.debug("using blocked transposer %dx%d", block_rows, block_cols)
    return BlockedTransposer(block_rows, block_cols)
