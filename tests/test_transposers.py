"""Tests for transpose configuration, strategies and the factory."""

import numpy as np
import pytest

from tilemat import Matrix, InvalidBlockSizeError
from tilemat.algebra.factory import create_transposer
from tilemat.algebra.protocols import Transposer
from tilemat.algebra.transposers import BlockedTransposer, NaiveTransposer
from tilemat.core.config import TransposeConfig, TransposeMethod, default_block_shape


@pytest.mark.parametrize(
    "dtype, side",
    [(np.float64, 8), (np.float32, 16), (np.int32, 16), (np.int8, 64), (np.complex128, 4)],
)
def test_default_block_shape_fills_cache_line(dtype, side):
    assert default_block_shape(dtype) == (side, side)


def test_default_block_shape_custom_line_and_floor():
    assert default_block_shape(np.float64, cache_line_bytes=128) == (16, 16)
    # An element larger than the line still gets a 1x1 block
    assert default_block_shape(np.complex128, cache_line_bytes=8) == (1, 1)

    with pytest.raises(ValueError):
        default_block_shape(np.float64, cache_line_bytes=0)


def test_default_block_shape_object_dtype():
    rows, cols = default_block_shape(object)

    assert rows == cols == 64 // np.dtype(object).itemsize


def test_config_defaults():
    config = TransposeConfig()

    assert config.method is TransposeMethod.BLOCKED
    assert config.block_rows is None
    assert config.block_cols is None


def test_config_rejects_zero_block():
    with pytest.raises(InvalidBlockSizeError):
        TransposeConfig(block_rows=0, block_cols=4)


def test_factory_naive():
    transposer = create_transposer(TransposeConfig(method=TransposeMethod.NAIVE))

    assert isinstance(transposer, NaiveTransposer)
    assert transposer.name == "naive"


def test_factory_blocked_explicit_shape():
    config = TransposeConfig(TransposeMethod.BLOCKED, block_rows=3, block_cols=5)

    transposer = create_transposer(config)

    assert isinstance(transposer, BlockedTransposer)
    assert (transposer.block_rows, transposer.block_cols) == (3, 5)
    assert transposer.name == "blocked 3x5"


def test_factory_deduces_missing_dimensions():
    transposer = create_transposer(TransposeConfig(block_rows=2), dtype=np.float32)

    assert (transposer.block_rows, transposer.block_cols) == (2, 16)


def test_factory_default_config():
    transposer = create_transposer()

    assert (transposer.block_rows, transposer.block_cols) == (8, 8)


def test_blocked_transposer_validates_on_construction():
    with pytest.raises(InvalidBlockSizeError):
        BlockedTransposer(0, 2)


@pytest.mark.parametrize(
    "transposer", [NaiveTransposer(), BlockedTransposer(2, 3), BlockedTransposer(64, 64)]
)
def test_transposers_agree(transposer: Transposer):
    rng = np.random.default_rng(5)
    data = rng.integers(-9, 9, size=(11, 7))
    m = Matrix.from_rows(data)

    result = transposer.transpose(m)

    assert np.array_equal(result.to_numpy(), data.T)


@pytest.mark.parametrize("size", [2.5, True, "4", 0, -3])
def test_config_rejects_non_integer_block(size):
    """Invalid block sizes fail when the config is built, not in the factory."""
    with pytest.raises(InvalidBlockSizeError):
        TransposeConfig(block_rows=size)

    with pytest.raises(InvalidBlockSizeError):
        TransposeConfig(block_rows=2, block_cols=size)


def test_validate_block_size():
    from tilemat.core.config import validate_block_size

    validate_block_size(1, np.int64(3))

    with pytest.raises(InvalidBlockSizeError):
        validate_block_size(2, 2.0)
