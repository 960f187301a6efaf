import pytest

from tilemat.utils.log import reset_logger


@pytest.fixture(autouse=True)
def _reset_tilemat_loggers():
    """Undo handlers attached by CLI runs so caplog sees library records."""
    yield
    reset_logger()
