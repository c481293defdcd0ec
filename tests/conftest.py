"""Test fixtures for number-pipeline."""

import logging
import sys
import pytest

from number_pipeline.logger import logger


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logger so they don't outlive capsys."""
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_numbers(tmp_path):
    """Return a helper that writes text to a numbers file and returns its path."""

    def _write(text, name="numbers.txt"):
        path = tmp_path / name
        path.write_text(text)
        return str(path)

    return _write


@pytest.fixture
def mixed_numbers_file(write_numbers):
    """The example source from the README: 3 4 5 6 7 8."""
    return write_numbers("3 4 5 6 7 8\n")


@pytest.fixture
def odd_numbers_file(write_numbers):
    return write_numbers("1 3 5\n7 9\n", name="odd_numbers.txt")


@pytest.fixture
def int_digit_limit():
    """Apply the interpreter's default limit on int() string conversion."""
    if not hasattr(sys, "set_int_max_str_digits"):
        pytest.skip("int() has no digit limit on this interpreter")
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield 4300
    sys.set_int_max_str_digits(previous)
