"""Shared fixtures for the text-cube test suite."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """spin_cube.main() reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
