"""
Shared pytest fixtures for digestkit tests.

- data_file: the reference content written to disk
- reset_logger: keeps the process-wide logger from leaking between tests
- isolated_env: strips DIGESTKIT_* variables from the environment
"""

import os

import pytest

from digestkit.services.logging import set_logger
from tests.vectors import DATA


@pytest.fixture(autouse=True)
def reset_logger():
    """Reset the process-wide logger after each test."""
    yield
    set_logger(None)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Remove DIGESTKIT_* environment variables for the duration of a test."""
    for key in list(os.environ):
        if key.startswith("DIGESTKIT_"):
            monkeypatch.delenv(key)


@pytest.fixture
def data_file(tmp_path):
    """Write the reference content to a file and return its path."""
    path = tmp_path / "blob.bin"
    path.write_bytes(DATA)
    return path
