"""Shared fixtures for hostname-mcp tests."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_psutil():
    """psutil stand-in reporting 8 cores, 16 GiB total and 6 GiB available."""
    psutil = MagicMock()
    psutil.cpu_count.return_value = 8
    psutil.virtual_memory.return_value = SimpleNamespace(total=17179869184, available=6442450944)
    return psutil


@pytest.fixture
def posix_user():
    """passwd entry for a regular user."""
    return SimpleNamespace(pw_name="builder", pw_dir="/home/builder", pw_shell="/bin/bash")
