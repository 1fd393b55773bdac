"""Pytest configuration for files tests.

Ensures the project root is in sys.path so imports work correctly, and
gives every test a fresh default backend so no user config leaks in.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from files import Folder, LocalBackend, MemoryBackend, set_default_backend  # noqa: E402


@pytest.fixture(autouse=True)
def backend():
    """Local backend installed as the default for the duration of a test."""
    local = LocalBackend()
    set_default_backend(local)
    yield local
    set_default_backend(None)


@pytest.fixture
def folder(tmp_path, backend):
    """Empty folder on disk, bound to the default backend."""
    return Folder(str(tmp_path), backend)


@pytest.fixture
def memory():
    return MemoryBackend()


@pytest.fixture
def memory_folder(memory):
    """Empty folder inside an in-memory tree."""
    return Folder.home(memory).create_subfolder("work")
