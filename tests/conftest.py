import os

import pytest
import structlog


def write_file(path, size):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(b"x" * size)
    return str(path)


@pytest.fixture
def make_tree(tmp_path):
    """Build files from {relative_path: size}; returns the root as str."""
    def _make(files, dirs=()):
        for d in dirs:
            os.makedirs(tmp_path / d, exist_ok=True)
        for rel, size in files.items():
            write_file(str(tmp_path / rel), size)
        return str(tmp_path)
    return _make


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
