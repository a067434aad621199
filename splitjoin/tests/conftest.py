import os

import pytest

import splitjoin


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
    path = tmp_path / "logs"
    monkeypatch.setattr(splitjoin, "LOG_DIR", str(path))
    return path


@pytest.fixture
def source_file(tmp_path):
    """Writes a file of the given size whose bytes are not all the same."""
    def make(size=1000, name="source.bin"):
        path = tmp_path / name
        path.write_bytes(bytes(i % 251 for i in range(size)))
        return str(path)
    return make


@pytest.fixture
def out_dir(tmp_path):
    path = tmp_path / "output"
    os.makedirs(path)
    return path
