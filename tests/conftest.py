"""
Shared pytest fixtures for filedigest tests.

Every test runs in its own temporary working directory with FILEDIGEST_*
variables removed and a fresh service container, so user configuration
never leaks in.
"""

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from filedigest.core.bootstrap import reset as reset_bootstrap
from filedigest.core.models.config import IOConfig
from filedigest.hashing.sources import IOStrategy
from filedigest.services.logging import FiledigestLogger

# 64 KiB + 17 bytes: several chunks and slices, not block aligned
SAMPLE_SIZE = 64 * 1024 + 17


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Clean env vars, cwd, log location and container for each test."""
    for name in list(os.environ):
        if name.startswith("FILEDIGEST_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(FiledigestLogger, "LOG_FILE_PATH", tmp_path / "logs" / "filedigest.log")
    reset_bootstrap()
    yield
    reset_bootstrap()


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing bytes to a file under tmp_path."""

    def _make(data: bytes, name: str = "data.bin") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _make


@pytest.fixture
def abc_file(make_file) -> Path:
    return make_file(b"abc", "abc.txt")


@pytest.fixture
def empty_file(make_file) -> Path:
    return make_file(b"", "empty.bin")


@pytest.fixture
def sample_data() -> bytes:
    return (bytes(range(256)) * (SAMPLE_SIZE // 256 + 1))[:SAMPLE_SIZE]


@pytest.fixture
def sample_file(make_file, sample_data: bytes) -> Path:
    return make_file(sample_data, "sample.bin")


@pytest.fixture
def io_config_for() -> Callable[..., IOConfig]:
    """Factory for IOConfig that makes open_source() pick a strategy for non-empty files."""

    def _config(strategy: IOStrategy, **overrides) -> IOConfig:
        settings = {"chunk_size": 1000, "slice_size": 4096}
        if strategy is IOStrategy.MAPPED:
            settings["mmap_enabled"] = True
        elif strategy is IOStrategy.FULL_BUFFER:
            settings["mmap_enabled"] = False
        else:
            settings.update(mmap_enabled=False, full_buffer_threshold=0)
        settings.update(overrides)
        return IOConfig(**settings)

    return _config


@pytest.fixture(params=list(IOStrategy), ids=lambda s: s.value)
def io_strategy(request) -> IOStrategy:
    return request.param
