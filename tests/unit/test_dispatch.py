"""
Unit tests for the parallel dispatcher.
"""

import hashlib
from typing import Any

from filedigest.core.interfaces.logger import ILogger
from filedigest.core.models.config import IOConfig
from filedigest.hashing.algorithms import Algorithm, VariantSelection
from filedigest.hashing.registry import HashAlgorithmRegistry
from filedigest.hashing.strategies import HashStrategy
from filedigest.services.dispatch import ParallelDispatcher
from filedigest.services.hashing import DefaultHashingService

from vectors import ABC_VECTORS


class RecordingLogger(ILogger):
    """Logger that keeps every message for assertions."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def _log(self, level: str, message: str, *args: Any) -> None:
        self.records.append((level, message % args if args else message))

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log("debug", message, *args)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log("info", message, *args)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log("warning", message, *args)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log("error", message, *args)

    def set_level(self, level: str) -> None:
        pass


class ExplodingSHA1(HashStrategy):
    """SHA1 strategy whose updates always fail."""

    @property
    def algorithm(self) -> Algorithm:
        return Algorithm.SHA1

    def create_hasher(self, variants: VariantSelection) -> Any:
        return hashlib.sha1()

    def update(self, hasher: Any, data: Any) -> None:
        raise RuntimeError("boom")


class TestParallelDispatcher:
    """Tests for fan-out over a shared buffer."""

    def test_dispatch_computes_every_algorithm(self):
        dispatcher = ParallelDispatcher(HashAlgorithmRegistry(), slice_size=1)
        view = memoryview(b"abc").toreadonly()
        algorithms = [Algorithm.MD5, Algorithm.SHA256, Algorithm.TIGER192, Algorithm.CRC32]
        results = dispatcher.dispatch(view, algorithms, VariantSelection())
        assert results == {alg: ABC_VECTORS[alg] for alg in algorithms}

    def test_dispatch_with_worker_cap(self):
        """Fewer threads than algorithms still completes every unit."""
        dispatcher = ParallelDispatcher(HashAlgorithmRegistry(), max_workers=1)
        algorithms = [Algorithm.MD4, Algorithm.MD5, Algorithm.SHA1]
        results = dispatcher.dispatch(memoryview(b"abc"), algorithms, VariantSelection())
        assert results == {alg: ABC_VECTORS[alg] for alg in algorithms}

    def test_empty_request(self):
        dispatcher = ParallelDispatcher(HashAlgorithmRegistry())
        assert dispatcher.dispatch(memoryview(b"abc"), [], VariantSelection()) == {}

    def test_failing_unit_is_isolated(self):
        """A unit that raises is logged and left out; others still finish."""
        registry = HashAlgorithmRegistry()
        registry.register(ExplodingSHA1())
        logger = RecordingLogger()
        dispatcher = ParallelDispatcher(registry, logger=logger)

        results = dispatcher.dispatch(
            memoryview(b"abc"), [Algorithm.MD5, Algorithm.SHA1, Algorithm.SHA256], VariantSelection()
        )

        assert results == {
            Algorithm.MD5: ABC_VECTORS[Algorithm.MD5],
            Algorithm.SHA256: ABC_VECTORS[Algorithm.SHA256],
        }
        assert ("error", "Hashing unit for SHA1 failed: boom") in logger.records

    def test_failing_unit_absent_from_service_results(self, abc_file):
        registry = HashAlgorithmRegistry()
        registry.register(ExplodingSHA1())
        service = DefaultHashingService(
            registry, io_config=IOConfig(mmap_enabled=True), logger=RecordingLogger()
        )
        results = service.compute_digests(str(abc_file), [Algorithm.MD5, Algorithm.SHA1])
        assert results == [(Algorithm.MD5, ABC_VECTORS[Algorithm.MD5])]
