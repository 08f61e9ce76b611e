"""
Parallel fan-out of one contiguous buffer to many hashers.

Every algorithm runs as its own unit of work on a ThreadPoolExecutor. All
units read the same read-only memoryview; each owns its hasher. hashlib
releases the GIL for large updates, so the C-backed algorithms overlap.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING

from ..hashing.algorithms import Algorithm, VariantSelection

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..core.interfaces.logger import ILogger
    from ..hashing.registry import HashAlgorithmRegistry

DEFAULT_SLICE_SIZE = 1024 * 1024


class ParallelDispatcher:
    """Runs one hashing unit per algorithm and collects the digests."""

    def __init__(
        self,
        registry: HashAlgorithmRegistry,
        max_workers: int | None = None,
        slice_size: int = DEFAULT_SLICE_SIZE,
        logger: ILogger | None = None,
    ) -> None:
        """
        Args:
            registry: Source of the per-algorithm strategies
            max_workers: Thread cap; None means one thread per algorithm
            slice_size: Bytes fed to a hasher per update call
            logger: Diagnostic logger (resolved from the container if omitted)
        """
        self._registry = registry
        self._max_workers = max_workers
        self._slice_size = slice_size
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        if self._logger is None:
            from ..core.di import resolve_or_default
            from ..core.interfaces.logger import ILogger
            from ..services.logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)
        return self._logger

    def dispatch(
        self,
        view: memoryview,
        algorithms: Sequence[Algorithm],
        variants: VariantSelection,
    ) -> dict[Algorithm, str]:
        """
        Hash the whole view with every algorithm concurrently.

        Returns after every unit has finished. A unit that raises is logged
        and its algorithm is left out of the result.
        """
        results: dict[Algorithm, str] = {}
        if not algorithms:
            return results

        workers = self._max_workers or len(algorithms)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="filedigest-hash") as executor:
            future_to_algorithm = {
                executor.submit(self._run_unit, view, algorithm, variants): algorithm
                for algorithm in algorithms
            }
            for future in as_completed(future_to_algorithm):
                algorithm = future_to_algorithm[future]
                try:
                    results[algorithm] = future.result()
                except Exception as e:
                    self.logger.error("Hashing unit for %s failed: %s", algorithm, e)
        return results

    def _run_unit(self, view: memoryview, algorithm: Algorithm, variants: VariantSelection) -> str:
        strategy = self._registry.require(algorithm)
        hasher = strategy.create_hasher(variants)
        step = self._slice_size
        for offset in range(0, len(view), step):
            with view[offset : offset + step] as piece:
                strategy.update(hasher, piece)
        return strategy.hexdigest(hasher)
