"""
Default hashing service implementation.

Computes any set of digests over one file in a single logical pass.
File-access and read failures are reported as result strings, never
raised, so a caller always gets one entry per requested algorithm.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..core.exceptions import SourceReadError
from ..core.interfaces.logger import ILogger
from ..core.interfaces.services import HashingService
from ..core.models.config import IOConfig
from ..hashing.algorithms import (
    Algorithm,
    GostVariant,
    TigerVariant,
    VariantSelection,
    sort_algorithms,
)
from ..hashing.registry import HashAlgorithmRegistry
from ..hashing.sources import FileSource, open_source
from .dispatch import ParallelDispatcher

OPEN_ERROR_PREFIX = "Error: "
READ_ERROR_PREFIX = "Error reading file: "


def _coerce_algorithms(requested: Iterable[Algorithm | str]) -> list[Algorithm]:
    return sort_algorithms(
        alg if isinstance(alg, Algorithm) else Algorithm.from_name(alg) for alg in requested
    )


class DefaultHashingService(HashingService):
    """
    Default implementation of hashing service.

    Uses the hash algorithm registry for the per-algorithm hashers and the
    [io] configuration for strategy thresholds.
    """

    def __init__(
        self,
        registry: HashAlgorithmRegistry | None = None,
        io_config: IOConfig | None = None,
        dispatcher: ParallelDispatcher | None = None,
        logger: ILogger | None = None,
    ):
        """
        Initialize hashing service.

        Args:
            registry: Hash algorithm registry (defaults to standard registry)
            io_config: I/O settings (defaults to the loaded [io] section)
            dispatcher: Parallel dispatcher (built from registry and io_config if omitted)
            logger: Diagnostic logger (resolved from the container if omitted)
        """
        self._registry = registry or HashAlgorithmRegistry()
        self._io_config = io_config
        self._dispatcher = dispatcher
        self._logger = logger

    @property
    def registry(self) -> HashAlgorithmRegistry:
        return self._registry

    @property
    def io_config(self) -> IOConfig:
        if self._io_config is None:
            from ..core.settings import load_settings

            self._io_config = load_settings().io
        return self._io_config

    @property
    def logger(self) -> ILogger:
        if self._logger is None:
            from ..core.di import resolve_or_default
            from .logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)
        return self._logger

    @property
    def dispatcher(self) -> ParallelDispatcher:
        if self._dispatcher is None:
            self._dispatcher = ParallelDispatcher(
                self._registry,
                max_workers=self.io_config.max_workers,
                slice_size=self.io_config.slice_size,
                logger=self.logger,
            )
        return self._dispatcher

    def compute(
        self,
        source: FileSource,
        algorithms: Iterable[Algorithm],
        gost_variant: GostVariant = GostVariant.CRYPTOPRO,
        tiger_variant: TigerVariant = TigerVariant.TIGER,
    ) -> dict[Algorithm, str]:
        """
        Digest an open source with every requested algorithm.

        Contiguous sources are fanned out to the parallel dispatcher when more
        than one algorithm is requested; otherwise every hasher is fed each
        chunk in turn.

        Returns:
            Dict of {algorithm: lowercase hex digest}. On a read failure every
            algorithm maps to the same "Error reading file: ..." string. An
            algorithm whose parallel unit failed is absent.
        """
        algorithms = sort_algorithms(algorithms)
        if not algorithms:
            return {}
        variants = VariantSelection(gost=gost_variant, tiger=tiger_variant)
        strategies = {alg: self._registry.require(alg) for alg in algorithms}

        if source.is_contiguous and len(algorithms) > 1 and self.io_config.parallel:
            self.logger.debug("Dispatching %d algorithms in parallel for %s", len(algorithms), source.path)
            return self.dispatcher.dispatch(source.view(), algorithms, variants)

        hashers = {alg: strategy.create_hasher(variants) for alg, strategy in strategies.items()}
        chunks = source.chunks()
        try:
            for chunk in chunks:
                for alg, hasher in hashers.items():
                    strategies[alg].update(hasher, chunk)
        except OSError as e:
            self.logger.warning("Read failed for %s: %s", source.path, e)
            return dict.fromkeys(algorithms, f"{READ_ERROR_PREFIX}{e}")
        finally:
            chunks.close()

        return {alg: strategies[alg].hexdigest(hashers[alg]) for alg in algorithms}

    def compute_digests(
        self,
        file_path: str,
        requested_algorithms: Iterable[Algorithm | str],
        gost_variant: GostVariant = GostVariant.CRYPTOPRO,
        tiger_variant: TigerVariant = TigerVariant.TIGER,
    ) -> list[tuple[Algorithm, str]]:
        """
        Compute multiple digests of a file in a single pass.

        Args:
            file_path: File to digest
            requested_algorithms: Algorithms (or their names); duplicates are ignored
            gost_variant: S-box used for GOST
            tiger_variant: Padding used for TIGER192

        Returns:
            List of (algorithm, digest) ordered by algorithm. A digest is an
            "Error: ..." string when the file cannot be opened.

        Raises:
            UnknownAlgorithmError: If an algorithm has no registered strategy
        """
        algorithms = _coerce_algorithms(requested_algorithms)
        for alg in algorithms:
            self._registry.require(alg)
        if not algorithms:
            return []

        try:
            source = open_source(file_path, self.io_config, self.logger)
        except SourceReadError as e:
            self.logger.warning("Read failed for %s: %s", file_path, e)
            results = dict.fromkeys(algorithms, f"{READ_ERROR_PREFIX}{e.message}")
        except OSError as e:
            self.logger.warning("Cannot open %s: %s", file_path, e)
            results = dict.fromkeys(algorithms, f"{OPEN_ERROR_PREFIX}{e}")
        else:
            with source:
                results = self.compute(source, algorithms, gost_variant, tiger_variant)

        return [(alg, results[alg]) for alg in algorithms if alg in results]


def compute_digests(
    file_path: str,
    requested_algorithms: Iterable[Algorithm | str],
    gost_variant: GostVariant = GostVariant.CRYPTOPRO,
    tiger_variant: TigerVariant = TigerVariant.TIGER,
) -> list[tuple[Algorithm, str]]:
    """Compute digests with the registered hashing service (or a default one)."""
    from ..core.di import resolve_or_default

    service = resolve_or_default(HashingService, DefaultHashingService)  # type: ignore[type-abstract]
    return service.compute_digests(file_path, requested_algorithms, gost_variant, tiger_variant)
