"""
Caller-side hashing session.

Holds the selected file, the enabled algorithms, the variant and display
choices, and the results of the last calculations. A calculation runs on a
single background worker thread; the engine underneath may fan out further.
"""

from __future__ import annotations

import threading
import weakref
from collections.abc import Iterable
from concurrent.futures import Future, ThreadPoolExecutor

from ..core.exceptions import MissingFileError
from ..core.interfaces.logger import ILogger
from ..core.interfaces.services import HashingService
from ..hashing.algorithms import Algorithm, GostVariant, TigerVariant, sort_algorithms
from ..hashing.compare import hashes_equal
from ..presenters.formatting import HashFormat, reformat


class HashSession:
    """
    Stateful front end over a HashingService.

    Results are stored as display strings in the session's current format.
    Changing a variant drops the stored result of the algorithm it affects;
    changing the file drops all of them.

    Example:
        session = HashSession(algorithms=[Algorithm.MD5, Algorithm.SHA256])
        session.select_file("image.iso")
        results = session.calculate()
        session.close()

    Use it as a context manager or call close() to stop the worker thread;
    a session that is garbage collected shuts its worker down without waiting.
    """

    def __init__(
        self,
        service: HashingService | None = None,
        algorithms: Iterable[Algorithm] = (),
        hash_format: HashFormat = HashFormat.HEX_LOWER,
        gost_variant: GostVariant = GostVariant.CRYPTOPRO,
        tiger_variant: TigerVariant = TigerVariant.TIGER,
        logger: ILogger | None = None,
    ) -> None:
        if service is None:
            from ..core.di import resolve_or_default
            from .hashing import DefaultHashingService

            service = resolve_or_default(HashingService, DefaultHashingService)  # type: ignore[type-abstract]
        if logger is None:
            from ..core.di import resolve_or_default
            from .logging import NullLogger

            logger = resolve_or_default(ILogger, NullLogger)

        self._service = service
        self._logger = logger
        self._lock = threading.Lock()
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="filedigest-session")
        # Sessions dropped without close() still release their worker thread
        self._finalizer = weakref.finalize(self, self._executor.shutdown, wait=False)

        self.file_path: str | None = None
        self.enabled: set[Algorithm] = set(algorithms)
        self.hash_format = hash_format
        self.gost_variant = gost_variant
        self.tiger_variant = tiger_variant
        self._results: dict[Algorithm, str] = {}

    @property
    def results(self) -> list[tuple[Algorithm, str]]:
        """Stored results ordered by algorithm."""
        with self._lock:
            return self._ordered_results()

    @property
    def algorithms(self) -> list[Algorithm]:
        return sort_algorithms(self.enabled)

    def select_file(self, path: str) -> None:
        """Choose the file to hash; stored results belong to the old file and are cleared."""
        with self._lock:
            self.file_path = path
            self._results.clear()

    def toggle(self, algorithm: Algorithm, enabled: bool) -> None:
        if enabled:
            self.enabled.add(algorithm)
        else:
            self.enabled.discard(algorithm)

    def set_format(self, hash_format: HashFormat) -> None:
        """Switch display format and re-encode stored results."""
        with self._lock:
            self.hash_format = hash_format
            self._results = {alg: reformat(text, hash_format) for alg, text in self._results.items()}

    def set_gost_variant(self, variant: GostVariant) -> None:
        with self._lock:
            if variant is not self.gost_variant:
                self.gost_variant = variant
                self._results.pop(Algorithm.GOST, None)

    def set_tiger_variant(self, variant: TigerVariant) -> None:
        with self._lock:
            if variant is not self.tiger_variant:
                self.tiger_variant = variant
                self._results.pop(Algorithm.TIGER192, None)

    def start(self) -> Future:
        """
        Run a calculation on the session worker thread.

        The future resolves to the merged, ordered results.

        Raises:
            MissingFileError: If no file has been selected
        """
        if not self.file_path:
            raise MissingFileError()
        return self._executor.submit(
            self._run, self.file_path, self.algorithms, self.gost_variant, self.tiger_variant
        )

    def calculate(self) -> list[tuple[Algorithm, str]]:
        """Run a calculation and wait for it."""
        return self.start().result()

    def _run(
        self,
        file_path: str,
        algorithms: list[Algorithm],
        gost_variant: GostVariant,
        tiger_variant: TigerVariant,
    ) -> list[tuple[Algorithm, str]]:
        try:
            computed = dict(
                self._service.compute_digests(file_path, algorithms, gost_variant, tiger_variant)
            )
        except Exception as e:
            self._logger.error("Hashing %s failed: %s", file_path, e)
            computed = dict.fromkeys(algorithms, f"Error: {e}")

        with self._lock:
            # Drop results computed for a file or variant that changed meanwhile.
            if file_path != self.file_path:
                return self._ordered_results()
            if gost_variant is not self.gost_variant:
                computed.pop(Algorithm.GOST, None)
            if tiger_variant is not self.tiger_variant:
                computed.pop(Algorithm.TIGER192, None)
            for alg, text in computed.items():
                self._results[alg] = reformat(text, self.hash_format)
            return self._ordered_results()

    def _ordered_results(self) -> list[tuple[Algorithm, str]]:
        return [(alg, self._results[alg]) for alg in sorted(self._results)]

    def matches(self, reference: str) -> dict[Algorithm, bool]:
        """Compare a reference digest against every stored result."""
        with self._lock:
            return {alg: hashes_equal(text, reference) for alg, text in self._results.items()}

    def close(self) -> None:
        """Wait for a running calculation and stop the session worker."""
        self._finalizer.detach()
        self._executor.shutdown(wait=True)

    def __enter__(self) -> HashSession:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
