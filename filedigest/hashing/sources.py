"""
File sources and I/O strategy selection.

A FileSource gives sequential access to a file's bytes. Mapped and buffered
sources are contiguous and also expose a read-only memoryview, which the
parallel dispatcher shares between hashing threads.
"""

from __future__ import annotations

import mmap
import os
from abc import ABC, abstractmethod
from collections.abc import Iterator
from enum import Enum
from typing import TYPE_CHECKING, BinaryIO

from ..core.exceptions import SourceReadError

if TYPE_CHECKING:
    from ..core.interfaces.logger import ILogger
    from ..core.models.config import IOConfig


class IOStrategy(Enum):
    """How a file's bytes are brought into memory."""

    MAPPED = "mapped"
    FULL_BUFFER = "full_buffer"
    CHUNKED = "chunked"


def select_strategy(file_size: int, mapping_available: bool, io_config: IOConfig) -> IOStrategy:
    """
    Pick the I/O strategy for a file.

    A successful mapping always wins. Without one, files up to
    full_buffer_threshold are read whole and larger files are streamed.
    """
    if mapping_available:
        return IOStrategy.MAPPED
    if file_size <= io_config.full_buffer_threshold:
        return IOStrategy.FULL_BUFFER
    return IOStrategy.CHUNKED


def chunk_size_for(file_size: int, io_config: IOConfig) -> int:
    """Streaming block size: large_chunk_size above large_file_threshold."""
    if file_size > io_config.large_file_threshold:
        return io_config.large_chunk_size
    return io_config.chunk_size


class FileSource(ABC):
    """Sequential access to one file's contents."""

    strategy: IOStrategy

    def __init__(self, path: str, size: int, chunk_size: int) -> None:
        self.path = path
        self.size = size
        self.chunk_size = chunk_size

    @property
    def is_contiguous(self) -> bool:
        return False

    def view(self) -> memoryview:
        """Read-only view of the whole file. Contiguous sources only."""
        raise TypeError(f"{type(self).__name__} is not contiguous")

    @abstractmethod
    def chunks(self) -> Iterator[bytes | memoryview]:
        """Yield the file's bytes in order, chunk_size at a time."""

    def close(self) -> None:
        pass

    def __enter__(self) -> FileSource:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r}, size={self.size})"


class _ContiguousSource(FileSource):
    """Source backed by one read-only buffer."""

    def __init__(self, path: str, buffer, chunk_size: int) -> None:
        self._view = memoryview(buffer).toreadonly()
        super().__init__(path, len(self._view), chunk_size)

    @property
    def is_contiguous(self) -> bool:
        return True

    def view(self) -> memoryview:
        return self._view

    def chunks(self) -> Iterator[memoryview]:
        for offset in range(0, self.size, self.chunk_size):
            # Slices are released on resume so the buffer can be closed.
            with self._view[offset : offset + self.chunk_size] as piece:
                yield piece

    def close(self) -> None:
        self._view.release()


class MappedSource(_ContiguousSource):
    """Read-only memory mapping of the file."""

    strategy = IOStrategy.MAPPED

    def __init__(self, path: str, mapping: mmap.mmap, stream: BinaryIO, chunk_size: int) -> None:
        self._mapping = mapping
        self._stream = stream
        super().__init__(path, mapping, chunk_size)

    def close(self) -> None:
        super().close()
        self._mapping.close()
        self._stream.close()


class BufferSource(_ContiguousSource):
    """Whole file contents held in memory."""

    strategy = IOStrategy.FULL_BUFFER

    def __init__(self, path: str, data: bytes, chunk_size: int) -> None:
        super().__init__(path, data, chunk_size)


class ChunkedSource(FileSource):
    """Binary stream read in fixed-size blocks."""

    strategy = IOStrategy.CHUNKED

    def __init__(self, path: str, stream: BinaryIO, size: int, chunk_size: int) -> None:
        super().__init__(path, size, chunk_size)
        self._stream = stream

    def chunks(self) -> Iterator[bytes]:
        yield from iter(lambda: self._stream.read(self.chunk_size), b"")

    def close(self) -> None:
        self._stream.close()


def _get_logger() -> ILogger:
    from ..core.di import resolve_or_default
    from ..core.interfaces.logger import ILogger
    from ..services.logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)


def _try_map(stream: BinaryIO, path: str, logger: ILogger) -> mmap.mmap | None:
    try:
        return mmap.mmap(stream.fileno(), 0, access=mmap.ACCESS_READ)
    except (ValueError, OSError) as e:
        # Empty files and special files cannot be mapped.
        logger.debug("Memory mapping unavailable for %s: %s", path, e)
        return None


def open_source(path: str, io_config: IOConfig, logger: ILogger | None = None) -> FileSource:
    """
    Open a file with the best available I/O strategy.

    Raises:
        OSError: If the file cannot be stat'ed or opened
        SourceReadError: If reading the full buffer fails
    """
    logger = logger or _get_logger()
    path = os.fspath(path)

    file_size = os.stat(path).st_size
    stream = open(path, "rb")
    try:
        mapping = _try_map(stream, path, logger) if io_config.mmap_enabled else None
        strategy = select_strategy(file_size, mapping is not None, io_config)
        chunk_size = chunk_size_for(file_size, io_config)
        logger.debug("Opening %s (%d bytes) with %s strategy", path, file_size, strategy.value)

        if strategy is IOStrategy.MAPPED:
            return MappedSource(path, mapping, stream, chunk_size)

        if strategy is IOStrategy.FULL_BUFFER:
            try:
                data = stream.read()
            except OSError as e:
                raise SourceReadError(str(e), file_path=path, cause=e) from e
            finally:
                stream.close()
            return BufferSource(path, data, chunk_size)

        return ChunkedSource(path, stream, file_size, chunk_size)
    except BaseException:
        stream.close()
        raise
