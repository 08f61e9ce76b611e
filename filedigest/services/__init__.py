"""Hashing services, the parallel dispatcher, sessions and logging."""

from .dispatch import ParallelDispatcher
from .hashing import DefaultHashingService, compute_digests
from .logging import FiledigestLogger, NullLogger
from .session import HashSession

__all__ = [
    "DefaultHashingService",
    "FiledigestLogger",
    "HashSession",
    "NullLogger",
    "ParallelDispatcher",
    "compute_digests",
]
