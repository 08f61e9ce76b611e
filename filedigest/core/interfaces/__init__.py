"""Abstract interfaces for filedigest services."""

from .logger import ILogger
from .services import HashingService

__all__ = [
    "HashingService",
    "ILogger",
]
