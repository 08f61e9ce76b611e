"""Pydantic models for filedigest."""

from .base import FiledigestBaseModel
from .config import (
    ConfigBaseModel,
    FiledigestConfig,
    HashConfig,
    IOConfig,
    LoggingConfig,
)

__all__ = [
    "ConfigBaseModel",
    "FiledigestBaseModel",
    "FiledigestConfig",
    "HashConfig",
    "IOConfig",
    "LoggingConfig",
]
