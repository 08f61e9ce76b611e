"""
Hash algorithm strategies, registry and file sources.

This module implements the Strategy pattern for hash algorithms so every
algorithm is driven through the same create/update/digest calls.
"""

from .algorithms import Algorithm, GostVariant, TigerVariant, VariantSelection
from .registry import HashAlgorithmRegistry
from .sources import IOStrategy, open_source, select_strategy
from .strategies import HashStrategy

__all__ = [
    "Algorithm",
    "GostVariant",
    "HashAlgorithmRegistry",
    "HashStrategy",
    "IOStrategy",
    "TigerVariant",
    "VariantSelection",
    "open_source",
    "select_strategy",
]
