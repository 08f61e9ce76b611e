"""
filedigest - compute many digests of one file in a single pass.

Example:
    from filedigest import Algorithm, compute_digests

    for algorithm, digest in compute_digests("image.iso", [Algorithm.SHA256, Algorithm.CRC32]):
        print(algorithm, digest)
"""

from .hashing.algorithms import (
    Algorithm,
    GostVariant,
    TigerVariant,
    VariantSelection,
    algorithm_name,
    all_algorithms,
)
from .hashing.compare import ERROR_SENTINEL, decode_hash, hashes_equal
from .presenters.formatting import HashFormat, format_hash, parse_hash, reformat
from .services.hashing import DefaultHashingService, compute_digests
from .services.session import HashSession

__all__ = [
    "ERROR_SENTINEL",
    "Algorithm",
    "DefaultHashingService",
    "GostVariant",
    "HashFormat",
    "HashSession",
    "TigerVariant",
    "VariantSelection",
    "algorithm_name",
    "all_algorithms",
    "compute_digests",
    "decode_hash",
    "format_hash",
    "hashes_equal",
    "parse_hash",
    "reformat",
]
