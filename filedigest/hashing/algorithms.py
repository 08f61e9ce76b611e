"""
Supported digest algorithms and variant families.

The algorithm set is closed: every member has a strategy registered in
HashAlgorithmRegistry. Declaration order is the display order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..core.exceptions import UnknownAlgorithmError


class Algorithm(Enum):
    """Digest algorithm identifier. Values are the canonical display names."""

    MD4 = "MD4"
    MD5 = "MD5"
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"
    SHA3_224 = "SHA3-224"
    SHA3_256 = "SHA3-256"
    SHA3_384 = "SHA3-384"
    SHA3_512 = "SHA3-512"
    BLAKE2B = "BLAKE2B"
    BLAKE2S = "BLAKE2S"
    RIPEMD160 = "RIPEMD160"
    TIGER192 = "TIGER192"
    WHIRLPOOL = "WHIRLPOOL"
    GOST = "GOST"
    CRC32 = "CRC32"
    ADLER32 = "ADLER32"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def index(self) -> int:
        """Position in declaration order."""
        return _ORDER[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Algorithm):
            return NotImplemented
        return self.index < other.index

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Algorithm):
            return NotImplemented
        return self.index <= other.index

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Algorithm):
            return NotImplemented
        return self.index > other.index

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Algorithm):
            return NotImplemented
        return self.index >= other.index

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> Algorithm:
        """
        Parse an algorithm from user text.

        Matching ignores case, dashes and underscores, so "sha3-256",
        "SHA3_256" and "Sha3256" all resolve to SHA3_256.

        Raises:
            UnknownAlgorithmError: If the name matches no algorithm
        """
        key = _normalize(name)
        try:
            return _LOOKUP[key]
        except KeyError:
            raise UnknownAlgorithmError(
                f"Unknown hash algorithm: {name}", algorithm=name
            ) from None


def _normalize(name: str) -> str:
    return name.strip().upper().replace("-", "").replace("_", "")


_ORDER: dict[Algorithm, int] = {alg: i for i, alg in enumerate(Algorithm)}

_LOOKUP: dict[str, Algorithm] = {_normalize(alg.value): alg for alg in Algorithm}
_LOOKUP.update({_normalize(alg.name): alg for alg in Algorithm})
_LOOKUP["TIGER"] = Algorithm.TIGER192


class GostVariant(Enum):
    """S-box selection for GOST R 34.11-94."""

    CRYPTOPRO = "cryptopro"
    TEST = "test"

    @property
    def label(self) -> str:
        return {
            GostVariant.CRYPTOPRO: "GOST R 34.11-94 (CryptoPro S-box)",
            GostVariant.TEST: "GOST R 34.11-94 (Test S-box)",
        }[self]


class TigerVariant(Enum):
    """Padding selection for Tiger."""

    TIGER = "tiger"
    TIGER2 = "tiger2"

    @property
    def label(self) -> str:
        return {
            TigerVariant.TIGER: "Tiger (original padding)",
            TigerVariant.TIGER2: "Tiger2 (alternate padding)",
        }[self]


@dataclass(frozen=True)
class VariantSelection:
    """Variant choices for one hashing invocation."""

    gost: GostVariant = GostVariant.CRYPTOPRO
    tiger: TigerVariant = TigerVariant.TIGER


def all_algorithms() -> list[Algorithm]:
    """All algorithms in declaration order."""
    return list(Algorithm)


def algorithm_name(algorithm: Algorithm) -> str:
    """Canonical uppercase display name, e.g. 'SHA3-256' or 'TIGER192'."""
    return algorithm.display_name


def sort_algorithms(algorithms) -> list[Algorithm]:
    """Deduplicate and order algorithms by declaration order."""
    return sorted(set(algorithms))
