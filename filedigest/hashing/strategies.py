"""
Hash algorithm strategy implementations.

Each strategy knows how to build, feed and finalize a hasher for one
Algorithm, following the Strategy pattern so the engine can drive every
algorithm through the same calls.
"""

import hashlib
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

import whirlpool
from Crypto.Hash import MD4, RIPEMD160

from .algorithms import Algorithm, VariantSelection
from .checksums import CRC32, Adler32
from .variants import GostAdapter, TigerAdapter


def _as_bytes(data: Any) -> bytes:
    """Copy buffer views into bytes for C extensions that only take bytes."""
    return data if isinstance(data, bytes) else bytes(data)


class HashStrategy(ABC):
    """
    Abstract base class for hash algorithm strategies.

    Implementations must provide:
    - algorithm: The Algorithm this strategy computes
    - create_hasher(): Factory method for hasher instances
    - update(): Method to add data to hasher
    - digest(): Method to get the final digest bytes
    """

    @property
    @abstractmethod
    def algorithm(self) -> Algorithm:
        """Return the algorithm identifier."""
        pass

    @abstractmethod
    def create_hasher(self, variants: VariantSelection) -> Any:
        """Create a new hasher instance."""
        pass

    def update(self, hasher: Any, data: Any) -> None:
        """Update hasher with data. Default implementation works for most hashers."""
        hasher.update(data)

    def digest(self, hasher: Any) -> bytes:
        """Get raw digest bytes. Default implementation works for most hashers."""
        return hasher.digest()

    def hexdigest(self, hasher: Any) -> str:
        """Get lowercase hex digest."""
        return self.digest(hasher).hex()


class HashlibStrategy(HashStrategy):
    """Algorithms provided by hashlib (MD5, SHA-1, SHA-2, SHA-3, BLAKE2)."""

    def __init__(self, algorithm: Algorithm, factory: Callable[[], Any]) -> None:
        self._algorithm = algorithm
        self._factory = factory

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    def create_hasher(self, variants: VariantSelection) -> Any:
        return self._factory()


class MD4Strategy(HashStrategy):
    """MD4 hashing strategy - legacy, via pycryptodome."""

    @property
    def algorithm(self) -> Algorithm:
        return Algorithm.MD4

    def create_hasher(self, variants: VariantSelection) -> Any:
        return MD4.new()

    def update(self, hasher: Any, data: Any) -> None:
        hasher.update(_as_bytes(data))


class RIPEMD160Strategy(HashStrategy):
    """RIPEMD-160 hashing strategy, via pycryptodome."""

    @property
    def algorithm(self) -> Algorithm:
        return Algorithm.RIPEMD160

    def create_hasher(self, variants: VariantSelection) -> Any:
        return RIPEMD160.new()

    def update(self, hasher: Any, data: Any) -> None:
        hasher.update(_as_bytes(data))


class WhirlpoolStrategy(HashStrategy):
    """Whirlpool hashing strategy - C reference implementation bindings."""

    @property
    def algorithm(self) -> Algorithm:
        return Algorithm.WHIRLPOOL

    def create_hasher(self, variants: VariantSelection) -> Any:
        return whirlpool.new(b"")

    def update(self, hasher: Any, data: Any) -> None:
        hasher.update(_as_bytes(data))


class TigerStrategy(HashStrategy):
    """Tiger-192 in the selected padding variant."""

    @property
    def algorithm(self) -> Algorithm:
        return Algorithm.TIGER192

    def create_hasher(self, variants: VariantSelection) -> TigerAdapter:
        return TigerAdapter(variants.tiger)

    def digest(self, hasher: TigerAdapter) -> bytes:
        return hasher.finalize()


class GostStrategy(HashStrategy):
    """GOST R 34.11-94 with the selected S-box."""

    @property
    def algorithm(self) -> Algorithm:
        return Algorithm.GOST

    def create_hasher(self, variants: VariantSelection) -> GostAdapter:
        return GostAdapter(variants.gost)

    def digest(self, hasher: GostAdapter) -> bytes:
        return hasher.finalize()


class CRC32Strategy(HashStrategy):
    """CRC-32 rolling checksum."""

    @property
    def algorithm(self) -> Algorithm:
        return Algorithm.CRC32

    def create_hasher(self, variants: VariantSelection) -> CRC32:
        return CRC32()


class Adler32Strategy(HashStrategy):
    """Adler-32 rolling checksum."""

    @property
    def algorithm(self) -> Algorithm:
        return Algorithm.ADLER32

    def create_hasher(self, variants: VariantSelection) -> Adler32:
        return Adler32()


HASHLIB_FACTORIES: dict[Algorithm, Callable[[], Any]] = {
    Algorithm.MD5: hashlib.md5,
    Algorithm.SHA1: hashlib.sha1,
    Algorithm.SHA256: hashlib.sha256,
    Algorithm.SHA384: hashlib.sha384,
    Algorithm.SHA512: hashlib.sha512,
    Algorithm.SHA3_224: hashlib.sha3_224,
    Algorithm.SHA3_256: hashlib.sha3_256,
    Algorithm.SHA3_384: hashlib.sha3_384,
    Algorithm.SHA3_512: hashlib.sha3_512,
    Algorithm.BLAKE2B: hashlib.blake2b,
    Algorithm.BLAKE2S: hashlib.blake2s,
}
