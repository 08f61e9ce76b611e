"""
Hash algorithm registry.

Maps every Algorithm to the strategy that computes it. Strategies can be
replaced at runtime, which tests use to inject failing hashers.
"""

from typing import Any

from ..core.exceptions import UnknownAlgorithmError
from .algorithms import Algorithm, VariantSelection
from .strategies import (
    HASHLIB_FACTORIES,
    Adler32Strategy,
    CRC32Strategy,
    GostStrategy,
    HashlibStrategy,
    HashStrategy,
    MD4Strategy,
    RIPEMD160Strategy,
    TigerStrategy,
    WhirlpoolStrategy,
)


class HashAlgorithmRegistry:
    """
    Registry for hash algorithm strategies.

    Example:
        registry = HashAlgorithmRegistry()

        hasher = registry.create_hasher(Algorithm.SHA256)

        # Replace an algorithm's implementation
        registry.register(MyCustomStrategy())
    """

    def __init__(self, register_defaults: bool = True):
        """
        Initialize the registry.

        Args:
            register_defaults: If True, register built-in algorithms
        """
        self._strategies: dict[Algorithm, HashStrategy] = {}
        if register_defaults:
            self._register_defaults()

    def _register_defaults(self) -> None:
        """Register built-in hash algorithms."""
        self.register(MD4Strategy())
        for algorithm, factory in HASHLIB_FACTORIES.items():
            self.register(HashlibStrategy(algorithm, factory))
        self.register(RIPEMD160Strategy())
        self.register(TigerStrategy())
        self.register(WhirlpoolStrategy())
        self.register(GostStrategy())
        self.register(CRC32Strategy())
        self.register(Adler32Strategy())

    def register(self, strategy: HashStrategy) -> None:
        """
        Register a hash strategy, replacing any existing one for its algorithm.

        Args:
            strategy: HashStrategy implementation
        """
        self._strategies[strategy.algorithm] = strategy

    def get(self, algorithm: Algorithm) -> HashStrategy | None:
        """
        Get strategy by algorithm.

        Returns:
            HashStrategy or None if not registered
        """
        return self._strategies.get(algorithm)

    def require(self, algorithm: Algorithm) -> HashStrategy:
        """
        Get strategy by algorithm, raising when it is missing.

        Raises:
            UnknownAlgorithmError: If algorithm not registered
        """
        strategy = self.get(algorithm)
        if strategy is None:
            raise UnknownAlgorithmError(
                f"Unknown hash algorithm: {algorithm}", algorithm=str(algorithm)
            )
        return strategy

    def create_hasher(self, algorithm: Algorithm, variants: VariantSelection | None = None) -> Any:
        """
        Create a hasher for the given algorithm.

        Raises:
            UnknownAlgorithmError: If algorithm not registered
        """
        return self.require(algorithm).create_hasher(variants or VariantSelection())

    def compute_hash(
        self, algorithm: Algorithm, data: bytes, variants: VariantSelection | None = None
    ) -> str:
        """
        Compute hash of in-memory data using the specified algorithm.

        Returns:
            Lowercase hex digest
        """
        strategy = self.require(algorithm)
        hasher = strategy.create_hasher(variants or VariantSelection())
        strategy.update(hasher, data)
        return strategy.hexdigest(hasher)

    @property
    def available_algorithms(self) -> list[Algorithm]:
        """Registered algorithms in declaration order."""
        return sorted(self._strategies)

    def __contains__(self, algorithm: Algorithm) -> bool:
        """Check if algorithm is registered."""
        return algorithm in self._strategies
