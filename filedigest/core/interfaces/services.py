"""
Service protocol definitions.

These protocols define the contracts the CLI and HashingSession rely on,
so tests can substitute their own implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ...hashing.algorithms import Algorithm, GostVariant, TigerVariant


@runtime_checkable
class HashingService(Protocol):
    """Service for computing many digests of one file in a single pass."""

    def compute_digests(
        self,
        file_path: str,
        requested_algorithms: Iterable[Algorithm],
        gost_variant: GostVariant = ...,
        tiger_variant: TigerVariant = ...,
    ) -> list[tuple[Algorithm, str]]:
        """Digest the file with every requested algorithm, ordered by algorithm."""
        ...
