"""
Adapters for the two algorithm families that come in variants.

Each adapter hides which concrete variant it wraps behind update() and
finalize(). An adapter is bound to one variant for its whole life; a
different variant needs a new adapter.
"""

from __future__ import annotations

from .algorithms import GostVariant, TigerVariant
from .gost94 import CRYPTOPRO_SBOX, TEST_SBOX, Gost341194
from .tiger import Tiger, Tiger2


def reverse_words8(raw: bytes) -> bytes:
    """Reverse the byte order inside every 8-byte word."""
    return b"".join(raw[i : i + 8][::-1] for i in range(0, len(raw), 8))


class _VariantAdapter:
    def __init__(self, hasher) -> None:
        self._hasher = hasher
        self._finalized = False

    def update(self, data) -> None:
        if self._finalized:
            raise RuntimeError(f"{type(self).__name__} already finalized")
        self._hasher.update(data)

    def _raw_digest(self) -> bytes:
        if self._finalized:
            raise RuntimeError(f"{type(self).__name__} already finalized")
        self._finalized = True
        return self._hasher.digest()


class TigerAdapter(_VariantAdapter):
    """
    Tiger or Tiger2 behind one interface.

    The core emits its chaining words little-endian; finalize() flips each
    word so the hex form matches the published Tiger/Tiger2 vectors, e.g.
    Tiger("") = 24f0130c63ac9332 16166e76b1bb925f f373de2d49584e7a.
    """

    def __init__(self, variant: TigerVariant = TigerVariant.TIGER) -> None:
        self.variant = variant
        hasher = Tiger2() if variant is TigerVariant.TIGER2 else Tiger()
        super().__init__(hasher)

    def finalize(self) -> bytes:
        return reverse_words8(self._raw_digest())


class GostAdapter(_VariantAdapter):
    """GOST R 34.11-94 with the CryptoPro or Test S-box."""

    def __init__(self, variant: GostVariant = GostVariant.CRYPTOPRO) -> None:
        self.variant = variant
        sbox = TEST_SBOX if variant is GostVariant.TEST else CRYPTOPRO_SBOX
        super().__init__(Gost341194(sbox=sbox))

    def finalize(self) -> bytes:
        return self._raw_digest()
