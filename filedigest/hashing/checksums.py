"""
Rolling checksums with a hashlib-style interface.

zlib keeps the running value; update() folds each block into it, which
gives the same result as feeding the bytes one at a time.
"""

from __future__ import annotations

import zlib


class _RollingChecksum:
    name = ""
    digest_size = 4
    _initial = 0

    def __init__(self, data: bytes = b"") -> None:
        self._value = self._initial
        if data:
            self.update(data)

    def _fold(self, data, value: int) -> int:
        raise NotImplementedError

    def update(self, data) -> None:
        self._value = self._fold(data, self._value)

    @property
    def value(self) -> int:
        return self._value

    def digest(self) -> bytes:
        return self._value.to_bytes(4, "big")

    def hexdigest(self) -> str:
        return f"{self._value:08x}"


class CRC32(_RollingChecksum):
    """CRC-32 (IEEE 802.3), as used by zip and PNG."""

    name = "crc32"

    def _fold(self, data, value: int) -> int:
        return zlib.crc32(data, value)


class Adler32(_RollingChecksum):
    """Adler-32 (RFC 1950)."""

    name = "adler32"
    _initial = 1

    def _fold(self, data, value: int) -> int:
        return zlib.adler32(data, value)
