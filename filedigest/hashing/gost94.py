"""
GOST R 34.11-94 message digest.

Pure-Python implementation with a hashlib-style interface. 256-bit values
are held as Python ints in little-endian byte order, which is also the order
digest() returns.
"""

from __future__ import annotations

import struct
from functools import lru_cache

_M32 = 0xFFFFFFFF
_M64 = 0xFFFFFFFFFFFFFFFF
_M256 = (1 << 256) - 1

BLOCK_SIZE = 32
DIGEST_SIZE = 32

# Rows are K1..K8: row n substitutes the n-th nibble counted from the least
# significant end.
TEST_SBOX = (
    (4, 10, 9, 2, 13, 8, 0, 14, 6, 11, 1, 12, 7, 15, 5, 3),
    (14, 11, 4, 12, 6, 13, 15, 10, 2, 3, 8, 1, 0, 7, 5, 9),
    (5, 8, 1, 13, 10, 3, 4, 2, 14, 15, 12, 7, 6, 0, 9, 11),
    (7, 13, 10, 1, 0, 8, 9, 15, 14, 4, 6, 12, 11, 2, 5, 3),
    (6, 12, 7, 1, 5, 15, 13, 8, 4, 10, 9, 14, 0, 3, 11, 2),
    (4, 11, 10, 0, 7, 2, 1, 13, 3, 6, 8, 5, 9, 12, 15, 14),
    (13, 11, 4, 1, 3, 15, 5, 9, 0, 10, 14, 7, 6, 8, 2, 12),
    (1, 15, 13, 0, 5, 7, 10, 4, 9, 2, 3, 14, 6, 11, 8, 12),
)

CRYPTOPRO_SBOX = (
    (10, 4, 5, 6, 8, 1, 3, 7, 13, 12, 14, 0, 9, 2, 11, 15),
    (5, 15, 4, 0, 2, 13, 11, 9, 1, 7, 6, 3, 12, 14, 10, 8),
    (7, 15, 12, 14, 9, 4, 1, 0, 3, 11, 5, 2, 6, 10, 8, 13),
    (4, 10, 7, 12, 0, 15, 2, 8, 14, 1, 6, 5, 13, 11, 9, 3),
    (7, 6, 4, 11, 9, 12, 2, 10, 1, 8, 0, 14, 15, 13, 3, 5),
    (7, 6, 2, 4, 13, 9, 15, 0, 10, 1, 5, 11, 8, 14, 12, 3),
    (13, 14, 4, 1, 7, 0, 5, 10, 3, 12, 8, 15, 6, 2, 9, 11),
    (1, 3, 10, 9, 5, 11, 4, 15, 8, 6, 7, 14, 13, 0, 2, 12),
)

# C3 constant of the key generation; C2 and C4 are zero.
_C3 = int.from_bytes(
    bytes.fromhex("00ff00ff00ff00ffff00ff00ff00ff0000ffff00ff0000ffff000000ffff00ff"),
    "little",
)

_KEY_ORDER = (0, 1, 2, 3, 4, 5, 6, 7) * 3 + (7, 6, 5, 4, 3, 2, 1, 0)


@lru_cache(maxsize=4)
def _round_tables(sbox: tuple[tuple[int, ...], ...]) -> tuple[tuple[int, ...], ...]:
    """Byte-indexed tables combining two S-box rows with the 11-bit rotation."""
    tables = []
    for pos in range(4):
        low, high = sbox[2 * pos], sbox[2 * pos + 1]
        table = []
        for byte in range(256):
            v = (low[byte & 0xF] | (high[byte >> 4] << 4)) << (8 * pos)
            table.append(((v << 11) | (v >> 21)) & _M32)
        tables.append(tuple(table))
    return tuple(tables)


def _transform_a(y: int) -> int:
    y1 = y & _M64
    y2 = (y >> 64) & _M64
    return (y >> 64) | ((y1 ^ y2) << 192)


def _transform_p(y: int) -> int:
    w = y.to_bytes(32, "little")
    return int.from_bytes(bytes(w[8 * t + j] for j in range(8) for t in range(4)), "little")


def _psi(y: int) -> int:
    top = (y ^ (y >> 16) ^ (y >> 32) ^ (y >> 48) ^ (y >> 192) ^ (y >> 240)) & 0xFFFF
    return (y >> 16) | (top << 240)


class Gost341194:
    """GOST R 34.11-94 with a selectable S-box (CryptoPro by default)."""

    name = "gost94"
    block_size = BLOCK_SIZE
    digest_size = DIGEST_SIZE

    def __init__(self, data: bytes = b"", sbox: tuple[tuple[int, ...], ...] = CRYPTOPRO_SBOX) -> None:
        self._tables = _round_tables(sbox)
        self._hash = 0
        self._sum = 0
        self._length = 0
        self._buffer = b""
        if data:
            self.update(data)

    def _f(self, x: int) -> int:
        t0, t1, t2, t3 = self._tables
        return t0[x & 0xFF] | t1[(x >> 8) & 0xFF] | t2[(x >> 16) & 0xFF] | t3[x >> 24]

    def _encrypt(self, key: int, block: int) -> int:
        k = struct.unpack("<8I", key.to_bytes(32, "little"))
        f = self._f
        r = block & _M32
        l = block >> 32
        for i in range(0, 32, 2):
            l ^= f((r + k[_KEY_ORDER[i]]) & _M32)
            r ^= f((l + k[_KEY_ORDER[i + 1]]) & _M32)
        return l | (r << 32)

    def _step(self, h: int, m: int) -> int:
        u, v = h, m
        s = 0
        for i in range(4):
            if i:
                u = _transform_a(u)
                if i == 2:
                    u ^= _C3
                v = _transform_a(_transform_a(v))
            key = _transform_p(u ^ v)
            s |= self._encrypt(key, (h >> (64 * i)) & _M64) << (64 * i)
        for _ in range(12):
            s = _psi(s)
        s = _psi(s ^ m) ^ h
        for _ in range(61):
            s = _psi(s)
        return s

    def update(self, data) -> None:
        data = bytes(data)
        self._length += len(data)
        buf = self._buffer + data
        end = len(buf) - len(buf) % BLOCK_SIZE
        h, total = self._hash, self._sum
        for offset in range(0, end, BLOCK_SIZE):
            m = int.from_bytes(buf[offset : offset + BLOCK_SIZE], "little")
            h = self._step(h, m)
            total = (total + m) & _M256
        self._hash, self._sum = h, total
        self._buffer = buf[end:]

    def digest(self) -> bytes:
        h, total = self._hash, self._sum
        if self._buffer:
            m = int.from_bytes(self._buffer.ljust(BLOCK_SIZE, b"\x00"), "little")
            h = self._step(h, m)
            total = (total + m) & _M256
        h = self._step(h, (self._length * 8) & _M256)
        h = self._step(h, total)
        return h.to_bytes(32, "little")

    def hexdigest(self) -> str:
        return self.digest().hex()
