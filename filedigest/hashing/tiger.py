"""
Tiger and Tiger2 message digests (Anderson & Biham, 1996).

Pure-Python implementation with a hashlib-style interface. The S-boxes are
derived at first use with the generator published alongside the algorithm,
which runs the compression function over its own evolving tables.

digest() returns the three chaining words serialized little-endian (the
NESSIE byte order). The published word-wise vectors reverse each 8-byte
word; TigerAdapter applies that conversion.
"""

from __future__ import annotations

import struct
from functools import lru_cache

_MASK = 0xFFFFFFFFFFFFFFFF
_INITIAL_STATE = (0x0123456789ABCDEF, 0xFEDCBA9876543210, 0xF096A5B4C3B2E187)
_SBOX_SEED = b"Tiger - A Fast New Hash Function, by Ross Anderson and Eli Biham"
_SBOX_PASSES = 5

BLOCK_SIZE = 64
DIGEST_SIZE = 24


def _pass(a: int, b: int, c: int, x: list[int], mul: int, t: list[int]) -> tuple[int, int, int]:
    for word in x:
        c ^= word
        a = (
            a
            - (t[c & 0xFF] ^ t[256 + ((c >> 16) & 0xFF)] ^ t[512 + ((c >> 32) & 0xFF)] ^ t[768 + ((c >> 48) & 0xFF)])
        ) & _MASK
        b = (
            (
                b
                + (t[768 + ((c >> 8) & 0xFF)] ^ t[512 + ((c >> 24) & 0xFF)] ^ t[256 + ((c >> 40) & 0xFF)] ^ t[c >> 56])
            )
            * mul
        ) & _MASK
        a, b, c = b, c, a
    # eight rotations leave the roles shifted twice
    return b, c, a


def _key_schedule(x: list[int]) -> None:
    x[0] = (x[0] - (x[7] ^ 0xA5A5A5A5A5A5A5A5)) & _MASK
    x[1] ^= x[0]
    x[2] = (x[2] + x[1]) & _MASK
    x[3] = (x[3] - (x[2] ^ ((~x[1] << 19) & _MASK))) & _MASK
    x[4] ^= x[3]
    x[5] = (x[5] + x[4]) & _MASK
    x[6] = (x[6] - (x[5] ^ ((~x[4] & _MASK) >> 23))) & _MASK
    x[7] ^= x[6]
    x[0] = (x[0] + x[7]) & _MASK
    x[1] = (x[1] - (x[0] ^ ((~x[7] << 19) & _MASK))) & _MASK
    x[2] ^= x[1]
    x[3] = (x[3] + x[2]) & _MASK
    x[4] = (x[4] - (x[3] ^ ((~x[2] & _MASK) >> 23))) & _MASK
    x[5] ^= x[4]
    x[6] = (x[6] + x[5]) & _MASK
    x[7] = (x[7] - (x[6] ^ 0x0123456789ABCDEF)) & _MASK


def _compress(block: tuple[int, ...], state: tuple[int, int, int], t: list[int]) -> tuple[int, int, int]:
    x = list(block)
    a, b, c = state
    a, b, c = _pass(a, b, c, x, 5, t)
    _key_schedule(x)
    c, a, b = _pass(c, a, b, x, 7, t)
    _key_schedule(x)
    b, c, a = _pass(b, c, a, x, 9, t)
    return a ^ state[0], (b - state[1]) & _MASK, (c + state[2]) & _MASK


@lru_cache(maxsize=1)
def _sboxes() -> tuple[int, ...]:
    """Generate the four 256-entry S-boxes as one flat 1024-entry table."""
    table = [(i & 0xFF) * 0x0101010101010101 for i in range(1024)]
    seed = struct.unpack("<8Q", _SBOX_SEED)
    state = _INITIAL_STATE
    abc = 2
    for _ in range(_SBOX_PASSES):
        for i in range(256):
            for sb in range(0, 1024, 256):
                abc += 1
                if abc == 3:
                    abc = 0
                    state = _compress(seed, state, table)
                word = state[abc]
                for col in range(8):
                    shift = 8 * col
                    k = sb + i
                    j = sb + ((word >> shift) & 0xFF)
                    if j == k:
                        continue
                    m = 0xFF << shift
                    keep = _MASK ^ m
                    byte_k = table[k] & m
                    table[k] = (table[k] & keep) | (table[j] & m)
                    table[j] = (table[j] & keep) | byte_k
    return tuple(table)


class Tiger:
    """Tiger with the original 0x01 padding byte."""

    name = "tiger"
    block_size = BLOCK_SIZE
    digest_size = DIGEST_SIZE
    padding = 0x01

    def __init__(self, data: bytes = b"") -> None:
        self._table = _sboxes()
        self._state = _INITIAL_STATE
        self._buffer = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data) -> None:
        data = bytes(data)
        self._length += len(data)
        buf = self._buffer + data
        end = len(buf) - len(buf) % BLOCK_SIZE
        state = self._state
        for offset in range(0, end, BLOCK_SIZE):
            state = _compress(struct.unpack_from("<8Q", buf, offset), state, self._table)
        self._state = state
        self._buffer = buf[end:]

    def digest(self) -> bytes:
        state = self._state
        tail = self._buffer + bytes([self.padding])
        if len(tail) > 56:
            tail = tail.ljust(BLOCK_SIZE, b"\x00")
            state = _compress(struct.unpack("<8Q", tail), state, self._table)
            tail = b""
        tail = tail.ljust(56, b"\x00") + struct.pack("<Q", (self._length * 8) & _MASK)
        state = _compress(struct.unpack("<8Q", tail), state, self._table)
        return struct.pack("<3Q", *state)

    def hexdigest(self) -> str:
        return self.digest().hex()


class Tiger2(Tiger):
    """Tiger with MD-style 0x80 padding."""

    name = "tiger2"
    padding = 0x80
