"""
Canonical digest comparison.

Two digests are equal when they decode to the same bytes, whatever text
encoding each side uses. Error results never compare equal.
"""

from __future__ import annotations

import base64
import binascii

ERROR_SENTINEL = "Error: Not implemented"
ERROR_PREFIX = "Error"


def is_error_result(text: str) -> bool:
    """True for engine error strings such as 'Error reading file: ...'."""
    return text.strip().startswith(ERROR_PREFIX)


def decode_hash(text: str | None) -> bytes | None:
    """
    Decode hex or standard base64 digest text to bytes.

    Surrounding whitespace and embedded spaces are ignored. Hex is tried
    first; base64 decoding is strict. Returns None for empty input, error
    results and text that decodes as neither.
    """
    if text is None:
        return None
    cleaned = text.strip().replace(" ", "")
    if not cleaned or is_error_result(cleaned):
        return None
    try:
        return bytes.fromhex(cleaned)
    except ValueError:
        pass
    try:
        return base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError):
        return None


def hashes_equal(a: str | None, b: str | None) -> bool:
    """Compare two digests by their decoded bytes."""
    left = decode_hash(a)
    if left is None:
        return False
    right = decode_hash(b)
    if right is None:
        return False
    return left == right
