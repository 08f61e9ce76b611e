"""
Digest text encodings for display.

Results are produced as lowercase hex; HashFormat re-encodes them for
display. Error strings pass through unchanged.
"""

from __future__ import annotations

import base64
from enum import Enum

from ..core.exceptions import HashDecodeError
from ..hashing.compare import decode_hash, is_error_result


class HashFormat(Enum):
    """Text encoding for digest bytes."""

    HEX_LOWER = "hex"
    HEX_UPPER = "HEX"
    BASE64 = "base64"

    @property
    def label(self) -> str:
        return {
            HashFormat.HEX_LOWER: "Hexadecimal (lowercase)",
            HashFormat.HEX_UPPER: "Hexadecimal (uppercase)",
            HashFormat.BASE64: "Base64",
        }[self]


def format_hash(digest: bytes, fmt: HashFormat = HashFormat.HEX_LOWER) -> str:
    """Encode digest bytes.

    Examples:
        >>> format_hash(bytes.fromhex("deadbeef"))
        'deadbeef'
        >>> format_hash(bytes.fromhex("deadbeef"), HashFormat.HEX_UPPER)
        'DEADBEEF'
        >>> format_hash(bytes.fromhex("deadbeef"), HashFormat.BASE64)
        '3q2+7w=='
    """
    if fmt is HashFormat.BASE64:
        return base64.b64encode(digest).decode("ascii")
    if fmt is HashFormat.HEX_UPPER:
        return digest.hex().upper()
    return digest.hex()


def parse_hash(text: str) -> bytes:
    """Decode hex or base64 digest text.

    Raises:
        HashDecodeError: If text is empty, an error result, or not decodable
    """
    digest = decode_hash(text)
    if digest is None:
        raise HashDecodeError(f"Not a hex or base64 digest: {text!r}")
    return digest


def reformat(result: str, fmt: HashFormat) -> str:
    """Re-encode a result string in another format, leaving error strings as they are."""
    if is_error_result(result):
        return result
    return format_hash(parse_hash(result), fmt)
