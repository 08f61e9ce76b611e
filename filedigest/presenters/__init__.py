"""Output formatting for the filedigest CLI."""

from .formatting import HashFormat, format_hash, parse_hash, reformat

__all__ = [
    "HashFormat",
    "format_hash",
    "parse_hash",
    "reformat",
]
