"""
Click command implementations for the filedigest CLI.

Each module corresponds to one command (e.g., hash.py implements
'filedigest hash'). Commands are registered with the main group by
register_commands() in filedigest.cli.
"""

from .algorithms import algorithms
from .compare import compare
from .config import config
from .hash import hash_file

COMMANDS = [
    algorithms,
    compare,
    config,
    hash_file,
]

__all__ = [
    "COMMANDS",
    "algorithms",
    "compare",
    "config",
    "hash_file",
]
