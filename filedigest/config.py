"""Configuration loading for filedigest."""

from pathlib import Path

from .core.settings import find_config_file, load_settings
from .hashing.algorithms import Algorithm

__all__ = [
    "CONFIGURABLE_KEYS",
    "VALID_ALGORITHMS",
    "config_get",
    "find_config_file",
    "load_config",
]

VALID_ALGORITHMS = [alg.display_name for alg in Algorithm]

# Keys read from [hash], [io] and [logging]
CONFIGURABLE_KEYS = {
    "hash.algorithms": {
        "type": list,
        "default": ["MD5", "SHA256", "SHA512"],
        "description": "Algorithms computed when none are given (comma-separated)",
    },
    "hash.format": {
        "type": str,
        "default": "hex",
        "description": "Digest encoding: hex, HEX or base64",
    },
    "hash.gost_variant": {
        "type": str,
        "default": "cryptopro",
        "description": "GOST R 34.11-94 S-box (cryptopro, test)",
    },
    "hash.tiger_variant": {
        "type": str,
        "default": "tiger",
        "description": "Tiger padding (tiger, tiger2)",
    },
    "io.mmap_enabled": {
        "type": bool,
        "default": True,
        "description": "Memory-map files when the platform allows it",
    },
    "io.parallel": {
        "type": bool,
        "default": True,
        "description": "Hash contiguous sources with one thread per algorithm",
    },
    "io.full_buffer_threshold": {
        "type": int,
        "default": 4 * 1024**3,
        "description": "Largest file read fully into memory when mapping is unavailable",
    },
    "io.large_file_threshold": {
        "type": int,
        "default": 100 * 1024**2,
        "description": "Files above this size are streamed in large chunks",
    },
    "io.chunk_size": {
        "type": int,
        "default": 2 * 1024**2,
        "description": "Streaming block size for ordinary files",
    },
    "io.large_chunk_size": {
        "type": int,
        "default": 4 * 1024**2,
        "description": "Streaming block size for large files",
    },
    "io.slice_size": {
        "type": int,
        "default": 1024**2,
        "description": "Bytes fed to a hasher per update in parallel mode",
    },
    "io.max_workers": {
        "type": int,
        "default": None,
        "description": "Thread cap for parallel hashing (default: one per algorithm)",
    },
    "logging.level": {
        "type": str,
        "default": "warning",
        "description": "Log level (debug, info, warning, error)",
    },
    "logging.console": {
        "type": bool,
        "default": False,
        "description": "Output debug logs to stderr",
    },
    "logging.file": {
        "type": bool,
        "default": False,
        "description": "Output debug logs to ~/.filedigest/filedigest.log",
    },
}


def _get_nested(d: dict, key: str, default=None):
    """Get a nested key like 'io.chunk_size'."""
    for part in key.split("."):
        if isinstance(d, dict) and part in d:
            d = d[part]
        else:
            return default
    return d


def load_config(config_path: Path | None = None, start_dir: str | None = None) -> dict:
    """
    Load configuration from file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        Configuration dict with defaults applied
    """
    return load_settings(config_path=config_path, start_dir=start_dir).to_dict()


def config_get(key: str, start_dir: str | None = None):
    """Get a config value."""
    return _get_nested(load_config(start_dir=start_dir), key)
