"""
Configuration models.

Provides Pydantic models for filedigest configuration with validation.
"""

from __future__ import annotations

import json
from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import NoDecode

from ...hashing.algorithms import Algorithm
from .base import FiledigestBaseModel

KiB = 1024
MiB = 1024 * KiB
GiB = 1024 * MiB

# Type aliases
HashFormatName = Literal["hex", "HEX", "base64"]
GostVariantName = Literal["cryptopro", "test"]
TigerVariantName = Literal["tiger", "tiger2"]
LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(FiledigestBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class HashConfig(ConfigBaseModel):
    """Default algorithm selection and output encoding."""

    # NoDecode: environment values reach parse_algorithm_list as raw text
    algorithms: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["MD5", "SHA256", "SHA512"]
    )
    format: HashFormatName = "hex"
    gost_variant: GostVariantName = "cryptopro"
    tiger_variant: TigerVariantName = "tiger"

    @field_validator("algorithms", mode="before")
    @classmethod
    def parse_algorithm_list(cls, v: Any) -> list[str]:
        """Accept a list, a comma-separated string or a JSON array string."""
        if isinstance(v, str):
            if v.lstrip().startswith("["):
                return json.loads(v)
            return [x.strip() for x in v.split(",") if x.strip()]
        return v if v else []

    @field_validator("algorithms")
    @classmethod
    def canonical_names(cls, v: list[str]) -> list[str]:
        """Validate algorithm names and store their display form, in display order."""
        algorithms = {Algorithm.from_name(name) for name in v}
        return [alg.display_name for alg in sorted(algorithms)]


class IOConfig(ConfigBaseModel):
    """File reading strategy thresholds and block sizes."""

    mmap_enabled: bool = True
    parallel: bool = True
    full_buffer_threshold: int = Field(default=4 * GiB, ge=0)
    large_file_threshold: int = Field(default=100 * MiB, ge=0)
    chunk_size: int = Field(default=2 * MiB, gt=0)
    large_chunk_size: int = Field(default=4 * MiB, gt=0)
    slice_size: int = Field(default=1 * MiB, gt=0)
    max_workers: int | None = Field(default=None, ge=1)


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False


class FiledigestConfig(ConfigBaseModel):
    """Complete filedigest configuration.

    This model represents the full configuration with all sections.
    It can be loaded from TOML files or constructed programmatically.
    """

    hash: HashConfig = Field(default_factory=HashConfig)
    io: IOConfig = Field(default_factory=IOConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'io.chunk_size')
            default: Default value if key not found
        """
        obj: Any = self
        for part in key.split("."):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            elif isinstance(obj, dict) and part in obj:
                obj = obj[part]
            else:
                return default
        return obj
