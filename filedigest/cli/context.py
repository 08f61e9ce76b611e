"""
Click context extension for filedigest CLI.

Provides FiledigestContext dataclass that holds the loaded settings
passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.settings import FiledigestSettings


@dataclass
class FiledigestContext:
    """Extended context passed through Click command chain.

    Attributes:
        cwd: Current working directory
        is_interactive: Whether stdout is a TTY
        settings: Settings merged from TOML, environment and defaults
    """

    cwd: Path
    is_interactive: bool
    settings: FiledigestSettings

    @classmethod
    def create(cls, cwd: Path | None = None) -> FiledigestContext:
        """Create a FiledigestContext for the current environment.

        Raises:
            ConfigValidationError: If the configuration holds invalid values
        """
        from ..core.settings import load_settings

        if cwd is None:
            cwd = Path.cwd()

        return cls(
            cwd=cwd,
            is_interactive=sys.stdout.isatty(),
            settings=load_settings(start_dir=str(cwd)),
        )

    @property
    def config_file(self) -> str | None:
        return self.settings.config_file
