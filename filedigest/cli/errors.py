"""Mapping of filedigest exceptions onto Click errors."""

from __future__ import annotations

import click

from ..core.exceptions import FiledigestException


def to_click_error(error: FiledigestException) -> click.ClickException:
    """Wrap an exception so Click prints it and exits with its exit code."""
    click_error = click.ClickException(str(error))
    click_error.exit_code = error.exit_code
    return click_error
