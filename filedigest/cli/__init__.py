"""
Click-based CLI for filedigest.

This module provides the main Click command group and serves as the
entry point for the filedigest CLI.

Usage:
    from filedigest.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

import click

from ..core.bootstrap import bootstrap
from ..core.exceptions import FiledigestException
from .context import FiledigestContext
from .errors import to_click_error

try:
    __version__ = version("filedigest")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="filedigest")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """filedigest - compute many digests of a file in one pass

    \b
    Hashing:
        filedigest hash <file>            Digest with the configured algorithms
        filedigest hash <file> --all      Digest with every algorithm
        filedigest compare <a> <b>        Compare two digests (hex or base64)

    \b
    Information:
        filedigest algorithms             List algorithms and variants
        filedigest config                 Show the effective configuration
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    try:
        ctx.obj = FiledigestContext.create()
    except FiledigestException as e:
        raise to_click_error(e) from e
    bootstrap()


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "FiledigestContext",
    "__version__",
    "cli",
    "register_commands",
]
