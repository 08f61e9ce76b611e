"""
Native Click implementation of the config command.

Usage: filedigest config [list|get] [key]
"""

import click

from ...config import CONFIGURABLE_KEYS
from ..context import FiledigestContext


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show the effective configuration.

    Config is read from .filedigest/config.toml, pyproject.toml
    [tool.filedigest] and FILEDIGEST_<SECTION>__<KEY> variables.

    \b
    Examples:

        filedigest config                 # Show all values

        filedigest config list            # Describe all options

        filedigest config get io.chunk_size
    """
    if ctx.invoked_subcommand is not None:
        return

    obj: FiledigestContext = ctx.obj
    values = obj.settings.to_config()
    click.echo(f"Config file: {obj.config_file or '(none)'}")
    if obj.settings.config_error:
        click.echo(f"Warning: {obj.settings.config_error}", err=True)
    click.echo("")
    for key in CONFIGURABLE_KEYS:
        click.echo(f"  {key} = {values.get(key)}")


@config.command("list")
def config_list_cmd() -> None:
    """List all config options."""
    click.echo("Available config options:")
    click.echo("")

    for key, info in CONFIGURABLE_KEYS.items():
        click.echo(f"  {key}")
        click.echo(f"    {info['description']}")
        click.echo(f"    Default: {info['default']}")
        click.echo("")


@config.command("get")
@click.argument("key")
@click.pass_obj
def config_get_cmd(ctx: FiledigestContext, key: str) -> None:
    """Get a config value.

    Arguments:

        KEY    The config key to get (e.g. io.chunk_size)
    """
    if key not in CONFIGURABLE_KEYS:
        raise click.BadParameter(
            f"Unknown config key: {key}. Valid keys: {', '.join(CONFIGURABLE_KEYS)}",
            param_hint="'KEY'",
        )
    value = ctx.settings.to_config().get(key)
    if value is None:
        click.echo(f"{key}: (not set)")
    else:
        click.echo(f"{key}: {value}")
