"""
Native Click implementation of the algorithms command.

Usage: filedigest algorithms
"""

from __future__ import annotations

import click

from ...hashing.algorithms import GostVariant, TigerVariant, all_algorithms
from ..context import FiledigestContext


@click.command("algorithms")
@click.pass_obj
def algorithms(ctx: FiledigestContext) -> None:
    """List supported algorithms and variants.

    Algorithms computed by default are marked with '*'.
    """
    defaults = set(ctx.settings.hash.algorithms)

    click.echo("Algorithms:")
    for alg in all_algorithms():
        marker = "*" if alg.display_name in defaults else " "
        click.echo(f"  {marker} {alg.display_name}")

    click.echo("")
    click.echo("GOST variants (--gost-variant):")
    for gost in GostVariant:
        marker = "*" if gost.value == ctx.settings.hash.gost_variant else " "
        click.echo(f"  {marker} {gost.value:<10} {gost.label}")

    click.echo("")
    click.echo("Tiger variants (--tiger-variant):")
    for tiger in TigerVariant:
        marker = "*" if tiger.value == ctx.settings.hash.tiger_variant else " "
        click.echo(f"  {marker} {tiger.value:<10} {tiger.label}")
