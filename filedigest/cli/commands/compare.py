"""
Native Click implementation of the compare command.

Usage: filedigest compare DIGEST_A DIGEST_B
"""

from __future__ import annotations

import click

from ...hashing.compare import hashes_equal


@click.command("compare")
@click.argument("digest_a")
@click.argument("digest_b")
@click.pass_context
def compare(ctx: click.Context, digest_a: str, digest_b: str) -> None:
    """Compare two digests by their bytes.

    Each side may be hex (any case, spaces allowed) or base64. Exits 0 on
    a match and 1 otherwise.
    """
    if hashes_equal(digest_a, digest_b):
        click.echo("MATCH")
        return
    click.echo("MISMATCH")
    ctx.exit(1)
