"""
Native Click implementation of the hash command.

Usage: filedigest hash FILE [-a ALG ...] [--all] [-f hex|HEX|base64] [--check REF]
"""

from __future__ import annotations

import click

from ...core.exceptions import UnknownAlgorithmError
from ...hashing.algorithms import Algorithm, GostVariant, TigerVariant, sort_algorithms
from ...hashing.compare import is_error_result
from ...presenters.formatting import HashFormat
from ...services.hashing import DefaultHashingService
from ...services.session import HashSession
from ..context import FiledigestContext


def _parse_algorithms(values: tuple[str, ...]) -> list[Algorithm]:
    names = [name for value in values for name in value.split(",") if name.strip()]
    try:
        return sort_algorithms(Algorithm.from_name(name) for name in names)
    except UnknownAlgorithmError as e:
        raise click.BadParameter(e.message, param_hint="'-a' / '--algorithm'") from e


@click.command("hash")
@click.argument("file", type=click.Path(dir_okay=False))
@click.option(
    "-a",
    "--algorithm",
    "algorithm_names",
    multiple=True,
    metavar="ALG",
    help="Algorithm to compute (repeatable, or comma-separated).",
)
@click.option("--all", "use_all", is_flag=True, help="Compute every supported algorithm.")
@click.option(
    "-f",
    "--format",
    "format_name",
    type=click.Choice([fmt.value for fmt in HashFormat]),
    default=None,
    help="Digest encoding (default: hash.format).",
)
@click.option(
    "--gost-variant",
    type=click.Choice([v.value for v in GostVariant]),
    default=None,
    help="GOST S-box (default: hash.gost_variant).",
)
@click.option(
    "--tiger-variant",
    type=click.Choice([v.value for v in TigerVariant]),
    default=None,
    help="Tiger padding (default: hash.tiger_variant).",
)
@click.option("--check", "reference", default=None, metavar="REF", help="Mark results equal to REF.")
@click.option("--no-mmap", is_flag=True, help="Never memory-map the file.")
@click.option("--sequential", is_flag=True, help="Feed all hashers from one thread.")
@click.pass_context
def hash_file(
    ctx: click.Context,
    file: str,
    algorithm_names: tuple[str, ...],
    use_all: bool,
    format_name: str | None,
    gost_variant: str | None,
    tiger_variant: str | None,
    reference: str | None,
    no_mmap: bool,
    sequential: bool,
) -> None:
    """Compute digests of FILE in a single pass.

    \b
    Examples:

        filedigest hash image.iso -a sha256 -a blake2b

        filedigest hash image.iso --all -f base64

        filedigest hash image.iso -a sha256 --check 9f86d081...
    """
    obj: FiledigestContext = ctx.obj
    hash_config = obj.settings.hash

    if use_all:
        algorithms = list(Algorithm)
    elif algorithm_names:
        algorithms = _parse_algorithms(algorithm_names)
    else:
        algorithms = _parse_algorithms(tuple(hash_config.algorithms))
    if not algorithms:
        raise click.UsageError("No algorithms selected.")

    io_config = obj.settings.io
    overrides = {}
    if no_mmap:
        overrides["mmap_enabled"] = False
    if sequential:
        overrides["parallel"] = False
    if overrides:
        io_config = io_config.model_copy(update=overrides)

    with HashSession(
        service=DefaultHashingService(io_config=io_config),
        algorithms=algorithms,
        hash_format=HashFormat(format_name or hash_config.format),
        gost_variant=GostVariant(gost_variant or hash_config.gost_variant),
        tiger_variant=TigerVariant(tiger_variant or hash_config.tiger_variant),
    ) as session:
        session.select_file(file)
        results = session.calculate()
        matches = session.matches(reference) if reference is not None else {}

    width = max(len(alg.display_name) for alg, _ in results) if results else 0
    failed = False
    for alg, text in results:
        failed = failed or is_error_result(text)
        marker = "  [MATCH]" if matches.get(alg) else ""
        click.echo(f"{alg.display_name + ':':<{width + 1}} {text}{marker}")

    if reference is not None and not any(matches.values()):
        click.echo("No digest matches the reference.", err=True)
        failed = True

    if failed:
        ctx.exit(1)
