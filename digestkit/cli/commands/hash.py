"""
Native Click implementation of the hash command.

Usage: digestkit hash <file> [--algorithm ALGO]
"""

from pathlib import Path

import click

from ...core.exceptions import DigestFileError
from ...core.models.digest import DigestAlgorithm
from ..context import DigestKitContext


@click.command("hash")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "-a",
    "--algorithm",
    type=click.Choice([a.value for a in DigestAlgorithm]),
    default=None,
    help="Digest algorithm (default: hash.algorithm from config)",
)
@click.pass_obj
def hash_cmd(ctx: DigestKitContext, path: Path, algorithm: str | None) -> None:
    """Print the canonical digest of a file."""
    algorithm = algorithm or ctx.settings.hash.algorithm
    try:
        digest = ctx.calculator.calculate_file(algorithm, path)
    except DigestFileError as e:
        raise click.ClickException(str(e)) from e
    click.echo(str(digest))
