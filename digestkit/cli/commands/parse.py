"""
Native Click implementation of the parse command.

Usage: digestkit parse <digest>
"""

import click

from ...core.exceptions import UnrecognizedAlgorithmError
from ...core.models.digest import parse_digest_string


@click.command("parse")
@click.argument("digest")
def parse(digest: str) -> None:
    """Parse a digest string and show its parts.

    \b
    Examples:
        digestkit parse 07e1306432667f916639d47481edc4f2ca456454
        digestkit parse sha256:b1e66f50...
    """
    try:
        parsed = parse_digest_string(digest)
    except UnrecognizedAlgorithmError as e:
        raise click.ClickException(e.message) from e

    click.echo(f"algorithm: {parsed.algorithm}")
    click.echo(f"value:     {parsed.value}")
    click.echo(f"canonical: {parsed}")
