"""
Native Click implementation of the verify command.

Usage: digestkit verify <file> <expected-digest>
"""

from pathlib import Path

import click

from ...core.exceptions import (
    DigestFileError,
    DigestVerificationError,
    UnrecognizedAlgorithmError,
)
from ...core.models.digest import parse_digest_string
from ..context import DigestKitContext


@click.command("verify")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("expected")
@click.pass_obj
def verify(ctx: DigestKitContext, path: Path, expected: str) -> None:
    """Check a file against an expected digest.

    EXPECTED uses the canonical form: bare hex for sha1,
    <algorithm>:<hex> otherwise.
    """
    try:
        expected_digest = parse_digest_string(expected)
        ctx.calculator.verify_file(expected_digest, path)
    except (UnrecognizedAlgorithmError, DigestVerificationError) as e:
        raise click.ClickException(e.message) from e
    except DigestFileError as e:
        raise click.ClickException(str(e)) from e
    click.echo("OK")
