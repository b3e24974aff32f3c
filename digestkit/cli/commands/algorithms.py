"""
Native Click implementation of the algorithms command.

Usage: digestkit algorithms
"""

import click

from ...core.models.digest import DEFAULT_ALGORITHM
from ...hashing import HashAlgorithmRegistry


@click.command("algorithms")
def algorithms() -> None:
    """List supported digest algorithms."""
    for name in HashAlgorithmRegistry().available_algorithms:
        suffix = "  (default for unprefixed digests)" if name == DEFAULT_ALGORITHM.value else ""
        click.echo(f"{name}{suffix}")
