"""
Click-based CLI for digestkit.

Usage:
    from digestkit.cli import cli
    cli()
"""

from __future__ import annotations

from pathlib import Path

import click

from ..core.exceptions import ConfigError
from .context import DigestKitContext

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("digestkit")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="digestkit")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: nearest .digestkit/config.toml)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """digestkit - compute, parse and verify content digests

    \b
    Digests are written as <algorithm>:<hex>, except sha1 which is
    written as the bare hex value.

    \b
    Commands:
        digestkit algorithms           List supported algorithms
        digestkit parse <digest>       Show algorithm and value
        digestkit hash <file>          Print a file's digest
        digestkit verify <file> <d>    Check a file against a digest
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    if ctx.obj is None:
        try:
            ctx.obj = DigestKitContext.create(config_path=config_path)
        except ConfigError as e:
            raise click.ClickException(str(e)) from e


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "DigestKitContext",
    "__version__",
    "cli",
    "register_commands",
]
