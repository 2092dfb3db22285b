"""
Click-based CLI for dualcargo.

Usage:
    from dualcargo.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

import click

from ..core.exceptions import DualCargoException
from .context import DualCargoContext

try:
    __version__ = version("dualcargo")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="dualcargo")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """dualcargo - cargo test/check with and without all features

    Runs the cargo subcommand once with default features and, if that
    succeeds, again with --all-features. Pass a package name to restrict
    both runs to that package; otherwise the whole workspace is used.

    \b
    Commands:
        dualcargo test [PACKAGE]    cargo test, then cargo test --all-features
        dualcargo check [PACKAGE]   cargo check --tests, then with --all-features
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    else:
        try:
            ctx.obj = DualCargoContext.create()
        except DualCargoException as e:
            raise click.ClickException(str(e)) from e


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "DualCargoContext",
    "__version__",
    "cli",
    "register_commands",
]
