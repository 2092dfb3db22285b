"""
Native Click implementation of the test command.

Usage: dualcargo test [options] [PACKAGE]
"""

import click

from ._execution import ensure_context, execute_dual, get_quiet_setting


@click.command("test")
@click.argument("package", required=False)
@click.option("-q", "--quiet/--no-quiet", default=None, help="Suppress the status line")
@click.pass_context
def cargo_test(click_ctx: click.Context, package: str | None, quiet: bool | None) -> None:
    """Run cargo test, then cargo test --all-features.

    The second run is skipped if the first fails. Without PACKAGE both
    runs cover the whole workspace. Put `--` before a PACKAGE name that
    starts with `-`.

    \b
    Examples:
        dualcargo test
        dualcargo test my-crate
    """
    ctx = ensure_context(click_ctx)
    exit_code = execute_dual(
        ctx=ctx,
        subcommand="test",
        package=package,
        quiet=get_quiet_setting(quiet, ctx.config),
    )

    if exit_code != 0:
        raise SystemExit(exit_code)
