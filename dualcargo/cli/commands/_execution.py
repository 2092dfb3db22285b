"""
Shared execution helpers for the test and check commands.

Both commands resolve a scope from the optional package argument, plan the
default and all-features invocations, run them, and exit with the run's
status. Only the wrapped cargo subcommand differs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ...core.exceptions import DualCargoException

if TYPE_CHECKING:
    from ...core.models.run import Subcommand
    from ..context import DualCargoContext


def ensure_context(click_ctx: click.Context) -> DualCargoContext:
    """
    Return the DualCargoContext for a command.

    Commands invoked through the `dualcargo` group receive it from the group
    callback. Commands installed as standalone scripts build their own.
    """
    from ..context import DualCargoContext

    if isinstance(click_ctx.obj, DualCargoContext):
        return click_ctx.obj

    try:
        click_ctx.obj = DualCargoContext.create()
    except DualCargoException as e:
        raise click.ClickException(str(e)) from e
    return click_ctx.obj


def get_quiet_setting(quiet_flag: bool | None, config: dict) -> bool:
    """
    Get quiet setting from CLI flag or config.

    The CLI flag takes precedence. If not provided, checks the config
    for `output.quiet` setting.
    """
    if quiet_flag is not None:
        return quiet_flag
    return bool(config.get("output", {}).get("quiet", False))


def execute_dual(
    ctx: DualCargoContext,
    subcommand: Subcommand,
    package: str | None,
    quiet: bool,
) -> int:
    """
    Plan and run both invocations of a wrapped subcommand.

    Args:
        ctx: DualCargoContext with loaded configuration
        subcommand: Wrapped cargo subcommand
        package: Package name, or None/empty for the workspace
        quiet: Suppress the status line

    Returns:
        Exit status of the run
    """
    from ...core.bootstrap import bootstrap
    from ...core.interfaces.logger import ILogger
    from ...core.interfaces.presenter import IPresenter
    from ...core.models.run import Scope
    from ...services.execution import CommandPlanner, DualRunner

    container = bootstrap(config=ctx.config)
    logger = container.resolve(ILogger)  # type: ignore[type-abstract]
    presenter = container.resolve(IPresenter)  # type: ignore[type-abstract]

    if ctx.config_error:
        logger.warning("Ignoring unreadable config: %s", ctx.config_error)
    elif ctx.config_file:
        logger.debug("Using config file: %s", ctx.config_file)

    scope = Scope.resolve(package)
    logger.debug("Resolved scope: %s", scope.description)

    plan = CommandPlanner.from_config(ctx.config, logger=logger).plan(subcommand, scope)
    runner = DualRunner(presenter=presenter, logger=logger, quiet=quiet)

    try:
        result = runner.run(plan)
    except DualCargoException as e:
        logger.error("%s", e)
        presenter.print_error(e.message)
        return e.exit_code

    return result.exit_code
