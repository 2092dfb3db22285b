"""
Command construction for dual cargo runs.

Commands are built as argument lists, never as shell text, so package
names reach cargo as a single argv element whatever characters they hold.
"""

from collections.abc import Sequence

from ...core.interfaces.logger import ILogger
from ...core.models.run import CommandPlan, Invocation, Scope, Subcommand

WORKSPACE_FLAG = "--workspace"
PACKAGE_FLAG = "-p"
ALL_FEATURES_FLAG = "--all-features"

# Flags each wrapped subcommand always passes after the scope flag.
SUBCOMMAND_FLAGS: dict[str, tuple[str, ...]] = {
    "test": (),
    "check": ("--tests",),
}


def scope_args(scope: Scope) -> list[str]:
    """Return the cargo arguments selecting the given scope."""
    if scope.is_workspace:
        return [WORKSPACE_FLAG]
    return [PACKAGE_FLAG, scope.package or ""]


def build_argv(
    subcommand: Subcommand,
    scope: Scope,
    *,
    all_features: bool = False,
    program: str = "cargo",
    extra_args: Sequence[str] = (),
) -> list[str]:
    """
    Build the argv for one cargo invocation.

    The layout is ``<program> <subcommand> <scope> [subcommand flags]
    [--all-features] [extra args]``.

    Args:
        subcommand: Wrapped cargo subcommand ("test" or "check")
        scope: Workspace or package scope
        all_features: Append the all-features flag
        program: Build tool executable
        extra_args: Additional arguments appended last

    Returns:
        Ordered argument list, program first
    """
    if subcommand not in SUBCOMMAND_FLAGS:
        raise ValueError(f"Unsupported subcommand: {subcommand}")

    argv = [program, subcommand, *scope_args(scope), *SUBCOMMAND_FLAGS[subcommand]]
    if all_features:
        argv.append(ALL_FEATURES_FLAG)
    argv.extend(extra_args)
    return argv


class CommandPlanner:
    """
    Builds the pair of invocations for a dual run.

    The all-features invocation is the default invocation with the
    all-features flag added; everything else is identical.
    """

    def __init__(
        self,
        program: str = "cargo",
        extra_args: Sequence[str] | None = None,
        logger: ILogger | None = None,
    ) -> None:
        self._program = program
        self._extra_args = list(extra_args or [])
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        """Get logger, resolving from container or creating NullLogger."""
        if self._logger is None:
            from ...core.container import resolve_or_default
            from ..logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        return self._logger

    @classmethod
    def from_config(cls, config: dict, logger: ILogger | None = None) -> "CommandPlanner":
        """Create a planner from a loaded configuration dict."""
        cargo = config.get("cargo", {})
        return cls(
            program=cargo.get("program") or "cargo",
            extra_args=cargo.get("extra_args") or [],
            logger=logger,
        )

    def plan(self, subcommand: Subcommand, scope: Scope) -> CommandPlan:
        """Build both invocations for a dual run."""
        default_argv = build_argv(
            subcommand, scope, program=self._program, extra_args=self._extra_args
        )
        features_argv = build_argv(
            subcommand,
            scope,
            all_features=True,
            program=self._program,
            extra_args=self._extra_args,
        )
        self.logger.debug("Planned %s for %s: %s", subcommand, scope.description, default_argv)
        self.logger.debug("Planned all-features run: %s", features_argv)

        return CommandPlan(
            subcommand=subcommand,
            scope=scope,
            default_run=Invocation(argv=default_argv),
            all_features_run=Invocation(argv=features_argv, all_features=True),
        )
