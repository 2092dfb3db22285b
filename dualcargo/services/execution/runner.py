"""
Dual runner: executes a command plan's invocations in order.

The all-features invocation only runs when the default invocation exits
with status 0. The runner's exit status is that of the last invocation it
ran.
"""

from collections.abc import Callable

from ...core.interfaces.logger import ILogger
from ...core.interfaces.presenter import IPresenter
from ...core.interfaces.run import ICommandExecutor, ISignalHandler
from ...core.models.run import CommandPlan, InvocationOutcome, RunResult
from .signal_handler import SIGINT_EXIT_CODE, ProcessSignalHandler

STATUS_VERB = "checking"


def status_line(plan: CommandPlan) -> str:
    """Return the status line announcing the scope of a run."""
    return f"{STATUS_VERB} {plan.scope.description}"


class DualRunner:
    """
    Runs the default and all-features invocations of a plan.

    Usage:
        runner = DualRunner()
        result = runner.run(planner.plan("test", Scope.resolve(name)))
        raise SystemExit(result.exit_code)
    """

    def __init__(
        self,
        executor: ICommandExecutor | None = None,
        presenter: IPresenter | None = None,
        logger: ILogger | None = None,
        quiet: bool = False,
        signal_handler_factory: Callable[[], ISignalHandler] | None = None,
    ) -> None:
        """
        Initialize the runner.

        Args:
            executor: Runs each invocation (resolved from the container if None)
            presenter: Receives the status line (resolved from the container if None)
            logger: Logger for internal diagnostics
            quiet: Suppress the status line
            signal_handler_factory: Creates the interrupt handler for a run
        """
        self._executor = executor
        self._presenter = presenter
        self._logger = logger
        self._quiet = quiet
        self._signal_handler_factory = signal_handler_factory or ProcessSignalHandler

    @property
    def logger(self) -> ILogger:
        """Get logger, resolving from container or creating NullLogger."""
        if self._logger is None:
            from ...core.container import resolve_or_default
            from ..logging import NullLogger

            self._logger = resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]
        return self._logger

    @property
    def executor(self) -> ICommandExecutor:
        if self._executor is None:
            from ...core.container import resolve_or_default
            from .executor import SubprocessCommandExecutor

            self._executor = resolve_or_default(ICommandExecutor, SubprocessCommandExecutor)  # type: ignore[type-abstract]
        return self._executor

    @property
    def presenter(self) -> IPresenter:
        if self._presenter is None:
            from ...core.container import resolve_or_default
            from ...presenters.console import ConsolePresenter

            self._presenter = resolve_or_default(IPresenter, ConsolePresenter)  # type: ignore[type-abstract]
        return self._presenter

    def run(self, plan: CommandPlan) -> RunResult:
        """
        Execute the plan.

        Args:
            plan: Default and all-features invocations

        Returns:
            RunResult with the outcome of each invocation that ran

        Raises:
            ToolNotFoundError: If the build tool cannot be found
            ExecutionError: If the build tool cannot be started
        """
        if not self._quiet:
            self.presenter.print_status(status_line(plan))

        signal_handler = self._signal_handler_factory()
        outcomes: list[InvocationOutcome] = []
        exit_code = 0

        for invocation in plan.invocations:
            self.logger.info("Running: %s", invocation.display)
            exit_code = self.executor.execute(invocation.argv, signal_handler=signal_handler)
            outcomes.append(InvocationOutcome(invocation=invocation, exit_code=exit_code))

            if signal_handler.is_interrupted():
                self.logger.debug("Interrupted during %s, stopping", invocation.display)
                if exit_code == 0:
                    exit_code = SIGINT_EXIT_CODE
                return self._result(plan, outcomes, exit_code, interrupted=True)

            if exit_code != 0:
                self.logger.debug(
                    "%s exited with %d, skipping remaining invocations",
                    invocation.display,
                    exit_code,
                )
                break

        return self._result(plan, outcomes, exit_code)

    def _result(
        self,
        plan: CommandPlan,
        outcomes: list[InvocationOutcome],
        exit_code: int,
        interrupted: bool = False,
    ) -> RunResult:
        self.logger.debug(
            "Run finished: scope=%s, invocations=%d, exit_code=%d",
            plan.scope.description,
            len(outcomes),
            exit_code,
        )
        return RunResult(
            plan=plan,
            outcomes=outcomes,
            exit_code=exit_code,
            interrupted=interrupted,
        )
