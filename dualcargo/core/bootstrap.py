"""
Application bootstrap for dualcargo.

Wires the presenter, the logger (built from the `[logging]` section) and
the subprocess executor into the global container. Called once per CLI
invocation.
"""

from typing import Any

from .container import ServiceContainer, get_container, reset_container
from .interfaces.logger import ILogger
from .interfaces.presenter import IPresenter
from .interfaces.run import ICommandExecutor

_initialized = False


def bootstrap(config: dict[str, Any] | None = None) -> ServiceContainer:
    """
    Register dualcargo's services once; later calls return the container.

    Services registered beforehand (e.g. test doubles) are left in place.

    Args:
        config: Loaded configuration; logging defaults apply if not given
    """
    global _initialized

    container = get_container()
    if not _initialized:
        _register_services(container, config or {})
        _initialized = True
    return container


def _register_services(container: ServiceContainer, config: dict[str, Any]) -> None:
    from ..presenters.console import ConsolePresenter
    from ..services.execution.executor import SubprocessCommandExecutor
    from ..services.logging import DualCargoLogger
    from .models.config import LoggingConfig

    def create_logger() -> ILogger:
        section = config.get("logging") or {}
        return DualCargoLogger.from_config(LoggingConfig.model_validate(section))

    if not container.is_registered(IPresenter):
        container.register_singleton(IPresenter, implementation=ConsolePresenter())  # type: ignore[type-abstract]
    if not container.is_registered(ILogger):
        container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]
    if not container.is_registered(ICommandExecutor):
        container.register_transient(ICommandExecutor, SubprocessCommandExecutor)  # type: ignore[type-abstract]


def reset() -> None:
    """Forget all registrations (for tests)."""
    global _initialized
    reset_container()
    _initialized = False


def is_initialized() -> bool:
    return _initialized
