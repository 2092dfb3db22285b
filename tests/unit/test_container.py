"""
Unit tests for the service container and bootstrap.
"""

from unittest.mock import MagicMock

import pytest

from dualcargo.core.bootstrap import bootstrap, is_initialized, reset
from dualcargo.core.container import ServiceContainer, get_container, resolve_or_default
from dualcargo.core.interfaces.logger import ILogger
from dualcargo.core.interfaces.presenter import IPresenter
from dualcargo.core.interfaces.run import ICommandExecutor
from dualcargo.presenters.console import ConsolePresenter
from dualcargo.services.execution.executor import SubprocessCommandExecutor
from dualcargo.services.logging import DualCargoLogger, NullLogger


class TestServiceContainer:
    def test_singleton_instance(self):
        container = ServiceContainer()
        logger = NullLogger()
        container.register_singleton(ILogger, implementation=logger)
        assert container.resolve(ILogger) is logger

    def test_singleton_factory_called_once(self):
        container = ServiceContainer()
        factory = MagicMock(side_effect=NullLogger)
        container.register_singleton(ILogger, factory=factory)

        first = container.resolve(ILogger)
        second = container.resolve(ILogger)

        assert first is second
        factory.assert_called_once()

    def test_transient_builds_new_instances(self):
        container = ServiceContainer()
        container.register_transient(ICommandExecutor, SubprocessCommandExecutor)
        assert container.resolve(ICommandExecutor) is not container.resolve(ICommandExecutor)

    def test_singleton_requires_instance_or_factory(self):
        with pytest.raises(ValueError):
            ServiceContainer().register_singleton(ILogger)

    def test_unregistered_interface(self):
        container = ServiceContainer()
        assert not container.is_registered(ILogger)
        with pytest.raises(KeyError):
            container.resolve(ILogger)

    def test_resolve_or_default_falls_back(self):
        assert isinstance(resolve_or_default(ILogger, NullLogger), NullLogger)


class TestBootstrap:
    def test_registers_core_services(self):
        container = bootstrap()

        assert is_initialized()
        assert isinstance(container.resolve(IPresenter), ConsolePresenter)
        assert isinstance(container.resolve(ILogger), DualCargoLogger)
        assert isinstance(container.resolve(ICommandExecutor), SubprocessCommandExecutor)

    def test_is_idempotent(self):
        container = bootstrap()
        presenter = container.resolve(IPresenter)
        assert bootstrap() is container
        assert container.resolve(IPresenter) is presenter

    def test_keeps_existing_registrations(self):
        executor = MagicMock()
        get_container().register_singleton(ICommandExecutor, implementation=executor)

        container = bootstrap()

        assert container.resolve(ICommandExecutor) is executor

    def test_logger_built_from_config(self):
        container = bootstrap({"logging": {"level": "debug", "console": True, "file": False}})
        logger = container.resolve(ILogger)

        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == 10

    def test_reset_clears_registrations(self):
        bootstrap()
        reset()
        assert not is_initialized()
        assert not get_container().is_registered(IPresenter)
