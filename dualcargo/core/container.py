"""
Service registry for dualcargo.

Interfaces are mapped to dependency-injector providers. bootstrap()
registers the console presenter, the logger and the subprocess executor;
anything registered before that (test doubles) is left in place.
"""

from collections.abc import Callable
from typing import TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """Registry of providers keyed by interface type."""

    def __init__(self) -> None:
        self._registry: dict[type, providers.Provider] = {}

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Register one shared instance of a service.

        Args:
            interface: Interface the service is resolved by
            implementation: Ready-made instance
            factory: Builds the instance on first resolve
        """
        if implementation is not None:
            provider: providers.Provider = providers.Object(implementation)
        elif factory is not None:
            provider = providers.Singleton(factory)
        else:
            raise ValueError(f"{interface.__name__}: need an implementation or a factory")
        self._registry[interface] = provider

    def register_transient(self, interface: type[T], factory: Callable[..., T]) -> None:
        """Register a factory that builds a fresh instance on every resolve."""
        self._registry[interface] = providers.Factory(factory)

    def is_registered(self, interface: type) -> bool:
        return interface in self._registry

    def resolve(self, interface: type[T]) -> T:
        """
        Build or fetch the service registered for interface.

        Raises:
            KeyError: If nothing is registered for it
        """
        provider = self._registry.get(interface)
        if provider is None:
            raise KeyError(f"No provider registered for {interface.__name__}")
        return provider()

    def resolve_or_default(self, interface: type[T], default_factory: Callable[[], T]) -> T:
        provider = self._registry.get(interface)
        if provider is None:
            return default_factory()
        return provider()


_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Return the process-wide container, creating it on first use."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """Drop every registration (for tests)."""
    global _container
    _container = None


def resolve_or_default(interface: type[T], default_factory: Callable[[], T]) -> T:
    """Resolve from the global container, or build a default.

    Lets services work both inside the bootstrapped CLI and when
    constructed directly in tests.

    Example:
        >>> from dualcargo.core.interfaces.logger import ILogger
        >>> from dualcargo.services.logging import NullLogger
        >>> logger = resolve_or_default(ILogger, NullLogger)
    """
    return get_container().resolve_or_default(interface, default_factory)
