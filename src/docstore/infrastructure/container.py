"""Dependency injection container.

Wires a ``QueryExecutor`` to the Collection Store and metrics registry
chosen by the configuration. The module-level API resolves its executor
from the global container, so swapping a registration here rebinds it.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from docstore.infrastructure.config import Config, get_config

T = TypeVar("T")

Factory = Callable[["Container"], Any]


class Container:
    """Registry of instances and lazily called factories, keyed by type."""

    def __init__(self) -> None:
        self._instances: dict[type, Any] = {}
        self._factories: dict[type, Factory] = {}

    def register_singleton(self, interface: type[T], instance: T) -> None:
        """Register a ready-made instance."""
        self._factories.pop(interface, None)
        self._instances[interface] = instance

    def register_factory(self, interface: type[T], factory: Callable[[Container], T]) -> None:
        """Register a factory, called once on first ``resolve``.

        Any instance already registered or resolved for the interface is
        discarded.
        """
        self._instances.pop(interface, None)
        self._factories[interface] = factory

    def resolve(self, interface: type[T]) -> T:
        """Return the instance for ``interface``.

        Raises:
            KeyError: If nothing is registered for the interface.
        """
        try:
            return self._instances[interface]
        except KeyError:
            pass
        if interface not in self._factories:
            raise KeyError(f"No registration found for {interface.__name__}")
        instance = self._factories[interface](self)
        self._instances[interface] = instance
        return instance

    def has(self, interface: type) -> bool:
        return interface in self._instances or interface in self._factories

    def clear(self) -> None:
        self._instances.clear()
        self._factories.clear()


def build_store(config: Config) -> Any:
    """Create the CollectionStore adapter selected by the configuration."""
    from docstore.adapters.outbound import FileCollectionStore, InMemoryCollectionStore

    if config.storage.backend == "file":
        return FileCollectionStore(config.storage.data_dir, suffix=config.storage.file_suffix)
    return InMemoryCollectionStore()


def bootstrap(config: Config | None = None, container: Container | None = None) -> Container:
    """
    Register the document store components.

    Args:
        config: Configuration to use (defaults to the global configuration)
        container: Container to populate (defaults to the global container)

    Returns:
        The populated container
    """
    from docstore.application.executor import QueryExecutor
    from docstore.infrastructure.metrics import MetricsRegistry, get_metrics, setup_metrics
    from docstore.ports.outbound import CollectionStore

    config = config or get_config()
    container = container or get_container()

    def metrics_factory(c: Container) -> MetricsRegistry:
        if config.observability.metrics_enabled:
            return setup_metrics(port=config.observability.metrics_port)
        return get_metrics()

    container.register_singleton(Config, config)
    container.register_factory(CollectionStore, lambda c: build_store(config))
    container.register_factory(MetricsRegistry, metrics_factory)
    container.register_factory(
        QueryExecutor,
        lambda c: QueryExecutor(c.resolve(CollectionStore), metrics=c.resolve(MetricsRegistry)),
    )
    return container


# Global container instance
_container: Container | None = None


def get_container() -> Container:
    """Get the global container instance."""
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container() -> None:
    """Reset the global container (useful for testing)."""
    global _container
    if _container is not None:
        _container.clear()
    _container = None
