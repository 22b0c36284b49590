"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It allows registering and resolving dependencies for the application.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap implementations
3. Lazy loading - adapters instantiated on first use
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        app = container.resolve(ConsoleApp)

        # Testing
        container = Container.create_default(config)
        container.register(NetworkExporterPort, lambda: FakeExporter())
        service = container.resolve(RoadPlanService)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Re-registering a type drops any instance cached for it.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        self._factories[port_type] = factory
        self._singletons.pop(port_type, None)
        if singleton:
            self._singleton_types.add(port_type)
        else:
            self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        if port_type not in self._factories:
            raise KeyError(f"Type not registered: {port_type}")

        if port_type in self._singleton_types:
            if port_type not in self._singletons:
                self._singletons[port_type] = self._factories[port_type]()
            return self._singletons[port_type]

        return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        The next resolve() starts from an empty road network.
        """
        self._singletons.clear()

    def clear_all(self) -> None:
        """Clear all registrations and singletons."""
        self._factories.clear()
        self._singletons.clear()
        self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.export import TextFileExporter
        from .adapters.rendering import ConsoleTableRenderer
        from .graph.network import RoadNetwork
        from .io.console import ConsoleApp
        from .ports.export import NetworkExporterPort
        from .ports.rendering import ReportRendererPort
        from .services import RoadPlanService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            NetworkExporterPort,
            lambda: TextFileExporter(config.storage),
        )
        container.register(
            ReportRendererPort,
            lambda: ConsoleTableRenderer(),
        )
        container.register(RoadNetwork, RoadNetwork)

        def create_road_plan_service() -> RoadPlanService:
            return RoadPlanService(
                network=container.resolve(RoadNetwork),
                exporter=container.resolve(NetworkExporterPort),
                renderer=container.resolve(ReportRendererPort),
            )

        container.register(RoadPlanService, create_road_plan_service)

        container.register(
            ConsoleApp,
            lambda: ConsoleApp(
                service=container.resolve(RoadPlanService),
                config=config.console,
            ),
        )

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None


def get_container() -> Container:
    """Get the default application container.

    Returns:
        The default Container instance (creates one if needed).
    """
    global _default_container
    if _default_container is None:
        _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    if _default_container is not None:
        _default_container.clear_all()
    _default_container = None
