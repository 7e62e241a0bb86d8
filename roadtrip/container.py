"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It registers the dataset repository, the route solver and the road trip
service, so the CLI and the tests can swap any of them.
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
        service = container.resolve(RoadTripService)

        # Testing
        container = Container()
        container.register(DatasetRepositoryPort, lambda: FakeRepository())

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)

    def register(self, port_type: type[Any], factory: Callable[[], Any]) -> None:
        """Register a factory for a port type.

        Every registration is a singleton: the datasets are loaded once
        per run.
        """
        self._factories[port_type] = factory
        self._singletons.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve the instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        if port_type not in self._factories:
            raise KeyError(f"Type not registered: {port_type}")

        if port_type not in self._singletons:
            self._singletons[port_type] = self._factories[port_type]()
        return self._singletons[port_type]

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Resolving RoadTripService reads every dataset and builds the
        graph, so it raises DatasetError on broken input.
        """
        from .adapters.datasets import FileDatasetRepository
        from .adapters.graph import DijkstraRouteSolver
        from .ports.graph import DatasetRepositoryPort, RouteSolverPort
        from .services import RoadTripService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            DatasetRepositoryPort,
            lambda: FileDatasetRepository(config.datasets),
        )
        container.register(RouteSolverPort, lambda: DijkstraRouteSolver())

        def create_road_trip() -> RoadTripService:
            return RoadTripService.from_repository(
                container.resolve(DatasetRepositoryPort),
                current_end_date=config.datasets.current_end_date,
                padding_letter=config.datasets.code_padding_letter,
                route_solver=container.resolve(RouteSolverPort),
                suggestion_cutoff=config.query.suggestion_cutoff,
            )

        container.register(RoadTripService, create_road_trip)

        return container
