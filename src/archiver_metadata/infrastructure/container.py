"""
Dependency Injection Container - Wires the archiver repository and its use cases.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar, cast

from archiver_metadata.application.interfaces.repositories import IArchiverRepository
from archiver_metadata.application.use_cases import (
    GetArchiverUseCase,
    RegisterArchiverUseCase,
    RemoveArchiverUseCase,
)
from archiver_metadata.infrastructure.config import ArchiverTableConfig
from archiver_metadata.infrastructure.database.adapter import PostgreSQLAdapter
from archiver_metadata.infrastructure.database.connection import (
    DatabaseConfig,
    DatabaseConnection,
)
from archiver_metadata.infrastructure.repositories import PostgreSQLArchiverRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ContainerConfig:
    """Configuration for the DI container."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig.from_env)
    tables: ArchiverTableConfig = field(default_factory=ArchiverTableConfig.from_env)


class DIContainer:
    """
    Dependency Injection Container for the archiver metadata repository.

    Components are created on first use and shared afterwards. The database
    pool is only opened by initialize().
    """

    def __init__(self, config: ContainerConfig | None = None) -> None:
        """Initialize the container with configuration."""
        self.config = config or ContainerConfig()
        self._singletons: dict[type[Any], Any] = {}
        self._factories: dict[type[Any], Callable[[], Any]] = {}

        self._register_infrastructure()
        self._register_use_cases()

        logger.info("Dependency injection container initialized")

    def _register_infrastructure(self) -> None:
        """Register infrastructure components."""
        self._register(DatabaseConnection, lambda: DatabaseConnection(self.config.database))
        self._register(
            PostgreSQLAdapter,
            lambda: PostgreSQLAdapter(
                self.get(DatabaseConnection).connect(),
                statement_timeout=self.config.database.statement_timeout_ms / 1000,
            ),
        )
        self._register(
            IArchiverRepository,  # type: ignore[type-abstract]
            lambda: PostgreSQLArchiverRepository(self.get(PostgreSQLAdapter), self.config.tables),
        )

    def _register_use_cases(self) -> None:
        """Register use cases."""
        for use_case in (RegisterArchiverUseCase, GetArchiverUseCase, RemoveArchiverUseCase):
            self._register(
                use_case,
                lambda use_case=use_case: use_case(self.get(IArchiverRepository)),  # type: ignore[type-abstract]
            )

    def _register(self, cls: type[T], factory: Callable[[], Any]) -> None:
        self._factories[cls] = factory

    def get(self, cls: type[T]) -> T:
        """
        Get an instance of a registered component.

        Args:
            cls: The class type to retrieve

        Returns:
            Instance of the requested class

        Raises:
            KeyError: If the class is not registered
        """
        if cls in self._singletons:
            return cast(T, self._singletons[cls])

        if cls not in self._factories:
            raise KeyError(f"No registration found for {cls.__name__}")

        instance = self._factories[cls]()
        self._singletons[cls] = instance
        return cast(T, instance)

    def register(self, cls: type[T], instance: T) -> None:
        """Register an existing instance, e.g. a test double."""
        self._singletons[cls] = instance
        self._factories[cls] = lambda: instance

    def initialize(self) -> None:
        """Open the database connection pool."""
        self.get(DatabaseConnection).connect()
        logger.info("Container initialized")

    def cleanup(self) -> None:
        """Close the database connection pool and drop created components."""
        connection = self._singletons.get(DatabaseConnection)
        if connection is not None:
            connection.disconnect()
        self._singletons.clear()
        logger.info("Container cleaned up")

    def __enter__(self) -> "DIContainer":
        self.initialize()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.cleanup()
