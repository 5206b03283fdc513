"""
Repository Interface Definitions

Defines the contracts that infrastructure repositories must implement.
Following the Repository pattern and clean architecture principles.
"""

# Standard library imports
from abc import abstractmethod
from typing import Protocol

# Local imports
from archiver_metadata.domain.entities.archiver import Archiver


class IArchiverRepository(Protocol):
    """
    Archiver repository interface.

    Defines operations for registering, retrieving and removing archivers.
    The infrastructure layer must implement this interface.
    """

    @abstractmethod
    def get_archiver(self, node_id: int) -> Archiver | None:
        """
        Retrieve an archiver by its node ID.

        Args:
            node_id: The identifier allocated when the archiver was added

        Returns:
            A detached archiver record if found, None otherwise

        Raises:
            RepositoryError: If retrieval operation fails
        """
        ...

    @abstractmethod
    def add_archiver(self, node_name: str | None, node_host: str) -> int:
        """
        Register a new archiver.

        Args:
            node_name: Human-readable name, or None to name it after its node ID
            node_host: Connection address of the archiver

        Returns:
            The node ID allocated to the archiver

        Raises:
            RepositoryError: If node_host is invalid or the insert fails
        """
        ...

    @abstractmethod
    def remove_archiver(self, archiver: Archiver) -> None:
        """
        Remove an archiver.

        Removing an archiver that is no longer registered is not an error.

        Args:
            archiver: The archiver to remove

        Raises:
            RepositoryError: If delete operation fails
        """
        ...
