"""
Application Interfaces - Repository Contracts

This module defines the interface contracts that the infrastructure layer
must implement. Following the dependency inversion principle, the application
layer defines what it needs, and the infrastructure layer provides it.
"""

from .exceptions import (
    ConfigurationError,
    ConnectionError,
    FactoryError,
    IntegrityError,
    InvalidArgumentError,
    RepositoryError,
    SchemaMismatchError,
    TimeoutError,
)
from .repositories import IArchiverRepository

__all__ = [
    # Repository interfaces
    "IArchiverRepository",
    # Exceptions
    "RepositoryError",
    "ConnectionError",
    "TimeoutError",
    "IntegrityError",
    "InvalidArgumentError",
    "SchemaMismatchError",
    "FactoryError",
    "ConfigurationError",
]
