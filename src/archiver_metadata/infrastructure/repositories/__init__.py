"""
Repository Infrastructure Module

This module provides concrete PostgreSQL implementations of the repository interfaces.
Implements the infrastructure layer for data access using the Repository pattern.
"""

from .archiver_repository import PostgreSQLArchiverRepository

__all__ = [
    "PostgreSQLArchiverRepository",
]
