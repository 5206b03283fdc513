"""
Database Infrastructure Module

This module provides PostgreSQL database access for the archiver metadata repository.
Implements the infrastructure layer for data persistence using psycopg3.
"""

from .adapter import PostgreSQLAdapter, QueryResult
from .connection import ConnectionFactory, DatabaseConfig, DatabaseConnection

__all__ = [
    "PostgreSQLAdapter",
    "QueryResult",
    "ConnectionFactory",
    "DatabaseConnection",
    "DatabaseConfig",
]
