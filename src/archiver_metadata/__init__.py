"""
Archiver Metadata

Metadata repository for the archiver nodes registered with the monitor.
Provides lookup, registration and removal of archivers backed by PostgreSQL,
and the marshaling of archiver records into caller-facing rows.
"""

__version__ = "0.1.0"
