"""Test helper utilities for the archiver metadata test suite."""

from tests.helpers.factories import ArchiverFactory, archiver_row_record
from tests.helpers.in_memory import InMemoryArchiverAdapter

__all__ = [
    # Factories
    "ArchiverFactory",
    "archiver_row_record",
    # Doubles
    "InMemoryArchiverAdapter",
]
