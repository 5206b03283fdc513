"""Global pytest configuration and fixtures."""

# Standard library imports
import logging
from unittest.mock import MagicMock

# Third-party imports
import pytest

# Local imports
from archiver_metadata.domain.entities.archiver import Archiver
from archiver_metadata.infrastructure.database.adapter import PostgreSQLAdapter, QueryResult
from archiver_metadata.infrastructure.repositories.archiver_repository import (
    PostgreSQLArchiverRepository,
)
from tests.helpers import InMemoryArchiverAdapter


@pytest.fixture
def sample_archiver() -> Archiver:
    """Archiver registered without a name."""
    return Archiver(node_id=7, node_name="archiver_7", node_host="10.0.0.5:5432")


@pytest.fixture
def mock_adapter() -> MagicMock:
    """Mock PostgreSQL adapter for repository tests."""
    adapter = MagicMock(spec=PostgreSQLAdapter)
    adapter.execute.return_value = QueryResult("SELECT 0", 0, [])
    return adapter


@pytest.fixture
def in_memory_adapter() -> InMemoryArchiverAdapter:
    """Adapter keeping the archiver table in memory."""
    return InMemoryArchiverAdapter()


@pytest.fixture
def in_memory_repository(in_memory_adapter) -> PostgreSQLArchiverRepository:
    """Archiver repository backed by the in-memory adapter."""
    return PostgreSQLArchiverRepository(in_memory_adapter)


@pytest.fixture
def restore_logging():
    """Restore root logger handlers and the record factory after a test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    factory = logging.getLogRecordFactory()

    yield

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
    logging.setLogRecordFactory(factory)
