"""
Behavioral tests for the archiver repository against an in-memory archiver table.
"""

# Standard library imports
from concurrent.futures import ThreadPoolExecutor

# Third-party imports
import pytest

# Local imports
from archiver_metadata.domain.entities.archiver import Archiver
from archiver_metadata.infrastructure.repositories.archiver_repository import (
    PostgreSQLArchiverRepository,
)
from archiver_metadata.interfaces.marshaling import archiver_to_response
from tests.helpers import ArchiverFactory, InMemoryArchiverAdapter


@pytest.mark.unit
class TestArchiverLifecycle:
    """Add, get and remove round trips."""

    def test_add_then_get_with_name(self, in_memory_repository):
        node_id = in_memory_repository.add_archiver("archiver-east", "10.0.0.5:5432")

        archiver = in_memory_repository.get_archiver(node_id)

        assert archiver == Archiver(node_id, "archiver-east", "10.0.0.5:5432")

    def test_add_then_get_without_name(self, in_memory_repository):
        node_id = in_memory_repository.add_archiver(None, "10.0.0.6:5432")

        archiver = in_memory_repository.get_archiver(node_id)

        assert archiver.node_name == f"archiver_{node_id}"
        assert archiver.has_default_name

    def test_get_missing(self, in_memory_repository):
        assert in_memory_repository.get_archiver(404) is None

    def test_remove_missing_leaves_store_unchanged(self, in_memory_repository, in_memory_adapter):
        node_id = in_memory_repository.add_archiver(None, "10.0.0.5:5432")
        before = dict(in_memory_adapter.rows)

        in_memory_repository.remove_archiver(ArchiverFactory.create(node_id=node_id + 100))

        assert in_memory_adapter.rows == before

    def test_add_remove_get(self, in_memory_repository):
        node_id = in_memory_repository.add_archiver(None, "10.0.0.5:5432")
        archiver = in_memory_repository.get_archiver(node_id)

        in_memory_repository.remove_archiver(archiver)

        assert in_memory_repository.get_archiver(node_id) is None

    def test_remove_twice(self, in_memory_repository):
        node_id = in_memory_repository.add_archiver(None, "10.0.0.5:5432")
        archiver = in_memory_repository.get_archiver(node_id)

        in_memory_repository.remove_archiver(archiver)
        in_memory_repository.remove_archiver(archiver)

        assert in_memory_repository.get_archiver(node_id) is None

    def test_ids_are_not_reused(self, in_memory_repository):
        first = in_memory_repository.add_archiver(None, "10.0.0.5:5432")
        in_memory_repository.remove_archiver(in_memory_repository.get_archiver(first))

        second = in_memory_repository.add_archiver(None, "10.0.0.5:5432")

        assert second != first


@pytest.mark.unit
def test_registration_example():
    repository = PostgreSQLArchiverRepository(InMemoryArchiverAdapter(first_node_id=7))

    node_id = repository.add_archiver(None, "10.0.0.5:5432")
    archiver = repository.get_archiver(node_id)

    assert node_id == 7
    assert archiver == Archiver(7, "archiver_7", "10.0.0.5:5432")
    assert archiver_to_response(archiver) == (7, "archiver_7", "10.0.0.5:5432")


@pytest.mark.unit
def test_concurrent_adds_get_distinct_ids(in_memory_repository):
    hosts = [f"10.0.1.{i}:5432" for i in range(50)]

    with ThreadPoolExecutor(max_workers=8) as executor:
        node_ids = list(executor.map(lambda host: in_memory_repository.add_archiver(None, host), hosts))

    assert len(set(node_ids)) == len(hosts)
    for node_id, host in zip(node_ids, hosts):
        assert in_memory_repository.get_archiver(node_id).node_host == host
