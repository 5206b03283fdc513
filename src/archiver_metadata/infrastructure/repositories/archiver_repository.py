"""
PostgreSQL Archiver Repository Implementation

Concrete implementation of IArchiverRepository using PostgreSQL database.
Handles archiver registration, retrieval and removal, and mapping between
archiver records and database rows.
"""

# Standard library imports
import logging
from typing import Any

# Third-party imports
from psycopg import sql

# Local imports
from archiver_metadata.application.interfaces.exceptions import RepositoryError
from archiver_metadata.application.interfaces.repositories import IArchiverRepository
from archiver_metadata.domain.entities.archiver import ARCHIVER_NAME_PREFIX, Archiver
from archiver_metadata.infrastructure.config import ArchiverTableConfig
from archiver_metadata.infrastructure.database.adapter import PostgreSQLAdapter

logger = logging.getLogger(__name__)


class PostgreSQLArchiverRepository(IArchiverRepository):
    """
    PostgreSQL implementation of IArchiverRepository.

    Each operation issues exactly one statement through the adapter, which
    runs it in its own scoped session. Nothing is cached between calls and
    no failure is retried here.
    """

    def __init__(self, adapter: PostgreSQLAdapter, tables: ArchiverTableConfig | None = None) -> None:
        """
        Initialize repository with database adapter.

        Args:
            adapter: PostgreSQL database adapter
            tables: Archiver table and sequence names
        """
        self.adapter = adapter
        self.tables = tables or ArchiverTableConfig()

        table = sql.Identifier(*self.tables.table_parts)
        sequence = sql.Literal(self.tables.sequence)

        self._select_query = sql.SQL(
            "SELECT nodeid, nodename, nodehost FROM {table} WHERE nodeid = %s"
        ).format(table=table)

        # Allocating the identifier and deriving the default name from it in
        # one statement keeps the name in step with the nodeid under
        # concurrent inserts.
        self._insert_query = sql.SQL(
            "WITH seq(nodeid) AS (SELECT nextval({sequence}::regclass)) "
            "INSERT INTO {table} (nodeid, nodename, nodehost) "
            "SELECT seq.nodeid, "
            "CASE WHEN %(node_name)s::text IS NULL "
            f"THEN format('{ARCHIVER_NAME_PREFIX}%%s', seq.nodeid) "
            "ELSE %(node_name)s::text END, "
            "%(node_host)s::text "
            "FROM seq "
            "RETURNING nodeid"
        ).format(sequence=sequence, table=table)

        self._delete_query = sql.SQL("DELETE FROM {table} WHERE nodeid = %s").format(table=table)

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
        try:
            result = self.adapter.execute(self._select_query, (node_id,), fetch=True, row_limit=1)
        except RepositoryError:
            logger.error(f"Could not select archiver {node_id} from {self.tables.table}")
            raise
        except Exception as e:
            logger.error(f"Failed to get archiver {node_id}: {e}")
            raise RepositoryError(f"Could not select from {self.tables.table}: {e}", e) from e

        if result.command != "SELECT":
            logger.error(f"Unexpected status '{result.status}' selecting archiver {node_id}")
            raise RepositoryError(f"Could not select from {self.tables.table}")

        if not result.rows:
            logger.debug(f"Archiver {node_id} not found")
            return None

        archiver = self._map_record_to_archiver(result.rows[0])
        logger.debug(f"Retrieved archiver {archiver.node_id}")
        return archiver

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
        if not isinstance(node_host, str) or not node_host.strip():
            raise RepositoryError("Archiver node_host must be a non-empty string")
        if node_name is not None and (not isinstance(node_name, str) or not node_name.strip()):
            raise RepositoryError("Archiver node_name must be a non-empty string when given")

        params = {"node_name": node_name, "node_host": node_host}

        try:
            result = self.adapter.execute(self._insert_query, params, fetch=True)
        except RepositoryError:
            logger.error(f"Could not insert archiver at {node_host} into {self.tables.table}")
            raise
        except Exception as e:
            logger.error(f"Failed to add archiver at {node_host}: {e}")
            raise RepositoryError(f"Could not insert into {self.tables.table}: {e}", e) from e

        if result.command != "INSERT" or not result.rows:
            logger.error(
                f"Unexpected status '{result.status}' with {len(result.rows)} rows "
                f"inserting archiver at {node_host}"
            )
            raise RepositoryError(f"Could not insert into {self.tables.table}")

        node_id = int(result.rows[0]["nodeid"])

        logger.info(
            f"Added archiver {node_id} at {node_host}",
            extra={"node_id": node_id, "node_name": node_name, "node_host": node_host},
        )
        return node_id

    def remove_archiver(self, archiver: Archiver) -> None:
        """
        Remove an archiver.

        Removing an archiver that is no longer registered is not an error.

        Args:
            archiver: The archiver to remove

        Raises:
            RepositoryError: If delete operation fails
        """
        try:
            result = self.adapter.execute(self._delete_query, (archiver.node_id,))
        except RepositoryError:
            logger.error(f"Could not delete archiver {archiver.node_id} from {self.tables.table}")
            raise
        except Exception as e:
            logger.error(f"Failed to remove archiver {archiver.node_id}: {e}")
            raise RepositoryError(f"Could not delete from {self.tables.table}: {e}", e) from e

        if result.command != "DELETE":
            logger.error(f"Unexpected status '{result.status}' deleting archiver {archiver.node_id}")
            raise RepositoryError(f"Could not delete from {self.tables.table}")

        if result.rowcount == 0:
            logger.debug(f"Archiver {archiver.node_id} was already removed")
        else:
            logger.info(
                f"Removed archiver {archiver.node_id}",
                extra={"node_id": archiver.node_id, "node_name": archiver.node_name},
            )

    def _map_record_to_archiver(self, record: dict[str, Any]) -> Archiver:
        """Map a database row to an Archiver entity."""
        try:
            return Archiver(
                node_id=int(record["nodeid"]),
                node_name=record["nodename"],
                node_host=record["nodehost"],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise RepositoryError(f"Malformed archiver row: {e}", e) from e
