"""
PostgreSQL Database Adapter

Provides database operations using psycopg3 for the archiver metadata repository.
Handles session scoping, statement execution, and error handling.
"""

# Standard library imports
import logging
from collections.abc import Generator, Mapping, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

# Third-party imports
import psycopg
from psycopg import Connection, sql
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool, PoolTimeout

# Local imports
from archiver_metadata.application.interfaces.exceptions import (
    ConnectionError,
    IntegrityError,
    RepositoryError,
    TimeoutError,
)

logger = logging.getLogger(__name__)

Query = str | sql.Composable
Params = Sequence[Any] | Mapping[str, Any]


@dataclass(frozen=True)
class QueryResult:
    """
    Outcome of a single statement.

    status is the PostgreSQL command tag, e.g. "SELECT 1", "INSERT 0 1"
    or "DELETE 0".
    """

    status: str
    rowcount: int = 0
    rows: list[dict[str, Any]] = field(default_factory=list)

    @property
    def command(self) -> str:
        """First word of the command tag."""
        return self.status.split(" ", 1)[0] if self.status else ""


def _describe(query: Query, conn: Connection[Any] | None = None) -> str:
    """First 100 characters of a statement, for log lines."""
    if isinstance(query, sql.Composable):
        try:
            text = query.as_string(conn)
        except Exception:
            text = repr(query)
    else:
        text = query
    return " ".join(text.split())[:100]


class PostgreSQLAdapter:
    """
    PostgreSQL database adapter using psycopg3.

    Every statement runs in its own scoped session: a connection is borrowed
    from the pool, the statement runs in a transaction that is committed on
    success and rolled back on error, and the connection goes back to the
    pool on every exit path.
    """

    def __init__(self, pool: ConnectionPool, statement_timeout: float | None = None) -> None:
        """
        Initialize adapter with connection pool.

        Args:
            pool: psycopg3 connection pool
            statement_timeout: Server-side statement timeout in seconds that the
                pool's connections run with, if any
        """
        self._pool = pool
        self._statement_timeout = statement_timeout

    @property
    def pool(self) -> ConnectionPool:
        """Get the connection pool."""
        return self._pool

    @property
    def statement_timeout(self) -> float | None:
        """Get the statement timeout in seconds, if one is configured."""
        return self._statement_timeout

    @contextmanager
    def session(self) -> Generator[Connection[Any], None, None]:
        """
        Borrow a database connection from the pool for one unit of work.

        Yields:
            Database connection

        Raises:
            ConnectionError: If connection cannot be acquired
            TimeoutError: If no connection becomes available in time
        """
        acquired = False
        try:
            with self._pool.connection() as connection:
                acquired = True
                yield connection
        except PoolTimeout as e:
            logger.error(f"Connection acquisition timed out: {e}")
            raise TimeoutError("session", self._pool.timeout) from e
        except psycopg.OperationalError as e:
            # errors raised while the session was in use belong to the caller
            if acquired:
                raise
            logger.error(f"Failed to acquire connection: {e}")
            raise ConnectionError(f"Failed to acquire database connection: {e}") from e

    def execute(
        self,
        query: Query,
        params: Params | None = None,
        *,
        fetch: bool = False,
        row_limit: int = 0,
    ) -> QueryResult:
        """
        Execute a single SQL statement in its own session.

        Args:
            query: SQL statement, plain or composed with psycopg.sql
            params: Statement parameters
            fetch: Whether to fetch the rows the statement returns
            row_limit: Maximum number of rows to fetch, 0 for all of them

        Returns:
            Command status, affected row count and fetched rows

        Raises:
            IntegrityError: If an integrity constraint is violated
            TimeoutError: If the statement or connection acquisition times out
            RepositoryError: If statement execution fails
        """
        try:
            with self.session() as conn, conn.cursor(row_factory=dict_row) as cur:
                cur.execute(query, params)

                rows: list[dict[str, Any]] = []
                if fetch and cur.description is not None:
                    rows = cur.fetchmany(row_limit) if row_limit > 0 else cur.fetchall()

                result = QueryResult(
                    status=cur.statusmessage or "",
                    rowcount=cur.rowcount,
                    rows=rows,
                )
                logger.debug(f"Query executed: {_describe(query, conn)}... | Result: {result.status}")
                return result
        except psycopg.IntegrityError as e:
            logger.error(f"Integrity constraint violated: {e} | Query: {_describe(query)}...")
            constraint = getattr(e.diag, "constraint_name", None) or "unknown"
            raise IntegrityError(constraint, str(e)) from e
        except psycopg.errors.QueryCanceled as e:
            if not self._statement_timeout:
                logger.error(f"Query canceled: {e} | Query: {_describe(query)}...")
                raise RepositoryError(f"Query canceled: {e}", e) from e
            logger.error(f"Query timed out: {_describe(query)}...")
            raise TimeoutError("execute", self._statement_timeout) from e
        except psycopg.Error as e:
            logger.error(f"Query execution failed: {e} | Query: {_describe(query)}...")
            raise RepositoryError(f"Query execution failed: {e}", e) from e

    def health_check(self) -> bool:
        """
        Perform a health check on the database connection.

        Returns:
            True if database is healthy, False otherwise
        """
        try:
            result = self.execute("SELECT 1", fetch=True, row_limit=1)
            return result.command == "SELECT" and len(result.rows) == 1
        except RepositoryError as e:
            logger.error(f"Health check failed: {e}")
            return False

    def get_connection_info(self) -> dict[str, Any]:
        """
        Get information about the connection pool.

        Returns:
            Dictionary with connection pool settings
        """
        return {
            "max_size": self._pool.max_size,
            "min_size": self._pool.min_size,
            "pool_status": "active" if not self._pool.closed else "closed",
        }

    def __str__(self) -> str:
        """String representation of the adapter."""
        return f"PostgreSQLAdapter(Pool(max_size={self._pool.max_size}))"
