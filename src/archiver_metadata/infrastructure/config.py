"""
Configuration Management - Loads settings from the environment and .env files
"""

import logging
import os
import re
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote, urlencode

from dotenv import load_dotenv

from archiver_metadata.application.interfaces.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()

# Unquoted PostgreSQL identifier, optionally schema-qualified
_QUALIFIED_IDENTIFIER = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]{0,62}(\.[a-zA-Z_][a-zA-Z0-9_]{0,62})?$")


def split_qualified_name(name: str) -> tuple[str, ...]:
    """
    Validate a possibly schema-qualified identifier and split it in parts.

    Args:
        name: Identifier such as "archiver" or "pgautofailover.archiver"

    Returns:
        The identifier parts, schema first

    Raises:
        ConfigurationError: If the name is not a plain SQL identifier
    """
    if not _QUALIFIED_IDENTIFIER.match(name):
        raise ConfigurationError(
            f"Invalid identifier '{name}'. Only alphanumeric and underscore allowed."
        )
    return tuple(name.split("."))


@dataclass(frozen=True)
class ArchiverTableConfig:
    """Where archivers are stored"""

    table: str = "pgautofailover.archiver"
    sequence: str = "pgautofailover.archiver_nodeid_seq"

    def __post_init__(self) -> None:
        split_qualified_name(self.table)
        split_qualified_name(self.sequence)

    @property
    def table_parts(self) -> tuple[str, ...]:
        return split_qualified_name(self.table)

    @classmethod
    def from_env(cls) -> "ArchiverTableConfig":
        """Load table settings from environment"""
        return cls(
            table=os.getenv("ARCHIVER_TABLE", cls.table),
            sequence=os.getenv("ARCHIVER_SEQUENCE", cls.sequence),
        )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration settings"""

    level: str = "INFO"
    format_type: str = "json"
    log_file: str | None = None

    def __post_init__(self) -> None:
        if self.level.upper() not in logging.getLevelNamesMapping():
            raise ConfigurationError(f"Unknown log level: {self.level}")
        if self.format_type not in ("json", "text"):
            raise ConfigurationError(f"Unknown log format: {self.format_type}")

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Load logging settings from environment"""
        return cls(
            level=os.getenv("ARCHIVER_LOG_LEVEL", "INFO"),
            format_type=os.getenv("ARCHIVER_LOG_FORMAT", "json"),
            log_file=os.getenv("ARCHIVER_LOG_FILE") or None,
        )


class DSNBuilder:
    """
    Builder for database connection strings (DSN).
    Handles the construction of PostgreSQL connection strings with various options.
    """

    def __init__(self) -> None:
        """Initialize DSN builder with default values."""
        self.host = "localhost"
        self.port = 5432
        self.database = "pg_auto_failover"
        self.user = ""
        self.password: str | None = None
        self.ssl_mode = "prefer"
        self.ssl_cert: str | None = None
        self.ssl_key: str | None = None
        self.ssl_ca: str | None = None
        self.additional_params: dict[str, Any] = {}

    def with_host(self, host: str) -> "DSNBuilder":
        """Set the host."""
        self.host = host
        return self

    def with_port(self, port: int) -> "DSNBuilder":
        """Set the port."""
        self.port = port
        return self

    def with_database(self, database: str) -> "DSNBuilder":
        """Set the database name."""
        self.database = database
        return self

    def with_credentials(self, user: str, password: str | None = None) -> "DSNBuilder":
        """Set user credentials."""
        self.user = user
        self.password = password
        return self

    def with_ssl(
        self,
        mode: str = "prefer",
        cert: str | None = None,
        key: str | None = None,
        ca: str | None = None,
    ) -> "DSNBuilder":
        """Configure SSL settings."""
        self.ssl_mode = mode
        self.ssl_cert = cert
        self.ssl_key = key
        self.ssl_ca = ca
        return self

    def with_param(self, key: str, value: str) -> "DSNBuilder":
        """Add additional connection parameter."""
        self.additional_params[key] = value
        return self

    def build(self) -> str:
        """
        Build the DSN string.

        Returns:
            Complete PostgreSQL DSN string
        """
        # libpq percent-decodes every URI component
        auth = quote(self.user, safe="")
        if self.password:
            auth = f"{auth}:{quote(self.password, safe='')}"

        database = quote(self.database, safe="")
        dsn = f"postgresql://{auth}@{self.host}:{self.port}/{database}"

        params = dict(self.additional_params)

        # Only non-default SSL settings end up in the DSN
        if self.ssl_mode != "prefer":
            params["sslmode"] = self.ssl_mode
        if self.ssl_cert:
            params["sslcert"] = self.ssl_cert
        if self.ssl_key:
            params["sslkey"] = self.ssl_key
        if self.ssl_ca:
            params["sslrootcert"] = self.ssl_ca

        if params:
            param_str = urlencode(params, safe="/", quote_via=quote)
            dsn = f"{dsn}?{param_str}"

        return dsn
