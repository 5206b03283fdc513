"""
Unit tests for configuration loading.

Tests DSN construction, identifier validation and the table and logging
settings read from the environment.
"""

import pytest
from psycopg.conninfo import conninfo_to_dict

from archiver_metadata.application.interfaces.exceptions import ConfigurationError
from archiver_metadata.infrastructure.config import (
    ArchiverTableConfig,
    DSNBuilder,
    LoggingConfig,
    split_qualified_name,
)


@pytest.mark.unit
class TestDSNBuilder:
    """Test DSNBuilder class."""

    def test_default_dsn(self):
        assert DSNBuilder().build() == "postgresql://@localhost:5432/pg_auto_failover"

    def test_full_dsn(self):
        dsn = (
            DSNBuilder()
            .with_host("monitor")
            .with_port(6432)
            .with_database("pgaf")
            .with_credentials("autoctl_node", "pw")
            .build()
        )

        assert dsn == "postgresql://autoctl_node:pw@monitor:6432/pgaf"

    def test_credentials_without_password(self):
        dsn = DSNBuilder().with_credentials("autoctl_node").build()

        assert dsn == "postgresql://autoctl_node@localhost:5432/pg_auto_failover"

    def test_ssl_settings(self):
        dsn = (
            DSNBuilder()
            .with_credentials("autoctl_node")
            .with_ssl("verify-full", cert="/c.crt", key="/c.key", ca="/ca.crt")
            .build()
        )

        assert dsn.endswith("?sslmode=verify-full&sslcert=/c.crt&sslkey=/c.key&sslrootcert=/ca.crt")

    def test_default_ssl_mode_omitted(self):
        assert "sslmode" not in DSNBuilder().with_ssl("prefer").build()

    @pytest.mark.parametrize("password", ["p@ss/word", "a:b?c#d", "100% sure", "plain"])
    def test_special_characters_survive_parsing(self, password):
        dsn = (
            DSNBuilder()
            .with_host("monitor")
            .with_database("pg/af")
            .with_credentials("autoctl@node", password)
            .with_ssl("require", ca="/etc/ssl/root ca.crt")
            .build()
        )

        parsed = conninfo_to_dict(dsn)

        assert parsed["host"] == "monitor"
        assert parsed["port"] == "5432"
        assert parsed["dbname"] == "pg/af"
        assert parsed["user"] == "autoctl@node"
        assert parsed["password"] == password
        assert parsed["sslmode"] == "require"
        assert parsed["sslrootcert"] == "/etc/ssl/root ca.crt"

    def test_additional_params(self):
        dsn = DSNBuilder().with_param("application_name", "archiver_metadata").build()

        assert dsn.endswith("?application_name=archiver_metadata")


@pytest.mark.unit
class TestSplitQualifiedName:
    """Test identifier validation."""

    def test_plain_name(self):
        assert split_qualified_name("archiver") == ("archiver",)

    def test_schema_qualified_name(self):
        assert split_qualified_name("pgautofailover.archiver") == ("pgautofailover", "archiver")

    @pytest.mark.parametrize(
        "name",
        [
            "",
            "1archiver",
            "archiver; DROP TABLE node",
            "a.b.c",
            "archiver-table",
            '"archiver"',
            "a" * 64,
        ],
    )
    def test_invalid_names(self, name):
        with pytest.raises(ConfigurationError, match="Invalid identifier"):
            split_qualified_name(name)


@pytest.mark.unit
class TestArchiverTableConfig:
    """Test archiver table settings."""

    def test_defaults(self):
        config = ArchiverTableConfig()

        assert config.table == "pgautofailover.archiver"
        assert config.sequence == "pgautofailover.archiver_nodeid_seq"
        assert config.table_parts == ("pgautofailover", "archiver")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("ARCHIVER_TABLE", "monitor.archivers")
        monkeypatch.setenv("ARCHIVER_SEQUENCE", "monitor.archivers_id_seq")

        config = ArchiverTableConfig.from_env()

        assert config.table == "monitor.archivers"
        assert config.sequence == "monitor.archivers_id_seq"

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("ARCHIVER_TABLE", raising=False)
        monkeypatch.delenv("ARCHIVER_SEQUENCE", raising=False)

        assert ArchiverTableConfig.from_env() == ArchiverTableConfig()

    def test_invalid_sequence(self):
        with pytest.raises(ConfigurationError):
            ArchiverTableConfig(sequence="nextval('x')")


@pytest.mark.unit
class TestLoggingConfig:
    """Test logging settings."""

    def test_defaults(self):
        config = LoggingConfig()

        assert config.level == "INFO"
        assert config.format_type == "json"
        assert config.log_file is None

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("ARCHIVER_LOG_LEVEL", "debug")
        monkeypatch.setenv("ARCHIVER_LOG_FORMAT", "text")
        monkeypatch.setenv("ARCHIVER_LOG_FILE", "/var/log/archiver.log")

        config = LoggingConfig.from_env()

        assert config.level == "debug"
        assert config.format_type == "text"
        assert config.log_file == "/var/log/archiver.log"

    def test_empty_log_file_means_none(self, monkeypatch):
        monkeypatch.setenv("ARCHIVER_LOG_FILE", "")

        assert LoggingConfig.from_env().log_file is None

    def test_unknown_level(self):
        with pytest.raises(ConfigurationError, match="Unknown log level"):
            LoggingConfig(level="VERBOSE")

    def test_unknown_format(self):
        with pytest.raises(ConfigurationError, match="Unknown log format"):
            LoggingConfig(format_type="xml")
