"""
Monitoring Infrastructure Module

Structured logging with correlation and tracing context.
"""

from .logging import (
    ArchiverJSONFormatter,
    ArchiverLogRecord,
    SensitiveDataConfig,
    SensitiveDataMasker,
    correlation_context,
    generate_correlation_id,
    get_correlation_id,
    setup_structured_logging,
)

__all__ = [
    "ArchiverJSONFormatter",
    "ArchiverLogRecord",
    "SensitiveDataConfig",
    "SensitiveDataMasker",
    "correlation_context",
    "generate_correlation_id",
    "get_correlation_id",
    "setup_structured_logging",
]
