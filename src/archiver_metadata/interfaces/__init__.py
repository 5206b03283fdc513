"""
Interfaces Layer - What callers of the monitor get back
"""

from .marshaling import (
    ARCHIVER_ROW_SHAPE,
    ArchiverRow,
    ResultDescriptor,
    ResultTypeClass,
    archiver_to_response,
)

__all__ = [
    "ARCHIVER_ROW_SHAPE",
    "ArchiverRow",
    "ResultDescriptor",
    "ResultTypeClass",
    "archiver_to_response",
]
