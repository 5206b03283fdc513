"""Domain entities."""

from .archiver import ARCHIVER_NAME_PREFIX, Archiver

__all__ = ["ARCHIVER_NAME_PREFIX", "Archiver"]
