"""
Domain Layer - Archiver Records

This layer contains the entities the monitor tracks about its archivers.

No external dependencies allowed in this layer.
"""
