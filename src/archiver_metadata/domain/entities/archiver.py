"""
Archiver Entity - An archiver node registered with the monitor
"""

# Standard library imports
from dataclasses import dataclass

ARCHIVER_NAME_PREFIX = "archiver_"

# nodeid is a bigint column
_MIN_NODE_ID = -(2**63)
_MAX_NODE_ID = 2**63 - 1


@dataclass(frozen=True)
class Archiver:
    """
    Archiver entity representing one archiver node known to the monitor.

    Instances are point-in-time snapshots of a row in the archiver table:
    they are detached from the database session that produced them and are
    not refreshed when other callers change the table afterwards.
    """

    node_id: int
    node_name: str
    node_host: str

    def __post_init__(self) -> None:
        """Validate archiver after initialization"""
        self._validate()

    def _validate(self) -> None:
        """Validate archiver attributes"""
        if isinstance(self.node_id, bool) or not isinstance(self.node_id, int):
            raise ValueError(f"Archiver node_id must be an integer, got {self.node_id!r}")
        if not _MIN_NODE_ID <= self.node_id <= _MAX_NODE_ID:
            raise ValueError(f"Archiver node_id {self.node_id} is out of the bigint range")

        if not isinstance(self.node_name, str) or not self.node_name:
            raise ValueError("Archiver node_name cannot be empty")

        if not isinstance(self.node_host, str) or not self.node_host:
            raise ValueError("Archiver node_host cannot be empty")

    @staticmethod
    def default_name(node_id: int) -> str:
        """Name given to an archiver registered without one."""
        return f"{ARCHIVER_NAME_PREFIX}{node_id}"

    @property
    def has_default_name(self) -> bool:
        """Check whether the archiver carries the auto-generated name"""
        return self.node_name == self.default_name(self.node_id)

    def __str__(self) -> str:
        return f"Archiver {self.node_id} ({self.node_name}) at {self.node_host}"
