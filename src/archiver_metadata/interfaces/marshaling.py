"""
Archiver Response Marshaling

Converts archiver records into the row values returned to remote callers of
the monitor. Callers declare the shape they expect their result to have; only
a row (composite) shape can hold an archiver.
"""

# Standard library imports
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

# Local imports
from archiver_metadata.application.interfaces.exceptions import (
    InvalidArgumentError,
    SchemaMismatchError,
)
from archiver_metadata.domain.entities.archiver import Archiver


class ResultTypeClass(Enum):
    """Kinds of result types a caller can declare"""

    SCALAR = "scalar"
    COMPOSITE = "composite"
    RECORD = "record"  # row type without a column descriptor
    OTHER = "other"


@dataclass(frozen=True)
class ResultDescriptor:
    """Shape a caller expects its result to have."""

    type_class: ResultTypeClass
    column_names: tuple[str, ...] = ()

    @property
    def is_row_type(self) -> bool:
        return self.type_class is ResultTypeClass.COMPOSITE

    @classmethod
    def row(cls, *column_names: str) -> "ResultDescriptor":
        """Composite shape with the given columns."""
        return cls(ResultTypeClass.COMPOSITE, tuple(column_names))

    @classmethod
    def scalar(cls) -> "ResultDescriptor":
        return cls(ResultTypeClass.SCALAR)


class ArchiverRow(NamedTuple):
    """Archiver as returned to callers, in column order."""

    node_id: int
    node_name: str
    node_host: str


ARCHIVER_ROW_SHAPE = ResultDescriptor.row(*ArchiverRow._fields)


def archiver_to_response(
    archiver: Archiver | None, expected_shape: ResultDescriptor = ARCHIVER_ROW_SHAPE
) -> ArchiverRow:
    """
    Build the row returned to a caller for the given archiver.

    Args:
        archiver: The archiver to expose
        expected_shape: Result shape declared by the caller

    Returns:
        (node_id, node_name, node_host), none of them null

    Raises:
        InvalidArgumentError: If archiver is None or has a null attribute
        SchemaMismatchError: If expected_shape is not a three-column row type
    """
    if archiver is None:
        raise InvalidArgumentError("the given archiver must not be NULL", "archiver")

    row = ArchiverRow(archiver.node_id, archiver.node_name, archiver.node_host)

    for column, value in zip(ArchiverRow._fields, row):
        if value is None:
            raise InvalidArgumentError(f"archiver {column} must not be NULL", column)

    if not isinstance(expected_shape, ResultDescriptor) or not expected_shape.is_row_type:
        raise SchemaMismatchError("return type must be a row type")

    if expected_shape.column_names and len(expected_shape.column_names) != len(row):
        raise SchemaMismatchError(
            f"return type must have {len(row)} columns, "
            f"got {len(expected_shape.column_names)}"
        )

    return row
