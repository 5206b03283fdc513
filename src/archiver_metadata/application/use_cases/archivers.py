"""
Archiver Use Cases

Entry points the monitor exposes to remote callers for registering, reading
and removing archivers. Each one drives the archiver repository and hands
back the archiver marshaled as a row.
"""

from dataclasses import dataclass

from archiver_metadata.application.interfaces.repositories import IArchiverRepository
from archiver_metadata.interfaces.marshaling import (
    ARCHIVER_ROW_SHAPE,
    ResultDescriptor,
    archiver_to_response,
)

from .base import UseCase, UseCaseRequest, UseCaseResponse


# Request DTOs
@dataclass(kw_only=True)
class RegisterArchiverRequest(UseCaseRequest):
    """Request to register an archiver."""

    node_host: str
    node_name: str | None = None
    result_shape: ResultDescriptor = ARCHIVER_ROW_SHAPE


@dataclass(kw_only=True)
class GetArchiverRequest(UseCaseRequest):
    """Request to read an archiver."""

    node_id: int
    result_shape: ResultDescriptor = ARCHIVER_ROW_SHAPE


@dataclass(kw_only=True)
class RemoveArchiverRequest(UseCaseRequest):
    """Request to remove an archiver."""

    node_id: int


def _validate_node_id(node_id: int) -> str | None:
    if isinstance(node_id, bool) or not isinstance(node_id, int):
        return "node_id must be an integer"
    return None


# Use Case Implementations
class RegisterArchiverUseCase(UseCase[RegisterArchiverRequest, UseCaseResponse]):
    """
    Registers an archiver and returns it as stored.

    The row is read back after the insert so that callers see the name the
    database gave the archiver when none was supplied.
    """

    def __init__(self, repository: IArchiverRepository) -> None:
        super().__init__("RegisterArchiverUseCase")
        self.repository = repository

    def validate(self, request: RegisterArchiverRequest) -> str | None:
        """Validate the registration request."""
        if not isinstance(request.node_host, str) or not request.node_host.strip():
            return "node_host is required"

        if request.node_name is not None and not (
            isinstance(request.node_name, str) and request.node_name.strip()
        ):
            return "node_name cannot be empty"

        return None

    def process(self, request: RegisterArchiverRequest) -> UseCaseResponse:
        node_id = self.repository.add_archiver(request.node_name, request.node_host)

        archiver = self.repository.get_archiver(node_id)
        if archiver is None:
            return UseCaseResponse.error_response(
                f"archiver {node_id} disappeared after registration", request.request_id
            )

        return UseCaseResponse.success_response(
            archiver_to_response(archiver, request.result_shape), request.request_id
        )


class GetArchiverUseCase(UseCase[GetArchiverRequest, UseCaseResponse]):
    """Reads an archiver by node ID."""

    def __init__(self, repository: IArchiverRepository) -> None:
        super().__init__("GetArchiverUseCase")
        self.repository = repository

    def validate(self, request: GetArchiverRequest) -> str | None:
        return _validate_node_id(request.node_id)

    def process(self, request: GetArchiverRequest) -> UseCaseResponse:
        archiver = self.repository.get_archiver(request.node_id)
        if archiver is None:
            return UseCaseResponse.error_response(
                f"archiver {request.node_id} not found", request.request_id
            )

        return UseCaseResponse.success_response(
            archiver_to_response(archiver, request.result_shape), request.request_id
        )


class RemoveArchiverUseCase(UseCase[RemoveArchiverRequest, UseCaseResponse]):
    """
    Removes an archiver by node ID.

    Removing an unknown archiver succeeds, like the repository operation it
    wraps. The response carries the removed archiver row, or None.
    """

    def __init__(self, repository: IArchiverRepository) -> None:
        super().__init__("RemoveArchiverUseCase")
        self.repository = repository

    def validate(self, request: RemoveArchiverRequest) -> str | None:
        return _validate_node_id(request.node_id)

    def process(self, request: RemoveArchiverRequest) -> UseCaseResponse:
        archiver = self.repository.get_archiver(request.node_id)
        if archiver is None:
            self.logger.info(f"Archiver {request.node_id} is not registered, nothing to remove")
            return UseCaseResponse.success_response(None, request.request_id)

        self.repository.remove_archiver(archiver)

        return UseCaseResponse.success_response(
            archiver_to_response(archiver, ARCHIVER_ROW_SHAPE), request.request_id
        )
