"""
Base Use Case

Provides the foundation for the archiver use cases in the application layer.

UseCase.execute() is the error-translation boundary of the package. Below it,
the repository and the marshaler raise (RepositoryError and its subclasses,
InvalidArgumentError, SchemaMismatchError). Above it, callers only ever see a
UseCaseResponse: a failed validation or any raised error is logged with the
request id and returned as an error response carrying the error message.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar
from uuid import UUID, uuid4

logger = logging.getLogger(__name__)

# Type variables for request and response
TRequest = TypeVar("TRequest")
TResponse = TypeVar("TResponse")


@dataclass(kw_only=True)
class UseCaseRequest:
    """
    Base class for use case requests.

    Uses kw_only=True to allow derived classes to have required fields
    before optional ones from the base class.
    """

    request_id: UUID = field(default_factory=uuid4)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class UseCaseResponse:
    """Base class for use case responses."""

    success: bool
    data: Any | None = None
    error: str | None = None
    request_id: UUID | None = None

    @classmethod
    def success_response(cls, data: Any, request_id: UUID) -> "UseCaseResponse":
        """Create a successful response."""
        return cls(success=True, data=data, request_id=request_id)

    @classmethod
    def error_response(cls, error: str, request_id: UUID) -> "UseCaseResponse":
        """Create an error response."""
        return cls(success=False, error=error, request_id=request_id)


class UseCase(ABC, Generic[TRequest, TResponse]):
    """
    Abstract base class for all use cases.

    This is the boundary where errors raised by the repository and the
    marshaler stop propagating: they are logged and turned into error
    responses.
    """

    def __init__(self, name: str | None = None) -> None:
        """
        Initialize use case.

        Args:
            name: Optional name for the use case (defaults to class name)
        """
        self.name = name or self.__class__.__name__
        self.logger = logging.getLogger(f"{__name__}.{self.name}")

    def execute(self, request: TRequest) -> TResponse:
        """
        Execute the use case.

        Args:
            request: The use case request

        Returns:
            The use case response
        """
        request_id = getattr(request, "request_id", None) or uuid4()

        self.logger.info(
            f"Executing {self.name}",
            extra={
                "request_id": str(request_id),
                "use_case": self.name,
            },
        )

        try:
            validation_error = self.validate(request)
            if validation_error:
                self.logger.warning(
                    f"Validation failed for {self.name}: {validation_error}",
                    extra={"request_id": str(request_id)},
                )
                return self._create_error_response(validation_error, request_id)

            response = self.process(request)

            self.logger.info(
                f"Successfully executed {self.name}",
                extra={
                    "request_id": str(request_id),
                    "success": getattr(response, "success", True),
                },
            )

            return response

        except Exception as e:
            self.logger.error(
                f"Error executing {self.name}: {e}",
                extra={"request_id": str(request_id)},
                exc_info=True,
            )
            return self._create_error_response(str(e), request_id)

    @abstractmethod
    def validate(self, request: TRequest) -> str | None:
        """
        Validate the request.

        Args:
            request: The request to validate

        Returns:
            Error message if validation fails, None otherwise
        """
        pass

    @abstractmethod
    def process(self, request: TRequest) -> TResponse:
        """
        Process the request and execute business logic.

        Args:
            request: The validated request

        Returns:
            The response
        """
        pass

    def _create_error_response(self, error: str, request_id: UUID) -> TResponse:
        """
        Create an error response.

        Args:
            error: Error message
            request_id: Request ID

        Returns:
            Error response
        """
        return UseCaseResponse.error_response(error, request_id)  # type: ignore
