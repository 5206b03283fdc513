"""
Repository Exception Definitions

Defines exceptions that repositories and response marshaling may raise.
Following clean architecture principles - these are application-level exceptions.
"""


class RepositoryError(Exception):
    """Base exception for repository operations."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConnectionError(RepositoryError):
    """Raised when database connection fails."""

    def __init__(self, message: str = "Database connection failed") -> None:
        super().__init__(message)


class TimeoutError(RepositoryError):
    """Raised when repository operation times out."""

    def __init__(self, operation: str, timeout_seconds: float) -> None:
        super().__init__(f"Operation '{operation}' timed out after {timeout_seconds} seconds")
        self.operation = operation
        self.timeout_seconds = timeout_seconds


class IntegrityError(RepositoryError):
    """Raised when database integrity constraint is violated."""

    def __init__(self, constraint: str, message: str | None = None) -> None:
        msg = f"Integrity constraint '{constraint}' violated"
        if message:
            msg += f": {message}"
        super().__init__(msg)
        self.constraint = constraint


class InvalidArgumentError(Exception):
    """Raised when caller-supplied data violates a precondition."""

    def __init__(self, message: str, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument


class SchemaMismatchError(Exception):
    """Raised when the declared result shape cannot hold an archiver row."""

    def __init__(self, message: str = "return type must be a row type") -> None:
        super().__init__(message)


class FactoryError(Exception):
    """Raised when factory cannot create an instance."""

    def __init__(self, factory_type: str, message: str) -> None:
        super().__init__(f"{factory_type} factory error: {message}")
        self.factory_type = factory_type


class ConfigurationError(Exception):
    """Raised when configuration-related errors occur."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
