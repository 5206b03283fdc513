"""
Application Use Cases

RPC-style entry points for the archiver lifecycle.
"""

from .archivers import (
    GetArchiverRequest,
    GetArchiverUseCase,
    RegisterArchiverRequest,
    RegisterArchiverUseCase,
    RemoveArchiverRequest,
    RemoveArchiverUseCase,
)
from .base import UseCase, UseCaseRequest, UseCaseResponse

__all__ = [
    "UseCase",
    "UseCaseRequest",
    "UseCaseResponse",
    "RegisterArchiverRequest",
    "RegisterArchiverUseCase",
    "GetArchiverRequest",
    "GetArchiverUseCase",
    "RemoveArchiverRequest",
    "RemoveArchiverUseCase",
]
