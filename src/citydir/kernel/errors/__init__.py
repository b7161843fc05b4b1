"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   └── NotFoundError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        └── FetchError
            ├── NetworkError
            ├── HttpError
            └── ParseError
"""

from citydir.kernel.errors.application import ApplicationError
from citydir.kernel.errors.base import BaseError
from citydir.kernel.errors.domain import DomainError, NotFoundError, ValidationError
from citydir.kernel.errors.infrastructure import (
    FetchError,
    HttpError,
    InfrastructureError,
    NetworkError,
    ParseError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "FetchError",
    "HttpError",
    "InfrastructureError",
    "NetworkError",
    "NotFoundError",
    "ParseError",
    "ValidationError",
]
