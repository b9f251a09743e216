"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    │       ├── FilterSyntaxError
    │       └── InvalidSearchOptionError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (mp_cloudsearch.config.validation)
    └── InfrastructureError  (infrastructure.py)
        ├── TransportError
        │   └── TimeoutError
        ├── SerializationError
        └── ExternalServiceError
            ├── SearchError
            └── DocumentUpdateError
"""

from mp_cloudsearch.kernel.errors.application import ApplicationError
from mp_cloudsearch.kernel.errors.base import BaseError
from mp_cloudsearch.kernel.errors.domain import (
    DomainError,
    FilterSyntaxError,
    InvalidSearchOptionError,
    ValidationError,
)
from mp_cloudsearch.kernel.errors.infrastructure import (
    DocumentUpdateError,
    ExternalServiceError,
    InfrastructureError,
    SearchError,
    SerializationError,
    TransportError,
)
from mp_cloudsearch.kernel.errors.infrastructure import TimeoutError as InfrastructureTimeoutError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DocumentUpdateError",
    "DomainError",
    "ExternalServiceError",
    "FilterSyntaxError",
    "InfrastructureError",
    "InfrastructureTimeoutError",
    "InvalidSearchOptionError",
    "SearchError",
    "SerializationError",
    "TransportError",
    "ValidationError",
]
