"""Kernel – framework-agnostic building blocks."""

from mp_cloudsearch.kernel.errors import (
    ApplicationError,
    BaseError,
    DocumentUpdateError,
    DomainError,
    ExternalServiceError,
    InfrastructureError,
    SearchError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DocumentUpdateError",
    "DomainError",
    "ExternalServiceError",
    "InfrastructureError",
    "SearchError",
    "ValidationError",
]
