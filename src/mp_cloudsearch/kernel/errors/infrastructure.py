"""Infrastructure errors – transport failures and service responses."""

from __future__ import annotations

from typing import Any

from mp_cloudsearch.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a request validation error."""

    default_code = "infrastructure_error"


class TransportError(InfrastructureError):
    """The HTTP collaborator could not complete the exchange."""

    default_code = "transport_error"

    def __init__(
        self,
        url: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Request to '{url}' failed", **kwargs)
        self.url = url


class TimeoutError(TransportError):  # noqa: A001
    """An HTTP exchange exceeded its deadline."""

    default_code = "infrastructure_timeout"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class ExternalServiceError(InfrastructureError):
    """The search service failed or returned an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        url: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        status_message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Request to '{url}' failed", **kwargs)
        self.url = url
        self.status_code = status_code
        self.status_message = status_message

    @classmethod
    def from_status(cls, url: str, status_code: int, status_message: str | None = None) -> "ExternalServiceError":
        """Build the error for a response with an unexpected status code."""
        reason = f" {status_message}" if status_message else ""
        return cls(
            url,
            f"Received error code {status_code}{reason} from {url}",
            status_code=status_code,
            status_message=status_message,
            detail={"url": url, "status_code": status_code, "status_message": status_message},
        )

    @classmethod
    def from_exception(cls, url: str, exc: BaseException) -> "ExternalServiceError":
        """Wrap a transport-level exception, keeping it as ``__cause__``."""
        error_class = type(exc).__name__
        error_message = exc.message if isinstance(exc, BaseError) else str(exc)
        return cls(
            url,
            f"{error_class}: {error_message} (url: {url})",
            detail={"url": url, "error_class": error_class, "error_message": error_message},
            cause=exc,
        )


class SearchError(ExternalServiceError):
    """A search request failed."""

    default_code = "search_error"


class DocumentUpdateError(ExternalServiceError):
    """A document batch (add, update or remove) failed."""

    default_code = "document_update_error"


__all__ = [
    "DocumentUpdateError",
    "ExternalServiceError",
    "InfrastructureError",
    "SearchError",
    "SerializationError",
    "TimeoutError",
    "TransportError",
]
