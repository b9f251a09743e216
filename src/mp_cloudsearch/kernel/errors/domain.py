"""Domain errors – malformed search requests."""

from __future__ import annotations

from typing import Any

from mp_cloudsearch.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a request cannot be expressed in the query language."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class FilterSyntaxError(ValidationError):
    """A filter expression cannot be rendered as a boolean query."""

    default_code = "filter_syntax_error"

    def __init__(self, message: str, *, field: str | None = None, **kwargs: Any) -> None:
        errors = [{"field": field, "message": message}] if field is not None else None
        super().__init__(message, errors=errors, **kwargs)
        self.field = field


class InvalidSearchOptionError(ValidationError):
    """A search option (page, page size, rank, …) has an unusable value."""

    default_code = "invalid_search_option"

    def __init__(self, option: str, value: object, reason: str) -> None:
        super().__init__(
            f"Search option '{option}' has invalid value {value!r}: {reason}",
            errors=[{"option": option, "value": repr(value), "reason": reason}],
        )
        self.option = option
        self.value = value
        self.reason = reason


__all__ = [
    "DomainError",
    "FilterSyntaxError",
    "InvalidSearchOptionError",
    "ValidationError",
]
