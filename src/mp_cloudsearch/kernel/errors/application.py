"""Application-layer errors – client usage and configuration."""

from __future__ import annotations

from mp_cloudsearch.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
