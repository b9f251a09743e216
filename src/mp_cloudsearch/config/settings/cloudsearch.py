"""Config settings – CloudSearchSettings."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import ClassVar

from mp_cloudsearch.config.settings.base import Settings
from mp_cloudsearch.config.validation import InvalidSettingValueError

LEGACY_API_VERSION = "2011-02-01"
STRUCTURED_API_VERSION = "2013-01-01"
SUPPORTED_API_VERSIONS: tuple[str, ...] = (LEGACY_API_VERSION, STRUCTURED_API_VERSION)

DEFAULT_API_VERSION = STRUCTURED_API_VERSION
DEFAULT_AWS_REGION = "us-east-1"
DEFAULT_PAGE_SIZE = 10


class ClientMode(str, Enum):
    """Whether a client talks to the service or answers with canned results."""

    LIVE = "live"
    SANDBOX = "sandbox"


@dataclasses.dataclass
class CloudSearchSettings(Settings):
    """Connection settings for one search domain.

    Every field can be set from ``CLOUDSEARCH_<FIELD>`` (for instance
    ``CLOUDSEARCH_API_VERSION``).  The client defaults to sandbox mode so
    nothing reaches the network until ``mode="live"`` is chosen.
    """

    _prefix: ClassVar[str] = "CLOUDSEARCH"

    search_domain: str | None = None
    aws_region: str = DEFAULT_AWS_REGION
    api_version: str = DEFAULT_API_VERSION
    mode: str = ClientMode.SANDBOX.value
    page_size: int = DEFAULT_PAGE_SIZE
    timeout: float = 10.0
    scheme: str = "http"

    def _validate(self) -> None:
        if self.api_version not in SUPPORTED_API_VERSIONS:
            raise InvalidSettingValueError(
                "api_version",
                self.api_version,
                f"expected one of {', '.join(SUPPORTED_API_VERSIONS)}",
            )
        self.mode = coerce_mode(self.mode).value
        if self.page_size < 1:
            raise InvalidSettingValueError("page_size", self.page_size, "must be >= 1")
        if self.scheme not in ("http", "https"):
            raise InvalidSettingValueError("scheme", self.scheme, "expected 'http' or 'https'")

    @property
    def client_mode(self) -> ClientMode:
        return ClientMode(self.mode)


def coerce_mode(value: ClientMode | str) -> ClientMode:
    """Return *value* as a :class:`ClientMode`, accepting its string form."""
    if isinstance(value, ClientMode):
        return value
    try:
        return ClientMode(str(value).strip().lower())
    except ValueError as exc:
        raise InvalidSettingValueError("mode", value, "expected 'live' or 'sandbox'") from exc


__all__ = [
    "ClientMode",
    "CloudSearchSettings",
    "DEFAULT_API_VERSION",
    "DEFAULT_AWS_REGION",
    "DEFAULT_PAGE_SIZE",
    "LEGACY_API_VERSION",
    "STRUCTURED_API_VERSION",
    "SUPPORTED_API_VERSIONS",
    "coerce_mode",
]
