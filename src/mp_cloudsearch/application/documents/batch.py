"""Application documents – batch-document envelopes.

The document endpoint accepts a JSON array of operations::

    [{"type": "add", "id": "4", "fields": {"name": "Party Pooper"}}]
    [{"type": "delete", "id": "13"}]
"""
from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from typing import Any

from mp_cloudsearch.kernel.errors import SerializationError
from mp_cloudsearch.kernel.time import to_utc_iso

__all__ = [
    "CONTENT_TYPE_JSON",
    "DocumentBatch",
    "build_add_operation",
    "build_delete_operation",
    "normalize_fields",
]

CONTENT_TYPE_JSON = "application/json"


@dataclasses.dataclass(frozen=True)
class DocumentBatch:
    """JSON-encoded batch plus the content type it is submitted with."""

    documents: str
    content_type: str = CONTENT_TYPE_JSON

    @property
    def headers(self) -> dict[str, str]:
        return {"Content-Type": self.content_type}

    def operations(self) -> list[dict[str, Any]]:
        """Decode the batch back into its list of operations."""
        return json.loads(self.documents)


def normalize_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *fields* ready for indexing.

    Date/time values become UTC ISO-8601 strings and ``None`` becomes
    ``""``.  The ``id`` key is copied untouched.
    """
    normalized: dict[str, Any] = {}
    for key, value in fields.items():
        if key == "id":
            normalized[key] = value
        elif value is None:
            normalized[key] = ""
        else:
            normalized[key] = to_utc_iso(value)
    return normalized


def _encode(operation: dict[str, Any]) -> DocumentBatch:
    try:
        documents = json.dumps([operation], ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"Document {operation.get('id')!r} cannot be encoded as JSON: {exc}",
            payload_type="document_batch",
            cause=exc,
        ) from exc
    return DocumentBatch(documents=documents)


def build_add_operation(doc_id: str, fields: Mapping[str, Any]) -> DocumentBatch:
    """Batch holding a single ``add`` operation for *doc_id*."""
    return _encode({"type": "add", "id": doc_id, "fields": normalize_fields(fields)})


def build_delete_operation(doc_id: str) -> DocumentBatch:
    """Batch holding a single ``delete`` operation for *doc_id*."""
    return _encode({"type": "delete", "id": doc_id})
