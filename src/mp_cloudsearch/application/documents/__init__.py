"""Application documents – add/update/delete batch envelopes."""
from mp_cloudsearch.application.documents.batch import (
    CONTENT_TYPE_JSON,
    DocumentBatch,
    build_add_operation,
    build_delete_operation,
    normalize_fields,
)

__all__ = [
    "CONTENT_TYPE_JSON",
    "DocumentBatch",
    "build_add_operation",
    "build_delete_operation",
    "normalize_fields",
]
