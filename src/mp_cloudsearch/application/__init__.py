"""Application – query compilation, result pages and document batches."""

from mp_cloudsearch.application.documents import DocumentBatch, build_add_operation, build_delete_operation
from mp_cloudsearch.application.pagination import ResultCollection
from mp_cloudsearch.application.search import (
    FieldRange,
    RankSpec,
    SearchOptions,
    SortDirection,
    build_search_url,
    compile_filter,
)

__all__ = [
    "DocumentBatch",
    "FieldRange",
    "RankSpec",
    "ResultCollection",
    "SearchOptions",
    "SortDirection",
    "build_add_operation",
    "build_delete_operation",
    "build_search_url",
    "compile_filter",
]
