"""Application search – filter compiler, rank, options and URL assembly."""
from mp_cloudsearch.application.search.filters import (
    Condition,
    FieldRange,
    LogicNode,
    LogicOperator,
    ValueKind,
    classify_value,
    compile_filter,
    parse_filter,
)
from mp_cloudsearch.application.search.geography import coordinate_box, degrees_to_int, int_to_degrees
from mp_cloudsearch.application.search.options import SearchOptions
from mp_cloudsearch.application.search.rank import RankSpec, SortDirection, parse_rank
from mp_cloudsearch.application.search.syntax import (
    LegacyQuerySyntax,
    QuerySyntax,
    StructuredQuerySyntax,
    normalize_rank,
    syntax_for,
)
from mp_cloudsearch.application.search.url import (
    build_query_string,
    build_search_url,
    document_endpoint,
    search_endpoint,
)

__all__ = [
    "Condition",
    "FieldRange",
    "LegacyQuerySyntax",
    "LogicNode",
    "LogicOperator",
    "QuerySyntax",
    "RankSpec",
    "SearchOptions",
    "SortDirection",
    "StructuredQuerySyntax",
    "ValueKind",
    "build_query_string",
    "build_search_url",
    "classify_value",
    "compile_filter",
    "coordinate_box",
    "degrees_to_int",
    "document_endpoint",
    "int_to_degrees",
    "normalize_rank",
    "parse_filter",
    "parse_rank",
    "search_endpoint",
    "syntax_for",
]
