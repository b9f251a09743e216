"""Application search – per-API-version query syntax.

The two supported API versions share the filter grammar but differ in
how the free-text term and the filter travel in the query string, in
parameter names, and in how a rank is written:

==================  ========================  ==============================
                    2011-02-01 (legacy)       2013-01-01 (structured)
==================  ========================  ==============================
term + filter       ``q=term&bq=filter``      ``q=(and 'term' filter)``
                                              ``&q.parser=structured``
rank parameter      ``rank=-field``           ``sort=field desc``
return fields       ``return-fields=a,b``     ``return=a,b``
hit field data      ``hit[].data``            ``hit[].fields``
cursor paging       not supported             ``cursor=…``
==================  ========================  ==============================
"""
from __future__ import annotations

import abc
from typing import ClassVar
from urllib.parse import quote_plus

from mp_cloudsearch.application.search.filters import FilterExpression, compile_filter, quote_literal
from mp_cloudsearch.application.search.rank import RankInput, RankSpec, parse_rank
from mp_cloudsearch.config.settings.cloudsearch import (
    LEGACY_API_VERSION,
    STRUCTURED_API_VERSION,
    SUPPORTED_API_VERSIONS,
)
from mp_cloudsearch.config.validation import InvalidSettingValueError

__all__ = [
    "LegacyQuerySyntax",
    "QuerySyntax",
    "StructuredQuerySyntax",
    "escape",
    "normalize_rank",
    "syntax_for",
]


def escape(value: str) -> str:
    """Form-encode a dynamic query-string segment (space becomes ``+``)."""
    return quote_plus(value, safe="")


class QuerySyntax(abc.ABC):
    """Strategy: renders version-specific parts of a search request."""

    version: ClassVar[str]
    return_fields_param: ClassVar[str]
    rank_param: ClassVar[str]
    hit_fields_key: ClassVar[str]
    supports_cursor: ClassVar[bool] = False

    def compile_filter(self, expression: FilterExpression | None) -> str:
        return compile_filter(expression)

    @abc.abstractmethod
    def query_segment(self, term: str, compiled_filter: str) -> str:
        """Return the escaped ``q=…`` part of the query string."""

    @abc.abstractmethod
    def normalize_rank(self, rank: RankSpec) -> str:
        """Return the unescaped rank/sort value."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(version={self.version!r})"


class LegacyQuerySyntax(QuerySyntax):
    version = LEGACY_API_VERSION
    return_fields_param = "return-fields"
    rank_param = "rank"
    hit_fields_key = "data"

    def query_segment(self, term: str, compiled_filter: str) -> str:
        segment = f"q={escape(term)}"
        if compiled_filter:
            segment += f"&bq={escape(compiled_filter)}"
        return segment

    def normalize_rank(self, rank: RankSpec) -> str:
        return f"-{rank.field}" if rank.descending else rank.field


class StructuredQuerySyntax(QuerySyntax):
    version = STRUCTURED_API_VERSION
    return_fields_param = "return"
    rank_param = "sort"
    hit_fields_key = "fields"
    supports_cursor = True

    def query_segment(self, term: str, compiled_filter: str) -> str:
        if not compiled_filter:
            return f"q={escape(term)}"
        query = compiled_filter
        if term:
            query = f"(and {quote_literal(term)} {compiled_filter})"
        return f"q={escape(query)}&q.parser=structured"

    def normalize_rank(self, rank: RankSpec) -> str:
        return f"{rank.field} {rank.direction.value}"


_SYNTAXES: dict[str, QuerySyntax] = {
    LEGACY_API_VERSION: LegacyQuerySyntax(),
    STRUCTURED_API_VERSION: StructuredQuerySyntax(),
}


def syntax_for(api_version: str) -> QuerySyntax:
    """Return the query syntax strategy for *api_version*."""
    try:
        return _SYNTAXES[api_version]
    except KeyError:
        raise InvalidSettingValueError(
            "api_version",
            api_version,
            f"expected one of {', '.join(SUPPORTED_API_VERSIONS)}",
        ) from None


def normalize_rank(rank: RankInput, api_version: str) -> str:
    """Render *rank* for *api_version*, e.g. ``-price`` or ``price desc``."""
    return syntax_for(api_version).normalize_rank(parse_rank(rank))
