"""Application search – search request URL assembly."""
from __future__ import annotations

from mp_cloudsearch.application.search.options import SearchOptions
from mp_cloudsearch.application.search.syntax import QuerySyntax, escape, syntax_for
from mp_cloudsearch.config.settings.cloudsearch import DEFAULT_PAGE_SIZE
from mp_cloudsearch.observability.logging import get_logger

__all__ = [
    "build_query_string",
    "build_search_url",
    "document_endpoint",
    "search_endpoint",
]

_log = get_logger(__name__)


def search_endpoint(domain: str, region: str, api_version: str, *, scheme: str = "http") -> str:
    return f"{scheme}://search-{domain}.{region}.cloudsearch.amazonaws.com/{api_version}/search"


def document_endpoint(domain: str, region: str, api_version: str, *, scheme: str = "http") -> str:
    return f"{scheme}://doc-{domain}.{region}.cloudsearch.amazonaws.com/{api_version}/documents/batch"


def build_query_string(
    syntax: QuerySyntax,
    options: SearchOptions,
    *,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> str:
    """Render *options* as the query string (without the leading ``?``).

    Parameters appear in a fixed order: query, ``size``, ``start``,
    ``cursor``, return fields, rank.
    """
    compiled = syntax.compile_filter(options.filter)
    parts = [syntax.query_segment(options.term, compiled)]

    size = options.resolved_page_size(default_page_size)
    parts.append(f"size={size}")

    start = options.start_offset(default_page_size)
    if start is not None:
        parts.append(f"start={start}")

    if options.cursor:
        if syntax.supports_cursor:
            parts.append(f"cursor={escape(options.cursor)}")
        else:
            _log.warning("cursor_ignored", api_version=syntax.version)

    if options.return_fields:
        fields = ",".join(escape(name) for name in options.return_fields)
        parts.append(f"{syntax.return_fields_param}={fields}")

    if options.rank is not None:
        parts.append(f"{syntax.rank_param}={escape(syntax.normalize_rank(options.rank))}")

    return "&".join(parts)


def build_search_url(
    domain: str,
    region: str,
    api_version: str,
    options: SearchOptions,
    *,
    default_page_size: int = DEFAULT_PAGE_SIZE,
    scheme: str = "http",
) -> str:
    """Return the full search URL for *options* against one domain."""
    syntax = syntax_for(api_version)
    query = build_query_string(syntax, options, default_page_size=default_page_size)
    return f"{search_endpoint(domain, region, api_version, scheme=scheme)}?{query}"
