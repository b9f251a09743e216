"""CloudSearchClient – search and document operations against one domain.

Usage::

    client = CloudSearchClient("my-domain", mode="live")
    page = client.search("donuts", filter={"and": {"is_donut": True}}, page=2)
    page.total_pages, list(page)

    client.add_item("4", {"name": "Party Pooper", "born": date(1990, 1, 1)})
    client.remove_item("4")

A client resolves its settings once, at construction: explicit arguments
win over ``CLOUDSEARCH_*`` environment variables, which win over the
defaults.  In sandbox mode (the default) nothing is sent: searches return
an empty page and document operations do nothing.

Instances hold no locks.  Changing ``search_domain``, ``aws_region``,
``api_version`` or ``mode`` while another thread is mid-request is the
caller's responsibility to avoid.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from mp_cloudsearch.adapters.http import HttpResponse, HttpxTransport, Transport
from mp_cloudsearch.application.documents import (
    DocumentBatch,
    build_add_operation,
    build_delete_operation,
)
from mp_cloudsearch.application.pagination import ResultCollection
from mp_cloudsearch.application.search import SearchOptions
from mp_cloudsearch.application.search.filters import FilterExpression
from mp_cloudsearch.application.search.rank import RankInput
from mp_cloudsearch.application.search.syntax import QuerySyntax, syntax_for
from mp_cloudsearch.application.search.url import build_query_string, document_endpoint, search_endpoint
from mp_cloudsearch.config.settings import (
    ClientMode,
    CloudSearchSettings,
    EnvSettingsLoader,
    SettingsFactory,
    SettingsLoader,
    coerce_mode,
)
from mp_cloudsearch.config.validation import MissingConfigurationError
from mp_cloudsearch.kernel.errors import (
    DocumentUpdateError,
    ExternalServiceError,
    InfrastructureError,
    SearchError,
)
from mp_cloudsearch.observability.logging import get_logger

__all__ = ["ClientMode", "CloudSearchClient"]

_log = get_logger(__name__)


class CloudSearchClient:
    """Facade over query compilation, the HTTP transport and result parsing.

    A ready-made *settings* object is copied, so setters on one client never
    reach another; the keyword arguments only feed settings resolution when
    *settings* is omitted.
    """

    def __init__(
        self,
        search_domain: str | None = None,
        aws_region: str | None = None,
        *,
        api_version: str | None = None,
        mode: ClientMode | str | None = None,
        page_size: int | None = None,
        transport: Transport | None = None,
        settings: CloudSearchSettings | None = None,
        loaders: Iterable[SettingsLoader] | None = None,
    ) -> None:
        if settings is None:
            settings = SettingsFactory.create(
                CloudSearchSettings,
                loaders=list(loaders) if loaders is not None else [EnvSettingsLoader()],
                overrides={
                    "search_domain": search_domain,
                    "aws_region": aws_region,
                    "api_version": api_version,
                    "mode": coerce_mode(mode).value if mode is not None else None,
                    "page_size": page_size,
                },
            )
        self._settings = dataclasses.replace(settings)
        self._syntax = syntax_for(settings.api_version)
        self._mode = settings.client_mode
        self._owns_transport = transport is None
        self._transport: Transport | None = transport

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def settings(self) -> CloudSearchSettings:
        return self._settings

    @property
    def search_domain(self) -> str:
        """The configured domain; raises :class:`MissingConfigurationError` when unset."""
        if not self._settings.search_domain:
            raise MissingConfigurationError(
                "search_domain",
                "pass it to CloudSearchClient or set CLOUDSEARCH_SEARCH_DOMAIN",
            )
        return self._settings.search_domain

    @search_domain.setter
    def search_domain(self, value: str | None) -> None:
        self._settings.search_domain = value

    @property
    def aws_region(self) -> str:
        return self._settings.aws_region

    @aws_region.setter
    def aws_region(self, value: str) -> None:
        self._settings.aws_region = value

    @property
    def api_version(self) -> str:
        return self._syntax.version

    @api_version.setter
    def api_version(self, value: str) -> None:
        self._syntax = syntax_for(value)
        self._settings.api_version = value

    @property
    def syntax(self) -> QuerySyntax:
        return self._syntax

    @property
    def mode(self) -> ClientMode:
        return self._mode

    @mode.setter
    def mode(self, value: ClientMode | str) -> None:
        self._mode = coerce_mode(value)
        self._settings.mode = self._mode.value

    @property
    def sandboxed(self) -> bool:
        return self._mode is ClientMode.SANDBOX

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            self._transport = HttpxTransport(timeout=self._settings.timeout)
        return self._transport

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and self._transport is not None:
            self._transport.close()
            self._transport = None

    def __enter__(self) -> "CloudSearchClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search_url(self, term: str = "", options: SearchOptions | None = None, **kwargs: Any) -> str:
        """Return the URL :meth:`search` would request, without any I/O."""
        return self._search_url(self._options(term, options, kwargs))

    def search(
        self,
        term: str = "",
        options: SearchOptions | None = None,
        *,
        filter: FilterExpression | None = None,  # noqa: A002
        page_size: int | str | None = None,
        page: int | str | None = None,
        return_fields: Iterable[str] | None = None,
        rank: RankInput | None = None,
        cursor: str | None = None,
    ) -> ResultCollection:
        """Search for *term*, optionally narrowed by a boolean *filter*.

        Returns a :class:`ResultCollection` of document ids, or of
        ``{id: {field: value}}`` when *return_fields* is given.

        Raises :class:`SearchError` on a non-200 response or when the
        transport fails.
        """
        resolved = self._options(
            term,
            options,
            {
                "filter": filter,
                "page_size": page_size,
                "page": page,
                "return_fields": return_fields,
                "rank": rank,
                "cursor": cursor,
            },
        )
        if self.sandboxed:
            _log.debug("search_sandboxed", term=resolved.term)
            return ResultCollection.sandbox(resolved.resolved_page_size(self._settings.page_size))

        url = self._search_url(resolved)
        _log.debug("search_request", url=url, api_version=self.api_version)
        response = self._send(SearchError, url, lambda: self.transport.get(url))
        if response.status_code != 200:
            raise self._failure(SearchError, url, response)

        return ResultCollection.from_response(
            response.body,
            resolved.resolved_page_size(self._settings.page_size),
            with_fields=resolved.wants_fields,
            fields_key=self._syntax.hit_fields_key,
        )

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------

    def add_item(self, doc_id: str, fields: Mapping[str, Any]) -> None:
        """Add (or replace) the document *doc_id* with *fields*.

        Raises :class:`DocumentUpdateError` when the service rejects the batch.
        """
        if self.sandboxed:
            _log.debug("add_item_sandboxed", doc_id=doc_id)
            return None
        self._submit(build_add_operation(doc_id, fields))
        return None

    def update_item(self, doc_id: str, fields: Mapping[str, Any]) -> None:
        """Same request as :meth:`add_item`; kept as its own name for callers."""
        return self.add_item(doc_id, fields)

    def remove_item(self, doc_id: str) -> None:
        """Delete *doc_id*; deleting an unknown id still succeeds."""
        if self.sandboxed:
            _log.debug("remove_item_sandboxed", doc_id=doc_id)
            return None
        self._submit(build_delete_operation(doc_id))
        return None

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _options(term: str, options: SearchOptions | None, overrides: Mapping[str, Any]) -> SearchOptions:
        given = {key: value for key, value in overrides.items() if value is not None}
        if options is None:
            return SearchOptions.build(term or "", **given)
        if given:
            raise TypeError(
                f"Pass search options either as an options object or as keywords, not both: {', '.join(sorted(given))}"
            )
        if term and options.term and term != options.term:
            raise TypeError(f"Conflicting search terms {term!r} and {options.term!r}")
        if term and not options.term:
            return dataclasses.replace(options, term=term)
        return options

    def _search_url(self, options: SearchOptions) -> str:
        endpoint = search_endpoint(
            self.search_domain, self.aws_region, self.api_version, scheme=self._settings.scheme
        )
        query = build_query_string(self._syntax, options, default_page_size=self._settings.page_size)
        return f"{endpoint}?{query}"

    def _submit(self, batch: DocumentBatch) -> None:
        url = document_endpoint(
            self.search_domain, self.aws_region, self.api_version, scheme=self._settings.scheme
        )
        _log.debug("document_batch", url=url, bytes=len(batch.documents))
        response = self._send(
            DocumentUpdateError,
            url,
            lambda: self.transport.post(url, batch.documents, batch.headers),
        )
        if not response.ok:
            raise self._failure(DocumentUpdateError, url, response)

    @staticmethod
    def _send(
        error_cls: type[ExternalServiceError],
        url: str,
        call: Callable[[], HttpResponse],
    ) -> HttpResponse:
        try:
            return call()
        except (InfrastructureError, OSError) as exc:
            _log.warning("request_failed", url=url, error=type(exc).__name__)
            raise error_cls.from_exception(url, exc) from exc

    @staticmethod
    def _failure(
        error_cls: type[ExternalServiceError],
        url: str,
        response: HttpResponse,
    ) -> ExternalServiceError:
        _log.warning("request_rejected", url=url, status_code=response.status_code)
        return error_cls.from_status(url, response.status_code, response.reason or None)
