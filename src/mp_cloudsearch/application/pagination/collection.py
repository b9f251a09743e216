"""Application pagination – ResultCollection."""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from mp_cloudsearch.config.settings.cloudsearch import DEFAULT_PAGE_SIZE
from mp_cloudsearch.kernel.errors import SerializationError

FieldMap = Mapping[str, Any]

_FIELD_KEYS = ("fields", "data")


@dataclasses.dataclass(frozen=True)
class ResultCollection:
    """One page of search hits with computed navigation properties.

    Without requested return fields the page is an ordered sequence of
    document ids.  With return fields it maps each id to its field
    values; indexing by an id returns that mapping.
    """

    entries: tuple[str, ...] | Mapping[str, FieldMap]
    total_entries: int
    page_size: int
    hits_start: int = 0
    cursor: str | None = None

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_response(
        cls,
        body: Any,
        page_size: int,
        *,
        with_fields: bool = False,
        fields_key: str | None = None,
    ) -> "ResultCollection":
        """Build a page from a parsed search response body.

        Expects ``{"hits": {"found": int, "start": int, "hit": [...]}}``.
        """
        try:
            hits = body["hits"]
            found = int(hits["found"])
            start = int(hits.get("start", 0))
            raw_hits = list(hits.get("hit") or [])
            entries: tuple[str, ...] | Mapping[str, FieldMap]
            if with_fields:
                keys = (fields_key,) if fields_key else _FIELD_KEYS
                entries = MappingProxyType(
                    {str(hit["id"]): _hit_fields(hit, keys) for hit in raw_hits}
                )
            else:
                entries = tuple(str(hit["id"]) for hit in raw_hits)
        except (KeyError, TypeError, ValueError) as exc:
            raise SerializationError(
                f"Unexpected search response shape: {exc!r}",
                payload_type="search_response",
                cause=exc,
            ) from exc
        return cls(
            entries=entries,
            total_entries=found,
            page_size=page_size,
            hits_start=start,
            cursor=hits.get("cursor"),
        )

    @classmethod
    def sandbox(cls, page_size: int = DEFAULT_PAGE_SIZE) -> "ResultCollection":
        """Empty first page returned when no request is made."""
        return cls(entries=(), total_entries=0, page_size=page_size)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total_entries / self.page_size))

    @property
    def current_page(self) -> int:
        return self.hits_start // self.page_size + 1

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.page_size

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_fields(self) -> bool:
        return isinstance(self.entries, Mapping)

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(self.entries)

    def as_dict(self) -> dict[str, dict[str, Any]]:
        """Return ``{id: {field: value}}``; empty field maps when none were requested."""
        if isinstance(self.entries, Mapping):
            return {doc_id: dict(fields) for doc_id, fields in self.entries.items()}
        return {doc_id: {} for doc_id in self.entries}

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self.entries

    def __getitem__(self, key: int | str) -> Any:
        if isinstance(self.entries, Mapping) and isinstance(key, str):
            return self.entries[key]
        if isinstance(key, str):
            raise TypeError("string lookup needs a collection built with return fields")
        return self.ids[key]


def _hit_fields(hit: Mapping[str, Any], keys: tuple[str, ...]) -> FieldMap:
    for key in keys:
        fields = hit.get(key)
        if fields is not None:
            return MappingProxyType(dict(fields))
    return MappingProxyType({})


__all__ = ["ResultCollection"]
