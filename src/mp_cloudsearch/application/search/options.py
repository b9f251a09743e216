"""Application search – SearchOptions value object."""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from mp_cloudsearch.application.search.filters import FilterExpression
from mp_cloudsearch.application.search.rank import RankInput, RankSpec, parse_rank
from mp_cloudsearch.kernel.errors import InvalidSearchOptionError

__all__ = ["SearchOptions"]


def _coerce_positive_int(option: str, value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidSearchOptionError(option, value, "expected an integer")
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidSearchOptionError(option, value, "expected an integer") from exc
    if number < 1:
        raise InvalidSearchOptionError(option, value, "must be >= 1")
    return number


@dataclass(frozen=True)
class SearchOptions:
    """Everything a search request can carry besides the domain settings.

    ``page_size`` and ``page`` accept anything ``int()`` accepts (``"20"``
    included).  ``page_size=None`` defers to the client's default.
    """

    term: str = ""
    filter: FilterExpression | None = None
    page_size: int | None = None
    page: int | None = None
    return_fields: tuple[str, ...] = field(default_factory=tuple)
    rank: RankSpec | None = None
    cursor: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "term", "" if self.term is None else str(self.term))
        object.__setattr__(self, "page_size", _coerce_positive_int("page_size", self.page_size))
        object.__setattr__(self, "page", _coerce_positive_int("page", self.page))
        if isinstance(self.return_fields, str):
            object.__setattr__(self, "return_fields", (self.return_fields,))
        else:
            object.__setattr__(self, "return_fields", tuple(str(f) for f in self.return_fields or ()))
        if self.rank is not None and not isinstance(self.rank, RankSpec):
            object.__setattr__(self, "rank", parse_rank(self.rank))  # type: ignore[arg-type]

    @classmethod
    def build(
        cls,
        term: str = "",
        *,
        filter: FilterExpression | None = None,  # noqa: A002
        page_size: int | str | None = None,
        page: int | str | None = None,
        return_fields: Iterable[str] | None = None,
        rank: RankInput | None = None,
        cursor: str | None = None,
    ) -> "SearchOptions":
        """Keyword-friendly constructor used by the client facade."""
        return cls(
            term=term,
            filter=filter,
            page_size=page_size,  # type: ignore[arg-type]
            page=page,  # type: ignore[arg-type]
            return_fields=tuple(return_fields or ()),
            rank=rank,  # type: ignore[arg-type]
            cursor=cursor,
        )

    @property
    def wants_fields(self) -> bool:
        return bool(self.return_fields)

    def resolved_page_size(self, default: int) -> int:
        return self.page_size if self.page_size is not None else default

    def start_offset(self, default_page_size: int) -> int | None:
        """``(page - 1) * size`` when a page was requested, else ``None``."""
        if self.page is None:
            return None
        return (self.page - 1) * self.resolved_page_size(default_page_size)
