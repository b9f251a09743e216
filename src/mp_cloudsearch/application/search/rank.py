"""Application search – RankSpec and SortDirection."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from mp_cloudsearch.kernel.errors import InvalidSearchOptionError

__all__ = ["RankInput", "RankSpec", "SortDirection", "parse_rank"]


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class RankSpec:
    """Field plus direction controlling result order."""

    field: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


RankInput = RankSpec | str | Sequence[object]


def _direction(value: object) -> SortDirection:
    if isinstance(value, SortDirection):
        return value
    try:
        return SortDirection(str(value).strip().lower())
    except ValueError as exc:
        raise InvalidSearchOptionError("rank", value, "direction must be 'asc' or 'desc'") from exc


def parse_rank(rank: RankInput) -> RankSpec:
    """Normalise a rank option.

    Accepts a :class:`RankSpec`, a bare field name (ascending), or a
    ``(field,)`` / ``(field, direction)`` sequence.
    """
    if isinstance(rank, RankSpec):
        return rank
    if isinstance(rank, str):
        field, direction = rank, SortDirection.ASC
    else:
        parts = list(rank)
        if not 1 <= len(parts) <= 2:
            raise InvalidSearchOptionError("rank", rank, "expected a field and an optional direction")
        field = str(parts[0])
        direction = _direction(parts[1]) if len(parts) == 2 and parts[1] is not None else SortDirection.ASC
    if not field.strip():
        raise InvalidSearchOptionError("rank", rank, "field name is empty")
    return RankSpec(field=field, direction=direction)
