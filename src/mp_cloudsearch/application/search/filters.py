"""Application search – boolean filter expressions and their compiler.

A filter is written either as a tree of :class:`LogicNode` /
:class:`Condition` objects or in mapping form, where the keys ``and``,
``or`` and ``not`` introduce a logic node and every other key names a
field::

    {"or": {"is_donut": True, "and": {"fried": True, "round": ""}}}

compiles to ``(or is_donut:'true'(and fried:'true'))``.  Conditions with
an empty value are pruned, and a logic node left without content
disappears from its parent.
"""
from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias

from mp_cloudsearch.kernel.errors import FilterSyntaxError
from mp_cloudsearch.kernel.time import is_temporal, to_utc_iso

__all__ = [
    "Condition",
    "FieldRange",
    "FilterExpression",
    "FilterNode",
    "LogicNode",
    "LogicOperator",
    "ValueKind",
    "classify_value",
    "compile_filter",
    "parse_filter",
    "quote_literal",
    "render_value",
]

_RANGE_LITERAL_RE = re.compile(r"\d*\.\.\d*")


class LogicOperator(str, Enum):
    AND = "and"
    OR = "or"
    NOT = "not"


_OPERATORS = frozenset(op.value for op in LogicOperator)


class ValueKind(Enum):
    """How a condition value is rendered."""

    EMPTY = "empty"
    INTEGER = "integer"
    RANGE_LITERAL = "range_literal"
    DATE_RANGE = "date_range"
    NUMERIC_RANGE = "numeric_range"
    SCALAR = "scalar"


@dataclass(frozen=True)
class FieldRange:
    """Closed range ``[start, end]`` over numbers or dates."""

    start: Any
    end: Any

    def __post_init__(self) -> None:
        if self.start is None or self.end is None:
            raise FilterSyntaxError("A range needs both a start and an end value")
        if is_temporal(self.start) != is_temporal(self.end):
            raise FilterSyntaxError("A range cannot mix date and non-date endpoints")

    @property
    def is_temporal(self) -> bool:
        return is_temporal(self.start) or is_temporal(self.end)


@dataclass(frozen=True)
class Condition:
    """Leaf ``field:value`` restriction."""

    field: str
    value: Any

    @property
    def kind(self) -> ValueKind:
        return classify_value(self.value)


@dataclass(frozen=True)
class LogicNode:
    operator: LogicOperator
    children: tuple[Condition | LogicNode, ...] = ()


FilterNode: TypeAlias = "Condition | LogicNode"
FilterExpression: TypeAlias = "Mapping[str, Any] | Condition | LogicNode | Sequence[Condition | LogicNode]"


def classify_value(value: Any) -> ValueKind:
    if value is None or value == "":
        return ValueKind.EMPTY
    if isinstance(value, bool):
        return ValueKind.SCALAR
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, str) and _RANGE_LITERAL_RE.fullmatch(value):
        return ValueKind.RANGE_LITERAL
    if isinstance(value, FieldRange):
        return ValueKind.DATE_RANGE if value.is_temporal else ValueKind.NUMERIC_RANGE
    return ValueKind.SCALAR


def quote_literal(text: str) -> str:
    """Single-quote *text* for the query language, escaping ``\\`` and ``'``."""
    escaped = text.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def render_value(value: Any) -> str | None:
    """Render the right-hand side of ``field:value``; ``None`` for empty values."""
    kind = classify_value(value)
    match kind:
        case ValueKind.EMPTY:
            return None
        case ValueKind.INTEGER | ValueKind.RANGE_LITERAL:
            return str(value)
        case ValueKind.DATE_RANGE:
            return f"[{quote_literal(to_utc_iso(value.start))},{quote_literal(to_utc_iso(value.end))}]"
        case ValueKind.NUMERIC_RANGE:
            return f"[{value.start},{value.end}]"
    if isinstance(value, Mapping) or (
        isinstance(value, (list, set, frozenset, tuple)) and not isinstance(value, str)
    ):
        raise FilterSyntaxError(
            f"Unsupported value of type {type(value).__name__} in a filter condition"
        )
    if isinstance(value, bool):
        return quote_literal("true" if value else "false")
    return quote_literal(str(to_utc_iso(value)))


def parse_filter(terms: Mapping[str, Any]) -> tuple[Condition | LogicNode, ...]:
    """Convert the mapping form of a filter into an ordered tuple of nodes."""
    nodes: list[Condition | LogicNode] = []
    for key, value in terms.items():
        name = key.value if isinstance(key, LogicOperator) else str(key)
        if name in _OPERATORS and isinstance(value, Mapping):
            nodes.append(LogicNode(LogicOperator(name), parse_filter(value)))
            continue
        if isinstance(value, Mapping):
            raise FilterSyntaxError(
                f"Field {name!r} cannot hold a nested mapping; only and/or/not may",
                field=name,
            )
        if isinstance(value, tuple):
            if len(value) != 2:
                raise FilterSyntaxError(
                    f"Range for {name!r} needs exactly two values, got {len(value)}",
                    field=name,
                )
            value = FieldRange(*value)
        nodes.append(Condition(name, value))
    return tuple(nodes)


def _as_nodes(expression: FilterExpression | None) -> tuple[Condition | LogicNode, ...]:
    if expression is None:
        return ()
    if isinstance(expression, (Condition, LogicNode)):
        return (expression,)
    if isinstance(expression, Mapping):
        return parse_filter(expression)
    return tuple(expression)


def _render(node: Condition | LogicNode) -> str:
    if isinstance(node, Condition):
        rendered = render_value(node.value)
        return "" if rendered is None else f" {node.field}:{rendered}"
    fragment = "".join(_render(child) for child in node.children)
    if not fragment:
        return ""
    return f"({node.operator.value}{fragment})"


def compile_filter(expression: FilterExpression | None) -> str:
    """Compile *expression* into a boolean query fragment.

    Returns ``""`` when nothing survives pruning.
    """
    return "".join(_render(node) for node in _as_nodes(expression)).lstrip()
