"""The mutable accumulator behind a :class:`~fluentql.compile.builder.QueryBuilder`.

``Statement`` holds one field per clause category.  Fragment lists only ever
grow; the builder replaces the scalar and "set" fields (table, projection,
grouping, ordering, assignments, limit, offset) wholesale.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fluentql.schema.expressions import StatementKind
from fluentql.schema.fragments import HavingPredicate, JoinFragment, OrderTerm, Predicate


@dataclass
class Statement:
    """State of one SQL statement under construction.

    Attributes:
        kind: Statement kind; ``None`` until a kind method is called.
        projection: SELECT field list as given (string or list), or ``None``.
        table: Target table name, or ``None`` when not yet set.
        joins: JOIN fragments in call order.
        predicates: WHERE fragments in call order.
        assignments: Column → raw value mapping for INSERT / UPDATE.
        grouping: GROUP BY columns.
        having: HAVING fragments in call order.
        ordering: ORDER BY terms.
        limit: Raw LIMIT value.
        offset: Raw OFFSET value.
    """

    kind: StatementKind | None = None
    projection: str | list[str] | None = None
    table: str | None = None
    joins: list[JoinFragment] = field(default_factory=list)
    predicates: list[Predicate] = field(default_factory=list)
    assignments: dict[str, Any] = field(default_factory=dict)
    grouping: list[str] = field(default_factory=list)
    having: list[HavingPredicate] = field(default_factory=list)
    ordering: list[OrderTerm] = field(default_factory=list)
    limit: Any = None
    offset: Any = None
