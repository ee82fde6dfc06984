"""Clause-level SQL renderers.

Each class renders exactly one clause of a
:class:`~fluentql.schema.statement.Statement`.  A renderer returns ``None``
when its clause is absent, and the clause text otherwise.  The text may be
partly empty (``FROM `` when no table was set): the builder follows every
present clause with a single space and strips the tail once at the end, so
an empty piece still occupies its slot.

None of the renderers mutate the statement, and none of them validate it:
missing pieces (no table, a join without columns) render as empty names.

Classes
-------
KindClauseBuilder         — ``SELECT`` / ``INSERT INTO`` / ``UPDATE`` / ``DELETE``
ProjectionClauseBuilder   — ``<field>, <field>``
TableClauseBuilder        — ``FROM <table>`` / ``<table>``
AssignmentClauseBuilder   — ``(<cols>) VALUES (…)`` / ``SET <col> = …``
JoinClauseBuilder         — ``<type> JOIN … ON …``
ConditionClauseBuilder    — ``WHERE …`` / ``HAVING …``
GroupByClauseBuilder      — ``GROUP BY …``
OrderByClauseBuilder      — ``ORDER BY …``
PaginationClauseBuilder   — ``LIMIT … OFFSET …``
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Optional, Union

from fluentql.compile.context import AssemblyContext
from fluentql.schema.expressions import FROM_KINDS, StatementKind
from fluentql.schema.fragments import HavingPredicate, JoinFragment, Predicate
from fluentql.schema.statement import Statement

Condition = Union[Predicate, HavingPredicate]


class KindClauseBuilder:
    """Builds the leading statement keyword."""

    def build(self, stmt: Statement) -> Optional[str]:
        if stmt.kind is None:
            return None
        return stmt.kind.keyword


class ProjectionClauseBuilder:
    """Builds the field list that follows ``SELECT``.

    Only SELECT statements carry a projection; fields are stripped of
    surrounding whitespace one by one.
    """

    def build(self, stmt: Statement) -> Optional[str]:
        if stmt.kind is not StatementKind.SELECT or not stmt.projection:
            return None
        if isinstance(stmt.projection, str):
            return stmt.projection.strip()
        return ", ".join(f.strip() for f in stmt.projection)


class TableClauseBuilder:
    """Builds the target table clause.

    SELECT and DELETE read ``FROM <table>``; INSERT and UPDATE name the
    table directly after their keyword.
    """

    def build(self, stmt: Statement) -> Optional[str]:
        if stmt.kind is None:
            return None
        table = stmt.table or ""
        if stmt.kind in FROM_KINDS:
            return f"FROM {table}"
        return table


class AssignmentClauseBuilder:
    """Builds the INSERT column/value lists or the UPDATE ``SET`` list.

    Values are quoted here, at render time, and always as strings.
    """

    def __init__(self, ctx: AssemblyContext) -> None:
        self._ctx = ctx

    def build(self, stmt: Statement) -> Optional[str]:
        if not stmt.assignments:
            return None
        quote = self._ctx.quoter.quote
        if stmt.kind is StatementKind.INSERT:
            columns = ", ".join(stmt.assignments)
            values = ", ".join(quote(v) for v in stmt.assignments.values())
            return f"({columns}) VALUES ({values})"
        if stmt.kind is StatementKind.UPDATE:
            pairs = ", ".join(f"{col} = {quote(v)}" for col, v in stmt.assignments.items())
            return f"SET {pairs}"
        return None


class JoinClauseBuilder:
    """Builds a single ``<type> JOIN … ON …`` fragment.

    A join without its own right-hand table compares against the statement's
    main table, looked up at render time so ``from_()`` may come later.
    """

    def build(self, join: JoinFragment, main_table: Optional[str]) -> str:
        right_table = join.right_table if join.right_table is not None else (main_table or "")
        left = f"{join.table}.{join.left_column}"
        right = f"{right_table}.{join.right_column}"
        return f"{join.join_type} JOIN {join.table} ON {left} {join.operator} {right}"


class ConditionClauseBuilder:
    """Builds a ``WHERE`` or ``HAVING`` clause from its fragments.

    The first fragment's combinator is never emitted; every later one is
    prefixed with its own combinator.

    Args:
        keyword: Clause keyword (``WHERE`` or ``HAVING``).
    """

    def __init__(self, keyword: str) -> None:
        self._keyword = keyword

    def build(self, conditions: Sequence[Condition]) -> Optional[str]:
        if not conditions:
            return None
        first, *rest = conditions
        parts = [self._keyword, first.render()]
        for cond in rest:
            parts.append(f"{cond.combinator.value} {cond.render()}")
        return " ".join(parts)


class GroupByClauseBuilder:
    """Builds the ``GROUP BY`` clause."""

    def build(self, stmt: Statement) -> Optional[str]:
        if not stmt.grouping:
            return None
        return f"GROUP BY {', '.join(stmt.grouping)}"


class OrderByClauseBuilder:
    """Builds the ``ORDER BY`` clause."""

    def build(self, stmt: Statement) -> Optional[str]:
        if not stmt.ordering:
            return None
        return f"ORDER BY {', '.join(term.render() for term in stmt.ordering)}"


class PaginationClauseBuilder:
    """Builds ``LIMIT`` and ``OFFSET``; ``OFFSET`` only follows a ``LIMIT``."""

    def build(self, stmt: Statement) -> Optional[str]:
        if stmt.limit is None:
            return None
        if stmt.offset is None:
            return f"LIMIT {stmt.limit}"
        return f"LIMIT {stmt.limit} OFFSET {stmt.offset}"
