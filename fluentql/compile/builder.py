"""The fluent statement builder.

``QueryBuilder`` is the top-level object of the package.  Its configuration
methods record clause fragments on a
:class:`~fluentql.schema.statement.Statement` and return the builder itself,
so calls chain; :meth:`QueryBuilder.assemble` renders the accumulated state
to SQL text through the clause renderers.

Sub-builder wiring
------------------
QueryBuilder
  ├── ValueNormalizer           (expression_builder.py)
  ├── PredicateBuilder          (expression_builder.py)
  ├── KindClauseBuilder         (clause_builders.py)
  ├── ProjectionClauseBuilder   (clause_builders.py)
  ├── TableClauseBuilder        (clause_builders.py)
  ├── AssignmentClauseBuilder   (clause_builders.py)
  ├── JoinClauseBuilder         (clause_builders.py)
  ├── ConditionClauseBuilder    (clause_builders.py, WHERE and HAVING)
  ├── GroupByClauseBuilder      (clause_builders.py)
  ├── OrderByClauseBuilder      (clause_builders.py)
  └── PaginationClauseBuilder   (clause_builders.py)

Errors
------
Only two calls can fail, and both fail immediately rather than at render
time: setting the statement kind twice raises
:class:`~fluentql.errors.AlreadySetError`, and ``values()`` on anything but
INSERT / UPDATE raises :class:`~fluentql.errors.NotAllowedError`.  All other
incomplete configurations render best-effort text.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Optional, Union

from fluentql.compile.base import CallableQuoter, Quoter
from fluentql.compile.clause_builders import (
    AssignmentClauseBuilder,
    ConditionClauseBuilder,
    GroupByClauseBuilder,
    JoinClauseBuilder,
    KindClauseBuilder,
    OrderByClauseBuilder,
    PaginationClauseBuilder,
    ProjectionClauseBuilder,
    TableClauseBuilder,
)
from fluentql.compile.context import AssemblyContext
from fluentql.compile.expression_builder import PredicateBuilder, ValueNormalizer, as_list
from fluentql.compile.registry import QuoterFactory
from fluentql.errors import AlreadySetError, NotAllowedError
from fluentql.logger import get_logger
from fluentql.schema.expressions import ASSIGNMENT_KINDS, StatementKind
from fluentql.schema.fragments import HavingPredicate, JoinFragment, OrderTerm, Predicate
from fluentql.schema.options import BuilderOptions
from fluentql.schema.statement import Statement

logger = get_logger(__name__)

QuoterLike = Union[Quoter, Callable[[str], str]]

# Distinguishes "no value passed" from an explicit None in having().
_MISSING: Any = object()


class QueryBuilder:
    """Builds one SQL statement through chained calls.

    Args:
        quoter: Quoting capability for inlined string literals.  A plain
            callable is wrapped in :class:`~fluentql.compile.base.CallableQuoter`.
            Defaults to the quoter named by ``options.quoter``.
        options: Builder options; defaults to ``BuilderOptions()``.

    Example::

        sql = (
            QueryBuilder()
            .select(["id", "name"])
            .from_("users")
            .where("active", True)
            .order_by("name")
            .limit(10)
            .assemble()
        )
        # SELECT id, name FROM users WHERE active = TRUE ORDER BY name LIMIT 10
    """

    def __init__(
        self,
        quoter: Optional[QuoterLike] = None,
        options: Optional[BuilderOptions] = None,
    ) -> None:
        options = options or BuilderOptions()
        self._ctx = AssemblyContext(quoter=self._resolve_quoter(quoter, options), options=options)
        self._stmt = Statement()
        self._predicates = PredicateBuilder(self._ctx, ValueNormalizer(self._ctx))

        self._kind_clause = KindClauseBuilder()
        self._projection_clause = ProjectionClauseBuilder()
        self._table_clause = TableClauseBuilder()
        self._assignment_clause = AssignmentClauseBuilder(self._ctx)
        self._join_clause = JoinClauseBuilder()
        self._where_clause = ConditionClauseBuilder("WHERE")
        self._group_by_clause = GroupByClauseBuilder()
        self._having_clause = ConditionClauseBuilder("HAVING")
        self._order_by_clause = OrderByClauseBuilder()
        self._pagination_clause = PaginationClauseBuilder()

    @staticmethod
    def _resolve_quoter(quoter: Optional[QuoterLike], options: BuilderOptions) -> Quoter:
        if quoter is None:
            return QuoterFactory.create(options.quoter)
        if isinstance(quoter, Quoter):
            return quoter
        return CallableQuoter(quoter)

    # ------------------------------------------------------------------
    # Statement kind
    # ------------------------------------------------------------------

    def set_kind(self, kind: Union[StatementKind, str]) -> QueryBuilder:
        """Set the statement kind.

        Raises:
            AlreadySetError: If a kind was already set, even the same one.
            ValueError: If ``kind`` is not a known statement kind.
        """
        requested = StatementKind(kind)
        current = self._stmt.kind
        if current is not None:
            logger.debug("Rejected kind %s: already %s", requested.value, current.value)
            raise AlreadySetError(current.value, requested.value)
        self._stmt.kind = requested
        return self

    def select(self, fields: Union[str, Sequence[str], None] = None) -> QueryBuilder:
        """Start a SELECT; ``fields`` becomes the projection when non-empty."""
        self.set_kind(StatementKind.SELECT)
        if fields:
            self._stmt.projection = fields if isinstance(fields, str) else list(fields)
        return self

    def insert(self) -> QueryBuilder:
        return self.set_kind(StatementKind.INSERT)

    def update(self) -> QueryBuilder:
        return self.set_kind(StatementKind.UPDATE)

    def delete(self) -> QueryBuilder:
        return self.set_kind(StatementKind.DELETE)

    # ------------------------------------------------------------------
    # Table and joins
    # ------------------------------------------------------------------

    def from_(self, table: str) -> QueryBuilder:
        """Set the target table; used by every statement kind."""
        self._stmt.table = table
        return self

    table = from_

    def join(
        self,
        table: Union[str, Sequence[str]],
        columns: Optional[Sequence[str]] = None,
        operator: Optional[str] = None,
        join_type: Optional[str] = None,
    ) -> QueryBuilder:
        """Append a JOIN.

        Args:
            table: Table to join.  A ``[joined, other]`` pair compares the
                joined table against ``other`` (a table joined earlier)
                instead of the statement's main table.
            columns: ``[joined_column, other_column]``.  When omitted the
                ON clause is rendered with empty column names.
            operator: Comparison between the two columns.
            join_type: Keyword placed before ``JOIN``, verbatim.
        """
        if isinstance(table, str):
            own_table, right_table = table, None
        else:
            tables = list(table)
            own_table = tables[0] if tables else ""
            right_table = tables[-1] if len(tables) > 1 else None

        left_column = right_column = ""
        if isinstance(columns, (list, tuple)):
            if len(columns) > 0:
                left_column = str(columns[0])
            if len(columns) > 1:
                right_column = str(columns[1])

        options = self._ctx.options
        self._stmt.joins.append(
            JoinFragment(
                table=own_table,
                right_table=right_table,
                left_column=left_column,
                right_column=right_column,
                operator=options.default_operator if operator is None else operator,
                join_type=options.default_join_type if join_type is None else join_type,
            )
        )
        return self

    # ------------------------------------------------------------------
    # WHERE
    # ------------------------------------------------------------------

    def where(
        self,
        column: str,
        value: Any,
        operator: Optional[str] = None,
        additive: bool = True,
    ) -> QueryBuilder:
        """Append a WHERE condition.

        ``None`` renders as ``NULL`` with the operator rewritten to ``IS`` (for
        ``=``) or ``IS NOT`` (anything else); booleans render as ``TRUE`` /
        ``FALSE``; numbers and numeric strings are inlined unquoted; anything
        else is quoted.

        Args:
            column: Left-hand column expression.
            value: Raw value to compare against.
            operator: Comparison operator; defaults to ``=``.
            additive: ``AND`` when True, ``OR`` when False.  Ignored for the
                first condition.
        """
        op = self._ctx.options.default_operator if operator is None else operator
        self._stmt.predicates.append(self._predicates.where(column, value, op, additive))
        return self

    def or_where(self, column: str, value: Any, operator: Optional[str] = None) -> QueryBuilder:
        """Append a WHERE condition joined with ``OR``."""
        return self.where(column, value, operator, additive=False)

    # ------------------------------------------------------------------
    # INSERT / UPDATE values
    # ------------------------------------------------------------------

    def values(self, values: Mapping[str, Any]) -> QueryBuilder:
        """Set the column assignments of an INSERT or UPDATE.

        Values are kept raw and quoted as strings when the statement is
        assembled.

        Raises:
            NotAllowedError: If the statement is not an INSERT or UPDATE.
        """
        kind = self._stmt.kind
        if kind not in ASSIGNMENT_KINDS:
            kind_name = kind.value if kind is not None else None
            logger.debug("Rejected values() for kind %s", kind_name)
            raise NotAllowedError("values", kind_name)
        self._stmt.assignments = dict(values)
        return self

    # ------------------------------------------------------------------
    # GROUP BY / HAVING
    # ------------------------------------------------------------------

    def group_by(self, fields: Union[str, Sequence[str]]) -> QueryBuilder:
        self._stmt.grouping = [str(field) for field in as_list(fields)]
        return self

    def having(
        self,
        expression: Union[str, Sequence[str]],
        value: Any = _MISSING,
        additive: bool = True,
    ) -> QueryBuilder:
        """Append one or more HAVING conditions.

        Each expression is a SQL boolean expression.  When ``value`` is given
        every placeholder (``?`` by default) in the expression is replaced by
        the quoted value; a sequence of values pairs up with a sequence of
        expressions by position, and unpaired entries are dropped.
        """
        values = None if value is _MISSING else as_list(value)
        self._stmt.having.extend(self._predicates.having(expression, values, additive))
        return self

    # ------------------------------------------------------------------
    # ORDER BY / LIMIT / OFFSET
    # ------------------------------------------------------------------

    def order_by(
        self,
        fields: Union[str, Sequence[str]],
        directions: Union[str, Sequence[Optional[str]], None] = None,
    ) -> QueryBuilder:
        """Set the ordering.

        Fields and directions pair up by position and unpaired entries are
        dropped.  Omitting ``directions`` counts as a single empty direction,
        so only the first field is kept.  Directions are emitted exactly as
        given.
        """
        self._stmt.ordering = [
            OrderTerm(column=str(col), direction=direction or "")
            for col, direction in zip(as_list(fields), as_list(directions))
        ]
        return self

    def limit(self, value: Any) -> QueryBuilder:
        self._stmt.limit = value
        return self

    def offset(self, value: Any) -> QueryBuilder:
        self._stmt.offset = value
        return self

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def kind(self) -> Optional[StatementKind]:
        return self._stmt.kind

    @property
    def table_name(self) -> Optional[str]:
        return self._stmt.table

    @property
    def quoter(self) -> Quoter:
        return self._ctx.quoter

    @property
    def joins(self) -> list[JoinFragment]:
        return list(self._stmt.joins)

    @property
    def predicates(self) -> list[Predicate]:
        return list(self._stmt.predicates)

    @property
    def having_predicates(self) -> list[HavingPredicate]:
        return list(self._stmt.having)

    @property
    def ordering(self) -> list[OrderTerm]:
        return list(self._stmt.ordering)

    @property
    def assignments(self) -> dict[str, Any]:
        return dict(self._stmt.assignments)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def assemble(self) -> str:
        """Render the statement to SQL text.

        Rendering reads the accumulated state without changing it, so it can
        be repeated any number of times.

        Returns:
            SQL with single spaces between clauses and no trailing whitespace.
        """
        stmt = self._stmt
        parts: list[Optional[str]] = [
            self._kind_clause.build(stmt),
            self._projection_clause.build(stmt),
            self._table_clause.build(stmt),
            self._assignment_clause.build(stmt),
        ]
        parts.extend(self._join_clause.build(j, stmt.table) for j in stmt.joins)
        parts.append(self._where_clause.build(stmt.predicates))
        parts.append(self._group_by_clause.build(stmt))
        parts.append(self._having_clause.build(stmt.having))
        parts.append(self._order_by_clause.build(stmt))
        parts.append(self._pagination_clause.build(stmt))

        sql = "".join(f"{part} " for part in parts if part is not None).rstrip()
        logger.debug("Assembled SQL: %s", sql)
        return sql

    def __str__(self) -> str:
        return self.assemble()

    def __repr__(self) -> str:
        kind = self._stmt.kind.value if self._stmt.kind is not None else None
        return f"<QueryBuilder kind={kind!r} table={self._stmt.table!r}>"
