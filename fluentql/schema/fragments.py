"""Pydantic models for the clause fragments a statement accumulates.

Every fragment is immutable once created.  The builder appends fragments to
plain lists, and the clause renderers read them back in insertion order, so
rendering a statement never changes it.

Predicate values are stored already rendered: normalisation and quoting
happen when the fragment is created, not when the statement is assembled.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from fluentql.schema.expressions import EQUALS, Combinator


class JoinFragment(BaseModel):
    """A single ``JOIN … ON …`` entry.

    Attributes:
        table: Table being joined; also qualifies ``left_column``.
        right_table: Table qualifying ``right_column``.  ``None`` means the
            statement's main table, resolved at render time.
        left_column: Column on ``table``.  Empty when no columns were given.
        right_column: Column on ``right_table``.  Empty when no columns were
            given.
        operator: Comparison operator between the two columns.
        join_type: Join keyword prefix (``INNER``, ``LEFT``, …), verbatim.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    table: str
    right_table: str | None = None
    left_column: str = ""
    right_column: str = ""
    operator: str = EQUALS
    join_type: str = "INNER"


class Predicate(BaseModel):
    """One WHERE condition plus its connective to the previous condition.

    Attributes:
        combinator: ``AND`` / ``OR``; never rendered on the first predicate.
        column: Left-hand column expression, verbatim.
        operator: Comparison operator after NULL rewriting.
        value: Rendered right-hand literal (``NULL``, ``TRUE``, ``5``,
            ``'text'`` …).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    combinator: Combinator = Combinator.AND
    column: str
    operator: str = EQUALS
    value: str

    def render(self) -> str:
        return f"{self.column} {self.operator} {self.value}"


class HavingPredicate(BaseModel):
    """One HAVING condition plus its connective to the previous condition.

    Attributes:
        combinator: ``AND`` / ``OR``; never rendered on the first entry.
        expression: SQL boolean expression with any placeholder already
            substituted.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    combinator: Combinator = Combinator.AND
    expression: str

    def render(self) -> str:
        return self.expression


class OrderTerm(BaseModel):
    """A single ORDER BY entry.

    Attributes:
        column: Column expression to order by.
        direction: Direction keyword passed through untouched; empty means
            the engine default.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    column: str
    direction: str = ""

    def render(self) -> str:
        if self.direction:
            return f"{self.column} {self.direction}"
        return self.column
