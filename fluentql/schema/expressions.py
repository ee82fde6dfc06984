"""Constants and enums shared by the statement builder and its renderers."""

from __future__ import annotations

from enum import Enum

# ---------------------------------------------------------------------------
# Comparison operators with special NULL handling
# ---------------------------------------------------------------------------

#: Default comparison operator for predicates and joins.
EQUALS = "="

#: ANSI inequality operator.
DIFFERENT = "<>"


# ---------------------------------------------------------------------------
# Statement kind
# ---------------------------------------------------------------------------


class StatementKind(str, Enum):
    """The four statement kinds a builder can produce."""

    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"

    @property
    def keyword(self) -> str:
        """Leading SQL keyword(s) emitted for this kind."""
        return _KEYWORDS[self]


_KEYWORDS: dict[StatementKind, str] = {
    StatementKind.SELECT: "SELECT",
    StatementKind.INSERT: "INSERT INTO",
    StatementKind.UPDATE: "UPDATE",
    StatementKind.DELETE: "DELETE",
}

#: Kinds whose table clause is introduced by ``FROM``.
FROM_KINDS: frozenset[StatementKind] = frozenset(
    {StatementKind.SELECT, StatementKind.DELETE}
)

#: Kinds that accept column assignments through ``values()``.
ASSIGNMENT_KINDS: frozenset[StatementKind] = frozenset(
    {StatementKind.INSERT, StatementKind.UPDATE}
)


# ---------------------------------------------------------------------------
# Logical combinators
# ---------------------------------------------------------------------------


class Combinator(str, Enum):
    """Logical connective joining a predicate to the one before it."""

    AND = "AND"
    OR = "OR"

    @classmethod
    def from_additive(cls, additive: bool) -> Combinator:
        return cls.AND if additive else cls.OR
