"""fluentQL schema models: statement fragments, enums and builder options."""
from fluentql.schema.expressions import (
    DIFFERENT,
    EQUALS,
    Combinator,
    StatementKind,
)
from fluentql.schema.fragments import (
    HavingPredicate,
    JoinFragment,
    OrderTerm,
    Predicate,
)
from fluentql.schema.options import BuilderOptions
from fluentql.schema.statement import Statement

__all__ = [
    "DIFFERENT",
    "EQUALS",
    "Combinator",
    "StatementKind",
    "HavingPredicate",
    "JoinFragment",
    "OrderTerm",
    "Predicate",
    "BuilderOptions",
    "Statement",
]
