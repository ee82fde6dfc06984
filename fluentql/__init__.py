"""fluentQL – a fluent SQL statement assembler.

Describe a SELECT / INSERT / UPDATE / DELETE through chained calls and get
the SQL text back.  Values are inlined into the text through a quoting
capability; executing the statement is left to the caller.

Public API
----------
``QueryBuilder``
    The statement builder.  ``select()`` / ``insert()`` / ``update()`` /
    ``delete()`` pick the kind, ``from_()``, ``join()``, ``where()``,
    ``values()``, ``group_by()``, ``having()``, ``order_by()``, ``limit()``
    and ``offset()`` configure it, ``assemble()`` (or ``str()``) renders it.

``query``
    Shorthand for ``QueryBuilder(...)``.

Re-exported types
-----------------
``Quoter`` and the built-in quoters, ``QuoterFactory``, ``BuilderOptions``,
the fragment models, ``StatementKind``, and all error classes.

Extensibility
-------------
New quoters can be registered via::

    from fluentql.compile.registry import QuoterFactory

    @QuoterFactory.register("oracle")
    class OracleQuoter(Quoter):
        ...

After registration, ``BuilderOptions(quoter="oracle")`` picks it up.
"""

from __future__ import annotations

from typing import Optional

from fluentql.compile.ansi import AnsiQuoter
from fluentql.compile.base import CallableQuoter, Quoter
from fluentql.compile.builder import QueryBuilder, QuoterLike
from fluentql.compile.mysql import MySQLQuoter
from fluentql.compile.registry import QuoterFactory
from fluentql.errors import (
    AlreadySetError,
    FluentQLError,
    NotAllowedError,
    QuoterConfigError,
    StatementError,
)
from fluentql.logger import get_logger, setup_logging
from fluentql.schema.expressions import DIFFERENT, EQUALS, Combinator, StatementKind
from fluentql.schema.fragments import HavingPredicate, JoinFragment, OrderTerm, Predicate
from fluentql.schema.options import BuilderOptions

# ---------------------------------------------------------------------------
# Register built-in quoters with QuoterFactory
# ---------------------------------------------------------------------------

QuoterFactory.register_class("ansi", AnsiQuoter)
QuoterFactory.register_class("mysql", MySQLQuoter)

__all__ = [
    # Builder
    "query",
    "QueryBuilder",
    "BuilderOptions",
    # Quoting
    "Quoter",
    "AnsiQuoter",
    "MySQLQuoter",
    "CallableQuoter",
    "QuoterFactory",
    # Fragments and enums
    "StatementKind",
    "Combinator",
    "EQUALS",
    "DIFFERENT",
    "JoinFragment",
    "Predicate",
    "HavingPredicate",
    "OrderTerm",
    # Logging
    "get_logger",
    "setup_logging",
    # Errors
    "FluentQLError",
    "StatementError",
    "AlreadySetError",
    "NotAllowedError",
    "QuoterConfigError",
]


def query(
    quoter: Optional[QuoterLike] = None,
    options: Optional[BuilderOptions] = None,
) -> QueryBuilder:
    """Return a fresh :class:`QueryBuilder`.

    Example::

        sql = fluentql.query().select("*").from_("foo").where("bar", 1).assemble()
        # SELECT * FROM foo WHERE bar = 1

    Args:
        quoter: Quoting capability, or a plain ``fn(text) -> str``.
        options: Optional builder options.

    Returns:
        An empty :class:`QueryBuilder`.
    """
    return QueryBuilder(quoter, options)
