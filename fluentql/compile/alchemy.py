"""Quoter backed by a SQLAlchemy dialect.

Install the optional dependency before using this module::

    pip install "fluentql[sqlalchemy]"

Example::

    from sqlalchemy import create_engine
    from fluentql import QueryBuilder
    from fluentql.compile.alchemy import SQLAlchemyQuoter

    engine = create_engine("sqlite:///app.db")
    sql = (
        QueryBuilder(SQLAlchemyQuoter(engine))
        .select("*")
        .from_("users")
        .where("name", "O'Brien")
        .assemble()
    )
    with engine.connect() as conn:
        rows = conn.exec_driver_sql(sql).all()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from fluentql.compile.base import Quoter
from fluentql.errors import QuoterConfigError

if TYPE_CHECKING:
    from sqlalchemy.engine import Dialect


class SQLAlchemyQuoter(Quoter):
    """Quotes values with the string literal rules of a SQLAlchemy dialect.

    Args:
        bind: An :class:`~sqlalchemy.engine.Engine`,
            :class:`~sqlalchemy.engine.Connection` or
            :class:`~sqlalchemy.engine.Dialect`.  Anything exposing a
            ``dialect`` attribute is unwrapped to its dialect.

    Raises:
        ImportError: If ``sqlalchemy`` is not installed.
        QuoterConfigError: If ``bind`` does not resolve to a dialect.
    """

    def __init__(self, bind: Any) -> None:
        try:
            from sqlalchemy import String
            from sqlalchemy.engine import Dialect as _Dialect
        except ImportError as exc:
            raise ImportError(
                "SQLAlchemy is required for SQLAlchemyQuoter. "
                'Install it with: pip install "fluentql[sqlalchemy]"'
            ) from exc

        dialect = getattr(bind, "dialect", bind)
        if not isinstance(dialect, _Dialect):
            raise QuoterConfigError(
                f"Cannot resolve a SQLAlchemy dialect from {type(bind).__name__}.",
                name="sqlalchemy",
            )
        self._dialect: Dialect = dialect
        self._process: Callable[[str], str] = String().literal_processor(dialect=dialect)

    @property
    def dialect(self) -> Dialect:
        return self._dialect

    @property
    def dialect_name(self) -> str:
        return self._dialect.name

    def quote_text(self, text: str) -> str:
        return self._process(text)
