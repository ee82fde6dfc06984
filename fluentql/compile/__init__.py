"""fluentQL assembly layer: quoters, clause renderers and the statement builder."""
from fluentql.compile.ansi import AnsiQuoter
from fluentql.compile.base import CallableQuoter, Quoter
from fluentql.compile.builder import QueryBuilder
from fluentql.compile.mysql import MySQLQuoter
from fluentql.compile.registry import QuoterFactory

__all__ = [
    "AnsiQuoter",
    "CallableQuoter",
    "Quoter",
    "QueryBuilder",
    "MySQLQuoter",
    "QuoterFactory",
]
