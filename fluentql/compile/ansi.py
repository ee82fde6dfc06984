"""ANSI SQL quoter."""
from __future__ import annotations

from fluentql.compile.base import Quoter


class AnsiQuoter(Quoter):
    """Quotes values as standard SQL string literals.

    Embedded single quotes are doubled; nothing else is escaped.  This
    matches PostgreSQL (with ``standard_conforming_strings`` on), SQLite and
    most other engines.
    """

    @property
    def dialect_name(self) -> str:
        return "ansi"

    def quote_text(self, text: str) -> str:
        escaped = text.replace("'", "''")
        return f"'{escaped}'"
