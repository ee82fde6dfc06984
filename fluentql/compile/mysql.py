"""MySQL quoter."""

from __future__ import annotations

from fluentql.compile.base import Quoter

_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    "'": "\\'",
    "\0": "\\0",
    "\n": "\\n",
    "\r": "\\r",
    "\x1a": "\\Z",
}


class MySQLQuoter(Quoter):
    """Quotes values the way MySQL's ``mysql_real_escape_string`` does.

    MySQL treats the backslash as an escape character inside string
    literals (unless ``NO_BACKSLASH_ESCAPES`` is set), so backslashes must be
    escaped along with quotes and the control characters the server's parser
    would otherwise interpret.
    """

    @property
    def dialect_name(self) -> str:
        return "mysql"

    def quote_text(self, text: str) -> str:
        escaped = "".join(_ESCAPES.get(ch, ch) for ch in text)
        return f"'{escaped}'"
