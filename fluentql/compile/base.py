"""Quoting abstractions: the Quoter ABC and a callable adapter.

The builder never escapes literal values itself.  Every string it inlines
into SQL text goes through a :class:`Quoter`, which turns a raw value into a
complete SQL string literal (surrounding quotes included).

``AnsiQuoter`` and ``MySQLQuoter`` implement the escaping rules directly;
``SQLAlchemyQuoter`` delegates to a SQLAlchemy dialect; ``CallableQuoter``
adapts any ``fn(value) -> str``, such as a driver's native quoting routine.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable


def to_text(value: Any) -> str:
    """Convert a raw value to the text that gets quoted.

    ``None`` and ``False`` become the empty string and ``True`` becomes
    ``"1"``; everything else goes through ``str()``.
    """
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


class Quoter(ABC):
    """Abstract base for quoting capabilities.

    Subclasses implement :meth:`quote_text`; :meth:`quote` handles the
    conversion of non-string values so every quoter treats them alike.
    """

    def quote(self, value: Any) -> str:
        """Return ``value`` as an escaped SQL string literal.

        Args:
            value: Raw value.  Non-string values are converted with
                :func:`to_text` first.

        Returns:
            Quoted literal, e.g. ``'O''Brien'``.
        """
        return self.quote_text(to_text(value))

    @abstractmethod
    def quote_text(self, text: str) -> str:
        """Escape ``text`` and wrap it in the dialect's quote characters.

        Args:
            text: Unquoted string.

        Returns:
            Quoted literal.
        """

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical name of the quoting rules (e.g. ``'ansi'``)."""

    def __call__(self, value: Any) -> str:
        return self.quote(value)


class CallableQuoter(Quoter):
    """Adapts a plain ``fn(text) -> str`` to the :class:`Quoter` interface.

    Args:
        fn: Function returning a complete quoted literal for its argument.
        name: Name reported by :attr:`dialect_name`.
    """

    def __init__(self, fn: Callable[[str], str], name: str = "callable") -> None:
        self._fn = fn
        self._name = name

    @property
    def dialect_name(self) -> str:
        return self._name

    def quote_text(self, text: str) -> str:
        return self._fn(text)
