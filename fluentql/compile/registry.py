"""Named quoters.

``BuilderOptions.quoter`` is a plain string; this module resolves it to a
:class:`~fluentql.compile.base.Quoter` instance.  ``"ansi"`` and ``"mysql"``
are registered when :mod:`fluentql` is imported; anything else can be added
by the application::

    @QuoterFactory.register("oracle")
    class OracleQuoter(AnsiQuoter):
        dialect_name = "oracle"
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from fluentql.compile.base import Quoter
from fluentql.errors import QuoterConfigError


class QuoterFactory:
    """Class-level table of quoter names and the classes behind them.

    Entries are instantiated with no arguments, so a quoter bound to a live
    connection (``SQLAlchemyQuoter``) cannot be registered and goes straight
    to ``QueryBuilder(quoter=...)`` instead.  Registering an existing name
    replaces the previous class.
    """

    _quoters: ClassVar[dict[str, type[Quoter]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[Quoter]], type[Quoter]]:
        """Class decorator form of :meth:`register_class`."""

        def decorator(quoter_cls: type[Quoter]) -> type[Quoter]:
            cls.register_class(name, quoter_cls)
            return quoter_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, quoter_cls: type[Quoter]) -> None:
        """Make ``quoter_cls`` available as ``BuilderOptions(quoter=name)``.

        Raises:
            QuoterConfigError: ``quoter_cls`` is not a Quoter subclass.
        """
        if not (isinstance(quoter_cls, type) and issubclass(quoter_cls, Quoter)):
            raise QuoterConfigError(f"{quoter_cls!r} is not a Quoter subclass.", name=name)
        cls._quoters[name] = quoter_cls

    @classmethod
    def create(cls, name: str) -> Quoter:
        """Build a new quoter for ``name``.

        Raises:
            QuoterConfigError: Nothing is registered under ``name``.
        """
        try:
            quoter_cls = cls._quoters[name]
        except KeyError:
            known = ", ".join(cls.registered_targets())
            raise QuoterConfigError(
                f"No quoter named '{name}' (known: {known}).", name=name
            ) from None
        return quoter_cls()

    @classmethod
    def registered_targets(cls) -> list[str]:
        return sorted(cls._quoters)
