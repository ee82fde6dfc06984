"""Assembly context value object.

Packages the ``(quoter, options)`` pair shared by the statement builder, the
value normaliser and every clause renderer into a single object.
"""
from __future__ import annotations

from dataclasses import dataclass

from fluentql.compile.base import Quoter
from fluentql.schema.options import BuilderOptions


@dataclass(frozen=True)
class AssemblyContext:
    """Immutable context for one statement builder.

    Attributes:
        quoter: Quoting capability used for every inlined string literal.
        options: Builder options (placeholder marker, defaults).
    """

    quoter: Quoter
    options: BuilderOptions
