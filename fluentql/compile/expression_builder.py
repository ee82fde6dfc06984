"""Predicate value normalisation and predicate fragment construction.

``ValueNormalizer`` turns a raw Python value into the literal text that ends
up on the right-hand side of a WHERE condition.  ``PredicateBuilder`` uses it
to create :class:`~fluentql.schema.fragments.Predicate` fragments, and expands
``having()`` calls into :class:`~fluentql.schema.fragments.HavingPredicate`
fragments.

Both run when the builder method is called.  Stored fragments already hold
their final text, so assembling a statement does no quoting at all.
"""
from __future__ import annotations

import math
import re
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from fluentql.compile.context import AssemblyContext
from fluentql.schema.expressions import EQUALS, Combinator
from fluentql.schema.fragments import HavingPredicate, Predicate

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$", re.ASCII)


def is_numeric(value: Any) -> bool:
    """Return True for numbers and numeric strings that can be inlined unquoted.

    Booleans are not numeric here, and neither are NaN or infinite values,
    which have no SQL literal form.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, str):
        return _NUMERIC_RE.match(value) is not None
    return False


def as_list(value: Any) -> list[Any]:
    """Wrap a scalar in a list; copy a list or tuple."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


# ---------------------------------------------------------------------------
# Value normaliser
# ---------------------------------------------------------------------------


class ValueNormalizer:
    """Renders predicate values and rewrites operators for NULL comparisons.

    Args:
        ctx: Assembly context providing the quoter.
    """

    def __init__(self, ctx: AssemblyContext) -> None:
        self._ctx = ctx

    def normalize(self, value: Any, operator: str = EQUALS) -> tuple[str, str]:
        """Return the ``(operator, rendered_value)`` pair for a predicate.

        Args:
            value: Raw predicate value.
            operator: Requested comparison operator.

        Returns:
            The operator to emit (rewritten to ``IS`` / ``IS NOT`` for
            ``None``) and the literal text of the value.
        """
        if value is None:
            return ("IS" if operator == EQUALS else "IS NOT"), "NULL"
        if value is True:
            return operator, "TRUE"
        if value is False:
            return operator, "FALSE"
        if is_numeric(value):
            return operator, str(value).strip()
        return operator, self._ctx.quoter.quote(value)


# ---------------------------------------------------------------------------
# Predicate builder
# ---------------------------------------------------------------------------


class PredicateBuilder:
    """Creates WHERE and HAVING fragments from builder call arguments.

    Args:
        ctx: Assembly context (quoter + options).
        normalizer: Value normaliser for WHERE values.
    """

    def __init__(self, ctx: AssemblyContext, normalizer: ValueNormalizer) -> None:
        self._ctx = ctx
        self._normalizer = normalizer

    def where(
        self,
        column: str,
        value: Any,
        operator: str,
        additive: bool,
    ) -> Predicate:
        """Build a single WHERE fragment."""
        op, rendered = self._normalizer.normalize(value, operator)
        return Predicate(
            combinator=Combinator.from_additive(additive),
            column=column,
            operator=op,
            value=rendered,
        )

    def having(
        self,
        expression: str | Sequence[str],
        values: list[Any] | None,
        additive: bool,
    ) -> list[HavingPredicate]:
        """Build HAVING fragments for one ``having()`` call.

        Args:
            expression: One SQL boolean expression or a sequence of them.
            values: Values aligned positionally with the expressions, or
                ``None`` when no value was supplied.  Extra entries on either
                side are dropped.
            additive: ``True`` for ``AND``, ``False`` for ``OR``; applies to
                every fragment produced by this call.

        Returns:
            One fragment per expression that survives the pairing.
        """
        combinator = Combinator.from_additive(additive)
        expressions = as_list(expression)
        if values is None:
            return [
                HavingPredicate(combinator=combinator, expression=str(expr))
                for expr in expressions
            ]
        return [
            HavingPredicate(combinator=combinator, expression=self._substitute(str(expr), val))
            for expr, val in zip(expressions, values)
        ]

    def _substitute(self, expression: str, value: Any) -> str:
        quoted = self._ctx.quoter.quote(value)
        return expression.replace(self._ctx.options.placeholder, quoted)
