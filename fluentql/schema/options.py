"""Pydantic model for the options a :class:`QueryBuilder` is created with.

Options are fixed for the lifetime of a builder.  The defaults reproduce the
plain ANSI-ish output described in the package documentation; override them
to pick another registered quoter or a different HAVING placeholder::

    from fluentql import BuilderOptions, QueryBuilder

    options = BuilderOptions(quoter="mysql", placeholder=":v")
    sql = (
        QueryBuilder(options=options)
        .select("name")
        .from_("users")
        .group_by("name")
        .having("COUNT(id) > :v", 2)
        .assemble()
    )
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from fluentql.schema.expressions import EQUALS


class BuilderOptions(BaseModel):
    """Per-builder configuration.

    Attributes:
        quoter: Name of the :class:`~fluentql.compile.registry.QuoterFactory`
            entry used when no quoter is passed to the builder.
        placeholder: Marker replaced by the quoted value in ``having()``
            expressions.
        default_operator: Comparison operator used by ``where()`` and
            ``join()`` when none is given.
        default_join_type: Join keyword used by ``join()`` when none is given.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    quoter: str = "ansi"
    placeholder: str = "?"
    default_operator: str = EQUALS
    default_join_type: str = "INNER"

    @field_validator("quoter", "placeholder", "default_operator", "default_join_type")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value
