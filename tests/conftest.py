"""Shared pytest fixtures for fluentQL unit and integration tests."""
from __future__ import annotations

from typing import Callable

import pytest

from fluentql import AnsiQuoter, BuilderOptions, MySQLQuoter, QueryBuilder


@pytest.fixture(scope="session")
def ansi() -> AnsiQuoter:
    """ANSI quoter shared across tests (stateless)."""
    return AnsiQuoter()


@pytest.fixture(scope="session")
def mysql() -> MySQLQuoter:
    return MySQLQuoter()


@pytest.fixture()
def qb(ansi: AnsiQuoter) -> Callable[..., QueryBuilder]:
    """Factory returning a fresh ANSI-quoting builder per call."""

    def _make(options: BuilderOptions | None = None) -> QueryBuilder:
        return QueryBuilder(ansi, options)

    return _make
