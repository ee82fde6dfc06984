"""Test fixtures: sample DDL for the integration tests."""

from __future__ import annotations

from pathlib import Path

_FIXTURES_DIR = Path(__file__).parent


def load_ddl(target: str = "sqlite") -> str:
    """Return the sample DDL SQL string for the given backend.

    Args:
        target: Backend name; only ``'sqlite'`` ships with the tests.

    Returns:
        DDL string ready to execute against the target backend.
    """
    return (_FIXTURES_DIR / f"ddl_{target}.sql").read_text()
