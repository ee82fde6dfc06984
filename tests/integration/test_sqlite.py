"""Integration tests: assemble → execute against a real SQLite in-memory DB.

Statements are quoted with the SQLAlchemy quoter bound to the same engine
that executes them, then run through ``exec_driver_sql`` so the text is sent
to SQLite untouched.
"""
from __future__ import annotations

import pytest

sqlalchemy = pytest.importorskip("sqlalchemy")

from fluentql import QueryBuilder  # noqa: E402
from fluentql.compile.alchemy import SQLAlchemyQuoter  # noqa: E402
from tests.fixtures import load_ddl  # noqa: E402


@pytest.fixture()
def conn():
    engine = sqlalchemy.create_engine("sqlite://")
    with engine.connect() as connection:
        for ddl in load_ddl("sqlite").split(";"):
            if ddl.strip():
                connection.exec_driver_sql(ddl)
        yield connection
    engine.dispose()


@pytest.fixture()
def q(conn):
    quoter = SQLAlchemyQuoter(conn)

    def _make() -> QueryBuilder:
        return QueryBuilder(quoter)

    return _make


@pytest.fixture()
def seeded(conn, q):
    for dept in ({"id": 1, "name": "Engineering"}, {"id": 2, "name": "Sales"}):
        conn.exec_driver_sql(q().insert().from_("departments").values(dept).assemble())
    employees = [
        {"id": 1, "department_id": 1, "name": "Ada", "active": 1, "salary": 120},
        {"id": 2, "department_id": 1, "name": "O'Brien", "active": 1, "salary": 90},
        {"id": 3, "department_id": 2, "name": "Grace", "active": 0, "salary": 100},
    ]
    for emp in employees:
        conn.exec_driver_sql(q().insert().from_("employees").values(emp).assemble())
    conn.exec_driver_sql(
        q().update().from_("employees").values({"nickname": "Gigi"}).where("id", 3).assemble()
    )
    return conn


def _rows(conn, builder: QueryBuilder) -> list[tuple]:
    return [tuple(r) for r in conn.exec_driver_sql(builder.assemble()).all()]


def test_insert_round_trips_quoted_values(seeded, q):
    rows = _rows(seeded, q().select("name").from_("employees").where("name", "O'Brien"))
    assert rows == [("O'Brien",)]


def test_null_and_not_null_predicates(seeded, q):
    is_null = q().select("id").from_("employees").where("nickname", None).order_by("id")
    assert _rows(seeded, is_null) == [(1,), (2,)]

    not_null = q().select("id").from_("employees").where("nickname", None, "<>")
    assert _rows(seeded, not_null) == [(3,)]


def test_boolean_and_numeric_predicates(seeded, q):
    b = (
        q()
        .select("id")
        .from_("employees")
        .where("active", True)
        .where("salary", 100, ">")
        .order_by("id")
    )
    assert _rows(seeded, b) == [(1,)]


def test_or_predicate(seeded, q):
    b = q().select("id").from_("employees").where("id", 1).or_where("id", 3).order_by("id")
    assert _rows(seeded, b) == [(1,), (3,)]


def test_join_group_by_having(seeded, q):
    b = (
        q()
        .select(["departments.name", "COUNT(employees.id)"])
        .from_("employees")
        .join("departments", ["id", "department_id"])
        .group_by("departments.name")
        .having("COUNT(employees.id) > 1")
        .order_by("departments.name")
    )
    assert _rows(seeded, b) == [("Engineering", 2)]


def test_having_with_placeholder(seeded, q):
    b = (
        q()
        .select("departments.name")
        .from_("employees")
        .join("departments", ["id", "department_id"])
        .group_by("departments.name")
        .having("departments.name != ?", "Sales")
    )
    assert _rows(seeded, b) == [("Engineering",)]


def test_order_limit_offset(seeded, q):
    b = q().select("name").from_("employees").order_by("salary", "DESC").limit(1).offset(1)
    assert _rows(seeded, b) == [("Grace",)]


def test_update_and_delete(seeded, q):
    seeded.exec_driver_sql(
        q().update().from_("employees").values({"salary": 95}).where("id", 2).assemble()
    )
    assert _rows(seeded, q().select("salary").from_("employees").where("id", 2)) == [(95,)]

    seeded.exec_driver_sql(q().delete().from_("employees").where("active", False).assemble())
    assert _rows(seeded, q().select("id").from_("employees").order_by("id")) == [(1,), (2,)]
