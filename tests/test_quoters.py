"""Unit tests for the quoting capabilities and QuoterFactory."""

from __future__ import annotations

import pytest

from fluentql import (
    AnsiQuoter,
    BuilderOptions,
    CallableQuoter,
    MySQLQuoter,
    QueryBuilder,
    QuoterConfigError,
    QuoterFactory,
)
from fluentql.compile.base import Quoter, to_text


class TestToText:
    def test_conversions(self):
        assert to_text(None) == ""
        assert to_text(True) == "1"
        assert to_text(False) == ""
        assert to_text(10) == "10"
        assert to_text("x") == "x"


class TestAnsiQuoter:
    def test_plain(self, ansi):
        assert ansi.quote("fubar") == "'fubar'"

    def test_quotes_are_doubled(self, ansi):
        assert ansi.quote("O'Brien") == "'O''Brien'"

    def test_backslash_untouched(self, ansi):
        assert ansi.quote("a\\b") == "'a\\b'"

    def test_numbers_become_text(self, ansi):
        assert ansi.quote(10) == "'10'"

    def test_callable(self, ansi):
        assert ansi("x") == "'x'"

    def test_dialect_name(self, ansi):
        assert ansi.dialect_name == "ansi"


class TestMySQLQuoter:
    def test_quote_is_backslash_escaped(self, mysql):
        assert mysql.quote("O'Brien") == "'O\\'Brien'"

    def test_backslash_escaped(self, mysql):
        assert mysql.quote("a\\b") == "'a\\\\b'"

    def test_control_characters(self, mysql):
        assert mysql.quote("a\nb\0c\x1a") == "'a\\nb\\0c\\Z'"

    def test_dialect_name(self, mysql):
        assert mysql.dialect_name == "mysql"


class TestCallableQuoter:
    def test_wraps_function(self):
        quoter = CallableQuoter(lambda text: f"<{text}>", name="angle")
        assert quoter.quote(5) == "<5>"
        assert quoter.dialect_name == "angle"

    def test_builder_wraps_plain_callable(self):
        b = QueryBuilder(lambda text: f'"{text}"').select("*").from_("foo").where("a", "b")
        assert isinstance(b.quoter, CallableQuoter)
        assert b.assemble() == 'SELECT * FROM foo WHERE a = "b"'


class TestQuoterFactory:
    def test_builtin_targets_registered(self):
        assert {"ansi", "mysql"} <= set(QuoterFactory.registered_targets())

    def test_create(self):
        assert isinstance(QuoterFactory.create("ansi"), AnsiQuoter)
        assert isinstance(QuoterFactory.create("mysql"), MySQLQuoter)

    def test_unknown_name_raises(self):
        with pytest.raises(QuoterConfigError) as exc_info:
            QuoterFactory.create("oracle")
        assert exc_info.value.name == "oracle"
        assert "ansi" in str(exc_info.value)

    def test_register_decorator(self):
        @QuoterFactory.register("test-upper")
        class UpperQuoter(Quoter):
            @property
            def dialect_name(self) -> str:
                return "test-upper"

            def quote_text(self, text: str) -> str:
                return f"'{text.upper()}'"

        b = QueryBuilder(options=BuilderOptions(quoter="test-upper"))
        assert b.select("*").from_("t").where("a", "x").assemble() == (
            "SELECT * FROM t WHERE a = 'X'"
        )

    def test_register_rejects_non_quoter(self):
        with pytest.raises(QuoterConfigError):
            QuoterFactory.register_class("test-bad", str)
        assert "test-bad" not in QuoterFactory.registered_targets()

    def test_builder_default_quoter_is_ansi(self):
        assert isinstance(QueryBuilder().quoter, AnsiQuoter)

    def test_builder_with_unknown_quoter_name_raises(self):
        with pytest.raises(QuoterConfigError):
            QueryBuilder(options=BuilderOptions(quoter="nope"))

    def test_builder_uses_mysql_by_name(self):
        b = QueryBuilder(options=BuilderOptions(quoter="mysql"))
        sql = b.insert().from_("foo").values({"path": "C:\\tmp"}).assemble()
        assert sql == "INSERT INTO foo (path) VALUES ('C:\\\\tmp')"


class TestSQLAlchemyQuoter:
    def test_quotes_with_engine_dialect(self):
        sqlalchemy = pytest.importorskip("sqlalchemy")
        from fluentql.compile.alchemy import SQLAlchemyQuoter

        engine = sqlalchemy.create_engine("sqlite://")
        quoter = SQLAlchemyQuoter(engine)
        assert quoter.dialect_name == "sqlite"
        assert quoter.quote("O'Brien") == "'O''Brien'"
        assert quoter.quote(10) == "'10'"

    def test_accepts_dialect_directly(self):
        sqlalchemy = pytest.importorskip("sqlalchemy")
        from fluentql.compile.alchemy import SQLAlchemyQuoter

        engine = sqlalchemy.create_engine("sqlite://")
        assert SQLAlchemyQuoter(engine.dialect).dialect is engine.dialect

    def test_rejects_non_dialect(self):
        pytest.importorskip("sqlalchemy")
        from fluentql.compile.alchemy import SQLAlchemyQuoter

        with pytest.raises(QuoterConfigError):
            SQLAlchemyQuoter(object())
