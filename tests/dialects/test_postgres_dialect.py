import logging

import pytest

from sqltemplate.dialects import (
    POSTGRESQL,
    LockStrength,
    LockWait,
    PostgresDialect,
    StandardIdent,
    UnsupportedIdentifierError,
)


def test_postgres_dialect_quotes_identifiers():
    dialect = PostgresDialect()
    assert dialect.ident("users") == '"users"'
    assert dialect.ident('a"b') == '"a""b"'
    assert dialect.ident("") == '""'


def test_postgres_ident_passes_other_content_through():
    assert POSTGRESQL.ident("Mixed Case ") == '"Mixed Case "'
    assert POSTGRESQL.ident("年金计划") == '"年金计划"'
    assert POSTGRESQL.ident("public.users") == '"public.users"'


@pytest.mark.parametrize("identifier", ["a\x00b", "\x00", "users\x00"])
def test_postgres_rejects_nul_byte(identifier):
    with pytest.raises(UnsupportedIdentifierError) as excinfo:
        POSTGRESQL.ident(identifier)
    assert excinfo.value.dialect == "postgresql"
    assert excinfo.value.identifier == identifier
    assert "code zero" in str(excinfo.value)


def test_postgres_rejection_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="sqltemplate.dialects.postgres")
    with pytest.raises(UnsupportedIdentifierError):
        POSTGRESQL.ident("a\x00b")
    records = [r for r in caplog.records if r.name == "sqltemplate.dialects.postgres"]
    assert records and records[0].dialect == "postgresql"


@pytest.mark.parametrize("identifier", ["", "users", 'a"b', '""', 'x""y"', "日本"])
def test_postgres_ident_matches_baseline(identifier):
    assert POSTGRESQL.ident(identifier) == StandardIdent().ident(identifier)
    assert POSTGRESQL.ident(identifier) == POSTGRESQL.ident(identifier)


def test_postgres_select_for_all_tables():
    assert POSTGRESQL.select_for() == "FOR UPDATE"
    assert POSTGRESQL.select_for(strength=LockStrength.SHARE) == "FOR SHARE"


def test_postgres_select_for_named_tables_preserves_order():
    assert POSTGRESQL.select_for("users", "orders") == 'FOR UPDATE OF "users", "orders"'
    assert POSTGRESQL.select_for("orders", "users", "orders") == (
        'FOR UPDATE OF "orders", "users", "orders"'
    )


def test_postgres_select_for_quotes_through_ident():
    assert POSTGRESQL.select_for('we"ird') == 'FOR UPDATE OF "we""ird"'
    with pytest.raises(UnsupportedIdentifierError):
        POSTGRESQL.select_for("ok", "bad\x00")


def test_postgres_select_for_strengths_and_wait_policies():
    assert POSTGRESQL.select_for(strength=LockStrength.NO_KEY_UPDATE) == "FOR NO KEY UPDATE"
    assert POSTGRESQL.select_for("jobs", strength=LockStrength.KEY_SHARE, wait=LockWait.NOWAIT) == (
        'FOR KEY SHARE OF "jobs" NOWAIT'
    )
    assert POSTGRESQL.select_for("jobs", wait=LockWait.SKIP_LOCKED) == 'FOR UPDATE OF "jobs" SKIP LOCKED'
    assert POSTGRESQL.select_for(wait="NOWAIT") == "FOR UPDATE NOWAIT"


def test_postgres_arg_placeholder():
    assert POSTGRESQL.arg_placeholder(1) == "$1"
    assert POSTGRESQL.arg_placeholder(12) == "$12"
    with pytest.raises(ValueError):
        POSTGRESQL.arg_placeholder(0)


def test_postgres_dialect_limit_clause():
    dialect = PostgresDialect()
    assert dialect.limit_clause(10, None) == "LIMIT 10"
    assert dialect.limit_clause(None, 5) == "OFFSET 5"
    assert dialect.limit_clause(10, 5) == "LIMIT 10 OFFSET 5"
    assert dialect.limit_clause(None, None) == ""


def test_postgres_dialect_is_stateless():
    dialect = PostgresDialect()
    with pytest.raises(AttributeError):
        dialect.extra = 1
    assert dialect.capabilities.supports_lock_all_tables is True
    assert dialect.capabilities is POSTGRESQL.capabilities
