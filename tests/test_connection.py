"""ConnectionProvider and DbSettings behaviour."""

import psycopg2
import pytest

from config import DbSettings, load_db_settings
from db.connection import ConnectionProvider
from db.exceptions import DbConnectionError


def test_dsn_includes_every_setting():
    settings = DbSettings(host="db.local", port=5433, name="projects", user="alice", password="s3cret")

    assert settings.dsn == "host=db.local port=5433 dbname=projects user=alice password=s3cret"


def test_dsn_omits_empty_password():
    assert "password" not in DbSettings(password="").dsn


def test_str_never_shows_password():
    settings = DbSettings(user="alice", password="s3cret")

    assert "s3cret" not in str(settings)
    assert str(settings) == "alice@localhost:5432/projects"


def test_load_db_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("DB_HOST", "pg.example")
    monkeypatch.setenv("DB_PORT", "6543")
    monkeypatch.setenv("DB_NAME", "diy")
    monkeypatch.setenv("DB_USER", "bob")
    monkeypatch.setenv("DB_PASS", "pw")

    settings = load_db_settings()

    assert settings == DbSettings(host="pg.example", port=6543, name="diy", user="bob", password="pw")


def test_acquire_disables_autocommit(fake_db, fake_provider):
    conn = fake_provider.acquire()

    assert conn.autocommit is False
    assert conn is fake_db.last


def test_acquire_failure_wraps_driver_error(fake_db, fake_provider):
    cause = psycopg2.OperationalError('database "projects" does not exist')
    fake_db.connect_error = cause

    with pytest.raises(DbConnectionError) as exc_info:
        fake_provider.acquire()

    assert exc_info.value.__cause__ is cause
    # Still a ConnectionError for callers that only know the builtin.
    assert isinstance(exc_info.value, ConnectionError)


def test_connection_context_closes_on_error(fake_db, fake_provider):
    with pytest.raises(RuntimeError):
        with fake_provider.connection():
            raise RuntimeError("boom")

    assert fake_db.last.closed


def test_each_acquire_opens_a_new_connection(fake_db):
    provider = ConnectionProvider(DbSettings())

    first = provider.acquire()
    second = provider.acquire()

    assert first is not second
    assert len(fake_db.connections) == 2
