"""Pytest fixtures for the projects tracker."""

import os

import psycopg2
import psycopg2.extensions
import pytest

from config import DbSettings
from db.connection import ConnectionProvider
from db.init_db import create_tables


# ── In-memory fakes ───────────────────────────────────────


class FakeCursor:
    """Consumes one scripted result per execute() call."""

    def __init__(self, db):
        self.db = db
        self.rowcount = -1
        self._rows = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.db.executed.append((sql, params))
        result = self.db.results.pop(0) if self.db.results else []
        if isinstance(result, Exception):
            raise result
        if isinstance(result, int):
            self.rowcount = result
            self._rows = []
        else:
            self._rows = list(result)
            self.rowcount = len(self._rows)

    def fetchone(self):
        return self._rows.pop(0) if self._rows else None

    def fetchall(self):
        rows, self._rows = self._rows, []
        return rows


class FakeConnection:
    def __init__(self, db):
        self.db = db
        self.autocommit = True
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    def cursor(self):
        return FakeCursor(self.db)

    def commit(self):
        if self.db.commit_error is not None:
            raise self.db.commit_error
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1
        if self.db.rollback_error is not None:
            raise self.db.rollback_error

    def close(self):
        self.closed = True


class FakeDatabase:
    """
    Stands in for psycopg2.connect().

    Each connect() returns a new FakeConnection; all of them share the
    scripted `results` queue. A result is a list of row tuples, an int
    rowcount, or an exception to raise from execute().
    """

    def __init__(self):
        self.results = []
        self.executed = []
        self.connections = []
        self.commit_error = None
        self.rollback_error = None
        self.connect_error = None

    def script(self, *results):
        self.results.extend(results)

    def connect(self, dsn):
        if self.connect_error is not None:
            raise self.connect_error
        conn = FakeConnection(self)
        self.connections.append(conn)
        return conn

    @property
    def last(self) -> FakeConnection:
        return self.connections[-1]


@pytest.fixture()
def fake_db(monkeypatch):
    db = FakeDatabase()
    monkeypatch.setattr("db.connection.psycopg2.connect", db.connect)
    return db


@pytest.fixture()
def fake_provider(fake_db):
    return ConnectionProvider(DbSettings())


# ── Real PostgreSQL ───────────────────────────────────────


def _settings_from_url(url: str) -> DbSettings:
    parts = psycopg2.extensions.parse_dsn(url)
    return DbSettings(
        host=parts.get("host", "localhost"),
        port=int(parts.get("port", 5432)),
        name=parts["dbname"],
        user=parts.get("user", ""),
        password=parts.get("password", ""),
    )


@pytest.fixture(scope="session")
def pg_provider():
    url = os.environ.get("TEST_DATABASE_URL")
    if not url:
        pytest.skip("TEST_DATABASE_URL is not set")
    provider = ConnectionProvider(_settings_from_url(url))
    create_tables(provider)
    return provider


@pytest.fixture()
def pg(pg_provider):
    # Start every test from empty tables.
    with pg_provider.connection() as conn:
        with conn.cursor() as cur:
            cur.execute(
                "TRUNCATE project_category, step, material, category, project "
                "RESTART IDENTITY CASCADE;"
            )
        conn.commit()
    return pg_provider
