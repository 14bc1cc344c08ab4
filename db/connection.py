"""
db/connection.py
----------------
Opens PostgreSQL connections for the data-access layer.
One connection per operation: no pooling, no reuse between calls.
"""

from contextlib import contextmanager
from typing import Iterator

import psycopg2

from config import DbSettings
from db.exceptions import DbConnectionError
from utils.logger import get_logger

logger = get_logger(__name__)


class ConnectionProvider:
    """
    Hands out fresh psycopg2 connections built from fixed settings.

    Args:
        settings: Host, port, database, and credentials to connect with.
    """

    def __init__(self, settings: DbSettings):
        self.settings = settings

    def acquire(self):
        """
        Open a new connection with autocommit disabled, so the first
        statement implicitly begins a transaction.

        Returns:
            A psycopg2 connection object. The caller must close it.

        Raises:
            DbConnectionError: If the database is unreachable or rejects the login.
        """
        try:
            conn = psycopg2.connect(self.settings.dsn)
        except psycopg2.Error as e:
            logger.error(f"Unable to get connection at {self.settings}: {e}")
            raise DbConnectionError(f"Unable to get connection at {self.settings}") from e
        conn.autocommit = False
        logger.debug(f"Connection to schema '{self.settings.name}' is successful.")
        return conn

    @contextmanager
    def connection(self) -> Iterator:
        """Yield a connection from acquire() and close it on every exit path."""
        conn = self.acquire()
        try:
            yield conn
        finally:
            conn.close()
