"""
db/exceptions.py
----------------
Error kinds raised by the data-access layer.
The driver's own exception is always kept as ``__cause__``.
"""


class DatabaseError(Exception):
    """Base class for data-access failures."""


class DbConnectionError(DatabaseError, ConnectionError):
    """A database session could not be established (network, auth, missing schema)."""


class PersistenceError(DatabaseError):
    """A statement, commit, or row-decoding failure. Raised after rollback."""
