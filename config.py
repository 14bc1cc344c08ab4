"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "projects")
DB_USER: str = os.getenv("DB_USER", "projects")
DB_PASS: str = os.getenv("DB_PASS", "")

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class DbSettings:
    """
    Connection settings handed to the ConnectionProvider.

    Attributes:
        host: Database server host name.
        port: Database server port.
        name: Database (schema) name.
        user: Login role.
        password: Login password (may be empty for trust/peer auth).
    """
    host: str = "localhost"
    port: int = 5432
    name: str = "projects"
    user: str = "projects"
    password: str = ""

    @property
    def dsn(self) -> str:
        """libpq connection string for psycopg2.connect()."""
        parts = [
            f"host={self.host}",
            f"port={self.port}",
            f"dbname={self.name}",
            f"user={self.user}",
        ]
        if self.password:
            parts.append(f"password={self.password}")
        return " ".join(parts)

    def __str__(self) -> str:
        # Never render the password.
        return f"{self.user}@{self.host}:{self.port}/{self.name}"


def load_db_settings() -> DbSettings:
    """
    Build DbSettings from the current environment.

    Reads the environment at call time so that tests and callers
    can override values after import.
    """
    return DbSettings(
        host=os.getenv("DB_HOST", DB_HOST),
        port=int(os.getenv("DB_PORT", str(DB_PORT))),
        name=os.getenv("DB_NAME", DB_NAME),
        user=os.getenv("DB_USER", DB_USER),
        password=os.getenv("DB_PASS", DB_PASS),
    )
