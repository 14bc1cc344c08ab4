"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import ConnectionProvider
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Projects: one row per home-improvement project
CREATE TABLE IF NOT EXISTS project (
    project_id      SERIAL PRIMARY KEY,
    project_name    VARCHAR(128) NOT NULL,
    estimated_hours NUMERIC(7,2),
    actual_hours    NUMERIC(7,2),
    difficulty      INT,
    notes           TEXT
);

-- Materials needed by a project
CREATE TABLE IF NOT EXISTS material (
    material_id     SERIAL PRIMARY KEY,
    project_id      INT NOT NULL REFERENCES project(project_id) ON DELETE CASCADE,
    material_name   VARCHAR(128) NOT NULL,
    num_required    INT,
    cost            NUMERIC(7,2)
);

-- Ordered instructions for a project
CREATE TABLE IF NOT EXISTS step (
    step_id         SERIAL PRIMARY KEY,
    project_id      INT NOT NULL REFERENCES project(project_id) ON DELETE CASCADE,
    step_text       TEXT NOT NULL,
    step_order      INT NOT NULL
);

-- Categories shared between projects
CREATE TABLE IF NOT EXISTS category (
    category_id     SERIAL PRIMARY KEY,
    category_name   VARCHAR(128) NOT NULL UNIQUE
);

-- Many-to-many link between projects and categories
CREATE TABLE IF NOT EXISTS project_category (
    project_id      INT NOT NULL REFERENCES project(project_id) ON DELETE CASCADE,
    category_id     INT NOT NULL REFERENCES category(category_id) ON DELETE CASCADE,
    UNIQUE (project_id, category_id)
);

CREATE INDEX IF NOT EXISTS idx_material_project ON material(project_id);
CREATE INDEX IF NOT EXISTS idx_step_project ON step(project_id, step_order);
"""


def create_tables(provider: ConnectionProvider) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).

    Args:
        provider: Source of the connection to run the DDL on.
    """
    with provider.connection() as conn:
        try:
            with conn.cursor() as cur:
                cur.execute(SCHEMA_SQL)
            conn.commit()
            logger.info("Database schema initialized successfully.")
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to initialize schema: {e}")
            raise


if __name__ == "__main__":
    from config import load_db_settings
    create_tables(ConnectionProvider(load_db_settings()))
    print("Database schema created successfully.")
