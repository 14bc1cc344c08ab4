"""
repositories/project_repo.py
-----------------------------
Data access layer for projects.
All SQL queries related to the `project` table and its read-only
children (`material`, `step`, `category` via `project_category`) live here.

Every public method runs in its own connection and transaction:
commit on success, rollback and PersistenceError on any failure,
connection closed on every exit path.
"""

from typing import Optional

import psycopg2

from db.connection import ConnectionProvider
from db.exceptions import PersistenceError
from models.category import Category
from models.material import Material
from models.project import Project
from models.step import Step
from utils.logger import get_logger

logger = get_logger(__name__)

_PROJECT_COLUMNS = "project_id, project_name, estimated_hours, actual_hours, difficulty, notes"


def _rollback(conn) -> None:
    """Roll back, logging instead of raising if the connection is already gone."""
    try:
        conn.rollback()
    except psycopg2.Error as e:
        logger.error(f"Rollback failed: {e}")


class ProjectRepository:
    """Repository for CRUD operations on the project table."""

    def __init__(self, provider: ConnectionProvider):
        self.provider = provider

    # ── CREATE ────────────────────────────────────────────

    def insert(self, project: Project) -> Project:
        """
        Insert a new project row.

        Args:
            project: The Project to persist. Its `project_id` must be None.

        Returns:
            The same Project with `project_id` populated. On failure the
            record is left untouched.

        Raises:
            PersistenceError: If the statement or commit fails.
        """
        if project.project_id is not None:
            raise ValueError(f"Project #{project.project_id} is already persisted.")

        sql = """
            INSERT INTO project (project_name, estimated_hours, actual_hours, difficulty, notes)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING project_id;
        """
        with self.provider.connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(sql, (
                        project.project_name, project.estimated_hours,
                        project.actual_hours, project.difficulty, project.notes,
                    ))
                    project_id = cur.fetchone()[0]
                conn.commit()
            except Exception as e:
                _rollback(conn)
                logger.error(f"Failed to add project '{project.project_name}': {e}")
                raise PersistenceError(f"Failed to add project '{project.project_name}'") from e

        project.project_id = project_id
        logger.info(f"Added project '{project.project_name}' #{project_id}")
        return project

    # ── READ ──────────────────────────────────────────────

    def fetch_all(self) -> list[Project]:
        """
        Fetch every project ordered by name.

        Only the project's own columns are loaded; materials, steps and
        categories stay empty. Use fetch_by_id() for the full record.

        Returns:
            List of Project objects, empty if there are none.
        """
        sql = f"SELECT {_PROJECT_COLUMNS} FROM project ORDER BY project_name;"
        with self.provider.connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(sql)
                    projects = [self._row_to_project(r) for r in cur.fetchall()]
                conn.commit()
                return projects
            except Exception as e:
                _rollback(conn)
                logger.error(f"Failed to fetch projects: {e}")
                raise PersistenceError("Failed to fetch projects") from e

    def fetch_by_id(self, project_id: int) -> Optional[Project]:
        """
        Fetch one project together with its materials, steps and categories.

        All four queries share one transaction, so the result is a
        consistent snapshot; a failure in any of them discards the lot.

        Args:
            project_id: Primary key.

        Returns:
            The fully loaded Project, or None if not found.
        """
        sql = f"SELECT {_PROJECT_COLUMNS} FROM project WHERE project_id = %s;"
        with self.provider.connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(sql, (project_id,))
                    row = cur.fetchone()
                    project = self._row_to_project(row) if row else None
                    if project is not None:
                        project.materials = self._fetch_materials(cur, project_id)
                        project.steps = self._fetch_steps(cur, project_id)
                        project.categories = self._fetch_categories(cur, project_id)
                conn.commit()
                return project
            except Exception as e:
                _rollback(conn)
                logger.error(f"Failed to fetch project #{project_id}: {e}")
                raise PersistenceError(f"Failed to fetch project #{project_id}") from e

    # ── UPDATE ────────────────────────────────────────────

    def update(self, project: Project) -> bool:
        """
        Overwrite a project's details.

        Every field is written as given; callers merge unchanged values
        before calling.

        Args:
            project: Project with all fields resolved (must have project_id set).

        Returns:
            True if exactly one row was updated, False otherwise.
        """
        if project.project_id is None:
            raise ValueError("Cannot update a project without a project_id.")

        sql = """
            UPDATE project
            SET project_name = %s, estimated_hours = %s, actual_hours = %s,
                difficulty = %s, notes = %s
            WHERE project_id = %s;
        """
        with self.provider.connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(sql, (
                        project.project_name, project.estimated_hours,
                        project.actual_hours, project.difficulty, project.notes,
                        project.project_id,
                    ))
                    updated = cur.rowcount == 1
                conn.commit()
            except Exception as e:
                _rollback(conn)
                logger.error(f"Failed to update project #{project.project_id}: {e}")
                raise PersistenceError(f"Failed to update project #{project.project_id}") from e

        if updated:
            logger.info(f"Updated project #{project.project_id}")
        return updated

    # ── DELETE ────────────────────────────────────────────

    def delete(self, project_id: int) -> bool:
        """
        Delete a project by ID.

        Materials, steps and category links go with it through the
        schema's ON DELETE CASCADE.

        Returns:
            True if exactly one row was deleted, False otherwise.
        """
        sql = "DELETE FROM project WHERE project_id = %s;"
        with self.provider.connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute(sql, (project_id,))
                    deleted = cur.rowcount == 1
                conn.commit()
            except Exception as e:
                _rollback(conn)
                logger.error(f"Failed to delete project #{project_id}: {e}")
                raise PersistenceError(f"Failed to delete project #{project_id}") from e

        if deleted:
            logger.info(f"Deleted project #{project_id}")
        return deleted

    # ── CHILD FETCHES ─────────────────────────────────────

    def _fetch_materials(self, cur, project_id: int) -> list[Material]:
        sql = """
            SELECT material_id, project_id, material_name, num_required, cost
            FROM material
            WHERE project_id = %s
            ORDER BY material_id;
        """
        cur.execute(sql, (project_id,))
        return [self._row_to_material(r) for r in cur.fetchall()]

    def _fetch_steps(self, cur, project_id: int) -> list[Step]:
        sql = """
            SELECT step_id, project_id, step_text, step_order
            FROM step
            WHERE project_id = %s
            ORDER BY step_order, step_id;
        """
        cur.execute(sql, (project_id,))
        return [self._row_to_step(r) for r in cur.fetchall()]

    def _fetch_categories(self, cur, project_id: int) -> list[Category]:
        sql = """
            SELECT c.category_id, c.category_name
            FROM category c
            JOIN project_category pc USING (category_id)
            WHERE pc.project_id = %s
            ORDER BY c.category_name;
        """
        cur.execute(sql, (project_id,))
        return [self._row_to_category(r) for r in cur.fetchall()]

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_project(row: tuple) -> Project:
        """Convert a row selected with _PROJECT_COLUMNS to a Project."""
        return Project(
            project_id=row[0],
            project_name=row[1],
            estimated_hours=row[2],
            actual_hours=row[3],
            difficulty=row[4],
            notes=row[5],
        )

    @staticmethod
    def _row_to_material(row: tuple) -> Material:
        return Material(
            material_id=row[0],
            project_id=row[1],
            material_name=row[2],
            num_required=row[3],
            cost=row[4],
        )

    @staticmethod
    def _row_to_step(row: tuple) -> Step:
        return Step(
            step_id=row[0],
            project_id=row[1],
            step_text=row[2],
            step_order=row[3],
        )

    @staticmethod
    def _row_to_category(row: tuple) -> Category:
        return Category(category_id=row[0], category_name=row[1])
