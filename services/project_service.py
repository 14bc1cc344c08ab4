"""
services/project_service.py
----------------------------
Business logic for managing projects.
Turns "nothing matched" results from the ProjectRepository into errors
the menu can report.
"""

from models.project import Project
from repositories.project_repo import ProjectRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class ProjectNotFoundError(LookupError):
    """No project exists with the requested ID."""

    def __init__(self, project_id: int):
        self.project_id = project_id
        super().__init__(f"Project with ID={project_id} does not exist.")


class ProjectService:
    """
    Handles all business logic related to projects.

    Every call goes straight to the repository; no state is kept
    between calls.
    """

    def __init__(self, repo: ProjectRepository):
        self.repo = repo

    def add_project(self, project: Project) -> Project:
        """Persist a new project and return it with its ID set."""
        return self.repo.insert(project)

    def fetch_all_projects(self) -> list[Project]:
        """List every project (without child records), ordered by name."""
        return self.repo.fetch_all()

    def fetch_project_by_id(self, project_id: int) -> Project:
        """
        Load one project with its materials, steps and categories.

        Raises:
            ProjectNotFoundError: If no project has this ID.
        """
        project = self.repo.fetch_by_id(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    def modify_project_details(self, project: Project) -> None:
        """
        Save a project's edited details.

        Raises:
            ProjectNotFoundError: If the project no longer exists.
        """
        if not self.repo.update(project):
            raise ProjectNotFoundError(project.project_id)

    def delete_project(self, project_id: int) -> None:
        """
        Delete a project and, through the schema, its child records.

        Raises:
            ProjectNotFoundError: If no project has this ID.
        """
        if not self.repo.delete(project_id):
            logger.warning(f"Delete requested for unknown project #{project_id}")
            raise ProjectNotFoundError(project_id)
