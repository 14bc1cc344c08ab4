"""ProjectService turns empty repository results into ProjectNotFoundError."""

from unittest.mock import MagicMock

import pytest

from models.project import Project
from services.project_service import ProjectNotFoundError, ProjectService


@pytest.fixture()
def repo():
    return MagicMock()


@pytest.fixture()
def service(repo):
    return ProjectService(repo)


def test_add_project_delegates(service, repo):
    project = Project(project_name="Deck")
    repo.insert.return_value = project

    assert service.add_project(project) is project
    repo.insert.assert_called_once_with(project)


def test_fetch_all_projects_delegates(service, repo):
    repo.fetch_all.return_value = [Project(project_id=1, project_name="Deck")]

    assert service.fetch_all_projects()[0].project_name == "Deck"


def test_fetch_project_by_id_found(service, repo):
    repo.fetch_by_id.return_value = Project(project_id=1, project_name="Deck")

    assert service.fetch_project_by_id(1).project_id == 1


def test_fetch_project_by_id_missing(service, repo):
    repo.fetch_by_id.return_value = None

    with pytest.raises(ProjectNotFoundError, match="Project with ID=9 does not exist."):
        service.fetch_project_by_id(9)


def test_modify_missing_project(service, repo):
    repo.update.return_value = False

    with pytest.raises(ProjectNotFoundError) as exc_info:
        service.modify_project_details(Project(project_id=4, project_name="Gone"))

    assert exc_info.value.project_id == 4


def test_modify_existing_project(service, repo):
    repo.update.return_value = True
    service.modify_project_details(Project(project_id=4, project_name="Deck"))
    repo.update.assert_called_once()


def test_delete_missing_project(service, repo):
    repo.delete.return_value = False

    with pytest.raises(ProjectNotFoundError):
        service.delete_project(4)


def test_delete_existing_project(service, repo):
    repo.delete.return_value = True
    service.delete_project(4)
    repo.delete.assert_called_once_with(4)
