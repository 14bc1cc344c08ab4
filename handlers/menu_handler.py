"""
handlers/menu_handler.py
------------------------
Interactive console menu for the projects tracker.
Prints the operations, reads a selection, and dispatches to ProjectService.
"""

from decimal import Decimal
from typing import Callable, Optional

from handlers.input_handler import parse_decimal, parse_int, parse_text
from models.project import Project
from services.project_service import ProjectService
from utils.logger import get_logger

logger = get_logger(__name__)

OPERATIONS = [
    "1) Add a project",
    "2) List projects",
    "3) Select a project",
    "4) Update project details",
    "5) Delete a project",
]


class ProjectMenu:
    """
    Menu-driven console session.

    Args:
        service: Business layer to call for every operation.
        read: Prompt function returning one line of user input.
        write: Output function for one line of text.
    """

    def __init__(
        self,
        service: ProjectService,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        self.service = service
        self.read = read
        self.write = write
        self.cur_project: Optional[Project] = None
        self._actions = {
            1: self.create_project,
            2: self.list_projects,
            3: self.select_project,
            4: self.update_project_details,
            5: self.delete_project,
        }

    def process_user_selections(self) -> None:
        """
        Loop until the user enters a blank selection.
        Errors from any operation are reported and the loop continues.
        """
        done = False
        while not done:
            try:
                selection = self._get_user_selection()
                if selection is None:
                    self.write("Exiting the menu.")
                    done = True
                elif selection in self._actions:
                    self._actions[selection]()
                else:
                    self.write(f"\n{selection} is not a valid selection. Try again.")
            except EOFError:
                self.write("Exiting the menu.")
                done = True
            except Exception as e:
                logger.error(f"Menu operation failed: {e}")
                self.write(f"\nError: {e} Try again.")

    # ── OPERATIONS ────────────────────────────────────────

    def create_project(self) -> None:
        """Gather the fields of a new project and save it."""
        project = Project(
            project_name=self._get_string_input("Enter the project name"),
            estimated_hours=self._get_decimal_input("Enter the estimated hours"),
            actual_hours=self._get_decimal_input("Enter the actual hours"),
            difficulty=self._get_int_input("Enter the project difficulty (1-5)"),
            notes=self._get_string_input("Enter the project notes"),
        )
        db_project = self.service.add_project(project)
        self.write(f"You have successfully created project:\n{db_project}")

    def list_projects(self) -> None:
        projects = self.service.fetch_all_projects()
        self.write("\nProjects:")
        for project in projects:
            self.write(f"   {project.project_id}: {project.project_name}")

    def select_project(self) -> None:
        self.list_projects()
        project_id = self._get_int_input("Enter a project ID to select a project")

        # Unselect first so a failed lookup leaves nothing selected.
        self.cur_project = None
        if project_id is None:
            return
        self.cur_project = self.service.fetch_project_by_id(project_id)

    def update_project_details(self) -> None:
        """
        Edit the current project. A blank answer keeps the shown value.
        """
        cur = self.cur_project
        if cur is None:
            self.write("\nPlease select a project.")
            return

        project_name = self._get_string_input(f"Enter the project name [{cur.project_name}]")
        estimated_hours = self._get_decimal_input(f"Enter the estimated hours [{cur.estimated_hours}]")
        actual_hours = self._get_decimal_input(f"Enter the actual hours [{cur.actual_hours}]")
        difficulty = self._get_int_input(f"Enter the project difficulty (1-5) [{cur.difficulty}]")
        notes = self._get_string_input(f"Enter the project notes [{cur.notes}]")

        project = Project(
            project_id=cur.project_id,
            project_name=cur.project_name if project_name is None else project_name,
            estimated_hours=cur.estimated_hours if estimated_hours is None else estimated_hours,
            actual_hours=cur.actual_hours if actual_hours is None else actual_hours,
            difficulty=cur.difficulty if difficulty is None else difficulty,
            notes=cur.notes if notes is None else notes,
        )
        self.service.modify_project_details(project)
        self.cur_project = self.service.fetch_project_by_id(cur.project_id)

    def delete_project(self) -> None:
        self.list_projects()
        project_id = self._get_int_input("Enter the ID of the project to delete")
        if project_id is None:
            return

        self.service.delete_project(project_id)
        self.write(f"Project {project_id} was deleted successfully.")

        if self.cur_project is not None and self.cur_project.project_id == project_id:
            self.cur_project = None

    # ── PROMPTS ───────────────────────────────────────────

    def _get_user_selection(self) -> Optional[int]:
        self._print_operations()
        return self._get_int_input("Enter a menu selection")

    def _print_operations(self) -> None:
        self.write("\nThese are the available selections. Press the Enter key to quit:")
        for line in OPERATIONS:
            self.write(f"   {line}")

        if self.cur_project is None:
            self.write("\nYou are not working with a project.")
        else:
            self.write(f"\nYou are working with project:\n{self.cur_project}")

    def _get_string_input(self, prompt: str) -> Optional[str]:
        return parse_text(self.read(f"{prompt}: "))

    def _get_int_input(self, prompt: str) -> Optional[int]:
        return parse_int(self.read(f"{prompt}: "))

    def _get_decimal_input(self, prompt: str) -> Optional[Decimal]:
        return parse_decimal(self.read(f"{prompt}: "))
