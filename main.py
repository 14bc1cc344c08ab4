"""
main.py
-------
Entry point for the projects tracker console application.

Responsibilities:
    - Build the database settings and connection provider.
    - Make sure the schema exists.
    - Run the interactive menu until the user quits.
"""

from config import load_db_settings
from db.connection import ConnectionProvider
from db.init_db import create_tables
from handlers.menu_handler import ProjectMenu
from repositories.project_repo import ProjectRepository
from services.project_service import ProjectService
from utils.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Initialize the database layer and run the menu."""

    # ── 1. Database setup ─────────────────────────────────
    settings = load_db_settings()
    logger.info(f"Using database {settings}")
    provider = ConnectionProvider(settings)
    create_tables(provider)

    # ── 2. Wire the layers ────────────────────────────────
    service = ProjectService(ProjectRepository(provider))

    # ── 3. Run the menu ───────────────────────────────────
    ProjectMenu(service).process_user_selections()
    logger.info("Projects tracker stopped.")


if __name__ == "__main__":
    main()
