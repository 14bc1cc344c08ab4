"""
models/step.py
--------------
Domain model for one instruction step of a project.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Step:
    """
    Represents one instruction of a project.

    Attributes:
        step_id: Database primary key.
        project_id: Owning project.
        step_text: What to do.
        step_order: Position of the step within the project, from 1.
    """
    step_id: Optional[int] = None
    project_id: Optional[int] = None
    step_text: Optional[str] = None
    step_order: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.step_order}. {self.step_text}"
