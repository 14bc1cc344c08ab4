"""
models/project.py
-----------------
Domain model for a home-improvement project.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from models.category import Category
from models.material import Material
from models.step import Step


@dataclass
class Project:
    """
    Represents a single project and, when fully loaded, its child records.

    Attributes:
        project_id: Database primary key (None for new records).
        project_name: Short name shown in listings.
        estimated_hours: Planned effort, two decimal places.
        actual_hours: Effort spent so far, two decimal places.
        difficulty: Rating from 1 (easy) to 5 (hard). Not checked here.
        notes: Free-form notes.
        materials: Materials needed (populated only by a detail fetch).
        steps: Ordered instructions (populated only by a detail fetch).
        categories: Categories the project belongs to (detail fetch only).
    """
    project_name: Optional[str] = None
    estimated_hours: Optional[Decimal] = None
    actual_hours: Optional[Decimal] = None
    difficulty: Optional[int] = None
    notes: Optional[str] = None
    project_id: Optional[int] = None
    materials: list[Material] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)

    def __str__(self) -> str:
        lines = [
            f"   ID: {self.project_id}",
            f"   Name: {self.project_name}",
            f"   Estimated hours: {self.estimated_hours}",
            f"   Actual hours: {self.actual_hours}",
            f"   Difficulty: {self.difficulty}",
            f"   Notes: {self.notes}",
            "   Materials:",
            *(f"      {m}" for m in self.materials),
            "   Steps:",
            *(f"      {s}" for s in self.steps),
            "   Categories:",
            *(f"      {c}" for c in self.categories),
        ]
        return "\n".join(lines)
