"""
models/material.py
------------------
Domain model for a material required by a project.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Material:
    """
    Represents one material line of a project.

    Attributes:
        material_id: Database primary key.
        project_id: Owning project.
        material_name: What to buy.
        num_required: How many are needed.
        cost: Price, two decimal places.
    """
    material_id: Optional[int] = None
    project_id: Optional[int] = None
    material_name: Optional[str] = None
    num_required: Optional[int] = None
    cost: Optional[Decimal] = None

    def __str__(self) -> str:
        return f"#{self.material_id} {self.material_name} x{self.num_required} @ {self.cost}"
