"""
models/category.py
------------------
Domain model for a project category.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Category:
    """
    Represents a category that projects can share.

    Attributes:
        category_id: Database primary key.
        category_name: Unique display name.
    """
    category_id: Optional[int] = None
    category_name: Optional[str] = None

    def __str__(self) -> str:
        return f"#{self.category_id} {self.category_name}"
