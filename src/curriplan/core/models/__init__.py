"""
Curriplan SQLAlchemy Models
"""

from .base import Base, HierarchyNode
from .curriculum import Activity, Book, Curriculum, Grade, Lesson, Stage, Unit

__all__ = [
    "Base",
    "HierarchyNode",
    # Hierarchy
    "Curriculum",
    "Grade",
    "Book",
    "Unit",
    "Lesson",
    "Stage",
    "Activity",
]
