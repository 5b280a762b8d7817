"""
Curriculum Models

The seven-level curriculum hierarchy:
Curriculum → Grade → Book → Unit → Lesson → Stage → Activity

Parent/child links are plain foreign key columns; nesting is rebuilt at
read time by the tree assembler.
"""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import HierarchyNode


def parent_key(table: str) -> Mapped[UUID]:
    return mapped_column(ForeignKey(f"{table}.id", ondelete="CASCADE"), nullable=False, index=True)


class Curriculum(HierarchyNode):
    """Root of the hierarchy (e.g., 'ISTE Computer Science')."""

    __tablename__ = "curriculums"

    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    duration: Mapped[str | None] = mapped_column(String(100), nullable=True)


class Grade(HierarchyNode):
    __tablename__ = "grades"

    curriculum_id: Mapped[UUID] = parent_key("curriculums")
    duration: Mapped[str | None] = mapped_column(String(100), nullable=True)


class Book(HierarchyNode):
    __tablename__ = "books"

    grade_id: Mapped[UUID] = parent_key("grades")
    duration: Mapped[str | None] = mapped_column(String(100), nullable=True)


class Unit(HierarchyNode):
    """Unit of a book. Its time extent is called total time, not duration."""

    __tablename__ = "units"

    book_id: Mapped[UUID] = parent_key("books")
    total_time: Mapped[str | None] = mapped_column(String(100), nullable=True)


class Lesson(HierarchyNode):
    __tablename__ = "lessons"

    unit_id: Mapped[UUID] = parent_key("units")
    duration: Mapped[str | None] = mapped_column(String(100), nullable=True)


class Stage(HierarchyNode):
    """Stage of a lesson (e.g., 'Warm-up', 'Practice')."""

    __tablename__ = "stages"

    lesson_id: Mapped[UUID] = parent_key("lessons")
    duration: Mapped[str | None] = mapped_column(String(100), nullable=True)


class Activity(HierarchyNode):
    """Leaf of the hierarchy; carries a free-text activity type tag."""

    __tablename__ = "activities"

    stage_id: Mapped[UUID] = parent_key("stages")
    type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    duration: Mapped[str | None] = mapped_column(String(100), nullable=True)
