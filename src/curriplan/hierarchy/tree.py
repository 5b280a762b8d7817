"""
Tree Assembler

Rebuilds the nested curriculum document from the seven flat tables.

Rows are grouped by parent id once per level, keeping each table's order
(creation time ascending), then the tree is walked from the curriculums
down. Rows whose parent is missing are never reached and so never appear.
This module does no I/O.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from typing import Any, NamedTuple

from curriplan.core.schemas import (
    ActivityNodeSchema,
    BookNodeSchema,
    CurriculumNodeSchema,
    GradeNodeSchema,
    LessonNodeSchema,
    StageNodeSchema,
    UnitNodeSchema,
)

from .objectives import decode_objectives


class TreeRows(NamedTuple):
    """Flat record sets, one per level, each sorted by creation time."""

    curriculums: Sequence[Any]
    grades: Sequence[Any]
    books: Sequence[Any]
    units: Sequence[Any]
    lessons: Sequence[Any]
    stages: Sequence[Any]
    activities: Sequence[Any]


def group_by_parent(rows: Sequence[Any], parent_column: str) -> dict[Any, list[Any]]:
    """Bucket rows by their parent id, preserving relative order."""
    groups: dict[Any, list[Any]] = defaultdict(list)
    for row in rows:
        groups[getattr(row, parent_column)].append(row)
    return groups


def assemble_tree(rows: TreeRows) -> list[CurriculumNodeSchema]:
    """Compose the flat record sets into nested curriculum documents."""
    grades_by_curriculum = group_by_parent(rows.grades, "curriculum_id")
    books_by_grade = group_by_parent(rows.books, "grade_id")
    units_by_book = group_by_parent(rows.units, "book_id")
    lessons_by_unit = group_by_parent(rows.lessons, "unit_id")
    stages_by_lesson = group_by_parent(rows.stages, "lesson_id")
    activities_by_stage = group_by_parent(rows.activities, "stage_id")

    def activity_node(row: Any) -> ActivityNodeSchema:
        return ActivityNodeSchema(
            id=row.id,
            name=row.name,
            type=row.type,
            learning_objectives=decode_objectives(row.learning_objectives),
            duration=row.duration,
            standard_codes=[],
        )

    def stage_node(row: Any) -> StageNodeSchema:
        return StageNodeSchema(
            id=row.id,
            name=row.name,
            learning_objectives=decode_objectives(row.learning_objectives),
            duration=row.duration,
            activities=[activity_node(child) for child in activities_by_stage.get(row.id, [])],
        )

    def lesson_node(row: Any) -> LessonNodeSchema:
        return LessonNodeSchema(
            id=row.id,
            name=row.name,
            learning_objectives=decode_objectives(row.learning_objectives),
            duration=row.duration,
            standard_codes=[],
            stages=[stage_node(child) for child in stages_by_lesson.get(row.id, [])],
        )

    def unit_node(row: Any) -> UnitNodeSchema:
        return UnitNodeSchema(
            id=row.id,
            name=row.name,
            learning_objectives=decode_objectives(row.learning_objectives),
            total_time=row.total_time,
            lessons=[lesson_node(child) for child in lessons_by_unit.get(row.id, [])],
        )

    def book_node(row: Any) -> BookNodeSchema:
        return BookNodeSchema(
            id=row.id,
            name=row.name,
            learning_objectives=decode_objectives(row.learning_objectives),
            duration=row.duration,
            units=[unit_node(child) for child in units_by_book.get(row.id, [])],
        )

    def grade_node(row: Any) -> GradeNodeSchema:
        return GradeNodeSchema(
            id=row.id,
            name=row.name,
            learning_objectives=decode_objectives(row.learning_objectives),
            duration=row.duration,
            books=[book_node(child) for child in books_by_grade.get(row.id, [])],
        )

    return [
        CurriculumNodeSchema(
            id=row.id,
            name=row.name,
            description=row.description,
            learning_objectives=decode_objectives(row.learning_objectives),
            duration=row.duration,
            standards=[],
            grades=[grade_node(child) for child in grades_by_curriculum.get(row.id, [])],
        )
        for row in rows.curriculums
    ]
